"""
Read-only accessors over parsed document nodes. Every record kind reads the underlying
:class:`xml.etree.ElementTree.Element` through these functions only.

A tag path is given as positional tag names, each one step deeper in the tree. The singular accessors return the
first match in document order; the list accessors preserve document order. An empty tag path refers to the node
itself. Nothing here raises for a missing match; absence is reported as ``None`` or an empty list.
"""
from copy import copy
from typing import List, Optional
from xml.etree.ElementTree import Element, tostring


def _path(tags) -> str:
    return "/".join(tags) if tags else "."


def element_text(node: Element) -> str:
    """All text contained in ``node``, including the text of its descendants."""
    return "".join(node.itertext())


def first_at(node: Element, *tags: str) -> Optional[Element]:
    return node.find(_path(tags))


def text_at(node: Element, *tags: str) -> Optional[str]:
    match = first_at(node, *tags)
    if match is None:
        return None
    return element_text(match)


def texts_at(node: Element, *tags: str) -> List[str]:
    return [element_text(x) for x in node.iterfind(_path(tags))]


def attr_at(node: Element, *tags: str, attr: str) -> Optional[str]:
    match = first_at(node, *tags)
    if match is None:
        return None
    return match.get(attr)


def children_at(node: Element, *tags: str) -> List[Element]:
    return list(node.iterfind(_path(tags)))


def node_digest(node: Element) -> str:
    """Serialized content of a node, used for content based equality of the views that wrap it.

    The tail text belongs to the enclosing element and is not part of the digest.
    """
    detached = copy(node)
    detached.tail = None
    return tostring(detached, encoding="unicode")
