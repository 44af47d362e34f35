"""
Base class for the record kinds. Every kind is a view over exactly one node of the parsed document; nothing is copied
out of the tree, so constructing a view is cheap and two views of equal content compare equal.
"""
from typing import Optional, List
from xml.etree.ElementTree import Element

from inscripta.biorecord.exc import RecordFormatError
from inscripta.biorecord.util.node import text_at, texts_at, children_at, node_digest


class NodeEntity:
    """A read-only view over one document node."""

    def __init__(self, node: Element):
        self.node = node

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return node_digest(self.node) == node_digest(other.node)

    def __hash__(self):
        return hash((type(self).__name__, node_digest(self.node)))

    def __repr__(self):
        return "<{}: {}>".format(type(self).__name__, self.node.tag)

    def _text(self, *tags: str) -> Optional[str]:
        return text_at(self.node, *tags)

    def _texts(self, *tags: str) -> List[str]:
        return texts_at(self.node, *tags)

    def _children(self, *tags: str) -> List[Element]:
        return children_at(self.node, *tags)

    def _int(self, tag: str) -> Optional[int]:
        """Integer value of a child element, or None if the element is absent.

        Raises:
            RecordFormatError: If the element is present but is not an integer.
        """
        text = self._text(tag)
        if text is None:
            return None
        try:
            return int(text.strip())
        except ValueError as e:
            raise RecordFormatError("{} is not an integer: {}".format(tag, repr(text)), field=tag) from e
