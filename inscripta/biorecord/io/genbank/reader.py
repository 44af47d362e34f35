"""
Read GBSeq XML documents (``GBSet`` of ``GBSeq`` records, as produced by NCBI efetch with ``rettype=gb`` and
``retmode=xml``) into :class:`~biorecord.record.sequence.GenBankSequence` records.

The document is parsed incrementally. Each record is built, and its letters cleaned, only when the record is
yielded, so reading the first records of a large download does not parse the rest of it. Records
already yielded are detached from the document, so they are only kept alive by the caller.
"""
import logging
from typing import Iterator
from xml.etree.ElementTree import iterparse, ParseError

from inscripta.biorecord.exc import RecordFormatError
from inscripta.biorecord.io.genbank.constants import RECORD_TAG
from inscripta.biorecord.io.reader import RecordReader
from inscripta.biorecord.record.sequence import GenBankSequence

logger = logging.getLogger(__name__)

# records are the children of the document root; a document may also be a single bare record
_MAX_RECORD_DEPTH = 2


class GenBankReader(RecordReader[GenBankSequence]):
    """Reader of GBSeq XML.

    When no alphabet is given, each record is validated against the alphabet its molecule type declares.

    Raises:
        RecordFormatError: While iterating, if the document is not well formed XML.
        SequenceContentError: While iterating, if the letters of a record are not valid for its alphabet.
    """

    def _iterate(self) -> Iterator[GenBankSequence]:
        depth = 0
        root = None
        try:
            for event, element in iterparse(self.handle, events=("start", "end")):
                if event == "start":
                    if root is None:
                        root = element
                    depth += 1
                    continue
                element_depth = depth
                depth -= 1
                if element.tag != RECORD_TAG or element_depth > _MAX_RECORD_DEPTH:
                    continue
                record = GenBankSequence.from_node(element, alphabet=self.alphabet, cleaner=self.cleaner)
                logger.debug(f"Read record {record.accession} with {len(record)} letters")
                yield record
                # the root keeps no reference to records already yielded
                if element is not root:
                    root.remove(element)
        except ParseError as e:
            raise RecordFormatError(f"Malformed GBSeq document: {e}") from e
        finally:
            self._close_handle()
