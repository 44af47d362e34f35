"""
Read FASTA into :class:`~biorecord.record.fasta.FastaSequence` records. Parsing is done by BioPython.
"""
import logging
from typing import Iterator

from Bio import SeqIO

from inscripta.biorecord.io.reader import RecordReader
from inscripta.biorecord.record.fasta import FastaSequence
from inscripta.biorecord.sequence.alphabet import Alphabet

logger = logging.getLogger(__name__)


class FastaReader(RecordReader[FastaSequence]):
    """Reader of FASTA. Letters are validated against the extended gapped nucleotide alphabet unless an alphabet
    is given."""

    def _iterate(self) -> Iterator[FastaSequence]:
        alphabet = self.alphabet if self.alphabet is not None else Alphabet.NT_EXTENDED_GAPPED
        try:
            for rec in SeqIO.parse(self.handle, format="fasta"):
                logger.debug(f"Read FASTA record {rec.id}")
                yield FastaSequence.from_seqrecord(rec, alphabet=alphabet, cleaner=self.cleaner)
        finally:
            self._close_handle()
