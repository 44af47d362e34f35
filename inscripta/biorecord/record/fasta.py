from typing import Optional

from Bio.SeqRecord import SeqRecord

from inscripta.biorecord.capabilities import HasIdentity, HasDescription, HasSequenceData
from inscripta.biorecord.sequence.alphabet import Alphabet
from inscripta.biorecord.sequence.cleaning import clean_sequence, Cleaner


class FastaSequence(HasIdentity, HasDescription, HasSequenceData):
    """A plain sequence record: an identifier, a description line and letters. Produced when records are fetched as
    FASTA rather than as structured documents."""

    def __init__(self, id: str, description: Optional[str], letters: str, alphabet: Alphabet):
        self.id = id
        self._description = description
        self._letters = letters
        self._alphabet = alphabet

    def __eq__(self, other):
        if type(other) is not FastaSequence:
            return False
        return (self.id, self._description, self._letters, self._alphabet) == (
            other.id,
            other._description,
            other._letters,
            other._alphabet,
        )

    def __hash__(self):
        return hash((self.id, self._description, self._letters, self._alphabet))

    def __len__(self):
        return len(self._letters)

    def __str__(self):
        return self._letters

    def __repr__(self):
        return "<{}: {}>".format(type(self).__name__, self.id)

    @staticmethod
    def from_seqrecord(
        record: SeqRecord, alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED, cleaner: Cleaner = clean_sequence
    ) -> "FastaSequence":
        """Convert a BioPython ``SeqRecord``. The description line loses its leading identifier, as the id is kept
        separately."""
        description = record.description
        if description.startswith(record.id):
            description = description[len(record.id) :].strip()
        return FastaSequence(record.id, description or None, cleaner(str(record.seq), alphabet), alphabet)

    @property
    def accession(self) -> str:
        return self.id

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def is_protein(self) -> bool:
        return self._alphabet.is_protein_alphabet()
