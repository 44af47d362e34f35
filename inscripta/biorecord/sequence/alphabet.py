from enum import Enum

from inscripta.biorecord.exc import SequenceContentError


class Alphabet(Enum):
    NT_STRICT = "ACGT"
    NT_EXTENDED = "ATUCGNWSMKRYBDHV"
    NT_STRICT_GAPPED = "ACGT-"
    NT_EXTENDED_GAPPED = "ATUCGNWSMKRYBDHV-"
    AA = "GALMFWKQESPVICYHRNDTBZXUO*-"
    GENERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZ*-"

    def is_nucleotide_alphabet(self) -> bool:
        if self in [
            Alphabet.NT_STRICT,
            Alphabet.NT_EXTENDED,
            Alphabet.NT_STRICT_GAPPED,
            Alphabet.NT_EXTENDED_GAPPED,
        ]:
            return True
        if self in [Alphabet.AA, Alphabet.GENERIC]:
            return False
        raise NotImplementedError("Not implemented for alphabet {}".format(self))

    def is_protein_alphabet(self) -> bool:
        return self == Alphabet.AA

    @staticmethod
    def from_moltype(moltype: str) -> "Alphabet":
        """The alphabet a GBSeq record declares through its molecule type. ``AA`` records are protein, everything
        else (DNA, RNA, mRNA, cRNA, ...) is nucleotide."""
        if moltype and moltype.upper() == "AA":
            return Alphabet.AA
        return Alphabet.NT_EXTENDED_GAPPED


_NT_STRICT_COMPLEMENT = {"A": "T", "C": "G", "G": "C", "T": "A"}

_NT_EXTENDED_COMPLEMENT = {
    "A": "T",
    "T": "A",
    "U": "A",
    "G": "C",
    "C": "G",
    "Y": "R",
    "R": "Y",
    "S": "S",
    "W": "W",
    "K": "M",
    "M": "K",
    "B": "V",
    "D": "H",
    "H": "D",
    "V": "B",
    "N": "N",
}


def _with_lowercase(mapping):
    return {**mapping, **{k.lower(): v.lower() for k, v in mapping.items()}}


ALPHABET_TO_NUCLEOTIDE_COMPLEMENT = {
    Alphabet.NT_STRICT: _with_lowercase(_NT_STRICT_COMPLEMENT),
    Alphabet.NT_EXTENDED: _with_lowercase(_NT_EXTENDED_COMPLEMENT),
    Alphabet.NT_STRICT_GAPPED: {**_with_lowercase(_NT_STRICT_COMPLEMENT), "-": "-"},
    Alphabet.NT_EXTENDED_GAPPED: {**_with_lowercase(_NT_EXTENDED_COMPLEMENT), "-": "-"},
}


def reverse_complement(letters: str, alphabet: Alphabet) -> str:
    """Returns the reverse complement of ``letters``.

    Raises:
        SequenceContentError: If the alphabet is not a nucleotide alphabet, or a letter has no complement in it.
    """
    if not alphabet.is_nucleotide_alphabet():
        raise SequenceContentError("Cannot reverse complement sequence with alphabet {}".format(alphabet.name))
    rc_map = ALPHABET_TO_NUCLEOTIDE_COMPLEMENT[alphabet]
    try:
        return "".join([rc_map[c] for c in letters[::-1]])
    except KeyError as e:
        raise SequenceContentError("Character {} not found for alphabet {}".format(str(e), alphabet.name)) from e
