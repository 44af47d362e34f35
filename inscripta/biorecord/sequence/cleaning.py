"""
Cleaning and validation of raw sequence letters. Records carry their letters as free text (line breaks, spaces and
mixed case are all common); :func:`clean_sequence` normalizes the text and checks it against an
:class:`~biorecord.sequence.alphabet.Alphabet`.
"""
from typing import Callable

from inscripta.biorecord.exc import SequenceContentError
from inscripta.biorecord.sequence.alphabet import Alphabet

# signature of the cleaning step applied to each record as it is read
Cleaner = Callable[[str, Alphabet], str]


def clean_sequence(letters: str, alphabet: Alphabet) -> str:
    """Strip whitespace and upper-case ``letters``, then validate them against ``alphabet``.

    Args:
        letters: Raw sequence text.
        alphabet: Alphabet the letters must belong to.

    Returns:
        The cleaned letters.

    Raises:
        SequenceContentError: If any letter is not a member of ``alphabet``.
    """
    cleaned = "".join(letters.split()).upper()
    invalid = set(cleaned) - set(alphabet.value)
    if invalid:
        raise SequenceContentError(
            "Invalid sequence for alphabet {}: illegal symbols {}".format(alphabet.name, "".join(sorted(invalid)))
        )
    return cleaned
