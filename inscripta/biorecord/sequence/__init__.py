"""
Sequence alphabets, reverse complementation and the cleaning step that validates raw record letters.
"""

from inscripta.biorecord.sequence.alphabet import Alphabet, reverse_complement  # noqa: F401
from inscripta.biorecord.sequence.cleaning import clean_sequence, Cleaner  # noqa: F401
