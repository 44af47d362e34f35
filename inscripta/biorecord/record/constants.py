"""
GBSeq constants. Records the qualifier and feature names that carry special meaning as enumerations.
"""
from enum import Enum

from inscripta.biorecord.util.enum import HasMemberMixin


class MetadataFeatures(str, HasMemberMixin):
    """Feature keys that describe the record as a whole."""

    SOURCE = "source"


class KnownQualifiers(str, Enum):
    """GBSeq qualifiers that have special meaning"""

    DBXREF = "db_xref"
    LOCUS_TAG = "locus_tag"
    PRODUCT = "product"
    NOTE = "note"
    CALCULATED_MOL_WT = "calculated_mol_wt"
    TRANSL_TABLE = "transl_table"
    CODON_START = "codon_start"
    TRANSLATION = "translation"


# qualifiers whose name contains this marker are reported as evidence
EVIDENCE_MARKER = "evidence"

# GBInterval_iscomp carries its flag in this attribute
COMPLEMENT_ATTRIBUTE = "value"

GBSEQ_DATE_FORMAT = "%d-%b-%Y"
