"""
Record kinds. Each kind is a view over a node of a parsed GBSeq document and answers the capability interfaces
of :mod:`biorecord.capabilities` it supports.

Intervals of a feature are resolved into :class:`ResolvedInterval` objects carrying their signed reading frame; see
:mod:`biorecord.record.frame`.
"""

from inscripta.biorecord.record.interval import GenBankInterval, ResolvedInterval  # noqa: F401
from inscripta.biorecord.record.frame import (  # noqa: F401
    resolve_intervals,
    render_interval_sequence,
    render_feature_sequence,
)
from inscripta.biorecord.record.feature import (  # noqa: F401
    GenBankFeature,
    GenBankQualifier,
    GenBankDatabaseReference,
)
from inscripta.biorecord.record.citation import GenBankCitation  # noqa: F401
from inscripta.biorecord.record.taxonomy import GenBankTaxonomyReference  # noqa: F401
from inscripta.biorecord.record.sequence import GenBankSequence  # noqa: F401
from inscripta.biorecord.record.fasta import FastaSequence  # noqa: F401
