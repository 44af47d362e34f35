"""
Features, their qualifiers and the database references qualifiers can carry.
"""
from typing import List, Optional, Dict, Any
from xml.etree.ElementTree import Element

from methodtools import lru_cache

from inscripta.biorecord.capabilities import (
    HasIdentity,
    HasIntervals,
    HasDatabaseReferences,
    HasDatabaseReferenceInfo,
    HasGeneInfo,
    HasProteinInfo,
    HasEvidence,
    HasNotes,
    HasTranslationInfo,
    HasNameValue,
)
from inscripta.biorecord.record.constants import KnownQualifiers, EVIDENCE_MARKER
from inscripta.biorecord.record.entity import NodeEntity
from inscripta.biorecord.record.frame import resolve_intervals, render_feature_sequence
from inscripta.biorecord.record.interval import GenBankInterval, ResolvedInterval
from inscripta.biorecord.util.node import children_at


class GenBankQualifier(NodeEntity, HasNameValue, HasNotes):
    """A ``/name="value"`` annotation on a feature. Several qualifiers of a feature may share a name. Flag
    qualifiers such as ``/pseudo`` have no value."""

    def __repr__(self):
        return "<{}: {}={}>".format(type(self).__name__, self.type, self.value)

    @property
    def type(self) -> Optional[str]:
        return self._text("GBQualifier_name")

    @property
    def value(self) -> Optional[str]:
        return self._text("GBQualifier_value")

    @property
    def notes(self) -> List[str]:
        if self.type == KnownQualifiers.NOTE.value and self.value is not None:
            return [self.value]
        return []

    @property
    def is_database_reference(self) -> bool:
        return self.type == KnownQualifiers.DBXREF.value

    def to_dict(self) -> Dict[str, Any]:
        return dict(name=self.type, value=self.value)


class GenBankDatabaseReference(NodeEntity, HasDatabaseReferenceInfo):
    """A ``db_xref`` qualifier, read as ``database:id``. The value is split on its first colon only, so ids that
    contain colons are kept whole. A value without a colon has no object id."""

    def __repr__(self):
        return "<{}: {}:{}>".format(type(self).__name__, self.database_name, self.object_id)

    @staticmethod
    def from_qualifier(qualifier: GenBankQualifier) -> "GenBankDatabaseReference":
        return GenBankDatabaseReference(qualifier.node)

    def _parts(self) -> List[str]:
        value = self._text("GBQualifier_value")
        if value is None:
            return []
        return value.split(":", 1)

    @property
    def database_name(self) -> Optional[str]:
        parts = self._parts()
        return parts[0] if parts else None

    @property
    def object_id(self) -> Optional[str]:
        parts = self._parts()
        return parts[1] if len(parts) == 2 else None

    def to_dict(self) -> Dict[str, Any]:
        return dict(database_name=self.database_name, object_id=self.object_id)


class GenBankFeature(
    NodeEntity,
    HasIdentity,
    HasIntervals,
    HasDatabaseReferences,
    HasGeneInfo,
    HasProteinInfo,
    HasEvidence,
    HasNotes,
    HasTranslationInfo,
    HasNameValue,
):
    """An annotated region of a record, such as a gene or a coding region, built from one or more intervals.

    A feature is a view into its record's document and must not be used after the reader that produced the record
    is closed.
    """

    def __repr__(self):
        return "<{}: {} {}>".format(type(self).__name__, self.type, self.location)

    @property
    def type(self) -> Optional[str]:
        """The feature key, such as ``CDS``."""
        return self._text("GBFeature_key")

    @property
    def location(self) -> Optional[str]:
        """The location string, such as ``join(1..10,20..30)``."""
        return self._text("GBFeature_location")

    @property
    def operator(self) -> Optional[str]:
        return self._text("GBFeature_operator")

    @property
    def qualifiers(self) -> List[GenBankQualifier]:
        return [GenBankQualifier(x) for x in self._children("GBFeature_quals", "GBQualifier")]

    def filter_qualifiers(self, name: str) -> List[GenBankQualifier]:
        return [q for q in self.qualifiers if q.type == name]

    def qualifier_values(self, name: str) -> List[str]:
        """Values of every qualifier with this name, in document order. Flag qualifiers are skipped."""
        return [q.value for q in self.filter_qualifiers(name) if q.value is not None]

    @property
    def raw_intervals(self) -> List[GenBankInterval]:
        """Intervals in document order, without frame information."""
        return [GenBankInterval(x) for x in self._children("GBFeature_intervals", "GBInterval")]

    @lru_cache(maxsize=1)
    @property
    def intervals(self) -> List[ResolvedInterval]:
        """Intervals in document order, each annotated with its signed reading frame."""
        return resolve_intervals(self)

    @property
    def accessions(self) -> List[str]:
        return [i.accession for i in self.raw_intervals if i.accession is not None]

    @property
    def database_references(self) -> List[GenBankDatabaseReference]:
        return [
            GenBankDatabaseReference.from_qualifier(q) for q in self.filter_qualifiers(KnownQualifiers.DBXREF.value)
        ]

    @property
    def locus_tags(self) -> List[str]:
        return self.qualifier_values(KnownQualifiers.LOCUS_TAG.value)

    @property
    def products(self) -> List[str]:
        return self.qualifier_values(KnownQualifiers.PRODUCT.value)

    @property
    def calculated_mol_wt(self) -> List[str]:
        return self.qualifier_values(KnownQualifiers.CALCULATED_MOL_WT.value)

    @property
    def evidence(self) -> List[str]:
        return ["{}:{}".format(q.type, q.value) for q in self.qualifiers if q.type and EVIDENCE_MARKER in q.type]

    @property
    def notes(self) -> List[str]:
        return self.qualifier_values(KnownQualifiers.NOTE.value)

    @property
    def translation_tables(self) -> List[str]:
        return self.qualifier_values(KnownQualifiers.TRANSL_TABLE.value)

    @property
    def codon_starts(self) -> List[str]:
        return self.qualifier_values(KnownQualifiers.CODON_START.value)

    @property
    def translations(self) -> List[str]:
        return self.qualifier_values(KnownQualifiers.TRANSLATION.value)

    def sequence(self, parent) -> str:
        """Letters of this feature on ``parent``; see :func:`~biorecord.record.frame.render_feature_sequence`."""
        return render_feature_sequence(self, parent)

    def to_dict(self) -> Dict[str, Any]:
        return dict(
            key=self.type,
            location=self.location,
            operator=self.operator,
            qualifiers=[q.to_dict() for q in self.qualifiers],
            intervals=[i.to_dict() for i in self.intervals],
        )


def features_of(record_node: Element) -> List[GenBankFeature]:
    """Features of a ``GBSeq`` node, in document order."""
    return [GenBankFeature(x) for x in children_at(record_node, "GBSeq_feature-table", "GBFeature")]
