"""
Capability interfaces shared by the record kinds.

Each interface is a narrow mixin with a default implementation that answers ``None`` or an empty collection. A record
kind mixes in the interfaces it can answer and overrides only what it supports, so generic code can query any kind
through the interface (``isinstance(obj, HasDatabaseReferences)``) without knowing the concrete class, and treats an
empty answer as "not present" rather than as an error.
"""
from abc import ABC
from datetime import date
from typing import List, Optional, Dict, Iterable, TypeVar

Feature = TypeVar("Feature")
Interval = TypeVar("Interval")
Citation = TypeVar("Citation")
DatabaseReference = TypeVar("DatabaseReference")
TaxonomyReference = TypeVar("TaxonomyReference")


class HasIdentity(ABC):
    """Accessions, version and dates."""

    @property
    def accession(self) -> Optional[str]:
        return None

    @property
    def accessions(self) -> List[str]:
        return []

    @property
    def version(self) -> Optional[int]:
        return None

    @property
    def creation_date(self) -> Optional[date]:
        return None

    @property
    def update_date(self) -> Optional[date]:
        return None


class HasDescription(ABC):
    @property
    def description(self) -> Optional[str]:
        return None


class HasSequenceData(ABC):
    """Sequence letters and the metadata describing them."""

    @property
    def letters(self) -> Optional[str]:
        return None

    @property
    def alphabet(self):
        return None

    @property
    def is_protein(self) -> bool:
        return False

    @property
    def moltype(self) -> Optional[str]:
        return None

    @property
    def keywords(self) -> List[str]:
        return []


class HasNameValue(ABC):
    """A typed value. Features report their key as their type; qualifiers report their name and value."""

    @property
    def type(self) -> Optional[str]:
        return None

    @property
    def value(self) -> Optional[str]:
        return None


class HasFeatures(ABC):
    @property
    def features(self) -> List[Feature]:
        return []

    def filter_features(self, feature_type: str) -> List[Feature]:
        """Features with the given key, in document order."""
        return [f for f in self.features if f.type == feature_type]


class HasIntervals(ABC):
    @property
    def intervals(self) -> List[Interval]:
        return []


class HasCitations(ABC):
    @property
    def citations(self) -> List[Citation]:
        return []


class HasDatabaseReferences(ABC):
    @property
    def database_references(self) -> List[DatabaseReference]:
        return []


class HasDatabaseReferenceInfo(ABC):
    """A reference into an external database, such as ``taxon:9606``."""

    @property
    def database_name(self) -> Optional[str]:
        return None

    @property
    def object_id(self) -> Optional[str]:
        return None


class HasGeneInfo(ABC):
    @property
    def locus(self) -> Optional[str]:
        return None

    @property
    def locus_tags(self) -> List[str]:
        return []

    @property
    def products(self) -> List[str]:
        return []


class HasProteinInfo(ABC):
    @property
    def calculated_mol_wt(self) -> List[str]:
        return []


class HasEvidence(ABC):
    @property
    def evidence(self) -> List[str]:
        return []


class HasNotes(ABC):
    @property
    def notes(self) -> List[str]:
        return []


class HasTranslationInfo(ABC):
    """Information needed to translate a region. ``frame`` is only known for resolved intervals."""

    @property
    def frame(self) -> Optional[int]:
        return None

    @property
    def translation_tables(self) -> List[str]:
        return []

    @property
    def codon_starts(self) -> List[str]:
        return []

    @property
    def translations(self) -> List[str]:
        return []


class HasTaxonomy(ABC):
    @property
    def lineage(self) -> Optional[str]:
        return None

    @property
    def scientific_name(self) -> Optional[str]:
        return None


class HasTaxonomyReferences(ABC):
    @property
    def taxonomy_references(self) -> List[TaxonomyReference]:
        return []


class HasCitationInfo(ABC):
    @property
    def title(self) -> Optional[str]:
        return None

    @property
    def journal(self) -> Optional[str]:
        return None

    @property
    def year(self) -> Optional[str]:
        return None

    @property
    def volume(self) -> Optional[str]:
        return None

    @property
    def page_start(self) -> Optional[str]:
        return None

    @property
    def page_end(self) -> Optional[str]:
        return None

    @property
    def authors(self) -> List[str]:
        return []

    @property
    def pubmed(self) -> Optional[str]:
        return None

    @property
    def crossrefs(self) -> Dict[str, str]:
        return {}


def _reachable(obj) -> Iterable:
    yield obj
    if isinstance(obj, HasFeatures):
        yield from obj.features
    if isinstance(obj, HasTaxonomyReferences):
        yield from obj.taxonomy_references


def collect_database_references(obj) -> List[DatabaseReference]:
    """Collect every database reference reachable from ``obj``: its own references, those of its features and those
    forwarded by its taxonomy references. Objects that do not implement a capability contribute nothing.

    Returns:
        Unique references in the order they were first reached.
    """
    seen = set()
    refs = []
    for item in _reachable(obj):
        if not isinstance(item, HasDatabaseReferences):
            continue
        for ref in item.database_references:
            if ref not in seen:
                seen.add(ref)
                refs.append(ref)
    return refs
