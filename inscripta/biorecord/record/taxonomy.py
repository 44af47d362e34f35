from typing import Optional, List

from inscripta.biorecord.capabilities import HasTaxonomy, HasFeatures, HasDatabaseReferences
from inscripta.biorecord.record.constants import MetadataFeatures
from inscripta.biorecord.record.entity import NodeEntity
from inscripta.biorecord.record.feature import GenBankFeature, GenBankDatabaseReference, features_of


class GenBankTaxonomyReference(NodeEntity, HasTaxonomy, HasFeatures, HasDatabaseReferences):
    """Taxonomy of a record. Database references (``taxon:9606`` and the like) are forwarded from the record's
    ``source`` features."""

    def __repr__(self):
        return "<{}: {}>".format(type(self).__name__, self.scientific_name)

    @property
    def lineage(self) -> Optional[str]:
        return self._text("GBSeq_taxonomy")

    @property
    def scientific_name(self) -> Optional[str]:
        return self._text("GBSeq_organism")

    @property
    def features(self) -> List[GenBankFeature]:
        return features_of(self.node)

    @property
    def database_references(self) -> List[GenBankDatabaseReference]:
        return [ref for f in self.filter_features(MetadataFeatures.SOURCE.value) for ref in f.database_references]
