"""
Data models. These models act as a JSON schema for exporting records: each record kind can be converted to its model
and dumped to a dictionary or JSON string.

.. code-block:: python

    model = SequenceRecordModel.from_sequence(record)
    SequenceRecordModel.Schema().dumps(model)
"""
from datetime import date
from typing import List, Optional, ClassVar, Type, Dict

from marshmallow import Schema  # noqa: F401
from marshmallow_dataclass import dataclass

from inscripta.biorecord.record.citation import GenBankCitation
from inscripta.biorecord.record.feature import GenBankFeature, GenBankQualifier
from inscripta.biorecord.record.interval import GenBankInterval
from inscripta.biorecord.record.sequence import GenBankSequence


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class IntervalModel(BaseModel):
    """Interval coordinates; ``frame`` is present for intervals resolved through their feature."""

    start: int
    end: int
    complement: bool
    point: Optional[int] = None
    accession: Optional[str] = None
    frame: Optional[int] = None

    @staticmethod
    def from_interval(interval: GenBankInterval) -> "IntervalModel":
        return IntervalModel.Schema().load(interval.to_dict())


@dataclass
class QualifierModel(BaseModel):
    name: Optional[str]
    value: Optional[str] = None

    @staticmethod
    def from_qualifier(qualifier: GenBankQualifier) -> "QualifierModel":
        return QualifierModel.Schema().load(qualifier.to_dict())


@dataclass
class FeatureModel(BaseModel):
    key: Optional[str]
    location: Optional[str] = None
    operator: Optional[str] = None
    qualifiers: Optional[List[QualifierModel]] = None
    intervals: Optional[List[IntervalModel]] = None

    @staticmethod
    def from_feature(feature: GenBankFeature) -> "FeatureModel":
        return FeatureModel.Schema().load(feature.to_dict())


@dataclass
class CitationModel(BaseModel):
    reference: Optional[str] = None
    position: Optional[str] = None
    title: Optional[str] = None
    journal: Optional[str] = None
    authors: Optional[List[str]] = None
    pubmed: Optional[str] = None
    crossrefs: Optional[Dict[str, str]] = None
    remarks: Optional[List[str]] = None

    @staticmethod
    def from_citation(citation: GenBankCitation) -> "CitationModel":
        return CitationModel.Schema().load(citation.to_dict())


@dataclass
class SequenceRecordModel(BaseModel):
    """Everything read from one GBSeq record, including its cleaned letters."""

    accession: Optional[str]
    sequence: str
    alphabet: str
    locus: Optional[str] = None
    accession_version: Optional[str] = None
    version: Optional[int] = None
    accessions: Optional[List[str]] = None
    description: Optional[str] = None
    moltype: Optional[str] = None
    organism: Optional[str] = None
    lineage: Optional[str] = None
    keywords: Optional[List[str]] = None
    creation_date: Optional[date] = None
    update_date: Optional[date] = None
    comments: Optional[List[str]] = None
    features: Optional[List[FeatureModel]] = None
    citations: Optional[List[CitationModel]] = None

    @staticmethod
    def from_sequence(sequence: GenBankSequence) -> "SequenceRecordModel":
        return SequenceRecordModel.Schema().load(sequence.to_dict())
