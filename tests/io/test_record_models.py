"""
Test exporting records through their models. All of these tests are based on the two_records.xml file.
"""
import json
from datetime import date

from inscripta.biorecord.io.models import (
    SequenceRecordModel,
    FeatureModel,
    IntervalModel,
    CitationModel,
    QualifierModel,
)


class TestModels:
    def test_interval(self, mrna):
        cds = mrna.filter_features("CDS")[0]
        model = IntervalModel.from_interval(cds.intervals[1])
        assert model == IntervalModel(start=11, end=17, complement=False, point=None, accession="NM_TEST.3", frame=2)

    def test_raw_interval_has_no_frame(self, mrna):
        cds = mrna.filter_features("CDS")[0]
        assert IntervalModel.from_interval(cds.raw_intervals[0]).frame is None

    def test_qualifier(self, mrna):
        q = mrna.filter_features("gene")[0].qualifiers[0]
        assert QualifierModel.from_qualifier(q) == QualifierModel(name="gene", value="tstA")

    def test_feature(self, mrna):
        feature = mrna.filter_features("misc_feature")[0]
        model = FeatureModel.from_feature(feature)
        assert model.key == "misc_feature"
        assert model.operator == "join"
        assert [i.frame for i in model.intervals] == [-1, -1]
        assert [i.complement for i in model.intervals] == [True, True]
        assert model.qualifiers == [QualifierModel(name="note", value="reverse strand region")]

    def test_citation(self, mrna):
        model = CitationModel.from_citation(mrna.citations[0])
        assert model.crossrefs == {"doi": "10.1000/test"}
        assert model.authors == ["Smith,J.", "Doe,A."]
        assert model.remarks == ["GeneRIF: a remark about the test gene"]

    def test_sequence(self, mrna):
        model = SequenceRecordModel.from_sequence(mrna)
        assert model.accession == "NM_TEST"
        assert model.version == 3
        assert model.alphabet == "NT_EXTENDED_GAPPED"
        assert model.creation_date == date(2020, 1, 1)
        assert model.update_date == date(2021, 3, 15)
        assert model.organism == "Homo sapiens"
        assert len(model.features) == 5
        assert len(model.citations) == 2
        assert model.sequence == mrna.letters

    def test_json(self, protein):
        model = SequenceRecordModel.from_sequence(protein)
        dumped = json.loads(SequenceRecordModel.Schema().dumps(model))
        assert dumped["accession_version"] == "XP_PROT.1"
        assert dumped["update_date"] == "2022-02-02"
        assert dumped["creation_date"] is None
        assert [f["key"] for f in dumped["features"]] == ["Protein", "Region"]
        assert dumped["features"][1]["intervals"][0]["frame"] == 1
        assert SequenceRecordModel.Schema().load(dumped) == model
