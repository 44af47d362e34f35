from xml.etree.ElementTree import fromstring

import pytest

from inscripta.biorecord.exc import RecordFormatError, CoordinateRangeError, SequenceContentError
from inscripta.biorecord.record.feature import GenBankFeature
from inscripta.biorecord.record.frame import (
    next_phase,
    resolve_intervals,
    render_interval_sequence,
    render_feature_sequence,
    PHASE_OFFSET,
    NEXT_PHASE,
)
from inscripta.biorecord.record.sequence import GenBankSequence
from inscripta.biorecord.sequence.alphabet import Alphabet


def interval_xml(start=None, end=None, point=None, complement=False) -> str:
    parts = []
    if start is not None:
        parts.append(f"<GBInterval_from>{start}</GBInterval_from>")
    if end is not None:
        parts.append(f"<GBInterval_to>{end}</GBInterval_to>")
    if point is not None:
        parts.append(f"<GBInterval_point>{point}</GBInterval_point>")
    if complement:
        parts.append('<GBInterval_iscomp value="true"/>')
    return "<GBInterval>{}</GBInterval>".format("".join(parts))


def make_feature(*intervals: str, key: str = "CDS") -> GenBankFeature:
    return GenBankFeature(
        fromstring(
            "<GBFeature><GBFeature_key>{}</GBFeature_key><GBFeature_intervals>{}</GBFeature_intervals></GBFeature>".format(
                key, "".join(intervals)
            )
        )
    )


def make_parent(letters: str, alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED) -> GenBankSequence:
    return GenBankSequence(fromstring("<GBSeq/>"), letters, alphabet)


def expected_frames(lengths, complement):
    """Frames computed step by step from the phase tables."""
    phase = 1
    frames = []
    for length in lengths:
        frames.append(-phase if complement else phase)
        phase = NEXT_PHASE[(length - PHASE_OFFSET[phase]) % 3]
    return frames


class TestPhaseTables:
    @pytest.mark.parametrize(
        "phase,length,expected",
        [
            (1, 3, 1),
            (1, 4, 3),
            (1, 5, 2),
            (2, 1, 1),
            (2, 2, 3),
            (2, 3, 2),
            (3, 1, 2),
            (3, 2, 1),
            (3, 3, 3),
            (3, 77, 1),
            (1, 100, 3),
        ],
    )
    def test_next_phase(self, phase, length, expected):
        assert next_phase(phase, length) == expected

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            PHASE_OFFSET[1] = 2
        with pytest.raises(TypeError):
            NEXT_PHASE[0] = 2


class TestResolveIntervals:
    def test_three_exon_complement(self):
        """Exons of length 100, 77 and 50 on the complement strand, lowest coordinates first.

        phase 1: (100 - 0) % 3 = 1 -> 3
        phase 3: (77 - 2) % 3 = 0  -> 1
        """
        feature = make_feature(
            interval_xml(1, 100, complement=True),
            interval_xml(201, 277, complement=True),
            interval_xml(401, 450, complement=True),
        )
        frames = [i.frame for i in resolve_intervals(feature)]
        assert frames == [-1, -3, -1]
        assert frames == expected_frames([100, 77, 50], complement=True)

    def test_three_exon_plus(self):
        feature = make_feature(interval_xml(1, 5), interval_xml(11, 17), interval_xml(21, 26))
        assert [i.frame for i in resolve_intervals(feature)] == [1, 2, 1]

    @pytest.mark.parametrize(
        "lengths",
        [
            [1],
            [2, 2, 2, 2],
            [4, 5, 6, 7, 8],
            [10, 11, 12],
            [31, 1, 1, 1, 30],
        ],
    )
    def test_recurrence(self, lengths):
        intervals = []
        start = 1
        for length in lengths:
            intervals.append(interval_xml(start, start + length - 1))
            start += length + 10
        feature = make_feature(*intervals)
        assert [i.frame for i in resolve_intervals(feature)] == expected_frames(lengths, complement=False)

    def test_complement_coordinates_stored_high_to_low(self):
        forward = make_feature(interval_xml(1, 5, complement=True), interval_xml(10, 20, complement=True))
        backward = make_feature(interval_xml(5, 1, complement=True), interval_xml(20, 10, complement=True))
        assert [i.frame for i in resolve_intervals(forward)] == [i.frame for i in resolve_intervals(backward)]

    def test_mixed_strands(self):
        feature = make_feature(interval_xml(1, 4), interval_xml(10, 14, complement=True))
        assert [i.frame for i in resolve_intervals(feature)] == [1, -3]

    def test_point_interval(self):
        feature = make_feature(interval_xml(point=7))
        resolved = resolve_intervals(feature)
        assert len(resolved) == 1
        assert resolved[0].frame == 1
        assert len(resolved[0]) == 1

    def test_deterministic(self):
        feature = make_feature(interval_xml(1, 8), interval_xml(20, 24), interval_xml(30, 41))
        assert resolve_intervals(feature) == resolve_intervals(feature)
        assert [i.frame for i in feature.intervals] == [i.frame for i in resolve_intervals(feature)]

    def test_does_not_modify_raw_intervals(self):
        feature = make_feature(interval_xml(1, 8), interval_xml(20, 24))
        resolve_intervals(feature)
        assert all(i.frame is None for i in feature.raw_intervals)

    def test_no_intervals(self):
        assert resolve_intervals(make_feature()) == []

    def test_interval_without_coordinates(self):
        feature = make_feature(interval_xml(1, 8), interval_xml())
        with pytest.raises(RecordFormatError):
            resolve_intervals(feature)


class TestRenderIntervalSequence:
    parent = make_parent("AACCGGTTAC")

    @pytest.mark.parametrize(
        "start,end,expected",
        [
            (1, 10, "AACCGGTTAC"),
            (1, 1, "A"),
            (3, 6, "CCGG"),
            (10, 10, "C"),
        ],
    )
    def test_plus(self, start, end, expected):
        interval = make_feature(interval_xml(start, end)).raw_intervals[0]
        assert render_interval_sequence(interval, self.parent) == expected
        assert render_interval_sequence(interval, self.parent) == str(self.parent)[start - 1 : end]

    @pytest.mark.parametrize(
        "start,end,expected",
        [
            (6, 3, "CCGG"),
            (3, 6, "CCGG"),
            (1, 4, "GGTT"),
            (10, 8, "GTA"),
        ],
    )
    def test_complement(self, start, end, expected):
        interval = make_feature(interval_xml(start, end, complement=True)).raw_intervals[0]
        assert render_interval_sequence(interval, self.parent) == expected

    def test_point(self):
        interval = make_feature(interval_xml(point=4)).raw_intervals[0]
        assert render_interval_sequence(interval, self.parent) == "C"

    @pytest.mark.parametrize("start,end", [(0, 4), (5, 11), (11, 11), (-2, 3)])
    def test_out_of_range(self, start, end):
        interval = make_feature(interval_xml(start, end)).raw_intervals[0]
        with pytest.raises(CoordinateRangeError):
            render_interval_sequence(interval, self.parent)

    def test_no_coordinates(self):
        interval = make_feature(interval_xml()).raw_intervals[0]
        with pytest.raises(RecordFormatError):
            render_interval_sequence(interval, self.parent)

    def test_complement_of_protein(self):
        interval = make_feature(interval_xml(1, 3, complement=True)).raw_intervals[0]
        with pytest.raises(SequenceContentError):
            render_interval_sequence(interval, make_parent("MKT", Alphabet.AA))

    def test_interval_method(self):
        interval = make_feature(interval_xml(2, 5)).raw_intervals[0]
        assert interval.sequence(self.parent) == "ACCG"


class TestRenderFeatureSequence:
    parent = make_parent("AACCGGTTAC")

    def test_spliced(self):
        feature = make_feature(interval_xml(1, 2), interval_xml(5, 6), interval_xml(9, 10))
        assert render_feature_sequence(feature, self.parent) == "AAGGAC"
        assert feature.sequence(self.parent) == "AAGGAC"

    def test_complement_join_in_document_order(self):
        # complement(join(1..2,5..6)) lists the downstream interval first
        feature = make_feature(interval_xml(6, 5, complement=True), interval_xml(2, 1, complement=True))
        assert render_feature_sequence(feature, self.parent) == "CCTT"

    def test_single_interval_matches_interval(self):
        feature = make_feature(interval_xml(3, 8))
        assert render_feature_sequence(feature, self.parent) == render_interval_sequence(
            feature.intervals[0], self.parent
        )

    def test_point_feature(self):
        feature = make_feature(interval_xml(point=10))
        assert render_feature_sequence(feature, self.parent) == "C"

    def test_out_of_range(self):
        feature = make_feature(interval_xml(1, 2), interval_xml(9, 12))
        with pytest.raises(CoordinateRangeError):
            render_feature_sequence(feature, self.parent)

    def test_empty_feature(self):
        assert render_feature_sequence(make_feature(), self.parent) == ""
