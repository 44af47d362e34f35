"""
Intervals are the contiguous spans (or single points) a feature is built from. A :class:`GenBankInterval` is the raw
view of a ``GBInterval`` node; a :class:`ResolvedInterval` is the same view with the signed reading frame that
:func:`~biorecord.record.frame.resolve_intervals` computed for it.
"""
from typing import Optional, Dict, Any

from inscripta.biorecord.capabilities import HasIdentity, HasTranslationInfo
from inscripta.biorecord.exc import RecordFormatError
from inscripta.biorecord.location.strand import Strand
from inscripta.biorecord.record.constants import COMPLEMENT_ATTRIBUTE
from inscripta.biorecord.record.entity import NodeEntity
from inscripta.biorecord.util.node import attr_at


class GenBankInterval(NodeEntity, HasIdentity, HasTranslationInfo):
    """A span on a record, with 1-based inclusive coordinates.

    GenBank stores the coordinates of a complement interval from high to low, so ``start`` may be larger than
    ``end``. Use :attr:`low` and :attr:`high` for slicing.
    """

    def __len__(self):
        return self.high - self.low + 1

    def __repr__(self):
        if self.point is not None:
            coords = str(self.point)
        else:
            coords = "{}..{}".format(self._text("GBInterval_from"), self._text("GBInterval_to"))
        return "<{}: {} ({})>".format(type(self).__name__, coords, self.strand)

    def _coordinate(self, tag: str) -> int:
        value = self._int(tag)
        if value is None:
            value = self.point
        if value is None:
            raise RecordFormatError("Interval has neither {} nor GBInterval_point".format(tag), field=tag)
        return value

    @property
    def accession(self) -> Optional[str]:
        """Accession of the record this interval is on. Remote intervals name a record other than their feature's."""
        return self._text("GBInterval_accession")

    @property
    def start(self) -> int:
        return self._coordinate("GBInterval_from")

    @property
    def end(self) -> int:
        return self._coordinate("GBInterval_to")

    @property
    def point(self) -> Optional[int]:
        return self._int("GBInterval_point")

    @property
    def complement(self) -> bool:
        return attr_at(self.node, "GBInterval_iscomp", attr=COMPLEMENT_ATTRIBUTE) == "true"

    @property
    def strand(self) -> Strand:
        return Strand.from_complement(self.complement)

    @property
    def low(self) -> int:
        return min(self.start, self.end)

    @property
    def high(self) -> int:
        return max(self.start, self.end)

    def sequence(self, parent) -> str:
        """Letters of this interval on ``parent``; see :func:`~biorecord.record.frame.render_interval_sequence`."""
        # avoid circular imports
        from inscripta.biorecord.record.frame import render_interval_sequence

        return render_interval_sequence(self, parent)

    def to_dict(self) -> Dict[str, Any]:
        return dict(
            start=self.start,
            end=self.end,
            point=self.point,
            complement=self.complement,
            accession=self.accession,
        )


class ResolvedInterval(GenBankInterval):
    """An interval annotated with its signed reading frame. The magnitude (1, 2 or 3) is the in-codon position the
    interval starts at; the sign is the strand."""

    def __init__(self, node, frame: int):
        super().__init__(node)
        self._frame = frame

    def __eq__(self, other):
        return super().__eq__(other) and self._frame == other._frame

    def __hash__(self):
        return hash((super().__hash__(), self._frame))

    def __repr__(self):
        return "{} frame={}>".format(super().__repr__()[:-1], self._frame)

    @staticmethod
    def from_interval(interval: GenBankInterval, frame: int) -> "ResolvedInterval":
        return ResolvedInterval(interval.node, frame)

    @property
    def frame(self) -> int:
        return self._frame

    def to_dict(self) -> Dict[str, Any]:
        return dict(super().to_dict(), frame=self._frame)
