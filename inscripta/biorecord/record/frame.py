"""
Reading frame resolution for multi-interval features, and extraction of feature letters from their record.

A feature spliced from several intervals (exons) rarely has its codon boundaries on the interval boundaries. The
phase an interval starts at is carried over from the length of the interval before it, so a translator can start
each interval at the right position within a codon rather than at the first base.

Phases are 1, 2 or 3: the position within a codon of the first base of the interval. Starting at phase 1, after an
interval of length ``L`` that started at phase ``m``:

.. code-block::

    remainder = (L - PHASE_OFFSET[m]) % 3
    next      = NEXT_PHASE[remainder]

    PHASE_OFFSET = {1: 0, 2: 1, 3: 2}
    NEXT_PHASE   = {0: 1, 1: 3, 2: 2}

For example, three plus strand exons of lengths 100, 77 and 50:

.. code-block::

    exon   length  phase  remainder
    1      100     1      (100 - 0) % 3 = 1 -> 3
    2      77      3      (77 - 2) % 3 = 0  -> 1
    3      50      1

The resolved frame is the phase signed by strand, so the same exons on the complement strand resolve to
``[-1, -3, -1]``.
"""
from types import MappingProxyType
from typing import List

from inscripta.biorecord.exc import CoordinateRangeError
from inscripta.biorecord.location.strand import Strand
from inscripta.biorecord.record.interval import GenBankInterval, ResolvedInterval
from inscripta.biorecord.sequence.alphabet import reverse_complement

INITIAL_PHASE = 1

PHASE_OFFSET = MappingProxyType({1: 0, 2: 1, 3: 2})

NEXT_PHASE = MappingProxyType({0: 1, 1: 3, 2: 2})


def next_phase(phase: int, length: int) -> int:
    """Phase of the interval following an interval of ``length`` bases that started at ``phase``."""
    return NEXT_PHASE[(length - PHASE_OFFSET[phase]) % 3]


def signed_frame(phase: int, strand: Strand) -> int:
    return phase * strand.value


def resolve_intervals(feature) -> List[ResolvedInterval]:
    """Resolve the intervals of ``feature``, in document order, into :class:`ResolvedInterval` objects that carry
    their signed frame. The feature is not modified; calling this twice yields equal results.

    Args:
        feature: A feature exposing its raw intervals as ``raw_intervals``.

    Raises:
        RecordFormatError: If an interval has neither a start/end pair nor a point.
    """
    phase = INITIAL_PHASE
    resolved = []
    for interval in feature.raw_intervals:
        resolved.append(ResolvedInterval.from_interval(interval, signed_frame(phase, interval.strand)))
        phase = next_phase(phase, len(interval))
    return resolved


def render_interval_sequence(interval: GenBankInterval, parent) -> str:
    """Extract the letters of ``interval`` from ``parent``.

    Coordinates are 1-based and inclusive on both ends. Complement intervals are reverse complemented.

    Args:
        interval: Interval to extract.
        parent: Record providing ``letters`` and ``alphabet``.

    Raises:
        CoordinateRangeError: If the interval extends outside of the parent letters.
        RecordFormatError: If the interval has neither a start/end pair nor a point.
        SequenceContentError: If a complement interval is extracted from a non-nucleotide record.
    """
    low, high = interval.low, interval.high
    letters = parent.letters or ""
    if low < 1 or high > len(letters):
        raise CoordinateRangeError(
            "Interval {}..{} is outside of the sequence bounds 1..{}".format(low, high, len(letters))
        )
    extract = letters[low - 1 : high]
    if interval.complement:
        return reverse_complement(extract, parent.alphabet)
    return extract


def render_feature_sequence(feature, parent) -> str:
    """Concatenate the letters of every interval of ``feature`` in interval order.

    See :func:`render_interval_sequence` for the rules and errors applied to each interval.
    """
    return "".join(render_interval_sequence(interval, parent) for interval in feature.intervals)
