"""
Strand of an interval with respect to the record it belongs to.
"""

from inscripta.biorecord.location.strand import Strand  # noqa: F401
