"""
I/O exceptions.
"""
from inscripta.biorecord.exc import BioRecordException


class BioRecordIOException(BioRecordException):
    pass


class RecordNotFoundError(BioRecordIOException, FileNotFoundError):
    """
    Raised when a file backed source does not exist at the time it is opened.
    """

    pass


class TransportError(BioRecordIOException):
    """
    Raised when the NCBI search/fetch service cannot be reached or returns an error.
    """

    pass
