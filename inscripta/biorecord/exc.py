class BioRecordException(Exception):
    """
    Base exception class for BioRecord.
    """

    pass


class RecordFormatError(BioRecordException):
    """
    Raised when a required field of a record is absent or malformed, such as an interval with neither a
    start/end pair nor a point, or an accession-version without a numeric suffix.
    """

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class CoordinateRangeError(BioRecordException):
    """
    Raised when an interval extends outside of the letters of the sequence it is extracted from.
    """

    pass


class ConfigurationError(BioRecordException):
    """
    Raised when a caller supplied option is outside of its closed set of values. Always raised before any I/O.
    """

    pass


class SequenceContentError(BioRecordException):
    """
    Raised when sequence letters are not valid for the alphabet they are declared in.
    """

    pass


class EmptySequenceFastaError(BioRecordException):
    """
    Raised when FASTA export is attempted on a record with no sequence letters.
    """

    pass


class AliasedCitationFieldWarning(UserWarning):
    """
    Emitted when a citation field that is not parsed out of the journal string is accessed. Year, volume and page
    fields all carry the raw journal text.
    """

    pass
