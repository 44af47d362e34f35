"""
Core reader functionality. :class:`RecordReader` is the one-pass iterator every source opens: it yields records
lazily, closes its input when exhausted, and can be closed early (directly or as a context manager).
"""
from abc import ABC, abstractmethod
from typing import IO, Iterator, Optional, Generic, TypeVar

from inscripta.biorecord.sequence.alphabet import Alphabet
from inscripta.biorecord.sequence.cleaning import Cleaner, clean_sequence

Record = TypeVar("Record")


class RecordReader(ABC, Generic[Record]):
    """One-pass iterator of records read from ``handle``.

    Records are produced as they are consumed; stopping early does not read the remainder of the input. Iterating
    again after exhaustion yields nothing, so a second traversal requires opening the source again. Records
    are views into the document read by this reader and must not be used after it is closed.
    """

    def __init__(
        self,
        handle: IO,
        alphabet: Optional[Alphabet] = None,
        cleaner: Cleaner = clean_sequence,
        owns_handle: bool = True,
    ):
        """
        Args:
            handle: Open handle to read from.
            alphabet: Alphabet the letters are validated against. Readers decide a default when this is None.
            cleaner: Function that normalizes and validates the letters of each record.
            owns_handle: Close ``handle`` when the reader is exhausted or closed.
        """
        self.handle = handle
        self.alphabet = alphabet
        self.cleaner = cleaner
        self.owns_handle = owns_handle
        self._records = self._iterate()

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        return next(self._records)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def closed(self) -> bool:
        return self.handle.closed

    def close(self):
        """Stop reading and close the handle, if this reader owns it."""
        self._records.close()
        self._close_handle()

    def _close_handle(self):
        if self.owns_handle and not self.handle.closed:
            self.handle.close()

    @abstractmethod
    def _iterate(self) -> Iterator[Record]:
        """Generator of records. Implementations must call ``_close_handle()`` when they finish."""
