"""
Sources of GBSeq records. A source knows where its document comes from (a file, a string, or NCBI) and opens a
fresh :class:`~biorecord.io.reader.RecordReader` over it each time :meth:`BioSequenceSource.open` is called. The caller
must close the reader, most simply by using it as a context manager:

.. code-block:: python

    with GenBankFile("records.xml").open() as reader:
        for record in reader:
            ...
"""
import gzip
import io
import logging
import pathlib
from abc import ABC, abstractmethod
from typing import Optional, Union, Iterable

from inscripta.biorecord.io.exc import RecordNotFoundError
from inscripta.biorecord.io.fasta.reader import FastaReader
from inscripta.biorecord.io.genbank.constants import NCBIDatabase, OutputKind
from inscripta.biorecord.io.genbank.reader import GenBankReader
from inscripta.biorecord.io.ncbi.entrez import EntrezClient, SearchResult
from inscripta.biorecord.io.reader import RecordReader
from inscripta.biorecord.sequence.alphabet import Alphabet

logger = logging.getLogger(__name__)


class BioSequenceSource(ABC):
    """Something records can be read from."""

    @abstractmethod
    def open(self) -> RecordReader:
        """Open a new reader. The caller is responsible for closing it."""


class GenBankFile(BioSequenceSource):
    """GBSeq XML stored in a file. Files ending in ``.gz`` are decompressed while reading."""

    def __init__(self, path: Union[str, pathlib.Path], alphabet: Optional[Alphabet] = None):
        self.path = pathlib.Path(path)
        self.alphabet = alphabet

    def __repr__(self):
        return f"GenBankFile({str(self.path)!r})"

    def open(self) -> GenBankReader:
        """
        Raises:
            RecordNotFoundError: If the file does not exist.
        """
        if not self.path.is_file():
            raise RecordNotFoundError(f"GBSeq file {self.path} does not exist")
        logger.info(f"Opening {self.path}")
        if self.path.suffix == ".gz":
            handle = gzip.open(self.path, "rb")
        else:
            handle = open(self.path, "rb")
        return GenBankReader(handle, alphabet=self.alphabet)


class GenBankString(BioSequenceSource):
    """GBSeq XML held in memory."""

    def __init__(self, text: str, alphabet: Optional[Alphabet] = None):
        self.text = text
        self.alphabet = alphabet

    def open(self) -> GenBankReader:
        return GenBankReader(io.StringIO(self.text), alphabet=self.alphabet)


class GenBankConnection(BioSequenceSource):
    """Records fetched from NCBI by accession.

    The database and output kind are validated when the connection is constructed, before any request is made.

    Args:
        accessions: Accessions or ids to fetch.
        database: One of :class:`~biorecord.io.genbank.constants.NCBIDatabase`, as a member or its value.
        output_kind: :attr:`OutputKind.XML` to read structured records, :attr:`OutputKind.FASTA` for plain
            sequences.
        alphabet: Alphabet the letters are validated against.
        client: Entrez client to fetch with. Defaults to one configured from the environment.

    Raises:
        ConfigurationError: If ``database`` or ``output_kind`` is not one of the known values.
    """

    def __init__(
        self,
        accessions: Iterable[str],
        database: Union[NCBIDatabase, str],
        output_kind: Union[OutputKind, str] = OutputKind.XML,
        alphabet: Optional[Alphabet] = None,
        client: Optional[EntrezClient] = None,
    ):
        self.database = NCBIDatabase.from_value(database)
        self.output_kind = OutputKind.from_value(output_kind)
        self.accessions = list(accessions)
        self.alphabet = alphabet
        self._client = client

    def __repr__(self):
        return f"GenBankConnection({self.accessions!r}, {self.database.value!r}, {self.output_kind.value!r})"

    @property
    def client(self) -> EntrezClient:
        if self._client is None:
            self._client = EntrezClient()
        return self._client

    def open(self) -> RecordReader:
        """
        Raises:
            TransportError: If the records cannot be fetched. Raised while iterating if the connection drops part way
                through the download.
        """
        rettype, retmode = self.output_kind.to_entrez()
        handle = self.client.fetch(self.accessions, self.database.value, rettype, retmode)
        if self.output_kind == OutputKind.XML:
            return GenBankReader(handle, alphabet=self.alphabet)
        alphabet = self.alphabet
        if alphabet is None and self.database == NCBIDatabase.PROTEIN:
            alphabet = Alphabet.AA
        return FastaReader(handle, alphabet=alphabet)


def genbank_search(
    term: str,
    database: Union[NCBIDatabase, str],
    restart: int = 0,
    key: Optional[str] = None,
    client: Optional[EntrezClient] = None,
) -> SearchResult:
    """Search an NCBI database. The ids returned can be fetched with :class:`GenBankConnection`.

    For example, all Schistosoma mansoni protein sequences are found by searching ``protein`` for
    ``txid6183[Organism:noexp]``.

    Args:
        term: Search term, in the syntax of the NCBI web search.
        database: One of :class:`~biorecord.io.genbank.constants.NCBIDatabase`.
        restart: Offset of the first result to return.
        key: History key of a previous search to continue.
        client: Entrez client to search with. Defaults to one configured from the environment.

    Returns:
        A :class:`~biorecord.io.ncbi.entrez.SearchResult`; its ``ids`` are empty if nothing matched.

    Raises:
        ConfigurationError: If ``database`` is not one of the known values. Raised before any request is made.
        TransportError: If the search fails.
    """
    database = NCBIDatabase.from_value(database)
    client = client if client is not None else EntrezClient()
    return client.search(term, database.value, restart=restart, key=key)
