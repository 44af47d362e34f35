"""
Search and fetch against NCBI Entrez, through ``Bio.Entrez``.

Failures of the service (HTTP errors, unreachable hosts, error documents returned by NCBI) are raised as
:class:`~biorecord.io.exc.TransportError`. Retrying is left to Biopython, configured by
:class:`~biorecord.config.EntrezConfig`.
"""
import logging
from dataclasses import dataclass
from http.client import HTTPException
from typing import List, Optional, Iterable, IO, AnyStr

from Bio import Entrez

from inscripta.biorecord.config import EntrezConfig
from inscripta.biorecord.io.exc import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """One page of search results. ``key`` is the history key to pass back to continue the search."""

    ids: List[str]
    key: Optional[str]
    count: int


class FetchedHandle:
    """Read-only handle over an efetch response. The response is read lazily by the record readers, so a connection
    that fails part way through the download raises :class:`~biorecord.io.exc.TransportError` from the read.
    """

    def __init__(self, handle: IO, description: str):
        self.handle = handle
        self.description = description

    def __iter__(self):
        return self

    def __next__(self) -> AnyStr:
        line = self.readline()
        if not line:
            raise StopIteration
        return line

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _guarded(self, read, size: int) -> AnyStr:
        try:
            return read(size)
        except (OSError, HTTPException) as e:
            raise TransportError(f"Reading {self.description} failed: {e}") from e

    def read(self, size: int = -1) -> AnyStr:
        return self._guarded(self.handle.read, size)

    def readline(self, size: int = -1) -> AnyStr:
        return self._guarded(self.handle.readline, size)

    @property
    def closed(self) -> bool:
        return self.handle.closed

    def close(self):
        self.handle.close()


class EntrezClient:
    def __init__(self, config: Optional[EntrezConfig] = None):
        self.config = config if config is not None else EntrezConfig.from_env()

    def _configure(self):
        Entrez.email = self.config.email
        Entrez.api_key = self.config.api_key
        Entrez.tool = self.config.tool
        Entrez.max_tries = self.config.max_tries
        Entrez.sleep_between_tries = self.config.sleep_between_tries

    def search(
        self, term: str, database: str, restart: int = 0, key: Optional[str] = None, retmax: int = 100
    ) -> SearchResult:
        """Search ``database`` for ``term``.

        Args:
            term: Search term, in the syntax of the NCBI web search, for example ``txid6183[Organism:noexp]``.
            database: Database to search.
            restart: Offset of the first result to return.
            key: History key returned by a previous search, or None to start a new one.
            retmax: Maximum number of ids to return.

        Raises:
            TransportError: If the search fails.
        """
        self._configure()
        params = dict(db=database, term=term, retstart=restart, retmax=retmax, usehistory="y")
        if key is not None:
            params["WebEnv"] = key
        logger.info(f"Searching {database} for {term} starting at {restart}")
        try:
            with Entrez.esearch(**params) as handle:
                record = Entrez.read(handle)
        except (OSError, RuntimeError) as e:
            raise TransportError(f"Search of {database} for {term} failed: {e}") from e
        return SearchResult(ids=list(record["IdList"]), key=record.get("WebEnv"), count=int(record["Count"]))

    def fetch(self, ids: Iterable[str], database: str, rettype: str, retmode: str) -> FetchedHandle:
        """Fetch records by accession or id. The caller owns and must close the returned handle.

        Raises:
            TransportError: If the fetch fails. Reading the returned handle raises it too if the connection drops.
        """
        self._configure()
        id_list = ",".join(ids)
        logger.info(f"Fetching {id_list} from {database} as {rettype}/{retmode}")
        try:
            handle = Entrez.efetch(db=database, id=id_list, rettype=rettype, retmode=retmode)
        except (OSError, HTTPException) as e:
            raise TransportError(f"Fetch of {id_list} from {database} failed: {e}") from e
        return FetchedHandle(handle, f"{id_list} from {database}")
