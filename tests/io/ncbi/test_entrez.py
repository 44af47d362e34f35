import io
from http.client import IncompleteRead
from urllib.error import HTTPError, URLError

import pytest
from Bio import Entrez

from inscripta.biorecord.config import EntrezConfig
from inscripta.biorecord.io.exc import TransportError
from inscripta.biorecord.io.ncbi.entrez import EntrezClient, SearchResult, FetchedHandle


class DroppedConnection(io.StringIO):
    """A response that fails after its first read."""

    def __init__(self, text, error):
        super().__init__(text)
        self.error = error
        self.reads = 0

    def read(self, size=-1):
        self.reads += 1
        if self.reads > 1:
            raise self.error
        return super().read(size)

    def readline(self, size=-1):
        self.reads += 1
        if self.reads > 1:
            raise self.error
        return super().readline(size)


@pytest.fixture
def client():
    return EntrezClient(EntrezConfig(email="someone@example.com", api_key="KEY", max_tries=2, sleep_between_tries=0))


class TestEntrezClient:
    def test_search(self, client, monkeypatch):
        calls = []

        def esearch(**kwargs):
            calls.append(kwargs)
            return io.StringIO("")

        monkeypatch.setattr(Entrez, "esearch", esearch)
        monkeypatch.setattr(Entrez, "read", lambda handle: {"IdList": ["11", "12"], "WebEnv": "ENV", "Count": "40"})
        result = client.search("txid6183[Organism:noexp]", "protein", restart=20, key="PREV")
        assert result == SearchResult(ids=["11", "12"], key="ENV", count=40)
        assert calls == [
            dict(db="protein", term="txid6183[Organism:noexp]", retstart=20, retmax=100, usehistory="y", WebEnv="PREV")
        ]
        assert Entrez.email == "someone@example.com"
        assert Entrez.api_key == "KEY"
        assert Entrez.max_tries == 2

    def test_search_no_results(self, client, monkeypatch):
        monkeypatch.setattr(Entrez, "esearch", lambda **kwargs: io.StringIO(""))
        monkeypatch.setattr(Entrez, "read", lambda handle: {"IdList": [], "Count": "0"})
        result = client.search("nothing", "nuccore")
        assert result.ids == []
        assert result.key is None
        assert result.count == 0

    @pytest.mark.parametrize(
        "error",
        [
            URLError("unreachable"),
            HTTPError("https://eutils.ncbi.nlm.nih.gov", 500, "Server Error", None, None),
            RuntimeError("Search Backend failed"),
        ],
    )
    def test_search_failure(self, client, monkeypatch, error):
        def esearch(**kwargs):
            raise error

        monkeypatch.setattr(Entrez, "esearch", esearch)
        with pytest.raises(TransportError):
            client.search("term", "nuccore")

    def test_fetch(self, client, monkeypatch):
        calls = []

        def efetch(**kwargs):
            calls.append(kwargs)
            return io.StringIO("<GBSet/>")

        monkeypatch.setattr(Entrez, "efetch", efetch)
        handle = client.fetch(["A.1", "B.2"], "nuccore", "gb", "xml")
        assert isinstance(handle, FetchedHandle)
        assert handle.read() == "<GBSet/>"
        assert calls == [dict(db="nuccore", id="A.1,B.2", rettype="gb", retmode="xml")]

    def test_fetch_failure(self, client, monkeypatch):
        def efetch(**kwargs):
            raise HTTPError("https://eutils.ncbi.nlm.nih.gov", 400, "Bad Request", None, None)

        monkeypatch.setattr(Entrez, "efetch", efetch)
        with pytest.raises(TransportError):
            client.fetch(["A.1"], "nuccore", "gb", "xml")

    def test_default_config(self, monkeypatch):
        monkeypatch.setenv("BIORECORD_ENTREZ_EMAIL", "env@example.com")
        assert EntrezClient().config.email == "env@example.com"


class TestFetchedHandle:
    def test_reads_through(self):
        with FetchedHandle(io.StringIO(">a\nACGT\n"), "a from nuccore") as handle:
            assert handle.read(0) == ""
            assert list(handle) == [">a\n", "ACGT\n"]
            assert not handle.closed
        assert handle.closed

    @pytest.mark.parametrize(
        "error",
        [ConnectionResetError("connection reset by peer"), IncompleteRead(b"<GBSet>"), TimeoutError("timed out")],
    )
    def test_read_failure(self, error):
        handle = FetchedHandle(DroppedConnection("<GBSet>", error), "X from nuccore")
        assert handle.read(3) == "<GB"
        with pytest.raises(TransportError):
            handle.read()

    def test_readline_failure(self):
        handle = FetchedHandle(DroppedConnection(">a\nACGT\n", ConnectionResetError("reset")), "a from nuccore")
        assert next(handle) == ">a\n"
        with pytest.raises(TransportError):
            next(handle)
