import pytest
from pathlib import Path

from inscripta.biorecord.io.genbank.sources import GenBankFile


@pytest.fixture
def test_data_dir() -> Path:
    return Path(__file__).parent / "data"


@pytest.fixture
def gbseq_records(test_data_dir):
    """Both records of ``two_records.xml``: an mRNA (``NM_TEST.3``) and a protein (``XP_PROT.1``)."""
    with GenBankFile(test_data_dir / "two_records.xml").open() as reader:
        yield list(reader)


@pytest.fixture
def mrna(gbseq_records):
    return gbseq_records[0]


@pytest.fixture
def protein(gbseq_records):
    return gbseq_records[1]
