"""
Constants for fetching and reading GBSeq documents. Records the NCBI databases and output kinds that can be requested
as enumerations.
"""
from typing import Tuple

from inscripta.biorecord.util.enum import HasMemberMixin

# tag of each record in a GBSeq document; records are the children of the GBSet root
RECORD_TAG = "GBSeq"


class NCBIDatabase(str, HasMemberMixin):
    """NCBI databases records can be searched in and fetched from.

    * protein: sequences from several sources, including translations of annotated coding regions in GenBank,
      RefSeq and TPA, SwissProt, PIR, PRF and PDB.
    * nucest: short single-read transcript sequences from GenBank.
    * nuccore: sequences from several sources, including GenBank, RefSeq, TPA and PDB.
    * nucgss: unannotated short single-read, primarily genomic sequences.
    * popset: sets of sequences collected to analyse the relatedness of a population. Fetching one popset accession
      returns several records.
    """

    PROTEIN = "protein"
    NUCEST = "nucest"
    NUCCORE = "nuccore"
    NUCGSS = "nucgss"
    POPSET = "popset"


class OutputKind(str, HasMemberMixin):
    """What to fetch: structured GBSeq XML records, or plain FASTA sequences."""

    XML = "xml"
    FASTA = "fasta"

    def to_entrez(self) -> Tuple[str, str]:
        """The ``rettype`` and ``retmode`` requested from efetch."""
        if self == OutputKind.XML:
            return "gb", "xml"
        return "fasta", "text"
