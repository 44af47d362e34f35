import pytest
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from inscripta.biorecord.exc import SequenceContentError
from inscripta.biorecord.record.fasta import FastaSequence
from inscripta.biorecord.sequence.alphabet import Alphabet


class TestFastaSequence:
    def test_from_seqrecord(self):
        rec = SeqRecord(Seq("acgt\nnn"), id="NM_1.1", description="NM_1.1 some gene")
        seq = FastaSequence.from_seqrecord(rec)
        assert seq.accession == "NM_1.1"
        assert seq.description == "some gene"
        assert seq.letters == "ACGTNN"
        assert seq.alphabet == Alphabet.NT_EXTENDED_GAPPED
        assert not seq.is_protein
        assert len(seq) == 6

    def test_no_description(self):
        rec = SeqRecord(Seq("ACGT"), id="NM_1.1", description="NM_1.1")
        assert FastaSequence.from_seqrecord(rec).description is None

    def test_protein(self):
        rec = SeqRecord(Seq("mkta"), id="XP_1.1", description="")
        seq = FastaSequence.from_seqrecord(rec, alphabet=Alphabet.AA)
        assert seq.letters == "MKTA"
        assert seq.is_protein

    def test_invalid(self):
        rec = SeqRecord(Seq("ACGJ"), id="X", description="")
        with pytest.raises(SequenceContentError):
            FastaSequence.from_seqrecord(rec)

    def test_equality(self):
        assert FastaSequence("a", None, "AC", Alphabet.NT_STRICT) == FastaSequence("a", None, "AC", Alphabet.NT_STRICT)
        assert FastaSequence("a", None, "AC", Alphabet.NT_STRICT) != FastaSequence("b", None, "AC", Alphabet.NT_STRICT)
