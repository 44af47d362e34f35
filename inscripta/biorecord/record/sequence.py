import re
from datetime import date, datetime
from typing import Optional, List, Dict, Any
from xml.etree.ElementTree import Element

from inscripta.biorecord.capabilities import (
    HasIdentity,
    HasDescription,
    HasSequenceData,
    HasFeatures,
    HasCitations,
    HasDatabaseReferences,
    HasGeneInfo,
    HasNotes,
    HasTaxonomyReferences,
)
from inscripta.biorecord.exc import RecordFormatError, EmptySequenceFastaError
from inscripta.biorecord.record.citation import GenBankCitation
from inscripta.biorecord.record.constants import MetadataFeatures, GBSEQ_DATE_FORMAT
from inscripta.biorecord.record.entity import NodeEntity
from inscripta.biorecord.record.feature import GenBankFeature, GenBankDatabaseReference, features_of
from inscripta.biorecord.record.taxonomy import GenBankTaxonomyReference
from inscripta.biorecord.sequence.alphabet import Alphabet
from inscripta.biorecord.sequence.cleaning import clean_sequence, Cleaner
from inscripta.biorecord.util.node import text_at

_VERSION_RE = re.compile(r".+\.(\d+)$")


class GenBankSequence(
    NodeEntity,
    HasIdentity,
    HasDescription,
    HasSequenceData,
    HasFeatures,
    HasCitations,
    HasDatabaseReferences,
    HasGeneInfo,
    HasNotes,
    HasTaxonomyReferences,
):
    """One ``GBSeq`` record: its letters, metadata, features and citations.

    Instances are built by :class:`~biorecord.io.genbank.reader.GenBankReader`, which attaches the cleaned letters.
    Features, intervals, qualifiers and citations obtained from a record are views into the same document.
    """

    def __init__(self, node: Element, letters: str, alphabet: Alphabet):
        super().__init__(node)
        self._letters = letters
        self._alphabet = alphabet

    def __len__(self):
        return len(self._letters)

    def __str__(self):
        return self._letters

    def __repr__(self):
        return "<{}: {}>".format(type(self).__name__, self.accession_version or self.accession)

    @staticmethod
    def from_node(
        node: Element, alphabet: Optional[Alphabet] = None, cleaner: Cleaner = clean_sequence
    ) -> "GenBankSequence":
        """Build a record from a ``GBSeq`` node, reading and cleaning its letters.

        Args:
            node: The ``GBSeq`` element.
            alphabet: Alphabet to validate against. Defaults to the alphabet declared by the molecule type.
            cleaner: Function that normalizes and validates the raw letters.

        Raises:
            SequenceContentError: If the cleaner rejects the letters.
        """
        if alphabet is None:
            alphabet = Alphabet.from_moltype(text_at(node, "GBSeq_moltype"))
        raw = text_at(node, "GBSeq_sequence") or ""
        return GenBankSequence(node, cleaner(raw, alphabet), alphabet)

    def _date(self, tag: str) -> Optional[date]:
        text = self._text(tag)
        if text is None:
            return None
        try:
            return datetime.strptime(text.strip(), GBSEQ_DATE_FORMAT).date()
        except ValueError as e:
            raise RecordFormatError("{} is not a DD-MON-YYYY date: {}".format(tag, repr(text)), field=tag) from e

    @property
    def accession(self) -> Optional[str]:
        return self._text("GBSeq_primary-accession")

    @property
    def accession_version(self) -> Optional[str]:
        return self._text("GBSeq_accession-version")

    @property
    def accessions(self) -> List[str]:
        """Secondary accessions followed by the other sequence ids."""
        return self._texts("GBSeq_secondary-accessions", "GBSecondary-accn") + self._texts(
            "GBSeq_other-seqids", "GBSeqid"
        )

    @property
    def version(self) -> int:
        """Version parsed from the accession-version, for example ``3`` for ``NM_000518.3``.

        Raises:
            RecordFormatError: If the record has no accession-version, or it has no numeric suffix.
        """
        text = self.accession_version
        match = _VERSION_RE.match(text.strip()) if text else None
        if match is None:
            raise RecordFormatError(
                "GBSeq_accession-version has no version suffix: {}".format(repr(text)), field="GBSeq_accession-version"
            )
        return int(match.group(1))

    @property
    def creation_date(self) -> Optional[date]:
        return self._date("GBSeq_create-date")

    @property
    def update_date(self) -> Optional[date]:
        return self._date("GBSeq_update-date")

    @property
    def description(self) -> Optional[str]:
        return self._text("GBSeq_definition")

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def is_protein(self) -> bool:
        return self._alphabet.is_protein_alphabet()

    @property
    def moltype(self) -> Optional[str]:
        return self._text("GBSeq_moltype")

    @property
    def keywords(self) -> List[str]:
        return self._texts("GBSeq_keywords", "GBKeyword")

    @property
    def topology(self) -> Optional[str]:
        return self._text("GBSeq_topology")

    @property
    def division(self) -> Optional[str]:
        return self._text("GBSeq_division")

    @property
    def locus(self) -> Optional[str]:
        return self._text("GBSeq_locus")

    @property
    def notes(self) -> List[str]:
        """Record comments."""
        return self._texts("GBSeq_comment")

    @property
    def features(self) -> List[GenBankFeature]:
        return features_of(self.node)

    @property
    def citations(self) -> List[GenBankCitation]:
        return [GenBankCitation(x) for x in self._children("GBSeq_references", "GBReference")]

    @property
    def database_references(self) -> List[GenBankDatabaseReference]:
        """References carried by the ``source`` features of this record."""
        return [ref for f in self.filter_features(MetadataFeatures.SOURCE.value) for ref in f.database_references]

    @property
    def taxonomy_references(self) -> List[GenBankTaxonomyReference]:
        return [GenBankTaxonomyReference(self.node)]

    def to_fasta(self, num_chars: Optional[int] = 60) -> str:
        """Returns a FASTA-formatted string for this record, line-broken every num_chars.

        The header is the accession-version (or accession) followed by the description. With ``num_chars=None`` the
        letters are written on a single line.
        """
        if not self._letters:
            raise EmptySequenceFastaError("Cannot write FASTA for empty record {}".format(self.accession))
        header = " ".join(x for x in (self.accession_version or self.accession, self.description) if x)
        r = [f">{header}"]
        if num_chars is None:
            num_chars = len(self._letters)
        for i in range(0, len(self._letters), num_chars):
            r.append(self._letters[i : i + num_chars])
        return "\n".join(r)

    def to_dict(self) -> Dict[str, Any]:
        creation_date = self.creation_date
        update_date = self.update_date
        taxonomy = self.taxonomy_references[0]
        return dict(
            locus=self.locus,
            accession=self.accession,
            accession_version=self.accession_version,
            version=self.version if self.accession_version else None,
            accessions=self.accessions,
            description=self.description,
            moltype=self.moltype,
            alphabet=self._alphabet.name,
            organism=taxonomy.scientific_name,
            lineage=taxonomy.lineage,
            keywords=self.keywords,
            creation_date=creation_date.isoformat() if creation_date else None,
            update_date=update_date.isoformat() if update_date else None,
            comments=self.notes,
            sequence=self._letters,
            features=[f.to_dict() for f in self.features],
            citations=[c.to_dict() for c in self.citations],
        )
