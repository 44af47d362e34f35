import warnings
from typing import Optional, List, Dict, Any

from inscripta.biorecord.capabilities import HasCitationInfo, HasNotes
from inscripta.biorecord.exc import AliasedCitationFieldWarning
from inscripta.biorecord.record.entity import NodeEntity
from inscripta.biorecord.util.node import text_at


class GenBankCitation(NodeEntity, HasCitationInfo, HasNotes):
    """A ``GBReference`` of a record.

    The journal string is not parsed. ``year``, ``volume``, ``page_start`` and ``page_end`` all return the whole
    journal text and warn with :class:`~biorecord.exc.AliasedCitationFieldWarning` when read.
    """

    def __repr__(self):
        return "<{}: {}>".format(type(self).__name__, self.title)

    def _aliased_journal(self, field: str) -> Optional[str]:
        warnings.warn(
            AliasedCitationFieldWarning(
                "Citation {} is not parsed from the journal string; the whole journal text is returned".format(field)
            )
        )
        return self.journal

    @property
    def reference(self) -> Optional[str]:
        """Number of this citation within its record."""
        return self._text("GBReference_reference")

    @property
    def position(self) -> Optional[str]:
        """Bases of the record the citation applies to, such as ``1..1000``."""
        return self._text("GBReference_position")

    @property
    def title(self) -> Optional[str]:
        return self._text("GBReference_title")

    @property
    def journal(self) -> Optional[str]:
        return self._text("GBReference_journal")

    @property
    def year(self) -> Optional[str]:
        return self._aliased_journal("year")

    @property
    def volume(self) -> Optional[str]:
        return self._aliased_journal("volume")

    @property
    def page_start(self) -> Optional[str]:
        return self._aliased_journal("page_start")

    @property
    def page_end(self) -> Optional[str]:
        return self._aliased_journal("page_end")

    @property
    def authors(self) -> List[str]:
        return self._texts("GBReference_authors", "GBAuthor")

    @property
    def pubmed(self) -> Optional[str]:
        return self._text("GBReference_pubmed")

    @property
    def crossrefs(self) -> Dict[str, str]:
        """Database name to object id, one entry per ``GBXref``."""
        return {
            text_at(xref, "GBXref_dbname"): text_at(xref, "GBXref_id")
            for xref in self._children("GBReference_xref", "GBXref")
        }

    @property
    def notes(self) -> List[str]:
        return self._texts("GBReference_remark")

    def to_dict(self) -> Dict[str, Any]:
        return dict(
            reference=self.reference,
            position=self.position,
            title=self.title,
            journal=self.journal,
            authors=self.authors,
            pubmed=self.pubmed,
            crossrefs=self.crossrefs,
            remarks=self.notes,
        )
