"""Record data models for bibfolio.

This module defines the raw entry produced by the parser, the normalized
publication record, and the year-partitioned output structure handed to
the templating layer.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RawEntry:
    """One bibliography entry as parsed, before any normalization.

    Attributes
    ----------
    key : str
        Citation key (e.g., 'smith2020').
    kind : str
        Entry-kind label as written (e.g., 'article', 'InProceedings').
    fields : Mapping[str, str]
        Field name (lower-cased) to raw value, braces and escapes intact.
        Insertion order follows the source.
    """

    key: str
    kind: str
    fields: Mapping[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str:
        """Return raw field value or empty string if absent."""
        return self.fields.get(name) or ""


@dataclass(frozen=True)
class PublicationRecord:
    """Normalized publication with rendered citation.

    All text fields are plain strings (empty when missing); numeric date
    parts are 0 when unknown.

    Attributes
    ----------
    key : str
        Citation key.
    entry_type : str
        Raw entry-kind label.
    category : str
        Publication category (see ``bibfolio.render.classifier.Category``).
    title : str
        Normalized title (never empty).
    authors : tuple[str, ...]
        Author names as written in the source, normalized.
    authors_fmt : str
        Display string of authors ("First Last, First Last").
    editors : tuple[str, ...]
        Editor names as written in the source, normalized.
    editors_fmt : str
        Display string of editors.
    journal, booktitle, howpublished, school, publisher, address : str
        Normalized venue fields.
    venue : str
        First non-empty of journal, booktitle, howpublished.
    volume, number, pages : str
        Free text.
    year : int
        Publication year, 0 if unknown.
    month : int
        Month 1-12, 0 if unknown.
    month_name : str
        Display month name.
    day : int
        Day of month, 0 if unknown.
    date_str : str
        Composed display date, empty when year is unknown.
    doi, url, arxiv : str
        Identifiers.
    bibtex : str
        Re-serialization of the original entry.
    citation : str
        Rendered citation text.
    """

    key: str
    entry_type: str
    category: str
    title: str
    authors: tuple[str, ...] = ()
    authors_fmt: str = ""
    editors: tuple[str, ...] = ()
    editors_fmt: str = ""
    journal: str = ""
    booktitle: str = ""
    howpublished: str = ""
    school: str = ""
    publisher: str = ""
    address: str = ""
    venue: str = ""
    volume: str = ""
    number: str = ""
    pages: str = ""
    year: int = 0
    month: int = 0
    month_name: str = ""
    day: int = 0
    date_str: str = ""
    doi: str = ""
    url: str = ""
    arxiv: str = ""
    bibtex: str = ""
    citation: str = ""

    @property
    def date_key(self) -> int:
        """Composite chronological key: year*10000 + month*100 + day."""
        return self.year * 10000 + self.month * 100 + self.day

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "key": self.key,
            "entry_type": self.entry_type,
            "category": str(self.category),
            "title": self.title,
            "authors": list(self.authors),
            "authors_fmt": self.authors_fmt,
            "editors": list(self.editors),
            "editors_fmt": self.editors_fmt,
            "journal": self.journal,
            "booktitle": self.booktitle,
            "howpublished": self.howpublished,
            "school": self.school,
            "publisher": self.publisher,
            "address": self.address,
            "venue": self.venue,
            "volume": self.volume,
            "number": self.number,
            "pages": self.pages,
            "year": self.year,
            "month": self.month,
            "month_name": self.month_name,
            "day": self.day,
            "date_str": self.date_str,
            "doi": self.doi,
            "url": self.url,
            "arxiv": self.arxiv,
            "bibtex": self.bibtex,
            "citation": self.citation,
        }


@dataclass(frozen=True)
class YearGroup:
    """Records published in one year.

    Attributes
    ----------
    year : int
        Publication year; 0 collects records with unknown year.
    items : tuple[PublicationRecord, ...]
        Records in display order.
    """

    year: int
    items: tuple[PublicationRecord, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"year": self.year, "items": [item.to_dict() for item in self.items]}


@dataclass(frozen=True)
class PublicationsData:
    """Result of one build, consumed by the templating layer.

    Attributes
    ----------
    years : tuple[YearGroup, ...]
        Year groups, most recent first, unknown year last.
    all : tuple[PublicationRecord, ...]
        Every record, in the same order as the year groups.
    error : str | None
        Set when the whole input failed; ``years`` and ``all`` are then empty.
    """

    years: tuple[YearGroup, ...] = ()
    all: tuple[PublicationRecord, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the build produced usable data."""
        return self.error is None

    @classmethod
    def failed(cls, message: str) -> "PublicationsData":
        """Create an error-flagged result with no records."""
        return cls(years=(), all=(), error=message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "error": self.error,
            "years": [group.to_dict() for group in self.years],
            "all": [record.to_dict() for record in self.all],
        }
