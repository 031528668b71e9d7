"""Citation rendering, one formatting rule per publication category.

Every renderer first assembles its clauses, skipping the optional ones
whose field is empty, then runs ``cleanup_citation`` over the joined text
to remove the stray spaces left in front of commas and periods.
"""

import re
from collections.abc import Callable

from bibfolio.models import PublicationRecord
from bibfolio.render.classifier import Category

Renderer = Callable[[PublicationRecord], str]

SPACE_BEFORE_COMMA_RE = re.compile(r"\s+,")
SPACE_BEFORE_PERIOD_RE = re.compile(r"\s+\.")


def cleanup_citation(text: str) -> str:
    """Collapse whitespace before commas and periods."""
    text = SPACE_BEFORE_COMMA_RE.sub(",", text)
    return SPACE_BEFORE_PERIOD_RE.sub(".", text)


def _join(bits: list[str]) -> str:
    return cleanup_citation(" ".join(bits))


def _author_clause(record: PublicationRecord) -> str:
    return f"{record.authors_fmt}." if record.authors_fmt else ""


def _title_clause(record: PublicationRecord) -> str:
    return f"“{record.title}.”"


def render_journal(record: PublicationRecord) -> str:
    """Authors. “Title.” Journal, vol. V no. N, pp. P, Date."""
    bits = [_author_clause(record), _title_clause(record)]
    if record.journal:
        bits.append(f"{record.journal},")
    volno = " ".join(
        part
        for part in (
            record.volume and f"vol. {record.volume}",
            record.number and f"no. {record.number}",
        )
        if part
    )
    if volno:
        bits.append(f"{volno},")
    if record.pages:
        bits.append(f"pp. {record.pages},")
    if record.date_str:
        bits.append(f"{record.date_str}.")
    return _join(bits)


def render_conference(record: PublicationRecord) -> str:
    """Authors. “Title.” In Booktitle, Address, Date."""
    bits = [_author_clause(record), _title_clause(record)]
    if record.booktitle:
        bits.append(f"In {record.booktitle},")
    if record.address:
        bits.append(f"{record.address},")
    if record.date_str:
        bits.append(f"{record.date_str}.")
    return _join(bits)


def render_preprint(record: PublicationRecord) -> str:
    """Authors. “Title.” arXiv:ID, Date. (or HowPublished, Date.)"""
    bits = [_author_clause(record), _title_clause(record)]
    if record.arxiv:
        bits.append(f"arXiv:{record.arxiv},")
    elif record.howpublished:
        bits.append(f"{record.howpublished},")
    if record.date_str:
        bits.append(f"{record.date_str}.")
    return _join(bits)


def render_book(record: PublicationRecord) -> str:
    """Who. “Title.” Publisher, Address, Date.

    Who is the author list, or the editor list marked "(ed.)" for edited
    volumes.
    """
    bits: list[str] = []
    who = record.authors_fmt or (f"{record.editors_fmt} (ed.)" if record.editors_fmt else "")
    if who:
        bits.append(f"{who}.")
    bits.append(_title_clause(record))
    if record.publisher:
        bits.append(f"{record.publisher},")
    if record.address:
        bits.append(f"{record.address},")
    if record.date_str:
        bits.append(f"{record.date_str}.")
    return _join(bits)


def render_chapter(record: PublicationRecord) -> str:
    """Authors. “Title.” In Booktitle, edited by Editors, Publisher, Address, pp. P, Date."""
    bits: list[str] = []
    if record.authors_fmt:
        bits.append(f"{record.authors_fmt}.")
    bits.append(_title_clause(record))
    if record.booktitle:
        bits.append(f"In {record.booktitle},")
    if record.editors_fmt:
        bits.append(f"edited by {record.editors_fmt},")
    if record.publisher:
        bits.append(f"{record.publisher},")
    if record.address:
        bits.append(f"{record.address},")
    if record.pages:
        bits.append(f"pp. {record.pages},")
    if record.date_str:
        bits.append(f"{record.date_str}.")
    return _join(bits)


def render_thesis(record: PublicationRecord) -> str:
    """Authors. “Title.” PhD thesis, School, Address, Date."""
    bits: list[str] = []
    if record.authors_fmt:
        bits.append(f"{record.authors_fmt}.")
    bits.append(_title_clause(record))
    bits.append("PhD thesis,")
    if record.school:
        bits.append(f"{record.school},")
    if record.address:
        bits.append(f"{record.address},")
    date = record.date_str or (str(record.year) if record.year else "")
    if date:
        bits.append(f"{date}.")
    return _join(bits)


def render_generic(record: PublicationRecord) -> str:
    """Authors. “Title.” Venue, Date."""
    bits = [_author_clause(record), _title_clause(record)]
    if record.venue:
        bits.append(f"{record.venue},")
    if record.date_str:
        bits.append(f"{record.date_str}.")
    return _join(bits)


RENDERERS: dict[str, Renderer] = {
    Category.JOURNAL: render_journal,
    Category.CONFERENCE: render_conference,
    Category.PREPRINT: render_preprint,
    Category.BOOK: render_book,
    Category.CHAPTER: render_chapter,
    Category.INBOOK: render_chapter,
    Category.THESIS: render_thesis,
    Category.MISC: render_generic,
}


def get_renderer(category: str) -> Renderer:
    """Return the renderer for a category; unknown categories render generically."""
    return RENDERERS.get(category, render_generic)


def render_citation(record: PublicationRecord) -> str:
    """Render the citation text for a record according to its category."""
    return get_renderer(record.category)(record)
