"""Record construction from raw entries.

This module orchestrates field extraction, classification and citation
rendering for one entry. All functions are pure and deterministic.
"""

from dataclasses import replace

from bibfolio.models import PublicationRecord, RawEntry
from bibfolio.render.bibtex_writer import format_bibtex_entry
from bibfolio.render.citations import render_citation
from bibfolio.render.classifier import classify_entry

from ._fields import (
    extract_arxiv,
    extract_names,
    extract_plain,
    extract_text,
    format_date,
    parse_day,
    parse_month,
    parse_year,
)


def build_record(entry: RawEntry, compact_bibtex: bool = True) -> PublicationRecord | None:
    """Build a publication record from a raw entry.

    This is the main entry point for normalization. Every field is
    computed first and the record is composed in one step; the citation
    is then rendered from the composed record.

    Parameters
    ----------
    entry : RawEntry
        Parsed entry.
    compact_bibtex : bool, optional
        Serialize the ``bibtex`` field in single-line form, by default True.

    Returns
    -------
    PublicationRecord | None
        The record, or None when the normalized title is empty.

    Notes
    -----
    Missing or malformed fields never raise; they default to "" or 0.
    """
    title = extract_text(entry, "title")
    if not title:
        return None

    journal = extract_text(entry, "journal")
    booktitle = extract_text(entry, "booktitle")
    howpublished = extract_text(entry, "howpublished")

    authors = extract_names(entry, "author")
    editors = extract_names(entry, "editor")

    year = parse_year(entry)
    month = parse_month(entry)
    day = parse_day(entry)

    record = PublicationRecord(
        key=entry.key,
        entry_type=entry.kind,
        category=classify_entry(entry.kind, howpublished),
        title=title,
        authors=authors.names,
        authors_fmt=authors.formatted,
        editors=editors.names,
        editors_fmt=editors.formatted,
        journal=journal,
        booktitle=booktitle,
        howpublished=howpublished,
        school=extract_text(entry, "school"),
        publisher=extract_text(entry, "publisher"),
        address=extract_text(entry, "address"),
        venue=journal or booktitle or howpublished,
        volume=extract_plain(entry, "volume"),
        number=extract_plain(entry, "number"),
        pages=extract_plain(entry, "pages"),
        year=year,
        month=month.number,
        month_name=month.name,
        day=day,
        date_str=format_date(year, month.number, month.name, day),
        doi=extract_plain(entry, "doi"),
        url=extract_plain(entry, "url"),
        arxiv=extract_arxiv(entry, howpublished),
        bibtex=format_bibtex_entry(entry, compact=compact_bibtex),
    )

    return replace(record, citation=render_citation(record))


def build_records(
    entries: list[RawEntry], compact_bibtex: bool = True
) -> tuple[list[PublicationRecord], list[RawEntry]]:
    """Build records for all entries.

    Parameters
    ----------
    entries : list[RawEntry]
        Parsed entries.
    compact_bibtex : bool, optional
        Passed through to ``build_record``.

    Returns
    -------
    tuple[list[PublicationRecord], list[RawEntry]]
        (records, skipped) where skipped holds entries dropped for an
        empty title.
    """
    records: list[PublicationRecord] = []
    skipped: list[RawEntry] = []
    for entry in entries:
        record = build_record(entry, compact_bibtex=compact_bibtex)
        if record is None:
            skipped.append(entry)
        else:
            records.append(record)
    return records, skipped
