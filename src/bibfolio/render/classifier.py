"""Entry classification into publication categories."""

from enum import StrEnum


class Category(StrEnum):
    """Publication categories with a dedicated citation format.

    Attributes
    ----------
    JOURNAL : str
        Journal article (``@article``).
    CONFERENCE : str
        Conference paper (``@inproceedings``).
    CHAPTER : str
        Chapter in an edited collection (``@incollection``).
    BOOK : str
        Whole book (``@book``).
    INBOOK : str
        Part of a book (``@inbook``).
    THESIS : str
        Doctoral thesis (``@phdthesis``).
    PREPRINT : str
        ``@misc`` published on arXiv.
    MISC : str
        Any other ``@misc``.
    """

    JOURNAL = "journal"
    CONFERENCE = "conference"
    CHAPTER = "chapter"
    BOOK = "book"
    INBOOK = "inbook"
    THESIS = "thesis"
    PREPRINT = "preprint"
    MISC = "misc"


ENTRY_KIND_CATEGORIES: dict[str, Category] = {
    "article": Category.JOURNAL,
    "inproceedings": Category.CONFERENCE,
    "incollection": Category.CHAPTER,
    "book": Category.BOOK,
    "inbook": Category.INBOOK,
    "phdthesis": Category.THESIS,
}

FALLBACK_CATEGORY = "other"


def classify_entry(kind: str, howpublished: str = "") -> str:
    """Map an entry kind to its publication category.

    Parameters
    ----------
    kind : str
        Entry-kind label, any case.
    howpublished : str, optional
        Normalized how-published text; only consulted for ``misc``.

    Returns
    -------
    str
        A ``Category`` member for known kinds. Unknown kinds fall back to
        the lower-cased kind itself, or "other" when the kind is empty.
    """
    kind = (kind or "").strip().lower()

    if kind in ENTRY_KIND_CATEGORIES:
        return ENTRY_KIND_CATEGORIES[kind]

    if kind == "misc":
        if "arxiv" in howpublished.lower():
            return Category.PREPRINT
        return Category.MISC

    return kind or FALLBACK_CATEGORY
