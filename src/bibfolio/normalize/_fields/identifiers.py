"""Identifier extraction (DOI, URL, arXiv)."""

from bibfolio.models import RawEntry

from .._helpers import ARXIV_ID_RE, get_field
from ..text import strip_braces


def extract_arxiv(entry: RawEntry, howpublished: str) -> str:
    """Extract arXiv identifier.

    An explicit ``eprint``/``arxiv`` field wins. Otherwise, when the
    how-published text mentions arXiv, the first ``NNNN.NNNNN`` id in it
    is used.

    Parameters
    ----------
    entry : RawEntry
        Parsed entry.
    howpublished : str
        Normalized how-published text.

    Returns
    -------
    str
        arXiv id or empty string.
    """
    explicit = strip_braces(get_field(entry, "arxiv"))
    if explicit:
        return explicit

    if "arxiv" in howpublished.lower():
        match = ARXIV_ID_RE.search(howpublished)
        if match:
            return match.group(1)

    return ""
