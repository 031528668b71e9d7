"""Text field extraction (title, venues, volume, pages, links)."""

from bibfolio.models import RawEntry

from .._helpers import get_field
from ..text import strip_braces, tex_to_unicode


def extract_text(entry: RawEntry, field_name: str) -> str:
    """Extract a display text field, with TeX escapes converted.

    Used for title, journal, booktitle, howpublished, address, school
    and publisher. Missing fields give an empty string.
    """
    return tex_to_unicode(get_field(entry, field_name))


def extract_plain(entry: RawEntry, field_name: str) -> str:
    """Extract a free-text field with braces removed.

    Used for volume, number, pages, doi and url, whose content is kept
    verbatim apart from grouping braces.
    """
    return strip_braces(get_field(entry, field_name))
