"""Author and editor name extraction."""

from bibfolio.models import RawEntry

from .._helpers import NAME_SEPARATOR_RE, get_field
from .._result_types import NamesResult
from ..text import tex_to_unicode


def split_names(entry: RawEntry, field_name: str) -> tuple[str, ...]:
    """Split a name list field on the word "and".

    Parameters
    ----------
    entry : RawEntry
        Parsed entry.
    field_name : str
        'author' or 'editor'.

    Returns
    -------
    tuple[str, ...]
        Trimmed, normalized names in source order; empty if the field is
        missing.
    """
    value = tex_to_unicode(get_field(entry, field_name))
    if not value:
        return ()
    parts = (part.strip() for part in NAME_SEPARATOR_RE.split(value))
    return tuple(part for part in parts if part)


def format_name(name: str) -> str:
    """Reorder "Last, First" to "First Last"; other names are kept as-is."""
    if "," in name:
        parts = [part.strip() for part in name.split(",")]
        last, first = parts[0], parts[1]
        return f"{first} {last}".strip()
    return name.strip()


def format_names(names: tuple[str, ...] | list[str]) -> str:
    """Join reformatted names with ", " (no conjunction before the last)."""
    return ", ".join(format_name(name) for name in names)


def extract_names(entry: RawEntry, field_name: str) -> NamesResult:
    """Extract names and their display string.

    Parameters
    ----------
    entry : RawEntry
        Parsed entry.
    field_name : str
        'author' or 'editor'.

    Returns
    -------
    NamesResult
        Names and formatted display string.
    """
    names = split_names(entry, field_name)
    return NamesResult(names=names, formatted=format_names(names))
