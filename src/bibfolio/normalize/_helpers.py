"""Helper functions and compiled regex patterns for field extraction.

This module provides the field alias table, month table and the
pre-compiled patterns shared by the field extractors.
"""

import re

from bibfolio.models import RawEntry

# Pre-compiled regex patterns
NON_DIGIT_RE = re.compile(r"\D+")
MONTH_NUMBER_RE = re.compile(r"[0-9]+")
NAME_SEPARATOR_RE = re.compile(r"\s+and\s+", re.IGNORECASE)
ARXIV_ID_RE = re.compile(r"(?<!\d)(\d{4}\.\d{4,5})(?!\d)")

# BibTeX field aliases: field -> list of field names (priority order)
FIELD_ALIASES: dict[str, list[str]] = {
    "arxiv": ["eprint", "arxiv"],
    "number": ["number", "issue"],
    "school": ["school", "institution"],
}

# Three-letter prefix -> (month number, display name)
MONTHS: dict[str, tuple[int, str]] = {
    "jan": (1, "January"),
    "feb": (2, "February"),
    "mar": (3, "March"),
    "apr": (4, "April"),
    "may": (5, "May"),
    "jun": (6, "June"),
    "jul": (7, "July"),
    "aug": (8, "August"),
    "sep": (9, "September"),
    "oct": (10, "October"),
    "nov": (11, "November"),
    "dec": (12, "December"),
}

MONTH_NAMES: tuple[str, ...] = ("",) + tuple(name for _, name in MONTHS.values())


def get_field(entry: RawEntry, name: str) -> str:
    """Find first non-empty raw value for a field, respecting aliases.

    Parameters
    ----------
    entry : RawEntry
        Parsed entry.
    name : str
        Logical field name (e.g., 'title', 'arxiv').

    Returns
    -------
    str
        Raw value, or empty string if no alias is present.
    """
    for field_name in FIELD_ALIASES.get(name, [name]):
        value = entry.get(field_name).strip()
        if value:
            return value
    return ""


def parse_int(value: str) -> int:
    """Parse the digits of a value as an integer, 0 if there are none."""
    digits = NON_DIGIT_RE.sub("", value)
    return int(digits) if digits else 0
