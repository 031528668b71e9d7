"""Field extraction functions.

Individual extractors that pull one named field out of a raw entry and
coerce it to its semantic type. Each function is pure, total and
deterministic: missing or malformed input gives an empty default.
"""

from .dates import format_date, parse_day, parse_month, parse_year
from .identifiers import extract_arxiv
from .names import extract_names, format_name, format_names, split_names
from .other import extract_plain, extract_text

__all__ = [
    "extract_arxiv",
    "extract_names",
    "extract_plain",
    "extract_text",
    "format_date",
    "format_name",
    "format_names",
    "parse_day",
    "parse_month",
    "parse_year",
    "split_names",
]
