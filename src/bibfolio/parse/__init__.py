"""BibTeX database parsing.

Main entry points:
- parse_bibtex: Parse BibTeX text into raw entries
- decode_source: Decode file bytes with encoding detection
"""

from bibfolio.parse.base import ParseResult, decode_source
from bibfolio.parse.bibtex import parse_bibtex

__all__ = [
    "ParseResult",
    "decode_source",
    "parse_bibtex",
]
