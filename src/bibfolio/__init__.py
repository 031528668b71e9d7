"""BibTeX normalization and citation rendering for publication lists.

This package provides:
- Data models (bibfolio.models): entries and records
- Parsing (bibfolio.parse): BibTeX ingestion
- Normalization (bibfolio.normalize): TeX cleanup and field extraction
- Rendering (bibfolio.render): classification, citations, BibTeX export
- Engine (bibfolio.engine): aggregation and build orchestration
- Audit (bibfolio.audit): structured event logging
- CLI (bibfolio.cli): command-line interface
- Public API (bibfolio.api): high-level convenience functions
"""

__version__ = "0.3.0"
__license__ = "MIT"

from bibfolio.api import (
    ParseError,
    build_publications,
    load_publications,
    parse_file,
    write_json,
)
from bibfolio.models import PublicationRecord, PublicationsData, RawEntry, YearGroup
from bibfolio.normalize import tex_to_unicode

__all__ = [
    "__version__",
    "__license__",
    "PublicationRecord",
    "PublicationsData",
    "RawEntry",
    "YearGroup",
    "build_publications",
    "load_publications",
    "parse_file",
    "write_json",
    "tex_to_unicode",
    "ParseError",
]
