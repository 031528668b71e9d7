"""Public API for building publication lists.

This module provides the main public API for bibfolio, enabling:
- Building the year-grouped publications structure from text or a file
- Parsing BibTeX files into raw entries
- Exporting results to JSON
"""

from pathlib import Path

from bibfolio.engine.output import write_json
from bibfolio.engine.runner import build_publications, load_publications
from bibfolio.models import RawEntry
from bibfolio.parse import decode_source, parse_bibtex

__all__ = [
    "build_publications",
    "load_publications",
    "parse_file",
    "write_json",
    "ParseError",
]


class ParseError(Exception):
    """Raised when parsing fails."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(message)
        self.file = file


def parse_file(
    path: str | Path,
    *,
    strict: bool = True,
) -> list[RawEntry]:
    """Parse a BibTeX file into raw entries.

    Parameters
    ----------
    path : str | Path
        Path to file to parse.
    strict : bool, optional
        If True, raise exception on parse errors. If False, return
        whatever entries could be parsed, by default True.

    Returns
    -------
    list[RawEntry]
        Parsed entries, fields un-normalized.

    Raises
    ------
    ParseError
        If parsing fails and strict=True.
    FileNotFoundError
        If file does not exist.

    Examples
    --------
        >>> from bibfolio import parse_file
        >>> for entry in parse_file("publications.bib"):
        ...     print(entry.key, entry.kind)
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    entries, _, errors = parse_bibtex(decode_source(file_path.read_bytes()))

    if errors and strict:
        raise ParseError(
            f"Failed to parse {file_path.name}: {'; '.join(errors)}",
            file=str(file_path),
        )

    return entries
