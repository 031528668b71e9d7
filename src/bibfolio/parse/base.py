"""Base types and utilities for the bibliography parser."""

from typing import NamedTuple

from bibfolio.models import RawEntry


class ParseResult(NamedTuple):
    """Result of parsing a bibliography database.

    Supports tuple unpacking: ``entries, warnings, errors = parse_bibtex(...)``.

    Attributes
    ----------
    entries : list[RawEntry]
        Parsed raw entries, in source order.
    warnings : list[str]
        Warning messages (skipped or malformed fragments).
    errors : list[str]
        Error messages (entries that could not be delimited).
    """

    entries: list[RawEntry]
    warnings: list[str]
    errors: list[str]


def detect_encoding(file_bytes: bytes) -> str:
    """Detect encoding of file bytes using deterministic strategy.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.

    Returns
    -------
    str
        Detected encoding (utf-8-sig, utf-8 or latin-1).
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def normalize_line_endings(content: str) -> str:
    """Normalize line endings to LF.

    Parameters
    ----------
    content : str
        Text content with potentially mixed line endings.

    Returns
    -------
    str
        Text with normalized line endings (\\n only).
    """
    content = content.replace("\r\n", "\n")
    return content.replace("\r", "\n")


def decode_source(file_bytes: bytes) -> str:
    """Decode raw file bytes into text with LF line endings."""
    text = file_bytes.decode(detect_encoding(file_bytes))
    return normalize_line_endings(text)
