"""Result dataclasses for field extractors.

These dataclasses replace tuples with named, typed structures
for better readability.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthResult:
    """Result of month parsing.

    Attributes
    ----------
    number : int
        Month 1-12, 0 if unrecognized or missing.
    name : str
        Canonical month name if recognized, else the normalized raw text.
    """

    number: int
    name: str


@dataclass(frozen=True)
class NamesResult:
    """Result of author/editor extraction.

    Attributes
    ----------
    names : tuple[str, ...]
        Names as written, normalized.
    formatted : str
        Display string ("First Last, First Last").
    """

    names: tuple[str, ...]
    formatted: str
