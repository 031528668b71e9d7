"""Year, month and day extraction."""

from bibfolio.models import RawEntry

from .._helpers import MONTH_NAMES, MONTH_NUMBER_RE, MONTHS, get_field, parse_int
from .._result_types import MonthResult
from ..text import strip_braces, tex_to_unicode


def parse_year(entry: RawEntry) -> int:
    """Extract year from raw entry.

    Non-digit characters are dropped before parsing, so ``{2020}`` and
    ``2020a`` both give 2020.

    Parameters
    ----------
    entry : RawEntry
        Parsed entry.

    Returns
    -------
    int
        Year, or 0 if missing or unparseable.
    """
    return parse_int(strip_braces(get_field(entry, "year")))


def parse_month(entry: RawEntry) -> MonthResult:
    """Extract month number and display name from raw entry.

    Accepts month names of three or more letters in any case (matched
    on the three-letter prefix) and bare numbers 1-12.

    Parameters
    ----------
    entry : RawEntry
        Parsed entry.

    Returns
    -------
    MonthResult
        (0, "") when missing; (0, raw text) when unrecognized.
    """
    raw = tex_to_unicode(get_field(entry, "month"))
    if not raw:
        return MonthResult(0, "")

    key = raw.lower()

    if MONTH_NUMBER_RE.fullmatch(key):
        number = int(key)
        if 1 <= number <= 12:
            return MonthResult(number, MONTH_NAMES[number])
        return MonthResult(0, raw)

    if len(key) >= 3 and key[:3] in MONTHS:
        number, name = MONTHS[key[:3]]
        return MonthResult(number, name)

    return MonthResult(0, raw)


def parse_day(entry: RawEntry) -> int:
    """Extract day of month, 0 if missing or unparseable."""
    return parse_int(strip_braces(get_field(entry, "day")))


def format_date(year: int, month: int, month_name: str, day: int) -> str:
    """Compose display date.

    Parameters
    ----------
    year : int
        Year, 0 if unknown.
    month : int
        Month number, 0 if unknown.
    month_name : str
        Month display name.
    day : int
        Day, 0 if unknown.

    Returns
    -------
    str
        "Month Day, Year", "Month Year" or "Year"; empty when the year
        is unknown.
    """
    if not year:
        return ""
    if month and day:
        return f"{month_name} {day}, {year}"
    if month:
        return f"{month_name} {year}"
    return str(year)
