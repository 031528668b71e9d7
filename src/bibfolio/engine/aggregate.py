"""Year grouping and deterministic ordering of publication records."""

from collections import defaultdict
from collections.abc import Iterable

from bibfolio.models import PublicationRecord, YearGroup

UNKNOWN_YEAR = 0


def _year_order(year: int) -> tuple[bool, int]:
    # Known years newest first, unknown year last.
    return (year == UNKNOWN_YEAR, -year)


def sort_group_items(records: Iterable[PublicationRecord]) -> list[PublicationRecord]:
    """Sort records most recent first, ties by title descending.

    Parameters
    ----------
    records : Iterable[PublicationRecord]
        Records of one year group.

    Returns
    -------
    list[PublicationRecord]
        Records ordered by (date key, title), both descending.
    """
    return sorted(records, key=lambda r: (r.date_key, r.title), reverse=True)


def group_by_year(records: Iterable[PublicationRecord]) -> tuple[YearGroup, ...]:
    """Partition records by year.

    Parameters
    ----------
    records : Iterable[PublicationRecord]
        All records of a build.

    Returns
    -------
    tuple[YearGroup, ...]
        Groups ordered by year descending with year 0 last; items inside
        each group ordered by ``sort_group_items``.
    """
    by_year: dict[int, list[PublicationRecord]] = defaultdict(list)
    for record in records:
        by_year[record.year or UNKNOWN_YEAR].append(record)

    return tuple(
        YearGroup(year=year, items=tuple(sort_group_items(by_year[year])))
        for year in sorted(by_year, key=_year_order)
    )


def aggregate(
    records: Iterable[PublicationRecord],
) -> tuple[tuple[YearGroup, ...], tuple[PublicationRecord, ...]]:
    """Build the year groups and the flat ordered record sequence.

    Parameters
    ----------
    records : Iterable[PublicationRecord]
        All records of a build.

    Returns
    -------
    tuple[tuple[YearGroup, ...], tuple[PublicationRecord, ...]]
        (years, all) where ``all`` follows the year group order.
    """
    years = group_by_year(records)
    flat = tuple(record for group in years for record in group.items)
    return years, flat
