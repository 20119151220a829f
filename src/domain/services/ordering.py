"""Comparator and stable sorting for ledger entries."""

from collections.abc import Iterable
from functools import cmp_to_key
import locale

from src.domain.models.entries import Entry
from src.domain.models.queries import SortDirection, SortKey, SortSpec


def _sign(value) -> int:
    return (value > 0) - (value < 0)


def _compare_base(key: SortKey, left: Entry, right: Entry) -> int:
    if key is SortKey.AMOUNT:
        return _sign(left.amount - right.amount)
    if key is SortKey.CATEGORY:
        return _sign(
            locale.strcoll(left.category.value, right.category.value)
        )
    if key is SortKey.DATE:
        return _sign((left.date - right.date).total_seconds())
    raise ValueError(f"Unsupported sort key: {key}")


def compare_entries(
    key: SortKey,
    direction: SortDirection,
    left: Entry,
    right: Entry,
) -> int:
    """Return the relative order of two entries.

    Args:
        key: Field the entries are ordered by.
        direction: Ascending or descending order.
        left: First entry.
        right: Second entry.

    Returns:
        int: -1, 0 or 1. Descending flips the sign of the base comparison.
    """
    result = _compare_base(SortKey(key), left, right)
    if SortDirection(direction) is SortDirection.DESC:
        return -result
    return result


def sort_entries(entries: Iterable[Entry], sort_spec: SortSpec) -> list[Entry]:
    """Return the entries ordered by the sort spec.

    The sort is stable, so entries comparing equal keep their input order in
    both directions.
    """
    comparator = cmp_to_key(
        lambda left, right: compare_entries(
            sort_spec.key,
            sort_spec.direction,
            left,
            right,
        )
    )
    return sorted(entries, key=comparator)


__all__ = ["compare_entries", "sort_entries"]
