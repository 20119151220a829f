"""Predicate filter over ledger entries."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.entries import Entry
from src.domain.models.queries import FilterCriteria
from src.domain.services.normalization import normalize_search_term


def _amount_bound(value: Decimal | None) -> Decimal | None:
    # NaN and infinite bounds constrain nothing.
    if value is None or not value.is_finite():
        return None
    return value


def matches_filter(criteria: FilterCriteria, entry: Entry) -> bool:
    """Return True when the entry satisfies every configured criterion.

    Absent criteria always pass, and so do non-finite amount bounds. The search term matches a case-insensitive
    substring of the detail or of any tag.

    Args:
        criteria: Filter configuration.
        entry: Entry to test.

    Returns:
        bool: Whether the entry is included.
    """
    if criteria.category is not None and entry.category != criteria.category:
        return False
    min_amount = _amount_bound(criteria.min_amount)
    if min_amount is not None and entry.amount < min_amount:
        return False
    max_amount = _amount_bound(criteria.max_amount)
    if max_amount is not None and entry.amount > max_amount:
        return False
    term = normalize_search_term(criteria.search_term)
    if term is not None:
        if term in entry.detail.lower():
            return True
        return any(term in tag.lower() for tag in entry.tags)
    return True


def filter_entries(
    entries: Iterable[Entry],
    criteria: FilterCriteria,
) -> list[Entry]:
    """Return the entries matching the criteria, preserving input order."""
    return [entry for entry in entries if matches_filter(criteria, entry)]


__all__ = ["matches_filter", "filter_entries"]
