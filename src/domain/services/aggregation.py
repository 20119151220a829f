"""Per-category aggregation of ledger entries."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.entries import Category, Entry


def aggregate_by_category(
    entries: Iterable[Entry],
) -> tuple[dict[Category, Decimal], Decimal]:
    """Sum amounts per category and overall.

    Only categories present in ``entries`` appear in the mapping, in order of
    first appearance.

    Args:
        entries: Ordered, already filtered entries.

    Returns:
        tuple[dict[Category, Decimal], Decimal]: Totals by category and the
        grand total over the same entries.
    """
    by_category: dict[Category, Decimal] = {}
    total = Decimal("0")
    for entry in entries:
        by_category[entry.category] = (
            by_category.get(entry.category, Decimal("0")) + entry.amount
        )
        total += entry.amount
    return by_category, total


__all__ = ["aggregate_by_category"]
