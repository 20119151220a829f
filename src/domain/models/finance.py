"""Domain models for aggregated ledger views."""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from src.domain.models.entries import Category, Entry


@dataclass(frozen=True)
class LedgerView:
    """Filtered, ordered entries with their per-category totals.

    Attributes:
        entries: Entries matching the filter, in sort order.
        by_category: Summed amount per category present in ``entries``.
        total: Sum of every amount in ``entries``.
    """

    entries: tuple[Entry, ...]
    by_category: Mapping[Category, Decimal] = field(
        default_factory=lambda: MappingProxyType({})
    )
    total: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if not isinstance(self.by_category, MappingProxyType):
            object.__setattr__(
                self,
                "by_category",
                MappingProxyType(dict(self.by_category)),
            )

    @property
    def count(self) -> int:
        """Return the number of entries in the view."""
        return len(self.entries)

    def chart_data(self) -> list[dict[str, str | float]]:
        """Return ``name``/``value`` rows for the chart renderer."""
        return [
            {"name": category.value, "value": float(amount)}
            for category, amount in self.by_category.items()
        ]


__all__ = ["LedgerView"]
