"""Domain models for ledger entries."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class Category(str, Enum):
    """Closed set of labels an entry can be filed under."""

    FOOD = "Food"
    TRAVEL = "Travel"
    TUITION = "Tuition"
    BILLS = "Bills"
    RECHARGE = "Recharge"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        """Return the category matching a label.

        Args:
            value: Category member or its label.

        Returns:
            Category: Matching member.

        Raises:
            ValueError: If the label is not part of the closed set.
        """
        if isinstance(value, cls):
            return value
        return cls(value)

    @classmethod
    def labels(cls) -> list[str]:
        """Return every label in declaration order."""
        return [member.value for member in cls]


DEFAULT_CATEGORY = Category.OTHER


@dataclass(frozen=True)
class Entry:
    """A single ledger record.

    Attributes:
        id: Opaque unique identifier assigned at creation.
        detail: Free-text description.
        amount: Strictly positive amount in the ledger currency.
        category: Label from the closed category set.
        date: UTC creation timestamp.
        tags: Free-text labels, possibly empty.
    """

    id: str
    detail: str
    amount: Decimal
    category: Category
    date: datetime
    tags: tuple[str, ...] = field(default_factory=tuple)


__all__ = ["Category", "DEFAULT_CATEGORY", "Entry"]
