"""Filter and sort configurations for ledger queries."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from src.domain.models.entries import Category


@dataclass(frozen=True)
class FilterCriteria:
    """Optional, conjunctive inclusion criteria.

    Attributes:
        category: Keep only entries in this category.
        min_amount: Inclusive lower bound on the amount.
        max_amount: Inclusive upper bound on the amount.
        search_term: Case-insensitive substring of the detail or of a tag.
    """

    category: Category | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    search_term: str | None = None


class SortKey(str, Enum):
    DATE = "date"
    AMOUNT = "amount"
    CATEGORY = "category"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortSpec:
    """Active ordering key and direction (newest first by default)."""

    key: SortKey = SortKey.DATE
    direction: SortDirection = SortDirection.DESC


__all__ = ["FilterCriteria", "SortKey", "SortDirection", "SortSpec"]
