"""Domain models package."""

from .entries import DEFAULT_CATEGORY, Category, Entry
from .finance import LedgerView
from .queries import FilterCriteria, SortDirection, SortKey, SortSpec

__all__ = [
    "Category",
    "DEFAULT_CATEGORY",
    "Entry",
    "FilterCriteria",
    "LedgerView",
    "SortDirection",
    "SortKey",
    "SortSpec",
]
