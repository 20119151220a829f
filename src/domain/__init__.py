"""Domain package for business rules and core models."""

from .constants import CHART_PALETTE, DEFAULT_BLOB_KEY
from .errors import (
    LedgerError,
    MalformedPersistedData,
    PersistenceWarning,
    ValidationError,
)
from .models import (
    DEFAULT_CATEGORY,
    Category,
    Entry,
    FilterCriteria,
    LedgerView,
    SortDirection,
    SortKey,
    SortSpec,
)
from .services import (
    aggregate_by_category,
    compare_entries,
    filter_entries,
    matches_filter,
    parse_tags,
    sort_entries,
)

__all__ = [
    "CHART_PALETTE",
    "DEFAULT_BLOB_KEY",
    "DEFAULT_CATEGORY",
    "Category",
    "Entry",
    "FilterCriteria",
    "LedgerError",
    "LedgerView",
    "MalformedPersistedData",
    "PersistenceWarning",
    "SortDirection",
    "SortKey",
    "SortSpec",
    "ValidationError",
    "aggregate_by_category",
    "compare_entries",
    "filter_entries",
    "matches_filter",
    "parse_tags",
    "sort_entries",
]
