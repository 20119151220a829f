"""Domain services package."""

from .aggregation import aggregate_by_category
from .filtering import filter_entries, matches_filter
from .normalization import normalize_search_term, parse_tags
from .ordering import compare_entries, sort_entries
from .validation import validate_amount, validate_category, validate_detail

__all__ = [
    "aggregate_by_category",
    "compare_entries",
    "filter_entries",
    "matches_filter",
    "normalize_search_term",
    "parse_tags",
    "sort_entries",
    "validate_amount",
    "validate_category",
    "validate_detail",
]
