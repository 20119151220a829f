"""Query pipeline deriving read-only views from the entry store."""

from collections.abc import Iterable

from src.application.use_cases.entry_store import EntryStore
from src.domain.models.entries import Entry
from src.domain.models.finance import LedgerView
from src.domain.models.queries import FilterCriteria, SortSpec
from src.domain.services.aggregation import aggregate_by_category
from src.domain.services.filtering import filter_entries
from src.domain.services.ordering import sort_entries
from src.infrastructure.logging.logger import get_app_logger


def build_ledger_view(
    entries: Iterable[Entry],
    criteria: FilterCriteria,
    sort_spec: SortSpec,
) -> LedgerView:
    """Filter, sort and aggregate entries into a view.

    Totals are computed over the exact filtered sequence that is returned.

    Args:
        entries: Collection snapshot in insertion order.
        criteria: Filter configuration.
        sort_spec: Sort configuration.

    Returns:
        LedgerView: Ordered entries with per-category and grand totals.
    """
    ordered = sort_entries(filter_entries(entries, criteria), sort_spec)
    by_category, total = aggregate_by_category(ordered)
    return LedgerView(
        entries=tuple(ordered),
        by_category=by_category,
        total=total,
    )


class LedgerQuery:
    """Recompute ledger views whenever the store or configuration changes."""

    def __init__(self, entry_store: EntryStore, logger=None) -> None:
        """Initialize the query.

        Args:
            entry_store: Store owning the canonical collection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._entry_store = entry_store
        self._logger = logger or get_app_logger()
        self._cache_key: tuple[int, FilterCriteria, SortSpec] | None = None
        self._cached_view: LedgerView | None = None

    def execute(
        self,
        criteria: FilterCriteria | None = None,
        sort_spec: SortSpec | None = None,
    ) -> LedgerView:
        """Return the view for the current collection and configuration.

        Args:
            criteria: Filter configuration, no filtering when omitted.
            sort_spec: Sort configuration, newest first when omitted.

        Returns:
            LedgerView: View over the store's current snapshot.
        """
        criteria = criteria or FilterCriteria()
        sort_spec = sort_spec or SortSpec()
        cache_key = (self._entry_store.revision, criteria, sort_spec)
        if self._cached_view is not None and cache_key == self._cache_key:
            return self._cached_view

        view = build_ledger_view(
            self._entry_store.snapshot(),
            criteria,
            sort_spec,
        )
        self._cache_key = cache_key
        self._cached_view = view
        self._logger.debug(
            f"Recomputed ledger view: {view.count} entries, total={view.total}"
        )
        return view


__all__ = ["LedgerQuery", "build_ledger_view"]
