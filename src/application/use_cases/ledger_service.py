"""Facade exposing ledger operations to presentation adapters."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.use_cases.entry_store import EntryStore
from src.application.use_cases.ledger_query import LedgerQuery
from src.domain.errors import ValidationError
from src.domain.models.entries import DEFAULT_CATEGORY, Category, Entry
from src.domain.models.finance import LedgerView
from src.domain.models.queries import FilterCriteria, SortSpec
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class EntryInput:
    """Raw values captured for a new entry.

    Attributes:
        detail: Description text.
        amount: Amount in the ledger currency.
        category: Category member or label.
        tags: Comma-separated tags.
    """

    detail: str
    amount: Decimal
    category: Category | str = DEFAULT_CATEGORY
    tags: str = ""

    @classmethod
    def from_raw(
        cls,
        detail: str,
        amount,
        category: Category | str = DEFAULT_CATEGORY,
        tags: str | None = "",
    ) -> "EntryInput":
        """Build an input from loosely typed form values.

        Raises:
            ValidationError: If the amount is not numeric.
        """
        try:
            parsed_amount = coerce_decimal(amount)
        except ValueError as exc:
            raise ValidationError("amount", str(exc)) from exc
        return cls(
            detail=detail,
            amount=parsed_amount,
            category=category,
            tags=tags or "",
        )


class LedgerService:
    """Entry point for reading views and mutating the ledger."""

    def __init__(
        self,
        entry_store: EntryStore,
        query: LedgerQuery | None = None,
        logger=None,
    ) -> None:
        self._entry_store = entry_store
        self._logger = logger or get_app_logger()
        self._query = query or LedgerQuery(entry_store, logger=self._logger)

    @property
    def entry_store(self) -> EntryStore:
        return self._entry_store

    def get_view(
        self,
        criteria: FilterCriteria | None = None,
        sort_spec: SortSpec | None = None,
    ) -> LedgerView:
        """Return the filtered, sorted and aggregated view."""
        return self._query.execute(criteria, sort_spec)

    def add_entry(self, entry_input: EntryInput) -> Entry:
        """Create an entry from the input.

        Raises:
            ValidationError: If the input fails the creation checks.
        """
        try:
            return self._entry_store.add(
                detail=entry_input.detail,
                amount=entry_input.amount,
                category=entry_input.category,
                raw_tags=entry_input.tags,
            )
        except ValidationError as exc:
            self._logger.info(f"Rejected entry ({exc.field}): {exc}")
            raise

    def delete_entry(self, entry_id: str) -> None:
        """Delete the entry with the given id, if present."""
        self._entry_store.remove(entry_id)


__all__ = ["EntryInput", "LedgerService"]
