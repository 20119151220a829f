"""Application use cases package."""

from .entry_store import EntryStore
from .ledger_query import LedgerQuery, build_ledger_view
from .ledger_service import EntryInput, LedgerService

__all__ = [
    "EntryStore",
    "EntryInput",
    "LedgerQuery",
    "LedgerService",
    "build_ledger_view",
]
