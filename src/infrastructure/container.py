"""Composition root for wiring infrastructure adapters."""

from src.application.ports.blob_store import BlobStorePort
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.entry_store import EntryStore
from src.application.use_cases.ledger_service import LedgerService
from src.infrastructure.blob_store import (
    InMemoryBlobStore,
    SqlAlchemyBlobStore,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.entry_codec import JsonEntryCodec
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or LedgerSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(db_url=resolved.db_url)


def build_blob_store(
    settings: LedgerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> BlobStorePort:
    """Return the configured blob store."""
    resolved = settings or LedgerSettings.from_env()
    if resolved.storage == "memory":
        return InMemoryBlobStore()
    resolved_db = db_port or build_database_adapter(resolved)
    return SqlAlchemyBlobStore(resolved_db, logger=get_app_logger())


def build_entry_store(
    settings: LedgerSettings | None = None,
    blob_store: BlobStorePort | None = None,
) -> EntryStore:
    """Return an entry store loaded from the configured storage."""
    resolved = settings or LedgerSettings.from_env()
    store = EntryStore(
        blob_store or build_blob_store(resolved),
        key=resolved.blob_key,
        codec=JsonEntryCodec(logger=get_app_logger()),
        logger=get_app_logger(),
    )
    store.load()
    return store


def build_ledger_service(
    settings: LedgerSettings | None = None,
    blob_store: BlobStorePort | None = None,
) -> LedgerService:
    """Return the ledger service over a freshly loaded entry store."""
    entry_store = build_entry_store(settings, blob_store=blob_store)
    return LedgerService(entry_store, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_blob_store",
    "build_entry_store",
    "build_ledger_service",
]
