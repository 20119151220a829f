"""Blob store adapters for persisting the ledger."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.blob_store import BlobStorePort
from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.logging.logger import get_app_logger


CREATE_BLOBS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_blobs (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""

SELECT_BLOB_SQL = text("SELECT value FROM ledger_blobs WHERE key = :key")

UPSERT_BLOB_SQL = text(
    """
    INSERT INTO ledger_blobs (key, value)
    VALUES (:key, :value)
    ON CONFLICT (key) DO UPDATE SET value = excluded.value
    """
)


class SqlAlchemyBlobStore(BlobStorePort):
    """Blob store backed by a single SQL table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def read_blob(self, key: str) -> str | None:
        """Return the blob stored under ``key`` or None when absent."""
        engine = self._db_port.get_ledger_engine()
        self._ensure_table(engine)
        with engine.connect() as conn:
            row = conn.execute(SELECT_BLOB_SQL, {"key": key}).first()
        if row is None:
            return None
        return row.value

    def write_blob(self, key: str, value: str) -> bool:
        """Upsert ``value`` under ``key`` in a single transaction.

        Returns:
            bool: False when the database rejected the write.
        """
        try:
            engine = self._db_port.get_ledger_engine()
            self._ensure_table(engine)
            with engine.begin() as conn:
                conn.execute(UPSERT_BLOB_SQL, {"key": key, "value": value})
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to write blob '{key}': {exc}")
            return False
        return True

    def _ensure_table(self, engine) -> None:
        """Create the ledger_blobs table if it does not exist."""
        if self._table_ready:
            return
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_BLOBS_SQL)
        self._table_ready = True


class InMemoryBlobStore(BlobStorePort):
    """Blob store keeping values in a dictionary for the process lifetime."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._blobs: dict[str, str] = dict(initial or {})

    def read_blob(self, key: str) -> str | None:
        return self._blobs.get(key)

    def write_blob(self, key: str, value: str) -> bool:
        self._blobs[key] = value
        return True


__all__ = ["SqlAlchemyBlobStore", "InMemoryBlobStore"]
