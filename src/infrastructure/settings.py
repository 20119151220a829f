"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_BLOB_KEY
from src.infrastructure.logging.logger import get_app_logger


_STORAGE_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for selecting the ledger storage medium.

    Attributes:
        storage: Backend identifier (sqlalchemy or memory).
        db_url: Optional SQLAlchemy URL; the bundled SQLite file when None.
        blob_key: Name of the blob holding the entry collection.
    """

    storage: str = "sqlalchemy"
    db_url: Optional[str] = None
    blob_key: str = DEFAULT_BLOB_KEY

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        storage = os.getenv("LEDGER_STORAGE", "sqlalchemy").strip().lower()
        if storage not in _STORAGE_BACKENDS:
            get_app_logger().warning(
                f"Unknown LEDGER_STORAGE '{storage}', using sqlalchemy"
            )
            storage = "sqlalchemy"
        db_url = (os.getenv("LEDGER_DB_URL") or "").strip() or None
        blob_key = (
            os.getenv("LEDGER_BLOB_KEY") or ""
        ).strip() or DEFAULT_BLOB_KEY
        return cls(storage=storage, db_url=db_url, blob_key=blob_key)


__all__ = ["LedgerSettings"]
