"""Database infrastructure for the expense ledger.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine backing ledger storage. It belongs to the infrastructure layer because
it deals with external systems (SQLite or any SQLAlchemy-supported database).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from src.application.ports.database import DatabaseEnginePort
from src.utils.utils import get_project_root


def _get_env_var(name: str, default: str | None = None) -> str:
    """Read an environment variable, loading ``.env`` first.

    Args:
        name: Name of the environment variable to read.
        default: Value returned when the variable is missing or empty.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the variable is missing and no default is given.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if value:
        return value
    if default is not None:
        return default
    raise RuntimeError(f"Missing environment variable: {name}")


def default_ledger_db_url() -> str:
    """Return the SQLite URL used when LEDGER_DB_URL is not set."""
    data_dir = get_project_root() / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / 'ledger.db'}"


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine with connection health checks enabled.
    """
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the ledger database.

    Returns:
        Engine: Lazily initialized engine connected to the ledger database.
    """
    global _ledger_engine
    if _ledger_engine is None:
        db_url = _get_env_var("LEDGER_DB_URL", default="")
        _ledger_engine = _create_engine(db_url or default_ledger_db_url())
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details behind the port so application
    code can depend only on the protocol. An explicit URL bypasses the
    environment and the shared engine.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger database.
        """
        if self._db_url is None:
            return get_ledger_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "default_ledger_db_url",
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
