"""Durable, write-through collection of ledger entries.

The store owns the canonical list of entries. It loads the persisted blob
once at startup and serializes the full collection back to the storage
medium after every mutation. Storage problems never cost the in-memory
state: unreadable data starts an empty ledger and failed writes are reported
as warnings and retried on the next mutation.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable
import uuid
import warnings

from src.application.ports.blob_store import BlobStorePort
from src.application.ports.entry_codec import EntryCodecPort
from src.domain.constants import DEFAULT_BLOB_KEY
from src.domain.errors import MalformedPersistedData, PersistenceWarning
from src.domain.models.entries import DEFAULT_CATEGORY, Category, Entry
from src.domain.services.normalization import parse_tags
from src.domain.services.validation import (
    validate_amount,
    validate_category,
    validate_detail,
)
from src.infrastructure.entry_codec import JsonEntryCodec
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_entry_id() -> str:
    return str(uuid.uuid4())


class EntryStore:
    """In-memory ledger entries backed by a blob store."""

    def __init__(
        self,
        blob_store: BlobStorePort,
        key: str = DEFAULT_BLOB_KEY,
        codec: EntryCodecPort | None = None,
        logger=None,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_entry_id,
    ) -> None:
        """Initialize an empty store.

        Args:
            blob_store: Storage medium holding the serialized collection.
            key: Name of the blob holding the collection.
            codec: Serializer for the collection, JSON by default.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Source of creation timestamps.
            id_factory: Source of fresh entry identifiers.
        """
        self._blob_store = blob_store
        self._key = key
        self._logger = logger or get_app_logger()
        self._codec = codec or JsonEntryCodec(logger=self._logger)
        self._clock = clock
        self._id_factory = id_factory
        self._entries: list[Entry] = []
        self._revision = 0
        self.last_persistence_error: str | None = None

    @property
    def revision(self) -> int:
        """Counter bumped on every change to the collection."""
        return self._revision

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> tuple[Entry, ...]:
        """Replace the collection with the persisted one.

        Missing, unreadable or malformed data yields an empty collection.

        Returns:
            tuple[Entry, ...]: The loaded collection.
        """
        entries: list[Entry] = []
        try:
            payload = self._blob_store.read_blob(self._key)
        except Exception as exc:
            self._logger.warning(
                f"Could not read ledger blob '{self._key}': {exc}"
            )
            payload = None
        if payload is not None:
            try:
                entries = self._codec.decode(payload)
            except MalformedPersistedData as exc:
                self._logger.warning(
                    f"Discarding malformed ledger blob '{self._key}': {exc}"
                )
                entries = []
        self._entries = entries
        self._revision += 1
        self._logger.info(f"Loaded {len(entries)} ledger entries")
        return self.snapshot()

    def add(
        self,
        detail: str,
        amount: Decimal,
        category: Category | str = DEFAULT_CATEGORY,
        raw_tags: str | None = "",
    ) -> Entry:
        """Create, append and persist a new entry.

        Args:
            detail: Non-blank description.
            amount: Strictly positive amount.
            category: Category member or label.
            raw_tags: Comma-separated tags.

        Returns:
            Entry: The created entry.

        Raises:
            ValidationError: If detail, amount or category is invalid. The
                collection is left unchanged.
        """
        entry = Entry(
            id=self._fresh_id(),
            detail=validate_detail(detail),
            amount=validate_amount(amount),
            category=validate_category(category),
            date=self._clock(),
            tags=parse_tags(raw_tags),
        )
        self._entries.append(entry)
        self._revision += 1
        self._logger.info(
            f"Added entry {entry.id} ({entry.category.value}, {entry.amount})"
        )
        self._persist()
        return entry

    def remove(self, entry_id: str) -> bool:
        """Remove the entry with the given id and persist the collection.

        Unknown ids are a no-op.

        Returns:
            bool: True when an entry was removed.
        """
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        removed = len(remaining) != len(self._entries)
        if removed:
            self._entries = remaining
            self._revision += 1
            self._logger.info(f"Removed entry {entry_id}")
        else:
            self._logger.debug(f"No entry with id {entry_id} to remove")
        self._persist()
        return removed

    def snapshot(self) -> tuple[Entry, ...]:
        """Return the collection in insertion order."""
        return tuple(self._entries)

    def _fresh_id(self) -> str:
        existing = {entry.id for entry in self._entries}
        entry_id = self._id_factory()
        while entry_id in existing:
            entry_id = self._id_factory()
        return entry_id

    def _persist(self) -> bool:
        """Write the full collection to the blob store.

        Returns:
            bool: True when the write succeeded.
        """
        payload = self._codec.encode(self._entries)
        try:
            written = self._blob_store.write_blob(self._key, payload)
            reason = None if written else "storage rejected the write"
        except Exception as exc:
            written = False
            reason = str(exc)
        if written:
            self.last_persistence_error = None
            return True
        message = (
            f"Failed to persist {len(self._entries)} ledger entries "
            f"to '{self._key}': {reason}"
        )
        self.last_persistence_error = message
        self._logger.warning(message)
        warnings.warn(message, PersistenceWarning, stacklevel=3)
        return False


__all__ = ["EntryStore"]
