"""JSON codec for the persisted entry collection.

The blob is a JSON array of objects with ``id``, ``detail``, ``amount``,
``category``, ``date`` (ISO-8601) and ``tags`` fields, in insertion order.
"""

from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import simplejson

from src.domain.errors import MalformedPersistedData
from src.domain.models.entries import Category, Entry
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: Any) -> datetime:
    if not isinstance(value, str):
        raise MalformedPersistedData(f"Invalid date value: {value!r}")
    raw = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise MalformedPersistedData(f"Invalid date value: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def entry_to_record(entry: Entry) -> dict[str, Any]:
    """Convert an entry into a JSON-ready record."""
    return {
        "id": entry.id,
        "detail": entry.detail,
        "amount": entry.amount,
        "category": entry.category.value,
        "date": entry.date.isoformat(),
        "tags": list(entry.tags),
    }


def record_to_entry(record: Any) -> Entry:
    """Convert a decoded JSON record into an entry.

    Raises:
        MalformedPersistedData: If the record does not match the schema.
    """
    if not isinstance(record, dict):
        raise MalformedPersistedData(
            f"Entry record is not an object: {record!r}"
        )
    try:
        entry_id = record["id"]
        detail = record["detail"]
        amount = record["amount"]
        category = Category(record["category"])
        date = _parse_date(record["date"])
    except KeyError as exc:
        raise MalformedPersistedData(f"Missing entry field: {exc}") from exc
    except ValueError as exc:
        raise MalformedPersistedData(str(exc)) from exc
    tags = record.get("tags") or []
    if not isinstance(entry_id, str) or not isinstance(detail, str):
        raise MalformedPersistedData(f"Invalid id or detail in {record!r}")
    if not isinstance(amount, Decimal):
        raise MalformedPersistedData(f"Invalid amount in {record!r}")
    if not isinstance(tags, list) or not all(
        isinstance(tag, str) for tag in tags
    ):
        raise MalformedPersistedData(f"Invalid tags in {record!r}")
    return Entry(
        id=entry_id,
        detail=detail,
        amount=amount,
        category=category,
        date=date,
        tags=tuple(tags),
    )


def encode_entries(entries: Sequence[Entry]) -> str:
    """Serialize entries into the persisted JSON blob."""
    return simplejson.dumps(
        [entry_to_record(entry) for entry in entries],
        use_decimal=True,
    )


def decode_entries(payload: str, logger=None) -> list[Entry]:
    """Deserialize the persisted JSON blob.

    Amounts are written and read as Decimal, so stored values round-trip
    digit for digit. Records repeating an earlier id are dropped with a
    warning.

    Args:
        payload: Stored JSON text.
        logger: Optional logger compatible with logging.Logger-like API.

    Raises:
        MalformedPersistedData: If the payload is not a valid entry array.
    """
    try:
        records = simplejson.loads(
            payload,
            use_decimal=True,
            parse_int=Decimal,
        )
    except (TypeError, ValueError) as exc:
        raise MalformedPersistedData(
            f"Ledger blob is not JSON: {exc}"
        ) from exc
    if not isinstance(records, list):
        raise MalformedPersistedData("Ledger blob is not a JSON array")
    entries: list[Entry] = []
    seen_ids: set[str] = set()
    for record in records:
        entry = record_to_entry(record)
        if entry.id in seen_ids:
            (logger or get_app_logger()).warning(
                f"Dropping stored entry with duplicate id {entry.id}"
            )
            continue
        seen_ids.add(entry.id)
        entries.append(entry)
    return entries


class JsonEntryCodec:
    """EntryCodecPort implementation using the JSON blob layout."""

    def __init__(self, logger=None) -> None:
        self._logger = logger

    def encode(self, entries: Sequence[Entry]) -> str:
        return encode_entries(entries)

    def decode(self, payload: str) -> list[Entry]:
        return decode_entries(payload, logger=self._logger)


__all__ = [
    "JsonEntryCodec",
    "decode_entries",
    "encode_entries",
    "entry_to_record",
    "record_to_entry",
]
