"""Tests for the JSON entry codec."""

from datetime import datetime, timezone
from decimal import Decimal
import json
from unittest.mock import MagicMock

import pytest

from src.domain.errors import MalformedPersistedData
from src.domain.models import Category, Entry
from src.infrastructure.entry_codec import (
    JsonEntryCodec,
    decode_entries,
    encode_entries,
)


def _entries() -> list[Entry]:
    return [
        Entry(
            id="b7c1",
            detail="Rent",
            amount=Decimal("500"),
            category=Category.BILLS,
            date=datetime(2024, 2, 1, 9, 30, tzinfo=timezone.utc),
        ),
        Entry(
            id="a3f9",
            detail="Coffee",
            amount=Decimal("4.5"),
            category=Category.FOOD,
            date=datetime(2024, 2, 2, 7, 15, 12, 345000, tzinfo=timezone.utc),
            tags=("drink", "morning"),
        ),
    ]


def test_decode_of_encoded_collection_is_equal_and_ordered() -> None:
    """Encoding then decoding reproduces the collection in order."""
    entries = _entries()

    assert decode_entries(encode_entries(entries)) == entries


def test_encode_writes_expected_layout() -> None:
    """Records expose id, detail, amount, category, date and tags."""
    records = json.loads(encode_entries(_entries()[:1]))

    assert records == [
        {
            "id": "b7c1",
            "detail": "Rent",
            "amount": 500,
            "category": "Bills",
            "date": "2024-02-01T09:30:00+00:00",
            "tags": [],
        }
    ]


def test_decode_accepts_browser_style_payload() -> None:
    """Zulu timestamps and missing tags are accepted."""
    payload = json.dumps(
        [
            {
                "id": "1",
                "detail": "Taxi fare",
                "amount": 12.75,
                "category": "Travel",
                "date": "2024-04-01T10:00:00.000Z",
            }
        ]
    )

    (entry,) = JsonEntryCodec().decode(payload)

    assert entry.amount == Decimal("12.75")
    assert entry.category is Category.TRAVEL
    assert entry.date == datetime(2024, 4, 1, 10, 0, tzinfo=timezone.utc)
    assert entry.tags == ()


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        '{"id": "1"}',
        '[{"id": "1"}]',
        '[{"id": "1", "detail": "x", "amount": "5", "category": "Food",'
        ' "date": "2024-01-01T00:00:00+00:00", "tags": []}]',
        '[{"id": "1", "detail": "x", "amount": 5, "category": "Groceries",'
        ' "date": "2024-01-01T00:00:00+00:00", "tags": []}]',
        '[{"id": "1", "detail": "x", "amount": 5, "category": "Food",'
        ' "date": "yesterday", "tags": []}]',
        '[{"id": "1", "detail": "x", "amount": 5, "category": "Food",'
        ' "date": "2024-01-01T00:00:00+00:00", "tags": [1]}]',
        "[1]",
    ],
)
def test_decode_rejects_malformed_payloads(payload: str) -> None:
    """Anything outside the entry schema raises MalformedPersistedData."""
    with pytest.raises(MalformedPersistedData):
        decode_entries(payload)


def test_amounts_keep_every_digit_through_the_blob() -> None:
    """High-precision amounts are stored and read back digit for digit."""
    entry = Entry(
        id="c001",
        detail="Bond coupon",
        amount=Decimal("1234567.123456789012"),
        category=Category.OTHER,
        date=datetime(2024, 3, 1, tzinfo=timezone.utc),
    )

    payload = encode_entries([entry])
    (decoded,) = decode_entries(payload)

    assert '"amount": 1234567.123456789012' in payload
    assert decoded.amount == Decimal("1234567.123456789012")
    assert str(decoded.amount) == "1234567.123456789012"


def test_decode_keeps_first_record_for_duplicate_ids() -> None:
    """A repeated id is dropped with a warning; the first record wins."""
    payload = json.dumps(
        [
            {
                "id": "dup",
                "detail": "Rent",
                "amount": 500,
                "category": "Bills",
                "date": "2024-02-01T09:30:00+00:00",
                "tags": [],
            },
            {
                "id": "dup",
                "detail": "Rent again",
                "amount": 700,
                "category": "Bills",
                "date": "2024-02-02T09:30:00+00:00",
                "tags": [],
            },
        ]
    )
    logger = MagicMock()

    entries = JsonEntryCodec(logger=logger).decode(payload)

    assert [(entry.id, entry.detail) for entry in entries] == [("dup", "Rent")]
    logger.warning.assert_called_once()
    assert "dup" in logger.warning.call_args[0][0]
