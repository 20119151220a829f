"""Tests for the ledger query pipeline."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.entry_store import EntryStore
from src.application.use_cases.ledger_query import LedgerQuery, build_ledger_view
from src.domain.models import (
    Category,
    Entry,
    FilterCriteria,
    SortDirection,
    SortKey,
    SortSpec,
)
from src.infrastructure.blob_store import InMemoryBlobStore


def _entry(
    entry_id: str,
    amount: str,
    category: Category,
    minutes: int = 0,
) -> Entry:
    return Entry(
        id=entry_id,
        detail=f"Entry {entry_id}",
        amount=Decimal(amount),
        category=category,
        date=datetime(2024, 1, 1, tzinfo=timezone.utc)
        + timedelta(minutes=minutes),
    )


def test_build_view_aggregates_only_filtered_entries() -> None:
    """Food=30, Travel=50 filtered to Food totals 30."""
    entries = [
        _entry("a", "10", Category.FOOD, 0),
        _entry("b", "50", Category.TRAVEL, 1),
        _entry("c", "20", Category.FOOD, 2),
    ]

    view = build_ledger_view(
        entries,
        FilterCriteria(category=Category.FOOD),
        SortSpec(),
    )

    assert [entry.id for entry in view.entries] == ["c", "a"]
    assert dict(view.by_category) == {Category.FOOD: Decimal("30")}
    assert view.total == Decimal("30")


def test_build_view_totals_match_category_sums() -> None:
    """Grand total equals the sum of category totals."""
    entries = [
        _entry("a", "10", Category.FOOD),
        _entry("b", "5.25", Category.BILLS),
        _entry("c", "7", Category.TRAVEL),
    ]

    view = build_ledger_view(
        entries,
        FilterCriteria(min_amount=Decimal("6")),
        SortSpec(key=SortKey.AMOUNT, direction=SortDirection.ASC),
    )

    assert [entry.id for entry in view.entries] == ["c", "a"]
    assert sum(view.by_category.values(), Decimal("0")) == view.total
    assert view.chart_data() == [
        {"name": "Travel", "value": 7.0},
        {"name": "Food", "value": 10.0},
    ]


def test_build_view_is_deterministic() -> None:
    """Identical inputs produce equal views."""
    entries = [_entry("a", "1", Category.FOOD), _entry("b", "2", Category.FOOD)]
    criteria = FilterCriteria(search_term="entry")

    assert build_ledger_view(entries, criteria, SortSpec()) == build_ledger_view(
        entries,
        criteria,
        SortSpec(),
    )


def _build_store() -> EntryStore:
    ticks = iter(range(1000))
    return EntryStore(
        InMemoryBlobStore(),
        logger=MagicMock(),
        clock=lambda: datetime(2024, 6, 1, tzinfo=timezone.utc)
        + timedelta(seconds=next(ticks)),
    )


def test_query_reuses_view_while_inputs_are_unchanged() -> None:
    """Unchanged store and configuration return the cached view."""
    store = _build_store()
    store.add("Coffee", Decimal("4.5"), Category.FOOD)
    query = LedgerQuery(store, logger=MagicMock())

    first = query.execute(FilterCriteria(), SortSpec())
    second = query.execute(FilterCriteria(), SortSpec())

    assert first is second


def test_query_recomputes_after_store_mutation() -> None:
    """Mutations invalidate the cached view."""
    store = _build_store()
    store.add("Coffee", Decimal("4.5"), Category.FOOD)
    query = LedgerQuery(store, logger=MagicMock())
    before = query.execute()

    added = store.add("Taxi", Decimal("12"), Category.TRAVEL)
    after_add = query.execute()
    store.remove(added.id)
    after_remove = query.execute()

    assert before.total == Decimal("4.5")
    assert after_add.total == Decimal("16.5")
    assert after_add.entries[0] == added
    assert after_remove.total == Decimal("4.5")


def test_query_recomputes_when_configuration_changes() -> None:
    """A different filter or sort produces a fresh view."""
    store = _build_store()
    store.add("Coffee", Decimal("4.5"), Category.FOOD)
    store.add("Taxi", Decimal("12"), Category.TRAVEL)
    query = LedgerQuery(store, logger=MagicMock())

    all_view = query.execute()
    travel_view = query.execute(FilterCriteria(category=Category.TRAVEL))
    by_amount = query.execute(
        sort_spec=SortSpec(key=SortKey.AMOUNT, direction=SortDirection.ASC)
    )

    assert all_view.count == 2
    assert travel_view.count == 1
    assert [entry.detail for entry in by_amount.entries] == ["Coffee", "Taxi"]
