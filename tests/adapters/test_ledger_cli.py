"""Tests for the ledger_cli adapter."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from src.adapters import ledger_cli
from src.application.use_cases.entry_store import EntryStore
from src.application.use_cases.ledger_service import LedgerService
from src.infrastructure.blob_store import InMemoryBlobStore


@pytest.fixture
def service(monkeypatch) -> LedgerService:
    monkeypatch.setattr(ledger_cli, "get_app_logger", lambda: MagicMock())
    ticks = iter(range(1000))
    store = EntryStore(
        InMemoryBlobStore(),
        logger=MagicMock(),
        clock=lambda: datetime(2024, 7, 1, tzinfo=timezone.utc)
        + timedelta(minutes=next(ticks)),
    )
    return LedgerService(store, logger=MagicMock())


def test_add_prints_new_entry_id(service, capsys) -> None:
    """add should create the entry and print its id."""
    code = ledger_cli.main(
        ["add", "Coffee", "4.5", "--category", "Food", "--tags", "drink"],
        service=service,
    )

    (entry,) = service.get_view().entries
    assert code == 0
    assert entry.detail == "Coffee"
    assert entry.id in capsys.readouterr().out


def test_add_reports_validation_errors(service, capsys) -> None:
    """Invalid amounts are reported with a non-zero exit code."""
    code = ledger_cli.main(["add", "Coffee", "0"], service=service)

    assert code == 1
    assert "amount" in capsys.readouterr().out
    assert service.get_view().count == 0


def test_list_filters_sorts_and_totals(service, capsys) -> None:
    """list should print filtered entries and their totals."""
    ledger_cli.main(
        ["add", "Taxi fare", "12", "--category", "Travel"],
        service=service,
    )
    ledger_cli.main(["add", "Lunch", "30", "--category", "Food"], service=service)
    ledger_cli.main(
        ["add", "Bus", "3", "--category", "Travel", "--tags", "taxi"],
        service=service,
    )
    capsys.readouterr()

    code = ledger_cli.main(
        ["list", "--search", "taxi", "--sort", "amount", "--order", "asc"],
        service=service,
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "Transactions (2)" in out
    assert out.index("Bus") < out.index("Taxi fare")
    assert "Lunch" not in out
    assert "Total: $15.00" in out


def test_delete_removes_entry(service, capsys) -> None:
    """delete should remove the entry from subsequent views."""
    ledger_cli.main(
        ["add", "Rent", "500", "--category", "Bills"],
        service=service,
    )
    (entry,) = service.get_view().entries

    code = ledger_cli.main(["delete", entry.id], service=service)

    assert code == 0
    assert service.get_view().count == 0


def test_main_builds_service_when_not_given(monkeypatch, capsys) -> None:
    """Without a service the CLI wires one from the container."""
    fake_service = MagicMock()
    fake_service.get_view.return_value.entries = ()
    fake_service.get_view.return_value.count = 0
    fake_service.get_view.return_value.by_category = {}
    fake_service.get_view.return_value.total = 0
    monkeypatch.setattr(ledger_cli, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(ledger_cli, "build_ledger_service", lambda: fake_service)

    assert ledger_cli.main(["list"]) == 0
    fake_service.get_view.assert_called_once()


@pytest.mark.parametrize("bound", ["nan", "inf", "-Infinity", "ten"])
def test_list_rejects_non_finite_or_junk_amount_bounds(
    service,
    capsys,
    bound,
) -> None:
    """Bounds that are not finite numbers are usage errors."""
    with pytest.raises(SystemExit) as excinfo:
        ledger_cli.main(["list", "--min-amount", bound], service=service)

    assert excinfo.value.code == 2
    assert "not a" in capsys.readouterr().err
