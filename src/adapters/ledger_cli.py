"""CLI adapter to add, delete and list ledger entries.

This module wires the LedgerService to the configured storage and exposes
``add``, ``delete`` and ``list`` subcommands.
"""

import argparse
from collections.abc import Sequence
from decimal import Decimal

from src.application.use_cases.ledger_service import EntryInput, LedgerService
from src.domain.errors import ValidationError
from src.domain.models.entries import Category
from src.domain.models.finance import LedgerView
from src.domain.models.queries import (
    FilterCriteria,
    SortDirection,
    SortKey,
    SortSpec,
)
from src.infrastructure.container import build_ledger_service
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


def _amount_bound(raw: str) -> Decimal:
    """Parse a --min-amount or --max-amount value."""
    try:
        value = coerce_decimal(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from exc
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"not a finite amount: {raw!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger",
        description="Query and edit the personal expense ledger.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add a new entry")
    add_parser.add_argument("detail")
    add_parser.add_argument("amount")
    add_parser.add_argument(
        "--category",
        choices=Category.labels(),
        default=Category.OTHER.value,
    )
    add_parser.add_argument("--tags", default="", help="Comma-separated tags")

    delete_parser = subparsers.add_parser("delete", help="Delete an entry")
    delete_parser.add_argument("entry_id")

    list_parser = subparsers.add_parser("list", help="List entries")
    list_parser.add_argument("--category", choices=Category.labels())
    list_parser.add_argument("--min-amount", type=_amount_bound)
    list_parser.add_argument("--max-amount", type=_amount_bound)
    list_parser.add_argument("--search")
    list_parser.add_argument(
        "--sort",
        choices=[key.value for key in SortKey],
        default=SortKey.DATE.value,
    )
    list_parser.add_argument(
        "--order",
        choices=[direction.value for direction in SortDirection],
        default=SortDirection.DESC.value,
    )
    return parser


def _criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria(
        category=Category(args.category) if args.category else None,
        min_amount=args.min_amount,
        max_amount=args.max_amount,
        search_term=args.search or None,
    )


def _print_view(view: LedgerView) -> None:
    """Print entries followed by category and grand totals."""
    print(f"Transactions ({view.count})")
    for entry in view.entries:
        tags = f" [{', '.join(entry.tags)}]" if entry.tags else ""
        print(
            f"{entry.date.date().isoformat()} - {entry.category.value}: "
            f"{entry.detail} ${entry.amount:,.2f}{tags}  ({entry.id})"
        )
    for category, amount in view.by_category.items():
        print(f"  {category.value}: {amount:,.2f}")
    print(f"Total: ${view.total:,.2f}")


def main(
    argv: Sequence[str] | None = None,
    service: LedgerService | None = None,
) -> int:
    """Run the ledger CLI.

    Args:
        argv: Command-line arguments, ``sys.argv[1:]`` when None.
        service: Ledger service, built from settings when None.

    Returns:
        int: Process exit code.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    ledger = service or build_ledger_service()

    if args.command == "add":
        try:
            entry = ledger.add_entry(
                EntryInput.from_raw(
                    detail=args.detail,
                    amount=args.amount,
                    category=args.category,
                    tags=args.tags,
                )
            )
        except ValidationError as exc:
            logger.warning(f"Entry rejected: {exc}")
            print(f"Invalid {exc.field}: {exc}")
            return 1
        print(f"Added entry {entry.id}")
        return 0

    if args.command == "delete":
        ledger.delete_entry(args.entry_id)
        print(f"Deleted entry {args.entry_id}")
        return 0

    view = ledger.get_view(
        _criteria_from_args(args),
        SortSpec(key=SortKey(args.sort), direction=SortDirection(args.order)),
    )
    _print_view(view)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
