"""Domain validation helpers."""

from decimal import Decimal

from src.domain.errors import ValidationError
from src.domain.models.entries import Category
from src.utils.decimal_utils import coerce_decimal


def validate_detail(detail: str | None) -> str:
    """Return the detail text when it is not blank.

    Raises:
        ValidationError: If the detail is empty or whitespace-only.
    """
    if detail is None or not detail.strip():
        raise ValidationError("detail", "Detail must not be blank.")
    return detail


def validate_amount(amount) -> Decimal:
    """Return the amount as a finite, strictly positive Decimal.

    Integers, floats and numeric strings are accepted and converted.

    Raises:
        ValidationError: If the amount is zero, negative, not finite or not
            a number.
    """
    if isinstance(amount, bool):
        raise ValidationError("amount", f"Amount is not a number: {amount}")
    try:
        value = coerce_decimal(amount)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            "amount",
            f"Amount is not a number: {amount!r}",
        ) from exc
    if not value.is_finite():
        raise ValidationError("amount", f"Amount is not a number: {amount}")
    if value <= 0:
        raise ValidationError(
            "amount",
            f"Amount must be strictly positive, got {value}.",
        )
    return value


def validate_category(category: Category | str) -> Category:
    """Return the category member for a label of the closed set.

    Raises:
        ValidationError: If the label is unknown.
    """
    try:
        return Category.parse(category)
    except ValueError as exc:
        raise ValidationError(
            "category",
            f"Unknown category {category!r}; "
            f"expected one of {', '.join(Category.labels())}.",
        ) from exc


__all__ = ["validate_detail", "validate_amount", "validate_category"]
