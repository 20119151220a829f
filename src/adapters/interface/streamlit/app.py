"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.ledger_service import EntryInput, LedgerService
from src.domain.constants import CHART_PALETTE
from src.domain.errors import ValidationError
from src.domain.models.entries import Category, Entry
from src.domain.models.finance import LedgerView
from src.domain.models.queries import (
    FilterCriteria,
    SortDirection,
    SortKey,
    SortSpec,
)
from src.infrastructure.container import build_ledger_service
from src.infrastructure.logging.logger import get_usage_logger


_ALL_CATEGORIES = "All Categories"


def _build_service() -> LedgerService:
    """Build the ledger service from environment settings."""
    return build_ledger_service()


@st.cache_resource(show_spinner=False)
def _load_service() -> LedgerService:
    """Cached wrapper around _build_service shared across reruns."""
    return _build_service()


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas are usable before charting.

    Returns:
        tuple[bool, str | None]: Status and an error message when broken.
    """
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (missing Timestamp)."
    return True, None


def _format_currency(value: Decimal) -> str:
    """Format amounts for display."""
    return f"${value:,.2f}"


def _parse_optional_amount(raw: str) -> Decimal | None:
    """Parse a bound typed by the user; blank or zero means no bound."""
    cleaned = (raw or "").strip()
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except ArithmeticError:
        return None
    if not value.is_finite() or value == 0:
        return None
    return value


def _criteria_from_inputs(
    category_label: str,
    min_amount: str,
    max_amount: str,
    search_term: str,
) -> FilterCriteria:
    """Translate raw filter widgets into filter criteria."""
    category = (
        None
        if category_label == _ALL_CATEGORIES
        else Category(category_label)
    )
    return FilterCriteria(
        category=category,
        min_amount=_parse_optional_amount(min_amount),
        max_amount=_parse_optional_amount(max_amount),
        search_term=search_term.strip() or None,
    )


def _entry_rows(entries: Sequence[Entry]) -> list[dict[str, str]]:
    """Return table rows for the entries list."""
    return [
        {
            "Date": entry.date.date().isoformat(),
            "Category": entry.category.value,
            "Detail": entry.detail,
            "Amount": _format_currency(entry.amount),
            "Tags": ", ".join(entry.tags),
        }
        for entry in entries
    ]


def _prepare_donut_chart_data(
    view: LedgerView,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows with amount and share labels.

    Args:
        view: Ledger view whose category totals are charted.

    Returns:
        list[dict[str, str | float]]: One row per category in the view.
    """
    data: list[dict[str, str | float]] = []
    for category, amount in view.by_category.items():
        share = (
            (amount / view.total) * Decimal("100")
            if view.total
            else Decimal("0")
        )
        data.append(
            {
                "category": category.value,
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_add_form(service: LedgerService) -> None:
    """Render the entry form and add the submitted entry."""
    with st.form("add_entry", clear_on_submit=True):
        detail_col, amount_col, category_col, tags_col = st.columns(4)
        detail = detail_col.text_input("Description")
        amount = amount_col.number_input("Amount", min_value=0.0, step=1.0)
        category = category_col.selectbox(
            "Category",
            options=Category.labels(),
            index=Category.labels().index(Category.OTHER.value),
        )
        tags = tags_col.text_input("Tags (comma-separated)")
        submitted = st.form_submit_button("Add Transaction")

    if not submitted:
        return
    try:
        entry = service.add_entry(
            EntryInput.from_raw(
                detail=detail,
                amount=str(amount),
                category=category,
                tags=tags,
            )
        )
    except ValidationError:
        st.error("Please fill all required fields with valid values")
        return
    get_usage_logger().info(f"add_entry id={entry.id}")
    if service.entry_store.last_persistence_error:
        st.warning("Saved in this session only; storage is unavailable.")


def _render_filters() -> tuple[FilterCriteria, SortSpec]:
    """Render filter and sort widgets and return their configuration."""
    cols = st.columns(6)
    category_label = cols[0].selectbox(
        "Category filter",
        options=[_ALL_CATEGORIES] + Category.labels(),
    )
    min_amount = cols[1].text_input("Min Amount")
    max_amount = cols[2].text_input("Max Amount")
    search_term = cols[3].text_input("Search...")
    sort_key = cols[4].selectbox(
        "Sort by",
        options=[key.value for key in SortKey],
        format_func=str.capitalize,
    )
    descending = cols[5].toggle("Descending", value=True)
    criteria = _criteria_from_inputs(
        category_label,
        min_amount,
        max_amount,
        search_term,
    )
    sort_spec = SortSpec(
        key=SortKey(sort_key),
        direction=SortDirection.DESC if descending else SortDirection.ASC,
    )
    return criteria, sort_spec


def _render_entries(service: LedgerService, view: LedgerView) -> None:
    """Render the filtered entries with a delete action."""
    st.subheader(f"Transactions ({view.count})")
    if not view.entries:
        st.info("No transactions match the current filters.")
        return
    st.dataframe(
        _entry_rows(view.entries),
        width="stretch",
        hide_index=True,
        height=300,
    )
    labels = {
        entry.id: f"{entry.detail} ({_format_currency(entry.amount)})"
        for entry in view.entries
    }
    to_delete = st.selectbox(
        "Delete transaction",
        options=list(labels),
        format_func=labels.get,
    )
    if st.button("Delete"):
        service.delete_entry(to_delete)
        get_usage_logger().info(f"delete_entry id={to_delete}")
        st.rerun()


def _render_category_chart(
    view: LedgerView,
    chart_size: int = 300,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of the view's totals by category.

    Args:
        view: Ledger view to chart.
        chart_size: Width/height for the chart canvas.
        palette: Optional color palette override.
    """
    if not view.by_category:
        st.info("No amounts available for the chart.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    data = _prepare_donut_chart_data(view)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(palette or CHART_PALETTE)),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Expense Dashboard", layout="wide")
    st.title("Advanced Expense Dashboard")

    service = _load_service()
    _render_add_form(service)
    criteria, sort_spec = _render_filters()
    view = service.get_view(criteria, sort_spec)
    _render_entries(service, view)

    total_col, chart_col = st.columns(2)
    with total_col:
        st.subheader(f"Total: {_format_currency(view.total)}")
    with chart_col:
        _render_category_chart(view)


if __name__ == "__main__":  # pragma: no cover
    main()
