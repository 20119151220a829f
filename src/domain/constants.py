"""Domain constants for the expense ledger."""

DEFAULT_BLOB_KEY = "advanced_transactions"

TAG_SEPARATOR = ","

CHART_PALETTE = (
    "#0088FE",
    "#00C49F",
    "#FFBB28",
    "#FF8042",
    "#8884D8",
    "#82ca9d",
)


__all__ = ["DEFAULT_BLOB_KEY", "TAG_SEPARATOR", "CHART_PALETTE"]
