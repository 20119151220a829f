"""Domain normalization helpers."""

from src.domain.constants import TAG_SEPARATOR


def parse_tags(raw_tags: str | None) -> tuple[str, ...]:
    """Split a comma-separated tag string into clean tags.

    Args:
        raw_tags: Raw user input such as ``"drink, morning"``.

    Returns:
        tuple[str, ...]: Trimmed, non-empty tags in input order.
    """
    if not raw_tags:
        return ()
    tags = (tag.strip() for tag in raw_tags.split(TAG_SEPARATOR))
    return tuple(tag for tag in tags if tag)


def normalize_search_term(term: str | None) -> str | None:
    """Lower-case a search term, returning None when it is blank.

    Args:
        term: Raw search input.

    Returns:
        str | None: Normalized term, or None when there is nothing to match.
    """
    if term is None:
        return None
    cleaned = term.strip()
    return cleaned.lower() if cleaned else None


__all__ = ["parse_tags", "normalize_search_term"]
