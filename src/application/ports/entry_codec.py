"""Port for serializing the entry collection."""

from collections.abc import Sequence
from typing import Protocol

from src.domain.models.entries import Entry


class EntryCodecPort(Protocol):
    """Port converting entry collections to and from stored text."""

    def encode(self, entries: Sequence[Entry]) -> str:
        """Serialize the entries in order."""

    def decode(self, payload: str) -> list[Entry]:
        """Deserialize entries, raising MalformedPersistedData on bad input."""


__all__ = ["EntryCodecPort"]
