"""Port for the key-value blob storage medium."""

from typing import Protocol


class BlobStorePort(Protocol):
    """Port exposing string blobs stored under named keys."""

    def read_blob(self, key: str) -> str | None:
        """Return the blob stored under ``key`` or None when absent."""

    def write_blob(self, key: str, value: str) -> bool:
        """Store ``value`` under ``key`` and report whether it succeeded."""


__all__ = ["BlobStorePort"]
