"""Application ports package."""

from .blob_store import BlobStorePort
from .database import DatabaseEnginePort
from .entry_codec import EntryCodecPort

__all__ = [
    "BlobStorePort",
    "DatabaseEnginePort",
    "EntryCodecPort",
]
