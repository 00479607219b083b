"""Adapters - I/O implementations of ports."""

from .json_store import (
    JsonEntryStore,
    StoreError,
    StoreOpenError,
    StoreWriteError,
    StoreLockError,
)

__all__ = [
    "JsonEntryStore",
    "StoreError",
    "StoreOpenError",
    "StoreWriteError",
    "StoreLockError",
]
