"""Entry storage interface."""

from contextlib import AbstractContextManager
from typing import Protocol

from ..core.entries import Entry


class EntryStore(Protocol):
    """Interface for loading and persisting the full entry collection."""

    def load(self) -> list[Entry]:
        """Read all entries in insertion order. Unparseable content reads as empty."""
        ...

    def save(self, entries: list[Entry]) -> None:
        """Replace the stored collection with `entries`."""
        ...

    def locked(self) -> AbstractContextManager[None]:
        """Hold exclusive access for a read-modify-write cycle."""
        ...
