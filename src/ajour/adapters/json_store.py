"""JSON file entry storage adapter."""

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import portalocker

from ..core.entries import Entry
from ..locking import atomic_write, file_lock

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for store failures."""

    pass


class StoreOpenError(StoreError):
    """Raised when the store file cannot be created or read."""

    pass


class StoreWriteError(StoreError):
    """Raised when rewriting the store file fails."""

    pass


class StoreLockError(StoreError):
    """Raised when another process holds the store lock for too long."""

    pass


class JsonEntryStore:
    """
    Whole-file JSON entry storage.

    Implements EntryStore protocol. The file holds a single array of
    {"timestamp": <epoch seconds>, "message": <text>} records in insertion order.
    """

    def __init__(self, path: Path | str, lock_timeout: float = 10.0):
        self.path = Path(path).expanduser()
        self.lock_timeout = lock_timeout

    def _ensure_exists(self) -> None:
        """Create the store (and its directory) empty if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as e:
            raise StoreOpenError(f"Unable to open file: {self.path} ({e})") from e

    def load(self) -> list[Entry]:
        """Read all entries. Content that doesn't parse reads as an empty store."""
        self._ensure_exists()
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StoreOpenError(f"Unable to open file: {self.path} ({e})") from e

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            entries = [Entry.from_record(item) for item in data]
        except (ValueError, TypeError, KeyError, OverflowError, RecursionError) as e:
            logger.debug(f"Ignoring unparseable store {self.path}: {e}")
            return []

        logger.debug(f"Loaded {len(entries)} entries from {self.path}")
        return entries

    def save(self, entries: list[Entry]) -> None:
        """Atomically replace the store contents with `entries`."""
        try:
            with atomic_write(self.path) as f:
                json.dump([e.to_record() for e in entries], f)
        except OSError as e:
            raise StoreWriteError(f"Unable to write file: {self.path} ({e})") from e
        logger.debug(f"Saved {len(entries)} entries to {self.path}")

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the store lock for a load/append/save cycle."""
        try:
            with file_lock(self.path, timeout=self.lock_timeout):
                yield
        except portalocker.LockException as e:
            raise StoreLockError(
                f"Timed out after {self.lock_timeout}s waiting for lock on {self.path}"
            ) from e
        except OSError as e:
            raise StoreOpenError(f"Unable to lock file: {self.path} ({e})") from e
