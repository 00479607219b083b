"""Shared workflow layer between the CLI and the store.

Each function runs one linear transaction: load, then either mutate and
persist, or filter (and aggregate) for display.
"""

import logging
from datetime import datetime, tzinfo

from .adapters.json_store import JsonEntryStore
from .config import Config
from .core.dates import filter_entries, parse_bounds
from .core.entries import DailySummary, Entry, new_entry
from .core.summary import aggregate_daily
from .ports.entry_store import EntryStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> JsonEntryStore:
    """Resolve the entry store from config."""
    return JsonEntryStore(config.journal_file, lock_timeout=config.lock_timeout)


def add_entry(store: EntryStore, message: str, now: datetime | None = None) -> Entry:
    """Append a new entry stamped `now` and persist the whole collection."""
    entry = new_entry(message, now)
    with store.locked():
        entries = store.load()
        entries.append(entry)
        store.save(entries)
    logger.debug(f"Added entry at {entry.timestamp.isoformat()}")
    return entry


def list_entries(
    store: EntryStore,
    start: str | None = None,
    end: str | None = None,
    tz: tzinfo | None = None,
) -> list[Entry]:
    """Entries within the optional bounds, in store order."""
    lower, upper = parse_bounds(start, end, tz)
    return filter_entries(store.load(), lower, upper)


def summarize(
    store: EntryStore,
    start: str | None = None,
    end: str | None = None,
    day_boundary: str = "utc",
    tz: tzinfo | None = None,
) -> list[DailySummary]:
    """One merged summary per day within the optional bounds, oldest first."""
    entries = list_entries(store, start, end, tz)
    return aggregate_daily(entries, day_boundary, tz)
