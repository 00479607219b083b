"""Functional core - pure journal logic with no I/O."""

from .entries import Entry, DailySummary, new_entry
from .dates import (
    DateParseError,
    AmbiguousLocalTimeError,
    NonexistentLocalTimeError,
    parse_datetime,
    parse_bounds,
    filter_entries,
)
from .summary import (
    capitalize,
    truncate_to_day,
    merge_messages,
    aggregate_daily,
    format_entry_line,
    format_summary_line,
)

__all__ = [
    # Entries
    "Entry",
    "DailySummary",
    "new_entry",
    # Dates
    "DateParseError",
    "AmbiguousLocalTimeError",
    "NonexistentLocalTimeError",
    "parse_datetime",
    "parse_bounds",
    "filter_entries",
    # Summary
    "capitalize",
    "truncate_to_day",
    "merge_messages",
    "aggregate_daily",
    "format_entry_line",
    "format_summary_line",
]
