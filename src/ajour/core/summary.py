"""Pure daily summary logic - no I/O dependencies."""

from datetime import datetime, timezone, tzinfo
from typing import Iterable

from .entries import DailySummary, Entry

DAY_BOUNDARIES = ("utc", "local")


def capitalize(s: str) -> str:
    """Uppercase the first character only. Unlike str.capitalize, the rest is untouched."""
    return s[:1].upper() + s[1:]


def truncate_to_day(
    instant: datetime,
    boundary: str = "utc",
    tz: tzinfo | None = None,
) -> datetime:
    """
    Round an instant down to the start of its calendar day.

    With boundary="utc" the day is the UTC calendar day, which is how summaries
    have always been grouped. With boundary="local" it is the calendar day in
    `tz` (or the process local timezone). The result is always in UTC.
    """
    if boundary == "utc":
        utc = instant.astimezone(timezone.utc)
        return utc.replace(hour=0, minute=0, second=0, microsecond=0)
    if boundary == "local":
        local = instant.astimezone(tz)
        midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
        if tz is None:
            # Recompute the offset, midnight may sit on the other side of a DST change.
            midnight = midnight.replace(tzinfo=None).astimezone()
        return midnight.astimezone(timezone.utc)
    raise ValueError(f"Unknown day boundary: {boundary!r}")


def merge_messages(summary: str, incoming: str) -> str:
    """Join two messages as sentences: "Summary. Incoming"."""
    return f"{capitalize(summary)}. {capitalize(incoming)}"


def aggregate_daily(
    entries: Iterable[Entry],
    boundary: str = "utc",
    tz: tzinfo | None = None,
) -> list[DailySummary]:
    """
    Merge entries into one summary per day, sorted by day ascending.

    Entries are merged in the order given. The first entry of a day seeds
    the summary with its message as-is, so a day with a single entry is
    not capitalized.
    """
    days: dict[datetime, DailySummary] = {}
    for entry in entries:
        day = truncate_to_day(entry.timestamp, boundary, tz)
        current = days.get(day)
        if current is None:
            days[day] = DailySummary(day=day, message=entry.message)
        else:
            days[day] = DailySummary(
                day=day,
                message=merge_messages(current.message, entry.message),
                entries=current.entries + 1,
            )
    return [days[day] for day in sorted(days)]


def format_entry_line(entry: Entry, tz: tzinfo | None = None) -> str:
    """Format an entry as "<local date-time>: <message>"."""
    local = entry.timestamp.astimezone(tz)
    return f"{local.isoformat(sep=' ')}: {entry.message}"


def format_summary_line(summary: DailySummary, tz: tzinfo | None = None) -> str:
    """
    Format a summary as "<YYYY-MM-DD>: <message>".

    The label is the local date of the day instant. With UTC grouping and a
    timezone west of UTC, that is the previous calendar date.
    """
    local = summary.day.astimezone(tz)
    return f"{local.strftime('%Y-%m-%d')}: {summary.message}"
