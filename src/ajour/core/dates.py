"""Date parsing and range filtering for journal entries.

User-supplied dates are wall-clock times in the local timezone; stored entries
are absolute UTC instants. Everything here converts to UTC before comparing.
"""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Iterable

from .entries import Entry

logger = logging.getLogger(__name__)

DATE_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d")


class DateParseError(ValueError):
    """Raised when a date string cannot be turned into an instant."""

    def __init__(self, text: str, reason: str = "expected YYYY-MM-DD or YYYY-MM-DD HH:MM"):
        self.text = text
        super().__init__(f"Invalid date `{text}`: {reason}")


class AmbiguousLocalTimeError(DateParseError):
    """Raised when a local time occurs twice because clocks were set back."""

    def __init__(self, text: str, earlier: datetime, later: datetime):
        self.earlier = earlier
        self.later = later
        super().__init__(
            text,
            f"ambiguous local time, could be {earlier.isoformat()} or {later.isoformat()}",
        )


class NonexistentLocalTimeError(DateParseError):
    """Raised when a local time is skipped because clocks were set forward."""

    def __init__(self, text: str):
        super().__init__(text, "local time does not exist in this timezone")


def _parse_naive(text: str) -> datetime:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise DateParseError(text)


def _candidates(naive: datetime, tz: tzinfo | None) -> list[datetime]:
    """UTC instants that display as `naive` in the given (or local) timezone."""
    found: list[datetime] = []
    for fold in (0, 1):
        if tz is None:
            aware = naive.replace(fold=fold).astimezone()
        else:
            aware = naive.replace(tzinfo=tz, fold=fold)
        instant = aware.astimezone(timezone.utc)
        # A skipped wall time does not survive the round trip.
        if instant.astimezone(tz).replace(tzinfo=None) != naive:
            continue
        if instant not in found:
            found.append(instant)
    return sorted(found)


def parse_datetime(text: str, tz: tzinfo | None = None) -> datetime:
    """
    Parse a user date string into an aware UTC datetime.

    Accepts "YYYY-MM-DD HH:MM" or "YYYY-MM-DD" (midnight). The wall-clock value
    is interpreted in `tz`, or the process local timezone when `tz` is None.

    Raises:
        DateParseError: the string matches neither format
        AmbiguousLocalTimeError: the wall time maps to two instants
        NonexistentLocalTimeError: the wall time falls in a DST gap
    """
    text = text.strip()
    naive = _parse_naive(text)
    candidates = _candidates(naive, tz)

    if not candidates:
        raise NonexistentLocalTimeError(text)
    if len(candidates) > 1:
        earlier, later = candidates
        logger.warning(f"Ambiguous date `{text}` got {earlier} and {later}")
        raise AmbiguousLocalTimeError(text, earlier, later)
    return candidates[0]


def parse_bounds(
    start: str | None,
    end: str | None,
    tz: tzinfo | None = None,
) -> tuple[datetime | None, datetime | None]:
    """Parse optional --from/--to strings. Fails before any filtering happens."""
    return (
        parse_datetime(start, tz) if start is not None else None,
        parse_datetime(end, tz) if end is not None else None,
    )


def filter_entries(
    entries: Iterable[Entry],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Entry]:
    """
    Filter entries to an inclusive instant range.

    Pure function - no I/O. A missing bound leaves that side open.
    """
    return [
        e
        for e in entries
        if (start is None or e.timestamp >= start) and (end is None or e.timestamp <= end)
    ]
