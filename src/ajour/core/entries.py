"""Pure journal entry domain types - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Entry:
    """A single timestamped journal note."""

    timestamp: datetime
    message: str

    @classmethod
    def from_record(cls, data: dict) -> "Entry":
        """Create an Entry from a stored JSON record.

        Raises ValueError (or TypeError/KeyError) when the record is malformed.
        """
        ts = data["timestamp"]
        message = data["message"]
        if isinstance(ts, bool) or not isinstance(ts, int):
            raise ValueError(f"timestamp must be an integer, got {ts!r}")
        if not isinstance(message, str):
            raise ValueError(f"message must be a string, got {message!r}")
        try:
            timestamp = datetime.fromtimestamp(ts, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"timestamp out of range: {ts}") from e
        return cls(timestamp=timestamp, message=message)

    def to_record(self) -> dict:
        """Serialize to the stored JSON record shape."""
        return {
            "timestamp": int(self.timestamp.timestamp()),
            "message": self.message,
        }


@dataclass(frozen=True)
class DailySummary:
    """All entries of one calendar day merged into a single line."""

    day: datetime
    message: str
    entries: int = 1


def new_entry(message: str, now: datetime | None = None) -> Entry:
    """
    Create an entry stamped with the current time.

    The timestamp is stored in UTC with sub-second precision discarded.
    """
    now = now or datetime.now(timezone.utc)
    return Entry(
        timestamp=now.astimezone(timezone.utc).replace(microsecond=0),
        message=message,
    )
