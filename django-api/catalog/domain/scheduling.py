"""UTC calendar-day windows used for double-booking detection."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from catalog.domain.errors import InvalidInputError


@dataclass(frozen=True)
class DayWindow:
    """Half-open interval [start, end) covering one UTC calendar day."""

    start: datetime
    end: datetime

    def __contains__(self, instant: datetime) -> bool:
        return self.start <= ensure_utc(instant) < self.end


def ensure_utc(instant: datetime) -> datetime:
    """Return ``instant`` in UTC, reading naive values as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def day_window(instant: datetime) -> DayWindow:
    """Return the UTC day window that contains ``instant``.

    Raises:
        InvalidInputError: If ``instant`` is not a datetime, or its day has
            no representable end (the last day of year 9999).
    """
    if not isinstance(instant, datetime):
        raise InvalidInputError("date must be a valid point in time")
    try:
        utc = ensure_utc(instant)
        start = datetime(utc.year, utc.month, utc.day, tzinfo=UTC)
        return DayWindow(start=start, end=start + timedelta(days=1))
    except OverflowError as exc:
        raise InvalidInputError("date is out of range") from exc


def utcnow() -> datetime:
    return datetime.now(UTC)
