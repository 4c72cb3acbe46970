"""Trip service for browsing holiday trips."""

from collections.abc import Callable
from datetime import datetime

from catalog.domain import Trip, TripId
from catalog.domain.errors import InvalidInputError, TripNotFoundError
from catalog.domain.scheduling import ensure_utc, utcnow
from catalog.services.storage import store_errors
from catalog.stores.interfaces import TripStore


class TripService:
    """Service for trip catalog operations."""

    def __init__(self, store: TripStore, clock: Callable[[], datetime] = utcnow) -> None:
        self._store = store
        self._clock = clock

    def list_trips(self) -> list[Trip]:
        """Return all trips."""
        with store_errors():
            return self._store.list_trips()

    def get_trip(self, trip_id: str | int) -> Trip:
        """Return a trip by ID.

        Raises:
            InvalidInputError: If the trip_id is not a positive integer.
            TripNotFoundError: If the trip does not exist.
        """
        try:
            parsed = TripId.from_string(trip_id)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError("Invalid trip ID format") from exc

        with store_errors():
            trip = self._store.get_trip(parsed)
        if trip is None:
            raise TripNotFoundError(parsed)
        return trip

    def list_upcoming_trips(self, now: datetime | None = None) -> list[Trip]:
        """Return trips that start after ``now``."""
        now = ensure_utc(now) if now is not None else self._clock()
        return [trip for trip in self.list_trips() if ensure_utc(trip.start_date) > now]
