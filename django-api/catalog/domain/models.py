"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in catalog/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Self

from catalog.domain.value_objects import ExperienceId, TripId, UserId


@dataclass(frozen=True)
class User:
    """Domain representation of a User referenced by the catalog."""

    id: UserId
    first_name: str
    last_name: str
    email: str
    is_organiser: bool


class _HasAttendees:
    """Attendee bookkeeping shared by experiences and trips.

    Attendees are unique by user id and keep insertion order.
    """

    attendees: tuple[User, ...]

    def is_user_attending(self, user_id: UserId) -> bool:
        return any(attendee.id == user_id for attendee in self.attendees)

    def add_attendee(self, user: User) -> Self:
        if self.is_user_attending(user.id):
            return self
        return replace(self, attendees=(*self.attendees, user))

    def remove_attendee(self, user_id: UserId) -> Self:
        remaining = tuple(a for a in self.attendees if a.id != user_id)
        return replace(self, attendees=remaining)


@dataclass(frozen=True)
class Experience(_HasAttendees):
    """Domain representation of an Experience.

    ``id`` is None until the experience has been persisted.
    """

    id: ExperienceId | None
    name: str
    description: str
    date: datetime
    location: str
    organiser: User
    created_at: datetime
    updated_at: datetime
    attendees: tuple[User, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Experience name is required")
        if not self.location:
            raise ValueError("Experience location is required")


@dataclass(frozen=True)
class Trip(_HasAttendees):
    """Domain representation of a Trip."""

    id: TripId | None
    destination: str
    description: str
    start_date: datetime
    end_date: datetime
    organiser: User
    created_at: datetime
    updated_at: datetime
    attendees: tuple[User, ...] = ()

    def __post_init__(self) -> None:
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        if not self.organiser.is_organiser:
            raise ValueError("Trip organiser must be an organiser")
