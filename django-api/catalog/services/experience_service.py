"""Experience service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, time

from django.utils.dateparse import parse_date, parse_datetime

from catalog.domain import Experience, ExperienceId, OrganiserClaim
from catalog.domain.errors import (
    ExperienceConflictError,
    ExperienceNotFoundError,
    ForbiddenError,
    InvalidInputError,
    UserNotFoundError,
)
from catalog.domain.scheduling import ensure_utc, utcnow
from catalog.services.access import authorize_organiser_view, parse_user_id
from catalog.services.conflicts import has_conflict
from catalog.services.storage import store_errors
from catalog.stores.interfaces import ExperienceStore, UserStore


@dataclass(frozen=True)
class ExperienceInput:
    """Payload for creating an experience."""

    name: str = ""
    description: str = ""
    date: str | datetime | None = None
    location: str = ""


def parse_instant(value: str | datetime) -> datetime:
    """Parse an ISO 8601 date-time or date, reading naive values as UTC.

    Raises:
        InvalidInputError: If the value is not a valid date-time.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        try:
            parsed = parse_datetime(text)
            if parsed is None:
                day = parse_date(text)
                parsed = datetime.combine(day, time.min) if day is not None else None
        except ValueError as exc:
            raise InvalidInputError("date is not a valid date-time") from exc
        if parsed is None:
            raise InvalidInputError("date is not a valid date-time")
    try:
        return ensure_utc(parsed)
    except OverflowError as exc:
        raise InvalidInputError("date is out of range") from exc


class ExperienceService:
    """Service for experience catalog operations."""

    def __init__(
        self,
        experiences: ExperienceStore,
        users: UserStore,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._experiences = experiences
        self._users = users
        self._clock = clock

    def list_experiences(self) -> list[Experience]:
        """Return all experiences."""
        with store_errors():
            return self._experiences.list_experiences()

    def get_experience(self, experience_id: str | int) -> Experience:
        """Return an experience by ID.

        Raises:
            InvalidInputError: If the experience_id is not a positive integer.
            ExperienceNotFoundError: If the experience does not exist.
        """
        try:
            parsed = ExperienceId.from_string(experience_id)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError("Invalid experience ID format") from exc

        with store_errors():
            experience = self._experiences.get_experience(parsed)
        if experience is None:
            raise ExperienceNotFoundError(parsed)
        return experience

    def list_for_organiser(
        self, organiser_id: str | int | None, claim: OrganiserClaim
    ) -> list[Experience]:
        """Return the organiser's own experiences, in store order.

        Raises:
            InvalidInputError: If organiser_id is missing or malformed.
            AccessDeniedError: If the claim does not belong to that organiser.
        """
        caller = authorize_organiser_view(self._users, claim, organiser_id)
        with store_errors():
            return self._experiences.list_experiences_for_organiser(caller.id)

    def create_experience(
        self, data: ExperienceInput, organiser_id: str | int | None
    ) -> Experience:
        """Create an experience for the organiser.

        Every check runs before the store is written to.

        Raises:
            InvalidInputError: If a required field is missing or the date is malformed.
            UserNotFoundError: If the organiser does not exist.
            ForbiddenError: If the user is not an organiser.
            ExperienceConflictError: If the organiser already has an experience
                on the same UTC calendar day.
        """
        for field in ("name", "date", "location"):
            value = getattr(data, field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise InvalidInputError(f"{field} is required")
        parsed_organiser_id = parse_user_id(organiser_id)

        with store_errors():
            organiser = self._users.get_user(parsed_organiser_id)
        if organiser is None:
            raise UserNotFoundError(parsed_organiser_id)
        if not organiser.is_organiser:
            raise ForbiddenError("User must have organiser role to organise events")

        date = parse_instant(data.date)
        if has_conflict(self._experiences, organiser.id, date):
            raise ExperienceConflictError()

        now = self._clock()
        experience = Experience(
            id=None,
            name=data.name,
            description=data.description or "",
            date=date,
            location=data.location,
            organiser=organiser,
            attendees=(),
            created_at=now,
            updated_at=now,
        )
        with store_errors():
            return self._experiences.insert_experience(experience)
