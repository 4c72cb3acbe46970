"""Django ORM implementation of the catalog stores.

Each method queries the ORM and converts rows to domain models.
Database errors, and rows that no longer pass domain validation, are logged
here and re-raised as StoreError.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from django.contrib.auth import get_user_model
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Prefetch, QuerySet

from catalog import models
from catalog.domain import (
    DayWindow,
    Experience,
    ExperienceId,
    Trip,
    TripId,
    User,
    UserId,
)
from catalog.domain.scheduling import ensure_utc
from catalog.stores.interfaces import (
    DuplicateExperienceDayError,
    ExperienceStore,
    StoreError,
    TripStore,
    UserStore,
)

logger = logging.getLogger(__name__)


@contextmanager
def _database_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        logger.exception("Database error during %s", operation)
        raise StoreError(f"Database error during {operation}") from exc
    except ValueError as exc:
        # A stored row no longer satisfies a domain invariant, e.g. a demoted trip organiser.
        logger.exception("Invalid stored row during %s", operation)
        raise StoreError(f"Invalid stored row during {operation}") from exc


def _to_user(row) -> User:
    return User(
        id=UserId(row.pk),
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        is_organiser=row.is_organiser,
    )


def _attendees(row) -> tuple[User, ...]:
    return tuple(_to_user(attendance.user) for attendance in row.attendances.all())


def _to_experience(row: models.Experience) -> Experience:
    return Experience(
        id=ExperienceId(row.pk),
        name=row.name,
        description=row.description,
        date=row.date,
        location=row.location,
        organiser=_to_user(row.organiser),
        attendees=_attendees(row),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_trip(row: models.Trip) -> Trip:
    return Trip(
        id=TripId(row.pk),
        destination=row.destination,
        description=row.description,
        start_date=row.start_date,
        end_date=row.end_date,
        organiser=_to_user(row.organiser),
        attendees=_attendees(row),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _with_relations(queryset: QuerySet, attendance_model: type) -> QuerySet:
    return queryset.select_related("organiser").prefetch_related(
        Prefetch(
            "attendances",
            queryset=attendance_model.objects.select_related("user").order_by("id"),
        )
    )


def _first_or_none(queryset: QuerySet, convert: Callable):
    row = queryset.first()
    return convert(row) if row is not None else None


class DjangoUserStore(UserStore):
    """User lookups backed by the project's auth user model."""

    def get_user(self, user_id: UserId) -> User | None:
        with _database_errors("get_user"):
            queryset = get_user_model().objects.filter(pk=user_id.value)
            return _first_or_none(queryset, _to_user)

    def get_user_by_email(self, email: str) -> User | None:
        with _database_errors("get_user_by_email"):
            queryset = get_user_model().objects.filter(email=email)
            return _first_or_none(queryset, _to_user)


class DjangoExperienceStore(ExperienceStore):
    """Relational experience store using Django ORM."""

    def _experiences(self) -> QuerySet:
        return _with_relations(models.Experience.objects.all(), models.ExperienceAttendance)

    def list_experiences(self) -> list[Experience]:
        with _database_errors("list_experiences"):
            return [_to_experience(row) for row in self._experiences()]

    def get_experience(self, experience_id: ExperienceId) -> Experience | None:
        with _database_errors("get_experience"):
            queryset = self._experiences().filter(pk=experience_id.value)
            return _first_or_none(queryset, _to_experience)

    def list_experiences_for_organiser(self, organiser_id: UserId) -> list[Experience]:
        with _database_errors("list_experiences_for_organiser"):
            queryset = self._experiences().filter(organiser_id=organiser_id.value)
            return [_to_experience(row) for row in queryset]

    def find_first_in_window(
        self, organiser_id: UserId, window: DayWindow
    ) -> Experience | None:
        with _database_errors("find_first_in_window"):
            queryset = self._experiences().filter(
                organiser_id=organiser_id.value,
                date__gte=window.start,
                date__lt=window.end,
            )
            return _first_or_none(queryset, _to_experience)

    def insert_experience(self, experience: Experience) -> Experience:
        try:
            with transaction.atomic():
                row = models.Experience(
                    name=experience.name,
                    description=experience.description,
                    date=experience.date,
                    location=experience.location,
                    organiser_id=experience.organiser.id.value,
                )
                row.save()
                # auto_now_add ignores passed values; pin to the domain timestamps.
                models.Experience.objects.filter(pk=row.pk).update(
                    created_at=experience.created_at,
                    updated_at=experience.updated_at,
                )
                models.ExperienceAttendance.objects.bulk_create(
                    models.ExperienceAttendance(experience=row, user_id=attendee.id.value)
                    for attendee in experience.attendees
                )
        except IntegrityError as exc:
            if self._day_taken(experience):
                raise DuplicateExperienceDayError(
                    "Organiser already has an experience on this day"
                ) from exc
            logger.exception("Integrity error during insert_experience")
            raise StoreError("Database error during insert_experience") from exc
        except DatabaseError as exc:
            logger.exception("Database error during insert_experience")
            raise StoreError("Database error during insert_experience") from exc

        created = self.get_experience(ExperienceId(row.pk))
        if created is None:
            raise StoreError("Inserted experience could not be read back")
        return created

    def _day_taken(self, experience: Experience) -> bool:
        # Backends word constraint violations differently; check the row instead.
        with _database_errors("insert_experience"):
            return models.Experience.objects.filter(
                organiser_id=experience.organiser.id.value,
                day=ensure_utc(experience.date).date(),
            ).exists()


class DjangoTripStore(TripStore):
    """Relational trip store using Django ORM."""

    def _trips(self) -> QuerySet:
        return _with_relations(models.Trip.objects.all(), models.TripAttendance)

    def list_trips(self) -> list[Trip]:
        with _database_errors("list_trips"):
            return [_to_trip(row) for row in self._trips()]

    def get_trip(self, trip_id: TripId) -> Trip | None:
        with _database_errors("get_trip"):
            return _first_or_none(self._trips().filter(pk=trip_id.value), _to_trip)
