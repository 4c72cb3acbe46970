"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import UTC, datetime

import pytest
from rest_framework.test import APIClient

from catalog.domain import (
    DayWindow,
    Experience,
    ExperienceId,
    Trip,
    TripId,
    User,
    UserId,
)
from catalog.services import ExperienceService, TripService
from catalog.stores.interfaces import ExperienceStore, TripStore, UserStore

FIXED_NOW = datetime(2025, 11, 1, 9, 0, tzinfo=UTC)


class InMemoryUserStore(UserStore):
    def __init__(self, *users: User) -> None:
        self.users = {user.id: user for user in users}

    def add(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def get_user(self, user_id: UserId) -> User | None:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)


class InMemoryExperienceStore(ExperienceStore):
    def __init__(self) -> None:
        self.experiences: list[Experience] = []
        self.inserted: list[Experience] = []

    def add(self, experience: Experience) -> Experience:
        stored = replace(experience, id=ExperienceId(len(self.experiences) + 1))
        self.experiences.append(stored)
        return stored

    def list_experiences(self) -> list[Experience]:
        return list(self.experiences)

    def get_experience(self, experience_id: ExperienceId) -> Experience | None:
        return next((e for e in self.experiences if e.id == experience_id), None)

    def list_experiences_for_organiser(self, organiser_id: UserId) -> list[Experience]:
        return [e for e in self.experiences if e.organiser.id == organiser_id]

    def find_first_in_window(
        self, organiser_id: UserId, window: DayWindow
    ) -> Experience | None:
        return next(
            (
                e
                for e in self.experiences
                if e.organiser.id == organiser_id and e.date in window
            ),
            None,
        )

    def insert_experience(self, experience: Experience) -> Experience:
        self.inserted.append(experience)
        return self.add(experience)


class InMemoryTripStore(TripStore):
    def __init__(self, *trips: Trip) -> None:
        self.trips = list(trips)

    def list_trips(self) -> list[Trip]:
        return list(self.trips)

    def get_trip(self, trip_id: TripId) -> Trip | None:
        return next((t for t in self.trips if t.id == trip_id), None)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def organiser() -> User:
    return User(
        id=UserId(7),
        first_name="Pieter",
        last_name="De Vries",
        email="pieter@ucll.be",
        is_organiser=True,
    )


@pytest.fixture
def client_user() -> User:
    return User(
        id=UserId(9),
        first_name="Jan",
        last_name="Peeters",
        email="jan@ucll.be",
        is_organiser=False,
    )


@pytest.fixture
def user_store(organiser: User, client_user: User) -> InMemoryUserStore:
    return InMemoryUserStore(organiser, client_user)


@pytest.fixture
def experience_store() -> InMemoryExperienceStore:
    return InMemoryExperienceStore()


@pytest.fixture
def experience_service(
    experience_store: InMemoryExperienceStore, user_store: InMemoryUserStore
) -> ExperienceService:
    return ExperienceService(experience_store, user_store, clock=lambda: FIXED_NOW)


@pytest.fixture
def make_experience(organiser: User):
    def _make(date: datetime, owner: User | None = None, name: str = "Bierproeverij") -> Experience:
        return Experience(
            id=None,
            name=name,
            description="Belgische bieren",
            date=date,
            location="Leuven",
            organiser=owner or organiser,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )

    return _make


@pytest.fixture
def make_trip(organiser: User):
    def _make(trip_id: int, start: datetime, end: datetime, destination: str = "Brugge") -> Trip:
        return Trip(
            id=TripId(trip_id),
            destination=destination,
            description="Weekendje",
            start_date=start,
            end_date=end,
            organiser=organiser,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )

    return _make


@pytest.fixture
def trip_service_factory():
    def _make(*trips: Trip) -> TripService:
        return TripService(InMemoryTripStore(*trips), clock=lambda: FIXED_NOW)

    return _make
