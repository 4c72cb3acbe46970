"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Any storage failure is raised as StoreError.
"""

from abc import ABC, abstractmethod

from catalog.domain import DayWindow, Experience, ExperienceId, Trip, TripId, User, UserId


class StoreError(Exception):
    """Raised when the underlying storage fails."""


class DuplicateExperienceDayError(StoreError):
    """Raised when an insert violates the one-experience-per-day constraint."""


class UserStore(ABC):
    """Interface for user lookups."""

    @abstractmethod
    def get_user(self, user_id: UserId) -> User | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Return a user by email, or None if not found."""
        ...


class ExperienceStore(ABC):
    """Interface for experience persistence operations."""

    @abstractmethod
    def list_experiences(self) -> list[Experience]:
        """Return all experiences."""
        ...

    @abstractmethod
    def get_experience(self, experience_id: ExperienceId) -> Experience | None:
        """Return an experience by ID, or None if not found."""
        ...

    @abstractmethod
    def list_experiences_for_organiser(self, organiser_id: UserId) -> list[Experience]:
        """Return all experiences owned by the organiser."""
        ...

    @abstractmethod
    def find_first_in_window(
        self, organiser_id: UserId, window: DayWindow
    ) -> Experience | None:
        """Return any experience of the organiser dated inside the window."""
        ...

    @abstractmethod
    def insert_experience(self, experience: Experience) -> Experience:
        """Persist a new experience and return it with its assigned ID.

        Raises:
            DuplicateExperienceDayError: If the organiser already has an
                experience on the same UTC day.
        """
        ...


class TripStore(ABC):
    """Interface for trip persistence operations."""

    @abstractmethod
    def list_trips(self) -> list[Trip]:
        """Return all trips ordered by start_date ascending."""
        ...

    @abstractmethod
    def get_trip(self, trip_id: TripId) -> Trip | None:
        """Return a trip by ID, or None if not found."""
        ...
