from catalog.domain.models import Experience, Trip, User
from catalog.domain.scheduling import DayWindow, day_window
from catalog.domain.value_objects import ExperienceId, OrganiserClaim, TripId, UserId

__all__ = [
    "Experience",
    "Trip",
    "User",
    "ExperienceId",
    "TripId",
    "UserId",
    "OrganiserClaim",
    "DayWindow",
    "day_window",
]
