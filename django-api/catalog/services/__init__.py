from catalog.services.access import authorize_organiser_view
from catalog.services.conflicts import has_conflict
from catalog.services.experience_service import ExperienceInput, ExperienceService
from catalog.services.trip_service import TripService

__all__ = [
    "ExperienceInput",
    "ExperienceService",
    "TripService",
    "authorize_organiser_view",
    "has_conflict",
]
