from catalog.handlers.views import (
    ExperienceDetailView,
    ExperienceListView,
    OrganiserExperienceListView,
    TripDetailView,
    TripListView,
    UpcomingTripListView,
)

__all__ = [
    "ExperienceDetailView",
    "ExperienceListView",
    "OrganiserExperienceListView",
    "TripDetailView",
    "TripListView",
    "UpcomingTripListView",
]
