from django.urls import path

from catalog.handlers import (
    ExperienceDetailView,
    ExperienceListView,
    OrganiserExperienceListView,
    TripDetailView,
    TripListView,
    UpcomingTripListView,
)

urlpatterns = [
    path("experiences", ExperienceListView.as_view(), name="experience-list"),
    path(
        "experiences/organiser/<str:organiser_id>",
        OrganiserExperienceListView.as_view(),
        name="organiser-experience-list",
    ),
    path(
        "experiences/<str:experience_id>",
        ExperienceDetailView.as_view(),
        name="experience-detail",
    ),
    path("trips", TripListView.as_view(), name="trip-list"),
    path("trips/upcoming", UpcomingTripListView.as_view(), name="upcoming-trip-list"),
    path("trips/<str:trip_id>", TripDetailView.as_view(), name="trip-detail"),
]
