"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from datetime import UTC, datetime, timedelta

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.urls import reverse
from rest_framework.test import APIClient

from catalog import models
from catalog.cache import (
    EXPERIENCE_LIST_KEY,
    TRIP_LIST_KEY,
    experience_detail_key,
    trip_detail_key,
)


@pytest.fixture
def organiser_row():
    return get_user_model().objects.create_user(email="pieter@ucll.be", is_organiser=True)


@pytest.fixture
def experience_row(organiser_row):
    return models.Experience.objects.create(
        name="Hike",
        date=datetime(2025, 11, 10, 10, 0, tzinfo=UTC),
        location="Alpen",
        organiser=organiser_row,
    )


@pytest.fixture
def trip_row(organiser_row):
    start = datetime(2025, 12, 10, tzinfo=UTC)
    return models.Trip.objects.create(
        destination="Brugge",
        start_date=start,
        end_date=start + timedelta(days=2),
        organiser=organiser_row,
    )


@pytest.mark.django_db
class TestCachedResponses:
    """Tests for response caching in the listing handlers."""

    def test_list_is_served_from_cache(self, api_client: APIClient, organiser_row, experience_row):
        api_client.force_authenticate(organiser_row)
        api_client.get(reverse("experience-list"))
        # queryset.update bypasses signals, so the cached copy stays in place.
        models.Experience.objects.filter(pk=experience_row.pk).update(name="Renamed")

        response = api_client.get(reverse("experience-list"))

        assert response.data[0]["name"] == "Hike"

    def test_organiser_view_is_not_cached(self, api_client: APIClient, organiser_row, experience_row):
        api_client.force_authenticate(organiser_row)
        url = reverse("organiser-experience-list", args=[organiser_row.pk])
        api_client.get(url)
        models.Experience.objects.filter(pk=experience_row.pk).update(name="Renamed")

        response = api_client.get(url)

        assert response.data[0]["name"] == "Renamed"


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_experience_save_invalidates_list_and_detail_cache(self, experience_row):
        cache.set(EXPERIENCE_LIST_KEY, ["stale"])
        cache.set(experience_detail_key(experience_row.pk), {"stale": True})

        experience_row.name = "Updated"
        experience_row.save()

        assert cache.get(EXPERIENCE_LIST_KEY) is None
        assert cache.get(experience_detail_key(experience_row.pk)) is None

    def test_experience_delete_invalidates_list_cache(self, experience_row):
        cache.set(EXPERIENCE_LIST_KEY, ["stale"])

        experience_row.delete()

        assert cache.get(EXPERIENCE_LIST_KEY) is None

    def test_attendance_save_invalidates_experience_cache(self, experience_row):
        attendee = get_user_model().objects.create_user(email="jan@ucll.be")
        cache.set(experience_detail_key(experience_row.pk), {"stale": True})

        models.ExperienceAttendance.objects.create(experience=experience_row, user=attendee)

        assert cache.get(experience_detail_key(experience_row.pk)) is None

    def test_trip_save_invalidates_trip_cache(self, trip_row):
        cache.set(TRIP_LIST_KEY, ["stale"])
        cache.set(trip_detail_key(trip_row.pk), {"stale": True})

        trip_row.description = "Updated"
        trip_row.save()

        assert cache.get(TRIP_LIST_KEY) is None
        assert cache.get(trip_detail_key(trip_row.pk)) is None

    def test_user_save_invalidates_embedding_caches(self, organiser_row, experience_row, trip_row):
        cache.set(EXPERIENCE_LIST_KEY, ["stale"])
        cache.set(TRIP_LIST_KEY, ["stale"])

        organiser_row.first_name = "Piet"
        organiser_row.save()

        assert cache.get(EXPERIENCE_LIST_KEY) is None
        assert cache.get(TRIP_LIST_KEY) is None
