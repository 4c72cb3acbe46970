"""Cache keys and helpers for catalog responses."""

from django.conf import settings
from django.core.cache import cache

EXPERIENCE_LIST_KEY = "experiences:list"
TRIP_LIST_KEY = "trips:list"


def experience_detail_key(experience_id: object) -> str:
    return f"experiences:{experience_id}"


def trip_detail_key(trip_id: object) -> str:
    return f"trips:{trip_id}"


def cache_ttl() -> int:
    return settings.CATALOG_CACHE_TTL


def invalidate_experience(experience_id: object) -> None:
    cache.delete_many([EXPERIENCE_LIST_KEY, experience_detail_key(experience_id)])


def invalidate_trip(trip_id: object) -> None:
    cache.delete_many([TRIP_LIST_KEY, trip_detail_key(trip_id)])
