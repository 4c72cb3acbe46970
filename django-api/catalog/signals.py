"""Django signals for cache invalidation."""

from django.conf import settings
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from catalog.cache import invalidate_experience, invalidate_trip
from catalog.models import Experience, ExperienceAttendance, Trip, TripAttendance


@receiver([post_save, post_delete], sender=Experience)
def invalidate_experience_cache(sender, instance, **kwargs):
    """Invalidate caches when an experience is saved or deleted."""
    invalidate_experience(instance.pk)


@receiver([post_save, post_delete], sender=ExperienceAttendance)
def invalidate_experience_attendance_cache(sender, instance, **kwargs):
    """Invalidate caches when an experience gains or loses an attendee."""
    invalidate_experience(instance.experience_id)


@receiver([post_save, post_delete], sender=Trip)
def invalidate_trip_cache(sender, instance, **kwargs):
    """Invalidate caches when a trip is saved or deleted."""
    invalidate_trip(instance.pk)


@receiver([post_save, post_delete], sender=TripAttendance)
def invalidate_trip_attendance_cache(sender, instance, **kwargs):
    """Invalidate caches when a trip gains or loses an attendee."""
    invalidate_trip(instance.trip_id)


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def invalidate_user_cache(sender, instance, created, **kwargs):
    """Invalidate cached listings that embed a changed user."""
    if created:
        return
    experience_ids = set(
        Experience.objects.filter(organiser=instance).values_list("pk", flat=True)
    ) | set(
        ExperienceAttendance.objects.filter(user=instance).values_list("experience_id", flat=True)
    )
    trip_ids = set(
        Trip.objects.filter(organiser=instance).values_list("pk", flat=True)
    ) | set(TripAttendance.objects.filter(user=instance).values_list("trip_id", flat=True))
    for experience_id in experience_ids:
        invalidate_experience(experience_id)
    for trip_id in trip_ids:
        invalidate_trip(trip_id)
