"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.conf import settings
from django.db import models

from catalog.domain.scheduling import ensure_utc


class Experience(models.Model):
    """Persistence model for experiences."""

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    date = models.DateTimeField()
    # UTC calendar day of ``date``; backs the one-per-day constraint.
    # Derived in save() only: QuerySet.update(date=...) and bulk_create()
    # leave it stale, so write dates through save().
    day = models.DateField(editable=False)
    location = models.CharField(max_length=255)
    organiser = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="organised_experiences",
    )
    attendees = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through="ExperienceAttendance",
        related_name="attended_experiences",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["organiser", "day"],
                name="unique_experience_per_organiser_day",
            ),
        ]
        indexes = [
            models.Index(fields=["organiser", "date"], name="experience_organiser_date_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        self.day = ensure_utc(self.date).date()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name


class ExperienceAttendance(models.Model):
    """Attendee membership of an experience, ordered by joining."""

    experience = models.ForeignKey(
        Experience, on_delete=models.CASCADE, related_name="attendances"
    )
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["experience", "user"], name="unique_experience_attendee"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user} @ {self.experience}"


class Trip(models.Model):
    """Persistence model for holiday trips."""

    destination = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    organiser = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="organised_trips",
    )
    attendees = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through="TripAttendance",
        related_name="attended_trips",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_date"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F("start_date")),
                name="trip_ends_after_start",
            ),
        ]
        indexes = [
            models.Index(fields=["start_date"], name="trip_start_date_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.destination} ({self.start_date:%Y-%m-%d})"


class TripAttendance(models.Model):
    """Attendee membership of a trip, ordered by joining."""

    trip = models.ForeignKey(Trip, on_delete=models.CASCADE, related_name="attendances")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["trip", "user"], name="unique_trip_attendee"),
        ]

    def __str__(self) -> str:
        return f"{self.user} @ {self.trip}"
