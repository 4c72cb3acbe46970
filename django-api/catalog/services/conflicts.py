"""Service for detecting same-day experience conflicts."""

from datetime import datetime

from catalog.domain import UserId, day_window
from catalog.services.storage import store_errors
from catalog.stores.interfaces import ExperienceStore


def has_conflict(store: ExperienceStore, organiser_id: UserId, instant: datetime) -> bool:
    """Return True if the organiser already has an experience on the UTC day of ``instant``.

    Only the calendar day matters: 08:00 and 22:00 on the same UTC day conflict,
    23:59 and 00:01 on consecutive days do not.
    """
    window = day_window(instant)
    with store_errors():
        return store.find_first_in_window(organiser_id, window) is not None
