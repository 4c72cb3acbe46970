from catalog.stores.interfaces import (
    DuplicateExperienceDayError,
    ExperienceStore,
    StoreError,
    TripStore,
    UserStore,
)

__all__ = [
    "ExperienceStore",
    "TripStore",
    "UserStore",
    "StoreError",
    "DuplicateExperienceDayError",
]
