"""Mapping of store failures onto domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from catalog.domain.errors import ExperienceConflictError, UnavailableError
from catalog.stores.interfaces import DuplicateExperienceDayError, StoreError


@contextmanager
def store_errors() -> Iterator[None]:
    """Re-raise store failures as domain errors.

    A same-day uniqueness violation becomes ExperienceConflictError;
    any other StoreError becomes UnavailableError.
    """
    try:
        yield
    except DuplicateExperienceDayError as exc:
        raise ExperienceConflictError() from exc
    except StoreError as exc:
        raise UnavailableError() from exc
