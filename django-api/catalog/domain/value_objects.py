"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


def _parse_positive_int(value: str | int) -> int:
    if isinstance(value, bool):
        raise ValueError("Identifier must be an integer")
    parsed = int(value)
    if parsed <= 0:
        raise ValueError("Identifier must be positive")
    return parsed


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: int

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=_parse_positive_int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ExperienceId:
    """Unique identifier for an Experience."""

    value: int

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=_parse_positive_int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TripId:
    """Unique identifier for a Trip."""

    value: int

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=_parse_positive_int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrganiserClaim:
    """Verified identity assertion supplied by the authentication layer.

    The catalog trusts the claim as-is; building it is the caller's job.
    """

    email: str
    is_organiser: bool
