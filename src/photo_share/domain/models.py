"""Domain models for users."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserIdentitySummary:
    """Public identity used to attribute comments."""

    id: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class UserDetail:
    """Full public profile of a user."""

    id: str
    first_name: str
    last_name: str
    location: str | None
    description: str | None
    occupation: str | None
