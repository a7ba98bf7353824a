"""User lookup logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from photo_share.domain.errors import UpstreamFailureError, UserNotFoundError
from photo_share.domain.models import UserDetail, UserIdentitySummary

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user_summary(self, user_id: str) -> UserIdentitySummary | None:
        """Return the public identity for a user id, if present."""

    def get_user_detail(self, user_id: str) -> UserDetail | None:
        """Return the full public profile for a user id, if present."""

    def list_users(self) -> list[UserIdentitySummary]:
        """Return identities for all users."""


@dataclass
class UserService:
    """Application service for reading users."""

    repository: UserRepository

    def list_users(self) -> list[UserIdentitySummary]:
        """Return every user's public identity."""
        try:
            return self.repository.list_users()
        except Exception as exc:
            _logger.warning("User list lookup failed: %s", exc)
            raise UpstreamFailureError("Failed to list users") from exc

    def get_user(self, user_id: str) -> UserDetail:
        """Return a user's profile or raise if it does not exist."""
        try:
            detail = self.repository.get_user_detail(user_id)
        except Exception as exc:
            _logger.warning("User lookup failed for %s: %s", user_id, exc)
            raise UpstreamFailureError(f"Failed to load user {user_id}") from exc
        if detail is None:
            raise UserNotFoundError(user_id)
        return detail
