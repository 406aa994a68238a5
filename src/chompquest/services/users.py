"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from chompquest.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    def create_settings(self, user_id: UUID) -> None:
        """Create initial settings for a user."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def ensure_user(self, username: str) -> UserRecord:
        """Ensure a user exists for the username and return it."""
        existing = self.repository.get_by_username(username)
        if existing:
            return existing

        created = self.repository.create_user(username)
        self.repository.create_settings(created.id)
        return created

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_by_id(user_id)
