"""User settings service for daily nutrition goals."""

from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from chompquest.domain.gamification import GoalTargets


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_goals(self, user_id: UUID) -> GoalTargets | None:
        """Return the user's goals if set."""

    def set_goals(self, user_id: UUID, goals: GoalTargets) -> None:
        """Update the user's goals."""


@dataclass
class UserSettingsService:
    """Service for user settings."""

    repository: UserSettingsRepository
    default_goals: GoalTargets = field(default_factory=GoalTargets.defaults)

    def get_goals(self, user_id: UUID) -> GoalTargets:
        """Return the user's goals or the defaults if unset."""
        return self.repository.get_goals(user_id) or self.default_goals

    def set_goals(self, user_id: UUID, goals: GoalTargets) -> None:
        """Persist a user's goals."""
        self.repository.set_goals(user_id, goals)

    def are_goals_set(self, user_id: UUID) -> bool:
        """Return True when the user has configured goals."""
        return self.repository.get_goals(user_id) is not None
