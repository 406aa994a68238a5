"""Admin service for reporting, user management and audited stat overrides."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from chompquest.domain.admin import AdminUser, SystemCounts
from chompquest.domain.days import day_bounds, utc_today
from chompquest.domain.gamification import GamificationRecord
from chompquest.domain.models import USER_ROLES
from chompquest.services.audit import AuditService
from chompquest.services.gamification import GamificationService, serialize_record
from chompquest.services.user_settings import UserSettingsService

logger = logging.getLogger(__name__)


class AdminRepository(Protocol):
    """Persistence interface for admin data."""

    def list_users(self) -> list[AdminUser]:
        """Return all users, newest first."""

    def get_system_counts(self, start: datetime, end: datetime) -> SystemCounts:
        """Return user and meal counts, with meals_today limited to [start, end)."""

    def update_role(self, user_id: UUID, role: str) -> AdminUser | None:
        """Set a user's role and return the updated user, or None if missing."""

    def delete_user(self, user_id: UUID) -> bool:
        """Delete a user with their meals, water, game stats and settings."""


@dataclass
class AdminService:
    """Service for admin dashboards."""

    admin_repository: AdminRepository
    gamification_service: GamificationService
    user_settings_service: UserSettingsService
    audit_service: AuditService

    def list_users(self) -> list[dict[str, object]]:
        """Return users with their game stats."""
        return [
            {
                **serialize_user(user),
                "game_stats": serialize_record(
                    self.gamification_service.get_record(user.id)
                ),
            }
            for user in self.admin_repository.list_users()
        ]

    def get_user_detail(self, user_id: UUID) -> dict[str, object]:
        """Return game stats, goals and recent overrides for a user."""
        goals = self.user_settings_service.get_goals(user_id)
        return {
            "user_id": str(user_id),
            "game_stats": serialize_record(
                self.gamification_service.get_record(user_id)
            ),
            "nutrition_goals": goals.by_goal(),
            "audit_events": self.audit_service.list_events(user_id),
        }

    async def override_game_stats(
        self, user_id: UUID, actor: str, daily_streak: int, point_total: int
    ) -> GamificationRecord:
        """Set a user's streak and points directly and record an audit event."""
        before, after = await self.gamification_service.override_record(
            user_id, daily_streak=daily_streak, point_total=point_total
        )
        self.audit_service.record_event(
            user_id=user_id,
            actor=actor,
            entity_type="game_stats",
            event_type="admin_override",
            before=serialize_record(before),
            after=serialize_record(after),
        )
        return after

    def update_role(self, user_id: UUID, actor: str, role: str) -> AdminUser | None:
        """Change a user's role and record an audit event."""
        if role not in USER_ROLES:
            raise ValueError(f"Invalid role: {role}")
        updated = self.admin_repository.update_role(user_id, role)
        if updated is None:
            return None
        self.audit_service.record_event(
            user_id=user_id,
            actor=actor,
            entity_type="user",
            event_type="role_change",
            before=None,
            after={"role": updated.role},
        )
        return updated

    def delete_user(
        self, user_id: UUID, actor: str, actor_id: UUID | None = None
    ) -> bool:
        """Delete a user and everything stored for them."""
        if actor_id == user_id:
            raise ValueError("Cannot delete your own account")
        if not self.admin_repository.delete_user(user_id):
            return False
        logger.info(
            "Deleted user", extra={"user_id": str(user_id), "actor": actor}
        )
        return True

    def get_system_stats(self, today: date | None = None) -> dict[str, object]:
        """Return user and meal counts."""
        start, end = day_bounds(today or utc_today())
        counts = self.admin_repository.get_system_counts(start, end)
        return {
            "users": {
                "total": counts.total_users,
                "admins": counts.admin_users,
                "members": counts.total_users - counts.admin_users,
            },
            "meals": {"total": counts.total_meals, "today": counts.meals_today},
        }


def serialize_user(user: AdminUser) -> dict[str, object]:
    """Return a JSON-friendly view of an admin user."""
    return {
        "id": str(user.id),
        "username": user.username,
        "role": user.role,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }
