"""Supabase admin data access."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from chompquest.domain.admin import AdminUser, SystemCounts
from chompquest.services.admin import AdminRepository

_USER_OWNED_TABLES = ("meal_logs", "water_intake", "game_stats", "user_settings")


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for admin queries."""

    client: Client

    def list_users(self) -> list[AdminUser]:
        """Return all users ordered by creation time."""
        response = (
            self.client.table("users")
            .select("id, username, role, created_at")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_admin_user(row) for row in response.data or []]

    def update_role(self, user_id: UUID, role: str) -> AdminUser | None:
        """Set a user's role."""
        response = (
            self.client.table("users")
            .update({"role": role})
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_admin_user(response.data[0])

    def delete_user(self, user_id: UUID) -> bool:
        """Delete the user's rows in every user-owned table, then the user."""
        for table in _USER_OWNED_TABLES:
            self.client.table(table).delete().eq("user_id", str(user_id)).execute()
        response = (
            self.client.table("users").delete().eq("id", str(user_id)).execute()
        )
        return bool(response.data)

    def get_system_counts(self, start: datetime, end: datetime) -> SystemCounts:
        """Return user and meal counts."""
        total_users = (
            self.client.table("users").select("id", count="exact").execute().count
        )
        admin_users = (
            self.client.table("users")
            .select("id", count="exact")
            .eq("role", "admin")
            .execute()
            .count
        )
        total_meals = (
            self.client.table("meal_logs").select("id", count="exact").execute().count
        )
        meals_today = (
            self.client.table("meal_logs")
            .select("id", count="exact")
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .execute()
            .count
        )
        return SystemCounts(
            total_users=total_users or 0,
            admin_users=admin_users or 0,
            total_meals=total_meals or 0,
            meals_today=meals_today or 0,
        )


def _parse_admin_user(row: dict[str, object]) -> AdminUser:
    created = row.get("created_at")
    return AdminUser(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        role=str(row.get("role") or "member"),
        created_at=datetime.fromisoformat(created)
        if isinstance(created, str) and created
        else None,
    )
