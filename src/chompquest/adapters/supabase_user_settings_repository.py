"""Supabase repository for user nutrition goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from chompquest.domain.gamification import GoalTargets
from chompquest.services.user_settings import UserSettingsRepository

_GOAL_COLUMNS = "calorie_goal, protein_goal, carbs_goal, fat_goal, water_intake_goal"


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_goals(self, user_id: UUID) -> GoalTargets | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("user_settings")
            .select(_GOAL_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        if row.get("calorie_goal") is None:
            return None
        return GoalTargets(
            calories=float(row["calorie_goal"]),
            protein_g=float(row["protein_goal"]),
            carbs_g=float(row["carbs_goal"]),
            fat_g=float(row["fat_goal"]),
            water_ml=float(row["water_intake_goal"]),
        )

    def set_goals(self, user_id: UUID, goals: GoalTargets) -> None:
        """Update the user's goals."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "calorie_goal": goals.calories,
                "protein_goal": goals.protein_g,
                "carbs_goal": goals.carbs_g,
                "fat_goal": goals.fat_g,
                "water_intake_goal": goals.water_ml,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
