"""Supabase repository for daily statistics."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from chompquest.adapters.supabase_meal_log_repository import parse_logged_at
from chompquest.domain.stats import MealLogRow
from chompquest.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for stats queries."""

    client: Client

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogRow]:
        """Return meal logs in the time range."""
        response = (
            self.client.table("meal_logs")
            .select("id, logged_at, calories, protein_g, carbs_g, fat_g")
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_water_total(self, user_id: UUID, day: date) -> float:
        """Return the water intake for a day."""
        response = (
            self.client.table("water_intake")
            .select("intake_ml")
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return 0.0
        return float(response.data[0].get("intake_ml") or 0.0)


def _parse_row(row: dict[str, object]) -> MealLogRow:
    return MealLogRow(
        meal_id=UUID(str(row["id"])),
        logged_at=parse_logged_at(row.get("logged_at")),
        calories=float(row.get("calories") or 0.0),
        protein_g=float(row.get("protein_g") or 0.0),
        carbs_g=float(row.get("carbs_g") or 0.0),
        fat_g=float(row.get("fat_g") or 0.0),
    )
