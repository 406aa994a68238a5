"""Supabase repository for daily water intake."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from chompquest.domain.meals import WaterIntake
from chompquest.services.water import WaterRepository


@dataclass
class SupabaseWaterRepository(WaterRepository):
    """Supabase implementation for water intake rows."""

    client: Client

    def get_intake(self, user_id: UUID, day: date) -> WaterIntake | None:
        """Return the intake row for a day."""
        response = (
            self.client.table("water_intake")
            .select("intake_ml")
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return WaterIntake(
            user_id=user_id,
            day=day,
            intake_ml=float(response.data[0].get("intake_ml") or 0.0),
        )

    def upsert_intake(self, user_id: UUID, day: date, intake_ml: float) -> None:
        """Create or replace the intake total for a day."""
        self.client.table("water_intake").upsert(
            {
                "user_id": str(user_id),
                "day": day.isoformat(),
                "intake_ml": intake_ml,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id,day",
        ).execute()
