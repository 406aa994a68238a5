"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from chompquest.domain.meals import MealInput, MealRecord
from chompquest.services.meals import MealLogRepository

_MEAL_COLUMNS = (
    "id, user_id, name, calories, protein_g, carbs_g, fat_g, "
    "meal_type, notes, logged_at"
)


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def create_meal_log(
        self, user_id: UUID, meal: MealInput, logged_at: datetime
    ) -> MealRecord:
        """Create a meal log row and return it."""
        response = (
            self.client.table("meal_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    **_meal_fields(meal),
                    "logged_at": logged_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return parse_meal_row(response.data[0])

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals in the time range, newest first."""
        response = (
            self.client.table("meal_logs")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=True)
            .execute()
        )
        return [parse_meal_row(row) for row in response.data or []]

    def update_meal_log(
        self, user_id: UUID, meal_id: UUID, meal: MealInput
    ) -> MealRecord | None:
        """Update a meal owned by the user."""
        response = (
            self.client.table("meal_logs")
            .update(
                {
                    **_meal_fields(meal),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return parse_meal_row(response.data[0])

    def delete_meal_log(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal owned by the user."""
        response = (
            self.client.table("meal_logs")
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _meal_fields(meal: MealInput) -> dict[str, object]:
    return {
        "name": meal.name,
        "calories": meal.calories,
        "protein_g": meal.protein_g,
        "carbs_g": meal.carbs_g,
        "fat_g": meal.fat_g,
        "meal_type": meal.meal_type,
        "notes": meal.notes,
    }


def parse_logged_at(raw: object) -> datetime:
    """Parse a stored timestamp as an aware UTC datetime."""
    if not isinstance(raw, str) or not raw:
        return datetime.min.replace(tzinfo=UTC)
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def parse_meal_row(row: dict[str, object]) -> MealRecord:
    """Convert a meal_logs row into a domain record."""
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        calories=float(row.get("calories") or 0.0),
        protein_g=float(row.get("protein_g") or 0.0),
        carbs_g=float(row.get("carbs_g") or 0.0),
        fat_g=float(row.get("fat_g") or 0.0),
        meal_type=str(row.get("meal_type") or "snack"),
        notes=str(row.get("notes") or ""),
        logged_at=parse_logged_at(row.get("logged_at")),
    )
