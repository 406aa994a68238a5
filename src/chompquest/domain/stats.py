"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class MealLogRow:
    """Summary data for a logged meal."""

    meal_id: UUID
    logged_at: datetime
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros and water intake."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    water_ml: float

    def by_goal(self) -> dict[str, float]:
        """Return totals keyed by goal name."""
        return {
            "calories": self.calories,
            "protein": self.protein_g,
            "carbs": self.carbs_g,
            "fat": self.fat_g,
            "water": self.water_ml,
        }


@dataclass(frozen=True)
class GoalProgress:
    """Progress toward a single daily goal."""

    current: float
    goal: float
    percentage: int
