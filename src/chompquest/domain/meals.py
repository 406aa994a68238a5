"""Domain models for meal and water logging."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class MealInput:
    """Meal details supplied by the user."""

    name: str
    calories: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    meal_type: str = "snack"
    notes: str = ""


@dataclass(frozen=True)
class MealRecord:
    """Persisted meal row."""

    id: UUID
    user_id: UUID
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    meal_type: str
    notes: str
    logged_at: datetime


@dataclass(frozen=True)
class WaterIntake:
    """Water consumed by a user on one UTC day."""

    user_id: UUID
    day: date
    intake_ml: float
