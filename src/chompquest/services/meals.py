"""Meal logging service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from chompquest.domain.days import day_bounds
from chompquest.domain.meals import MEAL_TYPES, MealInput, MealRecord


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def create_meal_log(
        self, user_id: UUID, meal: MealInput, logged_at: datetime
    ) -> MealRecord:
        """Create a meal log and return it."""

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return a user's meals within a time range, newest first."""

    def update_meal_log(
        self, user_id: UUID, meal_id: UUID, meal: MealInput
    ) -> MealRecord | None:
        """Replace a user's meal fields and return it, or None if not theirs."""

    def delete_meal_log(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a user's meal and return True if a row was removed."""


@dataclass
class MealLogService:
    """Service that validates and persists meal logs."""

    repository: MealLogRepository

    def log_meal(
        self, user_id: UUID, meal: MealInput, logged_at: datetime | None = None
    ) -> MealRecord:
        """Persist a meal for the user."""
        _validate_meal(meal)
        return self.repository.create_meal_log(
            user_id, meal, logged_at or datetime.now(tz=UTC)
        )

    def list_meals_for_day(self, user_id: UUID, day: date) -> list[MealRecord]:
        """Return the user's meals logged on a UTC day."""
        start, end = day_bounds(day)
        return self.repository.list_meal_logs(user_id, start, end)

    def update_meal(
        self, user_id: UUID, meal_id: UUID, meal: MealInput
    ) -> MealRecord | None:
        """Edit one of the user's meals, keeping its logged time."""
        _validate_meal(meal)
        return self.repository.update_meal_log(user_id, meal_id, meal)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete one of the user's meals."""
        return self.repository.delete_meal_log(user_id, meal_id)


def _validate_meal(meal: MealInput) -> None:
    if not meal.name.strip():
        raise ValueError("Meal name is required")
    if meal.meal_type not in MEAL_TYPES:
        raise ValueError(f"Unknown meal type: {meal.meal_type}")
    for label, value in (
        ("calories", meal.calories),
        ("protein", meal.protein_g),
        ("carbs", meal.carbs_g),
        ("fat", meal.fat_g),
    ):
        if value < 0:
            raise ValueError(f"Meal {label} cannot be negative")
