"""Statistics service for daily nutrition totals."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from chompquest.domain.days import day_bounds
from chompquest.domain.gamification import GoalTargets
from chompquest.domain.stats import DailyTotals, GoalProgress, MealLogRow


class StatsRepository(Protocol):
    """Persistence interface for meal and water statistics."""

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogRow]:
        """Return meal logs within a time range."""

    def get_water_total(self, user_id: UUID, day: date) -> float:
        """Return the water intake recorded for a day."""


@dataclass
class StatsService:
    """Service for computing a user's UTC-day totals."""

    repository: StatsRepository

    def get_today(self, user_id: UUID, day: date) -> DailyTotals:
        """Return meal and water totals for the given UTC day."""
        start, end = day_bounds(day)
        logs = self.repository.list_meal_logs(user_id, start, end)
        water = self.repository.get_water_total(user_id, day)
        return _aggregate_day(day, logs, water)

    def get_today_with_logs(
        self, user_id: UUID, day: date
    ) -> tuple[DailyTotals, list[MealLogRow]]:
        """Return the day's totals and meal logs."""
        start, end = day_bounds(day)
        logs = self.repository.list_meal_logs(user_id, start, end)
        water = self.repository.get_water_total(user_id, day)
        return _aggregate_day(day, logs, water), logs

    def get_progress(
        self, totals: DailyTotals, targets: GoalTargets
    ) -> dict[str, GoalProgress]:
        """Return per-goal progress toward the user's targets."""
        goals = targets.by_goal()
        return {
            name: GoalProgress(
                current=current,
                goal=goals[name],
                percentage=round(current / (goals[name] or 1) * 100),
            )
            for name, current in totals.by_goal().items()
        }


def _aggregate_day(day: date, logs: list[MealLogRow], water_ml: float) -> DailyTotals:
    start, end = day_bounds(day)
    total = DailyTotals(
        day=day, calories=0, protein_g=0, carbs_g=0, fat_g=0, water_ml=water_ml
    )
    for log in logs:
        if not start <= log.logged_at < end:
            continue
        total = DailyTotals(
            day=day,
            calories=total.calories + log.calories,
            protein_g=total.protein_g + log.protein_g,
            carbs_g=total.carbs_g + log.carbs_g,
            fat_g=total.fat_g + log.fat_g,
            water_ml=total.water_ml,
        )
    return total
