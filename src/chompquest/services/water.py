"""Water intake service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from chompquest.domain.meals import WaterIntake


class WaterRepository(Protocol):
    """Persistence interface for daily water intake."""

    def get_intake(self, user_id: UUID, day: date) -> WaterIntake | None:
        """Return the intake row for a day, if present."""

    def upsert_intake(self, user_id: UUID, day: date, intake_ml: float) -> None:
        """Create or replace the intake total for a day."""


@dataclass
class WaterService:
    """Service for tracking daily water totals."""

    repository: WaterRepository

    def add_water(self, user_id: UUID, amount_ml: float, day: date) -> WaterIntake:
        """Add water to the day's running total and return the new total."""
        if amount_ml <= 0:
            raise ValueError("Water amount must be positive")
        current = self.get_water(user_id, day)
        updated = WaterIntake(
            user_id=user_id, day=day, intake_ml=current.intake_ml + amount_ml
        )
        self.repository.upsert_intake(user_id, day, updated.intake_ml)
        return updated

    def get_water(self, user_id: UUID, day: date) -> WaterIntake:
        """Return the day's intake, zero when nothing was logged."""
        existing = self.repository.get_intake(user_id, day)
        if existing is None:
            return WaterIntake(user_id=user_id, day=day, intake_ml=0.0)
        return existing
