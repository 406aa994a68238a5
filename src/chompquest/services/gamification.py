"""Gamification service: evaluates daily goals and persists streak state."""

import asyncio
import logging
import weakref
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from chompquest.domain.days import utc_today
from chompquest.domain.gamification import (
    GamificationRecord,
    GoalEvaluation,
    rank_for_streak,
)
from chompquest.services.goal_engine import evaluate
from chompquest.services.stats import StatsService
from chompquest.services.user_settings import UserSettingsService

logger = logging.getLogger(__name__)


class GamificationRepository(Protocol):
    """Persistence interface for per-user gamification records."""

    def get_record(self, user_id: UUID) -> GamificationRecord | None:
        """Return the stored record for a user, if present."""

    def save_record(self, user_id: UUID, record: GamificationRecord) -> None:
        """Create or replace the stored record for a user."""


@dataclass
class GamificationService:
    """Runs goal evaluation as a serialized read-evaluate-write per user."""

    repository: GamificationRepository
    stats_service: StatsService
    user_settings_service: UserSettingsService
    _locks: weakref.WeakValueDictionary[UUID, asyncio.Lock] = field(
        default_factory=weakref.WeakValueDictionary, init=False, repr=False
    )

    def get_record(self, user_id: UUID) -> GamificationRecord:
        """Return the user's record, or the initial record if none is stored."""
        stored = self.repository.get_record(user_id)
        if stored is None:
            return GamificationRecord.initial()
        return replace(stored, current_rank=rank_for_streak(stored.daily_streak))

    async def check_daily_goals(
        self, user_id: UUID, today: date | None = None
    ) -> GoalEvaluation:
        """Evaluate today's totals for the user and persist any change."""
        day = today or utc_today()
        async with self._get_lock(user_id):
            stored = await asyncio.to_thread(self.repository.get_record, user_id)
            record = stored or GamificationRecord.initial()
            targets = await asyncio.to_thread(
                self.user_settings_service.get_goals, user_id
            )
            totals = await asyncio.to_thread(
                self.stats_service.get_today, user_id, day
            )
            result = evaluate(record, targets, totals, day)
            if stored is None or result.record != stored:
                await asyncio.to_thread(
                    self.repository.save_record, user_id, result.record
                )

        for event in result.events:
            logger.info(
                "Awarded %s points for %s",
                event.points,
                event.goal or event.kind,
                extra={"user_id": str(user_id), "day": day.isoformat()},
            )
        return result

    async def override_record(
        self, user_id: UUID, daily_streak: int, point_total: int
    ) -> tuple[GamificationRecord, GamificationRecord]:
        """Replace streak and points outside evaluation and return (before, after)."""
        if daily_streak < 0 or point_total < 0:
            raise ValueError("Streak and points cannot be negative")
        async with self._get_lock(user_id):
            stored = await asyncio.to_thread(self.repository.get_record, user_id)
            before = stored or GamificationRecord.initial()
            after = replace(
                before,
                daily_streak=daily_streak,
                point_total=point_total,
                current_rank=rank_for_streak(daily_streak),
            )
            await asyncio.to_thread(self.repository.save_record, user_id, after)
        return before, after

    def _get_lock(self, user_id: UUID) -> asyncio.Lock:
        # Entries vanish once no holder or waiter references the lock.
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock


def serialize_record(record: GamificationRecord) -> dict[str, object]:
    """Return a JSON-friendly view of a gamification record."""
    return {
        "daily_streak": record.daily_streak,
        "point_total": record.point_total,
        "current_rank": record.current_rank.value,
        "goals_completed_today": record.goals_completed_today,
        "individual_goals_completed_today": dict(
            record.individual_goals_completed_today
        ),
        "last_goals_completed_date": record.last_goals_completed_date.isoformat()
        if record.last_goals_completed_date
        else None,
        "last_daily_reset": record.last_daily_reset.isoformat()
        if record.last_daily_reset
        else None,
    }


def serialize_evaluation(result: GoalEvaluation) -> dict[str, object]:
    """Return a JSON-friendly view of an evaluation result."""
    return {
        "game_stats": serialize_record(result.record),
        "points_awarded": result.points_awarded,
        "events": [
            {
                "kind": event.kind,
                "goal": event.goal,
                "points": event.points,
                "streak": event.streak,
            }
            for event in result.events
        ],
    }
