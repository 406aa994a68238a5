"""Daily goal evaluation, point awards, streak and rank updates.

``evaluate`` is a pure function: it never mutates the record passed in and
performs no I/O. Callers are responsible for loading and persisting the
record under a per-user lock.
"""

from dataclasses import replace
from datetime import date

from chompquest.domain.days import previous_day
from chompquest.domain.gamification import (
    GOAL_NAMES,
    AwardEvent,
    GamificationRecord,
    GoalEvaluation,
    GoalTargets,
    empty_latches,
    rank_for_streak,
)
from chompquest.domain.stats import DailyTotals

GOAL_POINTS = 10
ALL_GOALS_BONUS_POINTS = 50


class InvalidInputError(ValueError):
    """Raised when targets or totals cannot be evaluated."""


def evaluate(
    record: GamificationRecord,
    targets: GoalTargets,
    totals: DailyTotals,
    today: date,
) -> GoalEvaluation:
    """Evaluate today's totals and return the updated record with award events."""
    target_values = targets.by_goal()
    total_values = totals.by_goal()
    _validate(target_values, total_values)

    updated = _roll_over(record, today)
    latches = dict(updated.individual_goals_completed_today)
    satisfied = {
        name: total_values[name] >= target_values[name] for name in GOAL_NAMES
    }

    events: list[AwardEvent] = []
    points = updated.point_total
    for name in GOAL_NAMES:
        if satisfied[name] and not latches.get(name, False):
            latches[name] = True
            points += GOAL_POINTS
            events.append(AwardEvent(kind="goal", goal=name, points=GOAL_POINTS))

    streak = updated.daily_streak
    goals_completed_today = updated.goals_completed_today
    last_completed = updated.last_goals_completed_date
    if all(satisfied.values()) and not goals_completed_today:
        points += ALL_GOALS_BONUS_POINTS
        streak += 1
        goals_completed_today = True
        last_completed = today
        events.append(
            AwardEvent(
                kind="all_goals_bonus",
                points=ALL_GOALS_BONUS_POINTS,
                streak=streak,
            )
        )

    return GoalEvaluation(
        record=replace(
            updated,
            daily_streak=streak,
            point_total=points,
            current_rank=rank_for_streak(streak),
            goals_completed_today=goals_completed_today,
            individual_goals_completed_today=latches,
            last_goals_completed_date=last_completed,
        ),
        events=events,
    )


def _roll_over(record: GamificationRecord, today: date) -> GamificationRecord:
    """Clear daily latches when the stored reset day is not today."""
    if record.last_daily_reset == today:
        return record
    streak = record.daily_streak
    last_completed = record.last_goals_completed_date
    # Only a completion strictly before yesterday proves a missed day.
    if last_completed is not None and last_completed < previous_day(today):
        streak = 0
    return replace(
        record,
        daily_streak=streak,
        goals_completed_today=last_completed == today,
        individual_goals_completed_today=empty_latches(),
        last_daily_reset=today,
    )


def _validate(targets: dict[str, float], totals: dict[str, float]) -> None:
    for name in GOAL_NAMES:
        if targets[name] <= 0:
            raise InvalidInputError(f"Goal target for {name} must be positive")
        if totals[name] < 0:
            raise InvalidInputError(f"Daily total for {name} cannot be negative")
