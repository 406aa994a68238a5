"""Domain models for daily goals, streaks and ranks."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

GOAL_NAMES = ("calories", "protein", "carbs", "fat", "water")

SILVER_STREAK = 15
GOLD_STREAK = 30


class Rank(StrEnum):
    """Rank tier derived from the daily streak."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"


def rank_for_streak(daily_streak: int) -> Rank:
    """Return the rank tier for a streak length."""
    if daily_streak >= GOLD_STREAK:
        return Rank.GOLD
    if daily_streak >= SILVER_STREAK:
        return Rank.SILVER
    return Rank.BRONZE


def empty_latches() -> dict[str, bool]:
    """Return a per-goal latch map with every goal unset."""
    return dict.fromkeys(GOAL_NAMES, False)


@dataclass(frozen=True)
class GamificationRecord:
    """Per-user streak, points and daily award latches."""

    daily_streak: int = 0
    point_total: int = 0
    current_rank: Rank = Rank.BRONZE
    goals_completed_today: bool = False
    individual_goals_completed_today: dict[str, bool] = field(
        default_factory=empty_latches
    )
    last_goals_completed_date: date | None = None
    last_daily_reset: date | None = None

    @classmethod
    def initial(cls) -> "GamificationRecord":
        """Return the record used before a user's first evaluation."""
        return cls()


@dataclass(frozen=True)
class GoalTargets:
    """Daily nutrition targets from the user's profile."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    water_ml: float

    @classmethod
    def defaults(cls) -> "GoalTargets":
        """Return the goals applied when a user has none set."""
        return cls(calories=2000, protein_g=100, carbs_g=250, fat_g=60, water_ml=2000)

    def by_goal(self) -> dict[str, float]:
        """Return targets keyed by goal name."""
        return {
            "calories": self.calories,
            "protein": self.protein_g,
            "carbs": self.carbs_g,
            "fat": self.fat_g,
            "water": self.water_ml,
        }


@dataclass(frozen=True)
class AwardEvent:
    """Points granted during a single evaluation."""

    kind: str
    points: int
    goal: str | None = None
    streak: int | None = None


@dataclass(frozen=True)
class GoalEvaluation:
    """Result of evaluating today's totals against a user's goals."""

    record: GamificationRecord
    events: list[AwardEvent]

    @property
    def points_awarded(self) -> int:
        """Return the points granted by this evaluation."""
        return sum(event.points for event in self.events)
