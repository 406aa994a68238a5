"""Supabase repository for per-user game stats."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from chompquest.domain.days import format_day, parse_day
from chompquest.domain.gamification import (
    GOAL_NAMES,
    GamificationRecord,
    rank_for_streak,
)
from chompquest.services.gamification import GamificationRepository


@dataclass
class SupabaseGamificationRepository(GamificationRepository):
    """Supabase implementation backed by the game_stats table."""

    client: Client

    def get_record(self, user_id: UUID) -> GamificationRecord | None:
        """Return the stored record for a user."""
        response = (
            self.client.table("game_stats")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_record(self, user_id: UUID, record: GamificationRecord) -> None:
        """Upsert the record keyed by user id."""
        self.client.table("game_stats").upsert(
            {
                "user_id": str(user_id),
                "daily_streak": record.daily_streak,
                "point_total": record.point_total,
                "current_rank": record.current_rank.value,
                "goals_completed_today": record.goals_completed_today,
                "individual_goals_completed_today": dict(
                    record.individual_goals_completed_today
                ),
                "last_goals_completed_date": format_day(
                    record.last_goals_completed_date
                ),
                "last_daily_reset": format_day(record.last_daily_reset),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _parse_row(row: dict[str, object]) -> GamificationRecord:
    raw_latches = row.get("individual_goals_completed_today")
    latches = raw_latches if isinstance(raw_latches, dict) else {}
    streak = int(row.get("daily_streak") or 0)
    return GamificationRecord(
        daily_streak=streak,
        point_total=int(row.get("point_total") or 0),
        # Stored rank is informational; the streak is authoritative.
        current_rank=rank_for_streak(streak),
        goals_completed_today=bool(row.get("goals_completed_today")),
        individual_goals_completed_today={
            name: bool(latches.get(name, False)) for name in GOAL_NAMES
        },
        last_goals_completed_date=parse_day(row.get("last_goals_completed_date")),
        last_daily_reset=parse_day(row.get("last_daily_reset")),
    )
