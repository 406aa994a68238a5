"""Admin domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AdminUser:
    """Minimal admin view of a user."""

    id: UUID
    username: str
    role: str
    created_at: datetime | None


@dataclass(frozen=True)
class SystemCounts:
    """Row counts reported on the admin dashboard."""

    total_users: int
    admin_users: int
    total_meals: int
    meals_today: int
