"""Domain models for ChompQuest users."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

USER_ROLES = ("member", "admin")


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str
    role: str = "member"
    created_at: datetime | None = None
