"""Audit logging for changes made outside goal evaluation."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


class AuditRepository(Protocol):
    """Persistence interface for audit events."""

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        actor: str,
        entity_type: str,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Create an audit event row."""

    def list_events(self, user_id: UUID, limit: int) -> list[dict[str, object]]:
        """Return recent audit events for a user."""


@dataclass
class AuditService:
    """Service for recording audit events."""

    repository: AuditRepository

    def record_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        actor: str,
        entity_type: str,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Persist an audit event."""
        self.repository.create_event(
            user_id=user_id,
            actor=actor,
            entity_type=entity_type,
            event_type=event_type,
            before=before,
            after=after,
        )

    def list_events(self, user_id: UUID, limit: int = 20) -> list[dict[str, object]]:
        """Return a user's most recent audit events."""
        return self.repository.list_events(user_id, limit)
