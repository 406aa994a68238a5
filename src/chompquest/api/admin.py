"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from chompquest.api.models import (  # noqa: TC001
    GameStatsOverrideRequest,
    RoleUpdateRequest,
)
from chompquest.services.admin import serialize_user
from chompquest.services.gamification import serialize_record

if TYPE_CHECKING:
    from chompquest.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users", dependencies=[Depends(require_admin)])
async def list_users(request: Request) -> dict[str, object]:
    """Return all users with their game stats."""
    container: AppContainer = request.app.state.container
    return {"users": container.admin_service.list_users()}


@router.get("/users/{user_id}", dependencies=[Depends(require_admin)])
async def user_detail(user_id: UUID, request: Request) -> dict[str, object]:
    """Return game stats, goals and audit history for a user."""
    container: AppContainer = request.app.state.container
    if container.user_service.get_user(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return container.admin_service.get_user_detail(user_id)


@router.put("/users/{user_id}/game-stats", dependencies=[Depends(require_admin)])
async def override_game_stats(
    user_id: UUID, payload: GameStatsOverrideRequest, request: Request
) -> dict[str, object]:
    """Overwrite a user's streak and points; the change is audited."""
    container: AppContainer = request.app.state.container
    if container.user_service.get_user(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    record = await container.admin_service.override_game_stats(
        user_id,
        actor=payload.actor,
        daily_streak=payload.daily_streak,
        point_total=payload.point_total,
    )
    return {"game_stats": serialize_record(record)}


@router.put("/users/{user_id}/role", dependencies=[Depends(require_admin)])
async def update_role(
    user_id: UUID, payload: RoleUpdateRequest, request: Request
) -> dict[str, object]:
    """Change a user's role; the change is audited."""
    container: AppContainer = request.app.state.container
    user = container.admin_service.update_role(
        user_id, actor=payload.actor, role=payload.role
    )
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"user": serialize_user(user)}


@router.delete("/users/{user_id}", dependencies=[Depends(require_admin)])
async def delete_user(
    user_id: UUID,
    request: Request,
    x_admin_user_id: UUID | None = Header(default=None),
) -> dict[str, str]:
    """Delete a user with their meals, water, game stats and settings."""
    container: AppContainer = request.app.state.container
    try:
        deleted = container.admin_service.delete_user(
            user_id, actor="admin", actor_id=x_admin_user_id
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted", "user_id": str(user_id)}


@router.get("/stats", dependencies=[Depends(require_admin)])
async def system_stats(request: Request) -> dict[str, object]:
    """Return user and meal counts."""
    container: AppContainer = request.app.state.container
    return {"stats": container.admin_service.get_system_stats()}
