"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from chompquest.api.admin import router as admin_router
from chompquest.api.models import (
    CreateUserRequest,
    GoalsRequest,
    MealRequest,
    WaterRequest,
)
from chompquest.app_logging import configure_logging
from chompquest.containers import AppContainer
from chompquest.domain.days import utc_today
from chompquest.domain.gamification import GoalTargets
from chompquest.domain.meals import MealInput, MealRecord
from chompquest.domain.models import UserRecord
from chompquest.services.gamification import serialize_evaluation, serialize_record
from chompquest.services.goal_engine import InvalidInputError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="ChompQuest")
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/users", status_code=status.HTTP_201_CREATED)
    async def create_user(
        payload: CreateUserRequest, request: Request
    ) -> dict[str, object]:
        """Create a user, or return the existing one for the username."""
        state_container: AppContainer = request.app.state.container
        user = state_container.user_service.ensure_user(payload.username)
        return {"id": str(user.id), "username": user.username, "role": user.role}

    @app.get("/users/{user_id}/goals")
    async def get_goals(user_id: UUID, request: Request) -> dict[str, object]:
        """Return the user's daily nutrition goals."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        settings_service = state_container.user_settings_service
        goals = settings_service.get_goals(user_id)
        return {
            "goals": goals.by_goal(),
            "goals_set": settings_service.are_goals_set(user_id),
        }

    @app.put("/users/{user_id}/goals")
    async def set_goals(
        user_id: UUID, payload: GoalsRequest, request: Request
    ) -> dict[str, object]:
        """Replace the user's daily nutrition goals."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        goals = GoalTargets(
            calories=payload.calories,
            protein_g=payload.protein,
            carbs_g=payload.carbs,
            fat_g=payload.fat,
            water_ml=payload.water,
        )
        state_container.user_settings_service.set_goals(user_id, goals)
        return {"goals": goals.by_goal()}

    @app.post("/users/{user_id}/meals", status_code=status.HTTP_201_CREATED)
    async def add_meal(
        user_id: UUID, payload: MealRequest, request: Request
    ) -> dict[str, object]:
        """Log a meal for the user."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        try:
            meal = state_container.meal_log_service.log_meal(
                user_id, _meal_input(payload)
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return {"meal": _serialize_meal(meal)}

    @app.get("/users/{user_id}/meals")
    async def list_meals(user_id: UUID, request: Request) -> dict[str, object]:
        """Return meals logged today (UTC)."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        meals = state_container.meal_log_service.list_meals_for_day(
            user_id, utc_today()
        )
        return {"meals": [_serialize_meal(meal) for meal in meals]}

    @app.put("/users/{user_id}/meals/{meal_id}")
    async def update_meal(
        user_id: UUID, meal_id: UUID, payload: MealRequest, request: Request
    ) -> dict[str, object]:
        """Edit one of the user's meals."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        try:
            meal = state_container.meal_log_service.update_meal(
                user_id, meal_id, _meal_input(payload)
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        if meal is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found"
            )
        return {"meal": _serialize_meal(meal)}

    @app.delete("/users/{user_id}/meals/{meal_id}")
    async def delete_meal(
        user_id: UUID, meal_id: UUID, request: Request
    ) -> dict[str, str]:
        """Delete one of the user's meals."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        if not state_container.meal_log_service.delete_meal(user_id, meal_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found"
            )
        return {"status": "deleted"}

    @app.post("/users/{user_id}/water")
    async def add_water(
        user_id: UUID, payload: WaterRequest, request: Request
    ) -> dict[str, object]:
        """Add water to today's running total."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        intake = state_container.water_service.add_water(
            user_id, payload.amount_ml, utc_today()
        )
        return {"date": intake.day.isoformat(), "intake_ml": intake.intake_ml}

    @app.get("/users/{user_id}/nutrition/today")
    async def nutrition_today(user_id: UUID, request: Request) -> dict[str, object]:
        """Return today's totals, goals and progress percentages."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        totals, logs = state_container.stats_service.get_today_with_logs(
            user_id, utc_today()
        )
        goals = state_container.user_settings_service.get_goals(user_id)
        progress = state_container.stats_service.get_progress(totals, goals)
        return {
            "date": totals.day.isoformat(),
            "totals": totals.by_goal(),
            "goals": goals.by_goal(),
            "meals": len(logs),
            "progress": {
                name: {
                    "current": entry.current,
                    "goal": entry.goal,
                    "percentage": entry.percentage,
                }
                for name, entry in progress.items()
            },
        }

    @app.post("/users/{user_id}/daily-goals/check")
    async def check_daily_goals(
        user_id: UUID, request: Request
    ) -> dict[str, object]:
        """Evaluate today's goals and award points, streak and rank."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        try:
            result = await state_container.gamification_service.check_daily_goals(
                user_id
            )
        except InvalidInputError as exc:
            logger.warning(
                "Rejected goal evaluation: %s", exc, extra={"user_id": str(user_id)}
            )
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except Exception:
            logger.exception(
                "Daily goal check failed", extra={"user_id": str(user_id)}
            )
            raise
        return serialize_evaluation(result)

    @app.get("/users/{user_id}/game-stats")
    async def game_stats(user_id: UUID, request: Request) -> dict[str, object]:
        """Return the user's streak, points and rank."""
        state_container: AppContainer = request.app.state.container
        _require_user(state_container, user_id)
        record = state_container.gamification_service.get_record(user_id)
        return {"game_stats": serialize_record(record)}

    return app


def _require_user(state_container: AppContainer, user_id: UUID) -> UserRecord:
    """Return the user or raise a 404."""
    user = state_container.user_service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return user


def _meal_input(payload: MealRequest) -> MealInput:
    return MealInput(
        name=payload.name,
        calories=payload.calories,
        protein_g=payload.protein,
        carbs_g=payload.carbs,
        fat_g=payload.fat,
        meal_type=payload.meal_type,
        notes=payload.notes,
    )


def _serialize_meal(meal: MealRecord) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "calories": meal.calories,
        "protein": meal.protein_g,
        "carbs": meal.carbs_g,
        "fat": meal.fat_g,
        "meal_type": meal.meal_type,
        "notes": meal.notes,
        "logged_at": meal.logged_at.isoformat(),
    }
