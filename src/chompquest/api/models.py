"""Pydantic models for API request payloads."""

from typing import Literal

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Payload for creating or fetching a user."""

    username: str = Field(min_length=1, max_length=64)


class GoalsRequest(BaseModel):
    """Daily nutrition goals; every target must be positive."""

    calories: float = Field(gt=0)
    protein: float = Field(gt=0)
    carbs: float = Field(gt=0)
    fat: float = Field(gt=0)
    water: float = Field(gt=0)


class MealRequest(BaseModel):
    """Meal logging payload."""

    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    meal_type: Literal["breakfast", "lunch", "dinner", "snack"] = "snack"
    notes: str = ""


class WaterRequest(BaseModel):
    """Water logging payload in millilitres."""

    amount_ml: float = Field(gt=0)


class GameStatsOverrideRequest(BaseModel):
    """Admin override for a user's streak and points."""

    daily_streak: int = Field(ge=0)
    point_total: int = Field(ge=0)
    actor: str = "admin"


class RoleUpdateRequest(BaseModel):
    """Admin role change."""

    role: Literal["member", "admin"]
    actor: str = "admin"
