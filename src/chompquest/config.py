"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from chompquest.domain.gamification import GoalTargets

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    default_calorie_goal: float = 2000
    default_protein_goal: float = 100
    default_carbs_goal: float = 250
    default_fat_goal: float = 60
    default_water_goal: float = 2000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def default_goals(self) -> GoalTargets:
        """Return the goals applied to users without saved goals."""
        return GoalTargets(
            calories=self.default_calorie_goal,
            protein_g=self.default_protein_goal,
            carbs_g=self.default_carbs_goal,
            fat_g=self.default_fat_goal,
            water_ml=self.default_water_goal,
        )
