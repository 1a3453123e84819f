from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .exercise import ExerciseEntry
from .meal import MealEntry


class DashboardSummary(BaseModel):
    """Aggregated statistics shown on the dashboard snapshot."""

    total_calories: int = Field(0, description="Sum of calories across all meals")
    total_meals: int = Field(0, description="Number of logged meals")
    total_exercise_minutes: int = Field(
        0, description="Sum of minutes across all exercise sessions"
    )
    total_exercises: int = Field(0, description="Number of logged exercise sessions")
    latest_meal: Optional[MealEntry] = Field(
        None, description="Meal with the most recent date, if any"
    )
    latest_exercise: Optional[ExerciseEntry] = Field(
        None, description="Exercise session with the most recent date, if any"
    )
