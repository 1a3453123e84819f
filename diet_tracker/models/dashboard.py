from __future__ import annotations

from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from .exercise import ExerciseEntry
from .meal import MealEntry
from .summary import DashboardSummary

DashboardStatus = Literal["loading", "loaded", "error"]


class DashboardState(BaseModel):
    """What the dashboard view renders after a refresh attempt."""

    status: DashboardStatus
    meals: List[MealEntry] = Field(default_factory=list)
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    summary: Optional[DashboardSummary] = None
    error: Optional[str] = None

    @classmethod
    def loading(cls) -> "DashboardState":
        return cls(status="loading")

    @classmethod
    def loaded(
        cls,
        meals: Sequence[MealEntry],
        exercises: Sequence[ExerciseEntry],
        summary: DashboardSummary,
    ) -> "DashboardState":
        return cls(
            status="loaded",
            meals=list(meals),
            exercises=list(exercises),
            summary=summary,
        )

    @classmethod
    def failed(cls, message: str) -> "DashboardState":
        return cls(status="error", error=message)
