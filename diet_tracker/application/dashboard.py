"""Dashboard refresh and the view-layer session built around it."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Sequence

from ..diet_api.application.ports import (
    DietBackendError,
    EntryId,
    ExerciseRepository,
    MealRepository,
)
from ..domain.summary import build_dashboard_summary
from ..models.dashboard import DashboardState
from ..models.exercise import ExerciseDraft, ExerciseEntry
from ..models.meal import MealDraft, MealEntry
from ..models.responses import OperationStatus
from ..models.summary import DashboardSummary
from .exercises import DeleteExerciseUseCase, SaveExerciseUseCase
from .meals import DeleteMealUseCase, SaveMealUseCase

logger = logging.getLogger(__name__)

SummaryBuilder = Callable[[Sequence[MealEntry], Sequence[ExerciseEntry]], DashboardSummary]

FETCH_FAILED = "Failed to fetch data. Check that the backend is running."
SAVE_MEAL_FAILED = "Unable to save meal. Please try again."
SAVE_EXERCISE_FAILED = "Unable to save exercise. Please try again."
DELETE_MEAL_FAILED = "Failed to delete meal."
DELETE_EXERCISE_FAILED = "Failed to delete exercise."


@dataclass
class LoadDashboardUseCase:
    """Fetch meals and exercises together and summarise them.

    Both requests run concurrently. The result is ``loaded`` only when both
    succeed; a single failure yields ``error`` with no lists attached.
    """

    meals: MealRepository
    exercises: ExerciseRepository
    summary_builder: SummaryBuilder = build_dashboard_summary

    async def __call__(self) -> DashboardState:
        meals, exercises = await asyncio.gather(
            self.meals.list_meals(),
            self.exercises.list_exercises(),
            return_exceptions=True,
        )
        for result in (meals, exercises):
            if isinstance(result, DietBackendError):
                logger.error("Data load error", exc_info=result)
                return DashboardState.failed(FETCH_FAILED)
            if isinstance(result, BaseException):
                raise result
        return DashboardState.loaded(
            meals, exercises, self.summary_builder(meals, exercises)
        )


class DashboardSession:
    """Holds the last fetched dashboard state and the current edit targets.

    Every successful mutation is followed by a full refetch. A failed
    mutation leaves the state untouched and reports an alert message.
    """

    def __init__(
        self,
        *,
        meals: MealRepository,
        exercises: ExerciseRepository,
        summary_builder: SummaryBuilder = build_dashboard_summary,
    ) -> None:
        self._load = LoadDashboardUseCase(meals, exercises, summary_builder)
        self._save_meal = SaveMealUseCase(meals)
        self._delete_meal = DeleteMealUseCase(meals)
        self._save_exercise = SaveExerciseUseCase(exercises)
        self._delete_exercise = DeleteExerciseUseCase(exercises)
        self.state: DashboardState = DashboardState.loading()
        self.editing_meal: Optional[MealEntry] = None
        self.editing_exercise: Optional[ExerciseEntry] = None

    async def refresh(self) -> DashboardState:
        self.state = DashboardState.loading()
        self.state = await self._load()
        return self.state

    def edit_meal(self, meal: Optional[MealEntry]) -> None:
        self.editing_meal = meal

    def edit_exercise(self, exercise: Optional[ExerciseEntry]) -> None:
        self.editing_exercise = exercise

    async def submit_meal(self, draft: MealDraft) -> OperationStatus:
        if self.editing_meal is not None and self.editing_meal.id is None:
            logger.warning("Cannot update a meal record without an id")
            return OperationStatus(status="error", message=SAVE_MEAL_FAILED)
        meal_id = self.editing_meal.id if self.editing_meal else None
        status = await self._mutate(
            lambda: self._save_meal(draft, meal_id), SAVE_MEAL_FAILED
        )
        if status.ok:
            self.editing_meal = None
            await self.refresh()
        return status

    async def submit_exercise(self, draft: ExerciseDraft) -> OperationStatus:
        if self.editing_exercise is not None and self.editing_exercise.id is None:
            logger.warning("Cannot update an exercise record without an id")
            return OperationStatus(status="error", message=SAVE_EXERCISE_FAILED)
        exercise_id = self.editing_exercise.id if self.editing_exercise else None
        status = await self._mutate(
            lambda: self._save_exercise(draft, exercise_id), SAVE_EXERCISE_FAILED
        )
        if status.ok:
            self.editing_exercise = None
            await self.refresh()
        return status

    async def delete_meal(self, meal_id: EntryId) -> OperationStatus:
        status = await self._mutate(lambda: self._delete_meal(meal_id), DELETE_MEAL_FAILED)
        if status.ok:
            await self.refresh()
        return status

    async def delete_exercise(self, exercise_id: EntryId) -> OperationStatus:
        status = await self._mutate(
            lambda: self._delete_exercise(exercise_id), DELETE_EXERCISE_FAILED
        )
        if status.ok:
            await self.refresh()
        return status

    @staticmethod
    async def _mutate(
        operation: Callable[[], Awaitable[OperationStatus]], failure_message: str
    ) -> OperationStatus:
        try:
            return await operation()
        except DietBackendError:
            logger.exception(failure_message)
            return OperationStatus(status="error", message=failure_message)


__all__ = [
    "DashboardSession",
    "LoadDashboardUseCase",
    "FETCH_FAILED",
    "SAVE_MEAL_FAILED",
    "SAVE_EXERCISE_FAILED",
    "DELETE_MEAL_FAILED",
    "DELETE_EXERCISE_FAILED",
]
