"""Ports for the diet backend application layer."""

from __future__ import annotations

from typing import List, Optional, Protocol, Union, runtime_checkable

from ...models.exercise import ExerciseDraft, ExerciseEntry
from ...models.meal import MealDraft, MealEntry

EntryId = Union[int, str]


class DietBackendError(RuntimeError):
    """Raised when a call to the diet backend fails for any reason."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


@runtime_checkable
class MealRepository(Protocol):
    """Port defining the meal-facing backend operations."""

    async def list_meals(self) -> List[MealEntry]:
        """Return every stored meal."""

    async def create_meal(self, draft: MealDraft) -> Optional[MealEntry]:
        """Persist a new meal and return it as stored, when echoed back."""

    async def update_meal(self, meal_id: EntryId, draft: MealDraft) -> Optional[MealEntry]:
        """Replace an existing meal."""

    async def delete_meal(self, meal_id: EntryId) -> None:
        """Remove a meal."""


@runtime_checkable
class ExerciseRepository(Protocol):
    """Port defining the exercise-facing backend operations."""

    async def list_exercises(self) -> List[ExerciseEntry]:
        """Return every stored exercise session."""

    async def create_exercise(self, draft: ExerciseDraft) -> Optional[ExerciseEntry]:
        """Persist a new exercise session."""

    async def update_exercise(
        self, exercise_id: EntryId, draft: ExerciseDraft
    ) -> Optional[ExerciseEntry]:
        """Replace an existing exercise session."""

    async def delete_exercise(self, exercise_id: EntryId) -> None:
        """Remove an exercise session."""


__all__ = [
    "DietBackendError",
    "EntryId",
    "ExerciseRepository",
    "MealRepository",
]
