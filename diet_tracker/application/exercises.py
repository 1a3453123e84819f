from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..diet_api.application.ports import EntryId, ExerciseRepository
from ..models.exercise import ExerciseDraft
from ..models.responses import OperationStatus


@dataclass
class SaveExerciseUseCase:
    """Create an exercise session, or update it when an identifier is given."""

    repository: ExerciseRepository

    async def __call__(
        self, draft: ExerciseDraft, exercise_id: Optional[EntryId] = None
    ) -> OperationStatus:
        if exercise_id is None:
            saved = await self.repository.create_exercise(draft)
        else:
            saved = await self.repository.update_exercise(exercise_id, draft)
        resolved_id = (
            saved.id if saved is not None and saved.id is not None else exercise_id
        )
        return OperationStatus(status="ok", id=resolved_id)


@dataclass
class DeleteExerciseUseCase:
    """Remove an exercise session from the backend."""

    repository: ExerciseRepository

    async def __call__(self, exercise_id: EntryId) -> OperationStatus:
        await self.repository.delete_exercise(exercise_id)
        return OperationStatus(status="ok", id=exercise_id)


__all__ = ["SaveExerciseUseCase", "DeleteExerciseUseCase"]
