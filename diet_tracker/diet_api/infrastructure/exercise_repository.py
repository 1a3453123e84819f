from __future__ import annotations

from typing import List, Optional

from ...models.exercise import ExerciseDraft, ExerciseEntry
from ...services.interfaces import DietBackendAPI
from ..application.ports import EntryId, ExerciseRepository
from ._parsing import id_segment, parse_list, parse_one


class HttpExerciseRepository(ExerciseRepository):
    """Concrete REST adapter handling exercise persistence and queries."""

    def __init__(self, *, client: DietBackendAPI) -> None:
        self._client = client

    async def list_exercises(self) -> List[ExerciseEntry]:
        payload = await self._client.get("/diet/exercise")
        return parse_list(payload, ExerciseEntry, "exercises")

    async def create_exercise(self, draft: ExerciseDraft) -> Optional[ExerciseEntry]:
        payload = await self._client.post("/diet/saveExercise", draft.to_payload())
        return parse_one(payload, ExerciseEntry)

    async def update_exercise(
        self, exercise_id: EntryId, draft: ExerciseDraft
    ) -> Optional[ExerciseEntry]:
        payload = await self._client.put(
            f"/diet/exercise/{id_segment(exercise_id)}", draft.to_payload()
        )
        return parse_one(payload, ExerciseEntry)

    async def delete_exercise(self, exercise_id: EntryId) -> None:
        await self._client.delete(f"/diet/deleteExercise/{id_segment(exercise_id)}")


def create_exercise_repository(*, client: DietBackendAPI) -> ExerciseRepository:
    """Create a REST exercise adapter without relying on application wiring."""
    return HttpExerciseRepository(client=client)
