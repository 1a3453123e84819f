from __future__ import annotations

from typing import List, Optional

from ...models.meal import MealDraft, MealEntry
from ...services.interfaces import DietBackendAPI
from ..application.ports import EntryId, MealRepository
from ._parsing import id_segment, parse_list, parse_one


class HttpMealRepository(MealRepository):
    """Concrete REST adapter handling meal persistence and queries."""

    def __init__(self, *, client: DietBackendAPI) -> None:
        self._client = client

    async def list_meals(self) -> List[MealEntry]:
        payload = await self._client.get("/diet")
        return parse_list(payload, MealEntry, "meals")

    async def create_meal(self, draft: MealDraft) -> Optional[MealEntry]:
        payload = await self._client.post("/diet/saveMeal", draft.to_payload())
        return parse_one(payload, MealEntry)

    async def update_meal(self, meal_id: EntryId, draft: MealDraft) -> Optional[MealEntry]:
        payload = await self._client.put(
            f"/diet/{id_segment(meal_id)}", draft.to_payload()
        )
        return parse_one(payload, MealEntry)

    async def delete_meal(self, meal_id: EntryId) -> None:
        await self._client.delete(f"/diet/deleteMeal/{id_segment(meal_id)}")


def create_meal_repository(*, client: DietBackendAPI) -> MealRepository:
    """Create a REST meal adapter without relying on application wiring."""
    return HttpMealRepository(client=client)
