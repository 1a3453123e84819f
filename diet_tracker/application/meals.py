from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..diet_api.application.ports import EntryId, MealRepository
from ..models.meal import MealDraft
from ..models.responses import OperationStatus


@dataclass
class SaveMealUseCase:
    """Create a meal, or update it when an identifier is given."""

    repository: MealRepository

    async def __call__(
        self, draft: MealDraft, meal_id: Optional[EntryId] = None
    ) -> OperationStatus:
        if meal_id is None:
            saved = await self.repository.create_meal(draft)
        else:
            saved = await self.repository.update_meal(meal_id, draft)
        resolved_id = saved.id if saved is not None and saved.id is not None else meal_id
        return OperationStatus(status="ok", id=resolved_id)


@dataclass
class DeleteMealUseCase:
    """Remove a meal from the backend."""

    repository: MealRepository

    async def __call__(self, meal_id: EntryId) -> OperationStatus:
        await self.repository.delete_meal(meal_id)
        return OperationStatus(status="ok", id=meal_id)


__all__ = ["SaveMealUseCase", "DeleteMealUseCase"]
