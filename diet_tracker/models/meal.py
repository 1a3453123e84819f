from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Literal, Optional, Tuple, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coercion import coerce_count, coerce_date

MealType = Literal["BREAKFAST", "LUNCH", "DINNER", "SNACK"]
MEAL_TYPES: Tuple[str, ...] = get_args(MealType)


class MealEntry(BaseModel):
    """Meal record as stored by the backend.

    Parsing is permissive: records are owned by the remote service, so a
    missing calorie count becomes ``0`` and an unreadable date becomes
    ``None`` instead of rejecting the whole list.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[Union[int, str]] = None
    date: Optional[dt.date] = None
    meal_type: str = Field("", alias="mealType")
    food_name: str = Field("", alias="foodName")
    calories: int = 0

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Optional[dt.date]:
        return coerce_date(value)

    @field_validator("calories", mode="before")
    @classmethod
    def _parse_calories(cls, value: Any) -> int:
        return coerce_count(value)

    @field_validator("meal_type", "food_name", mode="before")
    @classmethod
    def _parse_text(cls, value: Any) -> str:
        return "" if value is None else str(value)


class MealDraft(BaseModel):
    """Validated meal form submitted on create or update."""

    model_config = ConfigDict(populate_by_name=True)

    date: dt.date = Field(default_factory=dt.date.today)
    meal_type: MealType = Field("BREAKFAST", alias="mealType")
    food_name: str = Field(..., alias="foodName", min_length=2)
    calories: int = Field(..., ge=1)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body expected by the backend."""

        return self.model_dump(mode="json", by_alias=True)
