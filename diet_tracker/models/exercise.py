from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coercion import coerce_count, coerce_date

ACTIVITY_OPTIONS: Tuple[str, ...] = ("Walking", "Running", "Swimming", "Yoga")


class ExerciseEntry(BaseModel):
    """Exercise session as stored by the backend."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[Union[int, str]] = None
    date: Optional[dt.date] = None
    activity_name: str = Field("", alias="activityName")
    minutes: int = 0

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Optional[dt.date]:
        return coerce_date(value)

    @field_validator("minutes", mode="before")
    @classmethod
    def _parse_minutes(cls, value: Any) -> int:
        return coerce_count(value)

    @field_validator("activity_name", mode="before")
    @classmethod
    def _parse_activity(cls, value: Any) -> str:
        return "" if value is None else str(value)


class ExerciseDraft(BaseModel):
    """Validated exercise form submitted on create or update.

    ``activity_name`` is normally one of :data:`ACTIVITY_OPTIONS` but free
    text is accepted.
    """

    model_config = ConfigDict(populate_by_name=True)

    date: dt.date = Field(default_factory=dt.date.today)
    activity_name: str = Field(ACTIVITY_OPTIONS[0], alias="activityName", min_length=1)
    minutes: int = Field(..., ge=1)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
