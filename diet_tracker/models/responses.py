from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class OperationStatus(BaseModel):
    """Normalized outcome of a create, update or delete."""

    status: Literal["ok", "error"] = Field(
        ..., description="Short status indicator for the operation outcome."
    )
    id: Optional[Union[int, str]] = Field(
        None, description="Identifier of the resource affected by the operation, when relevant."
    )
    message: Optional[str] = Field(
        None, description="User-facing explanation when the operation failed."
    )
    model_config = ConfigDict(json_schema_extra={"required": ["status"]})

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @model_serializer(mode="wrap")
    def _serialize(self, handler):  # type: ignore[override]
        payload = handler(self)
        for key in ("id", "message"):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload
