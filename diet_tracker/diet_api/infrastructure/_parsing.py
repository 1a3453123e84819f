from __future__ import annotations

import logging
from typing import Any, List, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from ..application.ports import DietBackendError, EntryId

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def id_segment(entry_id: EntryId) -> str:
    """Render an opaque identifier as a single URL path segment."""

    return quote(str(entry_id), safe="")


def parse_list(payload: Any, model: Type[ModelT], resource: str) -> List[ModelT]:
    """Parse a list response, skipping items that are not JSON objects."""

    if not isinstance(payload, list):
        raise DietBackendError(
            f"Expected a list of {resource}, got {type(payload).__name__}"
        )
    entries: List[ModelT] = []
    for item in payload:
        entry = parse_one(item, model)
        if entry is None:
            logger.warning("Skipping malformed %s record: %r", resource, item)
            continue
        entries.append(entry)
    return entries


def parse_one(payload: Any, model: Type[ModelT]) -> Optional[ModelT]:
    if not isinstance(payload, dict):
        return None
    try:
        return model.model_validate(payload)
    except ValidationError:
        return None
