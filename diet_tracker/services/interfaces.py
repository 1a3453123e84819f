"""Protocol interfaces for external service clients."""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class DietBackendAPI(Protocol):
    """Minimal interface for the diet backend REST client."""

    async def get(self, path: str) -> Any:
        """Fetch ``path`` and return the decoded JSON body."""

    async def post(self, path: str, payload: Dict[str, Any]) -> Any:
        """Create a resource and return the decoded JSON body, if any."""

    async def put(self, path: str, payload: Dict[str, Any]) -> Any:
        """Replace a resource and return the decoded JSON body, if any."""

    async def delete(self, path: str) -> None:
        """Delete the resource at ``path``."""
