from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..diet_api.application.ports import DietBackendError
from ..settings import Settings
from .interfaces import DietBackendAPI

logger = logging.getLogger(__name__)


class DietBackendClient(DietBackendAPI):
    """Minimal diet backend HTTP client with shared error handling.

    A shared ``http_client`` may be injected; otherwise each call opens a
    short-lived ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url: str = settings.api_base_url.rstrip("/")
        self._timeout: Optional[float] = settings.request_timeout
        self._http_client = http_client

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            if self._http_client is not None:
                resp = await self._http_client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    resp = await client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise DietBackendError(
                f"{method} {path} failed", detail=str(exc) or type(exc).__name__
            ) from exc
        if resp.is_error:
            raise DietBackendError(
                f"{method} {path} returned {resp.status_code}",
                status_code=resp.status_code,
                detail=resp.text,
            )
        return resp

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise DietBackendError(
                "Backend returned a body that is not JSON",
                status_code=resp.status_code,
                detail=resp.text,
            ) from exc

    async def get(self, path: str) -> Any:
        resp = await self._request("GET", path)
        return self._decode(resp)

    async def post(self, path: str, payload: Dict[str, Any]) -> Any:
        resp = await self._request("POST", path, json=payload)
        return self._decode(resp)

    async def put(self, path: str, payload: Dict[str, Any]) -> Any:
        resp = await self._request("PUT", path, json=payload)
        return self._decode(resp)

    async def delete(self, path: str) -> None:
        await self._request("DELETE", path)


def get_diet_backend_client(
    settings: Settings, http_client: Optional[httpx.AsyncClient] = None
) -> DietBackendAPI:
    """Provide a configured diet backend client."""

    return DietBackendClient(settings=settings, http_client=http_client)
