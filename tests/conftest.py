"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncIterator, Dict

import httpx
import pytest
import pytest_asyncio

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from diet_tracker.application.dashboard import DashboardSession
from diet_tracker.services.interfaces import DietBackendAPI
from diet_tracker.settings import Settings
from diet_tracker.wiring import build_dashboard_session

from tests.fakes import ExerciseRepositoryFake, FakeDietBackend, MealRepositoryFake


@dataclass
class _Expectation:
    expected: Dict[str, Any]
    returns: Any = None
    raises: Exception | None = None


class DietBackendAPIStub(DietBackendAPI):
    """Stubbed backend client with expectation helpers."""

    def __init__(self) -> None:
        self._expectations: Dict[str, list[_Expectation]] = {
            "get": [],
            "post": [],
            "put": [],
            "delete": [],
        }
        self._call_history: Dict[str, list[Dict[str, Any]]] = {}

    def _expect(
        self,
        name: str,
        path: str | None,
        payload: Dict[str, Any] | None,
        returns: Any,
        raises: Exception | None,
    ) -> "DietBackendAPIStub":
        self._expectations[name].append(
            _Expectation({"path": path, "payload": payload}, returns, raises)
        )
        return self

    def expect_get(
        self, path: str | None = None, *, returns: Any = None, raises: Exception | None = None
    ) -> "DietBackendAPIStub":
        return self._expect("get", path, None, returns, raises)

    def expect_post(
        self,
        path: str | None = None,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "DietBackendAPIStub":
        return self._expect("post", path, payload, returns, raises)

    def expect_put(
        self,
        path: str | None = None,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "DietBackendAPIStub":
        return self._expect("put", path, payload, returns, raises)

    def expect_delete(
        self, path: str | None = None, *, raises: Exception | None = None
    ) -> "DietBackendAPIStub":
        return self._expect("delete", path, None, None, raises)

    def history(self, name: str) -> list[Dict[str, Any]]:
        return list(self._call_history.get(name, []))

    def assert_all_consumed(self) -> None:
        leftovers = {name: len(items) for name, items in self._expectations.items() if items}
        assert not leftovers, f"Unconsumed expectations: {leftovers}"

    async def get(self, path: str) -> Any:
        return self._handle_call("get", {"path": path})

    async def post(self, path: str, payload: Dict[str, Any]) -> Any:
        return self._handle_call("post", {"path": path, "payload": payload})

    async def put(self, path: str, payload: Dict[str, Any]) -> Any:
        return self._handle_call("put", {"path": path, "payload": payload})

    async def delete(self, path: str) -> None:
        self._handle_call("delete", {"path": path})

    def _handle_call(self, name: str, call: Dict[str, Any]) -> Any:
        self._call_history.setdefault(name, []).append(call)
        expectations = self._expectations[name]
        if expectations:
            expectation = expectations.pop(0)
            for key, expected_value in expectation.expected.items():
                if expected_value is not None and call.get(key) != expected_value:
                    raise AssertionError(
                        f"Expected {name} {key}={expected_value!r} but got {call.get(key)!r}"
                    )
            if expectation.raises:
                raise expectation.raises
            return expectation.returns
        return None


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(api_base_url="http://backend.test/api", request_timeout=5.0)


@pytest.fixture
def backend_api_stub() -> DietBackendAPIStub:
    return DietBackendAPIStub()


@pytest.fixture
def meal_repository() -> MealRepositoryFake:
    return MealRepositoryFake()


@pytest.fixture
def exercise_repository() -> ExerciseRepositoryFake:
    return ExerciseRepositoryFake()


@pytest.fixture
def session(
    meal_repository: MealRepositoryFake, exercise_repository: ExerciseRepositoryFake
) -> DashboardSession:
    """Dashboard session backed by in-memory repositories."""

    return DashboardSession(meals=meal_repository, exercises=exercise_repository)


@pytest.fixture
def fake_backend() -> FakeDietBackend:
    return FakeDietBackend()


@pytest_asyncio.fixture
async def backend_http_client(fake_backend: FakeDietBackend) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client routed to the in-memory backend app."""

    transport = httpx.ASGITransport(app=fake_backend.app)
    async with httpx.AsyncClient(transport=transport) as client:
        yield client


@pytest.fixture
def wired_session(settings: Settings, backend_http_client: httpx.AsyncClient) -> DashboardSession:
    """Dashboard session wired through the real client to the fake backend."""

    return build_dashboard_session(settings, http_client=backend_http_client)
