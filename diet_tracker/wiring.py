"""Dependency wiring for application use cases."""

from __future__ import annotations

from typing import Optional

import httpx

from .application.dashboard import DashboardSession
from .diet_api.application.ports import ExerciseRepository, MealRepository
from .diet_api.infrastructure import create_exercise_repository, create_meal_repository
from .services.diet_backend import get_diet_backend_client
from .services.interfaces import DietBackendAPI
from .settings import Settings, get_settings


def provide_backend_client(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> DietBackendAPI:
    return get_diet_backend_client(settings or get_settings(), http_client)


def provide_meal_repository(client: DietBackendAPI) -> MealRepository:
    return create_meal_repository(client=client)


def provide_exercise_repository(client: DietBackendAPI) -> ExerciseRepository:
    return create_exercise_repository(client=client)


def build_dashboard_session(
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> DashboardSession:
    """Assemble a dashboard session talking to the configured backend."""

    client = provide_backend_client(settings, http_client)
    return DashboardSession(
        meals=provide_meal_repository(client),
        exercises=provide_exercise_repository(client),
    )


__all__ = [
    "provide_backend_client",
    "provide_meal_repository",
    "provide_exercise_repository",
    "build_dashboard_session",
]
