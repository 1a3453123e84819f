"""Application layer use cases coordinating domain services."""

from .dashboard import DashboardSession, LoadDashboardUseCase
from .exercises import DeleteExerciseUseCase, SaveExerciseUseCase
from .meals import DeleteMealUseCase, SaveMealUseCase

__all__ = [
    "DashboardSession",
    "LoadDashboardUseCase",
    "SaveMealUseCase",
    "DeleteMealUseCase",
    "SaveExerciseUseCase",
    "DeleteExerciseUseCase",
]
