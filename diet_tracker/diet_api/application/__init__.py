"""Application layer helpers for the diet backend integration."""

from .ports import DietBackendError, EntryId, ExerciseRepository, MealRepository

__all__ = ["DietBackendError", "EntryId", "ExerciseRepository", "MealRepository"]
