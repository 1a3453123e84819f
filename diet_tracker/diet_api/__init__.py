"""Diet backend integration modules."""

from .application import DietBackendError, EntryId, ExerciseRepository, MealRepository
from .infrastructure import (
    HttpExerciseRepository,
    HttpMealRepository,
    create_exercise_repository,
    create_meal_repository,
)

__all__ = [
    "DietBackendError",
    "EntryId",
    "ExerciseRepository",
    "MealRepository",
    "HttpExerciseRepository",
    "HttpMealRepository",
    "create_exercise_repository",
    "create_meal_repository",
]
