"""Infrastructure helpers for the diet backend integration."""

from .exercise_repository import HttpExerciseRepository, create_exercise_repository
from .meal_repository import HttpMealRepository, create_meal_repository

__all__ = [
    "HttpExerciseRepository",
    "HttpMealRepository",
    "create_exercise_repository",
    "create_meal_repository",
]
