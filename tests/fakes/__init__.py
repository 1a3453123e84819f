from .backend import FakeDietBackend
from .repositories import ExerciseRepositoryFake, MealRepositoryFake

__all__ = ["FakeDietBackend", "ExerciseRepositoryFake", "MealRepositoryFake"]
