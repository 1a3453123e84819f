"""Dashboard summary builders."""

from __future__ import annotations

import datetime as dt
from typing import Optional, Sequence, TypeVar, Union

from ..models.coercion import coerce_count
from ..models.exercise import ExerciseEntry
from ..models.meal import MealEntry
from ..models.summary import DashboardSummary

Dated = TypeVar("Dated", bound=Union[MealEntry, ExerciseEntry])


def latest_by_date(items: Sequence[Dated]) -> Optional[Dated]:
    """Return the item with the greatest date, preferring later items on ties.

    Undated items rank below every dated one.
    """

    latest: Optional[Dated] = None
    latest_key = dt.date.min
    for item in items:
        key = item.date or dt.date.min
        if latest is None or key >= latest_key:
            latest, latest_key = item, key
    return latest


def build_dashboard_summary(
    meals: Sequence[MealEntry], exercises: Sequence[ExerciseEntry]
) -> DashboardSummary:
    """Aggregate fetched meals and exercises into dashboard statistics."""
    return DashboardSummary(
        total_calories=sum(coerce_count(m.calories) for m in meals),
        total_meals=len(meals),
        total_exercise_minutes=sum(coerce_count(e.minutes) for e in exercises),
        total_exercises=len(exercises),
        latest_meal=latest_by_date(meals),
        latest_exercise=latest_by_date(exercises),
    )
