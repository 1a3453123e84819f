"""Formatting helpers shared by the Streamlit page and the CLI."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel, ValidationError

from .models.exercise import ACTIVITY_OPTIONS, ExerciseEntry
from .models.meal import MEAL_TYPES, MealEntry
from .models.summary import DashboardSummary

NO_MEALS_LOGGED = "No meals logged yet."
NO_EXERCISE_LOGGED = "No exercise logged yet."

MEAL_COLUMNS = ("Date", "Meal Type", "Food Item", "Calories")
EXERCISE_COLUMNS = ("Date", "Exercise & Activities", "Minutes")

FIELD_LABELS: Dict[str, str] = {
    "date": "Date",
    "meal_type": "Meal type",
    "food_name": "Food item",
    "calories": "Calories",
    "activity_name": "Activity",
    "minutes": "Minutes",
}


@dataclass(frozen=True)
class StatCard:
    label: str
    value: str
    sub: str


def format_meal_type(meal_type: str) -> str:
    """``BREAKFAST`` -> ``Breakfast``."""
    return meal_type[:1].upper() + meal_type[1:].lower()


def format_short_date(value: Optional[dt.date]) -> str:
    if value is None:
        return ""
    return f"{value:%b} {value.day}"


def format_table_date(value: Optional[dt.date]) -> str:
    return value.isoformat() if value is not None else ""


def meal_rows(meals: Sequence[MealEntry]) -> List[Dict[str, str]]:
    return [
        {
            "Date": format_table_date(meal.date),
            "Meal Type": format_meal_type(meal.meal_type),
            "Food Item": meal.food_name,
            "Calories": f"{meal.calories} kcal",
        }
        for meal in meals
    ]


def exercise_rows(exercises: Sequence[ExerciseEntry]) -> List[Dict[str, str]]:
    return [
        {
            "Date": format_table_date(exercise.date),
            "Exercise & Activities": exercise.activity_name,
            "Minutes": f"{exercise.minutes} min",
        }
        for exercise in exercises
    ]


def stat_cards(summary: DashboardSummary) -> List[StatCard]:
    """Build the four snapshot cards shown above the tables."""

    latest_meal = summary.latest_meal
    latest_exercise = summary.latest_exercise
    return [
        StatCard(
            label="Total Calories",
            value=f"{summary.total_calories:,} kcal",
            sub=f"Across {summary.total_meals or 'no'} meals",
        ),
        StatCard(
            label="Workout Minutes",
            value=f"{summary.total_exercise_minutes:,} min",
            sub=f"From {summary.total_exercises or 'no'} sessions",
        ),
        StatCard(
            label="Latest Meal",
            value=latest_meal.food_name if latest_meal else "No meals yet",
            sub=(
                f"{format_short_date(latest_meal.date)} · "
                f"{format_meal_type(latest_meal.meal_type)}"
                if latest_meal
                else "Add a meal to start"
            ),
        ),
        StatCard(
            label="Latest Exercise",
            value=latest_exercise.activity_name if latest_exercise else "No exercise yet",
            sub=(
                f"{format_short_date(latest_exercise.date)} · {latest_exercise.minutes} min"
                if latest_exercise
                else "Log a session to start"
            ),
        ),
    ]


def meal_form_defaults(
    editing: Optional[MealEntry], *, today: Optional[dt.date] = None
) -> Dict[str, Any]:
    """Initial form values: the edited meal, or a blank breakfast for today."""

    if editing is None:
        return {
            "date": today or dt.date.today(),
            "meal_type": MEAL_TYPES[0],
            "food_name": "",
            "calories": None,
        }
    return {
        "date": editing.date or today or dt.date.today(),
        "meal_type": editing.meal_type if editing.meal_type in MEAL_TYPES else MEAL_TYPES[0],
        "food_name": editing.food_name,
        "calories": editing.calories,
    }


def exercise_form_defaults(
    editing: Optional[ExerciseEntry], *, today: Optional[dt.date] = None
) -> Dict[str, Any]:
    """Initial form values; unknown activities fall back to the first option."""

    if editing is None:
        return {
            "date": today or dt.date.today(),
            "activity_name": ACTIVITY_OPTIONS[0],
            "minutes": None,
        }
    activity = (
        editing.activity_name
        if editing.activity_name in ACTIVITY_OPTIONS
        else ACTIVITY_OPTIONS[0]
    )
    return {
        "date": editing.date or today or dt.date.today(),
        "activity_name": activity,
        "minutes": editing.minutes,
    }


def error_field(model: Type[BaseModel], loc: Sequence[Any]) -> str:
    """Resolve the first ``loc`` item of a validation error to a field name.

    Depending on the pydantic release and on how the model was populated,
    ``loc`` holds either the field name or its alias.
    """

    key = str(loc[0]) if loc else ""
    for name, field in model.model_fields.items():
        if key in (name, field.alias):
            return name
    return key


def validation_messages(model: Type[BaseModel], exc: ValidationError) -> List[str]:
    """Human readable ``Label: message`` lines for a failed draft."""

    messages = []
    for error in exc.errors():
        name = error_field(model, error["loc"])
        label = FIELD_LABELS.get(name, name)
        messages.append(f"{label}: {error['msg']}" if label else error["msg"])
    return messages
