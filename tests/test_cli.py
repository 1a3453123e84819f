"""Command line interface."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from diet_tracker import cli as cli_module
from diet_tracker.application.dashboard import DashboardSession
from diet_tracker.diet_api.application.ports import DietBackendError
from diet_tracker.models import DashboardState

from tests.builders import make_exercise, make_meal
from tests.fakes import ExerciseRepositoryFake, MealRepositoryFake


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def patched_session(
    monkeypatch: pytest.MonkeyPatch, session: DashboardSession
) -> DashboardSession:
    monkeypatch.setattr(cli_module, "build_dashboard_session", lambda settings: session)
    return session


def test_summary_prints_stat_cards(
    runner: CliRunner,
    meal_repository: MealRepositoryFake,
    exercise_repository: ExerciseRepositoryFake,
) -> None:
    meal_repository.meals = [make_meal(id=1, date="2024-01-05", foodName="Wrap", calories=600)]
    exercise_repository.exercises = [make_exercise(id=1, minutes=25)]

    result = runner.invoke(cli_module.cli, ["summary"])

    assert result.exit_code == 0, result.output
    assert "Total Calories: 600 kcal (Across 1 meals)" in result.output
    assert "Workout Minutes: 25 min (From 1 sessions)" in result.output
    assert "Latest Meal: Wrap" in result.output


def test_summary_reports_fetch_failure(
    runner: CliRunner, exercise_repository: ExerciseRepositoryFake
) -> None:
    exercise_repository.fail_on("list_exercises", DietBackendError("down"))

    result = runner.invoke(cli_module.cli, ["summary"])

    assert result.exit_code == 1
    assert "Failed to fetch data" in result.output


def test_summary_fails_cleanly_without_snapshot(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch, session: DashboardSession
) -> None:
    async def refresh() -> DashboardState:
        session.state = DashboardState(status="loaded")
        return session.state

    monkeypatch.setattr(session, "refresh", refresh)

    result = runner.invoke(cli_module.cli, ["summary"])

    assert result.exit_code == 1
    assert "No summary available." in result.output


def test_meals_list_and_empty_message(
    runner: CliRunner, meal_repository: MealRepositoryFake
) -> None:
    empty = runner.invoke(cli_module.cli, ["meals", "list"])
    meal_repository.meals = [make_meal(id=42, foodName="Bagel", mealType="BREAKFAST")]
    listed = runner.invoke(cli_module.cli, ["meals", "list"])

    assert "No meals logged yet." in empty.output
    assert listed.exit_code == 0
    assert "42" in listed.output
    assert "Bagel" in listed.output
    assert "Breakfast" in listed.output


def test_meals_add_creates_record(
    runner: CliRunner, meal_repository: MealRepositoryFake
) -> None:
    result = runner.invoke(
        cli_module.cli,
        [
            "meals",
            "add",
            "--date",
            "2024-03-01",
            "--meal-type",
            "lunch",
            "--food",
            "Burrito",
            "--calories",
            "700",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Created" in result.output
    created = meal_repository.meals[0]
    assert created.food_name == "Burrito"
    assert created.meal_type == "LUNCH"
    assert created.date.isoformat() == "2024-03-01"


def test_meals_add_rejects_invalid_draft(
    runner: CliRunner, meal_repository: MealRepositoryFake
) -> None:
    result = runner.invoke(
        cli_module.cli, ["meals", "add", "--food", "X", "--calories", "0"]
    )

    assert result.exit_code == 2
    assert "at least 2 characters" in result.output
    assert meal_repository.call_names() == []


def test_meals_update_targets_identifier(
    runner: CliRunner, meal_repository: MealRepositoryFake
) -> None:
    result = runner.invoke(
        cli_module.cli,
        ["meals", "update", "7", "--food", "Pho", "--calories", "450"],
    )

    assert result.exit_code == 0, result.output
    name, args = meal_repository.calls[0]
    assert name == "update_meal"
    assert args[0] == "7"


def test_meals_delete_requires_confirmation(
    runner: CliRunner, meal_repository: MealRepositoryFake
) -> None:
    meal_repository.meals = [make_meal(id="3")]

    declined = runner.invoke(cli_module.cli, ["meals", "delete", "3"], input="n\n")

    assert declined.exit_code == 1
    assert meal_repository.call_names() == []

    confirmed = runner.invoke(cli_module.cli, ["meals", "delete", "3", "--yes"])

    assert confirmed.exit_code == 0, confirmed.output
    assert meal_repository.meals == []


def test_exercise_failure_surfaces_alert(
    runner: CliRunner, exercise_repository: ExerciseRepositoryFake
) -> None:
    exercise_repository.fail_on("create_exercise", DietBackendError("boom"))

    result = runner.invoke(
        cli_module.cli, ["exercises", "add", "--activity", "Running", "--minutes", "30"]
    )

    assert result.exit_code == 1
    assert "Unable to save exercise. Please try again." in result.output


def test_exercises_list_and_delete(
    runner: CliRunner, exercise_repository: ExerciseRepositoryFake
) -> None:
    exercise_repository.exercises = [make_exercise(id=9, activityName="Swimming", minutes=50)]

    listed = runner.invoke(cli_module.cli, ["exercises", "list"])
    deleted = runner.invoke(cli_module.cli, ["exercises", "delete", "9", "--yes"])

    assert "Swimming" in listed.output
    assert "50 min" in listed.output
    assert deleted.exit_code == 0, deleted.output
    assert exercise_repository.call_names()[-2:] == ["delete_exercise", "list_exercises"]


def test_main_returns_exit_codes(exercise_repository: ExerciseRepositoryFake) -> None:
    assert cli_module.main(["summary"]) == 0

    exercise_repository.fail_on("list_exercises", DietBackendError("down"))

    assert cli_module.main(["summary"]) == 1
