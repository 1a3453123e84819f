"""Command line entry point for the diet tracker (``diet-tracker``)."""

from __future__ import annotations

import asyncio
import datetime as dt
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

import click
from pydantic import ValidationError

from .application.dashboard import DashboardSession
from .models.exercise import ACTIVITY_OPTIONS, ExerciseDraft, ExerciseEntry
from .models.meal import MEAL_TYPES, MealDraft, MealEntry
from .models.responses import OperationStatus
from .presentation import (
    EXERCISE_COLUMNS,
    MEAL_COLUMNS,
    NO_EXERCISE_LOGGED,
    NO_MEALS_LOGGED,
    exercise_rows,
    meal_rows,
    stat_cards,
    validation_messages,
)
from .settings import Settings, get_settings
from .wiring import build_dashboard_session


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _echo_table(rows: List[Dict[str, str]], columns: Sequence[str]) -> None:
    widths = {
        column: max([len(column)] + [len(row.get(column, "")) for row in rows])
        for column in columns
    }
    click.echo("  ".join(column.ljust(widths[column]) for column in columns))
    click.echo("  ".join("-" * widths[column] for column in columns))
    for row in rows:
        click.echo("  ".join(row.get(column, "").ljust(widths[column]) for column in columns))


def _load(session: DashboardSession) -> None:
    state = asyncio.run(session.refresh())
    if state.status == "error":
        raise click.ClickException(state.error or "Failed to fetch data.")


def _report(session: DashboardSession, status: OperationStatus, verb: str) -> None:
    if not status.ok:
        raise click.ClickException(status.message or f"Unable to {verb}.")
    suffix = f" (id {status.id})" if status.id is not None else ""
    click.echo(f"{verb.capitalize()}d{suffix}.")
    if session.state.status == "error":
        click.echo(f"Warning: {session.state.error}", err=True)


def _build_draft(model: Any, **values: Any) -> Any:
    try:
        return model(**values)
    except ValidationError as exc:
        messages = "; ".join(validation_messages(model, exc))
        raise click.UsageError(messages) from exc


@click.group()
@click.option(
    "--api-url",
    default=None,
    help="Backend base URL; overrides DIET_TRACKER_API_BASE_URL.",
)
@click.pass_context
def cli(ctx: click.Context, api_url: Optional[str]) -> None:
    """Log meals and exercise sessions against the diet backend."""

    settings = get_settings()
    if api_url:
        settings = settings.model_copy(update={"api_base_url": api_url})
    _configure_logging(settings)
    ctx.obj = build_dashboard_session(settings)


@cli.command()
@click.pass_obj
def summary(session: DashboardSession) -> None:
    """Show the dashboard snapshot."""

    _load(session)
    snapshot = session.state.summary
    if snapshot is None:
        raise click.ClickException("No summary available.")
    for card in stat_cards(snapshot):
        click.echo(f"{card.label}: {card.value} ({card.sub})")


@cli.group()
def meals() -> None:
    """Manage meal records."""


@meals.command("list")
@click.pass_obj
def list_meals(session: DashboardSession) -> None:
    _load(session)
    entries = session.state.meals
    if not entries:
        click.echo(NO_MEALS_LOGGED)
        return
    rows = [
        {"ID": str(entry.id), **row} for entry, row in zip(entries, meal_rows(entries))
    ]
    _echo_table(rows, ("ID",) + MEAL_COLUMNS)


def _meal_options(func: Any) -> Any:
    func = click.option(
        "--calories", type=int, required=True, help="Energy in kcal (at least 1)."
    )(func)
    func = click.option("--food", "food_name", required=True, help="Food item.")(func)
    func = click.option(
        "--meal-type",
        type=click.Choice(MEAL_TYPES, case_sensitive=False),
        default=MEAL_TYPES[0],
        show_default=True,
    )(func)
    func = click.option(
        "--date",
        "entry_date",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help="Day of the meal; defaults to today.",
    )(func)
    return func


def _meal_draft(
    entry_date: Optional[dt.datetime], meal_type: str, food_name: str, calories: int
) -> MealDraft:
    values: Dict[str, Any] = {
        "meal_type": meal_type.upper(),
        "food_name": food_name,
        "calories": calories,
    }
    if entry_date is not None:
        values["date"] = entry_date.date()
    return _build_draft(MealDraft, **values)


@meals.command("add")
@_meal_options
@click.pass_obj
def add_meal(
    session: DashboardSession,
    entry_date: Optional[dt.datetime],
    meal_type: str,
    food_name: str,
    calories: int,
) -> None:
    """Create a meal record."""

    draft = _meal_draft(entry_date, meal_type, food_name, calories)
    _report(session, asyncio.run(session.submit_meal(draft)), "create")


@meals.command("update")
@click.argument("meal_id")
@_meal_options
@click.pass_obj
def update_meal(
    session: DashboardSession,
    meal_id: str,
    entry_date: Optional[dt.datetime],
    meal_type: str,
    food_name: str,
    calories: int,
) -> None:
    """Replace the meal identified by MEAL_ID."""

    draft = _meal_draft(entry_date, meal_type, food_name, calories)
    session.edit_meal(MealEntry(id=meal_id))
    _report(session, asyncio.run(session.submit_meal(draft)), "update")


@meals.command("delete")
@click.argument("meal_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def delete_meal(session: DashboardSession, meal_id: str, yes: bool) -> None:
    if not yes:
        click.confirm("Delete this meal?", abort=True)
    _report(session, asyncio.run(session.delete_meal(meal_id)), "delete")


@cli.group()
def exercises() -> None:
    """Manage exercise sessions."""


@exercises.command("list")
@click.pass_obj
def list_exercises(session: DashboardSession) -> None:
    _load(session)
    entries = session.state.exercises
    if not entries:
        click.echo(NO_EXERCISE_LOGGED)
        return
    rows = [
        {"ID": str(entry.id), **row}
        for entry, row in zip(entries, exercise_rows(entries))
    ]
    _echo_table(rows, ("ID",) + EXERCISE_COLUMNS)


def _exercise_options(func: Any) -> Any:
    func = click.option(
        "--minutes", type=int, required=True, help="Duration in minutes (at least 1)."
    )(func)
    func = click.option(
        "--activity",
        "activity_name",
        default=ACTIVITY_OPTIONS[0],
        show_default=True,
        help=f"One of {', '.join(ACTIVITY_OPTIONS)}, or free text.",
    )(func)
    func = click.option(
        "--date",
        "entry_date",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help="Day of the session; defaults to today.",
    )(func)
    return func


def _exercise_draft(
    entry_date: Optional[dt.datetime], activity_name: str, minutes: int
) -> ExerciseDraft:
    values: Dict[str, Any] = {"activity_name": activity_name, "minutes": minutes}
    if entry_date is not None:
        values["date"] = entry_date.date()
    return _build_draft(ExerciseDraft, **values)


@exercises.command("add")
@_exercise_options
@click.pass_obj
def add_exercise(
    session: DashboardSession,
    entry_date: Optional[dt.datetime],
    activity_name: str,
    minutes: int,
) -> None:
    """Create an exercise session."""

    draft = _exercise_draft(entry_date, activity_name, minutes)
    _report(session, asyncio.run(session.submit_exercise(draft)), "create")


@exercises.command("update")
@click.argument("exercise_id")
@_exercise_options
@click.pass_obj
def update_exercise(
    session: DashboardSession,
    exercise_id: str,
    entry_date: Optional[dt.datetime],
    activity_name: str,
    minutes: int,
) -> None:
    """Replace the exercise session identified by EXERCISE_ID."""

    draft = _exercise_draft(entry_date, activity_name, minutes)
    session.edit_exercise(ExerciseEntry(id=exercise_id))
    _report(session, asyncio.run(session.submit_exercise(draft)), "update")


@exercises.command("delete")
@click.argument("exercise_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def delete_exercise(session: DashboardSession, exercise_id: str, yes: bool) -> None:
    if not yes:
        click.confirm("Delete this exercise?", abort=True)
    _report(session, asyncio.run(session.delete_exercise(exercise_id)), "delete")


def main(argv: Sequence[str] | None = None) -> int:
    """Invoke the click group and propagate the exit code."""
    args = list(argv) if argv is not None else None

    try:
        cli.main(args=args, prog_name="diet-tracker", standalone_mode=False)
    except click.exceptions.Exit as exc:  # pragma: no cover - click handles sys.exit
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return 0


if __name__ == "__main__":  # pragma: no cover - convenience execution path
    sys.exit(main(sys.argv[1:]))
