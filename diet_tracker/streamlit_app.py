"""Streamlit dashboard for logging meals and exercise sessions.

Run with ``streamlit run diet_tracker/streamlit_app.py``.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, Sequence, Type

import streamlit as st
from pydantic import BaseModel, ValidationError

from diet_tracker.application.dashboard import DashboardSession
from diet_tracker.models import (
    ACTIVITY_OPTIONS,
    MEAL_TYPES,
    ExerciseDraft,
    ExerciseEntry,
    MealDraft,
    MealEntry,
    OperationStatus,
)
from diet_tracker.presentation import (
    EXERCISE_COLUMNS,
    MEAL_COLUMNS,
    NO_EXERCISE_LOGGED,
    NO_MEALS_LOGGED,
    exercise_form_defaults,
    exercise_rows,
    format_meal_type,
    meal_form_defaults,
    meal_rows,
    stat_cards,
    validation_messages,
)
from diet_tracker.wiring import build_dashboard_session

SESSION_KEY = "dashboard_session"
PENDING_DELETE_KEY = "pending_delete"


def _session() -> DashboardSession:
    """Return the dashboard session stored in Streamlit state, loading it once."""

    if SESSION_KEY not in st.session_state:
        session = build_dashboard_session()
        with st.spinner("Loading..."):
            asyncio.run(session.refresh())
        st.session_state[SESSION_KEY] = session
    return st.session_state[SESSION_KEY]


def _submit(
    action: Callable[[Any], Awaitable[OperationStatus]],
    model: Type[BaseModel],
    **values: Any,
) -> None:
    try:
        draft = model(**values)
    except ValidationError as exc:
        for message in validation_messages(model, exc):
            st.error(message)
        return
    status = asyncio.run(action(draft))
    if not status.ok:
        st.error(status.message)
        return
    st.rerun()


def _render_meal_form(session: DashboardSession) -> None:
    editing = session.editing_meal
    defaults = meal_form_defaults(editing)
    form_key = f"meal-form-{editing.id}" if editing else "meal-form-new"
    with st.form(form_key, clear_on_submit=editing is None):
        st.subheader("Edit Diet Record" if editing else "Add New Diet Record")
        st.caption("Fill in the details to track your meal")
        entry_date = st.date_input("Date", value=defaults["date"])
        meal_type = st.selectbox(
            "Meal Type",
            MEAL_TYPES,
            index=MEAL_TYPES.index(defaults["meal_type"]),
            format_func=format_meal_type,
        )
        food_name = st.text_input("Food Item", value=defaults["food_name"])
        calories = st.number_input(
            "Calories", min_value=0, step=1, value=defaults["calories"]
        )
        submitted = st.form_submit_button(
            "Update Record" if editing else "Create Record", type="primary"
        )
    if editing is not None and st.button("Cancel", key="cancel-meal-edit"):
        session.edit_meal(None)
        st.rerun()
    if submitted:
        _submit(
            session.submit_meal,
            MealDraft,
            date=entry_date,
            meal_type=meal_type,
            food_name=food_name,
            calories=calories,
        )


def _render_exercise_form(session: DashboardSession) -> None:
    editing = session.editing_exercise
    defaults = exercise_form_defaults(editing)
    form_key = f"exercise-form-{editing.id}" if editing else "exercise-form-new"
    with st.form(form_key, clear_on_submit=editing is None):
        st.subheader("Edit Exercise" if editing else "Add Exercise")
        st.caption("Log your workouts and activities.")
        entry_date = st.date_input("Date", value=defaults["date"])
        activity_name = st.selectbox(
            "Exercise & Activities",
            ACTIVITY_OPTIONS,
            index=ACTIVITY_OPTIONS.index(defaults["activity_name"]),
        )
        minutes = st.number_input(
            "Minutes", min_value=0, step=1, value=defaults["minutes"]
        )
        submitted = st.form_submit_button("Save Exercise", type="primary")
    if editing is not None and st.button("Cancel", key="cancel-exercise-edit"):
        session.edit_exercise(None)
        st.rerun()
    if submitted:
        _submit(
            session.submit_exercise,
            ExerciseDraft,
            date=entry_date,
            activity_name=activity_name,
            minutes=minutes,
        )


def _render_snapshot(session: DashboardSession) -> None:
    summary = session.state.summary
    if summary is None:
        return
    st.subheader("Snapshot")
    st.caption(f"Updated {datetime.now():%Y-%m-%d %H:%M}")
    for column, card in zip(st.columns(4), stat_cards(summary)):
        with column:
            st.metric(card.label, card.value)
            st.caption(card.sub)


def _render_pending_delete(session: DashboardSession) -> None:
    pending = st.session_state.get(PENDING_DELETE_KEY)
    if not pending:
        return
    kind, entry_id = pending
    st.warning(f"Delete this {kind}?")
    confirm, cancel = st.columns(2)
    if confirm.button("Delete", key="confirm-delete", type="primary"):
        st.session_state[PENDING_DELETE_KEY] = None
        action = session.delete_meal if kind == "meal" else session.delete_exercise
        status = asyncio.run(action(entry_id))
        if not status.ok:
            st.error(status.message)
            return
        st.rerun()
    if cancel.button("Keep", key="cancel-delete"):
        st.session_state[PENDING_DELETE_KEY] = None
        st.rerun()


def _render_table(
    title: str,
    kind: str,
    entries: Sequence[Any],
    rows: Sequence[Dict[str, str]],
    columns: Sequence[str],
    empty_message: str,
    on_edit: Callable[[Any], None],
) -> None:
    st.subheader(title)
    if not entries:
        st.info(empty_message)
        return
    widths = [2] * len(columns) + [1, 1]
    header = st.columns(widths)
    for cell, column in zip(header, columns):
        cell.markdown(f"**{column}**")
    for index, (entry, row) in enumerate(zip(entries, rows)):
        cells = st.columns(widths)
        for cell, column in zip(cells, columns):
            cell.write(row[column])
        if entry.id is None:
            # Records without an id cannot be addressed by update or delete.
            continue
        if cells[-2].button("Edit", key=f"edit-{kind}-{index}-{entry.id}"):
            on_edit(entry)
            st.rerun()
        if cells[-1].button("Delete", key=f"delete-{kind}-{index}-{entry.id}"):
            st.session_state[PENDING_DELETE_KEY] = (kind, entry.id)
            st.rerun()


def main() -> None:
    """Render the dashboard page."""

    st.set_page_config(page_title="Diet & Lifestyle Tracker", layout="wide")
    st.title("Diet & Lifestyle Tracker")
    st.caption("Balanced logging for meals and exercise.")

    session = _session()
    state = session.state
    if state.status == "error":
        st.error(state.error)
        if st.button("Retry"):
            with st.spinner("Loading..."):
                asyncio.run(session.refresh())
            st.rerun()
        return

    forms, dashboard = st.columns([1, 2])
    with forms:
        _render_meal_form(session)
        _render_exercise_form(session)

    with dashboard:
        _render_snapshot(session)
        _render_pending_delete(session)
        meals: Sequence[MealEntry] = state.meals
        exercises: Sequence[ExerciseEntry] = state.exercises
        _render_table(
            "Recent Meals",
            "meal",
            meals,
            meal_rows(meals),
            MEAL_COLUMNS,
            NO_MEALS_LOGGED,
            session.edit_meal,
        )
        _render_table(
            "Exercise History",
            "exercise",
            exercises,
            exercise_rows(exercises),
            EXERCISE_COLUMNS,
            NO_EXERCISE_LOGGED,
            session.edit_exercise,
        )


if __name__ == "__main__":
    main()
