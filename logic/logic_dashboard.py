import logging

import gradio as gr

from habit_data import DEFAULT_GOAL
from logic.logic_app import AppState, new_app_state
from logic.logic_habits import apply_manager_rows
from logic.logic_stats import (
    build_dashboard_view,
    daily_frame,
    format_period,
    habit_grid_frame,
    progress_markdown,
    ranking_frame,
    weekly_frame,
)

logger = logging.getLogger(__name__)


def ensure_app_state(app_state) -> AppState:
    return app_state if isinstance(app_state, AppState) else new_app_state()


def render_dashboard(app_state: AppState):
    """Recompute every derived widget from the current habit snapshot."""
    habits = app_state.habits.snapshot()
    view = build_dashboard_view(habits)
    year, month = app_state.period
    return (
        habit_grid_frame(habits),
        weekly_frame(view),
        daily_frame(view),
        ranking_frame(view),
        progress_markdown(view),
        gr.update(choices=[(h.name, h.id) for h in habits], value=None),
        f"📅 {format_period(year, month)}",
    )


def load_dashboard_action(app_state):
    app_state = ensure_app_state(app_state)
    return (app_state,) + render_dashboard(app_state)


# ================== Habit grid ==================


def toggle_cell_action(app_state, evt: gr.SelectData):
    """Clicking a day cell flips it; column 0 holds the habit name."""
    row, col = evt.index
    habits = list(app_state.habits)
    if 0 <= row < len(habits) and col >= 1:
        app_state.habits.toggle(habits[row].id, col - 1)
    return (app_state,) + render_dashboard(app_state)


def delete_habit_action(habit_id, confirmed, app_state):
    if not habit_id:
        return (app_state, "Select a habit to delete.", gr.update()) + render_dashboard(app_state)
    if not confirmed:
        return (
            app_state,
            "Tick the confirmation box first. Deleting a habit cannot be undone.",
            gr.update(),
        ) + render_dashboard(app_state)

    app_state.habits.delete(habit_id)
    return (app_state, "Habit deleted.", gr.update(value=False)) + render_dashboard(app_state)


# ================== Habit manager ==================


def open_manager_action(app_state):
    """Rows show only name and goal; the ids stay server-side in row order."""
    habits = list(app_state.habits)
    rows = [[h.name, h.goal] for h in habits]
    row_ids = [h.id for h in habits]
    return gr.update(visible=True), rows, row_ids, ""


def add_manager_row_action(rows, row_ids):
    rows = [list(r) for r in (rows or [])]
    row_ids = list(row_ids or [])
    # Keep the id list aligned with the rows the table currently shows
    row_ids = row_ids[: len(rows)] + [""] * (len(rows) - len(row_ids))
    rows.append(["", DEFAULT_GOAL])
    row_ids.append("")
    return rows, row_ids


def save_manager_action(rows, row_ids, app_state):
    new_habits = apply_manager_rows(
        app_state.habits, [list(r) for r in (rows or [])], list(row_ids or [])
    )
    app_state.habits.replace_all(new_habits)
    logger.info("Saved %d habits from the manager", len(app_state.habits))
    return (app_state, gr.update(visible=False), "Habits saved.", []) + render_dashboard(app_state)


def close_manager_action():
    return gr.update(visible=False)


# ================== Calendar ==================


def apply_period_action(year, month, app_state):
    try:
        y, m = int(year), int(month)
    except (TypeError, ValueError):
        logger.debug("Ignoring invalid calendar period %r/%r", year, month)
    else:
        if 1 <= m <= 12:
            app_state.period = (y, m)
    return (app_state,) + render_dashboard(app_state)
