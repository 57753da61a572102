"""
Derived statistics for the dashboard.

Everything here is a pure function of a habit snapshot: nothing is cached,
nothing is mutated, and the same snapshot always gives the same numbers.
"""

import math
from typing import Any, Dict, List, Sequence

import pandas as pd

from habit_data import DAYS_OF_WEEK, DAYS_PER_WEEK, WEEKS_IN_WINDOW, WINDOW_DAYS, Habit

RANKING_LIMIT = 8

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def round_half_up(x: float) -> int:
    """Round .5 away from zero for non-negative x (Python's round() is banker's)."""
    return int(math.floor(x + 0.5))


def completed_count(habit: Habit) -> int:
    return sum(1 for done in habit.completed_days if done)


def completion_rate(habit: Habit) -> int:
    """Percent of the 28-day window marked complete, 0..100."""
    return round_half_up(100 * completed_count(habit) / WINDOW_DAYS)


def total_completions(habits: Sequence[Habit]) -> int:
    return sum(completed_count(h) for h in habits)


def total_possible(habits: Sequence[Habit]) -> int:
    return max(1, len(habits) * WINDOW_DAYS)


def weekly_buckets(habits: Sequence[Habit]) -> List[int]:
    weeks = [0] * WEEKS_IN_WINDOW
    for habit in habits:
        for idx, done in enumerate(habit.completed_days):
            if done:
                weeks[idx // DAYS_PER_WEEK] += 1
    return weeks


def daily_totals(habits: Sequence[Habit]) -> List[int]:
    days = [0] * WINDOW_DAYS
    for habit in habits:
        for idx, done in enumerate(habit.completed_days):
            if done:
                days[idx] += 1
    return days


def overall_progress(habits: Sequence[Habit]) -> int:
    value = 100 * total_completions(habits) / total_possible(habits)
    if not math.isfinite(value):
        return 0
    return round_half_up(value)


def rank_habits(habits: Sequence[Habit], limit: int = RANKING_LIMIT) -> List[Dict[str, Any]]:
    """
    Habits ordered by completion rate, best first.

    sorted() is stable, so habits with the same rate keep collection order.
    """
    rated = [{"id": h.id, "name": h.name, "rate": completion_rate(h)} for h in habits]
    return sorted(rated, key=lambda item: -item["rate"])[:limit]


def build_dashboard_view(habits: Sequence[Habit]) -> Dict[str, Any]:
    progress = overall_progress(habits)
    return {
        "total_completions": total_completions(habits),
        "total_possible": total_possible(habits),
        "overall_progress": progress,
        "remaining": 100 - progress,
        "weekly_buckets": weekly_buckets(habits),
        "daily_totals": daily_totals(habits),
        "ranking": rank_habits(habits),
    }


# ================== DataFrames for the Gradio widgets ==================


def day_column_labels() -> List[str]:
    return [f"W{w + 1} {DAYS_OF_WEEK[d]}" for w in range(WEEKS_IN_WINDOW) for d in range(DAYS_PER_WEEK)]


def habit_grid_frame(habits: Sequence[Habit]) -> pd.DataFrame:
    columns = ["Habit"] + day_column_labels()
    rows = [[h.name] + ["✅" if done else "·" for done in h.completed_days] for h in habits]
    return pd.DataFrame(rows, columns=columns)


def weekly_frame(view: Dict[str, Any]) -> pd.DataFrame:
    buckets = view["weekly_buckets"]
    return pd.DataFrame(
        {"week": [f"W{i + 1}" for i in range(len(buckets))], "completed": buckets}
    )


def daily_frame(view: Dict[str, Any]) -> pd.DataFrame:
    totals = view["daily_totals"]
    return pd.DataFrame({"day": list(range(1, len(totals) + 1)), "completed": totals})


def ranking_frame(view: Dict[str, Any]) -> pd.DataFrame:
    rows = [[i + 1, item["name"], f"{item['rate']}%"] for i, item in enumerate(view["ranking"])]
    return pd.DataFrame(rows, columns=["#", "Habit", "Rate"])


def progress_markdown(view: Dict[str, Any]) -> str:
    return (
        f"### Overall progress: {view['overall_progress']}%\n\n"
        f"- Completed: **{view['total_completions']}** / {view['total_possible']} (4 weeks)\n"
        f"- Done: {view['overall_progress']}% · Remaining: {view['remaining']}%"
    )


def format_period(year: int, month: int) -> str:
    return f"{year} / {month:02d} ({MONTH_NAMES[month - 1]})"
