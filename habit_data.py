# habit_data.py
"""
Habit record type and the sample habits the dashboard starts with.

The tracking window is fixed at 4 weeks: `completed_days` always holds
exactly WINDOW_DAYS flags, index 0 being day 1 of week 1.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List

WEEKS_IN_WINDOW = 4
DAYS_PER_WEEK = 7
WINDOW_DAYS = WEEKS_IN_WINDOW * DAYS_PER_WEEK

DEFAULT_GOAL = 7
MIN_GOAL = 1
MAX_GOAL = 7

DAYS_OF_WEEK = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def empty_days() -> List[bool]:
    return [False] * WINDOW_DAYS


def normalize_days(days) -> List[bool]:
    """Coerce any iterable of flags to exactly WINDOW_DAYS booleans."""
    flags = [bool(d) for d in list(days or [])[:WINDOW_DAYS]]
    flags.extend([False] * (WINDOW_DAYS - len(flags)))
    return flags


@dataclass
class Habit:
    id: str
    name: str
    goal: int = DEFAULT_GOAL
    completed_days: List[bool] = field(default_factory=empty_days)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "goal": self.goal,
            "completed_days": list(self.completed_days),
        }


def _pattern(bits: str) -> List[bool]:
    return [b == "1" for b in bits]


_SAMPLE_ROWS = [
    ("1", "Wake up early", 7, _pattern("1011001110010011001011001001")),
    ("2", "Tidy my room", 7, _pattern("0101100011100100010100100100")),
    ("3", "Walk for 20 minutes", 5, _pattern("1110010111001011100101110010")),
    ("4", "Read 5 pages", 7, [i % 3 == 0 for i in range(WINDOW_DAYS)]),
    ("5", "Write 3 lines in a gratitude journal", 6, empty_days()),
    ("6", "Learn something new for 1 hour", 5, empty_days()),
    ("7", "Watch a movie for 1 hour", 7, empty_days()),
    ("8", "Check the to-do list", 7, empty_days()),
    ("9", "Prepare meals", 7, empty_days()),
    ("10", "Exercise", 5, empty_days()),
]


def sample_habits() -> List[Habit]:
    """Return a fresh copy of the seeded sample habits."""
    return [
        Habit(id=hid, name=name, goal=goal, completed_days=copy.copy(days))
        for hid, name, goal, days in _SAMPLE_ROWS
    ]
