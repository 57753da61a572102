import copy
import logging
import uuid
from typing import Iterable, Iterator, List, Optional

from habit_data import (
    DEFAULT_GOAL,
    MAX_GOAL,
    MIN_GOAL,
    WINDOW_DAYS,
    Habit,
    empty_days,
    normalize_days,
)

logger = logging.getLogger(__name__)


class HabitStore:
    """
    Owns the habit collection of one dashboard session.

    Insertion order is display order. Every stored habit keeps exactly
    WINDOW_DAYS completion flags.
    """

    def __init__(self, habits: Optional[Iterable[Habit]] = None):
        self._habits: List[Habit] = []
        if habits is not None:
            self.replace_all(habits)

    def __len__(self) -> int:
        return len(self._habits)

    def __iter__(self) -> Iterator[Habit]:
        return iter(self._habits)

    def get(self, habit_id: str) -> Optional[Habit]:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    def snapshot(self) -> List[Habit]:
        """Deep copy of the collection, safe to edit or aggregate."""
        return copy.deepcopy(self._habits)

    def new_id(self) -> str:
        taken = {h.id for h in self._habits}
        while True:
            candidate = uuid.uuid4().hex[:12]
            if candidate not in taken:
                return candidate

    def toggle(self, habit_id: str, day_index: int) -> None:
        if not 0 <= day_index < WINDOW_DAYS:
            logger.debug("Ignoring toggle of out-of-range day %s", day_index)
            return
        habit = self.get(habit_id)
        if habit is None:
            return
        habit.completed_days[day_index] = not habit.completed_days[day_index]

    def delete(self, habit_id: str) -> None:
        before = len(self._habits)
        self._habits = [h for h in self._habits if h.id != habit_id]
        if len(self._habits) != before:
            logger.info("Deleted habit %s", habit_id)

    def add(self, name: str, goal: int = DEFAULT_GOAL) -> Habit:
        habit = Habit(id=self.new_id(), name=name, goal=goal, completed_days=empty_days())
        self._habits.append(habit)
        return habit

    def update(self, habit_id: str, name: Optional[str] = None, goal: Optional[int] = None) -> None:
        habit = self.get(habit_id)
        if habit is None:
            return
        if name is not None:
            habit.name = name
        if goal is not None:
            habit.goal = goal

    def replace_all(self, new_habits: Iterable[Habit]) -> None:
        """
        Replace the whole collection, e.g. after a manager edit session.

        Blank names are dropped and a repeated id keeps its first entry.
        """
        kept: List[Habit] = []
        seen = set()
        for habit in new_habits:
            if not habit.name or not habit.name.strip():
                continue
            if habit.id in seen:
                continue
            seen.add(habit.id)
            kept.append(
                Habit(
                    id=habit.id,
                    name=habit.name,
                    goal=habit.goal,
                    completed_days=normalize_days(habit.completed_days),
                )
            )
        self._habits = kept


def parse_goal(value) -> int:
    """Clamp a goal cell from the manager table into MIN_GOAL..MAX_GOAL."""
    try:
        goal = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_GOAL
    return max(MIN_GOAL, min(MAX_GOAL, goal))


def _cell_text(value) -> str:
    if value is None:
        return ""
    text = str(value)
    if text.lower() == "nan":
        return ""
    return text


def apply_manager_rows(store: HabitStore, rows: List[List], row_ids: List[str]) -> List[Habit]:
    """
    Turn the manager table rows [name, goal] into a new collection.

    row_ids holds, in row order, the id each row was opened with ("" for
    rows added in the manager). Ids never come from the editable cells, so a
    row bound to an existing habit keeps its id and completion record; any
    other row becomes a new habit. Blank names are filtered out.
    """
    result: List[Habit] = []
    used = set()
    for i, row in enumerate(rows):
        if len(row) < 2:
            continue
        name = _cell_text(row[0]).strip()
        goal = parse_goal(row[1])
        if not name:
            continue
        habit_id = row_ids[i] if i < len(row_ids) else ""
        existing = store.get(habit_id) if habit_id and habit_id not in used else None
        if existing is not None:
            used.add(existing.id)
            result.append(
                Habit(id=existing.id, name=name, goal=goal, completed_days=list(existing.completed_days))
            )
        else:
            new_id = store.new_id()
            while new_id in used:
                new_id = store.new_id()
            used.add(new_id)
            result.append(Habit(id=new_id, name=name, goal=goal))
    return result
