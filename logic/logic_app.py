from typing import Optional, Tuple

from agents.coach import CoachAgent
from habit_data import sample_habits
from logic.logic_coach import CoachRequestAdapter
from logic.logic_habits import HabitStore
from logic.logic_user import SessionState
from storage import KeyValueStore

DEFAULT_PERIOD: Tuple[int, int] = (2025, 12)


class AppState:
    """Everything one dashboard session owns, passed explicitly to every callback."""

    def __init__(
        self,
        habits: Optional[HabitStore] = None,
        kv_store: Optional[KeyValueStore] = None,
        coach_agent: Optional[CoachAgent] = None,
    ):
        self.habits = habits if habits is not None else HabitStore(sample_habits())
        self.session = SessionState(kv_store or KeyValueStore())
        self.coach = CoachRequestAdapter(coach_agent)
        self.period: Tuple[int, int] = DEFAULT_PERIOD


def new_app_state() -> AppState:
    return AppState()
