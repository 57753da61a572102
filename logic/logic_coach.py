# logic_coach.py
"""
Glue code between the habit store and CoachAgent.

CoachRequestAdapter runs one request at a time through the states
idle -> requesting -> succeeded | failed; a finished request can be
re-triggered by the user, a pending one cannot.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

import gradio as gr

from agents.coach import CoachAgent, CoachingResult
from habit_data import Habit
from logic.logic_stats import completion_rate

logger = logging.getLogger(__name__)

COACH_ERROR_MESSAGE = "Could not load the AI coach. Please try again in a moment."


class CoachStatus(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def build_habit_summary(habits: Sequence[Habit]) -> str:
    return "\n".join(
        f"{h.name}: {completion_rate(h)}% complete (goal: {h.goal}x per week)" for h in habits
    )


class CoachRequestAdapter:
    def __init__(self, agent: Optional[CoachAgent] = None):
        self.agent = agent or CoachAgent()
        self.status = CoachStatus.IDLE
        self.result: Optional[CoachingResult] = None
        self.error: Optional[str] = None

    @property
    def in_flight(self) -> bool:
        return self.status is CoachStatus.REQUESTING

    def begin(self) -> bool:
        """Enter the requesting state; False if a request is already running."""
        if self.in_flight:
            logger.debug("Coaching request already in flight; ignoring trigger")
            return False
        self.status = CoachStatus.REQUESTING
        self.result = None
        self.error = None
        return True

    def run(self, habits: Sequence[Habit]) -> CoachStatus:
        """Issue the request claimed by begin() and record its outcome."""
        summary = build_habit_summary(habits)
        try:
            result = self.agent.coach(summary)
        except Exception:
            logger.exception("Coaching request failed")
            self.status = CoachStatus.FAILED
            self.error = COACH_ERROR_MESSAGE
            return self.status

        self.result = result
        self.status = CoachStatus.SUCCEEDED
        return self.status

    def request(self, habits: Sequence[Habit]) -> CoachStatus:
        if not self.begin():
            return self.status
        return self.run(habits)


def coach_markdown(adapter: CoachRequestAdapter) -> str:
    if adapter.status is CoachStatus.REQUESTING:
        return "_Analyzing your data..._"
    if adapter.status is CoachStatus.FAILED:
        return f"⚠️ {adapter.error}"
    if adapter.status is CoachStatus.SUCCEEDED and adapter.result is not None:
        r = adapter.result
        return (
            f"#### 👍 What went well\n{r.compliment}\n\n"
            f"#### 📈 What to improve\n{r.improvement}\n\n"
            f"#### 💡 Tip\n{r.tip}"
        )
    return "Press the button to get personalised feedback."


def coach_button_label(adapter: CoachRequestAdapter) -> str:
    if adapter.status in (CoachStatus.SUCCEEDED, CoachStatus.FAILED):
        return "🔄 Analyze again"
    return "Start analysis"


# ================== Gradio callbacks ==================


def coach_action(app_state):
    """
    Single click handler for the coach button, run as a generator.

    The first update hides the trigger, the second shows the result. A
    click that reaches the server while another request of this session
    is still running leaves the panel untouched.
    """
    adapter = app_state.coach
    if not adapter.begin():
        yield app_state, gr.update(), gr.update()
        return

    yield app_state, "_Analyzing your data..._", gr.update(visible=False)
    adapter.run(app_state.habits.snapshot())
    yield (
        app_state,
        coach_markdown(adapter),
        gr.update(visible=not adapter.in_flight, value=coach_button_label(adapter)),
    )
