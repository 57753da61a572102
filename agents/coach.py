import json
from dataclasses import dataclass
from typing import Any, Dict, List

from agents.base import OpenAIStyleClient
from agents.prompt_coach import COACH_SYSTEM_PROMPT_V1, COACH_USER_TEMPLATE

from llm_config import (
    UI_TEST_MODE,
    LLM_API_KEY,
    LLM_BASE_URL,
    LLM_TEMPERATURE,
    COACH_MODEL_NAME,
)

COACHING_FIELDS = ("compliment", "improvement", "tip")

COACHING_RESPONSE_FORMAT: Dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {
        "name": "habit_coaching",
        "strict": True,
        "schema": {
            "type": "object",
            "properties": {
                "compliment": {
                    "type": "string",
                    "description": "Warm praise for what the user did best",
                },
                "improvement": {
                    "type": "string",
                    "description": "Analysis of what needs improvement",
                },
                "tip": {
                    "type": "string",
                    "description": "One concrete actionable tip",
                },
            },
            "required": list(COACHING_FIELDS),
            "additionalProperties": False,
        },
    },
}


class CoachingError(Exception):
    """Base class for anything that prevents a coaching result."""


class CoachingConfigError(CoachingError):
    """Raised when the coach cannot be called with the current configuration."""


class CoachingDecodeError(CoachingError):
    """Raised when the model reply is not the expected three-field object."""


@dataclass(frozen=True)
class CoachingResult:
    compliment: str
    improvement: str
    tip: str


def parse_coaching_reply(text: str) -> CoachingResult:
    """
    Decode the model reply into a CoachingResult.

    The reply must be a JSON object whose compliment / improvement / tip
    values are all strings. Extra keys are ignored.
    """
    if not text or not text.strip():
        raise CoachingDecodeError("empty reply")
    try:
        data = json.loads(text)
    except ValueError as e:
        raise CoachingDecodeError(f"reply is not JSON: {e}") from e
    if not isinstance(data, dict):
        raise CoachingDecodeError("reply is not a JSON object")

    values = {}
    for key in COACHING_FIELDS:
        value = data.get(key)
        if not isinstance(value, str):
            raise CoachingDecodeError(f"field {key!r} missing or not a string")
        values[key] = value
    return CoachingResult(**values)


class CoachAgent:
    """
    Habit coach agent.

    Sends the per-habit summary with a fixed instruction and a strict JSON
    schema, and returns the raw reply text. Decoding is left to
    parse_coaching_reply() so that callers see decode failures explicitly.
    """

    def __init__(self, client: OpenAIStyleClient | None = None):
        self.client = client or OpenAIStyleClient(LLM_BASE_URL, COACH_MODEL_NAME, LLM_API_KEY)

    def build_messages(self, summary: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": COACH_SYSTEM_PROMPT_V1.strip()},
            {"role": "user", "content": COACH_USER_TEMPLATE.format(summary=summary.strip())},
        ]

    def request_coaching(self, summary: str) -> str:
        if UI_TEST_MODE:
            return json.dumps(
                {
                    "compliment": "You showed up for your habits again and again. Great consistency!",
                    "improvement": "Some habits have not been started yet; pick one to begin this week.",
                    "tip": "Attach the new habit to something you already do every morning.",
                }
            )

        if not self.client.api_key:
            raise CoachingConfigError("LLM_API_KEY is not set")

        messages = self.build_messages(summary)
        return self.client.chat(
            messages,
            response_format=COACHING_RESPONSE_FORMAT,
            temperature=LLM_TEMPERATURE,
        )

    def coach(self, summary: str) -> CoachingResult:
        return parse_coaching_reply(self.request_coaching(summary))
