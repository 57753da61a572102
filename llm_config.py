# llm_config.py
"""
Central configuration for the habit dashboard.

- UI_TEST_MODE: if True, the AI coach never calls a real LLM and returns a canned reply.
- LLM_BASE_URL: base URL of the OpenAI-compatible server.
- COACH_MODEL_NAME: model selector sent with every coaching request.
- LLM_API_KEY: bearer token; coaching fails (with a retryable message) when it is missing.
- LOGIN_DELAY_SECONDS: simulated sign-in latency of the mocked login.
"""

import os


def _bool_env(name: str, default: str = "false") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


# If True, do not call any real LLM and always return a dummy coaching reply.
UI_TEST_MODE: bool = _bool_env("UI_TEST_MODE", "false")

# Base URL for an OpenAI-compatible server
LLM_BASE_URL: str = os.getenv("LLM_BASE_URL", "https://api.openai.com").rstrip("/")

COACH_MODEL_NAME: str = os.getenv("COACH_MODEL_NAME", "gpt-4o-mini")

LLM_API_KEY: str | None = os.getenv("LLM_API_KEY", None)

LLM_TIMEOUT: float = _float_env("LLM_TIMEOUT", 60.0)
LLM_TEMPERATURE: float = _float_env("LLM_TEMPERATURE", 0.7)

LOGIN_DELAY_SECONDS: float = _float_env("LOGIN_DELAY_SECONDS", 1.0)

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
