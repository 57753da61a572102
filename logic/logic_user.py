import json
import logging
import time
from typing import Dict, Optional

import gradio as gr

from llm_config import LOGIN_DELAY_SECONDS
from storage import KeyValueStore

logger = logging.getLogger(__name__)

SESSION_KEY = "focusflow_user"


class SessionState:
    """
    Anonymous / authenticated identity of the dashboard user.

    The in-memory identity is authoritative; the persisted entry is only a
    cache used to restore the session after a restart.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.identity: Optional[Dict[str, str]] = None

    @property
    def authenticated(self) -> bool:
        return self.identity is not None

    def hydrate(self) -> Optional[Dict[str, str]]:
        raw = self.store.get(SESSION_KEY)
        self.identity = _decode_identity(raw)
        if raw is not None and self.identity is None:
            logger.warning("Ignoring malformed persisted session entry")
        return self.identity

    def login(self, name: str, email: str) -> Dict[str, str]:
        identity = {"name": name, "email": email}
        self.identity = identity
        try:
            self.store.set(SESSION_KEY, json.dumps(identity, ensure_ascii=False))
        except OSError:
            logger.exception("Could not persist session; continuing with the in-memory session")
        logger.info("Logged in as %s", email)
        return identity

    def logout(self) -> None:
        self.identity = None
        try:
            self.store.delete(SESSION_KEY)
        except OSError:
            logger.exception("Could not remove the persisted session entry")
        logger.info("Logged out")


def _decode_identity(raw: Optional[str]) -> Optional[Dict[str, str]]:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    name, email = data.get("name"), data.get("email")
    if not isinstance(name, str) or not isinstance(email, str):
        return None
    return {"name": name, "email": email}


def display_name_for(sign_up: bool, name: str, email: str) -> str:
    """Sign-up keeps the chosen name; sign-in derives it from the e-mail."""
    if sign_up:
        return (name or "").strip() or "User"
    local_part = (email or "").split("@")[0].strip()
    return local_part or "User"


def greeting_markdown(identity: Optional[Dict[str, str]]) -> str:
    if not identity:
        return ""
    return f"Hello, **{identity['name']}**"


# ================== Auth: login / logout ==================


def login_action(mode, name, email, password, app_state):
    """Mocked sign-in: any e-mail and password are accepted after a short delay."""
    if not email or not password or (mode == "Sign up" and not name):
        return (
            "Please fill in every field.",
            app_state,
            gr.update(),  # login_panel unchanged
            gr.update(),  # main_panel unchanged
            gr.update(),  # greeting unchanged
        )

    time.sleep(LOGIN_DELAY_SECONDS)
    display_name = display_name_for(mode == "Sign up", name, email)
    identity = app_state.session.login(display_name, email)

    return (
        f"Welcome, {identity['name']}!",
        app_state,
        gr.update(visible=False),   # hide login panel
        gr.update(visible=True),    # show main panel
        greeting_markdown(identity),
    )


def logout_action(app_state):
    app_state.session.logout()
    return (
        app_state,
        gr.update(visible=True),   # login_panel
        gr.update(visible=False),  # main_panel
        "",
    )


def hydrate_session_action(app_state):
    """Runs on page load: restore a persisted identity if there is one."""
    identity = app_state.session.hydrate()
    return (
        app_state,
        gr.update(visible=identity is None),
        gr.update(visible=identity is not None),
        greeting_markdown(identity),
    )


def switch_login_mode(mode):
    return gr.update(visible=(mode == "Sign up"))
