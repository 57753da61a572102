import json
import logging
import os
import tempfile
from typing import Any, Dict

logger = logging.getLogger(__name__)

BASE_DIR = os.getenv("FOCUSFLOW_DATA_DIR", "user_data")
SESSION_STORE_PATH = os.path.join(BASE_DIR, "session_store.json")


def ensure_base_dir() -> None:
    """Ensure that the base data directory exists."""
    os.makedirs(BASE_DIR, exist_ok=True)


def load_json(path: str, default):
    """Load JSON from a file, returning default on error or if the file does not exist."""
    if not os.path.exists(path):
        return default
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable JSON file %s", path)
        return default


def atomic_write_json(path: str, obj) -> None:
    """Write JSON through a temp file in the same directory, then replace."""
    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)

    fd, tmp = tempfile.mkstemp(prefix=".tmp_store_", dir=parent, text=True)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
    os.replace(tmp, path)


class KeyValueStore:
    """
    Tiny persisted key-value store backed by one JSON file.

    Values are stored as JSON-encoded strings, the way browser local storage
    holds them, so a caller decides how to interpret each entry.
    """

    def __init__(self, path: str = SESSION_STORE_PATH):
        self.path = path

    def _load_all(self) -> Dict[str, Any]:
        data = load_json(self.path, {})
        if not isinstance(data, dict):
            return {}
        return data

    def get(self, key: str):
        value = self._load_all().get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load_all()
        data[key] = value
        atomic_write_json(self.path, data)

    def delete(self, key: str) -> None:
        data = self._load_all()
        if key not in data:
            return
        del data[key]
        atomic_write_json(self.path, data)
