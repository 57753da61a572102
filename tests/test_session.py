"""
Tests for the persisted key-value store and the session lifecycle.
"""

import json
import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from logic.logic_app import AppState
from logic.logic_habits import HabitStore
from logic.logic_user import (
    SESSION_KEY,
    SessionState,
    display_name_for,
    hydrate_session_action,
    login_action,
    logout_action,
)
from storage import KeyValueStore


class TestKeyValueStore(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "nested", "store.json")
        self.store = KeyValueStore(self.path)

    def tearDown(self):
        self.tmp.cleanup()

    def test_set_get_delete(self):
        self.assertIsNone(self.store.get("k"))
        self.store.set("k", '{"a": 1}')
        self.assertEqual(self.store.get("k"), '{"a": 1}')
        self.assertEqual(KeyValueStore(self.path).get("k"), '{"a": 1}')
        self.store.delete("k")
        self.assertIsNone(self.store.get("k"))
        self.store.delete("k")

    def test_corrupt_file_reads_as_empty(self):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("{not json")
        self.assertIsNone(self.store.get("k"))
        self.store.set("k", "v")
        self.assertEqual(self.store.get("k"), "v")


class TestSessionState(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.kv = KeyValueStore(os.path.join(self.tmp.name, "store.json"))
        self.session = SessionState(self.kv)

    def tearDown(self):
        self.tmp.cleanup()

    def test_login_logout_lifecycle(self):
        self.assertIsNone(self.session.hydrate())
        self.assertFalse(self.session.authenticated)

        self.session.login("Sam", "s@x.com")
        self.assertEqual(self.session.identity, {"name": "Sam", "email": "s@x.com"})
        self.assertEqual(json.loads(self.kv.get(SESSION_KEY)), {"name": "Sam", "email": "s@x.com"})

        self.session.logout()
        self.assertIsNone(self.session.identity)
        self.assertIsNone(self.kv.get(SESSION_KEY))

    def test_hydrate_restores_identity(self):
        SessionState(self.kv).login("Sam", "s@x.com")
        restored = SessionState(self.kv)
        self.assertEqual(restored.hydrate(), {"name": "Sam", "email": "s@x.com"})
        self.assertTrue(restored.authenticated)

    def test_malformed_entry_is_anonymous(self):
        for raw in ("not json", "[1, 2]", '{"name": "Sam"}', '{"name": 1, "email": "e"}'):
            self.kv.set(SESSION_KEY, raw)
            self.assertIsNone(self.session.hydrate(), raw)

    def test_failed_write_keeps_in_memory_session(self):
        kv = MagicMock(spec=KeyValueStore)
        kv.set.side_effect = PermissionError("read-only directory")
        kv.delete.side_effect = PermissionError("read-only directory")
        session = SessionState(kv)

        with self.assertLogs("logic.logic_user", level="ERROR"):
            identity = session.login("Sam", "s@x.com")
        self.assertEqual(identity, {"name": "Sam", "email": "s@x.com"})
        self.assertTrue(session.authenticated)

        with self.assertLogs("logic.logic_user", level="ERROR"):
            session.logout()
        self.assertFalse(session.authenticated)

    def test_display_name(self):
        self.assertEqual(display_name_for(True, "Sam", "s@x.com"), "Sam")
        self.assertEqual(display_name_for(False, "", "sam.lee@x.com"), "sam.lee")
        self.assertEqual(display_name_for(False, "", "@x.com"), "User")


class TestSessionActions(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.kv = KeyValueStore(os.path.join(self.tmp.name, "store.json"))
        self.app_state = AppState(habits=HabitStore(), kv_store=self.kv)

    def tearDown(self):
        self.tmp.cleanup()

    @patch("logic.logic_user.time.sleep")
    def test_login_action_accepts_any_credentials(self, mock_sleep):
        msg, state, _, _, greeting = login_action("Sign in", "", "sam@x.com", "whatever", self.app_state)
        mock_sleep.assert_called_once()
        self.assertIn("sam", msg)
        self.assertEqual(state.session.identity, {"name": "sam", "email": "sam@x.com"})
        self.assertIn("sam", greeting)

    @patch("logic.logic_user.time.sleep")
    def test_login_action_requires_fields(self, mock_sleep):
        msg, state, _, _, _ = login_action("Sign up", "", "sam@x.com", "pw", self.app_state)
        mock_sleep.assert_not_called()
        self.assertFalse(state.session.authenticated)
        self.assertIn("fill in", msg)

    @patch("logic.logic_user.time.sleep")
    def test_logout_then_hydrate_is_anonymous(self, mock_sleep):
        login_action("Sign up", "Sam", "s@x.com", "pw", self.app_state)
        logout_action(self.app_state)
        state, _, _, greeting = hydrate_session_action(self.app_state)
        self.assertFalse(state.session.authenticated)
        self.assertEqual(greeting, "")


if __name__ == "__main__":
    unittest.main()
