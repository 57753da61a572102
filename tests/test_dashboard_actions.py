"""
Tests for the dashboard callbacks wired into the Gradio UI.
"""

import os
import tempfile
import unittest
from types import SimpleNamespace

from habit_data import Habit
from logic.logic_app import AppState
from logic.logic_dashboard import (
    add_manager_row_action,
    apply_period_action,
    delete_habit_action,
    load_dashboard_action,
    open_manager_action,
    save_manager_action,
    toggle_cell_action,
)
from logic.logic_habits import HabitStore
from storage import KeyValueStore


class TestDashboardActions(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.app_state = AppState(
            habits=HabitStore([Habit(id="a", name="Read"), Habit(id="b", name="Walk", goal=5)]),
            kv_store=KeyValueStore(os.path.join(self.tmp.name, "store.json")),
        )

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_creates_state(self):
        outputs = load_dashboard_action(None)
        self.assertIsInstance(outputs[0], AppState)
        self.assertEqual(len(outputs[0].habits), 10)

    def test_toggle_cell(self):
        outputs = toggle_cell_action(self.app_state, SimpleNamespace(index=[1, 1]))
        self.assertTrue(self.app_state.habits.get("b").completed_days[0])
        grid = outputs[1]
        self.assertEqual(grid.iloc[1, 1], "✅")
        progress_md = outputs[5]
        self.assertIn("Completed: **1**", progress_md)

    def test_toggle_name_column_is_ignored(self):
        toggle_cell_action(self.app_state, SimpleNamespace(index=[0, 0]))
        self.assertFalse(any(self.app_state.habits.get("a").completed_days))

    def test_delete_needs_confirmation(self):
        delete_habit_action("a", False, self.app_state)
        self.assertIsNotNone(self.app_state.habits.get("a"))
        delete_habit_action("a", True, self.app_state)
        self.assertIsNone(self.app_state.habits.get("a"))

    def test_manager_add_and_save(self):
        self.app_state.habits.toggle("b", 4)
        _, rows, row_ids, _ = open_manager_action(self.app_state)
        self.assertEqual(rows, [["Read", 7], ["Walk", 5]])
        self.assertEqual(row_ids, ["a", "b"])

        rows, row_ids = add_manager_row_action(rows, row_ids)
        self.assertEqual(rows[-1], ["", 7])
        self.assertEqual(row_ids, ["a", "b", ""])
        rows[-1][0] = "Meditate"
        rows[0][0] = ""
        rows[1][0] = "Walk fast"
        outputs = save_manager_action(rows, row_ids, self.app_state)

        self.assertEqual([h.name for h in self.app_state.habits], ["Walk fast", "Meditate"])
        walk = self.app_state.habits.get("b")
        self.assertEqual(walk.name, "Walk fast")
        self.assertTrue(walk.completed_days[4])
        self.assertEqual(outputs[3], [])

    def test_manager_table_has_no_id_column(self):
        _, rows, _, _ = open_manager_action(self.app_state)
        self.assertTrue(all(len(r) == 2 for r in rows))

    def test_apply_period(self):
        outputs = apply_period_action(2026, "3", self.app_state)
        self.assertEqual(self.app_state.period, (2026, 3))
        self.assertIn("March", outputs[-1])
        apply_period_action(2026, "13", self.app_state)
        self.assertEqual(self.app_state.period, (2026, 3))


if __name__ == "__main__":
    unittest.main()
