DASHBOARD_TXT = """
## ✅ FocusFlow – 4-week habit dashboard

Track a handful of daily habits over a **4-week window**, see how you are doing at a glance,
and ask the **AI coach** for a short piece of feedback.

---

### 🧭 What this app does

- **Habit grid**
  One row per habit, 28 day cells (Week 1 Mon … Week 4 Sun). Click a cell to mark the day done or undo it.

- **Habit manager**
  Rename habits, change the weekly goal (1–7 times per week) and add new rows.
  Rows whose name is left empty are dropped when you save.

- **Progress widgets**
  - Completions per week (bar chart)
  - Completions per day across all habits (line chart)
  - Overall progress: completed checks out of *habits × 28*
  - Top-8 ranking by completion rate

- **AI coach**
  Sends each habit's completion rate and weekly goal to an OpenAI-compatible model and shows
  three short sections: what went well, what to improve, and one tip.

- **Local session only**
  Habits live in memory for this browser session and start from a sample set.
  Only the signed-in name and e-mail are remembered, in `user_data/session_store.json`.

---

### 🧑‍💻 How to use the UI

1. **Sign in** with any e-mail and password (sign-in is simulated; nothing is checked).
   In *Sign up* mode the name you enter becomes your display name; otherwise the part of the
   e-mail before `@` is used.
2. Click cells in the **habit grid** to record completions.
3. Open **Manage habits** to edit names and goals or add habits, then **Save**.
4. To delete one habit, pick it in **Delete a habit**, tick the confirmation box and press **Delete**.
   Deleting cannot be undone.
5. Press **Start analysis** in the AI coach panel. While the request runs the button is hidden;
   when it finishes you can run it again.

---

### ⚙️ Configuration (environment variables)

- `UI_TEST_MODE=true` – the coach returns a canned reply without any network call.
- `LLM_BASE_URL`, `COACH_MODEL_NAME`, `LLM_API_KEY`, `LLM_TIMEOUT` – coaching backend.
- `LOGIN_DELAY_SECONDS` – simulated sign-in latency.
- `FOCUSFLOW_DATA_DIR` – where the session store file lives.
- `LOG_LEVEL` – standard logging level.
"""
