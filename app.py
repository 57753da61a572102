import argparse
import logging

import gradio as gr

from dash_board import DASHBOARD_TXT
from habit_data import DEFAULT_GOAL
from llm_config import LOG_LEVEL
from logic.logic_app import DEFAULT_PERIOD
from logic.logic_coach import coach_action
from logic.logic_dashboard import (
    add_manager_row_action,
    apply_period_action,
    close_manager_action,
    delete_habit_action,
    load_dashboard_action,
    open_manager_action,
    save_manager_action,
    toggle_cell_action,
)
from logic.logic_user import (
    hydrate_session_action,
    login_action,
    logout_action,
    switch_login_mode,
)
from storage import ensure_base_dir

logger = logging.getLogger(__name__)

ensure_base_dir()

with gr.Blocks(title="FocusFlow – Habit Dashboard") as demo:
    # One AppState per browser session, created on page load
    app_state = gr.State(None)
    # Habit ids of the manager table rows, in row order; never shown or edited
    manager_row_ids = gr.State([])

    # ========== Login panel ==========
    with gr.Column(visible=True) as login_panel:
        gr.Markdown("## ✅ FocusFlow\nBuilding a better you, one habit at a time.")
        login_mode = gr.Radio(["Sign in", "Sign up"], value="Sign in", label="Mode")
        login_name = gr.Textbox(label="Name", visible=False)
        login_email = gr.Textbox(label="E-mail", placeholder="name@example.com")
        login_password = gr.Textbox(label="Password", type="password")
        login_button = gr.Button("Continue", variant="primary")
        login_info = gr.Markdown("Any e-mail and password will do.")

    # ========== Main panel ==========
    with gr.Column(visible=False) as main_panel:
        with gr.Row():
            greeting = gr.Markdown("")
            logout_btn = gr.Button("Log out", variant="secondary", scale=0)

        with gr.Row():
            # Left sidebar
            with gr.Column(scale=1, min_width=260):
                gr.Markdown("### 📅 Calendar")
                period_label = gr.Markdown("")
                with gr.Row():
                    year_input = gr.Number(label="Year", value=DEFAULT_PERIOD[0], precision=0)
                    month_input = gr.Dropdown(
                        label="Month",
                        choices=[str(m) for m in range(1, 13)],
                        value=str(DEFAULT_PERIOD[1]),
                    )
                apply_period_btn = gr.Button("Apply")

                gr.Markdown("### Weekly completions")
                weekly_plot = gr.BarPlot(x="week", y="completed", height=200)
                progress_md = gr.Markdown("")

                gr.Markdown("### ✨ AI coach")
                coach_btn = gr.Button("Start analysis", variant="primary")
                coach_md = gr.Markdown("Press the button to get personalised feedback.")

            # Center
            with gr.Column(scale=3):
                gr.Markdown("### Daily activity")
                daily_plot = gr.LinePlot(x="day", y="completed", height=220)

                gr.Markdown("### Habit grid (4 weeks) – click a day to toggle it")
                habit_grid = gr.Dataframe(interactive=False, wrap=True)

                with gr.Row():
                    manage_btn = gr.Button("Manage / add habits")

                with gr.Column(visible=False) as manager_panel:
                    gr.Markdown(
                        "#### Habit manager\n"
                        f"Edit names and weekly goals (1–7). New rows start with a goal of {DEFAULT_GOAL}. "
                        "Rows with an empty name are removed on save."
                    )
                    manager_table = gr.Dataframe(
                        headers=["name", "goal"],
                        datatype=["str", "number"],
                        col_count=(2, "fixed"),
                        type="array",
                        interactive=True,
                    )
                    with gr.Row():
                        add_row_btn = gr.Button("➕ Add a new habit")
                        save_manager_btn = gr.Button("Save", variant="primary")
                        cancel_manager_btn = gr.Button("Cancel")
                manager_status = gr.Markdown("")

                with gr.Accordion("Delete a habit", open=False):
                    delete_select = gr.Dropdown(label="Habit", choices=[])
                    delete_confirm = gr.Checkbox(label="Yes, delete this habit permanently")
                    delete_btn = gr.Button("Delete", variant="stop")
                    delete_status = gr.Markdown("")

            # Right sidebar
            with gr.Column(scale=1, min_width=240):
                gr.Markdown("### 🏆 Top habits")
                ranking_table = gr.Dataframe(interactive=False)

        with gr.Accordion("About this dashboard", open=False):
            gr.Markdown(DASHBOARD_TXT)

    dashboard_outputs = [
        habit_grid,
        weekly_plot,
        daily_plot,
        ranking_table,
        progress_md,
        delete_select,
        period_label,
    ]

    # ====== Event bindings ======

    demo.load(
        load_dashboard_action,
        inputs=[app_state],
        outputs=[app_state] + dashboard_outputs,
    ).then(
        hydrate_session_action,
        inputs=[app_state],
        outputs=[app_state, login_panel, main_panel, greeting],
    )

    # Login / logout
    login_mode.change(switch_login_mode, inputs=[login_mode], outputs=[login_name])

    login_button.click(
        login_action,
        inputs=[login_mode, login_name, login_email, login_password, app_state],
        outputs=[login_info, app_state, login_panel, main_panel, greeting],
    )

    logout_btn.click(
        logout_action,
        inputs=[app_state],
        outputs=[app_state, login_panel, main_panel, greeting],
    )

    # Habit grid
    habit_grid.select(
        toggle_cell_action,
        inputs=[app_state],
        outputs=[app_state] + dashboard_outputs,
    )

    delete_btn.click(
        delete_habit_action,
        inputs=[delete_select, delete_confirm, app_state],
        outputs=[app_state, delete_status, delete_confirm] + dashboard_outputs,
    )

    # Manager
    manage_btn.click(
        open_manager_action,
        inputs=[app_state],
        outputs=[manager_panel, manager_table, manager_row_ids, manager_status],
    )

    add_row_btn.click(
        add_manager_row_action,
        inputs=[manager_table, manager_row_ids],
        outputs=[manager_table, manager_row_ids],
    )

    save_manager_btn.click(
        save_manager_action,
        inputs=[manager_table, manager_row_ids, app_state],
        outputs=[app_state, manager_panel, manager_status, manager_row_ids] + dashboard_outputs,
    )

    cancel_manager_btn.click(close_manager_action, inputs=None, outputs=[manager_panel])

    # Calendar
    apply_period_btn.click(
        apply_period_action,
        inputs=[year_input, month_input, app_state],
        outputs=[app_state] + dashboard_outputs,
    )

    # AI coach: one generator event hides the trigger, runs the request, then
    # shows the result; clicks while it is pending are dropped
    coach_btn.click(
        coach_action,
        inputs=[app_state],
        outputs=[app_state, coach_md, coach_btn],
        trigger_mode="once",
        concurrency_limit=None,
    )

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="FocusFlow habit dashboard")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=7860)
    parser.add_argument("--share", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting FocusFlow on %s:%d", args.host, args.port)
    demo.launch(server_name=args.host, server_port=args.port, share=args.share)
