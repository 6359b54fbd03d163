# cli/menus/dashboard_menu.py

"""
Dashboard view for the Student Records CLI.

Read-only: shows the store statistics and the most recently listed students.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from models.record_store import RecordStore

RECENT_LIMIT = 5


def run(store: RecordStore) -> None:
    banner = formatters.format_banner_text("Dashboard")
    print(f"\n{banner}")

    print(model_formatters.format_stats(store.stats()))

    recent = store.recent(RECENT_LIMIT)

    print(f"\n{formatters.format_banner_text('Recent Students')}")

    if not recent:
        print("\nNo students yet. Add your first student to get started.")
        return

    helpers.display_results(recent, False, model_formatters.format_student_oneline)
