# cli/main.py

"""
Start Menu for the Student Records CLI.

Resolves the data directory, opens the `RecordStore` against its durable slot,
and dispatches to the Dashboard and Manage Students menus.
"""

import argparse
import logging
import os
import sys

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import dashboard_menu, students_menu
from cli.path_utils import resolve_data_dir
from core.storage import DEFAULT_SLOT_KEY, JsonFileSlot
from models.record_store import RecordStore

LOG_LEVEL_ENV_VAR = "STUDENT_RECORDS_LOG_LEVEL"

logger = logging.getLogger(__name__)


def configure_logging(environ: dict[str, str] | None = None) -> None:
    environ = os.environ if environ is None else environ
    level_name = environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="student-records",
        description="Manage student records from the terminal.",
    )
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=None,
        help="directory holding the student records file "
        "(default: $STUDENT_RECORDS_DIR or ~/Documents/StudentRecords)",
    )
    return parser.parse_args(argv)


def open_store(data_dir: str | None) -> RecordStore | None:
    """
    Opens the `RecordStore` for the resolved data directory.

    Returns:
        RecordStore: The open store on success.
        None: If the directory cannot be created or the slot cannot be loaded.
    """
    try:
        dir_path = resolve_data_dir(data_dir)
    except OSError as e:
        print(f"\n[ERROR] Could not create data directory: {e}")
        return None

    print(f"\nLoading student records from {dir_path} ...")

    store_response = RecordStore.load(JsonFileSlot(dir_path, DEFAULT_SLOT_KEY))

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return None

    store = store_response.data["store"]
    print(f"... {len(store)} student records loaded.")

    return store


def run_cli(argv: list[str] | None = None) -> None:
    """
    Entry point: opens the store, then runs the top-level loop with dispatch for the Main menu.

    Raises:
        SystemExit: With status 1 if the store cannot be opened, otherwise on exit.
        RuntimeError: If the menu response is unrecognized.
    """
    configure_logging()
    args = parse_args(argv)

    store = open_store(args.data_dir)

    if store is None:
        logger.error("Student records could not be opened")
        raise SystemExit(1)

    title = formatters.format_banner_text("STUDENT RECORDS MANAGER")
    options = [
        ("Dashboard", dashboard_menu.run),
        ("Manage Students", students_menu.run),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            menu_response(store)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - Every change is persisted as it is made, so there is nothing to save on exit.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli(sys.argv[1:])
