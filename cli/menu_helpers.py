# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Records application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for user input and confirmation
- Finding and selecting student records from the store
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.response import Response
from models.record_store import RecordStore
from models.student import StudentRecord


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("\nSelect an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT`.
# - `confirm_action()` and its variants loop until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_make_change() -> bool:
    return confirm_action("Do you want to make this change?")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


# === finder, search, and select methods ===


def prompt_selection_from_list(
    list_data: list[StudentRecord],
    list_description: str,
    formatter: Callable[[StudentRecord], str] = model_formatters.format_student_oneline,
) -> StudentRecord | None:
    """
    Prompts the user to select a record from a list, shown in store order.

    Returns:
        StudentRecord: The selected record if a valid index is chosen.
        None: If the list is empty or the user cancels with "0".
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()}.")
        return None

    print(f"\nThere are {len(list_data)} {list_description.lower()}.")

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(list_data, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return None

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return list_data[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def prompt_selection_from_search(
    search_results: list[StudentRecord],
    formatter: Callable[[StudentRecord], str] = model_formatters.format_student_oneline,
) -> StudentRecord | None:
    """
    Prompts the user to select a record from a set of search results.

    Notes:
        - If a single result is found, it is returned automatically.
        - Otherwise, a numbered selection prompt is shown.
    """
    if not search_results:
        print("\nYour search returned no results.")
        return None

    if len(search_results) == 1:
        return search_results[0]

    print(f"\nYour search returned {len(search_results)} results:")

    while True:
        display_results(search_results, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return None

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return search_results[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def search_students(store: RecordStore) -> list[StudentRecord]:
    query = prompt_user_input("Search for a student by name, email, or course:")

    return store.search(query)


def find_student_by_search(store: RecordStore) -> StudentRecord | MenuSignal:
    """
    Prompts the user to search for and select a `StudentRecord`.

    Returns:
        - The selected `StudentRecord` if search and selection succeed.
        - `MenuSignal.CANCEL` if no match is found or the user cancels.
    """
    student = prompt_selection_from_search(search_students(store))

    return MenuSignal.CANCEL if student is None else student


def find_student_from_list(store: RecordStore) -> StudentRecord | MenuSignal:
    student = prompt_selection_from_list(store.list(), "Students")

    return MenuSignal.CANCEL if student is None else student


def prompt_find_student(store: RecordStore) -> StudentRecord | MenuSignal:
    """
    Asks whether to search or browse, then returns the chosen `StudentRecord` or `MenuSignal.CANCEL`.
    """
    title = formatters.format_banner_text("Student Selection")
    options = [
        ("Search for a student", find_student_by_search),
        ("Select from all students", find_student_from_list),
    ]
    zero_option = "Return"

    menu_response = display_menu(title, options, zero_option)

    if menu_response is MenuSignal.EXIT:
        return MenuSignal.CANCEL

    elif callable(menu_response):
        return menu_response(store)

    else:
        raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def caution_banner() -> None:
    caution_banner = formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
        - Field-level validation errors are listed beneath the summary.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")

    for message in response.field_errors.values():
        print(f"... {message}")


def display_persistence_failure(error: Exception) -> None:
    print(f"\n[ERROR: PERSISTENCE] Could not write student records: {error}")
    print("Changes are kept in memory for this session but were not saved to disk.")
