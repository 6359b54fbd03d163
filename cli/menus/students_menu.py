# cli/menus/students_menu.py

"""
Manage Students menu for the Student Records CLI.

This module defines the full interface for managing `StudentRecord`s, including:
- Adding new students through a validated form
- Editing every field of an existing student
- Permanently removing students behind a confirmation step
- Viewing student records (all, by search, or individually)

All operations are routed through the `RecordStore`, which persists each change as it is made.
Form input is validated here, before the store is called; the store itself accepts any fields.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.record_store import RecordStore
from models.student import StudentFields, StudentRecord
from models.student_form import (
    FORM_LABELS,
    REQUIRED_FIELDS,
    fields_to_form,
    validate_student_form,
)

# entered while editing to blank out an optional field; rejected for required fields
CLEAR_TOKEN = "-"


def run(store: RecordStore) -> None:
    """
    Top-level loop with dispatch for the Manage Students menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Manage Students")
    options = [
        ("Add Student", add_student),
        ("Edit Student", find_and_edit_student),
        ("Remove Student", find_and_remove_student),
        ("View All Students", view_all_students),
        ("Search Students", view_search_results),
        ("View Individual Student", view_individual_student),
    ]
    zero_option = "Return to Main menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(store)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Main menu")


# === form input ===


def prompt_field(name: str, current: str) -> str | MenuSignal:
    """
    Prompts for a single form field.

    Returns:
        - The raw input string.
        - The current value if the user leaves the input blank and a current value exists.
        - "" if the user enters `CLEAR_TOKEN` for an optional field.
        - `MenuSignal.CANCEL` if the field is the first name of a new record and left blank.

    Notes:
        - `CLEAR_TOKEN` is rejected for required fields and the user is prompted again.
    """
    label = FORM_LABELS[name]
    is_required = name in REQUIRED_FIELDS
    requirement = "required" if is_required else "optional"

    if current:
        clear_hint = f", '{CLEAR_TOKEN}' to clear" if not is_required else ""

        while True:
            response = helpers.prompt_user_input_or_default(
                f"Enter {label.lower()} ({requirement}, current: {current}, leave blank to keep{clear_hint}):"
            )

            if response is MenuSignal.DEFAULT:
                return current
            response = cast(str, response)

            if response != CLEAR_TOKEN:
                return response

            if not is_required:
                return ""

            print(f"{label} is required and cannot be cleared. Please try again.")

    if name == "first_name":
        return helpers.prompt_user_input_or_cancel(
            f"Enter {label.lower()} ({requirement}, leave blank to cancel):"
        )

    return helpers.prompt_user_input(f"Enter {label.lower()} ({requirement}):")


def prompt_student_form(initial: dict[str, str]) -> StudentFields | None:
    """
    Collects and validates every student field, re-prompting until the form passes or the user gives up.

    Args:
        initial (dict[str, str]): Raw form values used as defaults. Empty for new records.

    Returns:
        Validated `StudentFields`, or None if the user cancels.
    """
    form = dict(initial)

    while True:
        for name in FORM_LABELS:
            response = prompt_field(name, form.get(name, ""))

            if response is MenuSignal.CANCEL:
                return None

            form[name] = cast(str, response)

        validation_response = validate_student_form(form)

        if validation_response.success:
            return validation_response.data["fields"]

        helpers.display_response_failure(validation_response)

        if not helpers.confirm_action("Would you like to correct the form?"):
            return None


# === add student ===


def add_student(store: RecordStore) -> None:
    """
    Loops a prompt to collect a new student's details and create the record in the store.

    Notes:
        - The store persists the new record immediately. A write failure is reported,
          and the record remains in memory for the rest of the session.
    """
    while True:
        fields = prompt_student_form({})

        if fields is not None and preview_and_confirm_student(fields):
            try:
                student = store.create(fields)

            except OSError as e:
                helpers.display_persistence_failure(e)

            else:
                print(f"\n{student.full_name} was successfully added (ID: {student.id}).")

        if not helpers.confirm_action(
            "Would you like to continue adding new students?"
        ):
            break

    helpers.returning_to("Manage Students menu")


def preview_and_confirm_student(fields: StudentFields) -> bool:
    preview = StudentRecord.from_fields("[NEW]", fields)

    print("\nYou are about to create the following student:")
    print(model_formatters.format_student_multiline(preview))

    if helpers.confirm_action("Would you like to create this student?"):
        return True

    print(f"\nDiscarding student: {preview.full_name}")
    return False


# === edit student ===


def find_and_edit_student(store: RecordStore) -> None:
    student = helpers.prompt_find_student(store)

    if student is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    student = cast(StudentRecord, student)

    edit_student(student, store)


def edit_student(student: StudentRecord, store: RecordStore) -> None:
    """
    Prompts for every field of an existing student, prefilled with the current values, and updates the store.

    Notes:
        - The record is replaced in full; its id and position in the store are kept.
        - If the record was removed in the meantime, the update reports "not found" and nothing is written.
    """
    print("\nYou are editing the following student:")
    print(model_formatters.format_student_multiline(student))

    fields = prompt_student_form(fields_to_form(student.to_fields()))

    if fields is None:
        helpers.returning_without_changes()
        return

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    try:
        updated = store.update(student.id, fields)

    except OSError as e:
        helpers.display_persistence_failure(e)
        return

    if updated is None:
        print(f"\nNo student found with ID {student.id}. Nothing was updated.")
        return

    print(f"\n{updated.full_name}'s information has been updated.")


# === remove student ===


def find_and_remove_student(store: RecordStore) -> None:
    student = helpers.prompt_find_student(store)

    if student is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    student = cast(StudentRecord, student)

    confirm_and_remove(student, store)


def confirm_and_remove(student: StudentRecord, store: RecordStore) -> None:
    helpers.caution_banner()
    print("You are about to permanently delete the following student record:")
    print(model_formatters.format_student_multiline(student))

    if not helpers.confirm_action(
        "Are you sure you want to permanently delete this student? This action cannot be undone."
    ):
        helpers.returning_without_changes()
        return

    try:
        removed = store.delete(student.id)

    except OSError as e:
        helpers.display_persistence_failure(e)
        return

    if not removed:
        print(f"\nNo student found with ID {student.id}. Nothing was removed.")
        return

    print(f"\n{student.full_name} was successfully removed.")


# === view students ===


def view_all_students(store: RecordStore) -> None:
    students = store.list()

    banner = formatters.format_banner_text("All Students")
    print(f"\n{banner}")

    if not students:
        print("\nThere are no students yet.")
        return

    helpers.display_results(students, True, model_formatters.format_student_oneline)


def view_search_results(store: RecordStore) -> None:
    results = helpers.search_students(store)

    if not results:
        print("\nNo students found. Try adjusting your search terms.")
        return

    print(f"\nYour search returned {len(results)} result(s):")
    helpers.display_results(results, True, model_formatters.format_student_oneline)


def view_individual_student(store: RecordStore) -> None:
    student = helpers.prompt_find_student(store)

    if student is MenuSignal.CANCEL:
        return
    student = cast(StudentRecord, student)

    # re-read by id so the view reflects the stored record
    current = store.get(student.id)

    if current is None:
        print(f"\nNo student found with ID {student.id}.")
        return

    print("\nYou are viewing the following student record:")
    print(model_formatters.format_student_multiline(current))

    if helpers.confirm_action("Would you like to edit this student?"):
        edit_student(current, store)
