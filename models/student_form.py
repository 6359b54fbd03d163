# models/student_form.py

"""
Validation for student data collected from forms before it reaches the `RecordStore`.

The store accepts any well-typed fields, so every create and edit form runs its raw
text input through `validate_student_form()` first. Individual validators raise
ValueError with a user-facing message; the aggregate reports every failing field at once.
"""

from __future__ import annotations

import datetime
import re
from typing import Callable

from core.response import ErrorCode, Response
from models.student import StudentFields, StudentStatus

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

GPA_MIN = 0.0
GPA_MAX = 4.0

# field name -> label shown in prompts and error messages
FORM_LABELS: dict[str, str] = {
    "first_name": "First name",
    "last_name": "Last name",
    "email": "Email",
    "phone": "Phone number",
    "date_of_birth": "Date of birth",
    "address": "Address",
    "course": "Course",
    "enrollment_date": "Enrollment date",
    "status": "Status",
    "gpa": "GPA",
    "profile_image": "Profile image",
}

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "date_of_birth",
    "course",
    "enrollment_date",
)


# === field validators ===


def validate_required(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required")
    return value


def validate_email_input(email: str) -> str:
    email = validate_required(email, FORM_LABELS["email"])
    if not EMAIL_PATTERN.search(email):
        raise ValueError("Email is invalid")
    return email


def validate_iso_date(value: str, label: str) -> str:
    value = validate_required(value, label)
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"{label} must be a date in YYYY-MM-DD format")
    return value


def validate_status_input(value: str) -> StudentStatus:
    value = value.strip().lower()
    if not value:
        return StudentStatus.ACTIVE
    try:
        return StudentStatus(value)
    except ValueError:
        options = ", ".join(s.value for s in StudentStatus)
        raise ValueError(f"Status must be one of: {options}")


def validate_gpa_input(value: str) -> float | None:
    value = value.strip()
    if not value:
        return None
    try:
        gpa = float(value)
    except ValueError:
        raise ValueError("GPA must be a number")
    if not GPA_MIN <= gpa <= GPA_MAX:
        raise ValueError(f"GPA must be between {GPA_MIN:.1f} and {GPA_MAX:.1f}")
    return gpa


def validate_optional_text(value: str) -> str:
    return value.strip()


def _field_validators() -> dict[str, Callable[[str], object]]:
    return {
        "first_name": lambda v: validate_required(v, FORM_LABELS["first_name"]),
        "last_name": lambda v: validate_required(v, FORM_LABELS["last_name"]),
        "email": validate_email_input,
        "phone": lambda v: validate_required(v, FORM_LABELS["phone"]),
        "date_of_birth": lambda v: validate_iso_date(v, FORM_LABELS["date_of_birth"]),
        "address": validate_optional_text,
        "course": lambda v: validate_required(v, FORM_LABELS["course"]),
        "enrollment_date": lambda v: validate_iso_date(
            v, FORM_LABELS["enrollment_date"]
        ),
        "status": validate_status_input,
        "gpa": validate_gpa_input,
        "profile_image": lambda v: validate_optional_text(v) or None,
    }


# === form validator ===


def validate_student_form(raw: dict[str, str]) -> Response:
    """
    Validates raw text input for every student field and converts it to store-ready values.

    Args:
        raw (dict[str, str]): Form input keyed by field name. Missing keys are treated as blank.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if every field passed its check.
                - False if any field failed.
            - detail (str | None):
                - On failure, a summary naming the failing fields.
                - On success, None.
            - error (ErrorCode | str | None):
                - `ErrorCode.VALIDATION_FAILED` if any field failed.
            - status_code (int | None):
                - 200 on success
                - 400 on failure
            - data (dict): Payload with the following keys:
                - On success:
                    - "fields" (StudentFields): Stripped strings, a `StudentStatus`, and a `float | None` GPA.
                - On failure:
                    - "errors" (dict[str, str]): Field name mapped to its error message.

    Notes:
        - This method is read-only and does not raise.
        - Address and profile image are optional; status defaults to active; GPA may be blank.
    """
    fields: StudentFields = {}
    errors: dict[str, str] = {}

    for name, validator in _field_validators().items():
        try:
            fields[name] = validator(raw.get(name) or "")
        except ValueError as e:
            errors[name] = str(e)

    if errors:
        labels = ", ".join(FORM_LABELS[name] for name in errors)
        return Response.fail(
            detail=f"Please correct the following fields: {labels}.",
            error=ErrorCode.VALIDATION_FAILED,
            data={
                "errors": errors,
            },
        )

    return Response.succeed(
        data={
            "fields": fields,
        },
    )


def fields_to_form(fields: StudentFields) -> dict[str, str]:
    """
    Converts stored field values back into raw form text, for prefilling edit forms.
    """
    form: dict[str, str] = {}

    for name in FORM_LABELS:
        value = fields.get(name)

        if value is None:
            form[name] = ""
        elif isinstance(value, StudentStatus):
            form[name] = value.value
        else:
            form[name] = str(value)

    return form
