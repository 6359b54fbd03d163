# tests/test_student_form.py

import pytest

from core.response import ErrorCode
from models.student import StudentStatus
from models.student_form import (
    fields_to_form,
    validate_email_input,
    validate_gpa_input,
    validate_status_input,
    validate_student_form,
)


def test_valid_form(sample_form, sample_fields):
    response = validate_student_form(sample_form)

    assert response.success
    assert response.data["fields"] == sample_fields


def test_form_strips_whitespace(sample_form):
    response = validate_student_form({**sample_form, "first_name": "  Ann  "})

    assert response.data["fields"]["first_name"] == "Ann"


def test_missing_required_fields_reported_together(sample_form):
    form = {**sample_form, "first_name": " ", "course": ""}
    del form["phone"]

    response = validate_student_form(form)

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert set(response.field_errors) == {"first_name", "course", "phone"}
    assert response.field_errors["first_name"] == "First name is required"


def test_optional_fields_may_be_blank(sample_form):
    response = validate_student_form(
        {**sample_form, "address": "", "gpa": "", "status": "", "profile_image": ""}
    )

    fields = response.data["fields"]
    assert fields["address"] == ""
    assert fields["gpa"] is None
    assert fields["status"] is StudentStatus.ACTIVE
    assert fields["profile_image"] is None


@pytest.mark.parametrize("email", ["ann", "ann@email", "@.", "ann email.com"])
def test_invalid_email(email):
    with pytest.raises(ValueError, match="Email is invalid"):
        validate_email_input(email)


def test_blank_email_is_required():
    with pytest.raises(ValueError, match="Email is required"):
        validate_email_input("  ")


def test_invalid_date(sample_form):
    response = validate_student_form({**sample_form, "date_of_birth": "15/05/1995"})

    assert response.field_errors == {
        "date_of_birth": "Date of birth must be a date in YYYY-MM-DD format"
    }


def test_status_is_case_insensitive():
    assert validate_status_input("Graduated") is StudentStatus.GRADUATED


def test_unknown_status():
    with pytest.raises(ValueError, match="Status must be one of"):
        validate_status_input("expelled")


@pytest.mark.parametrize("gpa", ["-0.1", "4.01", "abc"])
def test_invalid_gpa(gpa):
    with pytest.raises(ValueError):
        validate_gpa_input(gpa)


def test_gpa_bounds_are_inclusive():
    assert validate_gpa_input("0") == 0.0
    assert validate_gpa_input("4") == 4.0


def test_fields_to_form_round_trip(sample_form, sample_fields):
    form = fields_to_form(sample_fields)

    assert form["status"] == "active"
    assert form["profile_image"] == ""
    assert validate_student_form(form).data["fields"] == sample_fields
