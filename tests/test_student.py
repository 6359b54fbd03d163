# tests/test_student.py

import datetime

import pytest

from models.student import StudentRecord, StudentStatus


def test_student_to_dict(sample_student):
    data = sample_student.to_dict()

    assert data["id"] == "s001"
    assert data["firstName"] == "Ann"
    assert data["lastName"] == "Lee"
    assert data["email"] == "ann.lee@email.com"
    assert data["dateOfBirth"] == "1999-03-04"
    assert data["enrollmentDate"] == "2024-09-01"
    assert data["status"] == "active"
    assert data["gpa"] == 4.0
    assert "profileImage" not in data


def test_student_to_dict_omits_missing_gpa(sample_fields):
    student = StudentRecord.from_fields("s002", {**sample_fields, "gpa": None})

    assert "gpa" not in student.to_dict()


def test_student_from_dict():
    student = StudentRecord.from_dict(
        {
            "id": "1",
            "firstName": "John",
            "lastName": "Doe",
            "email": "john.doe@email.com",
            "phone": "+1234567890",
            "dateOfBirth": "1995-05-15",
            "address": "123 Main St, City, State 12345",
            "course": "Computer Science",
            "enrollmentDate": "2023-09-01",
            "status": "graduated",
            "gpa": 3.8,
        }
    )

    assert student.id == "1"
    assert student.full_name == "John Doe"
    assert student.course == "Computer Science"
    assert student.status is StudentStatus.GRADUATED
    assert not student.is_active
    assert student.gpa == 3.8
    assert student.profile_image is None


def test_student_from_dict_defaults_missing_status():
    student = StudentRecord.from_dict(
        {"id": "7", "firstName": "A", "lastName": "B", "email": "a@b.co"}
    )

    assert student.status is StudentStatus.ACTIVE
    assert student.phone == ""


def test_student_from_dict_rejects_unknown_status():
    with pytest.raises(ValueError):
        StudentRecord.from_dict(
            {
                "id": "7",
                "firstName": "A",
                "lastName": "B",
                "email": "a@b.co",
                "status": "expelled",
            }
        )


def test_student_dict_round_trip(sample_student):
    assert StudentRecord.from_dict(sample_student.to_dict()) == sample_student


def test_from_fields_defaults_status_and_ignores_id(sample_fields):
    fields = {**sample_fields, "id": "spoofed"}
    del fields["status"]

    student = StudentRecord.from_fields("s003", fields)

    assert student.id == "s003"
    assert student.status is StudentStatus.ACTIVE


def test_to_fields_excludes_id(sample_student, sample_fields):
    assert sample_student.to_fields() == sample_fields


def test_age_on(sample_student):
    assert sample_student.age_on(datetime.date(2025, 1, 1)) == 26


def test_age_on_invalid_birth_date(sample_fields):
    student = StudentRecord.from_fields("s004", {**sample_fields, "date_of_birth": ""})

    assert student.age_on(datetime.date(2025, 1, 1)) is None


def test_student_to_str(sample_student):
    assert str(sample_student) == "STUDENT: Ann Lee - (ID: s001)"


def test_students_compare_by_value_and_are_unhashable(sample_student, sample_fields):
    copy = StudentRecord.from_fields("s001", sample_fields)

    assert copy == sample_student
    assert copy is not sample_student

    with pytest.raises(TypeError):
        hash(sample_student)
