# tests/test_formatters.py

import datetime

import cli.model_formatters as model_formatters
import core.formatters as formatters
from models.student import StudentRecord, StudentStatus


def test_format_banner_text():
    banner = formatters.format_banner_text("Dashboard", width=11)

    assert banner == "===========\n Dashboard \n==========="


def test_format_gpa():
    assert formatters.format_gpa(3.8) == "3.80"
    assert formatters.format_gpa(None) == "[NO GPA]"


def test_format_iso_date_long():
    assert formatters.format_iso_date_long("2023-09-01") == "September 01, 2023"
    assert formatters.format_iso_date_long("soon") == "soon"
    assert formatters.format_iso_date_long("") == "[NO DATE]"


def test_format_student_oneline_marks_non_active(sample_fields):
    active = StudentRecord.from_fields("1", sample_fields)
    graduated = StudentRecord.from_fields(
        "2", {**sample_fields, "status": StudentStatus.GRADUATED}
    )

    assert "[GRADUATED]" not in model_formatters.format_student_oneline(active)
    assert model_formatters.format_student_oneline(graduated).endswith(
        "Mathematics [GRADUATED]"
    )


def test_format_student_multiline(sample_student):
    text = model_formatters.format_student_multiline(
        sample_student, today=datetime.date(2025, 1, 1)
    )

    assert "... Name: Ann Lee" in text
    assert "... Date of Birth: March 04, 1999 (Age 26)" in text
    assert "... Status: Active" in text
    assert "... GPA: 4.00" in text


def test_format_stats(seeded_store):
    text = model_formatters.format_stats(seeded_store.stats())

    assert "... Total Students: 3" in text
    assert "... Average GPA: 3.80" in text
