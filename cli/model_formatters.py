# cli/model_formatters.py

# anything that renders student records or store statistics
import datetime
from textwrap import dedent

import core.formatters as formatters
from models.student import StudentRecord

# === student formatters ===


def format_student_oneline(student: StudentRecord) -> str:
    status = f" [{student.status.value.upper()}]" if not student.is_active else ""

    return f"{student.full_name:<20} | {student.email:<28} | {student.course}{status}"


def format_student_multiline(
    student: StudentRecord, today: datetime.date | None = None
) -> str:
    today = today or datetime.date.today()

    age = student.age_on(today)
    birth_date = formatters.format_iso_date_long(student.date_of_birth)
    birth_line = f"{birth_date} (Age {age})" if age is not None else birth_date

    return dedent(
        f"""\
        Student {student.id}:
        ... Name: {student.full_name}
        ... Email: {student.email}
        ... Phone: {formatters.format_optional(student.phone)}
        ... Date of Birth: {birth_line}
        ... Address: {formatters.format_optional(student.address)}
        ... Course: {student.course}
        ... Enrollment Date: {formatters.format_iso_date_long(student.enrollment_date)}
        ... Status: {formatters.format_label(student.status.value)}
        ... GPA: {formatters.format_gpa(student.gpa)}"""
    )


# === dashboard formatters ===


def format_stats(stats: dict) -> str:
    return dedent(
        f"""\
        ... Total Students: {stats["total"]}
        ... Active Students: {stats["active"]}
        ... Graduated: {stats["graduated"]}
        ... Average GPA: {stats["average_gpa"]}"""
    )
