# models/seed.py

"""
Example records loaded into a `RecordStore` whose durable slot is empty.

Two active records and one graduated record, matching the records
shipped with earlier versions of the app.
"""

from models.student import StudentRecord, StudentStatus


def seed_records() -> list[StudentRecord]:
    return [
        StudentRecord(
            id="1",
            first_name="John",
            last_name="Doe",
            email="john.doe@email.com",
            phone="+1234567890",
            date_of_birth="1995-05-15",
            address="123 Main St, City, State 12345",
            course="Computer Science",
            enrollment_date="2023-09-01",
            status=StudentStatus.ACTIVE,
            gpa=3.8,
        ),
        StudentRecord(
            id="2",
            first_name="Jane",
            last_name="Smith",
            email="jane.smith@email.com",
            phone="+1234567891",
            date_of_birth="1996-08-22",
            address="456 Oak Ave, City, State 12345",
            course="Business Administration",
            enrollment_date="2023-09-01",
            status=StudentStatus.ACTIVE,
            gpa=3.9,
        ),
        StudentRecord(
            id="3",
            first_name="Mike",
            last_name="Johnson",
            email="mike.johnson@email.com",
            phone="+1234567892",
            date_of_birth="1994-12-10",
            address="789 Pine St, City, State 12345",
            course="Engineering",
            enrollment_date="2023-01-15",
            status=StudentStatus.GRADUATED,
            gpa=3.7,
        ),
    ]
