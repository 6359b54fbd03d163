# models/student.py

"""
Represents a single student record held by the `RecordStore`.

Stores identifying and contact information, enrollment details, an enrollment
status, and an optional GPA. The `id` is assigned by the store at creation and
never changes afterwards; every other field is replaced wholesale on update.

Includes functionality for:
- Serializing to and from the JSON-compatible dictionaries kept in the durable slot
- Extracting the caller-editable fields (everything except `id`)
- Deriving display values such as full name and age

Serialized records use camelCase keys so existing `students-data` slots remain readable.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Any


class StudentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    GRADUATED = "graduated"


# snake_case attribute name -> camelCase key in the durable encoding
FIELD_KEYS: dict[str, str] = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "phone": "phone",
    "date_of_birth": "dateOfBirth",
    "address": "address",
    "course": "course",
    "enrollment_date": "enrollmentDate",
    "status": "status",
    "gpa": "gpa",
    "profile_image": "profileImage",
}

StudentFields = dict[str, Any]


class StudentRecord:

    def __init__(
        self,
        id: str,
        first_name: str,
        last_name: str,
        email: str,
        phone: str = "",
        date_of_birth: str = "",
        address: str = "",
        course: str = "",
        enrollment_date: str = "",
        status: StudentStatus | str = StudentStatus.ACTIVE,
        gpa: float | None = None,
        profile_image: str | None = None,
    ):
        self._id: str = id
        self.first_name: str = first_name
        self.last_name: str = last_name
        self.email: str = email
        self.phone: str = phone
        self.date_of_birth: str = date_of_birth
        self.address: str = address
        self.course: str = course
        self.enrollment_date: str = enrollment_date
        self.status: StudentStatus = StudentStatus(status)
        self.gpa: float | None = gpa
        self.profile_image: str | None = profile_image

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status is StudentStatus.ACTIVE

    def age_on(self, on_date: datetime.date) -> int | None:
        """
        Returns the difference in calendar years between the birth year and `on_date`.

        Returns None if `date_of_birth` is not a valid ISO date.
        """
        try:
            born = datetime.date.fromisoformat(self.date_of_birth)
        except ValueError:
            return None

        return on_date.year - born.year

    # === field access ===

    def to_fields(self) -> StudentFields:
        return {name: getattr(self, name) for name in FIELD_KEYS}

    @classmethod
    def from_fields(cls, id: str, fields: StudentFields) -> StudentRecord:
        """
        Builds a record from caller-supplied field data and a store-assigned id.

        Unknown keys are ignored. A missing or None status defaults to `StudentStatus.ACTIVE`.

        Raises:
            ValueError: If `status` is not a recognized `StudentStatus` value.
        """
        known = {name: fields[name] for name in FIELD_KEYS if name in fields}

        if known.get("status") is None:
            known["status"] = StudentStatus.ACTIVE

        return cls(id=id, **known)

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"id": self._id}

        for name, key in FIELD_KEYS.items():
            value = getattr(self, name)

            if name == "status":
                value = value.value

            if value is None:
                continue

            data[key] = value

        return data

    @classmethod
    def from_dict(cls, data: dict) -> StudentRecord:
        gpa = data.get("gpa")

        return cls(
            id=str(data["id"]),
            first_name=data["firstName"],
            last_name=data["lastName"],
            email=data["email"],
            phone=data.get("phone", ""),
            date_of_birth=data.get("dateOfBirth", ""),
            address=data.get("address", ""),
            course=data.get("course", ""),
            enrollment_date=data.get("enrollmentDate", ""),
            status=data.get("status") or StudentStatus.ACTIVE,
            gpa=float(gpa) if gpa is not None else None,
            profile_image=data.get("profileImage"),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # mutable and compared by value
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StudentRecord({self._id}, {self.first_name}, {self.last_name}, {self.email}, {self.status.value})"

    def __str__(self) -> str:
        return f"STUDENT: {self.full_name} - (ID: {self._id})"
