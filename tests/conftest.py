# tests/conftest.py

import pytest

from core.storage import JsonFileSlot, MemorySlot
from models.record_store import RecordStore
from models.student import StudentRecord, StudentStatus


@pytest.fixture
def memory_slot():
    return MemorySlot()


@pytest.fixture
def seeded_store(memory_slot):
    store = RecordStore(memory_slot)
    store.open()
    return store


@pytest.fixture
def empty_store(memory_slot):
    store = RecordStore(memory_slot, seed=lambda: [])
    store.open()
    return store


@pytest.fixture
def file_slot(tmp_path):
    return JsonFileSlot(str(tmp_path))


@pytest.fixture
def sample_fields():
    return {
        "first_name": "Ann",
        "last_name": "Lee",
        "email": "ann.lee@email.com",
        "phone": "+1234567899",
        "date_of_birth": "1999-03-04",
        "address": "1 Elm St, City, State 12345",
        "course": "Mathematics",
        "enrollment_date": "2024-09-01",
        "status": StudentStatus.ACTIVE,
        "gpa": 4.0,
        "profile_image": None,
    }


@pytest.fixture
def sample_student(sample_fields):
    return StudentRecord.from_fields("s001", sample_fields)


@pytest.fixture
def sample_form():
    return {
        "first_name": "Ann",
        "last_name": "Lee",
        "email": "ann.lee@email.com",
        "phone": "+1234567899",
        "date_of_birth": "1999-03-04",
        "address": "1 Elm St, City, State 12345",
        "course": "Mathematics",
        "enrollment_date": "2024-09-01",
        "status": "active",
        "gpa": "4.0",
        "profile_image": "",
    }


@pytest.fixture
def scripted_input(monkeypatch):
    """
    Replaces `input()` with a function that returns the given responses in order.
    """

    def install(*responses: str):
        answers = iter(responses)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))

    return install
