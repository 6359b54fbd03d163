# tests/test_storage.py

import os

import pytest

from core.storage import JsonFileSlot, MemorySlot


def test_file_slot_missing_file_reads_none(file_slot):
    assert file_slot.read() is None


def test_file_slot_write_then_read(file_slot, tmp_path):
    file_slot.write('[{"id": "1"}]')

    assert file_slot.path == os.path.join(str(tmp_path), "students-data.json")
    assert file_slot.read() == '[{"id": "1"}]'


def test_file_slot_overwrites_and_leaves_no_temp_files(file_slot, tmp_path):
    file_slot.write("first")
    file_slot.write("second")

    assert file_slot.read() == "second"
    assert os.listdir(tmp_path) == ["students-data.json"]


def test_file_slot_custom_key(tmp_path):
    slot = JsonFileSlot(str(tmp_path), key="archive")
    slot.write("[]")

    assert (tmp_path / "archive.json").read_text(encoding="utf-8") == "[]"


def test_memory_slot_counts_writes():
    slot = MemorySlot()
    assert slot.read() is None

    slot.write("a")
    slot.write("b")

    assert slot.read() == "b"
    assert slot.write_count == 2


def test_file_slot_failed_replace_keeps_old_content(file_slot, tmp_path, monkeypatch):
    file_slot.write("old")

    def failing_replace(src, dst):
        raise OSError("rename failed")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(OSError, match="rename failed"):
        file_slot.write("new")

    assert file_slot.read() == "old"
    assert os.listdir(tmp_path) == ["students-data.json"]
