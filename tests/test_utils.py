# tests/test_utils.py

import core.utils as utils


def test_generate_time_id_is_numeric():
    assert utils.generate_time_id(set()).isdigit()


def test_generate_time_id_skips_taken(monkeypatch):
    monkeypatch.setattr(utils.time, "time_ns", lambda: 5_000_000)

    assert utils.generate_time_id({"5", "6"}) == "7"
