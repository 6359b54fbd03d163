# tests/test_path_utils.py

import os

from cli.path_utils import DATA_DIR_ENV_VAR, get_data_dir, resolve_data_dir


def test_user_input_takes_precedence(tmp_path):
    environ = {DATA_DIR_ENV_VAR: "/ignored"}

    assert get_data_dir(str(tmp_path), environ) == str(tmp_path)


def test_environment_used_when_input_blank(tmp_path):
    environ = {DATA_DIR_ENV_VAR: str(tmp_path)}

    assert get_data_dir("   ", environ) == str(tmp_path)
    assert get_data_dir(None, environ) == str(tmp_path)


def test_default_location():
    expected = os.path.join(os.path.expanduser("~"), "Documents", "StudentRecords")

    assert get_data_dir(None, {}) == os.path.abspath(expected)


def test_resolve_data_dir_creates_directory(tmp_path):
    target = tmp_path / "nested" / "records"

    assert resolve_data_dir(str(target)) == str(target)
    assert target.is_dir()
