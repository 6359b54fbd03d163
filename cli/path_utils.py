# cli/path_utils.py

import os

DATA_DIR_ENV_VAR = "STUDENT_RECORDS_DIR"


def get_data_dir(user_input: str | None, environ: dict[str, str] | None = None) -> str:
    """
    Resolves the directory holding the durable slot from user input, environment, or default location.

    Args:
        user_input (str | None): An optional directory path, e.g. from the command line. Blank counts as None.
        environ (dict[str, str] | None): The environment to consult. Defaults to `os.environ`.

    Returns:
        An expanded, absolute path string. Precedence is user input, then `$STUDENT_RECORDS_DIR`,
        then `~/Documents/StudentRecords`.
    """
    environ = os.environ if environ is None else environ

    if user_input is not None and user_input.strip():
        chosen = user_input.strip()
    elif environ.get(DATA_DIR_ENV_VAR, "").strip():
        chosen = environ[DATA_DIR_ENV_VAR].strip()
    else:
        documents = os.path.join(os.path.expanduser("~"), "Documents")
        chosen = os.path.join(documents, "StudentRecords")

    return os.path.abspath(os.path.expanduser(chosen))


def resolve_data_dir(user_input: str | None) -> str:
    """
    Produces and ensures a valid data directory for the `RecordStore` slot.

    Notes:
        - Creates the directory path on disk (including parent directories) if it does not exist.
    """
    data_dir = get_data_dir(user_input)

    os.makedirs(data_dir, exist_ok=True)

    return data_dir
