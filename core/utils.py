# core/utils.py

"""
Repository for program-wide utilities.
"""

import time
from collections.abc import Container


def generate_time_id(taken: Container[str]) -> str:
    """
    Returns a millisecond-timestamp token that is not already in `taken`.

    The timestamp is incremented until an unused value is found, so rapid calls in
    the same millisecond still produce distinct ids.
    """
    candidate = time.time_ns() // 1_000_000

    while str(candidate) in taken:
        candidate += 1

    return str(candidate)
