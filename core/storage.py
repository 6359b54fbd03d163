# core/storage.py

"""
Durable slots for the serialized record collection.

A slot is a single named location holding the entire collection as text. It is
read once when a `RecordStore` opens and rewritten in full after every mutation.
Slots know nothing about records; encoding and decoding belong to the store.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "students-data"


class Slot(Protocol):
    def read(self) -> str | None: ...

    def write(self, text: str) -> None: ...


class JsonFileSlot:
    """
    Stores the serialized collection in `<dir_path>/<key>.json`.

    A missing file reads as None. Writes go to a temporary file in the same
    directory which then replaces the target, so a failed write leaves the previous
    snapshot intact.

    Notes:
        - The caller is responsible for ensuring that `dir_path` exists.
    """

    def __init__(self, dir_path: str, key: str = DEFAULT_SLOT_KEY):
        self._dir_path = dir_path
        self._key = key

    @property
    def path(self) -> str:
        return os.path.join(self._dir_path, f"{self._key}.json")

    def read(self) -> str | None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()

        except FileNotFoundError:
            logger.debug("No slot file at %s", self.path)
            return None

    def write(self, text: str) -> None:
        fd, temp_path = tempfile.mkstemp(
            dir=self._dir_path, prefix=f".{self._key}-", suffix=".tmp"
        )

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)

            os.replace(temp_path, self.path)

        except BaseException:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        logger.debug("Wrote %d characters to %s", len(text), self.path)

    def __repr__(self) -> str:
        return f"JsonFileSlot({self.path})"


class MemorySlot:
    """
    Holds the serialized collection in memory. Counts writes.
    """

    def __init__(self, initial: str | None = None):
        self.text: str | None = initial
        self.write_count: int = 0

    def read(self) -> str | None:
        return self.text

    def write(self, text: str) -> None:
        self.text = text
        self.write_count += 1

    def __repr__(self) -> str:
        return f"MemorySlot(writes={self.write_count})"
