# models/record_store.py

"""
The RecordStore is the central data object of the program and the only owner of the student collection.

Records are held in an insertion-ordered dictionary keyed by id and mirrored to a durable slot
as a JSON array. The store follows a two-phase lifecycle: it is constructed closed, and `open()`
reads the slot once (seeding it if empty). Only an open store accepts mutations, and every
mutation rewrites the full snapshot to the slot before returning.

Not-found outcomes are ordinary return values (None or False). Write failures are not caught
here; they propagate to the caller, and the in-memory collection may then lead the durable copy.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from core.response import ErrorCode, Response
from core.storage import Slot
from core.utils import generate_time_id
from models.seed import seed_records
from models.student import StudentFields, StudentRecord, StudentStatus

logger = logging.getLogger(__name__)


class RecordStore:

    def __init__(
        self,
        slot: Slot,
        seed: Callable[[], list[StudentRecord]] = seed_records,
    ):
        self._slot = slot
        self._seed = seed
        self._records: dict[str, StudentRecord] = {}
        self._is_open: bool = False

    # === properties ===

    @property
    def is_open(self) -> bool:
        return self._is_open

    # === public classmethods ===

    @classmethod
    def load(cls, slot: Slot) -> Response:
        """
        Constructs and opens a `RecordStore` against the given slot.

        Args:
            slot (Slot): The durable slot holding the serialized collection.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the slot was read (or seeded) and the store is open.
                    - False for JSON decoding issues, malformed records, or I/O errors.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if JSONDecodeError raised.
                    - `ErrorCode.INVALID_FIELD_VALUE` if ValueError raised.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if KeyError or TypeError raised.
                    - `ErrorCode.INTERNAL_ERROR` if OSError raised or for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "store" (RecordStore): The open `RecordStore`.
                    - On failure:
                        - None

        Notes:
            - An empty slot is seeded and written before this method returns.
        """
        try:
            store = cls(slot)
            store.open()

        # JSONDecodeError subclasses ValueError and must be caught first
        except json.JSONDecodeError as e:
            return Response.fail(
                detail=f"Failed to parse JSON data: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except (KeyError, TypeError) as e:
            return Response.fail(
                detail=f"Missing required field: {e}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to access the durable slot: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "store": store,
                },
            )

    # === lifecycle and persistence ===

    def open(self) -> None:
        """
        Reads the durable slot once and marks the store open.

        If the slot is absent or empty, the seed records are loaded and persisted immediately.
        Calling `open()` on an already open store does nothing.
        If loading fails, the store stays closed and its collection stays empty.

        Raises:
            - json.JSONDecodeError: If the slot does not hold valid JSON.
            - ValueError: If the slot does not hold a list, or a record is malformed or duplicated.
            - KeyError: If a record is missing a required key.
            - OSError: If the slot cannot be read, or the seed cannot be written.
        """
        if self._is_open:
            return

        text = self._slot.read()

        if text is None or not text.strip():
            records = {record.id: record for record in self._seed()}
            self._slot.write(self._encode(records))

            self._records = records
            self._is_open = True

            logger.info("Seeded empty slot with %d records", len(records))
            return

        data = json.loads(text)

        if not isinstance(data, list):
            raise ValueError("Expected the durable slot to contain a list.")

        self._records = self.import_records(data)
        self._is_open = True

        logger.info("Loaded %d records from %r", len(self._records), self._slot)

    @staticmethod
    def import_records(data: list[dict[str, Any]]) -> dict[str, StudentRecord]:
        """
        Deserializes a list of record dictionaries into a new id-keyed collection, failing fast on error.

        Raises:
            - ValueError: If a record is malformed, has an unknown status, or reuses an id.
            - KeyError: If a record is missing a required key.
        """
        records: dict[str, StudentRecord] = {}

        for record_dict in data:
            if not isinstance(record_dict, dict):
                raise ValueError(f"Expected a record object, found: {record_dict!r}")

            record = StudentRecord.from_dict(record_dict)

            if record.id in records:
                raise ValueError(f"Duplicate record id in durable slot: {record.id}")

            records[record.id] = record

        return records

    def save(self) -> None:
        """
        Serializes the full collection and writes it to the durable slot.

        Raises:
            - RuntimeError: If the store has not been opened.
            - OSError, TypeError: Propagated from the slot or the encoder.
        """
        self._require_open()

        self._slot.write(self._encode(self._records))

        logger.debug("Saved %d records", len(self._records))

    # === data accessors ===

    def list(self) -> list[StudentRecord]:
        return list(self._records.values())

    def get(self, id: str) -> StudentRecord | None:
        return self._records.get(id)

    def recent(self, limit: int = 5) -> list[StudentRecord]:
        return self.list()[:limit]

    def search(self, query: str) -> list[StudentRecord]:
        """
        Returns records whose full name, email, or course contains the query, ignoring case.

        Results keep insertion order. An empty query matches every record.
        """
        query = query.lower()

        return [
            record
            for record in self._records.values()
            if query in record.full_name.lower()
            or query in record.email.lower()
            or query in record.course.lower()
        ]

    def stats(self) -> dict[str, Any]:
        """
        Aggregates the collection for the dashboard.

        Returns:
            dict: With the following keys:
                - "total" (int): The number of records.
                - "active" (int): Records with status `active`.
                - "graduated" (int): Records with status `graduated`.
                - "average_gpa" (str): Sum of GPAs over `total`, to two decimal places.

        Notes:
            - A missing GPA counts as 0 in the sum, and the divisor is every record,
              not only those with a GPA. An empty store averages to "0.00".
        """
        records = self.list()
        total = len(records)

        active = sum(1 for r in records if r.status is StudentStatus.ACTIVE)
        graduated = sum(1 for r in records if r.status is StudentStatus.GRADUATED)

        gpa_sum = sum(r.gpa or 0.0 for r in records)
        average = gpa_sum / total if total else 0.0

        return {
            "total": total,
            "active": active,
            "graduated": graduated,
            "average_gpa": f"{average:.2f}",
        }

    # === data manipulators ===

    def create(self, fields: StudentFields) -> StudentRecord:
        """
        Assigns a fresh id to the given fields, appends the record, and persists the collection.

        Raises:
            - RuntimeError: If the store has not been opened.
            - ValueError: If `fields["status"]` is not a recognized status.
            - OSError: Propagated from the durable slot.
        """
        self._require_open()

        record = StudentRecord.from_fields(generate_time_id(self._records), fields)
        self._records[record.id] = record
        self.save()

        logger.debug("Created record %s", record.id)
        return record

    def update(self, id: str, fields: StudentFields) -> StudentRecord | None:
        """
        Replaces every field of the record with the given id, keeping its id and position.

        Returns:
            The updated record, or None if no record has that id (nothing is written).

        Raises:
            - RuntimeError: If the store has not been opened.
            - ValueError: If `fields["status"]` is not a recognized status.
            - OSError: Propagated from the durable slot.
        """
        self._require_open()

        if id not in self._records:
            return None

        # reassigning an existing key keeps its position in the dict
        record = StudentRecord.from_fields(id, fields)
        self._records[id] = record
        self.save()

        logger.debug("Updated record %s", id)
        return record

    def delete(self, id: str) -> bool:
        """
        Removes the record with the given id and persists the collection.

        Returns:
            True if a record was removed, False if no record has that id (nothing is written).

        Raises:
            - RuntimeError: If the store has not been opened.
            - OSError: Propagated from the durable slot.
        """
        self._require_open()

        if self._records.pop(id, None) is None:
            return False

        self.save()

        logger.debug("Deleted record %s", id)
        return True

    # === helper methods ===

    def _require_open(self) -> None:
        if not self._is_open:
            raise RuntimeError("RecordStore must be opened before it can be modified.")

    @staticmethod
    def _encode(records: dict[str, StudentRecord]) -> str:
        return json.dumps([r.to_dict() for r in records.values()], indent=2)

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        state = "open" if self._is_open else "closed"
        return f"RecordStore({self._slot!r}, {len(self._records)} records, {state})"
