"""In-memory record stores for MediTrack."""

from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass, replace
from datetime import date, time
from typing import Any, Dict, FrozenSet, Generic, Iterable, List, Mapping, Type, TypeVar

__all__ = [
    "ACTIVE",
    "CANCELLED",
    "COMPLETED",
    "DISCONTINUED",
    "SCHEDULED",
    "AppointmentRecord",
    "AppointmentStore",
    "InvalidTransitionError",
    "PrescriptionRecord",
    "PrescriptionStore",
    "RecordError",
    "RecordNotFoundError",
    "RecordValidationError",
]

logger = logging.getLogger(__name__)

SCHEDULED = "scheduled"
COMPLETED = "completed"
CANCELLED = "cancelled"
ACTIVE = "active"
DISCONTINUED = "discontinued"


class RecordError(ValueError):
    """Base exception for record operations."""


class RecordNotFoundError(RecordError):
    """Raised when no record carries the requested identifier."""


class InvalidTransitionError(RecordError):
    """Raised when a status change is not allowed from the current status."""


class RecordValidationError(RecordError):
    """Raised when submitted field values cannot form a record."""


@dataclass(frozen=True)
class AppointmentRecord:
    """A booked medical appointment."""

    appointment_id: int
    doctor_name: str
    appointment_date: date
    appointment_time: time
    reason: str
    status: str = SCHEDULED

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["appointment_date"] = self.appointment_date.isoformat()
        payload["appointment_time"] = self.appointment_time.strftime("%H:%M")
        return payload


@dataclass(frozen=True)
class PrescriptionRecord:
    """A tracked medication and its schedule."""

    prescription_id: int
    medicine_name: str
    dosage: str
    frequency: str
    start_date: date
    end_date: date
    instructions: str = ""
    status: str = ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["start_date"] = self.start_date.isoformat()
        payload["end_date"] = self.end_date.isoformat()
        return payload


RecordT = TypeVar("RecordT", AppointmentRecord, PrescriptionRecord)


class _RecordStore(Generic[RecordT]):
    """Ordered list of records with sequential identifiers."""

    record_type: Type[RecordT]
    id_field: str
    initial_status: str
    transitions: Mapping[str, FrozenSet[str]]

    def __init__(self, records: Iterable[RecordT] = ()) -> None:
        self._records: List[RecordT] = []
        self._sequence: int = 1
        self._lock = threading.Lock()
        self.load(records)

    def __len__(self) -> int:
        return len(self._records)

    def load(self, records: Iterable[RecordT]) -> None:
        """Append pre-built records, keeping the sequence ahead of their ids."""

        with self._lock:
            for record in records:
                record_id = self._id_of(record)
                if any(self._id_of(existing) == record_id for existing in self._records):
                    raise RecordError(f"Duplicate {self.id_field} {record_id}")
                self._records.append(record)
                self._sequence = max(self._sequence, record_id + 1)

    def add(self, **fields: Any) -> RecordT:
        fields.setdefault("status", self.initial_status)
        with self._lock:
            record_id = self._sequence
            self._sequence += 1
            record = self.record_type(**{self.id_field: record_id}, **fields)
            self._records.append(record)
        return record

    def get(self, record_id: int) -> RecordT:
        with self._lock:
            return self._records[self._index_of(record_id)]

    def all(self) -> List[RecordT]:
        with self._lock:
            return list(self._records)

    def set_status(self, record_id: int, status: str) -> RecordT:
        """Move a record to ``status`` if the transition table allows it."""

        with self._lock:
            index = self._index_of(record_id)
            current = self._records[index]
            allowed = self.transitions.get(current.status, frozenset())
            if status not in allowed:
                raise InvalidTransitionError(
                    f"Cannot change {self.id_field} {record_id} from "
                    f"'{current.status}' to '{status}'"
                )
            updated = replace(current, status=status)
            self._records[index] = updated
        logger.debug("%s %s moved from %s to %s", self.id_field, record_id, current.status, status)
        return updated

    def _id_of(self, record: RecordT) -> int:
        return getattr(record, self.id_field)

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if self._id_of(record) == record_id:
                return index
        raise RecordNotFoundError(f"{self.id_field} {record_id} does not exist")


class AppointmentStore(_RecordStore[AppointmentRecord]):
    record_type = AppointmentRecord
    id_field = "appointment_id"
    initial_status = SCHEDULED
    transitions = {
        SCHEDULED: frozenset({CANCELLED, COMPLETED}),
        COMPLETED: frozenset(),
        CANCELLED: frozenset(),
    }


class PrescriptionStore(_RecordStore[PrescriptionRecord]):
    record_type = PrescriptionRecord
    id_field = "prescription_id"
    initial_status = ACTIVE
    transitions = {
        ACTIVE: frozenset({DISCONTINUED, COMPLETED}),
        COMPLETED: frozenset(),
        DISCONTINUED: frozenset(),
    }
