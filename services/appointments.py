"""Appointment operations: booking, cancellation and completion."""

from __future__ import annotations

import logging
from datetime import date, time
from typing import Iterable, List, Tuple, Union

from records import (
    CANCELLED,
    COMPLETED,
    SCHEDULED,
    AppointmentRecord,
    AppointmentStore,
)
from services.fields import parse_date, parse_time, require_text

logger = logging.getLogger(__name__)


def book_appointment(
    doctor_name: str,
    appointment_date: Union[date, str],
    appointment_time: Union[time, str],
    reason: str,
    *,
    store: AppointmentStore,
) -> AppointmentRecord:
    """Append a new scheduled appointment to ``store``."""

    doctor_name = require_text(doctor_name, "doctor_name")
    parsed_date = parse_date(appointment_date, "appointment_date")
    parsed_time = parse_time(appointment_time, "appointment_time")
    reason = require_text(reason, "reason")

    record = store.add(
        doctor_name=doctor_name,
        appointment_date=parsed_date,
        appointment_time=parsed_time,
        reason=reason,
    )
    logger.info(
        "Booked appointment %s with %s on %s at %s",
        record.appointment_id,
        record.doctor_name,
        record.appointment_date.isoformat(),
        record.appointment_time.strftime("%H:%M"),
    )
    return record


def cancel_appointment(appointment_id: int, *, store: AppointmentStore) -> AppointmentRecord:
    """Cancel a scheduled appointment."""

    record = store.set_status(appointment_id, CANCELLED)
    logger.info("Cancelled appointment %s", appointment_id)
    return record


def complete_appointment(appointment_id: int, *, store: AppointmentStore) -> AppointmentRecord:
    """Mark a scheduled appointment as attended."""

    record = store.set_status(appointment_id, COMPLETED)
    logger.info("Completed appointment %s", appointment_id)
    return record


def split_appointments(
    records: Iterable[AppointmentRecord],
) -> Tuple[List[AppointmentRecord], List[AppointmentRecord]]:
    """Partition appointments into (upcoming, past), keeping list order.

    Upcoming holds the scheduled appointments; past holds everything else.
    """

    upcoming: List[AppointmentRecord] = []
    past: List[AppointmentRecord] = []
    for record in records:
        (upcoming if record.status == SCHEDULED else past).append(record)
    return upcoming, past


def upcoming_appointments(records: Iterable[AppointmentRecord]) -> List[AppointmentRecord]:
    upcoming, _ = split_appointments(records)
    return upcoming
