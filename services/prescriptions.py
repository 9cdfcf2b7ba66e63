"""Prescription operations: adding, discontinuing and completing medications."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Tuple, Union

from records import (
    ACTIVE,
    COMPLETED,
    DISCONTINUED,
    PrescriptionRecord,
    PrescriptionStore,
    RecordValidationError,
)
from services.fields import optional_text, parse_date, require_text

logger = logging.getLogger(__name__)


def add_prescription(
    medicine_name: str,
    dosage: str,
    frequency: str,
    start_date: Union[date, str],
    end_date: Union[date, str],
    instructions: Optional[str] = "",
    *,
    store: PrescriptionStore,
) -> PrescriptionRecord:
    """Append a new active prescription to ``store``.

    ``instructions`` is optional; every other field is required. The end date
    may equal the start date but not precede it.
    """

    medicine_name = require_text(medicine_name, "medicine_name")
    dosage = require_text(dosage, "dosage")
    frequency = require_text(frequency, "frequency")
    parsed_start = parse_date(start_date, "start_date")
    parsed_end = parse_date(end_date, "end_date")
    if parsed_end < parsed_start:
        raise RecordValidationError("end_date must not be earlier than start_date")

    record = store.add(
        medicine_name=medicine_name,
        dosage=dosage,
        frequency=frequency,
        start_date=parsed_start,
        end_date=parsed_end,
        instructions=optional_text(instructions),
    )
    logger.info(
        "Added prescription %s for %s %s",
        record.prescription_id,
        record.medicine_name,
        record.dosage,
    )
    return record


def discontinue_prescription(
    prescription_id: int, *, store: PrescriptionStore
) -> PrescriptionRecord:
    record = store.set_status(prescription_id, DISCONTINUED)
    logger.info("Discontinued prescription %s", prescription_id)
    return record


def complete_prescription(
    prescription_id: int, *, store: PrescriptionStore
) -> PrescriptionRecord:
    record = store.set_status(prescription_id, COMPLETED)
    logger.info("Completed prescription %s", prescription_id)
    return record


def split_prescriptions(
    records: Iterable[PrescriptionRecord],
) -> Tuple[List[PrescriptionRecord], List[PrescriptionRecord]]:
    """Partition prescriptions into (active, inactive), keeping list order."""

    active: List[PrescriptionRecord] = []
    inactive: List[PrescriptionRecord] = []
    for record in records:
        (active if record.status == ACTIVE else inactive).append(record)
    return active, inactive


def active_prescriptions(records: Iterable[PrescriptionRecord]) -> List[PrescriptionRecord]:
    active, _ = split_prescriptions(records)
    return active
