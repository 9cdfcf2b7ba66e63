"""Sample records loaded into every new workspace."""

from __future__ import annotations

from datetime import date, time
from typing import List

from records import (
    ACTIVE,
    COMPLETED,
    SCHEDULED,
    AppointmentRecord,
    PrescriptionRecord,
)

HEALTH_SCORE = "85%"


def sample_appointments() -> List[AppointmentRecord]:
    return [
        AppointmentRecord(
            appointment_id=1,
            doctor_name="Dr. Sarah Johnson",
            appointment_date=date(2024, 1, 15),
            appointment_time=time(10, 30),
            reason="Annual Checkup",
            status=SCHEDULED,
        ),
        AppointmentRecord(
            appointment_id=2,
            doctor_name="Dr. Michael Chen",
            appointment_date=date(2024, 1, 20),
            appointment_time=time(14, 0),
            reason="Follow-up Consultation",
            status=SCHEDULED,
        ),
        AppointmentRecord(
            appointment_id=3,
            doctor_name="Dr. Emily Davis",
            appointment_date=date(2024, 1, 5),
            appointment_time=time(9, 15),
            reason="Blood Test Results",
            status=COMPLETED,
        ),
    ]


def sample_prescriptions() -> List[PrescriptionRecord]:
    return [
        PrescriptionRecord(
            prescription_id=1,
            medicine_name="Lisinopril",
            dosage="10mg",
            frequency="Once daily",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 12, 31),
            instructions="Take with water, preferably in the morning",
            status=ACTIVE,
        ),
        PrescriptionRecord(
            prescription_id=2,
            medicine_name="Metformin",
            dosage="500mg",
            frequency="Twice daily",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 6, 30),
            instructions="Take with meals to reduce stomach upset",
            status=ACTIVE,
        ),
        PrescriptionRecord(
            prescription_id=3,
            medicine_name="Ibuprofen",
            dosage="200mg",
            frequency="As needed",
            start_date=date(2023, 12, 15),
            end_date=date(2024, 1, 15),
            instructions="For pain relief, do not exceed 3 doses per day",
            status=COMPLETED,
        ),
    ]
