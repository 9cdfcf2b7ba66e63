"""Health summary PDF for the dashboard's "Health Records" action.

The summary is rendered with ReportLab into memory and returned as bytes so
the web layer can stream it without touching the filesystem. It lists the
appointment counts by status, the upcoming appointments and the active
prescriptions of a single workspace. Long lists are cut to keep the report on
one page.
"""

from __future__ import annotations

import io
import logging
from collections import Counter
from datetime import datetime
from typing import List, Optional, Sequence

from reportlab.lib.pagesizes import letter
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

from records import CANCELLED, COMPLETED, SCHEDULED, AppointmentRecord, PrescriptionRecord
from records.workspace import Workspace
from services.appointments import split_appointments
from services.prescriptions import split_prescriptions

LOGGER = logging.getLogger(__name__)

MAX_LISTED_ROWS = 8
LINE_HEIGHT = 0.25 * inch


def _draw_header(pdf: canvas.Canvas, title: str, patient_name: str, generated_at: datetime) -> float:
    pdf.setFont("Helvetica-Bold", 20)
    pdf.drawString(1 * inch, 10.5 * inch, title)
    pdf.setFont("Helvetica", 10)
    pdf.drawString(1 * inch, 10.1 * inch, f"Patient: {patient_name}")
    pdf.drawString(
        1 * inch,
        9.85 * inch,
        f"Generated on: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
    )
    return 9.3 * inch


def _draw_section(pdf: canvas.Canvas, heading: str, lines: Sequence[str], y: float) -> float:
    pdf.setFont("Helvetica-Bold", 12)
    pdf.drawString(1 * inch, y, heading)
    y -= LINE_HEIGHT + 0.05 * inch
    pdf.setFont("Helvetica", 11)
    for line in lines:
        pdf.drawString(1.2 * inch, y, line)
        y -= LINE_HEIGHT
    return y - 0.3 * inch


def _truncate(lines: List[str], empty_message: str) -> List[str]:
    if not lines:
        return [empty_message]
    if len(lines) > MAX_LISTED_ROWS:
        hidden = len(lines) - MAX_LISTED_ROWS
        return lines[:MAX_LISTED_ROWS] + [f"...and {hidden} more"]
    return lines


def _appointment_line(record: AppointmentRecord) -> str:
    return (
        f"{record.appointment_date.isoformat()} {record.appointment_time.strftime('%H:%M')}  "
        f"{record.doctor_name} - {record.reason}"
    )


def _prescription_line(record: PrescriptionRecord) -> str:
    return (
        f"{record.medicine_name} {record.dosage}, {record.frequency} "
        f"(until {record.end_date.isoformat()})"
    )


def build_health_summary(
    workspace: Workspace,
    patient_name: str,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render the workspace summary and return the PDF document bytes."""

    generated_at = generated_at or datetime.now()
    appointments = workspace.appointments.all()
    upcoming, _ = split_appointments(appointments)
    active, _ = split_prescriptions(workspace.prescriptions.all())
    counts = Counter(record.status for record in appointments)

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=letter)
    pdf.setTitle("MediTrack Health Summary")

    y = _draw_header(pdf, "Health Summary", patient_name, generated_at)
    y = _draw_section(
        pdf,
        "Appointments",
        [
            f"Scheduled: {counts.get(SCHEDULED, 0)}",
            f"Completed: {counts.get(COMPLETED, 0)}",
            f"Cancelled: {counts.get(CANCELLED, 0)}",
        ],
        y,
    )
    y = _draw_section(
        pdf,
        "Upcoming Appointments",
        _truncate([_appointment_line(record) for record in upcoming], "No upcoming appointments"),
        y,
    )
    _draw_section(
        pdf,
        "Active Prescriptions",
        _truncate([_prescription_line(record) for record in active], "No active prescriptions"),
        y,
    )

    pdf.showPage()
    pdf.save()
    LOGGER.info(
        "Health summary rendered for %s (%d upcoming, %d active)",
        patient_name,
        len(upcoming),
        len(active),
    )
    return buffer.getvalue()
