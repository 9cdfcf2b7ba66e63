"""Dashboard summary built from a session workspace."""

from __future__ import annotations

from typing import Dict, Iterable, List, MutableMapping

from records import AppointmentRecord
from records.seed import HEALTH_SCORE
from records.workspace import Workspace
from services.appointments import upcoming_appointments
from services.prescriptions import active_prescriptions

DEFAULT_PREVIEW_LIMIT = 3


def count_care_team(records: Iterable[AppointmentRecord]) -> int:
    """Number of distinct doctors across every appointment, whatever its status."""

    seen = set()
    for record in records:
        name = record.doctor_name.strip().lower()
        if name:
            seen.add(name)
    return len(seen)


def build_stats(upcoming_count: int, active_count: int, care_team: int) -> List[Dict[str, object]]:
    return [
        {"title": "Upcoming Appointments", "value": upcoming_count, "icon": "calendar", "color": "primary"},
        {"title": "Active Prescriptions", "value": active_count, "icon": "capsule", "color": "success"},
        {"title": "Health Score", "value": HEALTH_SCORE, "icon": "heart", "color": "danger"},
        {"title": "Care Team", "value": care_team, "icon": "people", "color": "info"},
    ]


def build_dashboard_context(
    workspace: Workspace,
    display_name: str,
    *,
    limit: int = DEFAULT_PREVIEW_LIMIT,
) -> MutableMapping[str, object]:
    appointments = workspace.appointments.all()
    upcoming = upcoming_appointments(appointments)
    active = active_prescriptions(workspace.prescriptions.all())
    return {
        "display_name": display_name,
        "stats": build_stats(len(upcoming), len(active), count_care_team(appointments)),
        "upcoming_appointments": upcoming[:limit],
        "active_prescriptions": active[:limit],
        "quick_actions": [
            {
                "title": "Book Appointment",
                "description": "Schedule your next medical visit",
                "endpoint": "appointments",
                "icon": "calendar",
                "color": "primary",
            },
            {
                "title": "Add Prescription",
                "description": "Track new medication",
                "endpoint": "prescriptions",
                "icon": "capsule",
                "color": "success",
            },
            {
                "title": "Health Records",
                "description": "Download a summary of your medical history",
                "endpoint": "health_summary",
                "icon": "heart",
                "color": "danger",
            },
        ],
    }
