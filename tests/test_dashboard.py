import unittest
from datetime import datetime

from records.workspace import Workspace
from services import appointments, prescriptions
from services.dashboard import build_dashboard_context, count_care_team
from services.reports import MAX_LISTED_ROWS, _truncate, build_health_summary


class DashboardContextTests(unittest.TestCase):
    def setUp(self) -> None:
        self.workspace = Workspace.seeded()

    def _stats(self) -> dict:
        context = build_dashboard_context(self.workspace, "Alex")
        return {stat["title"]: stat["value"] for stat in context["stats"]}

    def test_seeded_stats(self) -> None:
        stats = self._stats()

        self.assertEqual(stats["Upcoming Appointments"], 2)
        self.assertEqual(stats["Active Prescriptions"], 2)
        self.assertEqual(stats["Health Score"], "85%")
        self.assertEqual(stats["Care Team"], 3)

    def test_stats_follow_workspace_changes(self) -> None:
        appointments.book_appointment(
            "Dr. A", "2024-02-01", "09:00", "Checkup", store=self.workspace.appointments
        )
        prescriptions.discontinue_prescription(1, store=self.workspace.prescriptions)

        stats = self._stats()

        self.assertEqual(stats["Upcoming Appointments"], 3)
        self.assertEqual(stats["Active Prescriptions"], 1)
        self.assertEqual(stats["Care Team"], 4)

    def test_previews_are_limited(self) -> None:
        for day in range(1, 5):
            appointments.book_appointment(
                "Dr. A", f"2024-02-0{day}", "09:00", "Checkup", store=self.workspace.appointments
            )

        context = build_dashboard_context(self.workspace, "Alex", limit=3)

        self.assertEqual(len(context["upcoming_appointments"]), 3)
        self.assertEqual(context["display_name"], "Alex")
        self.assertEqual(
            [action["endpoint"] for action in context["quick_actions"]],
            ["appointments", "prescriptions", "health_summary"],
        )

    def test_active_preview_excludes_inactive_prescriptions(self) -> None:
        context = build_dashboard_context(self.workspace, "Alex")

        names = [record.medicine_name for record in context["active_prescriptions"]]
        self.assertEqual(names, ["Lisinopril", "Metformin"])

    def test_care_team_ignores_case_and_blank_names(self) -> None:
        workspace = Workspace()
        appointments.book_appointment(
            "Dr. A", "2024-02-01", "09:00", "Checkup", store=workspace.appointments
        )
        appointments.book_appointment(
            "dr. a", "2024-02-02", "09:00", "Checkup", store=workspace.appointments
        )

        self.assertEqual(count_care_team(workspace.appointments.all()), 1)


class HealthSummaryTests(unittest.TestCase):
    def test_summary_is_a_pdf_document(self) -> None:
        payload = build_health_summary(
            Workspace.seeded(), "Alex Doe", generated_at=datetime(2024, 1, 10, 8, 30)
        )

        self.assertTrue(payload.startswith(b"%PDF"))
        self.assertIn(b"%%EOF", payload[-32:])

    def test_summary_of_empty_workspace(self) -> None:
        payload = build_health_summary(Workspace(), "Alex Doe")

        self.assertTrue(payload.startswith(b"%PDF"))

    def test_truncate_long_lists(self) -> None:
        lines = [str(index) for index in range(MAX_LISTED_ROWS + 3)]

        result = _truncate(lines, "empty")

        self.assertEqual(len(result), MAX_LISTED_ROWS + 1)
        self.assertEqual(result[-1], "...and 3 more")
        self.assertEqual(_truncate([], "empty"), ["empty"])


if __name__ == "__main__":
    unittest.main()
