import unittest
from unittest.mock import patch

from records import CANCELLED, DISCONTINUED, SCHEDULED
from ui.app import REGISTRY_EXTENSION, create_app, display_date
from ui.auth import WORKSPACE_KEY


class MediTrackAppTests(unittest.TestCase):
    def setUp(self) -> None:
        self.app = create_app({"TESTING": True, "SECRET_KEY": "test", "MEDITRACK_SEED_DATA": True})
        self.client = self.app.test_client()

    def _sign_in(self, first_name: str = "Alex") -> None:
        response = self.client.post(
            "/login", data={"email": "alex@example.com", "first_name": first_name}
        )
        self.assertEqual(response.status_code, 302)

    def _workspace(self):
        with self.client.session_transaction() as session:
            key = session[WORKSPACE_KEY]
        return self.app.extensions[REGISTRY_EXTENSION].get(key)

    def test_landing_page_is_public(self) -> None:
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        body = response.get_data(as_text=True)
        self.assertIn("Welcome to", body)
        self.assertIn("Smart Scheduling", body)
        self.assertIn("Get Started Today", body)

    def test_protected_pages_redirect_to_login(self) -> None:
        for path in ("/dashboard", "/appointments", "/prescriptions", "/api/appointments"):
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 302)
                self.assertIn("/login?next=", response.headers["Location"])

    def test_login_redirects_to_next(self) -> None:
        response = self.client.post(
            "/login?next=/prescriptions", data={"email": "alex@example.com"}
        )

        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.headers["Location"].endswith("/prescriptions"))

    def test_login_ignores_offsite_next(self) -> None:
        response = self.client.post(
            "/login?next=//evil.example.com", data={"email": "alex@example.com"}
        )

        self.assertTrue(response.headers["Location"].endswith("/dashboard"))

    def test_login_requires_email(self) -> None:
        response = self.client.post("/login", data={"email": ""})

        self.assertEqual(response.status_code, 400)

    def test_register_greets_user_on_dashboard(self) -> None:
        response = self.client.post(
            "/register",
            data={"first_name": "Sam", "last_name": "Lee", "email": "sam@example.com"},
            follow_redirects=True,
        )

        body = response.get_data(as_text=True)
        self.assertIn("Welcome back, Sam!", body)
        self.assertIn("Sam Lee", body)

    def test_dashboard_shows_seeded_summary(self) -> None:
        self._sign_in()

        body = self.client.get("/dashboard").get_data(as_text=True)

        self.assertIn("Welcome back, Alex!", body)
        self.assertIn("Dr. Sarah Johnson", body)
        self.assertIn("Lisinopril", body)
        self.assertIn("85%", body)
        self.assertNotIn("Ibuprofen", body)

    def test_book_appointment_flow(self) -> None:
        self._sign_in()
        before = len(self._workspace().appointments)

        response = self.client.post(
            "/appointments",
            data={
                "doctor_name": "Dr. A",
                "appointment_date": "2024-02-01",
                "appointment_time": "09:00",
                "reason": "Checkup",
            },
            follow_redirects=True,
        )

        body = response.get_data(as_text=True)
        records = self._workspace().appointments.all()
        self.assertEqual(len(records), before + 1)
        self.assertEqual(records[-1].doctor_name, "Dr. A")
        self.assertEqual(records[-1].status, SCHEDULED)
        self.assertIn("Appointment booked!", body)
        self.assertIn("Dr. A", body)
        self.assertIn('name="doctor_name" class="form-control" placeholder="Enter doctor\'s name" value=""', body)

    def test_invalid_booking_flashes_error(self) -> None:
        self._sign_in()

        response = self.client.post(
            "/appointments",
            data={"doctor_name": "Dr. A", "appointment_date": "not-a-date", "appointment_time": "09:00", "reason": "x"},
            follow_redirects=True,
        )

        self.assertEqual(len(self._workspace().appointments), 3)
        self.assertIn("Could not book appointment", response.get_data(as_text=True))

    def test_cancel_appointment_flow(self) -> None:
        self._sign_in()

        response = self.client.post("/appointments/1/cancel", follow_redirects=True)

        body = response.get_data(as_text=True)
        self.assertEqual(self._workspace().appointments.get(1).status, CANCELLED)
        self.assertEqual(self._workspace().appointments.get(2).status, SCHEDULED)
        self.assertIn("Appointment cancelled", body)
        self.assertIn("Past Appointments", body)

    def test_cancel_unknown_appointment_flashes_error(self) -> None:
        self._sign_in()

        response = self.client.post("/appointments/99/cancel", follow_redirects=True)

        self.assertEqual(response.status_code, 200)
        self.assertIn("Could not cancel appointment", response.get_data(as_text=True))

    def test_complete_appointment_flow(self) -> None:
        self._sign_in()

        self.client.post("/appointments/2/complete")

        self.assertEqual(self._workspace().appointments.get(2).status, "completed")

    def test_empty_state_messages(self) -> None:
        app = create_app({"TESTING": True, "SECRET_KEY": "test", "MEDITRACK_SEED_DATA": False})
        client = app.test_client()
        client.post("/login", data={"email": "alex@example.com"})

        appointments_body = client.get("/appointments").get_data(as_text=True)
        prescriptions_body = client.get("/prescriptions").get_data(as_text=True)

        self.assertIn("No upcoming appointments", appointments_body)
        self.assertIn("Book your first appointment to get started", appointments_body)
        self.assertNotIn("Past Appointments", appointments_body)
        self.assertIn("No active prescriptions", prescriptions_body)
        self.assertNotIn("Past Prescriptions", prescriptions_body)

    def test_add_and_discontinue_prescription_flow(self) -> None:
        self._sign_in()

        response = self.client.post(
            "/prescriptions",
            data={
                "medicine_name": "Amoxicillin",
                "dosage": "250mg",
                "frequency": "Three times daily",
                "start_date": "2024-03-01",
                "end_date": "2024-03-10",
                "instructions": "",
            },
            follow_redirects=True,
        )
        self.assertIn("Prescription added!", response.get_data(as_text=True))
        self.assertEqual(self._workspace().prescriptions.get(4).medicine_name, "Amoxicillin")

        response = self.client.post("/prescriptions/4/discontinue", follow_redirects=True)

        self.assertIn("Prescription discontinued", response.get_data(as_text=True))
        self.assertEqual(self._workspace().prescriptions.get(4).status, DISCONTINUED)
        self.assertEqual(self._workspace().prescriptions.get(1).status, "active")

    def test_api_lists_session_records(self) -> None:
        self._sign_in()
        self.client.post("/prescriptions/1/complete")

        appointments = self.client.get("/api/appointments").get_json()
        prescriptions = self.client.get("/api/prescriptions").get_json()

        self.assertEqual([item["appointment_id"] for item in appointments], [1, 2, 3])
        self.assertEqual(appointments[0]["appointment_date"], "2024-01-15")
        self.assertEqual(prescriptions[0]["status"], "completed")

    def test_health_summary_download(self) -> None:
        self._sign_in()

        response = self.client.get("/dashboard/health-summary.pdf")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, "application/pdf")
        self.assertTrue(response.data.startswith(b"%PDF"))

    def test_logout_discards_workspace(self) -> None:
        self._sign_in()
        self._workspace()
        registry = self.app.extensions[REGISTRY_EXTENSION]
        self.assertEqual(len(registry), 1)

        response = self.client.post("/logout")

        self.assertEqual(response.status_code, 302)
        self.assertEqual(len(registry), 0)
        self.assertEqual(self.client.get("/dashboard").status_code, 302)

    def test_abandoned_sessions_do_not_accumulate(self) -> None:
        app = create_app({"TESTING": True, "SECRET_KEY": "test", "MEDITRACK_MAX_WORKSPACES": 5})
        registry = app.extensions[REGISTRY_EXTENSION]

        for index in range(20):
            client = app.test_client()
            client.post("/login", data={"email": f"user{index}@example.com"})
            self.assertEqual(client.get("/dashboard").status_code, 200)

        self.assertEqual(len(registry), 5)

    def test_sessions_have_separate_workspaces(self) -> None:
        self._sign_in()
        self.client.post("/appointments/1/cancel")

        other = self.app.test_client()
        other.post("/login", data={"email": "other@example.com"})
        body = other.get("/api/appointments").get_json()

        self.assertEqual(body[0]["status"], SCHEDULED)

    def test_rejected_operations_are_logged(self) -> None:
        self._sign_in()

        with patch("ui.app.logger") as mock_logger:
            self.client.post("/appointments/3/cancel")

        mock_logger.warning.assert_called_once()

    def test_display_date(self) -> None:
        from datetime import date

        self.assertEqual(display_date(date(2024, 1, 5)), "Jan 5, 2024")
        self.assertEqual(display_date(None), "—")


if __name__ == "__main__":
    unittest.main()
