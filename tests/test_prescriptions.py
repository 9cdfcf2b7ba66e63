import unittest
from datetime import date

from records import (
    ACTIVE,
    COMPLETED,
    DISCONTINUED,
    InvalidTransitionError,
    PrescriptionStore,
    RecordNotFoundError,
    RecordValidationError,
)
from records.seed import sample_prescriptions
from services import prescriptions


class PrescriptionServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = PrescriptionStore(sample_prescriptions())

    def test_add_prescription_appends_active_record(self) -> None:
        record = prescriptions.add_prescription(
            "Amoxicillin",
            "250mg",
            "Three times daily",
            "2024-03-01",
            "2024-03-10",
            "Finish the full course",
            store=self.store,
        )

        self.assertEqual(len(self.store), 4)
        self.assertEqual(self.store.all()[-1], record)
        self.assertEqual(record.prescription_id, 4)
        self.assertEqual(record.start_date, date(2024, 3, 1))
        self.assertEqual(record.end_date, date(2024, 3, 10))
        self.assertEqual(record.instructions, "Finish the full course")
        self.assertEqual(record.status, ACTIVE)

    def test_instructions_are_optional(self) -> None:
        record = prescriptions.add_prescription(
            "Vitamin D", "1000IU", "Once daily", "2024-03-01", "2024-03-01", store=self.store
        )
        self.assertEqual(record.instructions, "")

        record = prescriptions.add_prescription(
            "Vitamin D", "1000IU", "Once daily", "2024-03-01", "2024-03-01", None, store=self.store
        )
        self.assertEqual(record.instructions, "")

    def test_add_prescription_rejects_end_before_start(self) -> None:
        with self.assertRaises(RecordValidationError):
            prescriptions.add_prescription(
                "Vitamin D", "1000IU", "Once daily", "2024-03-02", "2024-03-01", store=self.store
            )
        self.assertEqual(len(self.store), 3)

    def test_add_prescription_requires_dosage(self) -> None:
        with self.assertRaises(RecordValidationError):
            prescriptions.add_prescription(
                "Vitamin D", " ", "Once daily", "2024-03-01", "2024-03-02", store=self.store
            )

    def test_discontinue_only_changes_target_status(self) -> None:
        before = self.store.all()

        record = prescriptions.discontinue_prescription(1, store=self.store)

        after = self.store.all()
        self.assertEqual(record.status, DISCONTINUED)
        self.assertEqual(after[0].status, DISCONTINUED)
        self.assertEqual(after[1:], before[1:])
        self.assertEqual(after[0].medicine_name, before[0].medicine_name)
        self.assertEqual(after[0].instructions, before[0].instructions)

    def test_complete_prescription(self) -> None:
        prescriptions.complete_prescription(2, store=self.store)
        self.assertEqual(self.store.get(2).status, COMPLETED)

    def test_discontinue_twice_raises_error(self) -> None:
        prescriptions.discontinue_prescription(1, store=self.store)
        with self.assertRaises(InvalidTransitionError):
            prescriptions.discontinue_prescription(1, store=self.store)

    def test_discontinue_nonexistent_prescription_raises_error(self) -> None:
        with self.assertRaises(RecordNotFoundError):
            prescriptions.discontinue_prescription(42, store=self.store)

    def test_split_prescriptions_is_a_partition(self) -> None:
        prescriptions.discontinue_prescription(2, store=self.store)

        records = self.store.all()
        active, inactive = prescriptions.split_prescriptions(records)

        self.assertEqual([r.prescription_id for r in active], [1])
        self.assertEqual([r.prescription_id for r in inactive], [2, 3])
        self.assertEqual(len(active) + len(inactive), len(records))

    def test_active_prescriptions_keeps_only_active(self) -> None:
        prescriptions.complete_prescription(1, store=self.store)

        active = prescriptions.active_prescriptions(self.store.all())

        self.assertEqual([r.prescription_id for r in active], [2])


if __name__ == "__main__":
    unittest.main()
