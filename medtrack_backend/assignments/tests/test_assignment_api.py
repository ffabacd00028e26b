"""Tests for the /assignment/ endpoints.

Tests cover:
- Create (POST /assignment/create-assignment) incl. reference and shape errors
- List / detail (GET /assignment/assignment-list, /assignment/assignment-details?id=)
- Update (PUT /assignment/assignment-update?id=) - timing fields only
- Delete (DELETE /assignment/assignment-remove?id=)
- Reports (GET /assignment/remaining-days, POST /assignment/patient-remaining-days)
- Response envelope {statusCode, message, data}
"""

from __future__ import annotations

from datetime import date, timedelta

from django.test import TestCase
from django.utils import timezone

from rest_framework import status
from rest_framework.test import APIClient

from medtrack_backend.assignments.models import Assignment
from medtrack_backend.medications.models import Medication
from medtrack_backend.patients.models import Patient


class AssignmentAPITest(TestCase):
    """Tests for /assignment/ endpoints."""

    databases = {"default"}

    def setUp(self):
        self.today = timezone.localdate()

        self.patient = Patient.objects.create(name="Max Mustermann", date_of_birth=date(1990, 5, 15))
        self.other_patient = Patient.objects.create(name="Erika Musterfrau", date_of_birth=date(1985, 9, 1))
        self.medication = Medication.objects.create(name="Ibuprofen", dosage="400mg", frequency="twice daily")
        self.other_medication = Medication.objects.create(name="Metformin", dosage="850mg", frequency="daily")

        self.assignment = Assignment.objects.create(
            patient=self.patient,
            medication=self.medication,
            start_date=self.today - timedelta(days=2),
            number_of_days=5,
        )

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def _create_payload(self, **overrides):
        payload = {
            "patientId": self.patient.id,
            "medicationId": self.medication.id,
            "startDate": self.today.isoformat(),
            "numberOfDays": 7,
        }
        payload.update(overrides)
        return payload

    # ========== CREATE TESTS ==========

    def test_create_success_returns_201_with_relations(self):
        response = self.client.post(
            "/assignment/create-assignment",
            self._create_payload(medicationId=self.other_medication.id),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["statusCode"], 201)
        self.assertEqual(response.data["message"], "Assignment Created Successfully")
        data = response.data["data"]
        self.assertEqual(data["patient"]["name"], "Max Mustermann")
        self.assertEqual(data["medication"]["name"], "Metformin")
        self.assertEqual(data["startDate"], self.today.isoformat())
        self.assertEqual(data["numberOfDays"], 7)
        self.assertEqual(data["remainingDays"], 7)
        self.assertEqual(data["status"], "active")
        self.assertEqual(Assignment.objects.count(), 2)

    def test_create_missing_patient_returns_404(self):
        response = self.client.post(
            "/assignment/create-assignment",
            self._create_payload(patientId=999),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["statusCode"], 404)
        self.assertEqual(response.data["message"], "Patient with id 999 not found")
        self.assertEqual(response.data["entity"], "patient")
        self.assertEqual(Assignment.objects.count(), 1)

    def test_create_both_missing_names_patient(self):
        response = self.client.post(
            "/assignment/create-assignment",
            self._create_payload(patientId=999, medicationId=998),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["entity"], "patient")

    def test_create_missing_medication_returns_404(self):
        response = self.client.post(
            "/assignment/create-assignment",
            self._create_payload(medicationId=998),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Medication with id 998 not found")
        self.assertEqual(Assignment.objects.count(), 1)

    def test_create_shape_violations_return_400(self):
        cases = {
            "numberOfDays": [0, -6, "abc", 2.5, None],
            "startDate": ["2025-13-01", "yesterday", "", None],
            "patientId": ["x", 0, None],
            "medicationId": [-1, "y"],
        }
        for field, values in cases.items():
            for value in values:
                with self.subTest(field=field, value=value):
                    response = self.client.post(
                        "/assignment/create-assignment",
                        self._create_payload(**{field: value}),
                        format="json",
                    )
                    self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                    self.assertEqual(response.data["statusCode"], 400)
                    self.assertIn(field, response.data["errors"])

        self.assertEqual(Assignment.objects.count(), 1)

    def test_create_missing_fields_lists_each(self):
        response = self.client.post("/assignment/create-assignment", {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            set(response.data["errors"]),
            {"patientId", "medicationId", "startDate", "numberOfDays"},
        )
        self.assertEqual(response.data["errors"]["numberOfDays"], ["Number Of Days is required"])

    def test_create_min_days_message(self):
        response = self.client.post(
            "/assignment/create-assignment",
            self._create_payload(numberOfDays=0),
            format="json",
        )

        self.assertEqual(response.data["errors"]["numberOfDays"], ["Number Of Days must be at least 1"])
        self.assertEqual(response.data["message"], "Number Of Days must be at least 1")

    def test_create_days_beyond_column_range_returns_400(self):
        response = self.client.post(
            "/assignment/create-assignment",
            self._create_payload(numberOfDays=2**63),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"]["numberOfDays"],
            ["Number Of Days must not exceed 2147483647"],
        )
        self.assertEqual(Assignment.objects.count(), 1)

    # ========== LIST / DETAIL TESTS ==========

    def test_list_returns_all_with_relations(self):
        Assignment.objects.create(
            patient=self.other_patient,
            medication=self.other_medication,
            start_date=self.today,
            number_of_days=10,
        )

        response = self.client.get("/assignment/assignment-list")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Assignments list retrieved successfully")
        data = response.data["data"]
        self.assertEqual(len(data), 2)
        self.assertEqual(data[0]["id"], self.assignment.id)
        self.assertEqual(data[0]["patient"]["dateOfBirth"], "1990-05-15")
        self.assertEqual(data[0]["medication"]["dosage"], "400mg")
        self.assertEqual(data[1]["patient"]["name"], "Erika Musterfrau")

    def test_list_empty(self):
        Assignment.objects.all().delete()

        response = self.client.get("/assignment/assignment-list")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"], [])

    def test_detail_success(self):
        response = self.client.get(f"/assignment/assignment-details?id={self.assignment.id}")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["id"], self.assignment.id)
        self.assertEqual(data["remainingDays"], 3)
        self.assertEqual(data["status"], "active")

    def test_detail_unknown_returns_404(self):
        response = self.client.get("/assignment/assignment-details?id=9999")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Assignment with id 9999 not found")

    def test_detail_bad_id_returns_400(self):
        for query in ("", "?id=", "?id=abc", "?id=-3"):
            with self.subTest(query=query):
                response = self.client.get(f"/assignment/assignment-details{query}")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertIn("id", response.data["errors"])

    # ========== UPDATE TESTS ==========

    def test_update_timing(self):
        new_start = self.today - timedelta(days=1)
        response = self.client.put(
            f"/assignment/assignment-update?id={self.assignment.id}",
            {"startDate": new_start.isoformat(), "numberOfDays": 10},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Assignment Updated successfully")
        self.assertEqual(response.data["data"]["numberOfDays"], 10)
        self.assertEqual(response.data["data"]["remainingDays"], 9)

        self.assignment.refresh_from_db()
        self.assertEqual(self.assignment.start_date, new_start)
        self.assertEqual(self.assignment.number_of_days, 10)

    def test_update_ignores_reference_fields(self):
        response = self.client.put(
            f"/assignment/assignment-update?id={self.assignment.id}",
            {
                "startDate": self.today.isoformat(),
                "numberOfDays": 4,
                "patientId": self.other_patient.id,
                "medicationId": self.other_medication.id,
                "patient": {"id": self.other_patient.id},
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assignment.refresh_from_db()
        self.assertEqual(self.assignment.patient_id, self.patient.id)
        self.assertEqual(self.assignment.medication_id, self.medication.id)
        self.assertEqual(response.data["data"]["patient"]["id"], self.patient.id)
        self.assertEqual(response.data["data"]["medication"]["id"], self.medication.id)

    def test_update_unknown_returns_404(self):
        response = self.client.put(
            "/assignment/assignment-update?id=9999",
            {"startDate": self.today.isoformat(), "numberOfDays": 4},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Assignment.objects.count(), 1)
        self.assignment.refresh_from_db()
        self.assertEqual(self.assignment.number_of_days, 5)

    def test_update_shape_violation_returns_400(self):
        response = self.client.put(
            f"/assignment/assignment-update?id={self.assignment.id}",
            {"startDate": "2025-02-30", "numberOfDays": 0},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("startDate", response.data["errors"])
        self.assertIn("numberOfDays", response.data["errors"])
        self.assignment.refresh_from_db()
        self.assertEqual(self.assignment.number_of_days, 5)

    def test_update_days_beyond_column_range_returns_400(self):
        response = self.client.put(
            f"/assignment/assignment-update?id={self.assignment.id}",
            {"startDate": self.today.isoformat(), "numberOfDays": 2**63},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("numberOfDays", response.data["errors"])
        self.assignment.refresh_from_db()
        self.assertEqual(self.assignment.number_of_days, 5)

    # ========== DELETE TESTS ==========

    def test_delete_returns_204(self):
        response = self.client.delete(f"/assignment/assignment-remove?id={self.assignment.id}")

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Assignment.objects.filter(pk=self.assignment.id).exists())

    def test_delete_unknown_returns_404(self):
        response = self.client.delete("/assignment/assignment-remove?id=9999")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Assignment.objects.count(), 1)

    def test_delete_twice_second_is_404(self):
        url = f"/assignment/assignment-remove?id={self.assignment.id}"
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_404_NOT_FOUND)

    # ========== REPORT TESTS ==========

    def test_remaining_days_report(self):
        completed = Assignment.objects.create(
            patient=self.other_patient,
            medication=self.other_medication,
            start_date=self.today - timedelta(days=4),
            number_of_days=3,
        )

        response = self.client.get("/assignment/remaining-days")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Remaining treatment days retrieved successfully")
        self.assertEqual(
            response.data["data"],
            [
                {
                    "assignmentId": self.assignment.id,
                    "patientName": "Max Mustermann",
                    "medicationName": "Ibuprofen",
                    "remainingDays": 3,
                    "status": "active",
                },
                {
                    "assignmentId": completed.id,
                    "patientName": "Erika Musterfrau",
                    "medicationName": "Metformin",
                    "remainingDays": 0,
                    "status": "completed",
                },
            ],
        )

    def test_patient_remaining_days_filters_by_identity(self):
        Assignment.objects.create(
            patient=self.other_patient,
            medication=self.other_medication,
            start_date=self.today,
            number_of_days=7,
        )

        response = self.client.post(
            "/assignment/patient-remaining-days",
            {"name": "Max Mustermann", "dateOfBirth": "1990-05-15"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data["message"],
            "Remaining treatment days of Max Mustermann retrieved successfully",
        )
        self.assertEqual(len(response.data["data"]), 1)
        self.assertEqual(response.data["data"][0]["assignmentId"], self.assignment.id)
        self.assertEqual(response.data["data"][0]["remainingDays"], 3)

    def test_patient_remaining_days_wrong_birth_date_is_empty(self):
        response = self.client.post(
            "/assignment/patient-remaining-days",
            {"name": "Max Mustermann", "dateOfBirth": "1990-05-16"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"], [])

    def test_patient_remaining_days_requires_both_fields(self):
        response = self.client.post(
            "/assignment/patient-remaining-days",
            {"name": "Max Mustermann"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("dateOfBirth", response.data["errors"])

    # ========== ROUTING ==========

    def test_wrong_method_is_405(self):
        response = self.client.get("/assignment/create-assignment")

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data["statusCode"], 405)
