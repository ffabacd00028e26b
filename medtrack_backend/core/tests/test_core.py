"""Tests for shared API plumbing: health check, envelope, id parsing."""

from __future__ import annotations

from unittest.mock import patch

from django.db.utils import OperationalError
from django.test import SimpleTestCase, TestCase

from rest_framework.exceptions import ValidationError
from rest_framework.test import APIClient, APIRequestFactory
from rest_framework.request import Request

from medtrack_backend.core.responses import failure, success
from medtrack_backend.core.utils import parse_id_param


class HealthTest(TestCase):

    databases = {"default"}

    def setUp(self):
        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def test_health_ok(self):
        response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    @patch("medtrack_backend.core.views.connection")
    def test_health_reports_database_error(self, mock_connection):
        mock_connection.cursor.side_effect = OperationalError("database is locked")

        response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "error")

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)


class EnvelopeTest(SimpleTestCase):

    def test_success_wraps_data(self):
        response = success(200, "ok", [1, 2])
        self.assertEqual(response.data, {"statusCode": 200, "message": "ok", "data": [1, 2]})

    def test_no_content_has_no_body(self):
        response = success(204, "deleted")
        self.assertEqual(response.status_code, 204)
        self.assertIsNone(response.data)

    def test_failure_includes_reason_phrase(self):
        response = failure(409, "in use")
        self.assertEqual(
            response.data,
            {"statusCode": 409, "message": "in use", "error": "Conflict"},
        )


class ParseIdParamTest(SimpleTestCase):

    def _request(self, query: str) -> Request:
        return Request(APIRequestFactory().get(f"/x{query}"))

    def test_valid(self):
        self.assertEqual(parse_id_param(self._request("?id=42")), 42)

    def test_invalid(self):
        for query in ("", "?id=", "?id=1.5", "?id=abc", "?id=0", "?id=-1"):
            with self.subTest(query=query):
                with self.assertRaises(ValidationError):
                    parse_id_param(self._request(query))
