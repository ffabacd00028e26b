"""Response envelope shared by every MedTrack endpoint.

Successful responses:  ``{"statusCode": 200, "message": "...", "data": ...}``
Failed responses:      ``{"statusCode": 404, "message": "...", "error": "Not Found"}``
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from rest_framework import status
from rest_framework.response import Response


def success(status_code: int, message: str, data: Any = None) -> Response:
    """Wrap ``data`` in the success envelope.

    A 204 response never carries a body, so the envelope is dropped there.
    """
    if status_code == status.HTTP_204_NO_CONTENT:
        return Response(status=status_code)

    body = {
        'statusCode': status_code,
        'message': message,
        'data': data,
    }
    return Response(body, status=status_code)


def failure_body(status_code: int, message: str, errors: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {
        'statusCode': status_code,
        'message': message,
        'error': HTTPStatus(status_code).phrase,
    }
    if errors:
        body['errors'] = errors
    return body


def failure(status_code: int, message: str, errors: Any = None) -> Response:
    """Build an error response in the failure envelope."""
    return Response(failure_body(status_code, message, errors), status=status_code)
