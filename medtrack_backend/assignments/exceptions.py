"""
Assignment-specific exceptions.

These exceptions are raised by the assignment services and translated to
enveloped DRF responses in the views via ``to_dict()``.
"""

from __future__ import annotations

from typing import Any

from rest_framework import status

from medtrack_backend.core.responses import failure_body


class AssignmentError(Exception):
    """Base exception for all assignment-related errors."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return failure_body(self.status_code, self.message)


class InvalidAssignmentData(AssignmentError):
    """
    Raised when assignment input breaks a basic invariant
    (non-positive number of days, malformed start date, non-integer id).

    Checked before any store access.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        errors = {self.field: [self.message]} if self.field else None
        return failure_body(self.status_code, self.message, errors)


class ReferenceNotFound(AssignmentError):
    """
    Raised at creation time when the referenced patient or medication does not exist.

    Attributes:
        entity: 'patient' or 'medication'
        entity_id: The identifier that did not resolve
    """

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} with id {entity_id} not found")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result['entity'] = self.entity
        result['id'] = self.entity_id
        return result


class AssignmentNotFound(AssignmentError):
    """Raised when a read, update or delete addresses an unknown assignment id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, assignment_id: int):
        self.assignment_id = assignment_id
        super().__init__(f"Assignment with id {assignment_id} not found")
