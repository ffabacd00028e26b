"""DRF exception handler producing the MedTrack failure envelope.

Registered via ``REST_FRAMEWORK['EXCEPTION_HANDLER']``.
"""

from __future__ import annotations

import logging

from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler

from medtrack_backend.core.responses import failure_body

logger = logging.getLogger(__name__)


def _first_message(detail) -> str:
    """Pick a human readable message out of a DRF error ``detail`` tree."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return 'Invalid input.'
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else 'Invalid input.'
    return str(detail)


def envelope_exception_handler(exc, context):
    """Delegate to DRF, then reshape the body as ``{statusCode, message, error, errors?}``.

    Exceptions DRF does not know about (``None`` response) propagate unchanged
    so Django returns a 500 and the traceback is logged.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        detail = exc.detail
        if isinstance(detail, dict):
            errors = detail
        else:
            errors = {'non_field_errors': detail if isinstance(detail, list) else [detail]}
        message = _first_message(detail)
        view = context.get('view')
        logger.info(
            'Validation failed on %s: %s',
            view.__class__.__name__ if view is not None else 'unknown view',
            errors,
        )
    else:
        errors = None
        message = _first_message(getattr(exc, 'detail', str(exc)))

    response.data = failure_body(response.status_code, message, errors)
    return response
