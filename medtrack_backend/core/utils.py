"""Request parsing helpers shared by the record endpoints."""

from __future__ import annotations

from rest_framework.exceptions import ValidationError


def parse_id_param(request, name: str = 'id') -> int:
    """Read a positive integer identifier from the query string.

    The record endpoints address records as ``?id=<int>``; anything else is a
    400 before the store is touched.
    """
    raw = (request.query_params.get(name) or '').strip()
    if not raw:
        raise ValidationError({name: ['This query parameter is required.']})
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError({name: ['A valid integer is required.']})
    if value <= 0:
        raise ValidationError({name: ['Ensure this value is greater than or equal to 1.']})
    return value
