"""
Remaining-days calculator and treatment status.

``remaining_days`` is the single formula the backend uses for treatment
progress; ``treatment_status`` is the single classifier built on it. Both are
pure: callers supply "today" so that one report is computed against one date.
"""

from __future__ import annotations

from datetime import date, datetime

from django.db import models
from django.utils import timezone


class TreatmentStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    COMPLETED = 'completed', 'Completed'


def to_calendar_date(value: date | datetime | str) -> date:
    """Reduce a date-like value to a calendar date (time of day stripped).

    Aware datetimes are converted to the current time zone first so that a
    late-evening UTC timestamp does not land on the wrong local day.
    """
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise TypeError(f"Expected a date, datetime or ISO date string, got {type(value).__name__}")


def remaining_days(today, start_date, number_of_days: int) -> int:
    """Days of treatment left, never negative.

    elapsed = whole days from ``start_date`` to ``today``
    remaining = max(number_of_days - elapsed, 0)

    On the start date itself the full ``number_of_days`` remain. A start date
    in the future counts the waiting days as remaining too.
    """
    elapsed = (to_calendar_date(today) - to_calendar_date(start_date)).days
    return max(number_of_days - elapsed, 0)


def treatment_status(remaining: int) -> TreatmentStatus:
    if remaining > 0:
        return TreatmentStatus.ACTIVE
    return TreatmentStatus.COMPLETED
