"""
Date adjustment functions for schedule generation.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Union

from schedlib.conventions.types import DateRollConvention
from schedlib.utils.date import DateLike

if TYPE_CHECKING:
    from schedlib.conventions.calendars import Calendar

_ONE_DAY = timedelta(days=1)


def _following(dt: DateLike, calendar: Calendar) -> DateLike:
    while not calendar.is_business_day(dt):
        dt += _ONE_DAY
    return dt


def _preceding(dt: DateLike, calendar: Calendar) -> DateLike:
    while not calendar.is_business_day(dt):
        dt -= _ONE_DAY
    return dt


def adjust_date(
    dt: DateLike,
    adjustment: Union[str, DateRollConvention],
    calendar: Calendar,
) -> DateLike:
    """Apply business day adjustment to a date.

    A ``datetime`` keeps its time-of-day; only the calendar day moves.
    """
    adjustment = DateRollConvention.from_string(adjustment)

    if adjustment == DateRollConvention.UNADJUSTED:
        return dt

    elif adjustment == DateRollConvention.FOLLOWING:
        return _following(dt, calendar)

    elif adjustment == DateRollConvention.MODIFIED_FOLLOWING:
        adjusted = _following(dt, calendar)
        # If month changed, use preceding instead
        if adjusted.month != dt.month:
            adjusted = _preceding(dt, calendar)
        return adjusted

    elif adjustment == DateRollConvention.PRECEDING:
        return _preceding(dt, calendar)

    elif adjustment == DateRollConvention.MODIFIED_PRECEDING:
        adjusted = _preceding(dt, calendar)
        # If month changed, use following instead
        if adjusted.month != dt.month:
            adjusted = _following(dt, calendar)
        return adjusted

    else:
        raise ValueError(f"Unknown business day adjustment: {adjustment}")

