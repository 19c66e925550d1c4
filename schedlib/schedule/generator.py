"""
Main schedule generation logic.

A schedule is built from a handful of conventions: the period length
(frequency), the placement of a short stub period, a business day roll
convention with its calendar, and fixing/payment offsets. Periods are
stepped out on unadjusted dates and every boundary is then adjusted to a
business day; boundaries that adjust onto each other are dropped.
"""

import logging
from datetime import MAXYEAR, MINYEAR, timedelta
from typing import List, Optional, Tuple, Union

from schedlib.business_calendar.date_calculator import add_units, round_to_same_hour
from schedlib.conventions.calendars import Calendar, get_calendar
from schedlib.conventions.daycount import DayCountConvention, get_day_count_convention
from schedlib.conventions.types import (
    DateRollConvention,
    DaycountConvention,
    Frequency,
    ShortPeriodConvention,
)
from schedlib.utils.date import DateLike, align_date_types, to_schedule_date

from .core import Period, Schedule

logger = logging.getLogger(__name__)

PeriodLength = Tuple[int, int, int]


def _step_from(anchor: DateLike, steps: int, period_length: PeriodLength) -> Optional[DateLike]:
    """Unadjusted date ``steps`` periods from ``anchor`` (negative steps go back).

    Returns None when the result falls outside the representable date range,
    which happens for the TENOR frequency.
    """
    days, weeks, months = period_length
    target_year = anchor.year + (anchor.month - 1 + steps * months) // 12
    if not MINYEAR <= target_year <= MAXYEAR:
        return None
    return add_units(anchor, steps * days, steps * weeks, steps * months)


def _generate_forward(
    start_date: DateLike,
    maturity_date: DateLike,
    period_length: PeriodLength,
    date_roll_convention: DateRollConvention,
    calendar: Calendar,
    fixing_offset_days: int,
    payment_offset_days: int,
) -> List[Period]:
    """Step forward from the start date; a short period lands at the end."""
    periods: List[Period] = []

    period_start_unadjusted = start_date
    period_start = calendar.adjust(start_date, date_roll_convention)
    steps = 0
    while period_start_unadjusted < maturity_date:
        steps += 1
        period_end_unadjusted = _step_from(start_date, steps, period_length)
        is_last = period_end_unadjusted is None or period_end_unadjusted >= maturity_date
        if is_last:
            period_end_unadjusted = maturity_date
        period_end_unadjusted = round_to_same_hour(period_end_unadjusted, start_date)

        period_end = calendar.adjust(period_end_unadjusted, date_roll_convention)
        period_end = round_to_same_hour(period_end, start_date)

        # Only the unadjusted start decides termination.
        next_start_unadjusted = maturity_date if is_last else period_end_unadjusted

        if period_start == period_end:
            logger.debug(
                "Skipping empty period %s (unadjusted end %s)",
                period_start,
                period_end_unadjusted,
            )
            period_start_unadjusted = next_start_unadjusted
            continue

        # Forward generation offsets by calendar days and then adjusts. The
        # backward branch rolls by business days instead; the two give
        # different dates and must stay distinct.
        fixing_date = calendar.adjust(
            period_start + timedelta(days=fixing_offset_days), date_roll_convention
        )
        payment_date = calendar.adjust(
            period_end + timedelta(days=payment_offset_days), date_roll_convention
        )

        periods.append(Period(fixing_date, payment_date, period_start, period_end))

        period_start = period_end
        period_start_unadjusted = next_start_unadjusted

    return periods


def _generate_backward(
    start_date: DateLike,
    maturity_date: DateLike,
    period_length: PeriodLength,
    date_roll_convention: DateRollConvention,
    calendar: Calendar,
    fixing_offset_days: int,
    payment_offset_days: int,
) -> List[Period]:
    """Step backward from maturity; a short period lands at the beginning."""
    periods: List[Period] = []

    period_end_unadjusted = maturity_date
    period_end = calendar.adjust(maturity_date, date_roll_convention)
    steps = 0
    while period_end_unadjusted > start_date:
        steps -= 1
        period_start_unadjusted = _step_from(maturity_date, steps, period_length)
        is_first = period_start_unadjusted is None or period_start_unadjusted <= start_date
        if is_first:
            period_start_unadjusted = start_date
        period_start_unadjusted = round_to_same_hour(period_start_unadjusted, maturity_date)

        period_start = calendar.adjust(period_start_unadjusted, date_roll_convention)
        period_start = round_to_same_hour(period_start, maturity_date)

        next_end_unadjusted = start_date if is_first else period_start_unadjusted

        if period_start == period_end:
            logger.debug(
                "Skipping empty period %s (unadjusted start %s)",
                period_end,
                period_start_unadjusted,
            )
            period_end_unadjusted = next_end_unadjusted
            continue

        # Business day roll, not calendar-day offset plus adjustment: see
        # _generate_forward.
        fixing_date = calendar.roll(period_start, fixing_offset_days)
        payment_date = calendar.roll(period_end, payment_offset_days)

        periods.insert(0, Period(fixing_date, payment_date, period_start, period_end))

        period_end = period_start
        period_end_unadjusted = next_end_unadjusted

    return periods


def create_schedule_from_conventions(
    reference_date: DateLike,
    start_date: DateLike,
    maturity_date: DateLike,
    frequency: Union[str, Frequency],
    daycount_convention: Union[str, DaycountConvention, DayCountConvention],
    short_period_convention: Union[str, ShortPeriodConvention],
    date_roll_convention: Union[str, DateRollConvention],
    calendar: Union[str, Calendar],
    fixing_offset_days: int = 0,
    payment_offset_days: int = 0,
) -> Schedule:
    """
    Generate a schedule from its conventions.

    The reference date is the date mapped to t = 0 by the returned schedule.
    With ``ShortPeriodConvention.LAST`` periods are stepped forward from the
    start date and any remainder forms a short final period; with ``FIRST``
    they are stepped backward from maturity and the short period comes
    first. Periods whose adjusted start and end coincide are dropped.

    Args:
        reference_date: Date where t = 0
        start_date: Start of the first period (unadjusted)
        maturity_date: End of the last period (unadjusted)
        frequency: Period length
        daycount_convention: Day count used to map dates to times
        short_period_convention: Whether a short period goes first or last
        date_roll_convention: Business day adjustment applied to all dates
        calendar: Business day calendar used for adjustment
        fixing_offset_days: Offset from period start to fixing date
        payment_offset_days: Offset from period end to payment date

    Returns:
        Schedule bound to ``reference_date`` and the day count convention
    """
    frequency = Frequency.from_string(frequency)
    daycount = get_day_count_convention(daycount_convention)
    short_period_convention = ShortPeriodConvention.from_string(short_period_convention)
    date_roll_convention = DateRollConvention.from_string(date_roll_convention)
    calendar = get_calendar(calendar)

    reference_date = to_schedule_date(reference_date)
    start_date, maturity_date = align_date_types(
        to_schedule_date(start_date), to_schedule_date(maturity_date)
    )
    if not start_date < maturity_date:
        raise ValueError(
            f"Start date {start_date} must be before maturity date {maturity_date}"
        )

    if short_period_convention == ShortPeriodConvention.LAST:
        generate = _generate_forward
    else:
        generate = _generate_backward
    periods = generate(
        start_date,
        maturity_date,
        frequency.period_length(),
        date_roll_convention,
        calendar,
        fixing_offset_days,
        payment_offset_days,
    )

    if not periods:
        raise ValueError(
            f"No periods between {start_date} and {maturity_date}: all boundaries "
            f"adjust onto the same business day"
        )

    logger.debug(
        "Generated %s %s periods from %s to %s (stub %s, roll %s)",
        len(periods),
        frequency.name,
        start_date,
        maturity_date,
        short_period_convention.name,
        date_roll_convention.name,
    )
    return Schedule(reference_date, periods, daycount)
