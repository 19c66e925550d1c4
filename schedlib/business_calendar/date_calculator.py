"""
Calendar arithmetic on unadjusted dates: unit stepping, offset codes and
time-of-day realignment.
"""

import math
import re
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from schedlib.utils.date import DateLike

_OFFSET_CODE = re.compile(r"^(\d+)([DWMY])$")
_YEAR_FRACTION = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")

_HOURS_PER_DAY = 24
# Largest hour-of-day value (23) halved, as in a calendar's hour field range.
_HALF_HOUR_RANGE = (_HOURS_PER_DAY - 1) // 2


def add_units(dt: DateLike, days: int = 0, weeks: int = 0, months: int = 0) -> DateLike:
    """Return ``dt`` moved by days, then weeks, then months.

    Month steps clip to the last day of the target month (Jan 31 + 1M is the
    end of February).
    """
    result = dt + relativedelta(days=days)
    result = result + relativedelta(weeks=weeks)
    return result + relativedelta(months=months)


def round_to_same_hour(dt: DateLike, reference: DateLike) -> DateLike:
    """Restore the hour-of-day of ``reference`` on ``dt``.

    Arithmetic across a daylight saving transition can leave a date one hour
    off. A drift within half the hour range is cancelled directly; a larger
    one wrapped around midnight and is corrected the short way round. Plain
    dates carry no time-of-day and are returned unchanged.
    """
    if not isinstance(dt, datetime) or not isinstance(reference, datetime):
        return dt
    difference = dt.hour - reference.hour
    if difference == 0:
        return dt
    if abs(difference) <= _HALF_HOUR_RANGE:
        correction = -difference
    else:
        correction = int(math.copysign(_HOURS_PER_DAY, difference)) - difference
    return dt + timedelta(hours=correction)


def create_date_from_year_fraction(base_date: DateLike, offset_year_frac: float) -> DateLike:
    """Add a 30/360 style year fraction to ``base_date``.

    Whole units advance by years, the remaining fraction times 12 by whole
    months, and the fraction left after that times 30 by days rounded half up.
    """
    years = int(offset_year_frac)
    result = base_date + relativedelta(years=years)

    remainder = (offset_year_frac - years) * 12
    months = int(remainder)
    result = result + relativedelta(months=months)

    remainder = (remainder - months) * 30
    result = result + relativedelta(days=math.floor(remainder + 0.5))

    return round_to_same_hour(result, base_date)


def create_date_from_offset_code(base_date: DateLike, offset_code: str) -> DateLike:
    """Create a date from ``base_date`` and a code like 1D, 2W, 3M, 1Y or 0.5.

    Only single-unit codes are supported; a plain decimal is read as a
    30/360 year fraction.
    """
    if not isinstance(offset_code, str):
        raise ValueError(f"Offset code must be a string: {offset_code!r}")
    code = offset_code.strip().upper()

    if _YEAR_FRACTION.match(code):
        return create_date_from_year_fraction(base_date, float(code))

    match = _OFFSET_CODE.match(code)
    if match is None:
        raise ValueError(f"Unsupported offset code: {offset_code!r}")

    amount = int(match.group(1))
    unit = match.group(2)
    if unit == "D":
        return base_date + relativedelta(days=amount)
    if unit == "W":
        return base_date + relativedelta(weeks=amount)
    if unit == "M":
        return base_date + relativedelta(months=amount)
    return base_date + relativedelta(years=amount)

