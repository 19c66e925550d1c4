"""
Convenience constructors for schedules.

Every function here resolves its dates and conventions and then delegates to
``create_schedule_from_conventions``.
"""

from typing import List, Optional, Sequence, Union

from schedlib.business_calendar.date_calculator import (
    create_date_from_offset_code,
    create_date_from_year_fraction,
)
from schedlib.business_calendar.date_utils import get_default_calendar, get_spot_date
from schedlib.conventions.calendars import ANY_DAY, Calendar, get_calendar
from schedlib.utils.date import DateLike, to_schedule_date

from .core import Schedule
from .generator import create_schedule_from_conventions


def _resolve_calendar(calendar: Union[str, Calendar, None]) -> Calendar:
    if calendar is None:
        return get_default_calendar()
    return get_calendar(calendar)


def create_schedule_from_strings(
    reference_date: DateLike,
    start_date: DateLike,
    maturity_date: DateLike,
    frequency: str,
    daycount_convention: str,
    short_period_convention: str,
    date_roll_convention: str,
    calendar: Union[str, Calendar, None] = None,
    fixing_offset_days: int = 0,
    payment_offset_days: int = 0,
) -> Schedule:
    """Generate a schedule with conventions given as case-insensitive strings.

    ``calendar`` defaults to the library default calendar (TARGET).
    """
    return create_schedule_from_conventions(
        reference_date,
        start_date,
        maturity_date,
        frequency,
        daycount_convention,
        short_period_convention,
        date_roll_convention,
        _resolve_calendar(calendar),
        fixing_offset_days,
        payment_offset_days,
    )


def create_schedule_from_trade_date(
    reference_date: DateLike,
    trade_date: DateLike,
    spot_offset_days: int,
    start_offset: str,
    maturity: str,
    frequency: str,
    daycount_convention: str,
    short_period_convention: str,
    date_roll_convention: str,
    calendar: Union[str, Calendar, None] = None,
    fixing_offset_days: int = 0,
    payment_offset_days: int = 0,
) -> Schedule:
    """
    Generate a schedule for a trade quoted by offset codes.

    Args:
        reference_date: Date where t = 0
        trade_date: Trade date; the spot date is ``spot_offset_days``
            business days later
        spot_offset_days: Business days from trade date to spot date
        start_offset: Start date as a code from the spot date (e.g. "0D", "1Y")
        maturity: Maturity as a code from the start date (e.g. "5Y", "6M")
        frequency: Period length, e.g. "quarterly"
        daycount_convention: Day count, e.g. "act/360"
        short_period_convention: "first" or "last"
        date_roll_convention: Business day adjustment, e.g. "modified_following"
        calendar: Business day calendar (defaults to TARGET)
        fixing_offset_days: Business days from period start to fixing date
        payment_offset_days: Business days from period end to payment date
    """
    calendar = _resolve_calendar(calendar)
    spot_date = get_spot_date(to_schedule_date(trade_date), calendar, spot_offset_days)
    start_date = create_date_from_offset_code(spot_date, start_offset)
    maturity_date = create_date_from_offset_code(start_date, maturity)

    return create_schedule_from_conventions(
        reference_date,
        start_date,
        maturity_date,
        frequency,
        daycount_convention,
        short_period_convention,
        date_roll_convention,
        calendar,
        fixing_offset_days,
        payment_offset_days,
    )


def create_schedule_from_spot_offset(
    reference_date: DateLike,
    spot_offset_days: int,
    start_offset: str,
    maturity: str,
    frequency: str,
    daycount_convention: str,
    short_period_convention: str,
    date_roll_convention: str,
    calendar: Union[str, Calendar, None] = None,
    fixing_offset_days: int = 0,
    payment_offset_days: int = 0,
) -> Schedule:
    """Same as ``create_schedule_from_trade_date`` with trade date = reference date."""
    return create_schedule_from_trade_date(
        reference_date,
        reference_date,
        spot_offset_days,
        start_offset,
        maturity,
        frequency,
        daycount_convention,
        short_period_convention,
        date_roll_convention,
        calendar,
        fixing_offset_days,
        payment_offset_days,
    )


def create_schedule_from_offset_codes(
    reference_date: DateLike,
    start_offset: str,
    maturity: str,
    frequency: str,
    daycount_convention: str,
    short_period_convention: str,
    date_roll_convention: str,
    calendar: Union[str, Calendar, None] = None,
    fixing_offset_days: int = 0,
    payment_offset_days: int = 0,
) -> Schedule:
    """Start date is ``start_offset`` from the reference date, without spot lag."""
    reference_date = to_schedule_date(reference_date)
    start_date = create_date_from_offset_code(reference_date, start_offset)
    maturity_date = create_date_from_offset_code(start_date, maturity)

    return create_schedule_from_conventions(
        reference_date,
        start_date,
        maturity_date,
        frequency,
        daycount_convention,
        short_period_convention,
        date_roll_convention,
        _resolve_calendar(calendar),
        fixing_offset_days,
        payment_offset_days,
    )


def create_schedule_from_year_fraction(
    reference_date: DateLike,
    start_date: DateLike,
    frequency: str,
    maturity: float,
    daycount_convention: str,
    short_period_convention: str,
    date_roll_convention: str = "UNADJUSTED",
    calendar: Union[str, Calendar, None] = None,
    fixing_offset_days: int = 0,
    payment_offset_days: int = 0,
) -> Schedule:
    """
    Generate a schedule whose maturity is a 30/360 year fraction from start.

    With the defaults (no date rolling, every day a business day, no offsets)
    this is the simple schedule used for spreadsheet-style maturities such as
    2.5 for two and a half years.
    """
    if calendar is None:
        calendar = ANY_DAY
    start_date = to_schedule_date(start_date)
    maturity_date = create_date_from_year_fraction(start_date, maturity)

    return create_schedule_from_conventions(
        reference_date,
        start_date,
        maturity_date,
        frequency,
        daycount_convention,
        short_period_convention,
        date_roll_convention,
        get_calendar(calendar),
        fixing_offset_days,
        payment_offset_days,
    )


def create_schedules(
    reference_date: DateLike,
    start_dates: Sequence[DateLike],
    maturity_dates: Sequence[DateLike],
    frequency: str,
    daycount_convention: str,
    short_period_convention: str,
    date_roll_convention: str,
    calendar: Union[str, Calendar, None] = None,
    fixing_offset_days: Optional[Sequence[int]] = None,
    payment_offset_days: Optional[Sequence[int]] = None,
) -> List[Schedule]:
    """Generate one schedule per (start, maturity) pair sharing the same conventions."""
    if len(start_dates) != len(maturity_dates):
        raise ValueError(
            f"Length of start dates ({len(start_dates)}) and maturity dates "
            f"({len(maturity_dates)}) is not equal"
        )
    if fixing_offset_days is None:
        fixing_offset_days = [0] * len(start_dates)
    if payment_offset_days is None:
        payment_offset_days = [0] * len(start_dates)
    if len(fixing_offset_days) != len(start_dates) or len(payment_offset_days) != len(start_dates):
        raise ValueError("Length of offset vectors does not match number of schedules")

    calendar = _resolve_calendar(calendar)
    return [
        create_schedule_from_conventions(
            reference_date,
            start,
            maturity,
            frequency,
            daycount_convention,
            short_period_convention,
            date_roll_convention,
            calendar,
            fixing,
            payment,
        )
        for start, maturity, fixing, payment in zip(
            start_dates, maturity_dates, fixing_offset_days, payment_offset_days
        )
    ]
