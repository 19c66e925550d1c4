"""
Date calculation utilities with market defaults.
Provides standalone functions for business day adjustments, spot lag calculations, and tenor arithmetic.
"""

from typing import Optional, Union

from schedlib.conventions.calendars import Calendar, get_calendar
from schedlib.conventions.types import DateRollConvention
from schedlib.utils.date import DateLike

from .date_calculator import create_date_from_offset_code

# Default market settings
_DEFAULT_CALENDAR = None  # Will be initialized on first use
_DEFAULT_SPOT_LAG = 2
_DEFAULT_ROLL_CONVENTION = DateRollConvention.MODIFIED_FOLLOWING


def get_default_calendar() -> Calendar:
    """Get default calendar, initializing if needed."""
    global _DEFAULT_CALENDAR
    if _DEFAULT_CALENDAR is None:
        _DEFAULT_CALENDAR = get_calendar("TARGET")
    return _DEFAULT_CALENDAR


def set_default_calendar(calendar: Union[str, Calendar]) -> None:
    """Set the default calendar for date calculations."""
    global _DEFAULT_CALENDAR
    _DEFAULT_CALENDAR = get_calendar(calendar)


def get_default_spot_lag() -> int:
    return _DEFAULT_SPOT_LAG


def get_default_roll_convention() -> DateRollConvention:
    return _DEFAULT_ROLL_CONVENTION


def get_spot_date(
    trade_date: DateLike, calendar: Calendar = None, spot_lag: Optional[int] = None
) -> DateLike:
    """Get spot date from trade date by rolling ``spot_lag`` business days."""
    if calendar is None:
        calendar = get_default_calendar()
    if spot_lag is None:
        spot_lag = get_default_spot_lag()
    return calendar.roll(trade_date, spot_lag)


def adjust_business_date(
    dt: DateLike,
    adjustment: Union[str, DateRollConvention, None] = None,
    calendar: Calendar = None,
) -> DateLike:
    """Apply business day adjustment using market defaults."""
    if calendar is None:
        calendar = get_default_calendar()
    if adjustment is None:
        adjustment = get_default_roll_convention()
    return calendar.adjust(dt, adjustment)


def compute_maturity(
    trade_date: DateLike,
    tenor: str,
    calendar: Calendar = None,
    spot_lag: Optional[int] = None,
    adjustment: Union[str, DateRollConvention, None] = None,
) -> DateLike:
    """Compute the adjusted maturity of a spot-starting tenor."""
    spot = get_spot_date(trade_date, calendar, spot_lag)
    unadjusted = create_date_from_offset_code(spot, tenor)
    return adjust_business_date(unadjusted, adjustment, calendar)
