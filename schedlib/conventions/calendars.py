"""
QuantLib-backed calendar implementations.

A calendar answers whether a day is a business day, adjusts a date under a
roll convention, rolls a date by a number of business days, and applies
tenor offset codes. Time-of-day carried by a ``datetime`` is preserved.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from schedlib.business_calendar.adjustments import adjust_date
from schedlib.business_calendar.date_calculator import create_date_from_offset_code
from schedlib.conventions.types import CalendarType, DateRollConvention
from schedlib.utils.date import DateLike, to_date, with_date


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    dt = to_date(dt)
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Base calendar class for QuantLib-backed business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a holiday."""
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def adjust(
        self, dt: DateLike, roll_convention: Union[str, DateRollConvention]
    ) -> DateLike:
        """Move ``dt`` onto a business day according to ``roll_convention``."""
        return adjust_date(dt, roll_convention, self)

    def roll(self, dt: DateLike, business_days: int) -> DateLike:
        """Step ``business_days`` business days from ``dt`` (negative steps back).

        Zero leaves the date as it is, even on a holiday.
        """
        if business_days == 0:
            return dt
        ql_result = self._ql_calendar.advance(_to_ql_date(dt), business_days, ql.Days)
        return with_date(dt, _to_py_date(ql_result))

    def add_business_days(self, start_date: DateLike, days: int) -> DateLike:
        """Add business days to a date."""
        return self.roll(start_date, days)

    def date_from_offset_code(self, base_date: DateLike, offset_code: str) -> DateLike:
        """Apply a tenor code (1D, 2W, 3M, 1Y or a 30/360 year fraction)."""
        return create_date_from_offset_code(base_date, offset_code)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class AnyDayCalendar(Calendar):
    """Calendar in which every day is a business day."""

    def __init__(self):
        super().__init__("Any", ql.NullCalendar())


class WeekendCalendar(Calendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        super().__init__("Weekend", ql.WeekendsOnly())


class TargetCalendar(Calendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar.

    Uses QuantLib's built-in TARGET calendar implementation.
    """

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class ExcludingWeekendsCalendar(Calendar):
    """Business days of ``base_calendar`` that are not Saturday or Sunday.

    Without a base calendar every weekday is a business day.
    """

    def __init__(self, base_calendar: Calendar = None):
        self.base_calendar = base_calendar
        if base_calendar is None:
            super().__init__("ExcludingWeekends", ql.WeekendsOnly())
        else:
            joint = ql.JointCalendar(base_calendar._ql_calendar, ql.WeekendsOnly())
            super().__init__(f"{base_calendar.name}+Weekends", joint)


# Pre-defined calendar instances
ANY_DAY = AnyDayCalendar()
WEEKEND_ONLY = WeekendCalendar()
TARGET = TargetCalendar()

# Calendar registry
CALENDARS = {
    "ANY": ANY_DAY,
    "NULL": ANY_DAY,
    "WEEKEND": WEEKEND_ONLY,
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
}


def get_calendar(name: Union[str, CalendarType, Calendar]) -> Calendar:
    """
    Get a calendar by name.

    Args:
        name: Calendar name ("ANY", "NULL", "WEEKEND", "TARGET" or "EUR"),
            case-insensitive. A Calendar instance is returned unchanged.
    """
    if isinstance(name, Calendar):
        return name
    if isinstance(name, CalendarType):
        name = name.value
    key = name.strip().upper() if isinstance(name, str) else name
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
