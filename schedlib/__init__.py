"""Schedule generation for interest rate products.

This package turns a small set of market conventions into the accrual,
fixing and payment dates of a swap or cap/floor leg.

Key modules:
- schedule: Period/Schedule data model and the schedule generator
- conventions: Frequencies, day counts, roll conventions and calendars
- business_calendar: Tenor arithmetic, business day adjustment and spot dates
"""

from schedlib.schedule import (
    Period,
    Schedule,
    create_schedule_from_conventions,
    create_schedule_from_offset_codes,
    create_schedule_from_spot_offset,
    create_schedule_from_strings,
    create_schedule_from_trade_date,
    create_schedule_from_year_fraction,
    create_schedules,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Period",
    "Schedule",
    "create_schedule_from_conventions",
    "create_schedule_from_offset_codes",
    "create_schedule_from_spot_offset",
    "create_schedule_from_strings",
    "create_schedule_from_trade_date",
    "create_schedule_from_year_fraction",
    "create_schedules",
]
