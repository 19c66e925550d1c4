# Re-export schedule components
# Re-export types from conventions
from schedlib.conventions.types import DateRollConvention, Frequency, ShortPeriodConvention

from .convenience import (
    create_schedule_from_offset_codes,
    create_schedule_from_spot_offset,
    create_schedule_from_strings,
    create_schedule_from_trade_date,
    create_schedule_from_year_fraction,
    create_schedules,
)
from .core import Period, Schedule
from .generator import create_schedule_from_conventions
