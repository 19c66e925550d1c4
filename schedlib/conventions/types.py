"""
Basic types and enums used across the scheduling system.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple, Type, TypeVar, Union

_E = TypeVar("_E", bound=Enum)


def _resolve_by_name(enum_cls: Type[_E], value: Union[str, _E, None]) -> _E:
    """Strict, case-insensitive enum-name match ('/' is read as '_')."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unknown {enum_cls.__name__}: {value!r}")
    key = value.strip().replace("/", "_").upper()
    try:
        return enum_cls[key]
    except KeyError as exc:
        raise ValueError(
            f"Unknown {enum_cls.__name__}: {value!r}. "
            f"Available: {[member.name for member in enum_cls]}"
        ) from exc


class Frequency(Enum):
    """Period lengths supported by the schedule generator."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMIANNUAL = "SEMIANNUAL"
    ANNUAL = "ANNUAL"
    # A single period running from start to maturity.
    TENOR = "TENOR"

    def period_length(self) -> Tuple[int, int, int]:
        """Return the period length as a ``(days, weeks, months)`` triple."""
        return _PERIOD_LENGTHS[self]

    @classmethod
    def from_string(cls, value: Union[str, Frequency]) -> Frequency:
        return _resolve_by_name(cls, value)


# No instrument spans 100000 months, so TENOR always collapses to one period.
TENOR_MONTHS = 100000

_PERIOD_LENGTHS = {
    Frequency.DAILY: (1, 0, 0),
    Frequency.WEEKLY: (0, 1, 0),
    Frequency.MONTHLY: (0, 0, 1),
    Frequency.QUARTERLY: (0, 0, 3),
    Frequency.SEMIANNUAL: (0, 0, 6),
    Frequency.ANNUAL: (0, 0, 12),
    Frequency.TENOR: (0, 0, TENOR_MONTHS),
}


class DaycountConvention(Enum):
    """Day count conventions understood by the schedule generator."""

    E30_360_ISDA = "30E/360 ISDA"
    E30_360 = "30E/360"
    U30_360 = "30U/360"
    ACT_360 = "ACT/360"
    ACT_365 = "ACT/365"
    ACT_ACT_ISDA = "ACT/ACT ISDA"
    ACT_ACT = "ACT/ACT"

    @classmethod
    def from_string(
        cls, value: Union[str, DaycountConvention, None]
    ) -> DaycountConvention:
        """Resolve market notation ("act/360", "30E/360 ISDA") or an enum name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Day count convention must be a string: {value!r}")
        key = value.strip().lower()
        for pattern, convention in _DAYCOUNT_PATTERNS:
            if key == pattern:
                return convention
        return _resolve_by_name(cls, value)


# Checked in order before falling back to enum names.
_DAYCOUNT_PATTERNS = (
    ("30e/360 isda", DaycountConvention.E30_360_ISDA),
    ("e30/360 isda", DaycountConvention.E30_360_ISDA),
    ("30e/360", DaycountConvention.E30_360),
    ("e30/360", DaycountConvention.E30_360),
    ("30u/360", DaycountConvention.U30_360),
    ("u30/360", DaycountConvention.U30_360),
    ("act/360", DaycountConvention.ACT_360),
    ("act/365", DaycountConvention.ACT_365),
    ("act/act isda", DaycountConvention.ACT_ACT_ISDA),
    ("act/act", DaycountConvention.ACT_ACT),
)


class ShortPeriodConvention(Enum):
    """Placement of the stub period when the interval does not divide evenly."""

    FIRST = "FIRST"
    LAST = "LAST"

    @classmethod
    def from_string(
        cls, value: Union[str, ShortPeriodConvention]
    ) -> ShortPeriodConvention:
        return _resolve_by_name(cls, value)


class DateRollConvention(Enum):
    """Business day adjustment rules."""

    UNADJUSTED = "UNADJUSTED"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"

    @classmethod
    def from_string(
        cls, value: Union[str, DateRollConvention, None]
    ) -> DateRollConvention:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            alias = _ROLL_ALIASES.get(value.strip().lower())
            if alias is not None:
                return alias
        return _resolve_by_name(cls, value)


_ROLL_ALIASES = {
    "unadjusted": DateRollConvention.UNADJUSTED,
    "actual": DateRollConvention.UNADJUSTED,
    "u": DateRollConvention.UNADJUSTED,
    "following": DateRollConvention.FOLLOWING,
    "f": DateRollConvention.FOLLOWING,
    "modfollow": DateRollConvention.MODIFIED_FOLLOWING,
    "modfollowing": DateRollConvention.MODIFIED_FOLLOWING,
    "mod_following": DateRollConvention.MODIFIED_FOLLOWING,
    "modified_following": DateRollConvention.MODIFIED_FOLLOWING,
    "mf": DateRollConvention.MODIFIED_FOLLOWING,
    "preceding": DateRollConvention.PRECEDING,
    "p": DateRollConvention.PRECEDING,
    "modpreceding": DateRollConvention.MODIFIED_PRECEDING,
    "mod_preceding": DateRollConvention.MODIFIED_PRECEDING,
    "modified_preceding": DateRollConvention.MODIFIED_PRECEDING,
    "mp": DateRollConvention.MODIFIED_PRECEDING,
}


class CalendarType(Enum):
    """Predefined calendars."""

    ANY = "ANY"
    WEEKEND = "WEEKEND"
    TARGET = "TARGET"
