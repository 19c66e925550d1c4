"""
QuantLib-backed day count convention implementations.

Each convention exposes ``year_fraction(start, end)``, the contract a
``Schedule`` uses to map dates onto its time axis.
"""

from typing import Union

import QuantLib as ql

from schedlib.conventions.types import DaycountConvention
from schedlib.utils.date import DateLike, to_date


def _to_ql_date(dt: DateLike) -> ql.Date:
    day = to_date(dt)
    return ql.Date(day.day, day.month, day.year)


class DayCountConvention:
    """Maps a pair of dates to an accrual fraction through a QuantLib day counter.

    Time-of-day is ignored; a ``datetime`` counts as its calendar day. The
    fraction is negative when ``end`` precedes ``start``.
    """

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(self, start: DateLike, end: DateLike) -> float:
        return self._ql_daycount.yearFraction(_to_ql_date(start), _to_ql_date(end))

    def day_count(self, start: DateLike, end: DateLike) -> int:
        """Days between ``start`` and ``end`` as counted by the convention."""
        return self._ql_daycount.dayCount(_to_ql_date(start), _to_ql_date(end))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Thirty360EuropeanISDA(DayCountConvention):
    """30E/360 ISDA (German) day count convention.

    Month-end days, including the last day of February, count as the 30th.
    """

    def __init__(self):
        super().__init__("30E/360 ISDA", ql.Thirty360(ql.Thirty360.ISDA))


class Thirty360European(DayCountConvention):
    """30E/360 (30/360 European, Eurobond basis) day count convention."""

    def __init__(self):
        super().__init__("30E/360", ql.Thirty360(ql.Thirty360.European))


class Thirty360US(DayCountConvention):
    """30U/360 (30/360 US - Bond Basis) day count convention."""

    def __init__(self):
        super().__init__("30U/360", ql.Thirty360(ql.Thirty360.BondBasis))


class Actual360(DayCountConvention):
    """ACT/360 day count convention.

    Used for:
    - IBOR floating legs
    - Money market instruments
    """

    def __init__(self):
        super().__init__("ACT/360", ql.Actual360())


class Actual365(DayCountConvention):
    """ACT/365 (fixed denominator) day count convention."""

    def __init__(self):
        super().__init__("ACT/365", ql.Actual365Fixed())


class ActualActualISDA(DayCountConvention):
    """ACT/ACT ISDA day count convention.

    Days falling in leap years count over 366, the rest over 365.
    """

    def __init__(self):
        super().__init__("ACT/ACT ISDA", ql.ActualActual(ql.ActualActual.ISDA))


# Pre-defined day count convention instances
THIRTY_360E_ISDA = Thirty360EuropeanISDA()
THIRTY_360E = Thirty360European()
THIRTY_360U = Thirty360US()
ACT_360 = Actual360()
ACT_365 = Actual365()
ACT_ACT_ISDA = ActualActualISDA()

# Registry
DAY_COUNT_CONVENTIONS = {
    DaycountConvention.E30_360_ISDA: THIRTY_360E_ISDA,
    DaycountConvention.E30_360: THIRTY_360E,
    DaycountConvention.U30_360: THIRTY_360U,
    DaycountConvention.ACT_360: ACT_360,
    DaycountConvention.ACT_365: ACT_365,
    DaycountConvention.ACT_ACT_ISDA: ACT_ACT_ISDA,
    DaycountConvention.ACT_ACT: ACT_ACT_ISDA,
}


def get_day_count_convention(
    convention: Union[str, DaycountConvention, DayCountConvention],
) -> DayCountConvention:
    """Get a day count convention by enum, market notation or enum name."""
    if isinstance(convention, DayCountConvention):
        return convention
    return DAY_COUNT_CONVENTIONS[DaycountConvention.from_string(convention)]
