"""
Core data structures for schedule generation.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import numpy as np
import pandas as pd

from schedlib.conventions.daycount import DayCountConvention
from schedlib.utils.date import DateLike, to_date


@dataclass(frozen=True)
class Period:
    """A single accrual period with its fixing and payment dates.

    Fixing and payment dates are offsets of the accrual boundaries and need
    not lie inside the accrual period.
    """

    fixing_date: DateLike
    payment_date: DateLike
    period_start: DateLike
    period_end: DateLike

    def __post_init__(self):
        if not self.period_start < self.period_end:
            raise ValueError(
                f"Period start {self.period_start} must be before period end {self.period_end}"
            )

    @property
    def accrual_days(self) -> int:
        """Number of calendar days in accrual period."""
        return (to_date(self.period_end) - to_date(self.period_start)).days


class Schedule:
    """Chronological sequence of periods with a time axis.

    Dates map to times ``t`` as the day count fraction from the reference
    date, so ``t(reference_date) == 0``.
    """

    def __init__(
        self,
        reference_date: DateLike,
        periods: Sequence[Period],
        daycount_convention: DayCountConvention,
    ):
        if len(periods) == 0:
            raise ValueError("Schedule requires at least one period")
        for previous, current in zip(periods, periods[1:]):
            if not previous.period_start < current.period_start:
                raise ValueError(
                    f"Periods must be in chronological order: {previous} before {current}"
                )
        self._reference_date = reference_date
        self._periods: Tuple[Period, ...] = tuple(periods)
        self._daycount_convention = daycount_convention

    @property
    def reference_date(self) -> DateLike:
        return self._reference_date

    @property
    def periods(self) -> Tuple[Period, ...]:
        return self._periods

    @property
    def daycount_convention(self) -> DayCountConvention:
        return self._daycount_convention

    @property
    def number_of_periods(self) -> int:
        return len(self._periods)

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[Period]:
        return iter(self._periods)

    def __getitem__(self, index: int) -> Period:
        return self._periods[index]

    def period(self, index: int) -> Period:
        return self._periods[index]

    def time_from_date(self, dt: DateLike) -> float:
        """Year fraction from the reference date to ``dt``."""
        return self._daycount_convention.year_fraction(self._reference_date, dt)

    def fixing(self, index: int) -> float:
        return self.time_from_date(self._periods[index].fixing_date)

    def payment(self, index: int) -> float:
        return self.time_from_date(self._periods[index].payment_date)

    def period_start(self, index: int) -> float:
        return self.time_from_date(self._periods[index].period_start)

    def period_end(self, index: int) -> float:
        return self.time_from_date(self._periods[index].period_end)

    def period_length(self, index: int) -> float:
        """Day count fraction of the accrual period."""
        period = self._periods[index]
        return self._daycount_convention.year_fraction(
            period.period_start, period.period_end
        )

    def fixing_times(self) -> np.ndarray:
        return np.array([self.fixing(i) for i in range(len(self))])

    def payment_times(self) -> np.ndarray:
        return np.array([self.payment(i) for i in range(len(self))])

    def period_start_times(self) -> np.ndarray:
        return np.array([self.period_start(i) for i in range(len(self))])

    def period_end_times(self) -> np.ndarray:
        return np.array([self.period_end(i) for i in range(len(self))])

    def period_lengths(self) -> np.ndarray:
        return np.array([self.period_length(i) for i in range(len(self))])

    def period_index(self, time: float) -> int:
        """Index of the period whose ``[start, end)`` contains ``time``, else -1."""
        starts = self.period_start_times()
        index = int(np.searchsorted(starts, time, side="right")) - 1
        if index < 0 or time >= self.period_end(index):
            return -1
        return index

    @property
    def table(self) -> pd.DataFrame:
        """A ``DataFrame`` with one row per period."""
        rows: List[dict] = []
        for i, period in enumerate(self._periods):
            rows.append(
                {
                    "fixing_date": period.fixing_date,
                    "period_start": period.period_start,
                    "period_end": period.period_end,
                    "payment_date": period.payment_date,
                    "fixing": self.fixing(i),
                    "start": self.period_start(i),
                    "end": self.period_end(i),
                    "payment": self.payment(i),
                    "period_length": self.period_length(i),
                }
            )
        return pd.DataFrame(rows)

    def __str__(self) -> str:
        lines = [
            f"Schedule(reference_date={self._reference_date}, "
            f"daycount={self._daycount_convention}, periods={len(self)})"
        ]
        for period in self._periods:
            lines.append(
                f"  {period.period_start} -> {period.period_end} "
                f"fixing {period.fixing_date} payment {period.payment_date}"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Schedule(reference_date={self._reference_date!r}, "
            f"periods={len(self)}, daycount={self._daycount_convention})"
        )
