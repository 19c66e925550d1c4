"""
Tests for Period and Schedule.
"""

import dataclasses
from datetime import date

import numpy as np
import pytest

from schedlib.conventions.calendars import ANY_DAY
from schedlib.conventions.daycount import ACT_360
from schedlib.schedule import Period, Schedule, create_schedule_from_conventions


@pytest.fixture
def quarterly_schedule():
    """One year of quarterly ACT/360 periods from 2020-01-15."""
    return create_schedule_from_conventions(
        date(2020, 1, 15),
        date(2020, 1, 15),
        date(2021, 1, 15),
        "quarterly",
        "act/360",
        "last",
        "unadjusted",
        ANY_DAY,
    )


class TestPeriod:
    def test_start_must_precede_end(self):
        with pytest.raises(ValueError):
            Period(date(2020, 4, 15), date(2020, 4, 15), date(2020, 4, 15), date(2020, 1, 15))

    def test_zero_length_rejected(self):
        with pytest.raises(ValueError):
            Period(date(2020, 1, 15), date(2020, 1, 15), date(2020, 1, 15), date(2020, 1, 15))

    def test_immutable_and_hashable(self):
        period = Period(date(2020, 1, 13), date(2020, 4, 17), date(2020, 1, 15), date(2020, 4, 15))
        with pytest.raises(dataclasses.FrozenInstanceError):
            period.period_end = date(2020, 5, 15)
        assert len({period, Period(date(2020, 1, 13), date(2020, 4, 17), date(2020, 1, 15), date(2020, 4, 15))}) == 1

    def test_fixing_may_lie_outside_period(self):
        period = Period(date(2020, 1, 10), date(2020, 4, 20), date(2020, 1, 15), date(2020, 4, 15))
        assert period.fixing_date < period.period_start
        assert period.payment_date > period.period_end

    def test_accrual_days(self):
        period = Period(date(2020, 1, 15), date(2020, 4, 15), date(2020, 1, 15), date(2020, 4, 15))
        assert period.accrual_days == 91


class TestScheduleValidation:
    def test_empty(self):
        with pytest.raises(ValueError):
            Schedule(date(2020, 1, 1), [], ACT_360)

    def test_unordered_periods(self):
        first = Period(date(2020, 1, 15), date(2020, 4, 15), date(2020, 1, 15), date(2020, 4, 15))
        second = Period(date(2020, 4, 15), date(2020, 7, 15), date(2020, 4, 15), date(2020, 7, 15))
        with pytest.raises(ValueError, match="chronological"):
            Schedule(date(2020, 1, 1), [second, first], ACT_360)

    def test_periods_are_copied(self):
        periods = [Period(date(2020, 1, 15), date(2020, 4, 15), date(2020, 1, 15), date(2020, 4, 15))]
        schedule = Schedule(date(2020, 1, 1), periods, ACT_360)
        periods.clear()
        assert len(schedule) == 1


class TestScheduleAccess:
    def test_sequence_protocol(self, quarterly_schedule):
        assert len(quarterly_schedule) == 4
        assert quarterly_schedule.number_of_periods == 4
        assert quarterly_schedule[0] is quarterly_schedule.period(0)
        assert quarterly_schedule[-1].period_end == date(2021, 1, 15)
        assert list(quarterly_schedule) == list(quarterly_schedule.periods)

    def test_properties(self, quarterly_schedule):
        assert quarterly_schedule.reference_date == date(2020, 1, 15)
        assert quarterly_schedule.daycount_convention is ACT_360

    def test_index_out_of_range(self, quarterly_schedule):
        with pytest.raises(IndexError):
            quarterly_schedule.period(4)


class TestScheduleTimes:
    """Tests for mapping dates to ACT/360 times from the reference date."""

    def test_reference_date_is_zero(self, quarterly_schedule):
        assert quarterly_schedule.time_from_date(date(2020, 1, 15)) == 0.0

    def test_dates_before_reference_are_negative(self, quarterly_schedule):
        assert quarterly_schedule.time_from_date(date(2020, 1, 5)) == pytest.approx(-10 / 360)

    def test_period_times(self, quarterly_schedule):
        assert quarterly_schedule.period_start(0) == 0.0
        assert quarterly_schedule.period_end(0) == pytest.approx(91 / 360)
        assert quarterly_schedule.period_start(2) == pytest.approx(182 / 360)
        assert quarterly_schedule.payment(3) == pytest.approx(366 / 360)
        assert quarterly_schedule.fixing(1) == pytest.approx(91 / 360)

    def test_period_length(self, quarterly_schedule):
        assert quarterly_schedule.period_length(0) == pytest.approx(91 / 360)
        assert quarterly_schedule.period_length(2) == pytest.approx(92 / 360)

    def test_arrays(self, quarterly_schedule):
        np.testing.assert_allclose(
            quarterly_schedule.period_start_times(), np.array([0, 91, 182, 274]) / 360
        )
        np.testing.assert_allclose(
            quarterly_schedule.period_end_times(), np.array([91, 182, 274, 366]) / 360
        )
        np.testing.assert_allclose(
            quarterly_schedule.fixing_times(), quarterly_schedule.period_start_times()
        )
        np.testing.assert_allclose(
            quarterly_schedule.payment_times(), quarterly_schedule.period_end_times()
        )
        np.testing.assert_allclose(
            quarterly_schedule.period_lengths(), np.array([91, 91, 92, 92]) / 360
        )

    @pytest.mark.parametrize(
        "time, expected",
        [
            (0.0, 0),
            (0.1, 0),
            (91 / 360, 1),
            (0.3, 1),
            (300 / 360, 3),
            (-0.1, -1),
            (366 / 360, -1),
            (2.0, -1),
        ],
    )
    def test_period_index(self, quarterly_schedule, time, expected):
        """Periods are half-open: the end time belongs to the next period."""
        assert quarterly_schedule.period_index(time) == expected


class TestScheduleTable:
    def test_shape_and_columns(self, quarterly_schedule):
        table = quarterly_schedule.table
        assert table.shape == (4, 9)
        assert list(table.columns) == [
            "fixing_date",
            "period_start",
            "period_end",
            "payment_date",
            "fixing",
            "start",
            "end",
            "payment",
            "period_length",
        ]

    def test_values(self, quarterly_schedule):
        table = quarterly_schedule.table
        assert table["period_start"].iloc[1] == date(2020, 4, 15)
        assert table["period_length"].sum() == pytest.approx(366 / 360)

    def test_str(self, quarterly_schedule):
        text = str(quarterly_schedule)
        assert text.startswith("Schedule(")
        assert "2020-04-15 -> 2020-07-15" in text
        assert "periods=4" in repr(quarterly_schedule)
