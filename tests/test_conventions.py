"""
Tests for convention enumerations and their string resolution.
"""

import pytest

from schedlib.conventions.types import (
    TENOR_MONTHS,
    DateRollConvention,
    DaycountConvention,
    Frequency,
    ShortPeriodConvention,
)


class TestFrequency:
    """Tests for Frequency period lengths and parsing."""

    @pytest.mark.parametrize(
        "frequency, expected",
        [
            (Frequency.DAILY, (1, 0, 0)),
            (Frequency.WEEKLY, (0, 1, 0)),
            (Frequency.MONTHLY, (0, 0, 1)),
            (Frequency.QUARTERLY, (0, 0, 3)),
            (Frequency.SEMIANNUAL, (0, 0, 6)),
            (Frequency.ANNUAL, (0, 0, 12)),
        ],
    )
    def test_period_length(self, frequency, expected):
        """Each frequency maps to a single non-zero unit."""
        assert frequency.period_length() == expected

    def test_tenor_is_oversized(self):
        """TENOR uses a month count no instrument reaches."""
        assert Frequency.TENOR.period_length() == (0, 0, TENOR_MONTHS)

    def test_exactly_one_component(self):
        """Exactly one of days, weeks or months is non-zero."""
        for frequency in Frequency:
            assert sum(1 for unit in frequency.period_length() if unit != 0) == 1

    def test_from_string_case_insensitive(self):
        """Frequency names resolve regardless of case."""
        assert Frequency.from_string("quarterly") == Frequency.QUARTERLY
        assert Frequency.from_string("SemiAnnual") == Frequency.SEMIANNUAL
        assert Frequency.from_string(" tenor ") == Frequency.TENOR

    def test_from_string_passes_enum_through(self):
        assert Frequency.from_string(Frequency.ANNUAL) is Frequency.ANNUAL

    def test_unknown_frequency(self):
        with pytest.raises(ValueError, match="fortnightly"):
            Frequency.from_string("fortnightly")


class TestDaycountConvention:
    """Tests for day count convention resolution."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("30E/360 ISDA", DaycountConvention.E30_360_ISDA),
            ("e30/360 isda", DaycountConvention.E30_360_ISDA),
            ("30e/360", DaycountConvention.E30_360),
            ("E30/360", DaycountConvention.E30_360),
            ("30U/360", DaycountConvention.U30_360),
            ("u30/360", DaycountConvention.U30_360),
            ("act/360", DaycountConvention.ACT_360),
            ("ACT/365", DaycountConvention.ACT_365),
            ("Act/Act ISDA", DaycountConvention.ACT_ACT_ISDA),
            ("act/act", DaycountConvention.ACT_ACT),
        ],
    )
    def test_market_notation(self, text, expected):
        """Slash notation resolves case-insensitively."""
        assert DaycountConvention.from_string(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("E30_360_ISDA", DaycountConvention.E30_360_ISDA),
            ("act_360", DaycountConvention.ACT_360),
            ("U30_360", DaycountConvention.U30_360),
            ("act_act_isda", DaycountConvention.ACT_ACT_ISDA),
        ],
    )
    def test_enum_names(self, text, expected):
        """Underscore enum names are accepted as a fallback."""
        assert DaycountConvention.from_string(text) == expected

    def test_unknown_convention(self):
        with pytest.raises(ValueError):
            DaycountConvention.from_string("bus/252")

    def test_none_is_rejected(self):
        with pytest.raises(ValueError):
            DaycountConvention.from_string(None)


class TestShortPeriodConvention:
    def test_from_string(self):
        assert ShortPeriodConvention.from_string("first") == ShortPeriodConvention.FIRST
        assert ShortPeriodConvention.from_string("LAST") == ShortPeriodConvention.LAST

    def test_unknown(self):
        with pytest.raises(ValueError):
            ShortPeriodConvention.from_string("middle")


class TestDateRollConvention:
    """Tests for roll convention aliases."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("unadjusted", DateRollConvention.UNADJUSTED),
            ("actual", DateRollConvention.UNADJUSTED),
            ("F", DateRollConvention.FOLLOWING),
            ("following", DateRollConvention.FOLLOWING),
            ("modfollow", DateRollConvention.MODIFIED_FOLLOWING),
            ("MODIFIED_FOLLOWING", DateRollConvention.MODIFIED_FOLLOWING),
            ("mf", DateRollConvention.MODIFIED_FOLLOWING),
            ("preceding", DateRollConvention.PRECEDING),
            ("modified_preceding", DateRollConvention.MODIFIED_PRECEDING),
            ("MP", DateRollConvention.MODIFIED_PRECEDING),
        ],
    )
    def test_aliases(self, text, expected):
        assert DateRollConvention.from_string(text) == expected

    def test_unknown(self):
        with pytest.raises(ValueError):
            DateRollConvention.from_string("nearest")
