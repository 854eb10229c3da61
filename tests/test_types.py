"""Tests for frequencies and convention enums."""

from __future__ import annotations

from datetime import date

import pytest

from schedlib.conventions.types import (
    P1M,
    P3M,
    P6M,
    P12M,
    TERM,
    BusinessDayConvention,
    Frequency,
    PeriodUnit,
)


# ---------------------------------------------------------------------------
# Frequency construction
# ---------------------------------------------------------------------------


class TestFrequencyConstruction:
    def test_factories(self) -> None:
        assert Frequency.of_days(2) == Frequency(2, PeriodUnit.DAYS)
        assert Frequency.of_weeks(1) == Frequency(1, PeriodUnit.WEEKS)
        assert Frequency.of_months(3) == P3M
        assert Frequency.of_years(1) == P12M

    def test_term(self) -> None:
        assert TERM.is_term
        assert not TERM.is_month_based
        assert not TERM.is_week_based

    def test_zero_amount_rejected(self) -> None:
        with pytest.raises(ValueError):
            Frequency.of_months(0)

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValueError):
            Frequency.of_days(-1)

    def test_term_with_amount_rejected(self) -> None:
        with pytest.raises(ValueError):
            Frequency(1, PeriodUnit.TERM)

    def test_wrong_types_rejected(self) -> None:
        with pytest.raises(TypeError):
            Frequency(1, "M")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Frequency(1.5, PeriodUnit.MONTHS)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Frequency(True, PeriodUnit.MONTHS)  # type: ignore[arg-type]


class TestFrequencyParse:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3M", P3M),
            ("P6M", P6M),
            ("1y", P12M),
            ("2W", Frequency.of_weeks(2)),
            ("7D", Frequency.of_days(7)),
            ("  1m ", P1M),
            ("TERM", TERM),
            ("T", TERM),
        ],
    )
    def test_parse(self, text: str, expected: Frequency) -> None:
        assert Frequency.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "M", "3X", "abc", "0M", "-1M"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Frequency.parse(text)


class TestFrequencyArithmetic:
    def test_add_months_clamps_to_month_end(self) -> None:
        assert P1M.add_to(date(2014, 1, 31)) == date(2014, 2, 28)
        assert P3M.add_to(date(2014, 11, 30)) == date(2015, 2, 28)

    def test_subtract_months(self) -> None:
        assert P3M.subtract_from(date(2014, 9, 17)) == date(2014, 6, 17)

    def test_add_days_and_weeks(self) -> None:
        assert Frequency.of_days(2).add_to(date(2014, 9, 30)) == date(2014, 10, 2)
        assert Frequency.of_weeks(1).add_to(date(2014, 9, 30)) == date(2014, 10, 7)

    def test_term_cannot_be_added(self) -> None:
        with pytest.raises(ValueError):
            TERM.add_to(date(2014, 9, 30))
        with pytest.raises(ValueError):
            TERM.subtract_from(date(2014, 9, 30))

    def test_str(self) -> None:
        assert str(P3M) == "P3M"
        assert str(Frequency.of_weeks(2)) == "P2W"
        assert str(TERM) == "Term"


def test_business_day_convention_values() -> None:
    assert BusinessDayConvention["MODIFIED_FOLLOWING"] is BusinessDayConvention.MODIFIED_FOLLOWING
    assert len(BusinessDayConvention) == 5
