"""Tests for Schedule and SchedulePeriod."""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from schedlib.conventions import roll
from schedlib.conventions.roll import DAY_4, DAY_17
from schedlib.conventions.types import P1M, TERM
from schedlib.schedule.core import Schedule, SchedulePeriod

JUN_04 = date(2014, 6, 4)
JUN_17 = date(2014, 6, 17)
JUL_04 = date(2014, 7, 4)
JUL_17 = date(2014, 7, 17)
AUG_04 = date(2014, 8, 4)
AUG_17 = date(2014, 8, 17)
AUG_18 = date(2014, 8, 18)
SEP_17 = date(2014, 9, 17)


def _period(start: date, end: date, adj_start: date | None = None, adj_end: date | None = None):
    return SchedulePeriod(
        start_date=adj_start or start,
        end_date=adj_end or end,
        unadjusted_start_date=start,
        unadjusted_end_date=end,
    )


# ---------------------------------------------------------------------------
# SchedulePeriod
# ---------------------------------------------------------------------------


class TestSchedulePeriod:
    def test_length_and_contains(self) -> None:
        period = _period(JUL_17, AUG_17, adj_end=AUG_18)
        assert period.length_in_days == 32
        assert period.contains(JUL_17)
        assert period.contains(AUG_17)
        assert not period.contains(AUG_18)
        assert not period.contains(JUN_17)

    def test_unadjusted_dates_must_be_ordered(self) -> None:
        with pytest.raises(ValueError):
            _period(JUL_17, JUL_17)
        with pytest.raises(ValueError):
            _period(JUL_17, JUN_17)

    def test_is_regular(self) -> None:
        assert _period(JUN_17, JUL_17).is_regular(P1M, DAY_17)
        assert not _period(JUN_04, JUN_17).is_regular(P1M, DAY_17)
        assert not _period(JUN_17, AUG_17).is_regular(P1M, DAY_17)
        assert not _period(JUN_17, JUL_17).is_regular(TERM, roll.NONE)


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------


@pytest.fixture
def initial_stub_schedule() -> Schedule:
    return Schedule(
        periods=[
            _period(JUN_04, JUN_17),
            _period(JUN_17, JUL_17),
            _period(JUL_17, AUG_17, adj_end=AUG_18),
            _period(AUG_17, SEP_17, adj_start=AUG_18),
        ],
        frequency=P1M,
        roll_convention=DAY_17,
    )


class TestSchedule:
    def test_sequence_protocol(self, initial_stub_schedule: Schedule) -> None:
        assert len(initial_stub_schedule) == 4
        assert initial_stub_schedule[1] == _period(JUN_17, JUL_17)
        assert initial_stub_schedule.get_period(1) == initial_stub_schedule[1]
        assert list(initial_stub_schedule) == list(initial_stub_schedule.periods)
        assert isinstance(initial_stub_schedule.periods, tuple)

    def test_dates(self, initial_stub_schedule: Schedule) -> None:
        assert initial_stub_schedule.start_date == JUN_04
        assert initial_stub_schedule.end_date == SEP_17
        assert initial_stub_schedule.unadjusted_start_date == JUN_04
        assert initial_stub_schedule.unadjusted_end_date == SEP_17
        assert initial_stub_schedule.unadjusted_dates == [JUN_04, JUN_17, JUL_17, AUG_17, SEP_17]
        assert initial_stub_schedule.adjusted_dates == [JUN_04, JUN_17, JUL_17, AUG_18, SEP_17]

    def test_stubs(self, initial_stub_schedule: Schedule) -> None:
        assert initial_stub_schedule.initial_stub == _period(JUN_04, JUN_17)
        assert initial_stub_schedule.final_stub is None
        assert not initial_stub_schedule.is_term
        assert not initial_stub_schedule.is_single_period

    def test_final_stub(self) -> None:
        schedule = Schedule(
            periods=[_period(JUN_04, JUL_04), _period(JUL_04, AUG_04), _period(AUG_04, SEP_17)],
            frequency=P1M,
            roll_convention=DAY_4,
        )
        assert schedule.initial_stub is None
        assert schedule.final_stub == _period(AUG_04, SEP_17)

    def test_single_period_stub_is_initial_only(self) -> None:
        schedule = Schedule(periods=[_period(JUN_17, JUL_04)], frequency=P1M, roll_convention=DAY_17)
        assert schedule.is_single_period
        assert schedule.initial_stub == _period(JUN_17, JUL_04)
        assert schedule.final_stub is None

    def test_term_has_no_stubs(self) -> None:
        schedule = Schedule(periods=[_period(JUN_04, SEP_17)], frequency=TERM, roll_convention=roll.NONE)
        assert schedule.is_term
        assert schedule.initial_stub is None
        assert schedule.final_stub is None

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            Schedule(periods=[], frequency=P1M, roll_convention=DAY_17)

    def test_gap_rejected(self) -> None:
        with pytest.raises(ValueError):
            Schedule(
                periods=[_period(JUN_17, JUL_17), _period(AUG_17, SEP_17)],
                frequency=P1M,
                roll_convention=DAY_17,
            )

    def test_to_frame(self, initial_stub_schedule: Schedule) -> None:
        frame = initial_stub_schedule.to_frame()
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.columns) == [
            "unadjusted_start_date",
            "unadjusted_end_date",
            "start_date",
            "end_date",
            "days",
        ]
        assert len(frame) == 4
        assert frame["end_date"].tolist() == [JUN_17, JUL_17, AUG_18, SEP_17]
        assert frame["days"].tolist() == [13, 30, 32, 30]
