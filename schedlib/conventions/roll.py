"""
Roll conventions for schedule generation.

A roll convention fixes the anchor day used when stepping a schedule date by
its frequency: a day-of-month, the end of the month, an IMM date or a day of
the week. Conventions are identified by name.
"""

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Dict

from dateutil.relativedelta import relativedelta

from schedlib.conventions.types import Frequency
from schedlib.utils.date import get_month_end

_ONE_MONTH = relativedelta(months=1)
_WEEKDAY_NAMES = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")


def _next_or_same(dt: date, weekday: int) -> date:
    return dt + timedelta(days=(weekday - dt.weekday()) % 7)


class RollConvention(ABC):
    """Base class for roll conventions.

    Subclasses implement ``adjust``; ``next`` and ``previous`` step by the
    frequency and snap the result. Both guarantee progress: if snapping lands
    on or behind the input date, the step is retried one month further on.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def adjust(self, dt: date) -> date:
        """Snap a date to this convention's anchor."""

    def matches(self, dt: date) -> bool:
        return self.adjust(dt) == dt

    def next(self, dt: date, frequency: Frequency) -> date:
        """Return the next roll date strictly after ``dt``."""
        calculated = self.adjust(frequency.add_to(dt))
        if calculated <= dt:
            calculated = self.adjust(dt + _ONE_MONTH)
        return calculated

    def previous(self, dt: date, frequency: Frequency) -> date:
        """Return the previous roll date strictly before ``dt``."""
        calculated = self.adjust(frequency.subtract_from(dt))
        if calculated >= dt:
            calculated = self.adjust(dt - _ONE_MONTH)
        return calculated

    def __eq__(self, other) -> bool:
        if not isinstance(other, RollConvention):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"RollConvention({self.name!r})"


class _NoRoll(RollConvention):
    """No anchor: dates step by the plain frequency."""

    def adjust(self, dt: date) -> date:
        return dt


class _EndOfMonth(RollConvention):
    def adjust(self, dt: date) -> date:
        return get_month_end(dt.year, dt.month)


class _Imm(RollConvention):
    """Third Wednesday of the month."""

    def adjust(self, dt: date) -> date:
        return _next_or_same(date(dt.year, dt.month, 1), 2) + timedelta(days=14)


class _ImmAud(RollConvention):
    """Thursday before the second Friday of the month."""

    def adjust(self, dt: date) -> date:
        second_friday = _next_or_same(date(dt.year, dt.month, 1), 4) + timedelta(days=7)
        return second_friday - timedelta(days=1)


class _ImmNzd(RollConvention):
    """First Wednesday after the ninth day of the month."""

    def adjust(self, dt: date) -> date:
        return _next_or_same(date(dt.year, dt.month, 10), 2)


class _Sfe(RollConvention):
    """Second Friday of the month (Sydney Futures Exchange)."""

    def adjust(self, dt: date) -> date:
        return _next_or_same(date(dt.year, dt.month, 1), 4) + timedelta(days=7)


class _DayOfMonth(RollConvention):
    """Fixed day of the month, clamped to the month length."""

    def __init__(self, day: int):
        super().__init__(f"DAY_{day}")
        self.day = day

    def adjust(self, dt: date) -> date:
        month_end = get_month_end(dt.year, dt.month)
        return dt.replace(day=min(self.day, month_end.day))


class _DayOfWeek(RollConvention):
    """Fixed day of the week; dates move forward to the next matching day."""

    def __init__(self, weekday: int):
        super().__init__(f"DAY_{_WEEKDAY_NAMES[weekday]}")
        self.weekday = weekday

    def adjust(self, dt: date) -> date:
        return _next_or_same(dt, self.weekday)


NONE = _NoRoll("NONE")
EOM = _EndOfMonth("EOM")
IMM = _Imm("IMM")
IMMAUD = _ImmAud("IMMAUD")
IMMNZD = _ImmNzd("IMMNZD")
SFE = _Sfe("SFE")

_DAYS_OF_MONTH = {day: _DayOfMonth(day) for day in range(1, 31)}
_DAYS_OF_WEEK = {weekday: _DayOfWeek(weekday) for weekday in range(7)}


def of_day_of_month(day: int) -> RollConvention:
    """Roll convention for a day-of-month, 1 to 31. Day 31 is end-of-month."""
    if not 1 <= day <= 31:
        raise ValueError(f"Day of month must be from 1 to 31, got {day}")
    if day == 31:
        return EOM
    return _DAYS_OF_MONTH[day]


def of_day_of_week(weekday: int) -> RollConvention:
    """Roll convention for a weekday, Monday=0 to Sunday=6."""
    if not 0 <= weekday <= 6:
        raise ValueError(f"Weekday must be from 0 to 6, got {weekday}")
    return _DAYS_OF_WEEK[weekday]


DAY_1 = of_day_of_month(1)
DAY_2 = of_day_of_month(2)
DAY_3 = of_day_of_month(3)
DAY_4 = of_day_of_month(4)
DAY_5 = of_day_of_month(5)
DAY_6 = of_day_of_month(6)
DAY_7 = of_day_of_month(7)
DAY_8 = of_day_of_month(8)
DAY_9 = of_day_of_month(9)
DAY_10 = of_day_of_month(10)
DAY_11 = of_day_of_month(11)
DAY_12 = of_day_of_month(12)
DAY_13 = of_day_of_month(13)
DAY_14 = of_day_of_month(14)
DAY_15 = of_day_of_month(15)
DAY_16 = of_day_of_month(16)
DAY_17 = of_day_of_month(17)
DAY_18 = of_day_of_month(18)
DAY_19 = of_day_of_month(19)
DAY_20 = of_day_of_month(20)
DAY_21 = of_day_of_month(21)
DAY_22 = of_day_of_month(22)
DAY_23 = of_day_of_month(23)
DAY_24 = of_day_of_month(24)
DAY_25 = of_day_of_month(25)
DAY_26 = of_day_of_month(26)
DAY_27 = of_day_of_month(27)
DAY_28 = of_day_of_month(28)
DAY_29 = of_day_of_month(29)
DAY_30 = of_day_of_month(30)

DAY_MON = of_day_of_week(0)
DAY_TUE = of_day_of_week(1)
DAY_WED = of_day_of_week(2)
DAY_THU = of_day_of_week(3)
DAY_FRI = of_day_of_week(4)
DAY_SAT = of_day_of_week(5)
DAY_SUN = of_day_of_week(6)

# Roll convention registry
ROLL_CONVENTIONS: Dict[str, RollConvention] = {
    conv.name: conv
    for conv in (
        NONE, EOM, IMM, IMMAUD, IMMNZD, SFE,
        *_DAYS_OF_MONTH.values(), *_DAYS_OF_WEEK.values(),
    )
}
ROLL_CONVENTIONS["DAY_31"] = EOM


def of(name: str) -> RollConvention:
    """Get a roll convention by name, e.g. 'EOM', 'IMM', 'DAY_17', 'DAY_WED'."""
    key = name.upper().strip()
    if key not in ROLL_CONVENTIONS:
        raise ValueError(f"Unknown roll convention: {name}")
    return ROLL_CONVENTIONS[key]
