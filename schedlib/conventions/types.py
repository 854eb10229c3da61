"""
Basic types and enums used across the scheduling system.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from dateutil.relativedelta import relativedelta


class PeriodUnit(Enum):
    """Units a frequency can step in."""

    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    TERM = "T"


@dataclass(frozen=True)
class Frequency:
    """A periodic step between schedule dates.

    Periodic frequencies are a positive amount of days, weeks or months
    (years are held as months). ``TERM`` is a single period spanning the
    whole schedule and has no length of its own.
    """

    amount: int
    unit: PeriodUnit

    def __post_init__(self):
        if not isinstance(self.unit, PeriodUnit):
            raise TypeError(f"Frequency unit must be a PeriodUnit, got {self.unit!r}")
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"Frequency amount must be an int, got {self.amount!r}")
        if self.unit is PeriodUnit.TERM:
            if self.amount != 0:
                raise ValueError("Term frequency must have zero amount")
        elif self.amount <= 0:
            raise ValueError(f"Frequency amount must be positive, got {self.amount}")

    @classmethod
    def of_days(cls, days: int) -> "Frequency":
        return cls(days, PeriodUnit.DAYS)

    @classmethod
    def of_weeks(cls, weeks: int) -> "Frequency":
        return cls(weeks, PeriodUnit.WEEKS)

    @classmethod
    def of_months(cls, months: int) -> "Frequency":
        return cls(months, PeriodUnit.MONTHS)

    @classmethod
    def of_years(cls, years: int) -> "Frequency":
        return cls(years * 12, PeriodUnit.MONTHS)

    @classmethod
    def parse(cls, text: str) -> "Frequency":
        """Parse a tenor-style frequency such as '3M', '1Y', '2W', '7D' or 'TERM'."""
        t = text.upper().strip()
        if t.startswith("P"):
            t = t[1:]
        if t in ("T", "TERM"):
            return TERM
        if len(t) < 2 or not t[:-1].isdigit():
            raise ValueError(f"Unsupported frequency: {text}")
        amount = int(t[:-1])
        if t.endswith("D"):
            return cls.of_days(amount)
        if t.endswith("W"):
            return cls.of_weeks(amount)
        if t.endswith("M"):
            return cls.of_months(amount)
        if t.endswith("Y"):
            return cls.of_years(amount)
        raise ValueError(f"Unsupported frequency: {text}")

    @property
    def is_term(self) -> bool:
        return self.unit is PeriodUnit.TERM

    @property
    def is_month_based(self) -> bool:
        return self.unit is PeriodUnit.MONTHS

    @property
    def is_week_based(self) -> bool:
        return self.unit is PeriodUnit.WEEKS

    def _delta(self) -> relativedelta:
        if self.unit is PeriodUnit.DAYS:
            return relativedelta(days=self.amount)
        if self.unit is PeriodUnit.WEEKS:
            return relativedelta(weeks=self.amount)
        if self.unit is PeriodUnit.MONTHS:
            return relativedelta(months=self.amount)
        raise ValueError("Term frequency cannot be added to a date")

    def add_to(self, dt: date) -> date:
        """Add one step to a date, clamping to the month length."""
        return dt + self._delta()

    def subtract_from(self, dt: date) -> date:
        """Subtract one step from a date, clamping to the month length."""
        return dt - self._delta()

    def __str__(self) -> str:
        if self.is_term:
            return "Term"
        return f"P{self.amount}{self.unit.value}"


TERM = Frequency(0, PeriodUnit.TERM)
P1D = Frequency.of_days(1)
P1W = Frequency.of_weeks(1)
P2W = Frequency.of_weeks(2)
P4W = Frequency.of_weeks(4)
P13W = Frequency.of_weeks(13)
P26W = Frequency.of_weeks(26)
P52W = Frequency.of_weeks(52)
P1M = Frequency.of_months(1)
P2M = Frequency.of_months(2)
P3M = Frequency.of_months(3)
P4M = Frequency.of_months(4)
P6M = Frequency.of_months(6)
P12M = Frequency.of_months(12)


class BusinessDayConvention(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"
