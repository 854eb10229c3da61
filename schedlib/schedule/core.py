"""
Core data structures for schedule generation.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterator, List, Optional, Tuple

import pandas as pd

from schedlib.conventions.roll import RollConvention
from schedlib.conventions.types import Frequency


@dataclass(frozen=True)
class SchedulePeriod:
    """A single period in a schedule.

    The unadjusted dates are the theoretical period boundaries; ``start_date``
    and ``end_date`` are the business-day adjusted dates used for cashflows.
    """

    start_date: date
    end_date: date
    unadjusted_start_date: date
    unadjusted_end_date: date

    def __post_init__(self):
        if self.unadjusted_start_date >= self.unadjusted_end_date:
            raise ValueError(
                f"Unadjusted start date {self.unadjusted_start_date} must be before "
                f"unadjusted end date {self.unadjusted_end_date}"
            )

    @property
    def length_in_days(self) -> int:
        """Number of calendar days between the adjusted dates."""
        return (self.end_date - self.start_date).days

    def contains(self, dt: date) -> bool:
        """Whether the date falls in [start_date, end_date)."""
        return self.start_date <= dt < self.end_date

    def is_regular(self, frequency: Frequency, roll_convention: RollConvention) -> bool:
        """Whether the unadjusted dates are exactly one step of the frequency apart."""
        if frequency.is_term:
            return False
        return (
            roll_convention.next(self.unadjusted_start_date, frequency) == self.unadjusted_end_date
            and roll_convention.previous(self.unadjusted_end_date, frequency)
            == self.unadjusted_start_date
        )


@dataclass(frozen=True)
class Schedule:
    """An ordered, contiguous sequence of schedule periods."""

    periods: Tuple[SchedulePeriod, ...]
    frequency: Frequency
    roll_convention: RollConvention

    def __post_init__(self):
        object.__setattr__(self, "periods", tuple(self.periods))
        if not self.periods:
            raise ValueError("Schedule must have at least one period")
        for prev, curr in zip(self.periods, self.periods[1:]):
            if prev.unadjusted_end_date != curr.unadjusted_start_date:
                raise ValueError(
                    f"Schedule periods are not contiguous: {prev.unadjusted_end_date} "
                    f"followed by {curr.unadjusted_start_date}"
                )

    def __len__(self) -> int:
        return len(self.periods)

    def __iter__(self) -> Iterator[SchedulePeriod]:
        return iter(self.periods)

    def __getitem__(self, index: int) -> SchedulePeriod:
        return self.periods[index]

    def get_period(self, index: int) -> SchedulePeriod:
        return self.periods[index]

    @property
    def first_period(self) -> SchedulePeriod:
        return self.periods[0]

    @property
    def last_period(self) -> SchedulePeriod:
        return self.periods[-1]

    @property
    def start_date(self) -> date:
        return self.first_period.start_date

    @property
    def end_date(self) -> date:
        return self.last_period.end_date

    @property
    def unadjusted_start_date(self) -> date:
        return self.first_period.unadjusted_start_date

    @property
    def unadjusted_end_date(self) -> date:
        return self.last_period.unadjusted_end_date

    @property
    def unadjusted_dates(self) -> List[date]:
        """All unadjusted period boundaries, start to end."""
        return [self.unadjusted_start_date] + [p.unadjusted_end_date for p in self.periods]

    @property
    def adjusted_dates(self) -> List[date]:
        """All adjusted period boundaries, start to end."""
        return [self.start_date] + [p.end_date for p in self.periods]

    @property
    def is_term(self) -> bool:
        return self.frequency.is_term

    @property
    def is_single_period(self) -> bool:
        return len(self.periods) == 1

    @property
    def initial_stub(self) -> Optional[SchedulePeriod]:
        """The first period, if it is not a regular period."""
        if self.is_term or self.first_period.is_regular(self.frequency, self.roll_convention):
            return None
        return self.first_period

    @property
    def final_stub(self) -> Optional[SchedulePeriod]:
        """The last period, if it is not regular and not also the initial stub."""
        if self.is_term or self.is_single_period:
            return None
        if self.last_period.is_regular(self.frequency, self.roll_convention):
            return None
        return self.last_period

    def to_frame(self) -> pd.DataFrame:
        """One row per period with unadjusted and adjusted dates."""
        return pd.DataFrame(
            {
                "unadjusted_start_date": [p.unadjusted_start_date for p in self.periods],
                "unadjusted_end_date": [p.unadjusted_end_date for p in self.periods],
                "start_date": [p.start_date for p in self.periods],
                "end_date": [p.end_date for p in self.periods],
                "days": [p.length_in_days for p in self.periods],
            }
        )
