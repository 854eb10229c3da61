"""
Main schedule generation logic.

A ``ScheduleDefinition`` describes a periodic schedule: start and end dates,
a frequency, business day adjustments and the optional stub and roll
conventions and explicit stub dates. Generating the schedule first produces
the unadjusted period boundaries, then applies the business day adjustments.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from schedlib.conventions import roll
from schedlib.conventions.roll import RollConvention
from schedlib.conventions.stub import StubConvention
from schedlib.conventions.types import Frequency
from schedlib.exceptions import ScheduleException

from .adjustments import DateAdjuster
from .core import Schedule, SchedulePeriod

logger = logging.getLogger(__name__)

# Hard cap on generated periods, far beyond any real instrument
MAX_PERIODS = 100_000

_DATE_FIELDS = ("start_date", "end_date", "first_regular_start_date", "last_regular_end_date")
_ADJUSTMENT_FIELDS = (
    "business_day_adjustment",
    "start_date_business_day_adjustment",
    "end_date_business_day_adjustment",
)


def _require(value, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")


def _format_dates(dates: List[date]) -> str:
    return "[" + ", ".join(d.isoformat() for d in dates) + "]"


@dataclass(frozen=True)
class ScheduleDefinition:
    """Definition of a periodic schedule.

    Attributes:
        start_date: Unadjusted start date of the first period
        end_date: Unadjusted end date of the last period
        frequency: Regular period frequency, or TERM for a single period
        business_day_adjustment: Adjustment applied to every period boundary
        start_date_business_day_adjustment: Overrides the adjustment of the start date
        end_date_business_day_adjustment: Overrides the adjustment of the end date
        stub_convention: How leftover time is handled (None: no implicit stub)
        roll_convention: Anchor day for stepping dates (None: derived)
        first_regular_start_date: End of an explicit initial stub
        last_regular_end_date: Start of an explicit final stub
    """

    start_date: date
    end_date: date
    frequency: Frequency
    business_day_adjustment: DateAdjuster
    start_date_business_day_adjustment: Optional[DateAdjuster] = None
    end_date_business_day_adjustment: Optional[DateAdjuster] = None
    stub_convention: Optional[StubConvention] = None
    roll_convention: Optional[RollConvention] = None
    first_regular_start_date: Optional[date] = None
    last_regular_end_date: Optional[date] = None

    def __post_init__(self):
        for name in ("start_date", "end_date", "frequency", "business_day_adjustment"):
            _require(getattr(self, name), name)
        for name in _DATE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, datetime):
                object.__setattr__(self, name, value.date())
            elif value is not None and not isinstance(value, date):
                raise TypeError(f"{name} must be a date, got {value!r}")
        if not isinstance(self.frequency, Frequency):
            raise TypeError(f"frequency must be a Frequency, got {self.frequency!r}")
        for name in _ADJUSTMENT_FIELDS:
            value = getattr(self, name)
            if value is not None and not callable(getattr(value, "adjust", None)):
                raise TypeError(f"{name} must provide adjust(date), got {value!r}")
        if self.stub_convention is not None and not isinstance(
            self.stub_convention, StubConvention
        ):
            raise TypeError(f"stub_convention must be a StubConvention, got {self.stub_convention!r}")
        if self.roll_convention is not None and not isinstance(
            self.roll_convention, RollConvention
        ):
            raise TypeError(f"roll_convention must be a RollConvention, got {self.roll_convention!r}")
        self._validate_date_order()

    def _validate_date_order(self) -> None:
        start, end = self.start_date, self.end_date
        first, last = self.first_regular_start_date, self.last_regular_end_date
        if start >= end:
            raise ScheduleException(
                f"Start date {start} must be before end date {end}", self
            )
        if first is not None and not start <= first < end:
            raise ScheduleException(
                f"First regular start date {first} must be on or after start date {start} "
                f"and before end date {end}",
                self,
            )
        if last is not None and not start < last <= end:
            raise ScheduleException(
                f"Last regular end date {last} must be after start date {start} "
                f"and on or before end date {end}",
                self,
            )
        if first is not None and last is not None and first >= last:
            raise ScheduleException(
                f"First regular start date {first} must be before last regular end date {last}",
                self,
            )

    @classmethod
    def of(
        cls,
        start_date: date,
        end_date: date,
        frequency: Frequency,
        business_day_adjustment: DateAdjuster,
        stub_convention: StubConvention,
        roll_convention: RollConvention,
    ) -> "ScheduleDefinition":
        """Create a definition with an explicit stub and roll convention."""
        _require(stub_convention, "stub_convention")
        _require(roll_convention, "roll_convention")
        return cls(
            start_date=start_date,
            end_date=end_date,
            frequency=frequency,
            business_day_adjustment=business_day_adjustment,
            stub_convention=stub_convention,
            roll_convention=roll_convention,
        )

    @classmethod
    def of_end_of_month(
        cls,
        start_date: date,
        end_date: date,
        frequency: Frequency,
        business_day_adjustment: DateAdjuster,
        stub_convention: StubConvention,
        end_of_month: bool,
    ) -> "ScheduleDefinition":
        """Create a definition using the end-of-month flag.

        With the flag set, dates roll on the last day of the month when the
        anchor date is itself a month end. Otherwise the roll convention is
        left to be derived from the anchor day-of-month.
        """
        _require(stub_convention, "stub_convention")
        return cls(
            start_date=start_date,
            end_date=end_date,
            frequency=frequency,
            business_day_adjustment=business_day_adjustment,
            stub_convention=stub_convention,
            roll_convention=roll.EOM if end_of_month else None,
        )

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def effective_first_regular_start_date(self) -> date:
        if self.first_regular_start_date is not None:
            return self.first_regular_start_date
        return self.start_date

    @property
    def effective_last_regular_end_date(self) -> date:
        if self.last_regular_end_date is not None:
            return self.last_regular_end_date
        return self.end_date

    @property
    def effective_roll_convention(self) -> RollConvention:
        """The roll convention actually used to generate dates.

        End-of-month is advisory: it only applies when the anchor date is a
        month end. An absent or NONE convention is derived from the stub
        convention and the regular period bounds where possible.
        """
        stub_conv = self.stub_convention
        if stub_conv is None:
            stub_conv = StubConvention.NONE
        start = self.effective_first_regular_start_date
        end = self.effective_last_regular_end_date
        if self.roll_convention == roll.EOM:
            derived = stub_conv.to_roll_convention(start, end, self.frequency, True)
            return roll.EOM if derived == roll.NONE else derived
        if self.roll_convention is None or self.roll_convention == roll.NONE:
            return stub_conv.to_roll_convention(start, end, self.frequency, False)
        return self.roll_convention

    @property
    def effective_start_date_business_day_adjustment(self) -> DateAdjuster:
        if self.start_date_business_day_adjustment is not None:
            return self.start_date_business_day_adjustment
        return self.business_day_adjustment

    @property
    def effective_end_date_business_day_adjustment(self) -> DateAdjuster:
        if self.end_date_business_day_adjustment is not None:
            return self.end_date_business_day_adjustment
        return self.business_day_adjustment

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def create_schedule(self) -> Schedule:
        """
        Generate the schedule.

        Returns:
            Schedule of periods with unadjusted and adjusted dates

        Raises:
            ScheduleException: If the definition cannot produce a valid schedule
        """
        unadjusted = self.create_unadjusted_dates()
        adjusted = self._adjust_dates(unadjusted)
        periods = tuple(
            SchedulePeriod(
                start_date=adjusted[i],
                end_date=adjusted[i + 1],
                unadjusted_start_date=unadjusted[i],
                unadjusted_end_date=unadjusted[i + 1],
            )
            for i in range(len(unadjusted) - 1)
        )
        logger.debug(
            "Created schedule of %s periods from %s to %s", len(periods), self.start_date, self.end_date
        )
        return Schedule(
            periods=periods,
            frequency=self.frequency,
            roll_convention=self.effective_roll_convention,
        )

    def create_unadjusted_dates(self) -> List[date]:
        """
        Generate the unadjusted period boundaries.

        The first date is the start date and the last date is the end date.

        Raises:
            ScheduleException: If the definition cannot produce a valid schedule
        """
        roll_conv = self.effective_roll_convention
        unadjusted = self._generate_unadjusted_dates(
            self.effective_first_regular_start_date,
            self.effective_last_regular_end_date,
            roll_conv,
        )
        # Ensure schedule is valid with no duplicated dates
        if len(set(unadjusted)) < len(unadjusted):
            raise ScheduleException(
                "Schedule calculation resulted in duplicate unadjusted dates "
                f"{_format_dates(unadjusted)}",
                self,
            )
        if any(prev >= curr for prev, curr in zip(unadjusted, unadjusted[1:])):
            raise self._out_of_order(unadjusted)
        logger.debug(
            "Generated %s unadjusted dates using roll convention %s", len(unadjusted), roll_conv
        )
        return unadjusted

    def create_adjusted_dates(self) -> List[date]:
        """
        Generate the business day adjusted period boundaries.

        Raises:
            ScheduleException: If the definition cannot produce a valid schedule,
                including when adjustment makes two boundaries coincide
        """
        return self._adjust_dates(self.create_unadjusted_dates())

    def _adjust_dates(self, unadjusted: List[date]) -> List[date]:
        adjusted = [self.effective_start_date_business_day_adjustment.adjust(unadjusted[0])]
        adjusted.extend(self.business_day_adjustment.adjust(d) for d in unadjusted[1:-1])
        adjusted.append(self.effective_end_date_business_day_adjustment.adjust(unadjusted[-1]))
        if len(set(adjusted)) < len(adjusted):
            raise ScheduleException(
                f"Schedule calculation resulted in duplicate adjusted dates {_format_dates(adjusted)} "
                f"from unadjusted dates {_format_dates(unadjusted)} "
                f"using adjustment '{self.business_day_adjustment}'",
                self,
            )
        if any(prev > curr for prev, curr in zip(adjusted, adjusted[1:])):
            raise ScheduleException(
                f"Schedule calculation resulted in adjusted dates out of order {_format_dates(adjusted)} "
                f"from unadjusted dates {_format_dates(unadjusted)}",
                self,
            )
        return adjusted

    def _generate_unadjusted_dates(
        self, regular_start: date, regular_end: date, roll_conv: RollConvention
    ) -> List[date]:
        explicit_initial_stub = regular_start != self.start_date
        explicit_final_stub = regular_end != self.end_date

        # Term period requires no stubs
        if self.frequency.is_term:
            if explicit_initial_stub or explicit_final_stub:
                raise ScheduleException(
                    "Schedule with term frequency must not have explicit stub dates", self
                )
            return [self.start_date, self.end_date]

        stub_conv = self._implicit_stub_convention(explicit_initial_stub, explicit_final_stub)
        if stub_conv.is_calculate_backwards:
            dates = self._generate_backwards(regular_start, regular_end, roll_conv, stub_conv)
        else:
            dates = self._generate_forwards(regular_start, regular_end, roll_conv, stub_conv)

        # Add explicit stub dates
        if explicit_initial_stub:
            dates.insert(0, self.start_date)
        if explicit_final_stub:
            dates.append(self.end_date)
        return dates

    def _implicit_stub_convention(
        self, explicit_initial_stub: bool, explicit_final_stub: bool
    ) -> StubConvention:
        # An absent convention is not the same as NONE: NONE rejects explicit
        # stubs, absent treats the part between them as having no stub
        if self.stub_convention is None:
            return StubConvention.NONE
        return self.stub_convention.to_implicit(self, explicit_initial_stub, explicit_final_stub)

    def _out_of_order(self, dates: List[date]) -> ScheduleException:
        return ScheduleException(
            "Schedule calculation resulted in unadjusted dates out of order "
            f"{_format_dates(dates)}",
            self,
        )

    def _check_period_count(self, dates: List[date], roll_conv: RollConvention) -> None:
        if len(dates) >= MAX_PERIODS:
            raise ScheduleException(
                f"Schedule generation exceeded {MAX_PERIODS} periods, "
                f"roll convention '{roll_conv}' is not progressing",
                self,
            )

    def _generate_backwards(
        self,
        start: date,
        end: date,
        roll_conv: RollConvention,
        stub_conv: StubConvention,
    ) -> List[date]:
        """Generate dates from the end date backwards, leaving any stub at the start."""
        if not roll_conv.matches(end):
            raise ScheduleException(
                f"Date '{end}' does not match roll convention '{roll_conv}' "
                "when starting to roll backwards",
                self,
            )
        logger.debug("Rolling backwards from %s to %s with %s", end, start, roll_conv)
        dates = [end]
        current = roll_conv.previous(end, self.frequency)
        while current > start:
            self._check_period_count(dates, roll_conv)
            if current > dates[-1]:
                raise self._out_of_order(list(reversed(dates + [current])))
            dates.append(current)
            current = roll_conv.previous(current, self.frequency)

        # Convert to long stub, but only if we actually have a stub
        if current != start and len(dates) > 1 and stub_conv.is_long:
            logger.debug("Merging initial stub into period ending %s", dates[-2])
            dates.pop()
        dates.append(start)
        dates.reverse()
        return dates

    def _generate_forwards(
        self,
        start: date,
        end: date,
        roll_conv: RollConvention,
        stub_conv: StubConvention,
    ) -> List[date]:
        """Generate dates from the start date forwards, leaving any stub at the end."""
        if not roll_conv.matches(start):
            raise ScheduleException(
                f"Date '{start}' does not match roll convention '{roll_conv}' "
                "when starting to roll forwards",
                self,
            )
        logger.debug("Rolling forwards from %s to %s with %s", start, end, roll_conv)
        dates = [start]
        current = roll_conv.next(start, self.frequency)
        while current < end:
            self._check_period_count(dates, roll_conv)
            if current < dates[-1]:
                raise self._out_of_order(dates + [current])
            dates.append(current)
            current = roll_conv.next(current, self.frequency)

        # A single period covering the whole range is never a stub
        if current != end and len(dates) > 1:
            if stub_conv == StubConvention.NONE:
                raise ScheduleException(
                    f"Period '{start}' to '{end}' resulted in a disallowed stub "
                    f"with frequency '{self.frequency}'",
                    self,
                )
            if stub_conv.is_long:
                logger.debug("Merging final stub into period starting %s", dates[-2])
                dates.pop()
        dates.append(end)
        return dates
