"""
Name-based schedule configuration and convenience functions for common EUR schedules.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from schedlib.conventions import roll
from schedlib.conventions.calendars import get_calendar
from schedlib.conventions.stub import StubConvention
from schedlib.conventions.types import P3M, P6M, BusinessDayConvention, Frequency
from schedlib.utils.date import DateLike, to_date

from .adjustments import BusinessDayAdjustment
from .core import Schedule
from .generator import ScheduleDefinition


def _business_day_convention(name: str) -> BusinessDayConvention:
    try:
        return BusinessDayConvention[name.upper().strip()]
    except KeyError as exc:
        raise ValueError(f"Unknown business day convention: {name}") from exc


def _stub_convention(name: str) -> StubConvention:
    try:
        return StubConvention[name.upper().strip()]
    except KeyError as exc:
        raise ValueError(f"Unknown stub convention: {name}") from exc


def _optional_date(value: Optional[DateLike]) -> Optional[date]:
    return None if value is None else to_date(value)


@dataclass
class ScheduleConfig:
    """Schedule definition expressed with plain values and convention names."""

    start_date: DateLike
    end_date: DateLike
    frequency: str = "3M"
    calendar: str = "TARGET"
    business_day_convention: str = "MODIFIED_FOLLOWING"
    start_date_business_day_convention: Optional[str] = None
    end_date_business_day_convention: Optional[str] = None
    stub_convention: Optional[str] = "SHORT_INITIAL"
    roll_convention: Optional[str] = None
    first_regular_start_date: Optional[DateLike] = None
    last_regular_end_date: Optional[DateLike] = None

    def build_definition(self) -> ScheduleDefinition:
        """Resolve the names and build the schedule definition."""
        calendar = get_calendar(self.calendar)

        def adjustment(name: Optional[str]) -> Optional[BusinessDayAdjustment]:
            if name is None:
                return None
            return BusinessDayAdjustment(_business_day_convention(name), calendar)

        return ScheduleDefinition(
            start_date=to_date(self.start_date),
            end_date=to_date(self.end_date),
            frequency=Frequency.parse(self.frequency),
            business_day_adjustment=adjustment(self.business_day_convention),
            start_date_business_day_adjustment=adjustment(self.start_date_business_day_convention),
            end_date_business_day_adjustment=adjustment(self.end_date_business_day_convention),
            stub_convention=(
                None if self.stub_convention is None else _stub_convention(self.stub_convention)
            ),
            roll_convention=None if self.roll_convention is None else roll.of(self.roll_convention),
            first_regular_start_date=_optional_date(self.first_regular_start_date),
            last_regular_end_date=_optional_date(self.last_regular_end_date),
        )

    def create_schedule(self) -> Schedule:
        return self.build_definition().create_schedule()


def generate_euribor_3m_schedule(effective_date: DateLike, maturity_date: DateLike) -> Schedule:
    """Generate quarterly EURIBOR 3M schedule."""
    return _euribor_definition(effective_date, maturity_date, P3M).create_schedule()


def generate_euribor_6m_schedule(effective_date: DateLike, maturity_date: DateLike) -> Schedule:
    """Generate semiannual EURIBOR 6M schedule."""
    return _euribor_definition(effective_date, maturity_date, P6M).create_schedule()


def _euribor_definition(
    effective_date: DateLike, maturity_date: DateLike, frequency: Frequency
) -> ScheduleDefinition:
    return ScheduleDefinition.of_end_of_month(
        to_date(effective_date),
        to_date(maturity_date),
        frequency,
        BusinessDayAdjustment(BusinessDayConvention.MODIFIED_FOLLOWING, get_calendar("TARGET")),
        StubConvention.SHORT_INITIAL,
        end_of_month=True,
    )
