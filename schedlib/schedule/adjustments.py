"""
Date adjustment functions for schedule generation.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol, Union

from schedlib.conventions.calendars import NO_HOLIDAYS, Calendar
from schedlib.conventions.types import BusinessDayConvention

_ONE_DAY = timedelta(days=1)


def _roll_forward(dt: date, calendar: Calendar) -> date:
    while not calendar.is_business_day(dt):
        dt += _ONE_DAY
    return dt


def _roll_backward(dt: date, calendar: Calendar) -> date:
    while not calendar.is_business_day(dt):
        dt -= _ONE_DAY
    return dt


def adjust_date(
    dt: Union[date, datetime], convention: BusinessDayConvention, calendar: Calendar
) -> date:
    """Apply a business day convention to a date."""
    if isinstance(dt, datetime):
        dt = dt.date()

    if convention == BusinessDayConvention.NO_ADJUSTMENT:
        return dt

    elif convention == BusinessDayConvention.FOLLOWING:
        return _roll_forward(dt, calendar)

    elif convention == BusinessDayConvention.MODIFIED_FOLLOWING:
        adjusted = _roll_forward(dt, calendar)
        # If month changed, use preceding instead
        if adjusted.month != dt.month:
            adjusted = _roll_backward(dt, calendar)
        return adjusted

    elif convention == BusinessDayConvention.PRECEDING:
        return _roll_backward(dt, calendar)

    elif convention == BusinessDayConvention.MODIFIED_PRECEDING:
        adjusted = _roll_backward(dt, calendar)
        # If month changed, use following instead
        if adjusted.month != dt.month:
            adjusted = _roll_forward(dt, calendar)
        return adjusted

    else:
        raise ValueError(f"Unknown business day convention: {convention}")


class DateAdjuster(Protocol):
    """Anything that maps a date onto the date actually used."""

    def adjust(self, dt: date) -> date:
        ...


@dataclass(frozen=True)
class BusinessDayAdjustment:
    """A business day convention paired with the calendar it applies to."""

    convention: BusinessDayConvention
    calendar: Calendar = NO_HOLIDAYS

    def __post_init__(self):
        if not isinstance(self.convention, BusinessDayConvention):
            raise TypeError(f"Expected BusinessDayConvention, got {self.convention!r}")
        if not isinstance(self.calendar, Calendar):
            raise TypeError(f"Expected Calendar, got {self.calendar!r}")

    def adjust(self, dt: date) -> date:
        return adjust_date(dt, self.convention, self.calendar)

    def __str__(self) -> str:
        if self.convention == BusinessDayConvention.NO_ADJUSTMENT:
            return self.convention.value
        return f"{self.convention.value} using calendar {self.calendar.name}"


UNADJUSTED = BusinessDayAdjustment(BusinessDayConvention.NO_ADJUSTMENT)
