"""Periodic Schedule Generator.

This package generates payment and accrual schedules for financial
instruments from a start date, end date, frequency, stub and roll
conventions and business day adjustments.

Key modules:
- schedule: Schedule definition, generation and output types
- conventions: Frequencies, roll and stub conventions, holiday calendars
- exceptions: ScheduleException raised on invalid definitions
"""

from schedlib.conventions import (
    BusinessDayConvention,
    Calendar,
    Frequency,
    RollConvention,
    StubConvention,
    get_calendar,
)
from schedlib.exceptions import ScheduleException
from schedlib.schedule import (
    BusinessDayAdjustment,
    Schedule,
    ScheduleConfig,
    ScheduleDefinition,
    SchedulePeriod,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BusinessDayAdjustment",
    "BusinessDayConvention",
    "Calendar",
    "Frequency",
    "RollConvention",
    "Schedule",
    "ScheduleConfig",
    "ScheduleDefinition",
    "ScheduleException",
    "SchedulePeriod",
    "StubConvention",
    "get_calendar",
]
