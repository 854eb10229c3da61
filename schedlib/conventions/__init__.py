# Re-export convention types
from .calendars import Calendar, get_calendar
from .roll import RollConvention
from .stub import StubConvention
from .types import TERM, BusinessDayConvention, Frequency, PeriodUnit
