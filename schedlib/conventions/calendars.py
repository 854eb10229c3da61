"""
QuantLib-backed holiday calendars.

Calendars answer whether a date is a business day. Extra holidays can be
layered on top of the QuantLib calendar without touching its shared state.
"""

from datetime import date, datetime
from typing import Dict, FrozenSet, Iterable, Union

import QuantLib as ql


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


class Calendar:
    """Holiday calendar for business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar, holidays: Iterable[date] = ()):
        self.name = name
        self._ql_calendar = ql_calendar
        self.holidays: FrozenSet[date] = frozenset(holidays)

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        if isinstance(dt, datetime):
            dt = dt.date()
        if dt in self.holidays:
            return False
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a holiday or weekend."""
        if isinstance(dt, datetime):
            dt = dt.date()
        if dt in self.holidays:
            return True
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def with_holidays(self, holidays: Iterable[date]) -> "Calendar":
        """Return a copy of this calendar with additional holidays."""
        return Calendar(self.name, self._ql_calendar, self.holidays | frozenset(holidays))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.name == other.name and self.holidays == other.holidays

    def __hash__(self) -> int:
        return hash((self.name, self.holidays))

    def __repr__(self) -> str:
        if self.holidays:
            return f"Calendar({self.name!r}, +{len(self.holidays)} holidays)"
        return f"Calendar({self.name!r})"


# Pre-defined calendar instances
TARGET = Calendar("TARGET", ql.TARGET())
WEEKEND_ONLY = Calendar("WEEKEND", ql.WeekendsOnly())
NO_HOLIDAYS = Calendar("NO_HOLIDAYS", ql.NullCalendar())
USNY = Calendar("USNY", ql.UnitedStates(ql.UnitedStates.Settlement))
GBLO = Calendar("GBLO", ql.UnitedKingdom(ql.UnitedKingdom.Settlement))

# Calendar registry
CALENDARS: Dict[str, Calendar] = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "WEEKEND": WEEKEND_ONLY,
    "SAT_SUN": WEEKEND_ONLY,  # Alias
    "NO_HOLIDAYS": NO_HOLIDAYS,
    "USNY": USNY,
    "GBLO": GBLO,
}


def get_calendar(name: str) -> Calendar:
    """
    Get a calendar by name.

    Args:
        name: Calendar name ("TARGET", "EUR", "WEEKEND", "SAT_SUN",
            "NO_HOLIDAYS", "USNY" or "GBLO")
    """
    key = name.upper().strip()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
