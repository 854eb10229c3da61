from calendar import monthrange
from datetime import date, datetime
from typing import Union

from pandas import Timestamp

DateLike = Union[str, date, datetime, Timestamp]

# Accepted string layouts, tried in order
_DATE_FORMATS = ("%Y-%m-%d", "%Y%m%d")


def _parse_date(text: str) -> date:
    value = text.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            pass
    raise ValueError(f"Cannot parse {text!r} as a date, expected YYYY-MM-DD or YYYYMMDD")


def to_date(value: DateLike) -> date:
    """Coerce a date-like value to a plain ``date``.

    pandas Timestamps and datetimes drop their time of day.
    """
    # Timestamp subclasses datetime, and datetime subclasses date
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_date(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a date")


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    return date(year, month, monthrange(year, month)[1])


def is_end_of_month(dt: date) -> bool:
    """Check if date is the last day of its month."""
    return dt.day == monthrange(dt.year, dt.month)[1]
