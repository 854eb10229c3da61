"""
Stub conventions for schedule generation.
"""

from datetime import date
from enum import Enum

from schedlib.conventions import roll
from schedlib.conventions.roll import RollConvention
from schedlib.conventions.types import Frequency
from schedlib.exceptions import ScheduleException
from schedlib.utils.date import is_end_of_month


class StubConvention(Enum):
    """How leftover time at either end of a schedule is handled.

    Initial conventions generate backwards from the end date, final ones
    forwards from the start date. Long conventions merge the leftover time
    into the neighbouring regular period instead of keeping a short stub.
    ``BOTH`` only applies when both stub dates are given explicitly.
    """

    NONE = "NONE"
    SHORT_INITIAL = "SHORT_INITIAL"
    LONG_INITIAL = "LONG_INITIAL"
    SHORT_FINAL = "SHORT_FINAL"
    LONG_FINAL = "LONG_FINAL"
    BOTH = "BOTH"

    @property
    def is_calculate_backwards(self) -> bool:
        return self in (StubConvention.SHORT_INITIAL, StubConvention.LONG_INITIAL)

    @property
    def is_long(self) -> bool:
        return self in (StubConvention.LONG_INITIAL, StubConvention.LONG_FINAL)

    def to_implicit(
        self, definition, explicit_initial_stub: bool, explicit_final_stub: bool
    ) -> "StubConvention":
        """
        Convert to the convention that applies once explicit stubs are removed.

        Args:
            definition: Schedule definition, attached to any exception raised
            explicit_initial_stub: Whether the first regular start date differs from the start date
            explicit_final_stub: Whether the last regular end date differs from the end date

        Returns:
            The stub convention for the regular part of the schedule

        Raises:
            ScheduleException: If the explicit stubs contradict this convention
        """
        if self is StubConvention.NONE:
            if explicit_initial_stub or explicit_final_stub:
                raise ScheduleException(
                    "Dates specify an explicit stub, but stub convention is 'NONE'", definition
                )
            return StubConvention.NONE

        if self is StubConvention.BOTH:
            if not (explicit_initial_stub and explicit_final_stub):
                raise ScheduleException(
                    "Stub convention is 'BOTH' but explicit dates do not specify "
                    "both an initial and a final stub",
                    definition,
                )
            return StubConvention.NONE

        if self.is_calculate_backwards:
            if explicit_final_stub:
                raise ScheduleException(
                    f"Dates specify an explicit final stub, but stub convention is '{self.value}'",
                    definition,
                )
            return StubConvention.NONE if explicit_initial_stub else self

        if explicit_initial_stub:
            raise ScheduleException(
                f"Dates specify an explicit initial stub, but stub convention is '{self.value}'",
                definition,
            )
        return StubConvention.NONE if explicit_final_stub else self

    def to_roll_convention(
        self, start: date, end: date, frequency: Frequency, prefer_end_of_month: bool
    ) -> RollConvention:
        """Derive the roll convention implied by the regular period bounds."""
        anchor = end if self.is_calculate_backwards else start
        return implied_roll_convention(anchor, frequency, prefer_end_of_month)


def implied_roll_convention(
    anchor: date, frequency: Frequency, prefer_end_of_month: bool
) -> RollConvention:
    """Roll convention implied by an anchor date and frequency."""
    if frequency.is_month_based:
        if prefer_end_of_month and is_end_of_month(anchor):
            return roll.EOM
        return roll.of_day_of_month(anchor.day)
    if frequency.is_week_based:
        return roll.of_day_of_week(anchor.weekday())
    # Neither monthly nor weekly means no known roll convention
    return roll.NONE
