"""Hypothesis profiles and shared fixtures for the schedule tests."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from schedlib.conventions.calendars import WEEKEND_ONLY
from schedlib.conventions.types import BusinessDayConvention
from schedlib.schedule.adjustments import BusinessDayAdjustment

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def weekend_mod_following() -> BusinessDayAdjustment:
    """Modified following over a Saturday/Sunday calendar."""
    return BusinessDayAdjustment(BusinessDayConvention.MODIFIED_FOLLOWING, WEEKEND_ONLY)


@pytest.fixture
def weekend_preceding() -> BusinessDayAdjustment:
    return BusinessDayAdjustment(BusinessDayConvention.PRECEDING, WEEKEND_ONLY)
