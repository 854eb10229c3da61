# Re-export schedule components
from .adjustments import (
    UNADJUSTED,
    BusinessDayAdjustment,
    DateAdjuster,
    adjust_date,
)
from .convenience import (
    ScheduleConfig,
    generate_euribor_3m_schedule,
    generate_euribor_6m_schedule,
)
from .core import Schedule, SchedulePeriod
from .generator import MAX_PERIODS, ScheduleDefinition
