"""
Domain enums for the Dinner Match application.
"""

import enum


class PlanStatus(str, enum.Enum):
    """Lifecycle of a weekly plan: planning -> voting -> locked"""

    PLANNING = "planning"
    VOTING = "voting"
    LOCKED = "locked"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]


class Weekday(int, enum.Enum):
    """Day-of-week index used by plans. Monday is 0, matching date.weekday()."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6
