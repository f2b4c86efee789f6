"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.family import FamilyMember, DEFAULT_AVATAR
from domain.models.meal import Meal
from domain.models.weekly_plan import (
    WeeklyPlan,
    WeeklyDay,
    WeeklyPick,
    weekly_day_diner,
)

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Household
    "FamilyMember",
    "DEFAULT_AVATAR",
    "Meal",
    # Weekly planning
    "WeeklyPlan",
    "WeeklyDay",
    "WeeklyPick",
    "weekly_day_diner",
]
