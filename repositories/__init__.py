"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.family_repository import FamilyMemberRepository
from repositories.meal_repository import MealRepository
from repositories.plan_repository import WeeklyPlanRepository, WeeklyDayRepository
from repositories.pick_repository import WeeklyPickRepository

__all__ = [
    "BaseRepository",
    "FamilyMemberRepository",
    "MealRepository",
    "WeeklyPlanRepository",
    "WeeklyDayRepository",
    "WeeklyPickRepository",
]
