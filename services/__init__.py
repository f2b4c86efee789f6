"""Services package - Business logic layer"""

from services.family_service import FamilyService
from services.meal_service import MealService
from services.planner_service import PlannerService, week_start_for
from services.voting_service import VotingService
from services.shopping_service import ShoppingService
from services.suggestion_service import SuggestionService

__all__ = [
    "FamilyService",
    "MealService",
    "PlannerService",
    "week_start_for",
    "VotingService",
    "ShoppingService",
    "SuggestionService",
]
