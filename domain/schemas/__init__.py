"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.family_schemas import (
    FamilyMemberCreate,
    FamilyMemberUpdate,
    FamilyMemberResponse,
)
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    FavouriteResponse,
)
from domain.schemas.plan_schemas import (
    CreatePlanRequest,
    PlanStatusUpdate,
    DinersUpdate,
    MealAssignment,
    PlanResponse,
    PlanCreatedResponse,
    PlanDayResponse,
    PlanDetailResponse,
    PickRequest,
    Picker,
    MealPickSummary,
    MemberPicksResponse,
    ShoppingListMeal,
    ShoppingListItem,
    ShoppingListResponse,
    MessageResponse,
)
from domain.schemas.suggestion_schemas import SuggestionRequest, SuggestionResponse

__all__ = [
    # Family schemas
    "FamilyMemberCreate",
    "FamilyMemberUpdate",
    "FamilyMemberResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "FavouriteResponse",
    # Plan schemas
    "CreatePlanRequest",
    "PlanStatusUpdate",
    "DinersUpdate",
    "MealAssignment",
    "PlanResponse",
    "PlanCreatedResponse",
    "PlanDayResponse",
    "PlanDetailResponse",
    "PickRequest",
    "Picker",
    "MealPickSummary",
    "MemberPicksResponse",
    "ShoppingListMeal",
    "ShoppingListItem",
    "ShoppingListResponse",
    "MessageResponse",
    # Suggestion schemas
    "SuggestionRequest",
    "SuggestionResponse",
]
