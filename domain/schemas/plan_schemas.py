from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt


class CreatePlanRequest(BaseModel):
    week_start: Optional[date] = Field(
        None, description="Any date in the week; normalized to its Monday"
    )


class PlanStatusUpdate(BaseModel):
    status: str = Field(..., description="planning, voting or locked")


class DinersUpdate(BaseModel):
    diners: List[StrictInt] = Field(..., description="Member ids eating that day")


class MealAssignment(BaseModel):
    # required key, null clears the day
    meal_id: Optional[StrictInt] = Field(..., description="Meal id, or null to unassign")


class PlanResponse(BaseModel):
    id: int
    week_start: date
    status: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PlanCreatedResponse(BaseModel):
    id: int
    week_start: date
    status: str
    message: str


class PlanDayResponse(BaseModel):
    id: int
    plan_id: int
    day_of_week: int
    meal_id: Optional[int] = None
    diners: List[int] = Field(default_factory=list)
    meal_name: Optional[str] = None
    ingredients: Optional[str] = None
    instructions: Optional[str] = None
    category: Optional[str] = None
    prep_time: Optional[str] = None


class PlanDetailResponse(BaseModel):
    plan: Optional[PlanResponse] = None
    days: List[PlanDayResponse] = Field(default_factory=list)


class PickRequest(BaseModel):
    member_id: StrictInt
    meal_id: StrictInt


class Picker(BaseModel):
    id: int
    name: str
    avatar: str


class MealPickSummary(BaseModel):
    id: int
    name: str
    category: str
    prep_time: str
    pick_count: int
    pickers: List[Picker] = Field(default_factory=list)


class MemberPicksResponse(BaseModel):
    picks: List[int]


class ShoppingListMeal(BaseModel):
    id: int
    name: str


class ShoppingListItem(BaseModel):
    ingredient: str
    from_meal: str


class ShoppingListResponse(BaseModel):
    meals: List[ShoppingListMeal] = Field(default_factory=list)
    ingredients: List[ShoppingListItem] = Field(default_factory=list)


class MessageResponse(BaseModel):
    status: str = "ok"
    message: str
