"""Schemas for meals (recipes)"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MealCreate(BaseModel):
    name: str = Field(..., description="Meal name (required, non-empty)")
    description: Optional[str] = None
    ingredients: Optional[str] = Field(None, description="One ingredient per line")
    instructions: Optional[str] = None
    category: Optional[str] = None
    prep_time: Optional[str] = Field(None, examples=["15 mins"])
    cook_time: Optional[str] = None
    servings: Optional[str] = None
    added_by: Optional[str] = None
    is_family_favourite: bool = False


class MealUpdate(BaseModel):
    """Partial update: omitted or null fields are left unchanged."""

    name: Optional[str] = None
    description: Optional[str] = None
    ingredients: Optional[str] = None
    instructions: Optional[str] = None
    category: Optional[str] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    servings: Optional[str] = None
    is_family_favourite: Optional[bool] = None


class MealResponse(BaseModel):
    id: int
    name: str
    description: str
    ingredients: str
    instructions: str
    category: str
    prep_time: str
    cook_time: str
    servings: str
    added_by: str
    is_family_favourite: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class FavouriteResponse(BaseModel):
    id: int
    is_family_favourite: bool
