"""
Meal routes - the household recipe collection.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from api.dependencies import get_db
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    FavouriteResponse,
)
from domain.schemas.plan_schemas import MessageResponse
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])


@router.get("", response_model=List[MealResponse])
def list_meals(
    search: Optional[str] = Query(
        default=None, description="Case-insensitive match on name or ingredients"
    ),
    category: Optional[str] = Query(default=None, description="Exact category"),
    db: Session = Depends(get_db),
):
    """
    List meals ordered by name.

    - **search**: substring of the name or ingredient text
    - **category**: e.g. "Comfort Food", "Vegetarian"
    """
    return MealService.list_meals(db, search=search, category=category)


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(meal_id: int, db: Session = Depends(get_db)):
    return MealService.get_meal(db, meal_id)


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(meal: MealCreate, db: Session = Depends(get_db)):
    return MealService.create_meal(db, meal)


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(meal_id: int, changes: MealUpdate, db: Session = Depends(get_db)):
    """Partial update; may also set ``is_family_favourite``."""
    return MealService.update_meal(db, meal_id, changes)


@router.put("/{meal_id}/favourite", response_model=FavouriteResponse)
def toggle_favourite(meal_id: int, db: Session = Depends(get_db)):
    """Flip the family favourite flag."""
    meal = MealService.toggle_favourite(db, meal_id)
    return FavouriteResponse(id=meal.id, is_family_favourite=meal.is_family_favourite)


@router.delete("/{meal_id}", response_model=MessageResponse)
def delete_meal(meal_id: int, db: Session = Depends(get_db)):
    """Delete a meal. Picks for it are removed and days using it become unassigned."""
    MealService.delete_meal(db, meal_id)
    return MessageResponse(message="Meal deleted")
