"""Dinner suggestion route"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas.meal_schemas import MealResponse
from domain.schemas.suggestion_schemas import SuggestionRequest, SuggestionResponse
from services.suggestion_service import SuggestionService

router = APIRouter(tags=["Suggestions"])


@router.post("/suggest", response_model=SuggestionResponse)
def suggest_dinner(body: Optional[SuggestionRequest] = None, db: Session = Depends(get_db)):
    """
    Suggest tonight's dinner for the members eating (everyone if omitted),
    scored on their likes, dislikes and dietary needs.
    """
    result = SuggestionService.suggest_meal(db, body.eating_tonight if body else None)
    return SuggestionResponse(
        **{**result, "meal_data": MealResponse.model_validate(result["meal_data"])}
    )
