"""Shopping list routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas.plan_schemas import ShoppingListResponse
from services.shopping_service import ShoppingService

router = APIRouter(tags=["Shopping"])


@router.get("/plans/{plan_id}/shopping-list", response_model=ShoppingListResponse)
def get_shopping_list(plan_id: int, db: Session = Depends(get_db)):
    """
    Ingredient lines of every meal assigned in the plan.

    A meal used on several days is listed once; lines are passed through as
    written, one entry per line, tagged with the meal they came from.
    """
    return ShoppingService.build_shopping_list(db, plan_id)
