from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.mappers import PlanMapper
from domain.schemas.plan_schemas import (
    CreatePlanRequest,
    DinersUpdate,
    MealAssignment,
    MessageResponse,
    PlanCreatedResponse,
    PlanDayResponse,
    PlanDetailResponse,
    PlanResponse,
    PlanStatusUpdate,
)
from services.planner_service import PlannerService

router = APIRouter(prefix="/plans", tags=["Weekly Plans"])


@router.get("", response_model=List[PlanResponse])
def list_plans(db: Session = Depends(get_db)):
    """All weekly plans, most recent week first."""
    return PlannerService.list_plans(db)


@router.get("/current", response_model=PlanDetailResponse)
def get_current_plan(db: Session = Depends(get_db)):
    """
    This week's plan with its days, or ``{"plan": null, "days": []}`` if none
    has been created yet.
    """
    return PlanMapper.to_detail(PlannerService.get_current_plan(db))


@router.get("/{plan_id}", response_model=PlanDetailResponse)
def get_plan(plan_id: int, db: Session = Depends(get_db)):
    """
    A plan and its seven days. Each day carries:
    - meal_id and the assigned meal's name, ingredients, instructions, category, prep_time
    - diners: ids of the members eating that day
    """
    return PlanMapper.to_detail(PlannerService.get_plan(db, plan_id))


@router.post("", response_model=PlanCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_plan(body: Optional[CreatePlanRequest] = None, db: Session = Depends(get_db)):
    """
    Create the plan for the week containing ``week_start`` (default: this week).

    The date is normalized to its Monday. If that week already has a plan the
    response is 409 and ``error.details.plan_id`` points at it.
    """
    plan = PlannerService.create_plan(db, body.week_start if body else None)
    return PlanCreatedResponse(
        id=plan.id,
        week_start=plan.week_start,
        status=plan.status,
        message="Plan created with 7 days",
    )


@router.put("/{plan_id}/status", response_model=PlanResponse)
def update_status(plan_id: int, body: PlanStatusUpdate, db: Session = Depends(get_db)):
    return PlannerService.set_status(db, plan_id, body.status)


@router.delete("/{plan_id}", response_model=MessageResponse)
def delete_plan(plan_id: int, db: Session = Depends(get_db)):
    PlannerService.delete_plan(db, plan_id)
    return MessageResponse(message="Plan deleted")


# ---------- days ----------


@router.put("/{plan_id}/days/{day_of_week}/diners", response_model=PlanDayResponse)
def set_diners(
    plan_id: int, day_of_week: int, body: DinersUpdate, db: Session = Depends(get_db)
):
    """Replace who is eating on a day (0 = Monday .. 6 = Sunday)."""
    day = PlannerService.set_diners(db, plan_id, day_of_week, body.diners)
    return PlanMapper.to_day_response(day)


@router.put("/{plan_id}/days/{day_of_week}/meal", response_model=PlanDayResponse)
def assign_meal(
    plan_id: int, day_of_week: int, body: MealAssignment, db: Session = Depends(get_db)
):
    """Assign a meal to a day, or clear it with ``{"meal_id": null}``."""
    day = PlannerService.assign_meal(db, plan_id, day_of_week, body.meal_id)
    return PlanMapper.to_day_response(day)
