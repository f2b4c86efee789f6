"""Voting routes - members pick the meals they'd be happy with this week"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas.plan_schemas import (
    MealPickSummary,
    MemberPicksResponse,
    MessageResponse,
    PickRequest,
)
from services.voting_service import VotingService

router = APIRouter(prefix="/plans/{plan_id}/picks", tags=["Voting"])


@router.get("", response_model=List[MealPickSummary])
def list_picks(plan_id: int, db: Session = Depends(get_db)):
    """Every meal with its vote count and pickers, most popular first."""
    return VotingService.list_picks(db, plan_id)


@router.get("/{member_id}", response_model=MemberPicksResponse)
def get_member_picks(plan_id: int, member_id: int, db: Session = Depends(get_db)):
    return MemberPicksResponse(picks=VotingService.get_member_picks(db, plan_id, member_id))


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def record_pick(plan_id: int, body: PickRequest, db: Session = Depends(get_db)):
    """Vote for a meal. Only allowed while the plan is in 'voting'; repeats are ignored."""
    VotingService.record_pick(db, plan_id, body.member_id, body.meal_id)
    return MessageResponse(message="Pick recorded")


@router.delete("", response_model=MessageResponse)
def remove_pick(plan_id: int, body: PickRequest, db: Session = Depends(get_db)):
    """Withdraw a vote. Removing a vote that doesn't exist is not an error."""
    VotingService.remove_pick(db, plan_id, body.member_id, body.meal_id)
    return MessageResponse(message="Pick removed")
