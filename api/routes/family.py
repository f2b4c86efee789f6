"""Family member routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_db
from domain.schemas.family_schemas import (
    FamilyMemberCreate,
    FamilyMemberUpdate,
    FamilyMemberResponse,
)
from domain.schemas.plan_schemas import MessageResponse
from services.family_service import FamilyService

router = APIRouter(prefix="/family", tags=["Family"])


@router.get("", response_model=List[FamilyMemberResponse])
def list_members(db: Session = Depends(get_db)):
    """Everyone in the household, in the order they were added."""
    return FamilyService.list_members(db)


@router.get("/{member_id}", response_model=FamilyMemberResponse)
def get_member(member_id: int, db: Session = Depends(get_db)):
    return FamilyService.get_member(db, member_id)


@router.post(
    "", response_model=FamilyMemberResponse, status_code=status.HTTP_201_CREATED
)
def create_member(member: FamilyMemberCreate, db: Session = Depends(get_db)):
    """Add a family member. ``name`` is required; avatar defaults to 👤."""
    return FamilyService.create_member(db, member)


@router.put("/{member_id}", response_model=FamilyMemberResponse)
def update_member(
    member_id: int, changes: FamilyMemberUpdate, db: Session = Depends(get_db)
):
    """Partial update: only the supplied fields change."""
    return FamilyService.update_member(db, member_id, changes)


@router.delete("/{member_id}", response_model=MessageResponse)
def delete_member(member_id: int, db: Session = Depends(get_db)):
    """Delete a member together with their picks and diner entries."""
    FamilyService.delete_member(db, member_id)
    return MessageResponse(message="Member deleted")
