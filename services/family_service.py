from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import FamilyMember, DEFAULT_AVATAR
from domain.schemas.family_schemas import FamilyMemberCreate, FamilyMemberUpdate
from domain.validators import require_id, require_name
from repositories import FamilyMemberRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("dinnermatch.family")


class FamilyService:
    """Business logic for household members"""

    @staticmethod
    def list_members(db: Session) -> List[FamilyMember]:
        return FamilyMemberRepository(db).get_all()

    @staticmethod
    def get_member(db: Session, member_id: int) -> FamilyMember:
        require_id(member_id, "member ID")
        member = FamilyMemberRepository(db).get_by_id(member_id)
        if not member:
            logger.warning(f"member_not_found member_id={member_id}")
            raise NotFoundError("Member not found", details={"member_id": member_id})
        return member

    @staticmethod
    def create_member(db: Session, data: FamilyMemberCreate) -> FamilyMember:
        name = require_name(data.name)
        member = FamilyMember(
            name=name,
            avatar=data.avatar or DEFAULT_AVATAR,
            likes=data.likes or "",
            dislikes=data.dislikes or "",
            dietary=data.dietary or "",
        )
        member = FamilyMemberRepository(db).create(member)
        logger.info(f"member_created member_id={member.id}")
        return member

    @staticmethod
    def update_member(
        db: Session, member_id: int, data: FamilyMemberUpdate
    ) -> FamilyMember:
        """Apply a partial update; fields that are omitted or null stay as they are."""
        member = FamilyService.get_member(db, member_id)
        changes = data.model_dump(exclude_none=True)
        if "name" in changes:
            changes["name"] = require_name(changes["name"], "Name")

        for field, value in changes.items():
            setattr(member, field, value)

        member = FamilyMemberRepository(db).update(member)
        logger.info(f"member_updated member_id={member_id} fields={sorted(changes)}")
        return member

    @staticmethod
    def delete_member(db: Session, member_id: int) -> None:
        """Delete a member; their picks and diner entries go with them."""
        FamilyService.get_member(db, member_id)
        FamilyMemberRepository(db).delete(member_id)
        logger.info(f"member_deleted member_id={member_id}")
