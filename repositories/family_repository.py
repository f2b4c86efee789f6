"""
Family Repository - Data access layer for household members
"""

from typing import Iterable, List, Set
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import FamilyMember


class FamilyMemberRepository(BaseRepository[FamilyMember]):
    """Repository for family member data access"""

    def __init__(self, db: Session):
        super().__init__(db, FamilyMember)

    def get_many(self, member_ids: Iterable[int]) -> List[FamilyMember]:
        """Fetch the members whose ids are in ``member_ids`` (missing ids are skipped)"""
        ids = list(member_ids)
        if not ids:
            return []
        return (
            self.db.query(FamilyMember)
            .filter(FamilyMember.id.in_(ids))
            .order_by(FamilyMember.id)
            .all()
        )

    def missing_ids(self, member_ids: Iterable[int]) -> List[int]:
        """Return the ids from ``member_ids`` that do not resolve to a member, in input order"""
        ids = list(member_ids)
        found: Set[int] = {m.id for m in self.get_many(ids)}
        return [i for i in ids if i not in found]
