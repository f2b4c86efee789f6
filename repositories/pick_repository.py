"""
Pick Repository - Data access layer for weekly votes
"""

from collections import defaultdict
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import FamilyMember, Meal, WeeklyPick


class WeeklyPickRepository(BaseRepository[WeeklyPick]):
    """Repository for pick (vote) data access"""

    def __init__(self, db: Session):
        super().__init__(db, WeeklyPick)

    def get_pick(self, plan_id: int, member_id: int, meal_id: int) -> Optional[WeeklyPick]:
        return (
            self.db.query(WeeklyPick)
            .filter(
                WeeklyPick.plan_id == plan_id,
                WeeklyPick.member_id == member_id,
                WeeklyPick.meal_id == meal_id,
            )
            .first()
        )

    def add_if_absent(self, plan_id: int, member_id: int, meal_id: int) -> bool:
        """
        Insert the pick unless the triple already exists.

        Returns True when a row was written. A duplicate, including one that
        lands between the existence check and the insert, is a no-op.
        """
        if self.get_pick(plan_id, member_id, meal_id) is not None:
            return False
        self.db.add(WeeklyPick(plan_id=plan_id, member_id=member_id, meal_id=meal_id))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return False
        return True

    def remove(self, plan_id: int, member_id: int, meal_id: int) -> int:
        """Delete the triple if present; returns the number of rows removed"""
        count = (
            self.db.query(WeeklyPick)
            .filter(
                WeeklyPick.plan_id == plan_id,
                WeeklyPick.member_id == member_id,
                WeeklyPick.meal_id == meal_id,
            )
            .delete(synchronize_session="fetch")
        )
        self.db.commit()
        return count

    def meal_ids_for_member(self, plan_id: int, member_id: int) -> List[int]:
        rows = (
            self.db.query(WeeklyPick.meal_id)
            .filter(WeeklyPick.plan_id == plan_id, WeeklyPick.member_id == member_id)
            .order_by(WeeklyPick.id)
            .all()
        )
        return [r.meal_id for r in rows]

    def meal_pick_counts(self, plan_id: int) -> List[Dict[str, Any]]:
        """
        Every meal with its number of picks in this plan, zero included.

        Ordered by pick count descending, then meal name, then id.
        """
        pick_count = func.count(WeeklyPick.id).label("pick_count")
        rows = (
            self.db.query(
                Meal.id,
                Meal.name,
                Meal.category,
                Meal.prep_time,
                pick_count,
            )
            .outerjoin(
                WeeklyPick,
                and_(WeeklyPick.meal_id == Meal.id, WeeklyPick.plan_id == plan_id),
            )
            .group_by(Meal.id, Meal.name, Meal.category, Meal.prep_time)
            .order_by(pick_count.desc(), Meal.name, Meal.id)
            .all()
        )
        return [dict(r._mapping) for r in rows]

    def pickers_by_meal(self, plan_id: int) -> Dict[int, List[Dict[str, Any]]]:
        """Members who picked each meal in this plan, in vote order"""
        rows = (
            self.db.query(
                WeeklyPick.meal_id,
                FamilyMember.id,
                FamilyMember.name,
                FamilyMember.avatar,
            )
            .join(FamilyMember, WeeklyPick.member_id == FamilyMember.id)
            .filter(WeeklyPick.plan_id == plan_id)
            .order_by(WeeklyPick.id)
            .all()
        )
        pickers: Dict[int, List[Dict[str, Any]]] = defaultdict(list)
        for meal_id, member_id, name, avatar in rows:
            pickers[meal_id].append({"id": member_id, "name": name, "avatar": avatar})
        return pickers
