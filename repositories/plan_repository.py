"""
Plan Repository - Data access layer for weekly plans and their days
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.enums import PlanStatus, Weekday
from domain.models import FamilyMember, WeeklyPlan, WeeklyDay


class WeeklyPlanRepository(BaseRepository[WeeklyPlan]):
    """Repository for weekly plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, WeeklyPlan)

    def get_with_days(self, plan_id: int) -> Optional[WeeklyPlan]:
        """Plan with days, assigned meals and diners eagerly loaded"""
        return (
            self.db.query(WeeklyPlan)
            .options(
                selectinload(WeeklyPlan.days).selectinload(WeeklyDay.meal),
                selectinload(WeeklyPlan.days).selectinload(WeeklyDay.diners),
            )
            .filter(WeeklyPlan.id == plan_id)
            .first()
        )

    def get_by_week_start(self, week_start: date) -> Optional[WeeklyPlan]:
        return (
            self.db.query(WeeklyPlan)
            .filter(WeeklyPlan.week_start == week_start)
            .first()
        )

    def get_all(self) -> List[WeeklyPlan]:
        """All plans, most recent week first"""
        return self.db.query(WeeklyPlan).order_by(WeeklyPlan.week_start.desc()).all()

    def create_with_days(self, week_start: date) -> WeeklyPlan:
        """
        Insert a plan and its seven day rows in a single transaction.

        Raises:
            IntegrityError: if another plan already owns ``week_start``; the
                session is rolled back so neither the plan nor any day persists
        """
        plan = WeeklyPlan(week_start=week_start, status=PlanStatus.PLANNING.value)
        plan.days = [WeeklyDay(day_of_week=day.value) for day in Weekday]
        self.db.add(plan)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(plan)
        return plan

    def set_status(self, plan: WeeklyPlan, status: PlanStatus) -> WeeklyPlan:
        plan.status = status.value
        return self.update(plan)


class WeeklyDayRepository(BaseRepository[WeeklyDay]):
    """Repository for the seven day slots of a plan"""

    def __init__(self, db: Session):
        super().__init__(db, WeeklyDay)

    def get_day(self, plan_id: int, day_of_week: int) -> Optional[WeeklyDay]:
        return (
            self.db.query(WeeklyDay)
            .filter(WeeklyDay.plan_id == plan_id, WeeklyDay.day_of_week == day_of_week)
            .first()
        )

    def get_by_plan_id(self, plan_id: int) -> List[WeeklyDay]:
        """Days of a plan in Monday..Sunday order"""
        return (
            self.db.query(WeeklyDay)
            .options(selectinload(WeeklyDay.meal), selectinload(WeeklyDay.diners))
            .filter(WeeklyDay.plan_id == plan_id)
            .order_by(WeeklyDay.day_of_week)
            .all()
        )

    def set_meal(self, day: WeeklyDay, meal_id: Optional[int]) -> WeeklyDay:
        day.meal_id = meal_id
        return self.update(day)

    def set_diners(self, day: WeeklyDay, members: List[FamilyMember]) -> WeeklyDay:
        """Replace the whole diner set for the day"""
        day.diners = list(members)
        return self.update(day)
