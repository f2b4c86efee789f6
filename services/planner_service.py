from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import ConflictError, InvalidStateError, NotFoundError, ServiceValidationError
from domain.enums import PlanStatus
from domain.models import WeeklyDay, WeeklyPlan
from domain.validators import require_day_of_week, require_diners, require_id, require_status
from repositories import (
    FamilyMemberRepository,
    MealRepository,
    WeeklyDayRepository,
    WeeklyPlanRepository,
)


logger = logging.getLogger("dinnermatch.planner")


def week_start_for(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


class PlannerService:
    """
    Weekly plan lifecycle and day assignment.

    - a plan is created for a Monday together with its seven days
    - status moves between planning, voting and locked
    - each day holds an optional meal and a set of diners
    """

    # ---------- lookups ----------

    @staticmethod
    def get_plan(db: Session, plan_id: int) -> WeeklyPlan:
        require_id(plan_id, "plan ID")
        plan = WeeklyPlanRepository(db).get_with_days(plan_id)
        if not plan:
            logger.warning(f"plan_not_found plan_id={plan_id}")
            raise NotFoundError("Plan not found", details={"plan_id": plan_id})
        return plan

    @staticmethod
    def get_current_plan(db: Session, today: Optional[date] = None) -> Optional[WeeklyPlan]:
        """The plan for this week, or None if nobody has started one."""
        monday = week_start_for(today or date.today())
        plan = WeeklyPlanRepository(db).get_by_week_start(monday)
        if plan is None:
            return None
        return WeeklyPlanRepository(db).get_with_days(plan.id)

    @staticmethod
    def list_plans(db: Session) -> List[WeeklyPlan]:
        return WeeklyPlanRepository(db).get_all()

    @staticmethod
    def get_day(db: Session, plan_id: int, day_of_week: int) -> WeeklyDay:
        require_id(plan_id, "plan ID")
        require_day_of_week(day_of_week)
        if not WeeklyPlanRepository(db).exists(plan_id):
            raise NotFoundError("Plan not found", details={"plan_id": plan_id})
        day = WeeklyDayRepository(db).get_day(plan_id, day_of_week)
        if not day:
            raise NotFoundError(
                "Day not found", details={"plan_id": plan_id, "day_of_week": day_of_week}
            )
        return day

    # ---------- lifecycle ----------

    @staticmethod
    def create_plan(db: Session, week_start: Optional[date] = None) -> WeeklyPlan:
        """
        Create the plan for the week containing ``week_start`` (default: this week).

        Raises:
            ConflictError: a plan already exists for that Monday; ``details``
                carries its ``plan_id`` so the caller can go there instead
        """
        monday = week_start_for(week_start or date.today())
        repo = WeeklyPlanRepository(db)

        existing = repo.get_by_week_start(monday)
        if existing:
            logger.info(f"plan_exists week_start={monday} plan_id={existing.id}")
            raise ConflictError(
                "Plan already exists for this week",
                details={"plan_id": existing.id, "week_start": monday.isoformat()},
            )

        try:
            plan = repo.create_with_days(monday)
        except IntegrityError:
            # lost a race with another request creating the same week
            existing = repo.get_by_week_start(monday)
            if existing is None:
                raise
            raise ConflictError(
                "Plan already exists for this week",
                details={"plan_id": existing.id, "week_start": monday.isoformat()},
            )

        logger.info(f"plan_created plan_id={plan.id} week_start={monday} days={len(plan.days)}")
        return plan

    @staticmethod
    def set_status(db: Session, plan_id: int, status: str) -> WeeklyPlan:
        """Move a plan to any of planning, voting or locked."""
        require_id(plan_id, "plan ID")
        new_status = require_status(status)

        repo = WeeklyPlanRepository(db)
        plan = repo.get_by_id(plan_id)
        if not plan:
            raise NotFoundError("Plan not found", details={"plan_id": plan_id})

        previous = plan.status
        plan = repo.set_status(plan, new_status)
        logger.info(f"plan_status_changed plan_id={plan_id} from={previous} to={plan.status}")
        return plan

    @staticmethod
    def delete_plan(db: Session, plan_id: int) -> None:
        """Delete a plan with its days, diners and picks."""
        require_id(plan_id, "plan ID")
        if not WeeklyPlanRepository(db).delete(plan_id):
            raise NotFoundError("Plan not found", details={"plan_id": plan_id})
        logger.info(f"plan_deleted plan_id={plan_id}")

    # ---------- day assignment ----------

    @staticmethod
    def _ensure_assignable(day: WeeklyDay, lock_assignments: Optional[bool]) -> None:
        if lock_assignments is None:
            lock_assignments = settings.lock_assignments
        if lock_assignments and day.plan.status == PlanStatus.LOCKED.value:
            raise InvalidStateError(
                "Plan is locked", details={"plan_id": day.plan_id, "status": day.plan.status}
            )

    @staticmethod
    def set_diners(
        db: Session,
        plan_id: int,
        day_of_week: int,
        member_ids: Iterable[int],
        lock_assignments: Optional[bool] = None,
    ) -> WeeklyDay:
        """Replace who is eating on a day. Every id must be an existing member."""
        require_id(plan_id, "plan ID")
        require_day_of_week(day_of_week)
        ids = require_diners(member_ids)

        day = PlannerService.get_day(db, plan_id, day_of_week)

        members_repo = FamilyMemberRepository(db)
        missing = members_repo.missing_ids(ids)
        if missing:
            logger.warning(f"diners_rejected plan_id={plan_id} day={day_of_week} missing={missing}")
            raise ServiceValidationError(
                f"Member ID {missing[0]} not found", details={"missing": missing}
            )

        PlannerService._ensure_assignable(day, lock_assignments)

        day = WeeklyDayRepository(db).set_diners(day, members_repo.get_many(ids))
        logger.info(f"diners_updated plan_id={plan_id} day={day_of_week} diners={sorted(ids)}")
        return day

    @staticmethod
    def assign_meal(
        db: Session,
        plan_id: int,
        day_of_week: int,
        meal_id: Optional[int],
        lock_assignments: Optional[bool] = None,
    ) -> WeeklyDay:
        """Set the day's meal, or clear it when ``meal_id`` is None."""
        require_id(plan_id, "plan ID")
        require_day_of_week(day_of_week)
        if meal_id is not None:
            require_id(meal_id, "meal ID")
            if not MealRepository(db).exists(meal_id):
                raise NotFoundError("Meal not found", details={"meal_id": meal_id})

        day = PlannerService.get_day(db, plan_id, day_of_week)
        PlannerService._ensure_assignable(day, lock_assignments)

        day = WeeklyDayRepository(db).set_meal(day, meal_id)
        if meal_id is None:
            logger.info(f"meal_unassigned plan_id={plan_id} day={day_of_week}")
        else:
            logger.info(f"meal_assigned plan_id={plan_id} day={day_of_week} meal_id={meal_id}")
        return day
