"""Weekly voting: who would be happy eating what this week"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.exceptions import InvalidStateError, NotFoundError
from domain.enums import PlanStatus
from domain.validators import require_id
from repositories import (
    FamilyMemberRepository,
    MealRepository,
    WeeklyPickRepository,
    WeeklyPlanRepository,
)

logger = logging.getLogger("dinnermatch.voting")


class VotingService:
    """Business logic for picks. Picks are only accepted while a plan is in 'voting'."""

    @staticmethod
    def _require_plan(db: Session, plan_id: int):
        plan = WeeklyPlanRepository(db).get_by_id(plan_id)
        if not plan:
            raise NotFoundError("Plan not found", details={"plan_id": plan_id})
        return plan

    @staticmethod
    def _require_member(db: Session, member_id: int) -> None:
        if not FamilyMemberRepository(db).exists(member_id):
            raise NotFoundError("Member not found", details={"member_id": member_id})

    @staticmethod
    def record_pick(db: Session, plan_id: int, member_id: int, meal_id: int) -> bool:
        """
        Record that ``member_id`` would eat ``meal_id`` during the plan's week.

        Recording the same triple again is a no-op.

        Returns:
            True if a new pick was stored, False if it already existed

        Raises:
            ServiceValidationError: malformed identifier
            NotFoundError: plan, member or meal does not exist
            InvalidStateError: plan status is not 'voting'
        """
        require_id(plan_id, "plan ID")
        require_id(member_id, "member ID")
        require_id(meal_id, "meal ID")

        plan = VotingService._require_plan(db, plan_id)
        VotingService._require_member(db, member_id)
        if not MealRepository(db).exists(meal_id):
            raise NotFoundError("Meal not found", details={"meal_id": meal_id})

        if plan.status != PlanStatus.VOTING.value:
            logger.warning(
                f"pick_rejected plan_id={plan_id} status={plan.status} "
                f"member_id={member_id} meal_id={meal_id}"
            )
            raise InvalidStateError(
                "Plan is not in voting phase",
                details={"plan_id": plan_id, "status": plan.status},
            )

        created = WeeklyPickRepository(db).add_if_absent(plan_id, member_id, meal_id)
        logger.info(
            f"pick_recorded plan_id={plan_id} member_id={member_id} "
            f"meal_id={meal_id} new={created}"
        )
        return created

    @staticmethod
    def remove_pick(db: Session, plan_id: int, member_id: int, meal_id: int) -> bool:
        """Remove a pick if present. Returns whether anything was deleted."""
        require_id(plan_id, "plan ID")
        require_id(member_id, "member ID")
        require_id(meal_id, "meal ID")

        removed = WeeklyPickRepository(db).remove(plan_id, member_id, meal_id) > 0
        logger.info(
            f"pick_removed plan_id={plan_id} member_id={member_id} "
            f"meal_id={meal_id} removed={removed}"
        )
        return removed

    @staticmethod
    def list_picks(db: Session, plan_id: int) -> List[Dict[str, Any]]:
        """
        Vote tally for a plan covering every meal, most picked first.

        Meals nobody picked are included with ``pick_count`` 0 and no pickers;
        ties are broken by meal name.
        """
        require_id(plan_id, "plan ID")
        VotingService._require_plan(db, plan_id)

        repo = WeeklyPickRepository(db)
        pickers = repo.pickers_by_meal(plan_id)
        return [
            {**row, "pickers": pickers.get(row["id"], [])}
            for row in repo.meal_pick_counts(plan_id)
        ]

    @staticmethod
    def get_member_picks(db: Session, plan_id: int, member_id: int) -> List[int]:
        """Meal ids picked by one member in this plan."""
        require_id(plan_id, "plan ID")
        require_id(member_id, "member ID")
        VotingService._require_plan(db, plan_id)
        VotingService._require_member(db, member_id)
        return WeeklyPickRepository(db).meal_ids_for_member(plan_id, member_id)
