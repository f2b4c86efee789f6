"""
Plan domain mappers.
Handles transformation between ORM models and DTOs for weekly plans.
"""

from typing import Iterable, Optional

from domain.models import WeeklyPlan, WeeklyDay
from domain.schemas.plan_schemas import (
    PlanResponse,
    PlanDayResponse,
    PlanDetailResponse,
)


class PlanMapper:
    """Mapper for weekly plan transformations."""

    @staticmethod
    def to_day_response(day: WeeklyDay) -> PlanDayResponse:
        """
        Convert a WeeklyDay to its API shape.

        Flattens the assigned meal's display fields onto the day and turns the
        diner relationship into a sorted list of member ids.
        """
        meal = day.meal
        return PlanDayResponse(
            id=day.id,
            plan_id=day.plan_id,
            day_of_week=day.day_of_week,
            meal_id=day.meal_id,
            diners=sorted(member.id for member in day.diners),
            meal_name=meal.name if meal else None,
            ingredients=meal.ingredients if meal else None,
            instructions=meal.instructions if meal else None,
            category=meal.category if meal else None,
            prep_time=meal.prep_time if meal else None,
        )

    @staticmethod
    def to_detail(
        plan: Optional[WeeklyPlan], days: Optional[Iterable[WeeklyDay]] = None
    ) -> PlanDetailResponse:
        """Plan plus its days; a missing plan maps to ``{"plan": null, "days": []}``."""
        if plan is None:
            return PlanDetailResponse(plan=None, days=[])
        if days is None:
            days = plan.days
        return PlanDetailResponse(
            plan=PlanResponse.model_validate(plan),
            days=[PlanMapper.to_day_response(d) for d in days],
        )
