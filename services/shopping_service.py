"""Shopping list service"""

import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Meal
from domain.validators import require_id
from repositories import WeeklyDayRepository, WeeklyPlanRepository

logger = logging.getLogger("dinnermatch.shopping")


def ingredient_lines(ingredients: str) -> List[str]:
    """Split ingredient text on "\\n" only into trimmed, non-blank lines."""
    if not ingredients:
        return []
    return [line.strip() for line in ingredients.split("\n") if line.strip()]


class ShoppingService:
    """Business logic for shopping list generation."""

    @staticmethod
    def build_shopping_list(db: Session, plan_id: int) -> Dict[str, List[Dict[str, Any]]]:
        """
        Derive the week's shopping list from the meals assigned to a plan.

        Algorithm:
        1. Walk the plan's days Monday to Sunday
        2. Keep each assigned meal once, in the order first seen
        3. Emit every non-blank ingredient line of each meal, verbatim but trimmed

        No quantity parsing or merging across meals is done.

        Returns:
            ``{"meals": [{id, name}], "ingredients": [{ingredient, from_meal}]}``

        Raises:
            NotFoundError: If the plan does not exist
        """
        require_id(plan_id, "plan ID")
        if not WeeklyPlanRepository(db).exists(plan_id):
            raise NotFoundError("Plan not found", details={"plan_id": plan_id})

        meals: List[Meal] = []
        seen: set[int] = set()
        for day in WeeklyDayRepository(db).get_by_plan_id(plan_id):
            if day.meal is None or day.meal.id in seen:
                continue
            seen.add(day.meal.id)
            meals.append(day.meal)

        items = [
            {"ingredient": line, "from_meal": meal.name}
            for meal in meals
            for line in ingredient_lines(meal.ingredients)
        ]

        logger.info(
            f"shopping_list_built plan_id={plan_id} meals={len(meals)} items={len(items)}"
        )
        return {
            "meals": [{"id": m.id, "name": m.name} for m in meals],
            "ingredients": items,
        }
