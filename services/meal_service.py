from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from domain.validators import require_id, require_name
from repositories import MealRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("dinnermatch.meals")


class MealService:
    """Business logic for the household recipe collection"""

    @staticmethod
    def list_meals(
        db: Session, search: Optional[str] = None, category: Optional[str] = None
    ) -> List[Meal]:
        """All meals by name, optionally narrowed by a search term and/or category."""
        repo = MealRepository(db)
        if search or category:
            return repo.search(search=search, category=category)
        return repo.get_all()

    @staticmethod
    def get_meal(db: Session, meal_id: int) -> Meal:
        require_id(meal_id, "meal ID")
        meal = MealRepository(db).get_by_id(meal_id)
        if not meal:
            logger.warning(f"meal_not_found meal_id={meal_id}")
            raise NotFoundError("Meal not found", details={"meal_id": meal_id})
        return meal

    @staticmethod
    def create_meal(db: Session, data: MealCreate) -> Meal:
        name = require_name(data.name, "Meal name")
        meal = Meal(
            name=name,
            description=data.description or "",
            ingredients=data.ingredients or "",
            instructions=data.instructions or "",
            category=data.category or "",
            prep_time=data.prep_time or "",
            cook_time=data.cook_time or "",
            servings=data.servings or "",
            added_by=data.added_by or "",
            is_family_favourite=bool(data.is_family_favourite),
        )
        meal = MealRepository(db).create(meal)
        logger.info(f"meal_created meal_id={meal.id} name={meal.name!r}")
        return meal

    @staticmethod
    def update_meal(db: Session, meal_id: int, data: MealUpdate) -> Meal:
        """Partial update, including the family favourite flag."""
        meal = MealService.get_meal(db, meal_id)
        changes = data.model_dump(exclude_none=True)
        if "name" in changes:
            changes["name"] = require_name(changes["name"], "Meal name")

        for field, value in changes.items():
            setattr(meal, field, value)

        meal = MealRepository(db).update(meal)
        logger.info(f"meal_updated meal_id={meal_id} fields={sorted(changes)}")
        return meal

    @staticmethod
    def toggle_favourite(db: Session, meal_id: int) -> Meal:
        meal = MealService.get_meal(db, meal_id)
        meal.is_family_favourite = not meal.is_family_favourite
        meal = MealRepository(db).update(meal)
        logger.info(
            f"meal_favourite_toggled meal_id={meal_id} favourite={meal.is_family_favourite}"
        )
        return meal

    @staticmethod
    def delete_meal(db: Session, meal_id: int) -> None:
        """Delete a meal; its picks are removed and any day using it becomes unassigned."""
        MealService.get_meal(db, meal_id)
        MealRepository(db).delete(meal_id)
        logger.info(f"meal_deleted meal_id={meal_id}")
