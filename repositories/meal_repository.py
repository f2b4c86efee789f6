"""
Meal Repository - Data access layer for household recipes
"""

from typing import List, Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_all(self) -> List[Meal]:
        """All meals ordered by name"""
        return self.db.query(Meal).order_by(Meal.name, Meal.id).all()

    def search(
        self, search: Optional[str] = None, category: Optional[str] = None
    ) -> List[Meal]:
        """
        Filter meals by a case-insensitive substring of name or ingredients
        and/or an exact category, ordered by name.
        """
        query = self.db.query(Meal)
        if search:
            pattern = f"%{search.lower()}%"
            query = query.filter(
                or_(
                    func.lower(Meal.name).like(pattern),
                    func.lower(Meal.ingredients).like(pattern),
                )
            )
        if category:
            query = query.filter(Meal.category == category)
        return query.order_by(Meal.name, Meal.id).all()

    def count(self) -> int:
        return self.db.query(func.count(Meal.id)).scalar() or 0
