"""
Meal (recipe) model.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Meal(Base):
    """A household recipe"""

    __tablename__ = "meal"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    ingredients = Column(Text, nullable=False, default="")  # one ingredient per line
    instructions = Column(Text, nullable=False, default="")
    category = Column(Text, nullable=False, default="")
    prep_time = Column(Text, nullable=False, default="")
    cook_time = Column(Text, nullable=False, default="")
    servings = Column(Text, nullable=False, default="")
    added_by = Column(Text, nullable=False, default="")
    is_family_favourite = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    picks = relationship(
        "WeeklyPick", back_populates="meal", cascade="all, delete-orphan"
    )
    # No delete cascade: removing a meal un-assigns the days instead
    days = relationship("WeeklyDay", back_populates="meal")
