"""
Family member model.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


DEFAULT_AVATAR = "👤"


class FamilyMember(Base):
    """Someone in the household who votes and eats"""

    __tablename__ = "family_member"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    avatar = Column(Text, nullable=False, default=DEFAULT_AVATAR)
    likes = Column(Text, nullable=False, default="")  # comma separated keywords
    dislikes = Column(Text, nullable=False, default="")
    dietary = Column(Text, nullable=False, default="")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    picks = relationship(
        "WeeklyPick", back_populates="member", cascade="all, delete-orphan"
    )
    dining_days = relationship(
        "WeeklyDay", secondary="weekly_day_diner", back_populates="diners"
    )
