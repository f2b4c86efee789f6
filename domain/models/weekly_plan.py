"""
Weekly planning models: plans, their seven days, diners and picks.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Integer,
    Table,
    Text,
    TIMESTAMP,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.enums import PlanStatus
from domain.models.database import Base


weekly_day_diner = Table(
    "weekly_day_diner",
    Base.metadata,
    Column(
        "day_id",
        Integer,
        ForeignKey("weekly_day.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "member_id",
        Integer,
        ForeignKey("family_member.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class WeeklyPlan(Base):
    """One plan per calendar week, keyed by the Monday it starts on"""

    __tablename__ = "weekly_plan"
    __table_args__ = (
        CheckConstraint(
            "status IN ('planning', 'voting', 'locked')", name="ck_weekly_plan_status"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    week_start = Column(Date, nullable=False, unique=True)
    status = Column(Text, nullable=False, default=PlanStatus.PLANNING.value)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    days = relationship(
        "WeeklyDay",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="WeeklyDay.day_of_week",
    )
    picks = relationship(
        "WeeklyPick", back_populates="plan", cascade="all, delete-orphan"
    )


class WeeklyDay(Base):
    """A weekday slot within a plan: the assigned meal and who is eating"""

    __tablename__ = "weekly_day"
    __table_args__ = (
        UniqueConstraint("plan_id", "day_of_week", name="uq_weekly_day_plan_day"),
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_weekly_day_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    plan_id = Column(
        Integer, ForeignKey("weekly_plan.id", ondelete="CASCADE"), nullable=False
    )
    day_of_week = Column(Integer, nullable=False)  # 0 = Monday .. 6 = Sunday
    meal_id = Column(
        Integer, ForeignKey("meal.id", ondelete="SET NULL"), nullable=True, index=True
    )

    plan = relationship("WeeklyPlan", back_populates="days")
    meal = relationship("Meal", back_populates="days")
    diners = relationship(
        "FamilyMember",
        secondary=weekly_day_diner,
        back_populates="dining_days",
        order_by="FamilyMember.id",
    )


class WeeklyPick(Base):
    """A member's vote that a meal would be fine this week"""

    __tablename__ = "weekly_pick"
    __table_args__ = (
        UniqueConstraint(
            "plan_id", "member_id", "meal_id", name="uq_weekly_pick_triple"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    plan_id = Column(
        Integer, ForeignKey("weekly_plan.id", ondelete="CASCADE"), nullable=False
    )
    member_id = Column(
        Integer, ForeignKey("family_member.id", ondelete="CASCADE"), nullable=False
    )
    meal_id = Column(
        Integer, ForeignKey("meal.id", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    plan = relationship("WeeklyPlan", back_populates="picks")
    member = relationship("FamilyMember", back_populates="picks")
    meal = relationship("Meal", back_populates="picks")
