"""
Tests for the database initialization script.
"""

from sqlalchemy.orm import Session

from test_fixtures import db_session, make_meal
from repositories import MealRepository
from scripts.init_db import STARTER_MEALS, create_tables, main, seed_meals


def test_create_tables_lists_schema(db_session: Session):
    tables = create_tables()
    for name in ("family_member", "meal", "weekly_plan", "weekly_day", "weekly_day_diner", "weekly_pick"):
        assert name in tables


def test_seed_meals_only_when_empty(db_session: Session):
    assert seed_meals(db_session) == len(STARTER_MEALS)
    assert MealRepository(db_session).count() == len(STARTER_MEALS)

    assert seed_meals(db_session) == 0
    assert MealRepository(db_session).count() == len(STARTER_MEALS)


def test_seed_skipped_when_meals_exist(db_session: Session):
    make_meal(db_session, "curry")
    assert seed_meals(db_session) == 0


def test_main_with_seed(db_session: Session):
    assert main(["--seed"]) == 0
    assert MealRepository(db_session).count() == len(STARTER_MEALS)
