#!/usr/bin/env python3
"""
Create the Dinner Match tables and optionally preload a few meals.

Usage:
    python scripts/init_db.py            # create tables only
    python scripts/init_db.py --seed     # also add starter meals if there are none

DATABASE_URL is read the same way the app reads it (environment or .env).
"""

import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from domain.models import Meal, SessionLocal, engine, init_database
from repositories import MealRepository

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("dinnermatch.init_db")


STARTER_MEALS = [
    {
        "name": "Spaghetti Bolognese",
        "description": "Weeknight classic",
        "ingredients": "500g beef mince\n1 onion\n2 garlic cloves\n400g chopped tomatoes\n400g spaghetti",
        "instructions": "Brown the mince with onion and garlic, add tomatoes and simmer 20 minutes. Serve over spaghetti.",
        "category": "Comfort Food",
        "prep_time": "15 mins",
        "cook_time": "30 mins",
        "servings": "4",
    },
    {
        "name": "Veggie Stir Fry",
        "description": "Use whatever is in the fridge",
        "ingredients": "2 peppers\n1 broccoli\n200g noodles\n3 tbsp soy sauce",
        "instructions": "Stir fry the vegetables on high heat, toss in the noodles and soy sauce.",
        "category": "Vegetarian",
        "prep_time": "15 mins",
        "cook_time": "10 mins",
        "servings": "4",
    },
    {
        "name": "Fish Finger Sandwiches",
        "description": "Kids' favourite",
        "ingredients": "12 fish fingers\n8 slices bread\nLettuce\nKetchup",
        "instructions": "Oven cook the fish fingers and build the sandwiches.",
        "category": "Quick & Easy",
        "prep_time": "5 mins",
        "cook_time": "15 mins",
        "servings": "4",
    },
    {
        "name": "Roast Chicken",
        "description": "Sunday lunch",
        "ingredients": "1 whole chicken\n1kg potatoes\n4 carrots\nGravy granules",
        "instructions": "Roast the chicken at 190C for 1.5 hours with the potatoes and carrots.",
        "category": "Weekend Special",
        "prep_time": "1+ hours",
        "cook_time": "1.5 hours",
        "servings": "4",
    },
]


def create_tables():
    """Create every table; returns the table names now present"""
    init_database()
    tables = inspect(engine).get_table_names()
    logger.info(f"✓ Tables ready: {', '.join(sorted(tables))}")
    return tables


def seed_meals(db) -> int:
    """Insert STARTER_MEALS when the meal table is empty; returns how many were added"""
    repo = MealRepository(db)
    existing = repo.count()
    if existing:
        logger.info(f"→ {existing} meals already saved, skipping seed")
        return 0

    for data in STARTER_MEALS:
        repo.create(Meal(added_by="Dinner Match", is_family_favourite=True, **data))
    logger.info(f"✓ Added {len(STARTER_MEALS)} starter meals")
    return len(STARTER_MEALS)


def main(argv=None):
    p = argparse.ArgumentParser(description="Initialize the Dinner Match database")
    p.add_argument(
        "--seed",
        action="store_true",
        help="Preload a handful of starter meals if the meal table is empty",
    )
    args = p.parse_args(argv)

    logger.info("=" * 60)
    logger.info(f"{settings.app_name} database initialization ({settings.database_url})")
    logger.info("=" * 60)

    try:
        create_tables()
        if args.seed:
            db = SessionLocal()
            try:
                seed_meals(db)
            finally:
                db.close()
    except SQLAlchemyError as e:
        logger.error(f"✗ Database initialization failed: {e}")
        return 1

    logger.info("✓ Database initialized successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
