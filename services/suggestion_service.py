"""Tonight's dinner suggestion: a keyword heuristic over members' likes and diets."""

import logging
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import NotFoundError
from domain.models import FamilyMember, Meal
from repositories import FamilyMemberRepository, MealRepository

logger = logging.getLogger("dinnermatch.suggestions")

BASE_SCORE = 50
LIKE_BONUS = 15
DISLIKE_PENALTY = 30
DIETARY_PENALTY = 100
QUICK_WEEKDAY_BONUS = 10
WEEKEND_BONUS = 15
MAX_JITTER = 20

MEAT_KEYWORDS = ("chicken", "beef", "pork", "meat", "fish")
GLUTEN_KEYWORDS = ("pasta", "bread", "pizza")
QUICK_PREP_TIME = "15 mins"
LONG_PREP_TIME = "1+ hours"
WEEKEND_CATEGORY = "Weekend Special"


def _keywords(text: Optional[str]) -> List[str]:
    """Comma separated, lower-cased, blank entries dropped."""
    if not text:
        return []
    return [k.strip() for k in text.lower().split(",") if k.strip()]


@dataclass
class ScoredMeal:
    meal: Meal
    score: float
    reasons: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def score_meal(
    meal: Meal, members: Sequence[FamilyMember], today: date, jitter: float = 0.0
) -> ScoredMeal:
    """
    Score one meal for the members eating tonight.

    Starts at 50; +15 per matched like, -30 per matched dislike, -100 for a
    vegetarian/gluten conflict, +10 for a 15 minute prep on weekdays, +15 for
    the weekend special category on weekends, then ``jitter`` is added.
    """
    text = " ".join([meal.name or "", meal.description or "", meal.ingredients or ""]).lower()
    scored = ScoredMeal(meal=meal, score=BASE_SCORE)

    for member in members:
        for like in _keywords(member.likes):
            if like in text:
                scored.score += LIKE_BONUS
                scored.reasons.append(f"{member.name} loves {like}")

        for dislike in _keywords(member.dislikes):
            if dislike in text:
                scored.score -= DISLIKE_PENALTY
                scored.warnings.append(f"{member.name} dislikes {dislike}")

        dietary = (member.dietary or "").lower()
        if not dietary:
            continue
        if "vegetarian" in dietary and any(k in text for k in MEAT_KEYWORDS):
            if (meal.category or "").lower() != "vegetarian":
                scored.score -= DIETARY_PENALTY
                scored.warnings.append(f"Not suitable for {member.name} (vegetarian)")
        if "gluten" in dietary and any(k in text for k in GLUTEN_KEYWORDS):
            scored.score -= DIETARY_PENALTY
            scored.warnings.append(f"Contains gluten - {member.name} can't eat this")

    weekend = today.weekday() >= 5
    if not weekend and meal.prep_time == QUICK_PREP_TIME:
        scored.score += QUICK_WEEKDAY_BONUS
        scored.reasons.append("Quick for a weekday")
    if weekend and meal.category == WEEKEND_CATEGORY:
        scored.score += WEEKEND_BONUS
        scored.reasons.append("Perfect for the weekend!")

    scored.score += jitter
    return scored


def rank_meals(
    meals: Sequence[Meal],
    members: Sequence[FamilyMember],
    today: date,
    rng: random.Random,
) -> List[ScoredMeal]:
    """Score every meal and sort best first. Jitter comes from ``rng``."""
    scored = [score_meal(m, members, today, rng.uniform(0, MAX_JITTER)) for m in meals]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


class SuggestionService:
    """Business logic for the 'what's for dinner?' suggestion."""

    @staticmethod
    def suggest_meal(
        db: Session,
        eating_member_ids: Optional[Sequence[int]] = None,
        today: Optional[date] = None,
        rng: Optional[random.Random] = None,
    ) -> Dict[str, Any]:
        """
        Pick tonight's best meal for the given diners (everyone if none given).

        Args:
            db: Database session
            eating_member_ids: Members eating tonight; None or empty means all
            today: Date used for weekday/weekend bonuses (default: today)
            rng: Jitter source; pass a seeded ``random.Random`` for repeatable output

        Raises:
            NotFoundError: If there are no meals to choose from
        """
        meals = MealRepository(db).get_all()
        if not meals:
            raise NotFoundError("No meals saved yet! Add some meals first.")

        everyone = FamilyMemberRepository(db).get_all()
        if eating_member_ids:
            wanted = set(eating_member_ids)
            members = [m for m in everyone if m.id in wanted]
        else:
            members = everyone

        if rng is None:
            rng = random.Random(settings.suggestion_seed)
        best = rank_meals(meals, members, today or date.today(), rng)[0]

        logger.info(
            f"suggestion_made meal_id={best.meal.id} score={best.score:.1f} diners={len(members)}"
        )
        return {
            "meal": best.meal.name,
            "meal_data": best.meal,
            "eating_tonight": ", ".join(m.name for m in members) or "Everyone",
            "reason": (
                ". ".join(best.reasons[:3]) + "."
                if best.reasons
                else "Looks like a good option!"
            ),
            "warnings": best.warnings,
            "tips": "This takes a while - start early!" if best.meal.prep_time == LONG_PREP_TIME else "",
            "score": best.score,
        }
