"""
Service layer tests with real database operations.

This test suite validates business logic in services with an actual database:
- FamilyService: member CRUD and name validation
- MealService: meal CRUD, search and the favourite flag
- PlannerService: plan lifecycle, current week lookup, day assignment
- VotingService: picks, voting phase enforcement and the tally
- End-to-end voting and shopping scenarios

Tests use real database sessions to ensure:
- Service logic works correctly end-to-end
- Repository integration is proper
- Error handling is correct and happens before any write
"""

import logging
from datetime import date

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session, make_member, make_meal, WEEK_OF_2024_01_01
from app.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ServiceValidationError,
)
from domain.models import WeeklyPick
from domain.schemas.family_schemas import FamilyMemberCreate, FamilyMemberUpdate
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from services.family_service import FamilyService
from services.meal_service import MealService
from services.planner_service import PlannerService, week_start_for
from services.shopping_service import ShoppingService
from services.voting_service import VotingService


# =============================================================================
# FAMILY SERVICE TESTS
# =============================================================================


def test_family_create_member_defaults(db_session: Session):
    """
    Test FamilyService.create_member() with only a name.

    Verifies:
    - Name is trimmed
    - Avatar defaults to the placeholder, other text fields to ""
    """
    member = FamilyService.create_member(db_session, FamilyMemberCreate(name="  Nana  "))

    assert member.id is not None
    assert member.name == "Nana"
    assert member.avatar == "👤"
    assert member.likes == ""
    assert member.dietary == ""


def test_family_create_member_blank_name(db_session: Session):
    with pytest.raises(ServiceValidationError):
        FamilyService.create_member(db_session, FamilyMemberCreate(name="   "))
    assert FamilyService.list_members(db_session) == []


def test_family_update_member_partial(db_session: Session):
    lily = make_member(db_session, "lily")

    updated = FamilyService.update_member(
        db_session, lily.id, FamilyMemberUpdate(likes="pasta, pizza")
    )

    assert updated.likes == "pasta, pizza"
    assert updated.name == "Lily"
    assert updated.dietary == "vegetarian"


def test_family_update_member_rejects_blank_name(db_session: Session):
    lily = make_member(db_session, "lily")
    with pytest.raises(ServiceValidationError):
        FamilyService.update_member(db_session, lily.id, FamilyMemberUpdate(name=""))
    db_session.refresh(lily)
    assert lily.name == "Lily"


def test_family_get_and_delete_missing(db_session: Session):
    with pytest.raises(NotFoundError):
        FamilyService.get_member(db_session, 42)
    with pytest.raises(NotFoundError):
        FamilyService.delete_member(db_session, 42)
    with pytest.raises(ServiceValidationError):
        FamilyService.get_member(db_session, 0)


# =============================================================================
# MEAL SERVICE TESTS
# =============================================================================


def test_meal_create_defaults(db_session: Session):
    meal = MealService.create_meal(db_session, MealCreate(name="Beans on Toast"))

    assert meal.ingredients == ""
    assert meal.category == ""
    assert meal.is_family_favourite is False


def test_meal_create_requires_name(db_session: Session):
    with pytest.raises(ServiceValidationError):
        MealService.create_meal(db_session, MealCreate(name=" "))


def test_meal_list_with_filters(db_session: Session):
    make_meal(db_session, "carbonara")
    make_meal(db_session, "curry")

    assert len(MealService.list_meals(db_session)) == 2
    assert [m.name for m in MealService.list_meals(db_session, search="bacon")] == [
        "Spaghetti Carbonara"
    ]
    assert [
        m.name for m in MealService.list_meals(db_session, category="Comfort Food")
    ] == ["Chicken Curry"]


def test_meal_update_and_toggle_favourite(db_session: Session):
    meal = make_meal(db_session, "curry")

    meal = MealService.update_meal(
        db_session, meal.id, MealUpdate(prep_time="30 mins", is_family_favourite=True)
    )
    assert meal.prep_time == "30 mins"
    assert meal.is_family_favourite is True

    assert MealService.toggle_favourite(db_session, meal.id).is_family_favourite is False
    assert MealService.toggle_favourite(db_session, meal.id).is_family_favourite is True


def test_meal_delete_unassigns_day(db_session: Session):
    meal = make_meal(db_session, "roast")
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    PlannerService.assign_meal(db_session, plan.id, 6, meal.id)

    MealService.delete_meal(db_session, meal.id)
    db_session.expire_all()

    sunday = PlannerService.get_day(db_session, plan.id, 6)
    assert sunday.meal_id is None
    with pytest.raises(NotFoundError):
        MealService.get_meal(db_session, meal.id)


# =============================================================================
# PLAN LIFECYCLE TESTS
# =============================================================================


def test_week_start_for_normalizes_to_monday():
    assert week_start_for(date(2024, 1, 1)) == date(2024, 1, 1)
    assert week_start_for(date(2024, 1, 3)) == date(2024, 1, 1)
    assert week_start_for(date(2024, 1, 7)) == date(2024, 1, 1)
    assert week_start_for(date(2024, 1, 8)) == date(2024, 1, 8)


def test_create_plan_has_seven_empty_days(db_session: Session):
    """
    Test PlannerService.create_plan().

    Verifies:
    - Status starts at 'planning'
    - Seven days 0..6 with no meal and no diners
    """
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    plan = PlannerService.get_plan(db_session, plan.id)

    assert plan.status == "planning"
    assert [d.day_of_week for d in plan.days] == [0, 1, 2, 3, 4, 5, 6]
    assert all(d.meal_id is None for d in plan.days)
    assert all(d.diners == [] for d in plan.days)


def test_create_plan_midweek_date_normalized(db_session: Session):
    plan = PlannerService.create_plan(db_session, date(2024, 1, 4))
    assert plan.week_start == WEEK_OF_2024_01_01


def test_create_plan_twice_conflicts_with_existing_id(db_session: Session):
    """
    Verifies:
    - Second create for the same week raises ConflictError
    - details.plan_id is the first plan's id
    - Only one plan exists afterwards
    """
    first = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)

    with pytest.raises(ConflictError) as exc_info:
        PlannerService.create_plan(db_session, date(2024, 1, 5))

    assert exc_info.value.details["plan_id"] == first.id
    assert len(PlannerService.list_plans(db_session)) == 1


def test_get_current_plan(db_session: Session):
    assert PlannerService.get_current_plan(db_session, today=date(2024, 1, 3)) is None

    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)

    current = PlannerService.get_current_plan(db_session, today=date(2024, 1, 3))
    assert current.id == plan.id
    assert PlannerService.get_current_plan(db_session, today=date(2024, 1, 10)) is None


def test_set_status_any_direction(db_session: Session):
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)

    assert PlannerService.set_status(db_session, plan.id, "voting").status == "voting"
    assert PlannerService.set_status(db_session, plan.id, "locked").status == "locked"
    assert PlannerService.set_status(db_session, plan.id, "planning").status == "planning"


def test_set_status_invalid(db_session: Session):
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)

    with pytest.raises(ServiceValidationError):
        PlannerService.set_status(db_session, plan.id, "cooking")
    with pytest.raises(NotFoundError):
        PlannerService.set_status(db_session, plan.id + 1, "voting")


def test_delete_plan(db_session: Session):
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    PlannerService.delete_plan(db_session, plan.id)

    with pytest.raises(NotFoundError):
        PlannerService.get_plan(db_session, plan.id)
    with pytest.raises(NotFoundError):
        PlannerService.delete_plan(db_session, plan.id)


def test_service_log_lines(db_session: Session, caplog):
    """
    Verifies:
    - Mutations log one key=value line each
    - Messages are already formatted (no deferred %-args)
    """
    caplog.set_level(logging.INFO, logger="dinnermatch")
    mum = make_member(db_session)
    meal = make_meal(db_session)

    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    PlannerService.set_status(db_session, plan.id, "voting")
    VotingService.record_pick(db_session, plan.id, mum.id, meal.id)
    ShoppingService.build_shopping_list(db_session, plan.id)

    records = [r for r in caplog.records if r.name.startswith("dinnermatch.")]
    assert records
    assert all(not r.args for r in records)

    messages = [r.getMessage() for r in records]
    assert f"plan_created plan_id={plan.id} week_start=2024-01-01 days=7" in messages
    assert f"plan_status_changed plan_id={plan.id} from=planning to=voting" in messages
    assert f"pick_recorded plan_id={plan.id} member_id={mum.id} meal_id={meal.id} new=True" in messages
    assert f"shopping_list_built plan_id={plan.id} meals=0 items=0" in messages


# =============================================================================
# DAY ASSIGNMENT TESTS
# =============================================================================


def test_set_diners_replaces_and_dedupes(db_session: Session):
    mum = make_member(db_session, "mum")
    dad = make_member(db_session, "dad")
    lily = make_member(db_session, "lily")
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)

    day = PlannerService.set_diners(db_session, plan.id, 1, [dad.id, mum.id, dad.id])
    assert sorted(m.id for m in day.diners) == [mum.id, dad.id]

    day = PlannerService.set_diners(db_session, plan.id, 1, [lily.id])
    assert [m.id for m in day.diners] == [lily.id]


def test_set_diners_unknown_member_rejected_before_write(db_session: Session):
    mum = make_member(db_session, "mum")
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    PlannerService.set_diners(db_session, plan.id, 0, [mum.id])

    with pytest.raises(ServiceValidationError) as exc_info:
        PlannerService.set_diners(db_session, plan.id, 0, [mum.id, 999])

    assert "999" in exc_info.value.message
    db_session.expire_all()
    assert [m.id for m in PlannerService.get_day(db_session, plan.id, 0).diners] == [mum.id]


@pytest.mark.parametrize("day_of_week", [-1, 7])
def test_set_diners_bad_day(db_session: Session, day_of_week: int):
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    with pytest.raises(ServiceValidationError):
        PlannerService.set_diners(db_session, plan.id, day_of_week, [])


def test_set_diners_missing_plan(db_session: Session):
    with pytest.raises(NotFoundError):
        PlannerService.set_diners(db_session, 77, 0, [])


def test_assign_and_clear_meal(db_session: Session):
    meal = make_meal(db_session, "curry")
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)

    day = PlannerService.assign_meal(db_session, plan.id, 3, meal.id)
    assert day.meal_id == meal.id

    day = PlannerService.assign_meal(db_session, plan.id, 3, None)
    assert day.meal_id is None


def test_assign_missing_meal(db_session: Session):
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    with pytest.raises(NotFoundError):
        PlannerService.assign_meal(db_session, plan.id, 3, 123)


def test_assignment_allowed_on_locked_plan_by_default(db_session: Session):
    meal = make_meal(db_session, "curry")
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    PlannerService.set_status(db_session, plan.id, "locked")

    day = PlannerService.assign_meal(
        db_session, plan.id, 0, meal.id, lock_assignments=False
    )
    assert day.meal_id == meal.id


def test_assignment_blocked_on_locked_plan_when_enabled(db_session: Session):
    mum = make_member(db_session, "mum")
    meal = make_meal(db_session, "curry")
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    PlannerService.set_status(db_session, plan.id, "locked")

    with pytest.raises(InvalidStateError):
        PlannerService.assign_meal(db_session, plan.id, 0, meal.id, lock_assignments=True)
    with pytest.raises(InvalidStateError):
        PlannerService.set_diners(db_session, plan.id, 0, [mum.id], lock_assignments=True)


# =============================================================================
# VOTING SERVICE TESTS
# =============================================================================


def _voting_plan(db: Session):
    plan = PlannerService.create_plan(db, WEEK_OF_2024_01_01)
    return PlannerService.set_status(db, plan.id, "voting")


def test_record_pick_is_idempotent(db_session: Session):
    mum = make_member(db_session)
    meal = make_meal(db_session)
    plan = _voting_plan(db_session)

    assert VotingService.record_pick(db_session, plan.id, mum.id, meal.id) is True
    assert VotingService.record_pick(db_session, plan.id, mum.id, meal.id) is False
    assert db_session.query(WeeklyPick).count() == 1


@pytest.mark.parametrize("status", ["planning", "locked"])
def test_record_pick_outside_voting(db_session: Session, status: str):
    mum = make_member(db_session)
    meal = make_meal(db_session)
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    PlannerService.set_status(db_session, plan.id, status)

    with pytest.raises(InvalidStateError):
        VotingService.record_pick(db_session, plan.id, mum.id, meal.id)
    assert db_session.query(WeeklyPick).count() == 0


def test_record_pick_missing_references(db_session: Session):
    mum = make_member(db_session)
    meal = make_meal(db_session)
    plan = _voting_plan(db_session)

    with pytest.raises(NotFoundError):
        VotingService.record_pick(db_session, plan.id + 1, mum.id, meal.id)
    with pytest.raises(NotFoundError):
        VotingService.record_pick(db_session, plan.id, mum.id + 1, meal.id)
    with pytest.raises(NotFoundError):
        VotingService.record_pick(db_session, plan.id, mum.id, meal.id + 1)
    with pytest.raises(ServiceValidationError):
        VotingService.record_pick(db_session, plan.id, -1, meal.id)


def test_remove_pick_absent_is_noop(db_session: Session):
    mum = make_member(db_session)
    meal = make_meal(db_session)
    plan = _voting_plan(db_session)
    VotingService.record_pick(db_session, plan.id, mum.id, meal.id)

    assert VotingService.remove_pick(db_session, plan.id, mum.id, meal.id) is True
    assert VotingService.remove_pick(db_session, plan.id, mum.id, meal.id) is False


def test_member_picks(db_session: Session):
    mum = make_member(db_session)
    curry = make_meal(db_session, "curry")
    roast = make_meal(db_session, "roast")
    plan = _voting_plan(db_session)
    VotingService.record_pick(db_session, plan.id, mum.id, curry.id)
    VotingService.record_pick(db_session, plan.id, mum.id, roast.id)

    assert sorted(VotingService.get_member_picks(db_session, plan.id, mum.id)) == sorted(
        [curry.id, roast.id]
    )
    with pytest.raises(NotFoundError):
        VotingService.get_member_picks(db_session, plan.id, mum.id + 1)


def test_deleting_member_removes_their_picks(db_session: Session):
    mum = make_member(db_session, "mum")
    dad = make_member(db_session, "dad")
    meal = make_meal(db_session)
    plan = _voting_plan(db_session)
    VotingService.record_pick(db_session, plan.id, mum.id, meal.id)
    VotingService.record_pick(db_session, plan.id, dad.id, meal.id)
    PlannerService.set_diners(db_session, plan.id, 0, [mum.id, dad.id])

    FamilyService.delete_member(db_session, mum.id)
    db_session.expire_all()

    tally = VotingService.list_picks(db_session, plan.id)
    assert tally[0]["pick_count"] == 1
    assert [p["name"] for p in tally[0]["pickers"]] == ["Dad"]
    assert [m.id for m in PlannerService.get_day(db_session, plan.id, 0).diners] == [dad.id]


# =============================================================================
# END-TO-END SCENARIOS
# =============================================================================


def test_voting_scenario(db_session: Session):
    """
    Full voting round for the week of 2024-01-01.

    Verifies:
    - Duplicate pick does not create a second row
    - Tally lists the picked meal with count 1 and the single picker
    - Once locked, further picks are rejected
    """
    member_a = make_member(db_session, "mum")
    member_b = make_member(db_session, "dad")
    make_meal(db_session, "carbonara")
    meal = make_meal(db_session, "curry")

    plan = PlannerService.create_plan(db_session, date(2024, 1, 1))
    PlannerService.set_status(db_session, plan.id, "voting")
    VotingService.record_pick(db_session, plan.id, member_a.id, meal.id)
    VotingService.record_pick(db_session, plan.id, member_a.id, meal.id)

    tally = VotingService.list_picks(db_session, plan.id)
    top = tally[0]
    assert top["id"] == meal.id
    assert top["pick_count"] == 1
    assert [p["id"] for p in top["pickers"]] == [member_a.id]
    assert tally[1]["pick_count"] == 0
    assert tally[1]["pickers"] == []

    PlannerService.set_status(db_session, plan.id, "locked")
    with pytest.raises(InvalidStateError):
        VotingService.record_pick(db_session, plan.id, member_b.id, meal.id)


def test_shopping_scenario(db_session: Session):
    """
    A meal assigned to Monday and Wednesday appears once on the list.

    Verifies:
    - Exactly two ingredient entries for "2 eggs\\nMilk"
    - Both attributed to the meal, in line order
    """
    meal = make_meal(db_session, "omelette")
    plan = PlannerService.create_plan(db_session, WEEK_OF_2024_01_01)
    PlannerService.assign_meal(db_session, plan.id, 0, meal.id)
    PlannerService.assign_meal(db_session, plan.id, 2, meal.id)

    result = ShoppingService.build_shopping_list(db_session, plan.id)

    assert result["meals"] == [{"id": meal.id, "name": "Cheese Omelette"}]
    assert result["ingredients"] == [
        {"ingredient": "2 eggs", "from_meal": "Cheese Omelette"},
        {"ingredient": "Milk", "from_meal": "Cheese Omelette"},
    ]
