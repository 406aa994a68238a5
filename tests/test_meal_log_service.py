"""Tests for meal log service."""

from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from chompquest.domain.meals import MealInput
from chompquest.services.meals import MealLogService
from tests.conftest import InMemoryMealLogRepository


def test_log_meal_persists_and_lists_for_day() -> None:
    service = MealLogService(InMemoryMealLogRepository())
    user_id = uuid4()

    breakfast = service.log_meal(
        user_id,
        MealInput(name="Eggs", calories=300, protein_g=20, meal_type="breakfast"),
        logged_at=datetime(2025, 3, 10, 7, tzinfo=UTC),
    )
    dinner = service.log_meal(
        user_id,
        MealInput(name="Pasta", calories=700, carbs_g=90, meal_type="dinner"),
        logged_at=datetime(2025, 3, 10, 19, tzinfo=UTC),
    )
    service.log_meal(
        user_id,
        MealInput(name="Yesterday", calories=100),
        logged_at=datetime(2025, 3, 9, 19, tzinfo=UTC),
    )

    meals = service.list_meals_for_day(user_id, date(2025, 3, 10))

    assert [meal.id for meal in meals] == [dinner.id, breakfast.id]
    assert meals[1].meal_type == "breakfast"


def test_log_meal_defaults_to_now_and_snack() -> None:
    service = MealLogService(InMemoryMealLogRepository())

    meal = service.log_meal(uuid4(), MealInput(name="Apple", calories=95))

    assert meal.meal_type == "snack"
    assert meal.logged_at.tzinfo is not None


@pytest.mark.parametrize(
    ("meal", "message"),
    [
        (MealInput(name="  ", calories=10), "name"),
        (MealInput(name="Soup", calories=-1), "calories"),
        (MealInput(name="Soup", calories=10, fat_g=-2), "fat"),
        (MealInput(name="Soup", calories=10, meal_type="brunch"), "meal type"),
    ],
)
def test_log_meal_rejects_invalid_input(meal: MealInput, message: str) -> None:
    service = MealLogService(InMemoryMealLogRepository())

    with pytest.raises(ValueError, match=message):
        service.log_meal(uuid4(), meal)


def test_delete_meal_only_removes_own_meal() -> None:
    repository = InMemoryMealLogRepository()
    service = MealLogService(repository)
    owner = uuid4()
    meal = service.log_meal(owner, MealInput(name="Toast", calories=150))

    assert service.delete_meal(uuid4(), meal.id) is False
    assert meal.id in repository.meals
    assert service.delete_meal(owner, meal.id) is True
    assert meal.id not in repository.meals


def test_update_meal_edits_own_meal_and_keeps_logged_time() -> None:
    repository = InMemoryMealLogRepository()
    service = MealLogService(repository)
    owner = uuid4()
    logged_at = datetime(2025, 3, 10, 12, tzinfo=UTC)
    meal = service.log_meal(
        owner, MealInput(name="Toast", calories=150), logged_at=logged_at
    )

    updated = service.update_meal(
        owner,
        meal.id,
        MealInput(name="Toast and jam", calories=220, carbs_g=40, meal_type="lunch"),
    )

    assert updated is not None
    assert updated.id == meal.id
    assert updated.name == "Toast and jam"
    assert updated.calories == 220
    assert updated.meal_type == "lunch"
    assert updated.logged_at == logged_at
    assert repository.meals[meal.id] == updated


def test_update_meal_ignores_other_users_and_unknown_meals() -> None:
    repository = InMemoryMealLogRepository()
    service = MealLogService(repository)
    owner = uuid4()
    meal = service.log_meal(owner, MealInput(name="Toast", calories=150))

    assert service.update_meal(uuid4(), meal.id, MealInput("Stolen", 1)) is None
    assert service.update_meal(owner, uuid4(), MealInput("Ghost", 1)) is None
    assert repository.meals[meal.id].name == "Toast"


def test_update_meal_rejects_invalid_input() -> None:
    repository = InMemoryMealLogRepository()
    service = MealLogService(repository)
    owner = uuid4()
    meal = service.log_meal(owner, MealInput(name="Toast", calories=150))

    with pytest.raises(ValueError, match="calories"):
        service.update_meal(owner, meal.id, MealInput(name="Toast", calories=-5))
    assert repository.meals[meal.id].calories == 150
