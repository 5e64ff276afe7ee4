import random

import pytest

from chef_utils.meal_plans import (
    MEAL_TYPES,
    PlannedMeal,
    add_meal,
    auto_fill,
    auto_generate,
    get_week,
    move_meal,
    remove_meal,
    week_dates,
)


def test_week_dates_crosses_month_and_year():
    assert week_dates("2024-12-29") == [
        "2024-12-29",
        "2024-12-30",
        "2024-12-31",
        "2025-01-01",
        "2025-01-02",
        "2025-01-03",
        "2025-01-04",
    ]


@pytest.mark.parametrize("bad_date", ["", "2024-13-01", "next monday", "2024/01/01"])
def test_week_dates_rejects_bad_dates(bad_date):
    with pytest.raises(ValueError):
        week_dates(bad_date)


def test_auto_fill_fills_every_empty_slot():
    meals = auto_fill([1, 2, 3], [], "2024-03-04", rng=random.Random(0))
    assert len(meals) == 7 * len(MEAL_TYPES)
    assert {m.recipe_id for m in meals} <= {1, 2, 3}
    assert [(m.date, m.meal_type) for m in meals[:3]] == [
        ("2024-03-04", "breakfast"),
        ("2024-03-04", "lunch"),
        ("2024-03-04", "dinner"),
    ]


def test_auto_fill_skips_planned_slots():
    existing = [
        PlannedMeal(date="2024-03-04", meal_type="lunch", recipe_id=9),
        PlannedMeal(date="2024-03-10", meal_type="dinner", recipe_id=9),
        # outside the week, must not block anything
        PlannedMeal(date="2024-03-11", meal_type="breakfast", recipe_id=9),
    ]
    meals = auto_fill([1], existing, "2024-03-04")
    slots = {(m.date, m.meal_type) for m in meals}
    assert len(meals) == 19
    assert ("2024-03-04", "lunch") not in slots
    assert ("2024-03-10", "dinner") not in slots
    assert all(m.recipe_id == 1 for m in meals)


def test_auto_fill_is_reproducible_with_seeded_rng():
    first = auto_fill([1, 2, 3, 4], [], "2024-03-04", rng=random.Random(42))
    second = auto_fill([1, 2, 3, 4], [], "2024-03-04", rng=random.Random(42))
    assert first == second


def test_auto_fill_without_recipes():
    assert auto_fill([], [], "2024-03-04") == []


def test_add_move_and_remove_meal(conn, make_recipe):
    recipe_id = make_recipe(title="Porridge")
    meal_id = add_meal(conn, "alice", "2024-03-05", "breakfast", recipe_id)

    (meal,) = get_week(conn, "alice", "2024-03-04", "2024-03-10")
    assert (meal.id, meal.date, meal.meal_type) == (meal_id, "2024-03-05", "breakfast")
    assert meal.recipe_title == "Porridge"

    move_meal(conn, "alice", meal_id, "2024-03-12", "dinner")
    assert get_week(conn, "alice", "2024-03-04", "2024-03-10") == []
    (moved,) = get_week(conn, "alice", "2024-03-11", "2024-03-17")
    assert (moved.date, moved.meal_type) == ("2024-03-12", "dinner")

    remove_meal(conn, "alice", meal_id)
    assert get_week(conn, "alice", "2024-03-11", "2024-03-17") == []


def test_add_meal_validates_input(conn, make_recipe):
    recipe_id = make_recipe()
    with pytest.raises(ValueError):
        add_meal(conn, "alice", "2024-03-05", "brunch", recipe_id)
    with pytest.raises(ValueError):
        add_meal(conn, "alice", "tomorrow", "lunch", recipe_id)
    with pytest.raises(LookupError):
        add_meal(conn, "alice", "2024-03-05", "lunch", recipe_id + 1)


def test_meal_operations_check_owner(conn, make_recipe):
    meal_id = add_meal(conn, "alice", "2024-03-05", "lunch", make_recipe())
    with pytest.raises(PermissionError):
        move_meal(conn, "bob", meal_id, "2024-03-06", "lunch")
    with pytest.raises(PermissionError):
        remove_meal(conn, "bob", meal_id)
    with pytest.raises(LookupError):
        remove_meal(conn, "alice", meal_id + 1)


def test_add_meal_rejects_other_users_recipe(conn, make_recipe):
    stew = make_recipe(user_id="bob", title="Bob's Stew")
    with pytest.raises(PermissionError):
        add_meal(conn, "alice", "2024-03-05", "dinner", stew)
    assert get_week(conn, "alice", "2024-03-04", "2024-03-10") == []


def test_auto_generate_fills_remaining_week(conn, make_recipe):
    soup = make_recipe(title="Soup")
    salad = make_recipe(title="Salad")
    make_recipe(user_id="bob", title="Bob's Stew")
    add_meal(conn, "alice", "2024-03-04", "dinner", soup)

    added = auto_generate(conn, "alice", "2024-03-04", rng=random.Random(1))

    assert len(added) == 20
    assert all(m.id is not None and m.user_id == "alice" for m in added)
    assert {m.recipe_id for m in added} <= {soup, salad}
    week = get_week(conn, "alice", "2024-03-04", "2024-03-10")
    assert len(week) == 21
    assert auto_generate(conn, "alice", "2024-03-04") == []


def test_auto_generate_without_recipes(conn):
    assert auto_generate(conn, "carol", "2024-03-04") == []
    assert get_week(conn, "carol", "2024-03-04", "2024-03-10") == []
