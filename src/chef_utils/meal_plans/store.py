"""Meal-plan storage in the CHEF SQLite database."""

import logging
import random
import sqlite3
from typing import List, Optional

from chef_utils.database import get_owned_row, transaction
from chef_utils.meal_plans.planning import (
    PlannedMeal,
    auto_fill,
    parse_date,
    validate_meal_type,
    week_dates,
)

logger = logging.getLogger(__name__)


def get_week(
    conn: sqlite3.Connection, user_id: str, start_date: str, end_date: str
) -> List[PlannedMeal]:
    """List a user's meals between two dates, inclusive, with recipe titles."""
    parse_date(start_date)
    parse_date(end_date)
    rows = conn.execute(
        """
        SELECT m.*, r.title AS recipe_title
        FROM meal_plan m
        LEFT JOIN recipe r ON r.id = m.recipe_id
        WHERE m.user_id = ? AND m.date >= ? AND m.date <= ?
        ORDER BY m.date, m.id
        """,
        (user_id, start_date, end_date),
    )
    return [
        PlannedMeal(
            id=row["id"],
            user_id=row["user_id"],
            date=row["date"],
            meal_type=row["meal_type"],
            recipe_id=row["recipe_id"],
            recipe_title=row["recipe_title"],
        )
        for row in rows
    ]


def add_meal(
    conn: sqlite3.Connection, user_id: str, date: str, meal_type: str, recipe_id: int
) -> int:
    """Plan a recipe for one slot and return the new meal id.

    A slot may hold several meals.

    Raises:
        ValueError: If the date or meal type is invalid.
        LookupError: If the recipe does not exist.
        PermissionError: If the recipe belongs to another user.
    """
    parse_date(date)
    validate_meal_type(meal_type)
    get_owned_row(conn, "recipe", recipe_id, user_id, "Recipe")
    with transaction(conn) as cur:
        cur.execute(
            "INSERT INTO meal_plan(user_id, date, meal_type, recipe_id) VALUES (?,?,?,?)",
            (user_id, date, meal_type, recipe_id),
        )
        return cur.lastrowid


def move_meal(
    conn: sqlite3.Connection, user_id: str, meal_id: int, date: str, meal_type: str
) -> None:
    """Move a planned meal to another day and/or meal type."""
    parse_date(date)
    validate_meal_type(meal_type)
    get_owned_row(conn, "meal_plan", meal_id, user_id, "Meal plan")
    with transaction(conn) as cur:
        cur.execute(
            "UPDATE meal_plan SET date = ?, meal_type = ? WHERE id = ?",
            (date, meal_type, meal_id),
        )


def remove_meal(conn: sqlite3.Connection, user_id: str, meal_id: int) -> None:
    get_owned_row(conn, "meal_plan", meal_id, user_id, "Meal plan")
    with transaction(conn) as cur:
        cur.execute("DELETE FROM meal_plan WHERE id = ?", (meal_id,))


def auto_generate(
    conn: sqlite3.Connection,
    user_id: str,
    start_date: str,
    rng: Optional[random.Random] = None,
) -> List[PlannedMeal]:
    """Fill every empty slot of a user's week with one of their recipes.

    Returns:
        The meals that were added, with their new ids. Empty if the user
        has no recipes.
    """
    dates = week_dates(start_date)
    recipe_ids = [
        row[0]
        for row in conn.execute(
            "SELECT id FROM recipe WHERE user_id = ? ORDER BY id", (user_id,)
        )
    ]
    if not recipe_ids:
        logger.info(f"No recipes to plan for {user_id}")
        return []

    existing = get_week(conn, user_id, dates[0], dates[-1])
    new_meals = auto_fill(recipe_ids, existing, start_date, rng)
    with transaction(conn) as cur:
        for meal in new_meals:
            cur.execute(
                "INSERT INTO meal_plan(user_id, date, meal_type, recipe_id) VALUES (?,?,?,?)",
                (user_id, meal.date, meal.meal_type, meal.recipe_id),
            )
            meal.id = cur.lastrowid
            meal.user_id = user_id
    logger.info(f"Planned {len(new_meals)} meals for {user_id} from {start_date}")
    return new_meals
