"""Recipe storage in the CHEF SQLite database."""

import logging
import sqlite3
from typing import Iterable, List, Optional

from chef_utils.database import get_owned_row, transaction
from chef_utils.ingredients import MatchResult, RecipeIngredientSet, match_pantry
from chef_utils.recipes.models import Recipe, validate_recipe

logger = logging.getLogger(__name__)


def upsert_user(
    conn: sqlite3.Connection, user_id: str, name: str, email: Optional[str] = None
) -> int:
    """Insert a user or refresh the name of an existing one, return its row id."""
    with transaction(conn) as cur:
        cur.execute(
            """
            INSERT INTO user(user_id, name, email) VALUES (?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET name = excluded.name
            """,
            (user_id, name, email),
        )
        cur.execute("SELECT id FROM user WHERE user_id = ?", (user_id,))
        return cur.fetchone()[0]


def _write_lines(cur: sqlite3.Cursor, recipe_id: int, recipe: Recipe) -> None:
    """Replace the ingredient, step and tag rows of a recipe."""
    for table in ("recipe_ingredient", "recipe_step", "recipe_tag"):
        cur.execute(f"DELETE FROM {table} WHERE recipe_id = ?", (recipe_id,))
    cur.executemany(
        "INSERT INTO recipe_ingredient(recipe_id, position, text) VALUES (?,?,?)",
        [(recipe_id, i, text) for i, text in enumerate(recipe.ingredients)],
    )
    cur.executemany(
        "INSERT INTO recipe_step(recipe_id, position, text) VALUES (?,?,?)",
        [(recipe_id, i, text) for i, text in enumerate(recipe.steps)],
    )
    cur.executemany(
        "INSERT OR IGNORE INTO recipe_tag(recipe_id, tag) VALUES (?,?)",
        [(recipe_id, tag) for tag in recipe.tags],
    )


def create_recipe(conn: sqlite3.Connection, user_id: str, recipe: Recipe) -> int:
    """Validate and store a new recipe owned by ``user_id``.

    New recipes start out as non-favorites; ``recipe.id`` and
    ``recipe.is_favorite`` are ignored.

    Returns:
        The new recipe id.

    Raises:
        ValueError: If the recipe fails validation.
    """
    validate_recipe(recipe)
    with transaction(conn) as cur:
        cur.execute(
            """
            INSERT INTO recipe(user_id, title, description, storage_id, format,
                               is_favorite, is_public, cooking_time, difficulty,
                               calories)
            VALUES (?, ?, ?, ?, ?, 0, ?, ?, ?, ?)
            """,
            (
                user_id,
                recipe.title,
                recipe.description,
                recipe.storage_id,
                recipe.format,
                int(recipe.is_public),
                recipe.cooking_time,
                recipe.difficulty,
                recipe.calories,
            ),
        )
        recipe_id = cur.lastrowid
        _write_lines(cur, recipe_id, recipe)
    logger.info(f"Created recipe {recipe_id} '{recipe.title}' for {user_id}")
    return recipe_id


def update_recipe(
    conn: sqlite3.Connection, user_id: str, recipe_id: int, recipe: Recipe
) -> None:
    """Overwrite a recipe's content.

    The stored image (``storage_id`` and ``format``) is only replaced when
    ``recipe.storage_id`` is set. The favorite flag is left alone.

    Raises:
        ValueError: If the recipe fails validation.
        LookupError: If the recipe does not exist.
        PermissionError: If the recipe belongs to another user.
    """
    validate_recipe(recipe)
    get_owned_row(conn, "recipe", recipe_id, user_id, "Recipe")
    with transaction(conn) as cur:
        cur.execute(
            """
            UPDATE recipe
            SET title = ?, description = ?, is_public = ?, cooking_time = ?,
                difficulty = ?, calories = ?
            WHERE id = ?
            """,
            (
                recipe.title,
                recipe.description,
                int(recipe.is_public),
                recipe.cooking_time,
                recipe.difficulty,
                recipe.calories,
                recipe_id,
            ),
        )
        if recipe.storage_id:
            cur.execute(
                "UPDATE recipe SET storage_id = ?, format = ? WHERE id = ?",
                (recipe.storage_id, recipe.format, recipe_id),
            )
        _write_lines(cur, recipe_id, recipe)
    logger.info(f"Updated recipe {recipe_id}")


def _lines(conn: sqlite3.Connection, table: str, recipe_id: int) -> List[str]:
    rows = conn.execute(
        f"SELECT text FROM {table} WHERE recipe_id = ? ORDER BY position",
        (recipe_id,),
    )
    return [row[0] for row in rows]


def _row_to_recipe(conn: sqlite3.Connection, row: sqlite3.Row) -> Recipe:
    tags = [
        r[0]
        for r in conn.execute(
            "SELECT tag FROM recipe_tag WHERE recipe_id = ? ORDER BY tag", (row["id"],)
        )
    ]
    return Recipe(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        description=row["description"],
        ingredients=_lines(conn, "recipe_ingredient", row["id"]),
        steps=_lines(conn, "recipe_step", row["id"]),
        tags=tags,
        is_public=bool(row["is_public"]),
        is_favorite=bool(row["is_favorite"]),
        storage_id=row["storage_id"],
        format=row["format"],
        cooking_time=row["cooking_time"],
        difficulty=row["difficulty"],
        calories=row["calories"],
        author_name=row["author_name"],
    )


_SELECT_RECIPE = """
SELECT r.*, u.name AS author_name
FROM recipe r
LEFT JOIN user u ON u.user_id = r.user_id
"""


def get_recipe(conn: sqlite3.Connection, recipe_id: int) -> Optional[Recipe]:
    """Get a recipe with its author's name, or None if it does not exist."""
    row = conn.execute(_SELECT_RECIPE + "WHERE r.id = ?", (recipe_id,)).fetchone()
    return _row_to_recipe(conn, row) if row else None


def get_public_recipe(conn: sqlite3.Connection, recipe_id: int) -> Optional[Recipe]:
    """Get a recipe for sharing; None unless it exists and is public."""
    recipe = get_recipe(conn, recipe_id)
    if recipe is None or not recipe.is_public:
        return None
    return recipe


def list_recipes(
    conn: sqlite3.Connection, user_id: str, search: Optional[str] = None
) -> List[Recipe]:
    """List a user's recipes, favorites first.

    Args:
        conn: SQLite database connection
        user_id: Owner of the recipes
        search: Optional case-insensitive substring the title must contain

    Returns:
        Recipes with favorites ahead of the rest, otherwise in creation order.
    """
    rows = conn.execute(
        _SELECT_RECIPE + "WHERE r.user_id = ? ORDER BY r.id", (user_id,)
    ).fetchall()
    if search:
        needle = search.lower()
        rows = [row for row in rows if needle in row["title"].lower()]
    recipes = [_row_to_recipe(conn, row) for row in rows]
    recipes.sort(key=lambda r: not r.is_favorite)
    return recipes


def toggle_favorite(conn: sqlite3.Connection, user_id: str, recipe_id: int) -> bool:
    """Flip the favorite flag of a recipe and return the new value."""
    row = get_owned_row(conn, "recipe", recipe_id, user_id, "Recipe")
    is_favorite = not row["is_favorite"]
    with transaction(conn) as cur:
        cur.execute(
            "UPDATE recipe SET is_favorite = ? WHERE id = ?",
            (int(is_favorite), recipe_id),
        )
    return is_favorite


def delete_recipe(conn: sqlite3.Connection, user_id: str, recipe_id: int) -> None:
    """Delete a recipe together with its meal plans.

    Shopping-list items that came from the recipe stay on the list.
    """
    get_owned_row(conn, "recipe", recipe_id, user_id, "Recipe")
    with transaction(conn) as cur:
        cur.execute("DELETE FROM recipe WHERE id = ?", (recipe_id,))
    logger.info(f"Deleted recipe {recipe_id}")


def recipe_ingredient_sets(
    conn: sqlite3.Connection, user_id: str
) -> Iterable[RecipeIngredientSet]:
    """Yield the ingredient lines of each of a user's recipes."""
    for row in conn.execute(
        "SELECT id, title FROM recipe WHERE user_id = ? ORDER BY id", (user_id,)
    ).fetchall():
        yield RecipeIngredientSet(
            id=row["id"],
            title=row["title"],
            ingredients=_lines(conn, "recipe_ingredient", row["id"]),
        )


def search_by_ingredients(
    conn: sqlite3.Connection, user_id: str, pantry_ingredients: List[str]
) -> List[MatchResult]:
    """Rank a user's recipes by how many of their ingredients the pantry has.

    An empty pantry returns an empty list without reading any recipe.
    """
    if not any(p.strip() for p in pantry_ingredients):
        return []
    return match_pantry(pantry_ingredients, recipe_ingredient_sets(conn, user_id))
