"""Shopping-list storage. Every item is classified when it is written."""

import logging
import sqlite3
from typing import Iterable, List, Optional

from chef_utils.database import get_owned_row, transaction
from chef_utils.ingredients import get_default_classifier
from chef_utils.shopping.models import ShoppingItem

logger = logging.getLogger(__name__)


def add_item(
    conn: sqlite3.Connection,
    user_id: str,
    ingredient: str,
    recipe_id: Optional[int] = None,
) -> int:
    """Add one ingredient line to a user's shopping list and return its id."""
    return add_items(conn, user_id, [ingredient], recipe_id)[0]


def add_items(
    conn: sqlite3.Connection,
    user_id: str,
    ingredients: Iterable[str],
    recipe_id: Optional[int] = None,
) -> List[int]:
    """Add several ingredient lines, e.g. all of a recipe's ingredients.

    Each line is stored as given together with its aisle category.

    Returns:
        The new item ids, in input order.
    """
    classifier = get_default_classifier()
    ids = []
    with transaction(conn) as cur:
        for ingredient in ingredients:
            cur.execute(
                """
                INSERT INTO shopping_item(user_id, ingredient, is_checked,
                                          recipe_id, category)
                VALUES (?, ?, 0, ?, ?)
                """,
                (user_id, ingredient, recipe_id, classifier.classify(ingredient)),
            )
            ids.append(cur.lastrowid)
    logger.info(f"Added {len(ids)} shopping items for {user_id}")
    return ids


def list_items(conn: sqlite3.Connection, user_id: str) -> List[ShoppingItem]:
    """List a user's shopping items with the titles of their source recipes."""
    rows = conn.execute(
        """
        SELECT s.*, r.title AS recipe_title
        FROM shopping_item s
        LEFT JOIN recipe r ON r.id = s.recipe_id
        WHERE s.user_id = ?
        ORDER BY s.id
        """,
        (user_id,),
    )
    return [
        ShoppingItem(
            id=row["id"],
            user_id=row["user_id"],
            ingredient=row["ingredient"],
            is_checked=bool(row["is_checked"]),
            recipe_id=row["recipe_id"],
            category=row["category"],
            recipe_title=row["recipe_title"],
        )
        for row in rows
    ]


def toggle_item(conn: sqlite3.Connection, user_id: str, item_id: int) -> bool:
    """Flip the checked state of an item and return the new state."""
    row = get_owned_row(conn, "shopping_item", item_id, user_id, "Shopping item")
    is_checked = not row["is_checked"]
    with transaction(conn) as cur:
        cur.execute(
            "UPDATE shopping_item SET is_checked = ? WHERE id = ?",
            (int(is_checked), item_id),
        )
    return is_checked


def remove_item(conn: sqlite3.Connection, user_id: str, item_id: int) -> None:
    get_owned_row(conn, "shopping_item", item_id, user_id, "Shopping item")
    with transaction(conn) as cur:
        cur.execute("DELETE FROM shopping_item WHERE id = ?", (item_id,))


def clear_checked(conn: sqlite3.Connection, user_id: str) -> int:
    """Remove all checked items of a user and return how many were removed."""
    with transaction(conn) as cur:
        cur.execute(
            "DELETE FROM shopping_item WHERE user_id = ? AND is_checked = 1",
            (user_id,),
        )
        removed = cur.rowcount
    logger.info(f"Cleared {removed} checked shopping items for {user_id}")
    return removed


def recategorize_items(conn: sqlite3.Connection, dry_run: bool = False) -> int:
    """Re-run the classifier over every stored item.

    Args:
        conn: SQLite database connection
        dry_run: Count the changes without writing them

    Returns:
        Number of items whose category changed (or would change).
    """
    classifier = get_default_classifier()
    rows = conn.execute("SELECT id, ingredient, category FROM shopping_item").fetchall()
    changes = []
    for row in rows:
        category = classifier.classify(row["ingredient"])
        if category != row["category"]:
            logger.debug(
                f"{row['ingredient']!r}: {row['category']} -> {category}"
            )
            changes.append((category, row["id"]))

    if changes and not dry_run:
        with transaction(conn) as cur:
            cur.executemany(
                "UPDATE shopping_item SET category = ? WHERE id = ?", changes
            )
    return len(changes)
