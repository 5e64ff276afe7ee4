"""Database utility functions for CHEF recipe databases."""

import contextlib
import logging
import pathlib
import sqlite3
from typing import Generator, Union

import pandas as pd

from chef_utils.ingredients import classify, extract_item_name

logger = logging.getLogger(__name__)


def get_connection(db_path: Union[str, pathlib.Path]) -> sqlite3.Connection:
    """Get a SQLite database connection with foreign keys enabled.

    Rows come back as ``sqlite3.Row`` so columns can be read by name.

    Args:
        db_path: Path to the SQLite database file, or ":memory:"

    Returns:
        SQLite connection with foreign keys enabled
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextlib.contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Context manager for database transactions.

    Commits when the block finishes and rolls back if it raises.

    Example:
        with transaction(conn) as cur:
            cur.execute("DELETE FROM shopping_item WHERE is_checked = 1")
    """
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def get_recipe_ingredient_data(conn: sqlite3.Connection) -> pd.DataFrame:
    """Get every recipe ingredient line with its item name and aisle category.

    Args:
        conn: SQLite database connection

    Returns:
        DataFrame with columns: recipe_id, recipe_title, user_id, position,
        ingredient, item_name, category
    """
    query = """
    SELECT
        r.id AS recipe_id,
        r.title AS recipe_title,
        r.user_id,
        ri.position,
        ri.text AS ingredient
    FROM recipe r
    JOIN recipe_ingredient ri ON r.id = ri.recipe_id
    ORDER BY r.title, r.id, ri.position
    """
    rows = conn.execute(query).fetchall()
    df = pd.DataFrame(
        [dict(row) for row in rows],
        columns=["recipe_id", "recipe_title", "user_id", "position", "ingredient"],
    )
    df["item_name"] = df["ingredient"].map(extract_item_name)
    df["category"] = df["ingredient"].map(classify)
    logger.info(
        f"Found {len(df)} ingredient lines in {df['recipe_id'].nunique()} recipes"
    )
    return df


def get_owned_row(
    conn: sqlite3.Connection, table: str, row_id: int, user_id: str, label: str
) -> sqlite3.Row:
    """Fetch a row by id and check that it belongs to ``user_id``.

    Args:
        conn: SQLite database connection
        table: Table name; must be one of the schema's tables
        row_id: Primary key of the row
        user_id: Identity of the calling user
        label: Human-readable name of the row kind for error messages

    Raises:
        LookupError: If no such row exists
        PermissionError: If the row belongs to another user
    """
    row = conn.execute(f"SELECT * FROM {table} WHERE id = ?", (row_id,)).fetchone()
    if row is None:
        logger.warning(f"{label} {row_id} not found")
        raise LookupError(f"{label} not found")
    if row["user_id"] != user_id:
        logger.warning(f"User {user_id} may not modify {label.lower()} {row_id}")
        raise PermissionError("Unauthorized")
    return row
