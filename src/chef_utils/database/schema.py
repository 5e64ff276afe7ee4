"""Database schema definitions for CHEF recipe databases."""

import sqlite3

DDL = """
CREATE TABLE IF NOT EXISTS user(
    id         INTEGER PRIMARY KEY,
    user_id    TEXT UNIQUE NOT NULL,
    name       TEXT NOT NULL,
    email      TEXT,
    bio        TEXT,
    avatar_url TEXT
);

CREATE TABLE IF NOT EXISTS recipe(
    id           INTEGER PRIMARY KEY,
    user_id      TEXT NOT NULL,
    title        TEXT NOT NULL,
    description  TEXT NOT NULL,
    storage_id   TEXT,
    format       TEXT,
    is_favorite  INTEGER NOT NULL DEFAULT 0,
    is_public    INTEGER NOT NULL DEFAULT 0,
    cooking_time INTEGER,
    difficulty   TEXT,
    calories     INTEGER
);

CREATE INDEX IF NOT EXISTS recipe_by_user ON recipe(user_id);

CREATE TABLE IF NOT EXISTS recipe_ingredient(
    recipe_id INTEGER NOT NULL,
    position  INTEGER NOT NULL,
    text      TEXT NOT NULL,
    PRIMARY KEY(recipe_id, position),
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS recipe_step(
    recipe_id INTEGER NOT NULL,
    position  INTEGER NOT NULL,
    text      TEXT NOT NULL,
    PRIMARY KEY(recipe_id, position),
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS recipe_tag(
    recipe_id INTEGER NOT NULL,
    tag       TEXT NOT NULL,
    PRIMARY KEY(recipe_id, tag),
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS shopping_item(
    id         INTEGER PRIMARY KEY,
    user_id    TEXT NOT NULL,
    ingredient TEXT NOT NULL,
    is_checked INTEGER NOT NULL DEFAULT 0,
    recipe_id  INTEGER,
    category   TEXT,
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE SET NULL
);

CREATE INDEX IF NOT EXISTS shopping_item_by_user ON shopping_item(user_id);

CREATE TABLE IF NOT EXISTS meal_plan(
    id        INTEGER PRIMARY KEY,
    user_id   TEXT NOT NULL,
    date      TEXT NOT NULL,
    meal_type TEXT NOT NULL,
    recipe_id INTEGER NOT NULL,
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS meal_plan_by_user_date ON meal_plan(user_id, date);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the CHEF database schema.

    Args:
        conn: SQLite database connection
    """
    conn.executescript(DDL)
    conn.execute("PRAGMA foreign_keys = ON")
