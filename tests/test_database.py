import sqlite3

import pytest

from chef_utils.database import create_schema, get_recipe_ingredient_data, transaction


def test_create_schema_is_idempotent(conn):
    create_schema(conn)
    tables = {
        row[0]
        for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    }
    assert {
        "user",
        "recipe",
        "recipe_ingredient",
        "recipe_step",
        "recipe_tag",
        "shopping_item",
        "meal_plan",
    } <= tables


def test_transaction_rolls_back_on_error(conn):
    with pytest.raises(sqlite3.IntegrityError):
        with transaction(conn) as cur:
            cur.execute(
                "INSERT INTO user(user_id, name) VALUES (?, ?)", ("alice", "Alice")
            )
            cur.execute(
                "INSERT INTO user(user_id, name) VALUES (?, ?)", ("alice", "Again")
            )
    assert conn.execute("SELECT COUNT(*) FROM user").fetchone()[0] == 0


def test_foreign_keys_enforced(conn):
    with pytest.raises(sqlite3.IntegrityError):
        with transaction(conn) as cur:
            cur.execute(
                "INSERT INTO meal_plan(user_id, date, meal_type, recipe_id) "
                "VALUES ('alice', '2024-03-04', 'lunch', 999)"
            )


def test_get_recipe_ingredient_data(conn, make_recipe):
    make_recipe(title="Breakfast", ingredients=["2 cups milk", "3 large eggs", "unobtainium"])
    df = get_recipe_ingredient_data(conn)
    assert list(df.columns) == [
        "recipe_id",
        "recipe_title",
        "user_id",
        "position",
        "ingredient",
        "item_name",
        "category",
    ]
    assert df["item_name"].tolist() == ["milk", "eggs", "unobtainium"]
    assert df["category"].tolist() == ["Dairy", "Dairy", "Other"]


def test_get_recipe_ingredient_data_empty(conn):
    df = get_recipe_ingredient_data(conn)
    assert df.empty
    assert "category" in df.columns
