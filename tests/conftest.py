import pytest

from chef_utils.database import create_schema, get_connection
from chef_utils.recipes import Recipe, create_recipe


@pytest.fixture
def conn(tmp_path):
    conn = get_connection(tmp_path / "test_chef.db")
    create_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def make_recipe(conn):
    """Create a valid recipe for a user and return its id."""

    def _make(user_id="alice", title="Tomato Soup", ingredients=None, **kwargs):
        recipe = Recipe(
            title=title,
            description="A simple recipe for testing.",
            ingredients=ingredients or ["2 diced tomatoes", "1 onion"],
            steps=["Chop", "Cook"],
            **kwargs,
        )
        return create_recipe(conn, user_id, recipe)

    return _make
