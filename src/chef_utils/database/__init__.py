"""Database utilities for CHEF recipe databases."""

from .schema import DDL, create_schema
from .utils import (
    get_connection,
    get_owned_row,
    get_recipe_ingredient_data,
    transaction,
)

__all__ = [
    "DDL",
    "create_schema",
    "get_connection",
    "transaction",
    "get_owned_row",
    "get_recipe_ingredient_data",
]
