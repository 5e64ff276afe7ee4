"""Recipe records, validation and storage."""

from .models import (
    DIFFICULTIES,
    Recipe,
    load_recipes,
    recipe_errors,
    recipe_from_dict,
    validate_recipe,
)
from .store import (
    create_recipe,
    delete_recipe,
    get_public_recipe,
    get_recipe,
    list_recipes,
    recipe_ingredient_sets,
    search_by_ingredients,
    toggle_favorite,
    update_recipe,
    upsert_user,
)

__all__ = [
    "DIFFICULTIES",
    "Recipe",
    "load_recipes",
    "recipe_errors",
    "recipe_from_dict",
    "validate_recipe",
    "create_recipe",
    "delete_recipe",
    "get_public_recipe",
    "get_recipe",
    "list_recipes",
    "recipe_ingredient_sets",
    "search_by_ingredients",
    "toggle_favorite",
    "update_recipe",
    "upsert_user",
]
