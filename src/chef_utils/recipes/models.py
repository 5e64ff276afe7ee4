"""Recipe records and their validation rules."""

import dataclasses
import json
import pathlib
from typing import List, Optional, Union

DIFFICULTIES = ("Easy", "Medium", "Hard")


@dataclasses.dataclass
class Recipe:
    """Dataclass for holding a stored or to-be-stored recipe."""

    title: str
    description: str
    ingredients: List[str]
    steps: List[str]
    user_id: Optional[str] = None
    id: Optional[int] = None
    tags: List[str] = dataclasses.field(default_factory=list)
    is_public: bool = False
    is_favorite: bool = False
    storage_id: Optional[str] = None
    format: Optional[str] = None
    cooking_time: Optional[int] = None
    difficulty: Optional[str] = None
    calories: Optional[int] = None
    author_name: Optional[str] = None


def recipe_errors(recipe: Recipe) -> List[str]:
    """Collect every validation problem of a recipe.

    Returns:
        A list of human-readable messages, empty when the recipe is valid.
    """
    errors = []
    if len(recipe.title.strip()) < 2:
        errors.append("Title must be at least 2 characters.")
    if len(recipe.description.strip()) < 10:
        errors.append("Description must be at least 10 characters.")

    if not recipe.ingredients:
        errors.append("At least one ingredient is required.")
    elif any(not i.strip() for i in recipe.ingredients):
        errors.append("Ingredient cannot be empty.")

    if not recipe.steps:
        errors.append("At least one step is required.")
    elif any(not s.strip() for s in recipe.steps):
        errors.append("Step cannot be empty.")

    if recipe.cooking_time is not None and recipe.cooking_time < 1:
        errors.append("Cooking time must be at least 1 minute.")
    if recipe.calories is not None and recipe.calories < 0:
        errors.append("Calories cannot be negative.")
    if recipe.difficulty is not None and recipe.difficulty not in DIFFICULTIES:
        errors.append(f"Difficulty must be one of {', '.join(DIFFICULTIES)}.")
    return errors


def validate_recipe(recipe: Recipe) -> None:
    """Raise ValueError listing all problems if the recipe is not valid."""
    errors = recipe_errors(recipe)
    if errors:
        raise ValueError(" ".join(errors))


def recipe_from_dict(data: dict) -> Recipe:
    """Build a Recipe from a JSON-style dict, ignoring unknown keys."""
    fields = {f.name for f in dataclasses.fields(Recipe)}
    return Recipe(**{k: v for k, v in data.items() if k in fields})


def load_recipes(path: Union[str, pathlib.Path]) -> List[Recipe]:
    """Load recipes from a JSON file holding a list of recipe objects.

    Args:
        path: Path to the JSON file.

    Returns:
        List of Recipe objects; empty if the file does not exist.

    Raises:
        TypeError: If an entry lacks a required field.
    """
    p = pathlib.Path(path)
    if not p.exists():
        return []
    with p.open("r", encoding="utf-8") as f:
        return [recipe_from_dict(item) for item in json.load(f)]
