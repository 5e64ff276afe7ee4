"""CHEF Utils - Ingredient classification, pantry matching and meal planning for CHEF."""

__version__ = "0.1.0"

from . import database, ingredients, meal_plans, recipes, shopping

__all__ = ["database", "ingredients", "meal_plans", "recipes", "shopping"]
