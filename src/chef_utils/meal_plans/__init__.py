"""Weekly meal planning."""

from .planning import (
    MEAL_TYPES,
    PlannedMeal,
    auto_fill,
    parse_date,
    validate_meal_type,
    week_dates,
)
from .store import add_meal, auto_generate, get_week, move_meal, remove_meal

__all__ = [
    "MEAL_TYPES",
    "PlannedMeal",
    "auto_fill",
    "parse_date",
    "validate_meal_type",
    "week_dates",
    "add_meal",
    "auto_generate",
    "get_week",
    "move_meal",
    "remove_meal",
]
