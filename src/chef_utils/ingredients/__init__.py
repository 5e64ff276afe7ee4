"""Ingredient parsing, classification and pantry matching."""

from .classification import (
    CATEGORIES,
    CATEGORY_KEYWORDS,
    OTHER,
    CategoryClassifier,
    classify,
    classify_many,
    get_default_classifier,
    load_category_keywords,
)
from .matching import match_pantry, match_recipe
from .models import MatchResult, ParsedIngredient, RecipeIngredientSet
from .parsing import (
    UNIT_LOOKUP,
    clean_ingredient_name,
    extract_item_name,
    extract_keyword_text,
    normalize_unit,
    parse_ingredient,
    parse_quantity,
)

__all__ = [
    "CATEGORIES",
    "CATEGORY_KEYWORDS",
    "OTHER",
    "CategoryClassifier",
    "classify",
    "classify_many",
    "get_default_classifier",
    "load_category_keywords",
    "match_pantry",
    "match_recipe",
    "MatchResult",
    "ParsedIngredient",
    "RecipeIngredientSet",
    "UNIT_LOOKUP",
    "clean_ingredient_name",
    "extract_item_name",
    "extract_keyword_text",
    "normalize_unit",
    "parse_ingredient",
    "parse_quantity",
]
