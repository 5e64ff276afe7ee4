"""Ranking recipes by how much of them a pantry already covers."""

import logging
from typing import Iterable, List, Sequence

from chef_utils.ingredients.models import MatchResult, RecipeIngredientSet

logger = logging.getLogger(__name__)


def _normalize_pantry(pantry_ingredients: Iterable[str]) -> List[str]:
    """Lowercase pantry entries and drop blank ones.

    A blank entry would be a substring of every ingredient line.
    """
    normalized = []
    for ingredient in pantry_ingredients:
        ingredient = ingredient.strip().lower()
        if ingredient:
            normalized.append(ingredient)
    return normalized


def _match_normalized(pantry: Sequence[str], recipe: RecipeIngredientSet) -> MatchResult:
    matching, missing = [], []
    for line in recipe.ingredients:
        lowered = line.lower()
        if any(have in lowered for have in pantry):
            matching.append(line)
        else:
            missing.append(line)

    total = len(recipe.ingredients)
    return MatchResult(
        recipe_id=recipe.id,
        title=recipe.title,
        match_count=len(matching),
        match_percentage=len(matching) / total * 100 if total else 0.0,
        matching_ingredients=matching,
        missing_ingredients=missing,
    )


def match_recipe(
    pantry_ingredients: Iterable[str], recipe: RecipeIngredientSet
) -> MatchResult:
    """Split one recipe's ingredient lines into ones the pantry has and lacks.

    A line counts as matched when any pantry entry occurs in it as a
    substring, ignoring case: "tomato" matches "2 diced tomatoes" and
    "tomato paste".

    Args:
        pantry_ingredients: Free-text names of ingredients on hand.
        recipe: The recipe to check.

    Returns:
        A MatchResult, possibly with a match count of zero. The ingredient
        lists keep the recipe's original text and order.
    """
    return _match_normalized(_normalize_pantry(pantry_ingredients), recipe)


def match_pantry(
    pantry_ingredients: Iterable[str], recipes: Iterable[RecipeIngredientSet]
) -> List[MatchResult]:
    """Rank recipes by the share of their ingredients found in the pantry.

    Recipes without any matched ingredient are left out. Results are
    sorted by descending match percentage; recipes with equal percentages
    keep their input order.

    Args:
        pantry_ingredients: Free-text names of ingredients on hand. An empty
            pantry gives an empty result without looking at any recipe.
        recipes: Candidate recipes.

    Returns:
        List of MatchResult objects, best match first.
    """
    pantry = _normalize_pantry(pantry_ingredients)
    if not pantry:
        return []

    results = []
    for recipe in recipes:
        result = _match_normalized(pantry, recipe)
        if result.match_count > 0:
            results.append(result)

    results.sort(key=lambda r: r.match_percentage, reverse=True)
    logger.debug(f"{len(results)} recipes matched {len(pantry)} pantry ingredients")
    return results
