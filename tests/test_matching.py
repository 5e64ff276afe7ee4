import pytest

from chef_utils.ingredients.matching import match_pantry, match_recipe
from chef_utils.ingredients.models import MatchResult, RecipeIngredientSet


@pytest.fixture
def recipes():
    return [
        RecipeIngredientSet(id=1, title="Salsa", ingredients=["2 diced tomatoes", "1 onion"]),
        RecipeIngredientSet(id=2, title="Omelette", ingredients=["3 eggs", "Butter"]),
        RecipeIngredientSet(id=3, title="Tomato Sauce", ingredients=["Tomato paste"]),
        RecipeIngredientSet(id=4, title="Toast", ingredients=["bread", "butter", "jam"]),
    ]


def test_match_pantry_single_recipe():
    recipe = RecipeIngredientSet(id=1, ingredients=["2 diced tomatoes", "1 onion"])
    results = match_pantry(["tomato"], [recipe])
    assert results == [
        MatchResult(
            recipe_id=1,
            title=None,
            match_count=1,
            match_percentage=50.0,
            matching_ingredients=["2 diced tomatoes"],
            missing_ingredients=["1 onion"],
        )
    ]


def test_match_pantry_sorted_by_percentage(recipes):
    results = match_pantry(["Tomato", "butter"], recipes)
    assert [r.recipe_id for r in results] == [3, 1, 2, 4]
    assert results[0].match_percentage == 100.0
    assert results[1].match_percentage == 50.0
    assert results[3].match_percentage == pytest.approx(100 / 3)


def test_match_pantry_ties_keep_input_order(recipes):
    results = match_pantry(["butter", "onion"], recipes)
    assert [(r.recipe_id, r.match_percentage) for r in results] == [
        (1, 50.0),
        (2, 50.0),
        (4, pytest.approx(100 / 3)),
    ]


def test_match_pantry_excludes_recipes_without_matches(recipes):
    results = match_pantry(["eggs"], recipes)
    assert [r.recipe_id for r in results] == [2]


def test_match_pantry_keeps_original_text(recipes):
    result = match_pantry(["BUTTER"], recipes)[0]
    assert result.recipe_id == 2
    assert result.matching_ingredients == ["Butter"]
    assert result.missing_ingredients == ["3 eggs"]


def test_match_pantry_substring_matching_favors_recall(recipes):
    """A pantry entry matches anywhere inside a recipe line, even in other words."""
    results = match_pantry(["tom"], recipes)
    assert {r.recipe_id for r in results} == {1, 3}


@pytest.mark.parametrize("pantry", [[], [""], ["   ", ""]])
def test_match_pantry_empty_pantry(recipes, pantry):
    assert match_pantry(pantry, recipes) == []


def test_match_pantry_no_recipes():
    assert match_pantry(["tomato"], []) == []


def test_match_pantry_skips_recipe_without_ingredients():
    assert match_pantry(["tomato"], [RecipeIngredientSet(id=9, ingredients=[])]) == []


def test_match_pantry_is_repeatable(recipes):
    pantry = ["tomato", "bread"]
    assert match_pantry(pantry, recipes) == match_pantry(pantry, recipes)


def test_match_pantry_accepts_generators(recipes):
    results = match_pantry((p for p in ["jam"]), (r for r in recipes))
    assert [r.recipe_id for r in results] == [4]


def test_match_recipe_reports_zero_matches():
    recipe = RecipeIngredientSet(id="abc", ingredients=["rice", "beans"])
    result = match_recipe(["tomato"], recipe)
    assert result.match_count == 0
    assert result.match_percentage == 0.0
    assert result.missing_ingredients == ["rice", "beans"]
