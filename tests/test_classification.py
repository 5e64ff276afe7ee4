import json

import pytest

from chef_utils.ingredients.classification import (
    CATEGORIES,
    CATEGORY_KEYWORDS,
    CategoryClassifier,
    classify,
    classify_many,
)


@pytest.mark.parametrize(
    "ingredient_line, expected_category",
    [
        ("2 cups milk", "Dairy"),
        ("1/2 tsp salt", "Baking & Spices"),
        ("3 large tomatoes", "Produce"),
        ("1 kg chicken breast", "Meat & Seafood"),
        ("2 eggs", "Dairy"),
        ("1 can black beans", "Canned & Jarred"),
        ("frozen peas", "Frozen"),
        ("sparkling water", "Beverages"),
        ("paper towels", "Household"),
        ("1 cup mixed berries", "Produce"),
        ("4 Scallions, sliced", "Produce"),
        ("500g spaghetti", "Grains & Pasta"),
    ],
)
def test_classify(ingredient_line, expected_category):
    assert classify(ingredient_line) == expected_category


@pytest.mark.parametrize(
    "ingredient_line, expected_category",
    [
        # "fruit" and "grape" must not match inside "grapefruit"
        ("grapefruit juice", "Beverages"),
        # "apple" must not match inside "pineapple"
        ("1 pineapple", "Other"),
        # "ham" must not match inside "shallots" or "champagne"
        ("champagne", "Other"),
    ],
)
def test_classify_matches_whole_words_only(ingredient_line, expected_category):
    assert classify(ingredient_line) == expected_category


@pytest.mark.parametrize(
    "ingredient_line, expected_category",
    [
        # "pepper" is listed under Produce before Baking & Spices
        ("black pepper", "Produce"),
        # "cream" (Dairy) comes before "ice cream" (Frozen)
        ("vanilla ice cream", "Dairy"),
    ],
)
def test_classify_first_category_in_table_order_wins(ingredient_line, expected_category):
    assert classify(ingredient_line) == expected_category


@pytest.mark.parametrize("ingredient_line", ["", "   ", "random unknown xyz123", "2 cups"])
def test_classify_unmatched_is_other(ingredient_line):
    assert classify(ingredient_line) == "Other"


def test_classify_always_returns_known_category():
    lines = [
        "",
        "1/0 cup sugar",
        "½",
        "(optional)",
        "!!!",
        "2-3",
        "Ice Cream",
        "ÉCLAIRS",
        "1 1/2 cups all-purpose flour",
    ]
    for line in lines:
        assert classify(line) in CATEGORIES


@pytest.mark.parametrize(
    "ingredient_line",
    ["1/² cup sugar", "1 ²/3 cups flour", "²/3 tsp salt", "1 ³ eggs"],
)
def test_classify_survives_non_ascii_digits(ingredient_line):
    assert classify(ingredient_line) in CATEGORIES


@pytest.mark.parametrize(
    "ingredient_line, expected_category",
    [
        ("2 tbsp fat (butter)", "Dairy"),
        ("1 tsp seasoning (salt)", "Baking & Spices"),
        ("2 cloves garlic (minced)", "Produce"),
    ],
)
def test_classify_looks_inside_parentheses(ingredient_line, expected_category):
    assert classify(ingredient_line) == expected_category


@pytest.mark.parametrize(
    "ingredient_line, expected_category",
    [
        # "can" must not take "canes" as its plural
        ("6 candy canes", "Other"),
        ("1 tbsp capers", "Canned & Jarred"),
        ("3 potatoes", "Produce"),
        ("2 cans tomatoes", "Produce"),
        ("1 bag tortilla chips", "Grains & Pasta"),
    ],
)
def test_classify_plural_forms(ingredient_line, expected_category):
    assert classify(ingredient_line) == expected_category


def test_classify_is_repeatable():
    lines = ["2 cups milk", "grapefruit juice", "mystery item"]
    assert classify_many(lines) == classify_many(lines)
    assert classify_many(lines) == ["Dairy", "Beverages", "Other"]


def test_categories_in_table_order_with_other_last():
    assert CATEGORIES == (
        "Produce",
        "Dairy",
        "Meat & Seafood",
        "Grains & Pasta",
        "Canned & Jarred",
        "Baking & Spices",
        "Frozen",
        "Beverages",
        "Household",
        "Other",
    )


def test_keyword_table_is_read_only():
    with pytest.raises(TypeError):
        CATEGORY_KEYWORDS["Produce"] = ("durian",)
    assert isinstance(CATEGORY_KEYWORDS["Produce"], tuple)


def test_custom_keyword_file(tmp_path):
    keywords_file = tmp_path / "keywords.json"
    keywords_file.write_text(
        json.dumps({"Snacks": ["chip"], "Produce": ["potato", "Chip"]}),
        encoding="utf-8",
    )
    classifier = CategoryClassifier(keywords_file=str(keywords_file))

    assert classifier.categories == ("Snacks", "Produce", "Other")
    assert classifier.keywords["Produce"] == ("potato", "chip")
    assert classifier.classify("1 bag potato chips") == "Snacks"
    assert classifier.classify("3 potatoes") == "Produce"
    assert classifier.classify("2 cups milk") == "Other"
