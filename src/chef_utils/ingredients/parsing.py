"""Ingredient line parsing: leading quantity and unit stripping."""

import re
from decimal import InvalidOperation
from typing import Optional, Tuple

from chef_utils.ingredients.models import ParsedIngredient
from chef_utils.ingredients.number_utils import (
    _is_fraction,
    _is_integer,
    _is_number,
    _parse_fraction,
    replace_unicode_fractions,
)

# --- Constants ---

UNIT_MAP = {
    # Volume
    "cup": ["cup", "cups", "c"],
    "teaspoon": ["teaspoon", "teaspoons", "tsp", "tsps"],
    "tablespoon": ["tablespoon", "tablespoons", "tbsp", "tbsps", "tbs"],
    "ounce": ["ounce", "ounces", "oz"],
    "ml": ["milliliter", "milliliters", "millilitre", "millilitres", "ml"],
    "l": ["liter", "liters", "litre", "litres", "l"],
    # Weight
    "pound": ["pound", "pounds", "lb", "lbs"],
    "gram": ["gram", "grams", "g"],
    "kilogram": ["kilogram", "kilograms", "kg", "kgs"],
    # Size
    "large": ["large"],
    "medium": ["medium"],
    "small": ["small"],
    # Count/measure
    "bunch": ["bunch", "bunches"],
    "clove": ["clove", "cloves"],
    "slice": ["slice", "slices"],
    "piece": ["piece", "pieces"],
    "pinch": ["pinch", "pinches"],
    "dash": ["dash", "dashes"],
    # Containers
    "can": ["can", "cans"],
    "jar": ["jar", "jars"],
    "bottle": ["bottle", "bottles"],
    "package": ["package", "packages", "pkg", "pkgs"],
    "pack": ["pack", "packs"],
    "bag": ["bag", "bags"],
    "box": ["box", "boxes"],
}

# Reverse mapping for lookup
UNIT_LOOKUP = {v: k for k, vs in UNIT_MAP.items() for v in vs}

# A number written straight against its unit, e.g. "500g" or "2oz."
_GLUED_UNIT = re.compile(r"^(\d+(?:[./]\d+)?)([a-z]+\.?)(?=\s|$)")

# --- Functions ---


def normalize_unit(unit: str) -> str:
    """Normalize unit names to their standard form.

    Examples:
        >>> normalize_unit("tbsp.")
        'tablespoon'
        >>> normalize_unit("Lbs")
        'pound'
    """
    unit = unit.lower().strip(".")
    return UNIT_LOOKUP.get(unit, unit)  # Return original if not found


def parse_quantity(text: str) -> Tuple[Optional[float], Optional[str], str]:
    """Split an ingredient line into amount, unit and item name.

    The line is trimmed and lowercased first. The amount may be an integer,
    a decimal, a fraction, a mixed number, a unicode fraction or a range;
    the unit is only recognised as the word directly after the amount (or
    the first word when there is no amount).

    Args:
        text: Raw ingredient line (e.g. "2 cups milk" or "1/2 tsp salt").

    Returns:
        A tuple containing:
            - amount: Numeric quantity as float, or None if no quantity found
            - unit: Normalized unit name, or None if no unit found
            - name: The remaining item name. If nothing is left once the
              amount and unit are removed (e.g. "2 cups"), this is the
              whole normalized line instead.
    """
    original_text = " ".join(text.split()).lower()

    amount, unit, rest = _strip_quantity(original_text)
    name = clean_ingredient_name(rest)

    if not name:
        name = original_text
    return amount, unit, name


def _strip_quantity(text: str) -> Tuple[Optional[float], Optional[str], str]:
    """Split a normalized line into amount, unit and the unparsed rest."""
    t = re.sub(r"^\([^)]*\)\s*", "", text)  # parenthetical quantities
    t = replace_unicode_fractions(t)
    t = _GLUED_UNIT.sub(_split_glued_unit, t)

    amount, rest = _parse_amount(t)
    unit, rest = _parse_unit(rest)
    return amount, unit, rest


def _split_glued_unit(match: re.Match) -> str:
    if match.group(2).strip(".") in UNIT_LOOKUP:
        return f"{match.group(1)} {match.group(2)}"
    return match.group(0)


def _parse_amount(text: str) -> Tuple[Optional[float], str]:
    """Parse an amount from the start of an ingredient string.

    Returns:
        A tuple of the amount (None if there is none) and the remaining text.
    """
    words = text.split()
    if not words:
        return None, ""

    try:
        for parser in [_parse_number_range, _parse_mixed_number, _parse_simple_number]:
            amount, consumed_words = parser(words)
            if amount is not None:
                return amount, " ".join(words[consumed_words:])
    except (ValueError, ZeroDivisionError, InvalidOperation):
        # Malformed numbers such as "1/0" are left in the text
        pass

    return None, " ".join(words)


def _parse_number_range(words: list[str]) -> Tuple[Optional[float], int]:
    """Parse ranges like '2 to 3' or '2-3' into their midpoint."""
    if (
        len(words) >= 3
        and _is_number(words[0])
        and words[1] == "to"
        and _is_number(words[2])
    ):
        return (float(words[0]) + float(words[2])) / 2, 3

    parts = words[0].split("-")
    if len(parts) == 2 and _is_number(parts[0]) and _is_number(parts[1]):
        return (float(parts[0]) + float(parts[1])) / 2, 1

    return None, 0


def _parse_mixed_number(words: list[str]) -> Tuple[Optional[float], int]:
    """Parse mixed numbers like '1 1/2' or '1 .5'."""
    if len(words) < 2 or not _is_integer(words[0]):
        return None, 0

    whole_part = int(words[0])

    if _is_fraction(words[1]):
        return float(whole_part + _parse_fraction(words[1])), 2

    # "1 .5" comes from "1 ½" after unicode replacement
    if _is_number(words[1]) and 0 < float(words[1]) < 1:
        return whole_part + float(words[1]), 2

    return None, 0


def _parse_simple_number(words: list[str]) -> Tuple[Optional[float], int]:
    """Parse simple numbers like '1/2', '2.5', or '3'."""
    if _is_fraction(words[0]):
        return float(_parse_fraction(words[0])), 1

    if _is_number(words[0]):
        return float(words[0]), 1

    return None, 0


def _parse_unit(text: str) -> Tuple[Optional[str], str]:
    """Parse a unit from the start of an ingredient string."""
    words = text.split()
    if not words:
        return None, text

    potential_unit = words[0].strip(".")
    if potential_unit in UNIT_LOOKUP:
        return normalize_unit(potential_unit), " ".join(words[1:])

    return None, text


def clean_ingredient_name(name: str) -> str:
    """Remove parenthetical notes and stray whitespace/commas from a name.

    Examples:
        >>> clean_ingredient_name("chicken thighs (skin on)")
        'chicken thighs'
        >>> clean_ingredient_name("  rice,  basmati ,")
        'rice, basmati'
    """
    name = re.sub(r"\s*\([^)]*\)", "", name)
    name = re.sub(r"\s+", " ", name)
    name = re.sub(r"\s+,", ",", name)
    return name.strip().strip(",").strip()


def extract_item_name(text: str) -> str:
    """Return the item name of an ingredient line without amount or unit.

    Examples:
        >>> extract_item_name("1 kg Chicken Breast")
        'chicken breast'
        >>> extract_item_name("2 cups")
        '2 cups'
    """
    return parse_quantity(text)[2]


def extract_keyword_text(text: str) -> str:
    """Return the part of an ingredient line that keyword lookups search.

    Like extract_item_name, but words inside parentheses are kept, since
    they often name the actual ingredient.

    Examples:
        >>> extract_keyword_text("2 tbsp fat (butter)")
        'fat butter'
        >>> extract_keyword_text("2 cups")
        '2 cups'
    """
    original_text = " ".join(text.split()).lower()
    rest = _strip_quantity(original_text)[2]
    rest = " ".join(rest.replace("(", " ").replace(")", " ").split())
    return rest.strip(",").strip() or original_text


def parse_ingredient(text: str) -> ParsedIngredient:
    """Parse an ingredient line into a ParsedIngredient.

    A line without an amount counts as one of the item, and a line
    without a unit gets an empty unit.
    """
    amount, unit, item = parse_quantity(text)
    return ParsedIngredient(
        quantity=amount if amount is not None else 1.0,
        unit=unit or "",
        item=item,
        original=" ".join(text.split()).lower(),
    )
