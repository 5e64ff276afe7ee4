"""Shopping-aisle classification of ingredient lines."""

import functools
import json
import logging
import os
import re
import types
from typing import Iterable, List, Mapping, Tuple

from chef_utils.ingredients.parsing import extract_keyword_text

logger = logging.getLogger(__name__)

OTHER = "Other"

DEFAULT_KEYWORDS_FILE = os.path.join(
    os.path.dirname(__file__), "data", "category_keywords.json"
)


def load_category_keywords(
    keywords_file: str = DEFAULT_KEYWORDS_FILE,
) -> Mapping[str, Tuple[str, ...]]:
    """Load the category keyword table from a JSON file.

    The file holds an object mapping each category to a list of keywords.
    Object order is kept and decides which category wins when keywords
    of several categories match.

    Returns:
        A read-only mapping of category name to a tuple of lowercase keywords.
    """
    with open(keywords_file, "r", encoding="utf-8") as f:
        raw = json.load(f)
    table = {
        category: tuple(keyword.strip().lower() for keyword in keywords)
        for category, keywords in raw.items()
    }
    logger.debug(
        f"Loaded {sum(len(k) for k in table.values())} keywords "
        f"in {len(table)} categories from {keywords_file}"
    )
    return types.MappingProxyType(table)


def _keyword_pattern(keyword: str) -> re.Pattern:
    """Compile a whole-word pattern for a keyword that also accepts its plural.

    "tomato" matches "tomatoes", "berry" matches "berries" and "peach"
    matches "peaches", but "can" does not match "canes" and no keyword
    matches inside a longer word such as "grapefruit".
    """
    if len(keyword) > 1 and keyword.endswith("y") and keyword[-2] not in "aeiou":
        body = re.escape(keyword[:-1]) + "(?:y|ies)"
    elif keyword.endswith(("s", "x", "z", "ch", "sh")):
        body = re.escape(keyword) + "(?:es)?"
    elif keyword.endswith("o"):
        body = re.escape(keyword) + "(?:e?s)?"
    else:
        body = re.escape(keyword) + "s?"
    return re.compile(r"\b" + body + r"\b", re.IGNORECASE)


class CategoryClassifier:
    """Assigns each ingredient line to exactly one shopping-aisle category.

    Categories are tried in the order of the keyword table and the first
    one with a keyword found in the item name wins. Lines that match no
    keyword fall into "Other".

    Attributes:
        keywords (Mapping[str, Tuple[str, ...]]): Read-only keyword table.
        categories (Tuple[str, ...]): Category labels in table order,
            ending with "Other".
    """

    def __init__(self, keywords_file: str = DEFAULT_KEYWORDS_FILE):
        """Load the keyword table and compile one pattern per keyword.

        Args:
            keywords_file (str): Path to the JSON keyword table. Defaults to
                the bundled table.
        """
        self.keywords = load_category_keywords(keywords_file)
        self.categories = tuple(self.keywords) + (OTHER,)
        self._patterns = tuple(
            (category, tuple(_keyword_pattern(k) for k in keywords))
            for category, keywords in self.keywords.items()
        )

    def classify(self, ingredient_line: str) -> str:
        """Return the category for one ingredient line.

        Leading amounts and units are removed before keyword lookup, so
        "2 cups milk" is looked up as "milk". Words in parentheses are
        searched too: "2 tbsp fat (butter)" is Dairy.

        Args:
            ingredient_line (str): Free-text ingredient line.

        Returns:
            str: One of ``self.categories``. Never raises.
        """
        item = extract_keyword_text(ingredient_line)
        if not item:
            return OTHER

        for category, patterns in self._patterns:
            if any(pattern.search(item) for pattern in patterns):
                return category
        return OTHER

    def classify_many(self, ingredient_lines: Iterable[str]) -> List[str]:
        return [self.classify(line) for line in ingredient_lines]


@functools.lru_cache(maxsize=None)
def get_default_classifier() -> CategoryClassifier:
    """Return the process-wide classifier built from the bundled table."""
    return CategoryClassifier()


def classify(ingredient_line: str) -> str:
    """Classify an ingredient line with the bundled keyword table.

    Examples:
        >>> classify("2 cups milk")
        'Dairy'
        >>> classify("grapefruit juice")
        'Beverages'
    """
    return get_default_classifier().classify(ingredient_line)


def classify_many(ingredient_lines: Iterable[str]) -> List[str]:
    return get_default_classifier().classify_many(ingredient_lines)


CATEGORY_KEYWORDS = get_default_classifier().keywords
CATEGORIES = get_default_classifier().categories
