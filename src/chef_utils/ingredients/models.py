import dataclasses
from typing import List, Optional, Union

RecipeId = Union[int, str]


@dataclasses.dataclass(frozen=True)
class ParsedIngredient:
    quantity: float
    unit: str
    item: str
    original: str


@dataclasses.dataclass(frozen=True)
class RecipeIngredientSet:
    id: RecipeId
    ingredients: List[str]
    title: Optional[str] = None


@dataclasses.dataclass
class MatchResult:
    recipe_id: RecipeId
    title: Optional[str]
    match_count: int
    match_percentage: float  # 0-100, unrounded
    matching_ingredients: List[str]
    missing_ingredients: List[str]
