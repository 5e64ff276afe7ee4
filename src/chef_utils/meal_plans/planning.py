"""Weekly meal-plan dates and the auto-fill heuristic."""

import dataclasses
import datetime
import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

MEAL_TYPES = ("breakfast", "lunch", "dinner")
DAYS_PER_WEEK = 7


@dataclasses.dataclass
class PlannedMeal:
    date: str  # YYYY-MM-DD
    meal_type: str
    recipe_id: int
    id: Optional[int] = None
    user_id: Optional[str] = None
    recipe_title: Optional[str] = None


def parse_date(date: str) -> datetime.date:
    """Parse a YYYY-MM-DD date, raising ValueError with the bad value."""
    try:
        return datetime.date.fromisoformat(date)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid date {date!r}, expected YYYY-MM-DD") from None


def validate_meal_type(meal_type: str) -> None:
    if meal_type not in MEAL_TYPES:
        raise ValueError(
            f"Unknown meal type {meal_type!r}, expected one of {', '.join(MEAL_TYPES)}"
        )


def week_dates(start_date: str) -> List[str]:
    """Return the seven YYYY-MM-DD dates of the week starting at start_date."""
    start = parse_date(start_date)
    return [
        (start + datetime.timedelta(days=i)).isoformat() for i in range(DAYS_PER_WEEK)
    ]


def auto_fill(
    recipe_ids: Sequence[int],
    existing: Iterable[PlannedMeal],
    start_date: str,
    rng: Optional[random.Random] = None,
) -> List[PlannedMeal]:
    """Plan a random recipe for every empty slot of a week.

    A slot is one meal type on one day. Slots that already hold a meal are
    left alone, and the same recipe may be picked for several slots.

    Args:
        recipe_ids: Recipes to choose from.
        existing: Meals already planned; only their date and meal type matter.
        start_date: First day of the week, YYYY-MM-DD.
        rng: Random source, for reproducible plans. Defaults to the
            ``random`` module.

    Returns:
        New PlannedMeal objects in day then meal-type order. Empty if there
        are no recipes to choose from.
    """
    dates = week_dates(start_date)
    if not recipe_ids:
        return []
    rng = rng or random

    taken: Set[Tuple[str, str]] = {(m.date, m.meal_type) for m in existing}
    return [
        PlannedMeal(date=date, meal_type=meal_type, recipe_id=rng.choice(recipe_ids))
        for date in dates
        for meal_type in MEAL_TYPES
        if (date, meal_type) not in taken
    ]
