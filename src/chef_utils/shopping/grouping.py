"""Grouping shopping-list items by aisle category or by source recipe."""

from typing import Dict, Iterable, List, Tuple

from chef_utils.ingredients import OTHER
from chef_utils.shopping.models import GroupedItem, ShoppingGroup, ShoppingItem

GROUP_BY_CATEGORY = "category"
GROUP_BY_RECIPE = "recipe"

GENERAL_GROUP_ID = "general"
GENERAL_GROUP_TITLE = "General Items"


def _group_key(item: ShoppingItem, group_by: str) -> Tuple[str, str]:
    if group_by == GROUP_BY_RECIPE:
        if item.recipe_id is None:
            return GENERAL_GROUP_ID, GENERAL_GROUP_TITLE
        return str(item.recipe_id), item.recipe_title or GENERAL_GROUP_TITLE
    category = item.category or OTHER
    return category, category


def _same_entry(existing: GroupedItem, item: ShoppingItem) -> bool:
    return (
        existing.ingredient.lower().strip() == item.ingredient.lower().strip()
        and existing.is_checked == item.is_checked
    )


def _group_sort_key(group: ShoppingGroup, group_by: str):
    if group_by == GROUP_BY_RECIPE:
        return (group.id != GENERAL_GROUP_ID, group.title.lower())
    return (group.title == OTHER, group.title.lower())


def group_items(
    items: Iterable[ShoppingItem], group_by: str = GROUP_BY_CATEGORY
) -> List[ShoppingGroup]:
    """Group shopping-list items for display.

    In category mode items are keyed by their stored category ("Other" when
    missing) and groups are sorted by title with "Other" last. In recipe
    mode items are keyed by source recipe; items without one go to
    "General Items", which comes first.

    Within a group, entries with the same ingredient text (ignoring case
    and surrounding whitespace) and the same checked state are folded into
    one GroupedItem that keeps every id and a count.

    Args:
        items: Shopping-list items in display order.
        group_by: "category" or "recipe".

    Returns:
        Sorted list of ShoppingGroup objects.

    Raises:
        ValueError: If group_by is not a known mode.
    """
    if group_by not in (GROUP_BY_CATEGORY, GROUP_BY_RECIPE):
        raise ValueError(f"Unknown group_by mode: {group_by!r}")

    groups: Dict[str, ShoppingGroup] = {}
    for item in items:
        key, title = _group_key(item, group_by)
        group = groups.setdefault(key, ShoppingGroup(id=key, title=title))

        existing = next((g for g in group.items if _same_entry(g, item)), None)
        if existing is not None:
            existing.ids.append(item.id)
            existing.count += 1
        else:
            group.items.append(
                GroupedItem(
                    ids=[item.id],
                    ingredient=item.ingredient,
                    is_checked=item.is_checked,
                    recipe_id=item.recipe_id,
                    recipe_title=item.recipe_title,
                    category=item.category,
                )
            )

    return sorted(groups.values(), key=lambda g: _group_sort_key(g, group_by))
