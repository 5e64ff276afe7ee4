"""Shopping-list storage and display grouping."""

from .grouping import (
    GENERAL_GROUP_ID,
    GENERAL_GROUP_TITLE,
    GROUP_BY_CATEGORY,
    GROUP_BY_RECIPE,
    group_items,
)
from .models import GroupedItem, ShoppingGroup, ShoppingItem
from .store import (
    add_item,
    add_items,
    clear_checked,
    list_items,
    recategorize_items,
    remove_item,
    toggle_item,
)

__all__ = [
    "GENERAL_GROUP_ID",
    "GENERAL_GROUP_TITLE",
    "GROUP_BY_CATEGORY",
    "GROUP_BY_RECIPE",
    "group_items",
    "GroupedItem",
    "ShoppingGroup",
    "ShoppingItem",
    "add_item",
    "add_items",
    "clear_checked",
    "list_items",
    "recategorize_items",
    "remove_item",
    "toggle_item",
]
