import dataclasses
from typing import List, Optional


@dataclasses.dataclass
class ShoppingItem:
    id: int
    user_id: str
    ingredient: str
    is_checked: bool = False
    recipe_id: Optional[int] = None
    category: Optional[str] = None
    recipe_title: Optional[str] = None


@dataclasses.dataclass
class GroupedItem:
    """Identical shopping-list entries folded into one display row."""

    ids: List[int]
    ingredient: str
    is_checked: bool
    count: int = 1
    recipe_id: Optional[int] = None
    recipe_title: Optional[str] = None
    category: Optional[str] = None

    @property
    def id(self) -> int:
        return self.ids[0]


@dataclasses.dataclass
class ShoppingGroup:
    id: str
    title: str
    items: List[GroupedItem] = dataclasses.field(default_factory=list)
