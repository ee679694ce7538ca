"""Shopping list assembly and consolidation."""

from chefai.plan.consolidate import (
    ConsolidatedIngredient,
    ShoppingListEntry,
    consolidate_ingredients,
    grouping_key,
)
from chefai.plan.shopping_list import (
    ShoppingItemNotFoundError,
    ShoppingList,
    ShoppingListItem,
    ShoppingProgress,
)

__all__ = [
    "ConsolidatedIngredient",
    "ShoppingItemNotFoundError",
    "ShoppingList",
    "ShoppingListEntry",
    "ShoppingListItem",
    "ShoppingProgress",
    "consolidate_ingredients",
    "grouping_key",
]
