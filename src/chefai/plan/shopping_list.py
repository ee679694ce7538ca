"""In-memory shopping list built from recipe ingredients."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from chefai.logging_config import get_logger
from chefai.plan.consolidate import ConsolidatedIngredient, consolidate_ingredients

logger = get_logger(__name__)


class ShoppingItemNotFoundError(LookupError):
    """Raised when an item or recipe id is not on the shopping list."""

    def __init__(self, item_id: str, message: str | None = None):
        super().__init__(message or f"Shopping list item {item_id} not found")
        self.item_id = item_id


def _new_item_id() -> str:
    return f"shopping-item-{uuid.uuid4().hex[:12]}"


@dataclass
class ShoppingListItem:
    """A single ingredient line added from a recipe."""

    ingredient_text: str
    recipe_id: str
    recipe_name: str
    id: str = field(default_factory=_new_item_id)
    is_checked: bool = False
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class ShoppingProgress:
    """How much of the shopping list has been checked off."""

    total: int
    checked: int

    @property
    def percent_complete(self) -> int:
        """Get the checked share as a whole percentage."""
        if not self.total:
            return 0
        return round(self.checked / self.total * 100)


@dataclass
class ShoppingList:
    """Shopping list holding ingredient lines from several recipes."""

    items: list[ShoppingListItem] = field(default_factory=list)

    def add_recipe_ingredients(
        self,
        recipe_id: str,
        recipe_name: str,
        ingredients: list[str],
    ) -> list[ShoppingListItem]:
        """Append every ingredient of a recipe and return the new items."""
        new_items = [
            ShoppingListItem(
                ingredient_text=ingredient,
                recipe_id=recipe_id,
                recipe_name=recipe_name,
            )
            for ingredient in ingredients
        ]
        self.items.extend(new_items)

        logger.info(f"Added {len(new_items)} items from recipe {recipe_id}")
        return new_items

    def get_item(self, item_id: str) -> ShoppingListItem:
        """Get an item by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        raise ShoppingItemNotFoundError(item_id)

    def remove_item(self, item_id: str) -> ShoppingListItem:
        """Remove an item and return it."""
        item = self.get_item(item_id)
        self.items.remove(item)
        return item

    def toggle_item(self, item_id: str) -> ShoppingListItem:
        """Flip the checked state of an item."""
        item = self.get_item(item_id)
        item.is_checked = not item.is_checked
        return item

    def toggle_recipe(self, recipe_id: str) -> list[ShoppingListItem]:
        """
        Check or uncheck every item of a recipe at once.

        If any item of the recipe is unchecked they all become checked,
        otherwise they all become unchecked.
        """
        recipe_items = [item for item in self.items if item.recipe_id == recipe_id]
        if not recipe_items:
            raise ShoppingItemNotFoundError(
                recipe_id, f"No items from recipe {recipe_id} on the shopping list"
            )

        check = not all(item.is_checked for item in recipe_items)
        for item in recipe_items:
            item.is_checked = check

        logger.info(
            f"{'Checked' if check else 'Unchecked'} {len(recipe_items)} items of recipe {recipe_id}"
        )
        return recipe_items

    def clear(self) -> int:
        """Remove every item. Returns the number removed."""
        removed = len(self.items)
        self.items.clear()
        logger.info(f"Cleared shopping list ({removed} items)")
        return removed

    def clear_checked(self) -> int:
        """Remove checked items. Returns the number removed."""
        remaining = [item for item in self.items if not item.is_checked]
        removed = len(self.items) - len(remaining)
        self.items = remaining
        logger.info(f"Removed {removed} checked items")
        return removed

    def search(self, query: str = "") -> list[ShoppingListItem]:
        """
        Filter items by ingredient text or recipe name.

        Matching is a case-insensitive substring test; a blank query
        returns every item.
        """
        needle = query.strip().lower()
        if not needle:
            return list(self.items)
        return [
            item
            for item in self.items
            if needle in item.ingredient_text.lower() or needle in item.recipe_name.lower()
        ]

    def group_by_recipe(
        self,
        items: list[ShoppingListItem] | None = None,
    ) -> dict[str, list[ShoppingListItem]]:
        """Group items by recipe id, in the order recipes first appear."""
        groups: dict[str, list[ShoppingListItem]] = {}
        for item in self.items if items is None else items:
            groups.setdefault(item.recipe_id, []).append(item)
        return groups

    def progress(self) -> ShoppingProgress:
        """Get checked/total counts."""
        checked = sum(1 for item in self.items if item.is_checked)
        return ShoppingProgress(total=len(self.items), checked=checked)

    def consolidated(self, query: str = "") -> list[ConsolidatedIngredient]:
        """Consolidate the items matching `query` across recipes."""
        return consolidate_ingredients(self.search(query))
