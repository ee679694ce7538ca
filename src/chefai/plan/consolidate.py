"""Consolidation of shopping-list entries across recipes."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from chefai.logging_config import get_logger
from chefai.normalize.ingredients import (
    ParsedIngredient,
    parse_ingredient,
    singular_unit,
    unit_for_quantity,
)
from chefai.normalize.quantities import format_quantity

logger = get_logger(__name__)


class IngredientSource(Protocol):
    """Anything that carries an ingredient line and the recipe it came from."""

    ingredient_text: str
    recipe_name: str


class ShoppingListEntry(BaseModel):
    """One ingredient line on the shopping list, tagged with its recipe."""

    model_config = ConfigDict(frozen=True)

    ingredient_text: str = Field(
        validation_alias=AliasChoices("ingredient_text", "ingredientText")
    )
    recipe_name: str = Field(validation_alias=AliasChoices("recipe_name", "recipeName"))


@dataclass
class ConsolidatedIngredient:
    """One line of the consolidated shopping list."""

    combined_text: str
    total_quantity: float
    unit: str | None
    name: str
    recipes: list[str] = field(default_factory=list)
    original_items: list[Any] = field(default_factory=list)


@dataclass
class _Group:
    items: list[Any] = field(default_factory=list)
    quantities: list[float] = field(default_factory=list)
    unit: str | None = None


def grouping_key(parsed: ParsedIngredient) -> str:
    """
    Get the key that decides which entries merge.

    Entries merge on their lower-cased name and, when one was parsed, their
    unit, so "1 cup milk" and "200 ml milk" stay apart. Singular and plural
    spellings of a unit share a key ("cup" and "cups").
    """
    normalized_name = parsed.name.strip().lower()
    if parsed.unit:
        return f"{normalized_name}|{singular_unit(parsed.unit)}"
    return normalized_name


def _combined_text(total_quantity: float, unit: str | None, name: str) -> str:
    if total_quantity > 0 and math.isfinite(total_quantity):
        quantity = format_quantity(total_quantity)
        if unit:
            return f"{quantity} {unit} {name}"
        return f"{quantity} {name}"
    return name


def consolidate_ingredients(
    entries: Iterable[IngredientSource],
) -> list[ConsolidatedIngredient]:
    """
    Merge shopping-list entries that refer to the same ingredient and unit.

    Groups come out in the order their first entry appears. Each group sums
    the parsed quantities of its entries regardless of their order (entries
    without a quantity add nothing) and keeps the display name of its first entry.

    Args:
        entries: Entries with `ingredient_text` and `recipe_name`.

    Returns:
        One ConsolidatedIngredient per distinct ingredient and unit.
    """
    groups: dict[str, _Group] = {}

    for entry in entries:
        parsed = parse_ingredient(entry.ingredient_text)
        key = grouping_key(parsed)

        group = groups.get(key)
        if group is None:
            group = groups[key] = _Group(unit=singular_unit(parsed.unit) if parsed.unit else None)

        group.items.append(entry)
        if parsed.quantity is not None:
            group.quantities.append(parsed.quantity)

    consolidated: list[ConsolidatedIngredient] = []
    for group in groups.values():
        name = parse_ingredient(group.items[0].ingredient_text).name
        recipes = list(dict.fromkeys(item.recipe_name for item in group.items))
        total_quantity = math.fsum(group.quantities)
        unit = group.unit
        if unit and total_quantity > 0 and math.isfinite(total_quantity):
            unit = unit_for_quantity(unit, total_quantity)

        consolidated.append(
            ConsolidatedIngredient(
                combined_text=_combined_text(total_quantity, unit, name),
                total_quantity=total_quantity,
                unit=unit,
                name=name,
                recipes=recipes,
                original_items=list(group.items),
            )
        )

    logger.debug(
        f"Consolidated {sum(len(g.items) for g in groups.values())} entries "
        f"into {len(consolidated)} items"
    )

    return consolidated
