"""Parse, format and scale free-text ingredient lines."""

from chefai.normalize.ingredients import (
    UNIT_VOCABULARY,
    ParsedIngredient,
    normalize_fractions,
    parse_ingredient,
    singular_unit,
    unit_for_quantity,
)
from chefai.normalize.quantities import format_quantity
from chefai.normalize.scaling import scale_ingredient, scale_ingredients

__all__ = [
    "UNIT_VOCABULARY",
    "ParsedIngredient",
    "format_quantity",
    "normalize_fractions",
    "parse_ingredient",
    "scale_ingredient",
    "scale_ingredients",
    "singular_unit",
    "unit_for_quantity",
]
