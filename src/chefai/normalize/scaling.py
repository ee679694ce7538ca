"""Scaling ingredient lines to a different number of servings."""

import re

from chefai.logging_config import get_logger
from chefai.normalize.quantities import format_quantity

logger = get_logger(__name__)

# Measures that stay the same no matter how many people are served
NON_SCALABLE_MEASURES: tuple[str, ...] = (
    "pinch",
    "pinches",
    "dash",
    "dashes",
    "to taste",
    "as needed",
)

# "2", "2.5", "1/2" or "1 1/2" at the start of the line, followed by whitespace
LEADING_QUANTITY_PATTERN = re.compile(r"^((\d+\s+)?(\d+/\d+|\d+\.\d+|\d+))\s+")


def _quantity_value(quantity: str) -> float | None:
    """Read a leading quantity token, or None when it cannot be evaluated."""
    whole = 0
    parts = quantity.split()
    if len(parts) == 2:
        whole = int(parts[0])
    token = parts[-1]

    if "/" in token:
        num, denom = (int(part) for part in token.split("/"))
        if denom == 0:
            return None
        return whole + num / denom

    if len(parts) == 2:
        # "2 3" is two numbers, not a mixed fraction
        return None
    return float(token)


def scale_ingredient(text: str, original_servings: int, new_servings: int) -> str:
    """
    Scale the leading quantity of an ingredient line.

    Lines without a leading quantity, or that use a non-scalable measure
    such as a pinch, are returned unchanged.

    Raises:
        ValueError: If either serving count is not positive.
    """
    if original_servings <= 0 or new_servings <= 0:
        raise ValueError("Servings must be positive")

    if original_servings == new_servings:
        return text

    match = LEADING_QUANTITY_PATTERN.match(text)
    lowered = text.lower()
    if not match or any(measure in lowered for measure in NON_SCALABLE_MEASURES):
        return text

    value = _quantity_value(match.group(1))
    if value is None:
        return text

    scaled = format_quantity(value * new_servings / original_servings)
    if not scaled:
        return text

    rest = text[match.end() :]
    return f"{scaled} {rest}"


def scale_ingredients(
    ingredients: list[str],
    original_servings: int,
    new_servings: int,
) -> list[str]:
    """Scale every ingredient line of a recipe."""
    logger.debug(
        f"Scaling {len(ingredients)} ingredients from {original_servings} "
        f"to {new_servings} servings"
    )
    return [scale_ingredient(line, original_servings, new_servings) for line in ingredients]
