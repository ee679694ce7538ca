"""Free-text ingredient line parsing."""

import re
from dataclasses import dataclass

from chefai.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Vocabulary
# =============================================================================

# Recognized unit words, matched case-insensitively right after the quantity
UNIT_VOCABULARY: tuple[str, ...] = (
    "cup", "cups", "c",
    "tablespoon", "tablespoons", "tbsp", "tbs", "T",
    "teaspoon", "teaspoons", "tsp", "t",
    "ounce", "ounces", "oz",
    "pound", "pounds", "lb", "lbs",
    "gram", "grams", "g",
    "kilogram", "kilograms", "kg",
    "milliliter", "milliliters", "ml",
    "liter", "liters", "l",
    "pint", "pints", "pt",
    "quart", "quarts", "qt",
    "gallon", "gallons", "gal",
    "pinch", "pinches",
    "dash", "dashes",
    "bunch", "bunches",
    "can", "cans",
    "jar", "jars",
    "package", "packages", "pkg",
    "slice", "slices",
    "piece", "pieces",
    "clove", "cloves",
    "head", "heads",
    "whole",
)  # fmt: skip

# Singular -> plural spelling of the vocabulary units that have one
UNIT_PLURALS: dict[str, str] = {
    "cup": "cups",
    "tablespoon": "tablespoons",
    "teaspoon": "teaspoons",
    "ounce": "ounces",
    "pound": "pounds",
    "lb": "lbs",
    "gram": "grams",
    "kilogram": "kilograms",
    "milliliter": "milliliters",
    "liter": "liters",
    "pint": "pints",
    "quart": "quarts",
    "gallon": "gallons",
    "pinch": "pinches",
    "dash": "dashes",
    "bunch": "bunches",
    "can": "cans",
    "jar": "jars",
    "package": "packages",
    "slice": "slices",
    "piece": "pieces",
    "clove": "cloves",
    "head": "heads",
}

UNIT_SINGULARS: dict[str, str] = {plural: singular for singular, plural in UNIT_PLURALS.items()}

UNICODE_FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅐": 1 / 7,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

MIXED_NUMBER_PATTERN = re.compile(r"(\d+)\s+(\d+)/(\d+)")
FRACTION_PATTERN = re.compile(r"(\d+)/(\d+)")

# quantity, unit and the whitespace after them; the rest of the line is the name
QUANTITY_UNIT_PATTERN = re.compile(
    r"^\s*(\d*\.?\d+)?\s*(" + "|".join(re.escape(u) for u in UNIT_VOCABULARY) + r")?\s+(.+)\Z",
    re.IGNORECASE,
)


@dataclass
class ParsedIngredient:
    """Structured view of one ingredient line."""

    quantity: float | None
    unit: str | None
    name: str


# =============================================================================
# Parsing Functions
# =============================================================================


def singular_unit(unit: str) -> str:
    """Get the singular spelling of a unit ("cups" -> "cup")."""
    return UNIT_SINGULARS.get(unit, unit)


def unit_for_quantity(unit: str, quantity: float) -> str:
    """Spell a unit in agreement with its quantity ("cup" for 1/2, "cups" for 3)."""
    singular = singular_unit(unit)
    if quantity > 1:
        return UNIT_PLURALS.get(singular, singular)
    return singular


def _decimal_text(value: float) -> str:
    """Render a number the way it is written back into an ingredient line."""
    if value == int(value):
        return str(int(value))
    return str(value)


def _replace_mixed_number(match: re.Match) -> str:
    whole, num, denom = (int(group) for group in match.groups())
    if denom == 0:
        return match.group(0)
    try:
        return _decimal_text(whole + num / denom)
    except OverflowError:
        return match.group(0)


def _replace_fraction(match: re.Match) -> str:
    num, denom = (int(group) for group in match.groups())
    if denom == 0:
        return match.group(0)
    try:
        return _decimal_text(num / denom)
    except OverflowError:
        return match.group(0)


def normalize_fractions(text: str) -> str:
    """
    Rewrite fraction notations in an ingredient line as decimals.

    Examples:
        "½ cup sugar" -> " 0.5  cup sugar"
        "1 1/2 cups flour" -> "1.5 cups flour"
        "3/4 tsp salt" -> "0.75 tsp salt"

    Fractions with a zero denominator, or too large for a float, are left
    untouched.
    """
    for glyph, value in UNICODE_FRACTIONS.items():
        text = text.replace(glyph, f" {value} ")

    text = MIXED_NUMBER_PATTERN.sub(_replace_mixed_number, text)
    return FRACTION_PATTERN.sub(_replace_fraction, text)


def parse_ingredient(text: str) -> ParsedIngredient:
    """
    Parse an ingredient line into quantity, unit and name.

    The first vocabulary word after an optional leading quantity is always
    read as the unit, so "1 can beans" yields unit "can". Lines without a
    recognizable prefix keep their trimmed text as the name.

    Examples:
        "1 1/2 cups chopped tomatoes" -> (1.5, "cups", "chopped tomatoes")
        "3 eggs" -> (3.0, None, "eggs")
        "salt" -> (None, None, "salt")
    """
    if not text or not text.strip():
        return ParsedIngredient(quantity=None, unit=None, name="")

    result = ParsedIngredient(quantity=None, unit=None, name=text.strip())

    match = QUANTITY_UNIT_PATTERN.match(normalize_fractions(text))
    if not match:
        logger.debug(f"No quantity or unit prefix in {text!r}")
        return result

    quantity, unit, name = match.groups()
    result.name = name.strip()
    if quantity:
        result.quantity = float(quantity)
    if unit:
        result.unit = unit.lower()

    return result
