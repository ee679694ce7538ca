"""Human-friendly rendering of ingredient quantities."""

import math

# Remainders in hundredths that display as kitchen fractions
COMMON_FRACTIONS: dict[int, str] = {
    25: "1/4",
    33: "1/3",
    50: "1/2",
    66: "2/3",
    67: "2/3",
    75: "3/4",
}


def format_quantity(value: float | None) -> str:
    """
    Format a quantity for display.

    Whole numbers print as integers, remainders close to a quarter, third or
    half print as fractions, anything else as a decimal with at most two places.

    Examples:
        2 -> "2"
        0.5 -> "1/2"
        1.5 -> "1 1/2"
        1.2 -> "1.2"
        0 -> ""
    """
    if not value or not math.isfinite(value):
        return ""

    if value < 0:
        return "-" + format_quantity(-value)

    if value == int(value):
        return str(int(value))

    whole = math.floor(value)
    # round half up, to match how quantities are written by hand
    hundredths = math.floor((value - whole) * 100 + 0.5)

    fraction = COMMON_FRACTIONS.get(hundredths)
    if fraction:
        return f"{whole} {fraction}" if whole > 0 else fraction

    return f"{value:.2f}".rstrip("0").rstrip(".")
