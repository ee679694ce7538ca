#!/usr/bin/env python
"""
Print a consolidated shopping list from a JSON file of recipe ingredients.

The file holds either a list of entries:

    [{"ingredientText": "1 cup sugar", "recipeName": "Cake"}, ...]

or a mapping of recipe name to ingredient lines:

    {"Cake": ["1 cup sugar", "2 eggs"], "Cookies": ["2 cups sugar"]}

Run with: python scripts/consolidate_list.py recipes.json [--show-recipes]
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from chefai.plan.consolidate import ShoppingListEntry, consolidate_ingredients


def load_entries(path: Path) -> list[ShoppingListEntry]:
    """Read shopping-list entries from either supported JSON layout."""
    data = json.loads(path.read_text(encoding="utf-8"))

    if isinstance(data, dict):
        return [
            ShoppingListEntry(ingredient_text=line, recipe_name=recipe)
            for recipe, lines in data.items()
            for line in lines
        ]

    return TypeAdapter(list[ShoppingListEntry]).validate_python(data)


def main():
    parser = argparse.ArgumentParser(description="Consolidate recipe ingredients into one list")
    parser.add_argument("path", type=Path, help="JSON file with recipe ingredients")
    parser.add_argument(
        "--show-recipes", "-r", action="store_true", help="List the recipes behind each line"
    )

    args = parser.parse_args()

    try:
        entries = load_entries(args.path)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"Error: could not read {args.path}: {e}", file=sys.stderr)
        sys.exit(1)

    for item in consolidate_ingredients(entries):
        if args.show_recipes:
            print(f"- {item.combined_text}  ({', '.join(item.recipes)})")
        else:
            print(f"- {item.combined_text}")

    print(f"\n({len(entries)} ingredient lines)")


if __name__ == "__main__":
    main()
