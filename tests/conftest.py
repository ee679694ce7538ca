"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from chefai.main import app
from chefai.plan.consolidate import ShoppingListEntry
from chefai.plan.shopping_list import ShoppingList

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: marks tests that go through the HTTP layer")


# =============================================================================
# Shopping List Fixtures
# =============================================================================


@pytest.fixture
def cake_and_cookie_entries():
    """Entries from two recipes that share sugar and butter."""
    return [
        ShoppingListEntry(ingredient_text="1 cup sugar", recipe_name="Cake"),
        ShoppingListEntry(ingredient_text="2 eggs", recipe_name="Cake"),
        ShoppingListEntry(ingredient_text="1/2 cup Butter", recipe_name="Cake"),
        ShoppingListEntry(ingredient_text="2 cups sugar", recipe_name="Cookies"),
        ShoppingListEntry(ingredient_text="1/4 cup butter", recipe_name="Cookies"),
        ShoppingListEntry(ingredient_text="1 egg", recipe_name="Cookies"),
        ShoppingListEntry(ingredient_text="salt", recipe_name="Cookies"),
    ]


@pytest.fixture
def shopping_list():
    """Shopping list with ingredients from two recipes."""
    shopping_list = ShoppingList()
    shopping_list.add_recipe_ingredients(
        "recipe-1",
        "Tomato Soup",
        ["2 cups chopped tomatoes", "1 onion", "salt to taste"],
    )
    shopping_list.add_recipe_ingredients(
        "recipe-2",
        "Pasta Sauce",
        ["1 1/2 cups chopped tomatoes", "2 cloves garlic"],
    )
    return shopping_list


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client with an empty shopping list."""
    app.state.shopping_list = ShoppingList()
    return TestClient(app)
