"""Unit tests for the in-memory shopping list."""

import pytest

from chefai.plan.shopping_list import (
    ShoppingItemNotFoundError,
    ShoppingList,
    ShoppingProgress,
)


class TestAddRecipeIngredients:
    """Tests for ShoppingList.add_recipe_ingredients."""

    def test_adds_items_in_order(self):
        """Test every ingredient becomes an unchecked item."""
        shopping_list = ShoppingList()
        items = shopping_list.add_recipe_ingredients("r1", "Soup", ["1 onion", "2 carrots"])

        assert [item.ingredient_text for item in items] == ["1 onion", "2 carrots"]
        assert all(item.recipe_id == "r1" for item in items)
        assert all(item.recipe_name == "Soup" for item in items)
        assert not any(item.is_checked for item in items)
        assert shopping_list.items == items

    def test_item_ids_are_unique(self, shopping_list):
        """Test generated ids never collide."""
        ids = [item.id for item in shopping_list.items]
        assert len(set(ids)) == len(ids)
        assert all(item_id.startswith("shopping-item-") for item_id in ids)


class TestItemActions:
    """Tests for removing and toggling items."""

    def test_toggle_item(self, shopping_list):
        """Test toggling flips the checked state both ways."""
        item_id = shopping_list.items[0].id

        assert shopping_list.toggle_item(item_id).is_checked is True
        assert shopping_list.toggle_item(item_id).is_checked is False

    def test_remove_item(self, shopping_list):
        """Test removing an item takes it off the list."""
        item = shopping_list.items[1]

        removed = shopping_list.remove_item(item.id)

        assert removed is item
        assert item not in shopping_list.items
        assert len(shopping_list.items) == 4

    def test_toggle_recipe_checks_all(self, shopping_list):
        """Test a recipe with any unchecked item gets fully checked."""
        shopping_list.toggle_item(shopping_list.items[0].id)

        items = shopping_list.toggle_recipe("recipe-1")

        assert len(items) == 3
        assert all(item.is_checked for item in items)
        other_recipe = shopping_list.group_by_recipe()["recipe-2"]
        assert not any(item.is_checked for item in other_recipe)

    def test_toggle_recipe_unchecks_when_all_checked(self, shopping_list):
        """Test a fully checked recipe gets unchecked."""
        shopping_list.toggle_recipe("recipe-2")

        items = shopping_list.toggle_recipe("recipe-2")

        assert not any(item.is_checked for item in items)

    def test_toggle_unknown_recipe(self, shopping_list):
        """Test recipes with no items on the list raise ShoppingItemNotFoundError."""
        with pytest.raises(ShoppingItemNotFoundError):
            shopping_list.toggle_recipe("missing")

    def test_unknown_item(self, shopping_list):
        """Test unknown ids raise ShoppingItemNotFoundError."""
        with pytest.raises(ShoppingItemNotFoundError):
            shopping_list.toggle_item("missing")
        with pytest.raises(ShoppingItemNotFoundError):
            shopping_list.remove_item("missing")

    def test_clear(self, shopping_list):
        """Test clearing removes everything."""
        assert shopping_list.clear() == 5
        assert shopping_list.items == []

    def test_clear_checked(self, shopping_list):
        """Test only checked items are removed."""
        shopping_list.toggle_item(shopping_list.items[0].id)
        shopping_list.toggle_item(shopping_list.items[3].id)

        assert shopping_list.clear_checked() == 2
        assert [item.ingredient_text for item in shopping_list.items] == [
            "1 onion",
            "salt to taste",
            "2 cloves garlic",
        ]


class TestSearchAndGrouping:
    """Tests for filtering and grouping the list."""

    def test_search_by_ingredient(self, shopping_list):
        """Test searching matches ingredient text case-insensitively."""
        items = shopping_list.search("TOMATOES")
        assert len(items) == 2

    def test_search_by_recipe(self, shopping_list):
        """Test searching matches recipe names."""
        items = shopping_list.search("pasta")
        assert [item.ingredient_text for item in items] == [
            "1 1/2 cups chopped tomatoes",
            "2 cloves garlic",
        ]

    def test_blank_search_returns_all(self, shopping_list):
        """Test a blank query returns every item."""
        assert len(shopping_list.search("   ")) == 5

    def test_group_by_recipe(self, shopping_list):
        """Test items are grouped by recipe in first-seen order."""
        groups = shopping_list.group_by_recipe()

        assert list(groups) == ["recipe-1", "recipe-2"]
        assert len(groups["recipe-1"]) == 3
        assert len(groups["recipe-2"]) == 2

    def test_group_filtered_items(self, shopping_list):
        """Test grouping a filtered subset."""
        groups = shopping_list.group_by_recipe(shopping_list.search("garlic"))
        assert list(groups) == ["recipe-2"]


class TestProgress:
    """Tests for ShoppingList.progress."""

    def test_progress(self, shopping_list):
        """Test checked counts and rounded percentage."""
        shopping_list.toggle_item(shopping_list.items[0].id)

        progress = shopping_list.progress()

        assert progress.total == 5
        assert progress.checked == 1
        assert progress.percent_complete == 20

    def test_empty_progress(self):
        """Test an empty list is 0% complete."""
        assert ShoppingList().progress().percent_complete == 0

    def test_rounding(self):
        """Test percentages round to whole numbers."""
        assert ShoppingProgress(total=3, checked=2).percent_complete == 67


class TestConsolidated:
    """Tests for ShoppingList.consolidated."""

    def test_consolidates_across_recipes(self, shopping_list):
        """Test tomatoes from both recipes are summed."""
        result = shopping_list.consolidated()

        assert [item.combined_text for item in result] == [
            "3 1/2 cups chopped tomatoes",
            "1 onion",
            "salt to taste",
            "2 cloves garlic",
        ]
        assert result[0].recipes == ["Tomato Soup", "Pasta Sauce"]

    def test_consolidates_filtered_items(self, shopping_list):
        """Test only matching items are consolidated."""
        result = shopping_list.consolidated("soup")

        assert [item.combined_text for item in result] == [
            "2 cups chopped tomatoes",
            "1 onion",
            "salt to taste",
        ]
