"""API routes for the shopping list and ingredient consolidation."""

from datetime import datetime
from enum import Enum

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from chefai.config import get_settings
from chefai.logging_config import LoggingContext, get_logger
from chefai.plan.consolidate import (
    ConsolidatedIngredient,
    ShoppingListEntry,
    consolidate_ingredients,
)
from chefai.plan.shopping_list import (
    ShoppingItemNotFoundError,
    ShoppingList,
    ShoppingListItem,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ListView(str, Enum):
    """How the shopping list is laid out."""

    BY_RECIPE = "by-recipe"
    ALL_ITEMS = "all-items"
    CONSOLIDATED = "consolidated"


class ShoppingListItemSchema(BaseModel):
    """Single ingredient line on the shopping list."""

    id: str
    ingredient_text: str
    recipe_id: str
    recipe_name: str
    is_checked: bool = False
    added_at: datetime

    class Config:
        from_attributes = True


class ConsolidatedIngredientSchema(BaseModel):
    """Ingredient summed across recipes."""

    combined_text: str
    total_quantity: float
    unit: str | None = None
    name: str
    recipes: list[str] = Field(default_factory=list)
    original_items: list[ShoppingListItemSchema | ShoppingListEntry] = Field(default_factory=list)


class ConsolidateRequest(BaseModel):
    """Entries to consolidate."""

    entries: list[ShoppingListEntry]


class ConsolidateResponse(BaseModel):
    """Consolidated entries, in first-seen order."""

    items: list[ConsolidatedIngredientSchema]
    total_entries: int


class AddItemsRequest(BaseModel):
    """Ingredients of one recipe to put on the list."""

    recipe_id: str
    recipe_name: str
    ingredients: list[str] = Field(min_length=1)


class ShoppingListResponse(BaseModel):
    """Current shopping list in the requested view."""

    view: ListView
    items: list[ShoppingListItemSchema] = Field(default_factory=list)
    items_by_recipe: dict[str, list[ShoppingListItemSchema]] = Field(default_factory=dict)
    consolidated: list[ConsolidatedIngredientSchema] = Field(default_factory=list)
    total_items: int
    checked_items: int
    percent_complete: int


class RemovedResponse(BaseModel):
    """Number of items removed from the list."""

    removed: int


# =============================================================================
# Helper Functions
# =============================================================================


def get_shopping_list(request: Request) -> ShoppingList:
    """Get the process-wide shopping list."""
    if not hasattr(request.app.state, "shopping_list"):
        request.app.state.shopping_list = ShoppingList()
    return request.app.state.shopping_list


def _check_entry_limit(count: int) -> None:
    limit = get_settings().max_consolidation_entries
    if count > limit:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {limit} entries can be consolidated at once",
        )


def _entry_schema(
    item: ShoppingListEntry | ShoppingListItem,
) -> ShoppingListItemSchema | ShoppingListEntry:
    if isinstance(item, ShoppingListItem):
        return ShoppingListItemSchema.model_validate(item)
    return item


def _consolidated_schema(ingredient: ConsolidatedIngredient) -> ConsolidatedIngredientSchema:
    return ConsolidatedIngredientSchema(
        combined_text=ingredient.combined_text,
        total_quantity=ingredient.total_quantity,
        unit=ingredient.unit,
        name=ingredient.name,
        recipes=ingredient.recipes,
        original_items=[_entry_schema(item) for item in ingredient.original_items],
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/consolidate", response_model=ConsolidateResponse)
async def consolidate(request: ConsolidateRequest) -> ConsolidateResponse:
    """
    Merge ingredient lines that refer to the same ingredient and unit.

    Stateless: the entries are consolidated and returned, nothing is stored.
    """
    _check_entry_limit(len(request.entries))

    consolidated = consolidate_ingredients(request.entries)
    logger.info(
        f"Consolidated {len(request.entries)} entries into {len(consolidated)} items"
    )

    return ConsolidateResponse(
        items=[_consolidated_schema(ingredient) for ingredient in consolidated],
        total_entries=len(request.entries),
    )


@router.get("", response_model=ShoppingListResponse)
async def get_list(
    view: ListView = ListView.BY_RECIPE,
    q: str = Query("", description="Filter by ingredient or recipe name"),
    shopping_list: ShoppingList = Depends(get_shopping_list),
) -> ShoppingListResponse:
    """Get the shopping list, optionally filtered and consolidated."""
    items = shopping_list.search(q)
    progress = shopping_list.progress()

    response = ShoppingListResponse(
        view=view,
        total_items=progress.total,
        checked_items=progress.checked,
        percent_complete=progress.percent_complete,
    )

    if view == ListView.BY_RECIPE:
        response.items_by_recipe = {
            recipe_id: [ShoppingListItemSchema.model_validate(item) for item in group]
            for recipe_id, group in shopping_list.group_by_recipe(items).items()
        }
    elif view == ListView.ALL_ITEMS:
        response.items = [ShoppingListItemSchema.model_validate(item) for item in items]
    else:
        _check_entry_limit(len(items))
        response.consolidated = [
            _consolidated_schema(ingredient) for ingredient in consolidate_ingredients(items)
        ]

    return response


@router.post(
    "/items",
    response_model=list[ShoppingListItemSchema],
    status_code=status.HTTP_201_CREATED,
)
async def add_items(
    request: AddItemsRequest,
    shopping_list: ShoppingList = Depends(get_shopping_list),
) -> list[ShoppingListItemSchema]:
    """Add the ingredients of a recipe to the shopping list."""
    with LoggingContext(recipe_id=request.recipe_id):
        new_items = shopping_list.add_recipe_ingredients(
            request.recipe_id,
            request.recipe_name,
            request.ingredients,
        )
    return [ShoppingListItemSchema.model_validate(item) for item in new_items]


@router.delete("/items/{item_id}", response_model=ShoppingListItemSchema)
async def remove_item(
    item_id: str,
    shopping_list: ShoppingList = Depends(get_shopping_list),
) -> ShoppingListItemSchema:
    """Remove a single item from the shopping list."""
    try:
        item = shopping_list.remove_item(item_id)
    except ShoppingItemNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ShoppingListItemSchema.model_validate(item)


@router.post("/items/{item_id}/toggle", response_model=ShoppingListItemSchema)
async def toggle_item(
    item_id: str,
    shopping_list: ShoppingList = Depends(get_shopping_list),
) -> ShoppingListItemSchema:
    """Check or uncheck an item."""
    try:
        item = shopping_list.toggle_item(item_id)
    except ShoppingItemNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ShoppingListItemSchema.model_validate(item)


@router.post("/recipes/{recipe_id}/toggle", response_model=list[ShoppingListItemSchema])
async def toggle_recipe(
    recipe_id: str,
    shopping_list: ShoppingList = Depends(get_shopping_list),
) -> list[ShoppingListItemSchema]:
    """Check every item of a recipe, or uncheck them all if all are checked."""
    with LoggingContext(recipe_id=recipe_id):
        try:
            items = shopping_list.toggle_recipe(recipe_id)
        except ShoppingItemNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return [ShoppingListItemSchema.model_validate(item) for item in items]


@router.delete("/checked", response_model=RemovedResponse)
async def clear_checked(
    shopping_list: ShoppingList = Depends(get_shopping_list),
) -> RemovedResponse:
    """Remove every checked item."""
    return RemovedResponse(removed=shopping_list.clear_checked())


@router.delete("", response_model=RemovedResponse)
async def clear_list(
    shopping_list: ShoppingList = Depends(get_shopping_list),
) -> RemovedResponse:
    """Empty the shopping list."""
    return RemovedResponse(removed=shopping_list.clear())
