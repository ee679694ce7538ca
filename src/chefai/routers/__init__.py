"""API routers for the chefai application."""

from chefai.routers.ingredients import router as ingredients_router
from chefai.routers.shopping_list import router as shopping_list_router

__all__ = [
    "ingredients_router",
    "shopping_list_router",
]
