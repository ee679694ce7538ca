"""API routes for parsing and scaling single ingredient lines."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from chefai.logging_config import get_logger
from chefai.normalize.ingredients import parse_ingredient
from chefai.normalize.scaling import scale_ingredients

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ParseRequest(BaseModel):
    """Ingredient line to parse."""

    text: str


class ParsedIngredientResponse(BaseModel):
    """Quantity, unit and name read from an ingredient line."""

    quantity: float | None = None
    unit: str | None = None
    name: str

    class Config:
        from_attributes = True


class ScaleRequest(BaseModel):
    """Recipe ingredients to rescale for a different number of servings."""

    ingredients: list[str]
    original_servings: int = Field(ge=1)
    new_servings: int = Field(ge=1)


class ScaleResponse(BaseModel):
    """Rescaled ingredient lines, in input order."""

    ingredients: list[str]


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/parse", response_model=ParsedIngredientResponse)
async def parse(request: ParseRequest) -> ParsedIngredientResponse:
    """Parse one free-text ingredient line."""
    return ParsedIngredientResponse.model_validate(parse_ingredient(request.text))


@router.post("/scale", response_model=ScaleResponse)
async def scale(request: ScaleRequest) -> ScaleResponse:
    """
    Rescale ingredient quantities from one serving count to another.

    Lines without a leading quantity, and pinches or dashes, are returned as-is.
    """
    logger.info(
        f"Scaling {len(request.ingredients)} ingredients: "
        f"{request.original_servings} -> {request.new_servings} servings"
    )
    return ScaleResponse(
        ingredients=scale_ingredients(
            request.ingredients,
            request.original_servings,
            request.new_servings,
        )
    )
