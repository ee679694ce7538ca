"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from chefai import __version__
from chefai.config import settings
from chefai.logging_config import LoggingContext, configure_logging, get_logger
from chefai.plan.shopping_list import ShoppingList
from chefai.routers import ingredients_router, shopping_list_router

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting chefai API ({settings.environment})")

    yield

    logger.info(
        f"Shutting down chefai API, dropping {len(app.state.shopping_list.items)} "
        "shopping list items"
    )


app = FastAPI(
    title="chefai API",
    description="Recipe shopping lists with ingredient consolidation",
    version=__version__,
    debug=settings.is_development,
    lifespan=lifespan,
)

# Shopping list lives for the lifetime of the process
app.state.shopping_list = ShoppingList()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log line of a request with its request id."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(ingredients_router)
app.include_router(shopping_list_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "chefai-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "chefai API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
