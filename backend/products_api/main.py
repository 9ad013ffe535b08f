"""
Products API: FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() returns a configured FastAPI instance; the module-level
       `app` is what uvicorn serves (uvicorn products_api.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Logging → GZip → CORS     │
    │                                                     │
    │  Routes:  /api/products[/{id}]    /health           │
    │                                                     │
    │  State:   app.state.store  (one ProductStore)       │
    │                                                     │
    │  Exception Handlers:                                │
    │    ValidationError→400  NotFound→404  Database→500  │
    └─────────────────────────────────────────────────────┘

Store ownership:
    create_app(store=...) uses the given store and leaves closing it to the
    caller. Without one, the app builds its own: the in-memory store right
    away, the SQL store during lifespan startup (it needs CREATE TABLE).
    Stores the app built are closed at shutdown.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from products_api import __version__
from products_api.config import Settings, settings
from products_api.exceptions import (
    ProductsApiError,
    ValidationError,
    NotFoundError,
    DatabaseError,
)
from products_api.middleware.request_id import RequestIDMiddleware, request_id_var
from products_api.middleware.logging import RequestLoggingMiddleware
from products_api.routes import health, products
from products_api.store import (
    InMemoryProductStore,
    ProductStore,
    open_store,
    seed_sample_products,
)

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once at startup.

    Format: 2024-01-15T12:00:00 [INFO] products_api.main: message
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Open the configured store if the factory did not get/build one
        3. Seed sample products into an empty store when enabled

    Shutdown:
        Close the store if this app built it.
    """
    config: Settings = app.state.config

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(config.log_level)
    logger.info("Products API %s starting up...", __version__)

    if app.state.store is None:
        app.state.store = await open_store(config)

    store: ProductStore = app.state.store
    if config.seed_sample_products and app.state.owns_store:
        if await store.count() == 0:
            await seed_sample_products(store)
        else:
            logger.info("Store already holds products; skipping sample seed")

    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Products API shutting down...")
    if app.state.owns_store:
        await store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and a uniform JSON body.

        ValidationError        → 400 Bad Request
        NotFoundError          → 404 Not Found
        DatabaseError          → 500 (generic message, context logged)
        ProductsApiError       → 500 (catch-all for custom errors)
        Exception              → 500 (unexpected errors, traceback logged)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(ProductsApiError)
    async def handle_app_error(request: Request, exc: ProductsApiError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace is logged, never returned."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    store: Optional[ProductStore] = None,
    config: Settings = settings,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store:  Store to serve. When omitted the app builds the backend
                named by `config.store_backend` and owns it.
        config: Settings to use; defaults to the environment-loaded singleton.
    """
    app = FastAPI(
        title="Products API",
        description="CRUD API for a product catalog backed by an in-memory or SQL store.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.owns_store = store is None
    if store is None and config.store_backend == "memory":
        store = InMemoryProductStore()
    app.state.store = store

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Location"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(products.router)
    app.include_router(health.router)

    return app


app = create_app()
