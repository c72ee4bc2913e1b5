"""
Selerara Dashboard API — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn selerara_api.main:app`) or the `selerara-api` script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│ GZip / CORS  │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes ({api_prefix}/...):                         │
    │  health, db-health, users, images, faqs,            │
    │  menu, menu-items, menu-categories, reviews         │
    │                                                     │
    │  Exception Handlers:                                │
    │  DatabaseError→500 {error} │ DB unavailable→500     │
    │  {status, message} │ anything else→500 {error}      │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, build the connection pool (unless one was
              injected), store it on app.state.database
    Shutdown: dispose the pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from selerara_api import __version__
from selerara_api.config import Settings, settings
from selerara_api.database import Database
from selerara_api.exceptions import (
    DatabaseError,
    DatabaseUnavailableError,
)
from selerara_api.middleware.logging import RequestLoggingMiddleware
from selerara_api.middleware.request_id import RequestIDMiddleware, request_id_var
from selerara_api.routes import ALL_ROUTERS

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] selerara_api.access: GET /api/menu 200 12.3ms [a1b2c3d4] from 10.0.0.7
    Called once from the lifespan, before the pool is built.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Third-party libraries log every operation at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("aiomysql").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Owns the connection pool for the lifetime of the application.

    The pool is created here rather than at import time so that importing the
    package never opens sockets, and it is disposed explicitly on shutdown.
    A pool passed to create_app() (tests) is used as-is and disposed the same way.
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("Selerara Dashboard API %s starting up...", __version__)

    database: Optional[Database] = getattr(app.state, "database", None)
    if database is None:
        database = Database.from_settings(app_settings)
        app.state.database = database
    url = app_settings.database_url_resolved
    logger.info(
        "Database pool: %s (size=%d)",
        url.render_as_string(hide_password=True),
        app_settings.db_pool_size,
    )
    logger.info(
        "API docs: http://%s:%d%s/docs",
        app_settings.backend_host,
        app_settings.backend_port,
        app_settings.api_prefix,
    )

    yield

    logger.info("Shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the global exception handlers.

    Handler hierarchy:
        DatabaseUnavailableError → 500 {"status": "ERROR", "message": ...}
        DatabaseError            → 500 {"error": ...}
        Exception (fallback)     → 500 {"error": ...}, traceback logged

    The message is the underlying error's own text; front-ends show it as-is.
    """

    @app.exception_handler(DatabaseUnavailableError)
    async def handle_database_unavailable(request: Request, exc: DatabaseUnavailableError):
        rid = request_id_var.get("")
        logger.error("[%s] Database unavailable: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"status": "ERROR", "message": exc.message},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or type(exc).__name__},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

OPENAPI_TAGS = [
    {"name": "health", "description": "Health check endpoints"},
    {"name": "users", "description": "User endpoints"},
    {"name": "images", "description": "Image endpoints"},
    {"name": "faqs", "description": "FAQ endpoints"},
    {"name": "menu", "description": "Menu related endpoints"},
    {"name": "reviews", "description": "Review endpoints"},
]


def create_app(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Defaults to the module-level settings singleton
        database:     A pre-built pool; when omitted, the lifespan builds one

    Returns: Fully configured FastAPI instance. No connection is opened here.
    """
    app_settings = app_settings or settings
    prefix = app_settings.api_prefix

    app = FastAPI(
        title="Selerara Dashboard API",
        description="API documentation for Selerara Dashboard",
        version=__version__,
        servers=[{"url": app_settings.public_url}],
        openapi_tags=OPENAPI_TAGS,
        docs_url=f"{prefix}/docs",
        redoc_url=None,
        openapi_url=f"{prefix}/openapi.json",
        swagger_ui_parameters={"docExpansion": "list", "deepLinking": False},
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    if database is not None:
        app.state.database = database

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → route
    origins = app_settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        # "*" means: reflect whatever origin asked
        allow_origin_regex=".*" if "*" in origins else None,
        allow_origins=[] if "*" in origins else origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    for router in ALL_ROUTERS:
        app.include_router(router, prefix=prefix)

    return app


# uvicorn expects `selerara_api.main:app` to be importable
app = create_app()


def main() -> None:
    """Console entry point: serve the app with uvicorn on BACKEND_HOST:BACKEND_PORT."""
    uvicorn.run(
        "selerara_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
