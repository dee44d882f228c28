"""
Noteful Backend — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn noteful.main:app),
       and by the test suite with its own settings and database.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌────────────┐   │
    │  │ /api/folders │ │ /api/notes   │ │ /health    │   │
    │  └──────────────┘ └──────────────┘ └────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Internal→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

State:
    app.state.settings   the Settings instance the app was built with
    app.state.database   the Database (engine + session factory); the only
                         process-wide resource, disposed on shutdown
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from noteful import __version__
from noteful.config import Settings, settings as default_settings
from noteful.database import Database
from noteful.exceptions import NotefulError
from noteful.middleware.logging import RequestLoggingMiddleware
from noteful.middleware.request_id import RequestIDMiddleware, request_id_var
from noteful.routes import folders, health, notes

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "server error"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # These log every statement / access line on their own
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:  configure logging, optionally create tables.
    Shutdown: dispose the database engine (close all pooled connections).
    """
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(app_settings.log_level)
    logger.info("Noteful API starting up (environment=%s)", app_settings.environment)

    if app_settings.db_create_all:
        await database.create_all()
        logger.info("Database tables created")

    logger.info("Server ready at http://%s:%d", app_settings.host, app_settings.port)

    yield

    logger.info("Noteful API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(message: str, detail: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"message": message}
    if detail is not None:
        error["detail"] = detail
    return {"error": error}


def _server_error_body(request: Request, message: str, detail: Dict[str, Any]) -> Dict[str, Any]:
    """Generic body in production; message and detail in development."""
    if request.app.state.settings.is_production:
        return _error_body(GENERIC_SERVER_ERROR)
    return _error_body(message, detail)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ())]
    field = ".".join(location[1:]) or ".".join(location)
    return f"Invalid value for '{field}': {first.get('msg', 'invalid')}"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the uniform `{"error": {"message": ...}}` body.

    Handler hierarchy:
        NotefulError            → exc.status_code (400 / 404 / 500)
        RequestValidationError  → 400 (malformed JSON, wrongly typed field or id)
        HTTPException           → its own status (unknown route, bad method)
        Exception (fallback)    → 500
    """

    @app.exception_handler(NotefulError)
    async def handle_noteful_error(request: Request, exc: NotefulError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
            content = _server_error_body(request, exc.message, exc.context)
        else:
            logger.warning("[%s] %s: %s", rid, type(exc).__name__, exc.message)
            content = _error_body(exc.message)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = _describe_validation_error(exc)
        logger.warning("[%s] Request validation error: %s", rid, message)
        return JSONResponse(status_code=400, content=_error_body(message))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace is logged, never returned in production."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_server_error_body(
                request, str(exc) or type(exc).__name__, {"error_type": type(exc).__name__}
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to run with (defaults to the environment-loaded ones)
        database:     Database to serve from (defaults to one built from settings)

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app_settings = app_settings or default_settings
    database = database or Database.from_settings(app_settings)

    app = FastAPI(
        title="Noteful API",
        description="REST API for managing notes organized into folders.",
        version=__version__,
        debug=False,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = database

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute
    origins = app_settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(folders.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run(
        "noteful.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `noteful.main:app` to be importable
app = create_app()
