"""
Package Sorter — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers and routers.
Who:   uvicorn (uvicorn package_sorter.main:app) or the `package-sorter-api`
       console script, which calls run().

Application Architecture:
    FastAPI App
      Middleware:   Req ID → Logging → CORS
      Routes:
        GET/POST /api/v1/packages/classify
        GET      /api/v1/packages/classify/{w}/{h}/{l}/{m}
        GET      /api/v1/packages/info
        GET      /health
      Exception Handlers:
        ValidationError → 400 │ malformed request → 400 │ anything else → 500
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from package_sorter import __version__
from package_sorter.config import settings
from package_sorter.exceptions import ValidationError, json_safe
from package_sorter.logging_config import setup_logging
from package_sorter.middleware.logging import RequestLoggingMiddleware
from package_sorter.middleware.request_id import RequestIDMiddleware, request_id_var
from package_sorter.routes import classify, health, info

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; nothing to release on shutdown."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up (environment=%s)", settings.app_name, __version__, settings.environment)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    if settings.docs_enabled:
        logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down.", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP status codes and the ErrorResponse body.

    Handler hierarchy:
        ValidationError         → 400 (InvalidDimensionError, InvalidMassError)
        RequestValidationError  → 400 (non-numeric or missing parameters)
        Exception               → 500 (unexpected; traceback logged, never returned)
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

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        errors = jsonable_encoder(exc.errors())
        # a JSON body may carry NaN or Infinity, which JSONResponse cannot render
        for err in errors:
            if "input" in err:
                err["input"] = json_safe(err["input"])
        fields = [".".join(str(part) for part in err.get("loc", ())[1:]) for err in errors]
        logger.warning("[%s] Malformed request: %s", rid, ", ".join(fields))
        return JSONResponse(
            status_code=400,
            content={
                "error": "request_validation_error",
                "message": (
                    "Invalid request parameters: width, height and length must be "
                    "integers and mass must be a number."
                ),
                "details": {"errors": errors},
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
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

def create_app() -> FastAPI:
    """Assemble the application. Called once at import and by tests that need a fresh app."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classifies packages as STANDARD, SPECIAL or REJECTED from their "
            "dimensions (cm) and mass (g)."
        ),
        version=__version__,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(classify.router)
    app.include_router(info.router)
    app.include_router(health.router)

    return app


# uvicorn expects `package_sorter.main:app` to be importable
app = create_app()


def run() -> None:
    """Entry point for the `package-sorter-api` console script."""
    uvicorn.run(
        "package_sorter.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
