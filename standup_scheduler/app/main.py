"""
Main entrypoint for the Standup Scheduler API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the database engine lifecycle and the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn standup_scheduler.app.main:app --reload
"""

import logging
import sqlite3
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import StoreUnavailable, close_engine, init_db, open_engine
from .core.logging_config import setup_logging
from .core.responses import STORE_ERROR_MESSAGE, failure

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        # loc starts with "body", "path" or "query"; name the field itself
        field_name = ".".join(loc[1:]) or (loc[0] if loc else "request")
        problems.append(f"{field_name}: {error.get('msg', 'invalid')}")
    return "invalid request: " + "; ".join(problems)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return failure(status.HTTP_400_BAD_REQUEST, message)


async def overflow_exception_handler(request: Request, exc: OverflowError) -> JSONResponse:
    # SQLite integers are 64-bit; larger path ids cannot match any row.
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return failure(status.HTTP_400_BAD_REQUEST, "invalid request: identifier out of range")


async def store_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Store failure during %s %s", request.method, request.url.path, exc_info=exc)
    return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, STORE_ERROR_MESSAGE)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database_url : Optional[str]
        SQLite database path.  Defaults to ``settings.database_url``;
        tests pass a temporary file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(sqlite3.Error, store_exception_handler)
    app.add_exception_handler(StoreUnavailable, store_exception_handler)
    app.add_exception_handler(OverflowError, overflow_exception_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # The engine lives for the whole process; migrations run once
        # it exists.
        open_engine(database_url)
        init_db()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_engine()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
