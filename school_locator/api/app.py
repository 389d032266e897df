"""
FastAPI application factory.

* Mounts the school routes under ``settings.api_prefix`` (``/api/schools``
  by default; an empty prefix serves them at the root).
* Builds the database engine and school store once via lifespan events,
  unless a store is injected (tests, alternative backends).
* Renders domain errors as ``{"error": ...}`` JSON bodies.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from school_locator.api.middleware import limiter
from school_locator.api.routes import health, schools
from school_locator.config import settings
from school_locator.domain.exceptions import (
    InvalidInput,
    InvalidRequest,
    StorageFailure,
)
from school_locator.domain.store import SchoolStore
from school_locator.infrastructure.database import (
    build_engine,
    build_session_factory,
)
from school_locator.infrastructure.repositories import SchoolRepository

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the database on startup; dispose the pool on shutdown."""
    if getattr(app.state, "store", None) is not None:
        yield
        return

    engine = build_engine(settings.sqlalchemy_url)
    store = SchoolRepository(build_session_factory(engine))
    try:
        await store.ping()
    except StorageFailure as exc:
        logger.error("Error connecting to database: %s", exc.details)
    else:
        logger.info("Connected to database")

    app.state.store = store
    yield
    await engine.dispose()


async def _invalid_request_handler(request: Request, exc: InvalidRequest):
    return JSONResponse(status_code=400, content={"error": exc.message})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
):
    return JSONResponse(status_code=400, content={"error": InvalidInput.message})


async def _storage_failure_handler(request: Request, exc: StorageFailure):
    return JSONResponse(
        status_code=500,
        content={"error": exc.message, "details": exc.details},
    )


def create_app(store: Optional[SchoolStore] = None) -> FastAPI:
    app = FastAPI(
        title="School Locator API",
        description=(
            "Registers schools with their coordinates and lists them "
            "sorted by great-circle distance from a given location."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    if store is not None:
        app.state.store = store

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Domain errors
    app.add_exception_handler(InvalidRequest, _invalid_request_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StorageFailure, _storage_failure_handler)

    # Routers
    app.include_router(schools.router, prefix=settings.api_prefix)
    app.include_router(health.router)

    return app
