"""FastAPI dependency injection helpers."""

from fastapi import Request

from school_locator.domain.store import SchoolStore


def get_store(request: Request) -> SchoolStore:
    """Return the store built once at startup and kept on ``app.state``."""
    return request.app.state.store
