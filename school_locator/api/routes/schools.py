"""
School endpoints
================

POST {prefix}/addSchool    -- register a school (returns 201 Created)
GET  {prefix}/listSchools  -- all schools, nearest to the query point first

Domain errors raised here are rendered by the exception handlers installed
in :func:`school_locator.api.app.create_app`.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request
from pydantic import ValidationError

from school_locator.api.dependencies import get_store
from school_locator.api.middleware import limiter
from school_locator.api.schemas import (
    ErrorResponse,
    SchoolCreatedResponse,
    SchoolCreateRequest,
    SchoolDistanceResponse,
)
from school_locator.config import settings
from school_locator.domain.entities import School
from school_locator.domain.exceptions import InvalidInput
from school_locator.domain.schools import list_schools as rank_schools
from school_locator.domain.schools import register_school
from school_locator.domain.store import SchoolStore

router = APIRouter(tags=["schools"])

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid input or location."},
    500: {"model": ErrorResponse, "description": "Database error."},
}


@router.post(
    "/addSchool",
    status_code=201,
    response_model=SchoolCreatedResponse,
    summary="Register a school",
    responses=_ERRORS,
)
@limiter.limit(settings.rate_limit)
async def add_school(
    request: Request,
    body: Any = Body(None),
    store: SchoolStore = Depends(get_store),
):
    try:
        payload = SchoolCreateRequest.model_validate(body)
    except ValidationError as exc:
        raise InvalidInput() from exc

    school_id = await register_school(
        store,
        School(
            name=payload.name,
            address=payload.address,
            latitude=payload.latitude,
            longitude=payload.longitude,
        ),
    )
    return SchoolCreatedResponse(school_id=school_id)


@router.get(
    "/listSchools",
    response_model=list[SchoolDistanceResponse],
    summary="List schools sorted by distance",
    description=(
        "Returns every stored school annotated with its great-circle "
        "distance (km) from the given point, nearest first."
    ),
    responses=_ERRORS,
)
@limiter.limit(settings.rate_limit)
async def list_schools(
    request: Request,
    latitude: Optional[str] = None,
    longitude: Optional[str] = None,
    store: SchoolStore = Depends(get_store),
):
    return await rank_schools(store, latitude, longitude)
