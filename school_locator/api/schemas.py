"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictStr, field_validator


# ── Requests ──────────────────────────────────────────────────────────


class SchoolCreateRequest(BaseModel):
    name: StrictStr = Field(..., min_length=1)
    address: StrictStr = Field(..., min_length=1)
    latitude: float
    longitude: float

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _must_be_json_number(cls, value: Any) -> Any:
        # Numeric strings ("40") and booleans are not coordinates.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("must be a number")
        try:
            value = float(value)
        except OverflowError:
            raise ValueError("must be finite") from None
        if not math.isfinite(value):
            raise ValueError("must be finite")
        return value


# ── Responses ─────────────────────────────────────────────────────────


class SchoolCreatedResponse(BaseModel):
    message: str = "School added successfully"
    school_id: int = Field(..., alias="schoolId")

    model_config = {"populate_by_name": True}


class SchoolDistanceResponse(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
