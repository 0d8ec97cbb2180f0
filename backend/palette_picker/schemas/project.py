"""
Palette Picker Backend — Project Response Schemas
===================================================

What:  Pydantic models for what the project endpoints return.
Why:   Controls exactly which columns are exposed and how timestamps serialize.

Shapes (kept compatible with existing clients):
    GET /api/v1/projects        → [ProjectResponse, ...]      (bare array)
    GET /api/v1/projects/{id}   → [ProjectResponse]           (array of one)
    PUT /api/v1/projects/{id}   → ProjectUpdateResponse
    POST                        → request body echoed back with its new id
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class ProjectResponse(BaseModel):
    """A single `projects` row."""
    id: int = Field(description="Store-assigned project id")
    name: Optional[str] = Field(default=None, description="Project name")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    model_config = {"from_attributes": True, "coerce_numbers_to_str": True}


class ProjectUpdateResponse(BaseModel):
    """Returned by PUT: the id that was targeted and the name written."""
    id: int
    name: Any = None
