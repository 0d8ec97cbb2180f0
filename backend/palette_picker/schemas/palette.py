"""
Palette Picker Backend — Palette Response Schemas
===================================================

What:  Pydantic models for what the palette endpoints return.

Shapes:
    GET /api/v1/palettes                   → {"palettes": [...]}
    GET /api/v1/palettes/chooseColors      → {"filteredPalettes": [...]}
    GET /api/v1/palettes/{id}              → PaletteResponse (bare object)
    PATCH /api/v1/palettes/{id}            → {"id": ..., "<colorN>": newColor}
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class PaletteResponse(BaseModel):
    """A single `palettes` row."""
    id: int = Field(description="Store-assigned palette id")
    name: Optional[str] = Field(default=None, description="Optional palette name")
    color1: Optional[str] = None
    color2: Optional[str] = None
    color3: Optional[str] = None
    color4: Optional[str] = None
    color5: Optional[str] = None
    project_id: int = Field(description="Owning project id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True, "coerce_numbers_to_str": True}


class PaletteListResponse(BaseModel):
    palettes: List[PaletteResponse] = Field(description="Every palette in the store")


class FilteredPalettesResponse(BaseModel):
    """
    Result of the color search.

    The wire key stays camelCase (`filteredPalettes`) because existing
    clients read it that way.
    """
    filteredPalettes: List[PaletteResponse] = Field(
        description="Palettes with chosenColor in any of color1..color5"
    )
