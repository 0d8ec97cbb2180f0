"""
Palette Picker Backend — Palette Route Handlers
=================================================

What:  CRUD endpoints and color search for palettes under /api/v1/palettes.
How:   Validate (before any store access) → one service call → status code.

Response Shapes:
    GET    /palettes                          200  {palettes: [...]}
    GET    /palettes/chooseColors?chosenColor 200  {filteredPalettes: [...]}
    GET    /palettes/{id}                     200  palette           404 {error}
    POST   /palettes                          201  {...body, id}     422 {error}
    PATCH  /palettes/{id}                     200  {id, colorN}      422 {error}
    DELETE /palettes                          200  <id from body>    422 {error}
    Any store failure                         500  {error}

Route order matters: /palettes/chooseColors is declared before
/palettes/{palette_id} so the literal path wins.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.database import get_db_session
from palette_picker.schemas.common import ErrorResponse
from palette_picker.schemas.palette import (
    FilteredPalettesResponse,
    PaletteListResponse,
    PaletteResponse,
)
from palette_picker.services.palette_service import palette_service
from palette_picker.validators import (
    COLOR_SEARCH,
    PALETTE_CREATE,
    PALETTE_DELETE,
    PALETTE_PATCH,
    parse_integer_id,
    require,
    require_color_field,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Palettes"])

_ERRORS = {
    422: {"description": "Missing required property", "model": ErrorResponse},
    500: {"description": "Database error", "model": ErrorResponse},
}


@router.get(
    "/palettes",
    response_model=PaletteListResponse,
    responses={500: _ERRORS[500]},
    summary="List all palettes",
)
async def get_palettes(db: AsyncSession = Depends(get_db_session)) -> PaletteListResponse:
    return await palette_service.list_palettes(db)


@router.get(
    "/palettes/chooseColors",
    response_model=FilteredPalettesResponse,
    responses=_ERRORS,
    summary="Find palettes containing a color",
    description="Matches chosenColor exactly against color1 through color5.",
)
async def choose_colors(
    chosen_color: Optional[str] = Query(default=None, alias="chosenColor"),
    db: AsyncSession = Depends(get_db_session),
) -> FilteredPalettesResponse:
    query = {"chosenColor": chosen_color} if chosen_color is not None else {}
    require(COLOR_SEARCH, query)
    return await palette_service.search_by_color(db, chosen_color)


@router.get(
    "/palettes/{palette_id}",
    response_model=PaletteResponse,
    responses={
        404: {"description": "Palette not found", "model": ErrorResponse},
        500: _ERRORS[500],
    },
    summary="Get a single palette by id",
)
async def get_palette(
    palette_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> PaletteResponse:
    return await palette_service.get_palette(db, palette_id)


@router.post(
    "/palettes",
    status_code=201,
    responses=_ERRORS,
    summary="Create a palette",
    description=(
        "Body: { name?, color1..color5, project_id }. "
        "Responds with the body plus the new id."
    ),
)
async def create_palette(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    require(PALETTE_CREATE, payload)
    return await palette_service.create_palette(db, payload)


@router.patch(
    "/palettes/{palette_id}",
    responses=_ERRORS,
    summary="Change one color of a palette",
    description="Body: { changeColor: 'color1'..'color5', newColor: <String> }.",
)
async def patch_palette(
    palette_id: int,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    require(PALETTE_PATCH, payload)
    color_field = require_color_field(payload["changeColor"])
    return await palette_service.change_color(db, palette_id, color_field, payload["newColor"])


@router.delete(
    "/palettes",
    responses=_ERRORS,
    summary="Delete a palette",
    description="Body: { id: <Number> }. Responds with the id exactly as sent.",
)
async def delete_palette(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Any:
    require(PALETTE_DELETE, payload)
    raw_id = payload["id"]
    await palette_service.delete_palette(db, parse_integer_id(raw_id))
    return raw_id
