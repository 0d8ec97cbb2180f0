"""
Palette Picker Backend — Palette Service
==========================================

What:  Store operations for the `palettes` table plus the color search.
Why:   Keeps SQL out of route handlers; routes only validate and shape responses.
How:   Each method issues at most one statement. The color search issues one
       SELECT and filters the rows in memory.

Color Search:
    A palette matches when chosenColor equals any of color1..color5 exactly
    (case and leading '#' included). Filtering is a pure function,
    `filter_by_color()`, so it can be tested without a database.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.exceptions import DatabaseError, NotFoundError
from palette_picker.models.palette import COLOR_FIELDS, Palette
from palette_picker.schemas.palette import (
    FilteredPalettesResponse,
    PaletteListResponse,
    PaletteResponse,
)

logger = logging.getLogger(__name__)


def filter_by_color(palettes: Iterable[Palette], color: Any) -> List[Palette]:
    """Palettes having `color` in any of their five color slots, order preserved."""
    return [palette for palette in palettes if color in palette.colors]


class PaletteService:
    """
    Business logic layer for palette operations.

    Responsibilities:
        - list_palettes():    every palette
        - search_by_color():  palettes containing a color
        - get_palette():      one palette by id, NotFoundError when absent
        - create_palette():   insert, return payload + new id
        - change_color():     overwrite one color slot by id
        - delete_palette():   delete by id
    """

    async def _select_all(self, db: AsyncSession, operation: str) -> List[Palette]:
        try:
            result = await db.execute(select(Palette).order_by(Palette.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error in %s: %s", operation, str(e))
            raise DatabaseError.from_exception(e, operation=operation)

    async def list_palettes(self, db: AsyncSession) -> PaletteListResponse:
        palettes = await self._select_all(db, "list_palettes")
        return PaletteListResponse(
            palettes=[PaletteResponse.model_validate(palette) for palette in palettes]
        )

    async def search_by_color(self, db: AsyncSession, color: Any) -> FilteredPalettesResponse:
        """
        Return palettes where any color slot equals `color`.

        Query plan:
            SELECT * FROM palettes ORDER BY id → filtered in memory
        """
        palettes = await self._select_all(db, "search_by_color")
        matches = filter_by_color(palettes, color)
        logger.debug("Color search %r matched %d of %d palettes", color, len(matches), len(palettes))
        return FilteredPalettesResponse(
            filteredPalettes=[PaletteResponse.model_validate(palette) for palette in matches]
        )

    async def get_palette(self, db: AsyncSession, palette_id: int) -> PaletteResponse:
        """
        Retrieve a single palette by id.

        Raises:
            NotFoundError: no palette has this id (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Palette).where(Palette.id == palette_id))
            palette = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching palette %s: %s", palette_id, str(e))
            raise DatabaseError.from_exception(e, operation="get_palette", palette_id=palette_id)

        if palette is None:
            raise NotFoundError(
                message=f"Could not find palette with the id: {palette_id}",
                resource="palette",
                resource_id=palette_id,
            )

        return PaletteResponse.model_validate(palette)

    async def create_palette(self, db: AsyncSession, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a palette from the request payload.

        project_id is not looked up first; a dangling reference is rejected by
        the store's foreign key (→ 500).

        Returns:
            The payload merged with the store-assigned `id`.
        """
        values = {key: value for key, value in payload.items() if key != "id"}
        try:
            result = await db.execute(
                insert(Palette).values(**values).returning(Palette.id)
            )
            new_id = result.scalar_one()
        except SQLAlchemyError as e:
            logger.error("Database error creating palette: %s", str(e))
            raise DatabaseError.from_exception(e, operation="create_palette")

        logger.info("Palette %s created for project %s", new_id, values.get("project_id"))
        return {**values, "id": new_id}

    async def change_color(
        self, db: AsyncSession, palette_id: int, color_field: str, new_color: Any
    ) -> Dict[str, Any]:
        """
        Overwrite one color slot of one palette.

        Args:
            color_field: one of color1..color5 (checked by the route)
            new_color:   value written as given

        Returns:
            {"id": palette_id, color_field: new_color}
        """
        if color_field not in COLOR_FIELDS:
            raise ValueError(f"Not a color column: {color_field!r}")
        try:
            await db.execute(
                update(Palette)
                .where(Palette.id == palette_id)
                .values({color_field: new_color})
            )
        except SQLAlchemyError as e:
            logger.error("Database error updating palette %s: %s", palette_id, str(e))
            raise DatabaseError.from_exception(e, operation="change_color", palette_id=palette_id)

        logger.info("Palette %s %s set to %s", palette_id, color_field, new_color)
        return {"id": palette_id, color_field: new_color}

    async def delete_palette(self, db: AsyncSession, palette_id: Optional[int]) -> int:
        """
        Delete the palette with this id.

        Returns:
            Number of rows removed (0 or 1); a None id issues no statement.
        """
        if palette_id is None:
            return 0
        try:
            result = await db.execute(delete(Palette).where(Palette.id == palette_id))
        except SQLAlchemyError as e:
            logger.error("Database error deleting palette %s: %s", palette_id, str(e))
            raise DatabaseError.from_exception(e, operation="delete_palette", palette_id=palette_id)

        logger.info("Palette %s deleted (%d row)", palette_id, result.rowcount)
        return result.rowcount


# Stateless; one shared instance
palette_service = PaletteService()
