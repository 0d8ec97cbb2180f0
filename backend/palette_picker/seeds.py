"""
Palette Picker Backend — Seed Data
====================================

What:  Resets `projects` and `palettes` to a small known dataset.
Why:   Local development starts from something to look at, and the test suite
       reseeds before every test so assertions can rely on fixed rows.
How:   Deletes palettes then projects (foreign key order), inserts projects,
       then inserts each project's palettes against the ids the store assigned.

Usage:
    palette-picker-seed                  # seeds the ENVIRONMENT profile
    ENVIRONMENT=test palette-picker-seed
"""

import asyncio
import logging
from typing import Any, Dict, List

from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.models.palette import Palette
from palette_picker.models.project import Project

logger = logging.getLogger(__name__)


SEED_PROJECTS: List[Dict[str, Any]] = [
    {
        "name": "Warm Tones",
        "palettes": [
            {
                "name": "Sunset",
                "color1": "#F46036",
                "color2": "#2E294E",
                "color3": "#1B998B",
                "color4": "#E71D36",
                "color5": "#C5D86D",
            },
            {
                "name": "Desert",
                "color1": "#EDC9AF",
                "color2": "#C19A6B",
                "color3": "#8B5A2B",
                "color4": "#E2725B",
                "color5": "#F4A460",
            },
        ],
    },
    {
        "name": "Cool Tones",
        "palettes": [
            {
                "name": "Ocean",
                "color1": "#05668D",
                "color2": "#028090",
                "color3": "#00A896",
                "color4": "#02C39A",
                "color5": "#F0F3BD",
            },
        ],
    },
]


async def seed_database(session: AsyncSession) -> Dict[str, int]:
    """
    Replace every project and palette with SEED_PROJECTS.

    The caller owns the transaction and must commit.

    Returns:
        Counts inserted: {"projects": n, "palettes": m}
    """
    await session.execute(delete(Palette))
    await session.execute(delete(Project))

    palette_count = 0
    for project in SEED_PROJECTS:
        result = await session.execute(
            insert(Project).values(name=project["name"]).returning(Project.id)
        )
        project_id = result.scalar_one()
        for palette in project["palettes"]:
            await session.execute(insert(Palette).values(**palette, project_id=project_id))
            palette_count += 1

    logger.info("Seeded %d projects and %d palettes", len(SEED_PROJECTS), palette_count)
    return {"projects": len(SEED_PROJECTS), "palettes": palette_count}


async def run_seed() -> Dict[str, int]:
    """Open the configured database, seed it, commit, close."""
    from palette_picker.main import build_database

    database = build_database()
    database.open()
    try:
        async with database.session() as session:
            counts = await seed_database(session)
            await session.commit()
    finally:
        await database.close()
    return counts


def main() -> None:
    """Console entry point: `palette-picker-seed`."""
    from palette_picker.main import setup_logging

    setup_logging()
    counts = asyncio.run(run_seed())
    logger.info("Seed complete: %s", counts)
