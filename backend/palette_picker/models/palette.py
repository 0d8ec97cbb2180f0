"""
Palette Picker Backend — Palette SQLAlchemy Model
===================================================

What:  ORM model representing the `palettes` table.
Why:   A palette is five color codes saved under a project.
Who:   Used by PaletteService for CRUD and color search, and by Alembic.

Table Design:
    - color1..color5: hex-like strings ("#1B998B"); stored as given, never
      normalized, so the color search is an exact string comparison
    - project_id: foreign key to projects.id without ON DELETE CASCADE;
      referential integrity is the store's job, not the API's
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from palette_picker.database import Base

COLOR_FIELDS = ("color1", "color2", "color3", "color4", "color5")


class Palette(Base):
    """
    Represents a saved five-color palette.

    Query Patterns:
        - All palettes / color search: SELECT * FROM palettes
        - Single palette: SELECT ... WHERE id = :id (primary key)
        - Palettes of a project: WHERE project_id = :id (idx_palettes_project_id)
    """

    __tablename__ = "palettes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    color1: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    color2: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    color3: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    color4: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    color5: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id"),
        nullable=False,
    )

    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (
        Index("idx_palettes_project_id", "project_id"),
    )

    @property
    def colors(self) -> tuple:
        """The five colors in slot order."""
        return tuple(getattr(self, field) for field in COLOR_FIELDS)

    def __repr__(self) -> str:
        return f"<Palette(id={self.id}, name='{self.name}', project_id={self.project_id})>"
