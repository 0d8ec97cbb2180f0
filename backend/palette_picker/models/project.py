"""
Palette Picker Backend — Project SQLAlchemy Model
===================================================

What:  ORM model representing the `projects` table.
Why:   A project groups palettes; every palette row points at exactly one project.
Who:   Used by ProjectService for CRUD and by Alembic for schema management.

Table Design:
    - Integer identity primary key assigned by the store, never user supplied
    - name: free text, required by the API on create/update but nullable in
      the table (the API only checks that the key is present)
    - created_at / updated_at: maintained by the store
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from palette_picker.database import Base


class Project(Base):
    """
    Represents a project that owns palettes.

    Lifecycle:
        1. Created by POST /api/v1/projects (store assigns id)
        2. Renamed by PUT /api/v1/projects/{id}
        3. Deleted by DELETE /api/v1/projects; rejected by the foreign key
           while palettes still reference it (no cascade)
    """

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

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

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, name='{self.name}')>"
