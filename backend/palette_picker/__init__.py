"""
Palette Picker Backend — Application Package Initializer
==========================================================

What: Marks the `palette_picker` directory as a Python package.
Why:  Enables module imports like `from palette_picker.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a thin layered JSON API over two tables (projects, palettes):

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP verbs/paths, status codes
    ├─────────────────────────────────────┤
    │   Validators (required fields)      │  ← Run before any store access
    ├─────────────────────────────────────┤
    │   Services (one statement each)     │  ← Queries, color filter
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │     Database (explicit lifecycle)   │  ← Opened/closed with the app
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
