"""
Palette Picker Backend — Project Route Handlers
=================================================

What:  CRUD endpoints for projects under /api/v1/projects.
How:   Validate (before any store access) → one service call → status code.
Who:   Called by the palette picker frontend.

Response Shapes:
    GET    /projects        200  [project, ...]
    GET    /projects/{id}   200  [project]              404 {error}
    POST   /projects        201  {...body, id}          422 {error}
    PUT    /projects/{id}   200  {id, name}             422 {error}
    DELETE /projects        200  <id from body>         422 {error}
    Any store failure       500  {error}
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.database import get_db_session
from palette_picker.schemas.common import ErrorResponse
from palette_picker.schemas.project import ProjectResponse, ProjectUpdateResponse
from palette_picker.services.project_service import project_service
from palette_picker.validators import (
    PROJECT_CREATE,
    PROJECT_DELETE,
    PROJECT_UPDATE,
    parse_integer_id,
    require,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Projects"])

_ERRORS = {
    422: {"description": "Missing required property", "model": ErrorResponse},
    500: {"description": "Database error", "model": ErrorResponse},
}


@router.get(
    "/projects",
    response_model=List[ProjectResponse],
    responses={500: _ERRORS[500]},
    summary="List all projects",
)
async def get_projects(db: AsyncSession = Depends(get_db_session)) -> List[ProjectResponse]:
    return await project_service.list_projects(db)


@router.get(
    "/projects/{project_id}",
    response_model=List[ProjectResponse],
    responses={
        404: {"description": "Project not found", "model": ErrorResponse},
        500: _ERRORS[500],
    },
    summary="Get a single project by id",
    description="Returns the project wrapped in a one-element array.",
)
async def get_project(
    project_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[ProjectResponse]:
    project = await project_service.get_project(db, project_id)
    return [project]


@router.post(
    "/projects",
    status_code=201,
    responses=_ERRORS,
    summary="Create a project",
    description="Body: { name: <String> }. Responds with the body plus the new id.",
)
async def create_project(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    require(PROJECT_CREATE, payload)
    return await project_service.create_project(db, payload)


@router.put(
    "/projects/{project_id}",
    response_model=ProjectUpdateResponse,
    responses=_ERRORS,
    summary="Rename a project",
)
async def update_project(
    project_id: int,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> ProjectUpdateResponse:
    require(PROJECT_UPDATE, payload)
    return await project_service.update_project(db, project_id, payload["name"])


@router.delete(
    "/projects",
    responses=_ERRORS,
    summary="Delete a project",
    description=(
        "Body: { id: <Number> }. Responds with the id exactly as sent. "
        "Fails while palettes still belong to the project."
    ),
)
async def delete_project(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Any:
    require(PROJECT_DELETE, payload)
    raw_id = payload["id"]
    await project_service.delete_project(db, parse_integer_id(raw_id))
    return raw_id
