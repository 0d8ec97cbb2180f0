"""
Palette Picker Backend — Project Service
==========================================

What:  Store operations for the `projects` table.
Why:   Keeps SQL out of route handlers; routes only validate and shape responses.
How:   Each method issues exactly one statement on the session it is given.
       The session is committed or rolled back by the request dependency.

Error Handling Strategy:
    SQLAlchemy/driver failures become DatabaseError carrying the driver's
    message (→ 500). Missing rows become NotFoundError (→ 404). Nothing is
    retried.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.exceptions import DatabaseError, NotFoundError
from palette_picker.models.project import Project
from palette_picker.schemas.project import ProjectResponse, ProjectUpdateResponse

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Business logic layer for project operations.

    Responsibilities:
        - list_projects():  every project
        - get_project():    one project by id, NotFoundError when absent
        - create_project(): insert, return payload + new id
        - update_project(): rename by id
        - delete_project(): delete by id
    """

    async def list_projects(self, db: AsyncSession) -> List[ProjectResponse]:
        try:
            result = await db.execute(select(Project).order_by(Project.id))
            projects = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing projects: %s", str(e))
            raise DatabaseError.from_exception(e, operation="list_projects")

        return [ProjectResponse.model_validate(project) for project in projects]

    async def get_project(self, db: AsyncSession, project_id: int) -> ProjectResponse:
        """
        Retrieve a single project by id.

        Raises:
            NotFoundError: no project has this id (→ 404)
            DatabaseError: query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Project).where(Project.id == project_id))
            project = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching project %s: %s", project_id, str(e))
            raise DatabaseError.from_exception(e, operation="get_project", project_id=project_id)

        if project is None:
            raise NotFoundError(
                message=f"A project with the id of {project_id} does not exist.",
                resource="project",
                resource_id=project_id,
            )

        return ProjectResponse.model_validate(project)

    async def create_project(self, db: AsyncSession, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a project from the request payload.

        The payload is written as given (minus any client-supplied `id`, which
        the store owns), so unknown keys are rejected by the store as a 500.

        Returns:
            The payload merged with the store-assigned `id`.
        """
        values = {key: value for key, value in payload.items() if key != "id"}
        try:
            result = await db.execute(
                insert(Project).values(**values).returning(Project.id)
            )
            new_id = result.scalar_one()
        except SQLAlchemyError as e:
            logger.error("Database error creating project: %s", str(e))
            raise DatabaseError.from_exception(e, operation="create_project")

        logger.info("Project %s created", new_id)
        return {**values, "id": new_id}

    async def update_project(
        self, db: AsyncSession, project_id: int, name: Any
    ) -> ProjectUpdateResponse:
        try:
            await db.execute(
                update(Project).where(Project.id == project_id).values(name=name)
            )
        except SQLAlchemyError as e:
            logger.error("Database error updating project %s: %s", project_id, str(e))
            raise DatabaseError.from_exception(e, operation="update_project", project_id=project_id)

        logger.info("Project %s renamed", project_id)
        return ProjectUpdateResponse(id=project_id, name=name)

    async def delete_project(self, db: AsyncSession, project_id: Optional[int]) -> int:
        """
        Delete the project with this id.

        A None id (unparseable request value) matches nothing and issues no
        statement. Palettes still pointing at the project make the store
        reject the delete (→ DatabaseError).

        Returns:
            Number of rows removed (0 or 1).
        """
        if project_id is None:
            return 0
        try:
            result = await db.execute(delete(Project).where(Project.id == project_id))
        except SQLAlchemyError as e:
            logger.error("Database error deleting project %s: %s", project_id, str(e))
            raise DatabaseError.from_exception(e, operation="delete_project", project_id=project_id)

        logger.info("Project %s deleted (%d row)", project_id, result.rowcount)
        return result.rowcount


# Stateless; one shared instance
project_service = ProjectService()
