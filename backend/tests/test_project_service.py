"""
Palette Picker Backend — Project Service Unit Tests
=====================================================

What:  ProjectService against a mocked AsyncSession.
Why:   Checks result shaping and error translation without a database.

What we test:
    ✅ Rows become ProjectResponse models
    ✅ Missing row raises NotFoundError with the client-facing text
    ✅ Driver failures become DatabaseError carrying the driver message
    ✅ Create strips client ids and returns payload + new id
    ✅ Delete with an unparseable id issues no statement
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from palette_picker.exceptions import DatabaseError, NotFoundError
from palette_picker.models.project import Project
from palette_picker.services.project_service import ProjectService


def _driver_error(text: str) -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception(text))


class TestProjectServiceRead:

    def setup_method(self):
        self.service = ProjectService()

    @pytest.mark.asyncio
    async def test_list_projects(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = [
            Project(id=1, name="Warm Tones"),
            Project(id=2, name="Cool Tones"),
        ]
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_projects(mock_db_session)

        assert [project.id for project in result] == [1, 2]
        assert result[0].name == "Warm Tones"

    @pytest.mark.asyncio
    async def test_get_project_found(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = Project(id=3, name="Kitchen")
        mock_db_session.execute.return_value = mock_result

        result = await self.service.get_project(mock_db_session, 3)

        assert result.id == 3
        assert result.name == "Kitchen"

    @pytest.mark.asyncio
    async def test_get_project_not_found(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_project(mock_db_session, -100)

        assert exc_info.value.message == "A project with the id of -100 does not exist."
        assert exc_info.value.context["resource_id"] == -100

    @pytest.mark.asyncio
    async def test_list_projects_driver_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=_driver_error("connection refused"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_projects(mock_db_session)

        assert exc_info.value.message == "connection refused"
        assert exc_info.value.context["operation"] == "list_projects"


class TestProjectServiceWrite:

    def setup_method(self):
        self.service = ProjectService()

    @pytest.mark.asyncio
    async def test_create_project_returns_payload_and_id(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one.return_value = 7
        mock_db_session.execute.return_value = mock_result

        result = await self.service.create_project(mock_db_session, {"name": "Garage"})

        assert result == {"name": "Garage", "id": 7}
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_project_ignores_client_id(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one.return_value = 8
        mock_db_session.execute.return_value = mock_result

        result = await self.service.create_project(mock_db_session, {"name": "Den", "id": 999})

        assert result == {"name": "Den", "id": 8}

    @pytest.mark.asyncio
    async def test_create_project_driver_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=_driver_error("disk I/O error"))

        with pytest.raises(DatabaseError, match="disk I/O error"):
            await self.service.create_project(mock_db_session, {"name": "Attic"})

    @pytest.mark.asyncio
    async def test_update_project(self, mock_db_session):
        result = await self.service.update_project(mock_db_session, 4, "Renamed")

        assert result.id == 4
        assert result.name == "Renamed"
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_project(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.rowcount = 1
        mock_db_session.execute.return_value = mock_result

        assert await self.service.delete_project(mock_db_session, 5) == 1

    @pytest.mark.asyncio
    async def test_delete_project_without_id_skips_store(self, mock_db_session):
        assert await self.service.delete_project(mock_db_session, None) == 0
        mock_db_session.execute.assert_not_awaited()
