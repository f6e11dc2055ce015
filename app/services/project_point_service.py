"""프로젝트 세부 항목 서비스 — Project point CRUD 비즈니스 로직.

Project Point Service — Business logic for individual project points.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.project import ProjectPoint
from app.repositories.project_repository import project_point_repository, project_repository
from app.schemas.project import ProjectPointCreate, ProjectPointResponse, ProjectPointUpdate
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ProjectPointService:
    """프로젝트 세부 항목 관리 서비스 (Project point management)."""

    def _to_response(self, point: ProjectPoint) -> ProjectPointResponse:
        return ProjectPointResponse(id=point.id, project_id=point.project_id, content=point.content)

    async def _ensure_project_exists(self, db: AsyncSession, project_id: int) -> None:
        if not await project_repository.exists_by_id(db, project_id):
            raise NotFoundError(f"Project not found with id: {project_id}")

    async def list_points_by_project(
        self, db: AsyncSession, project_id: int
    ) -> list[ProjectPointResponse]:
        logger.info("Fetching points for project id: %s", project_id)
        points = await project_point_repository.get_by_project(db, project_id)
        return [self._to_response(p) for p in points]

    async def get_point(self, db: AsyncSession, point_id: int) -> ProjectPointResponse:
        logger.info("Fetching project point with id: %s", point_id)
        point: ProjectPoint | None = await project_point_repository.get_by_id(db, point_id)
        if point is None:
            raise NotFoundError(f"Project point not found with id: {point_id}")
        return self._to_response(point)

    async def create_point(self, db: AsyncSession, data: ProjectPointCreate) -> ProjectPointResponse:
        logger.info("Creating new point for project id: %s", data.project_id)
        await self._ensure_project_exists(db, data.project_id)
        point: ProjectPoint = await project_point_repository.create(db, data.model_dump())
        logger.info("Project point created successfully with id: %s", point.id)
        return self._to_response(point)

    async def update_point(
        self, db: AsyncSession, point_id: int, data: ProjectPointUpdate
    ) -> ProjectPointResponse:
        logger.info("Updating project point with id: %s", point_id)
        point: ProjectPoint | None = await project_point_repository.get_by_id(db, point_id)
        if point is None:
            raise NotFoundError(f"Project point not found with id: {point_id}")

        update_data: dict = data.model_dump(exclude_none=True)
        if "project_id" in update_data:
            await self._ensure_project_exists(db, update_data["project_id"])

        point = await project_point_repository.apply_update(db, point, update_data)
        logger.info("Project point updated successfully with id: %s", point_id)
        return self._to_response(point)

    async def delete_point(self, db: AsyncSession, point_id: int) -> None:
        logger.info("Deleting project point with id: %s", point_id)
        deleted: bool = await project_point_repository.delete(db, point_id)
        if not deleted:
            raise NotFoundError(f"Project point not found with id: {point_id}")
        logger.info("Project point deleted successfully with id: %s", point_id)


# 싱글턴 인스턴스 (Singleton instance)
project_point_service: ProjectPointService = ProjectPointService()
