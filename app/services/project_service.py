"""프로젝트 서비스 — 프로젝트 CRUD 비즈니스 로직.

Project Service — Business logic for project CRUD operations.
Projects carry bullet points and technology tags like experiences do.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.project import Project, ProjectPoint
from app.repositories.project_repository import project_repository
from app.schemas.common import PointSummary, TechnologySummary
from app.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from app.services.profile_service import profile_service
from app.services.technology_service import technology_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ProjectService:

    def _to_response(self, project: Project) -> ProjectResponse:
        return ProjectResponse(
            id=project.id,
            name=project.name,
            start_date=project.start_date,
            end_date=project.end_date,
            url=project.url,
            banner=project.banner,
            github=project.github,
            technologies=[
                TechnologySummary(id=t.id, name=t.name) for t in project.technologies
            ],
            project_points=[
                PointSummary(id=p.id, content=p.content) for p in project.project_points
            ],
        )

    async def list_projects(self, db: AsyncSession) -> list[ProjectResponse]:
        logger.info("Fetching all projects")
        projects = await project_repository.get_all(db)
        return [self._to_response(p) for p in projects]

    async def list_projects_by_profile(
        self, db: AsyncSession, profile_id: int
    ) -> list[ProjectResponse]:
        logger.info("Fetching projects for profile id: %s", profile_id)
        projects = await project_repository.get_by_profile(db, profile_id)
        return [self._to_response(p) for p in projects]

    async def get_project(self, db: AsyncSession, project_id: int) -> ProjectResponse:
        logger.info("Fetching project with id: %s", project_id)
        project: Project | None = await project_repository.get_by_id(db, project_id)
        if project is None:
            raise NotFoundError(f"Project not found with id: {project_id}")
        return self._to_response(project)

    async def create_project(self, db: AsyncSession, data: ProjectCreate) -> ProjectResponse:
        """새 프로젝트를 세부 항목, 기술 태그와 함께 생성합니다.

        Create a project with its points and technology tags.

        Raises:
            NotFoundError: 프로필 또는 기술을 찾을 수 없을 때 (Profile or technology not found)
        """
        logger.info("Creating new project for profile id: %s", data.profile_id)
        await profile_service.ensure_profile_exists(db, data.profile_id)
        technologies = await technology_service.resolve_technologies(db, data.technology_ids)

        obj_data: dict = data.model_dump(exclude={"project_points", "technology_ids"})
        obj_data["technologies"] = technologies
        obj_data["project_points"] = [ProjectPoint(content=content) for content in data.project_points]
        project: Project = await project_repository.create(db, obj_data)
        logger.info("Project created successfully with id: %s", project.id)
        return self._to_response(project)

    async def update_project(
        self,
        db: AsyncSession,
        project_id: int,
        data: ProjectUpdate,
    ) -> ProjectResponse:
        """프로젝트를 부분 수정합니다 — null 필드는 기존 값 유지.

        Apply a null-safe partial update; technology_ids replaces tags when present.

        Raises:
            NotFoundError: 프로젝트, 프로필 또는 기술을 찾을 수 없을 때
                           (Project, profile, or technology not found)
        """
        logger.info("Updating project with id: %s", project_id)
        project: Project | None = await project_repository.get_by_id(db, project_id)
        if project is None:
            raise NotFoundError(f"Project not found with id: {project_id}")

        update_data: dict = data.model_dump(exclude_none=True, exclude={"technology_ids"})
        if "profile_id" in update_data:
            await profile_service.ensure_profile_exists(db, update_data["profile_id"])
        if data.technology_ids is not None:
            update_data["technologies"] = await technology_service.resolve_technologies(
                db, data.technology_ids
            )

        project = await project_repository.apply_update(db, project, update_data)
        logger.info("Project updated successfully with id: %s", project_id)
        return self._to_response(project)

    async def delete_project(self, db: AsyncSession, project_id: int) -> None:
        logger.info("Deleting project with id: %s", project_id)
        deleted: bool = await project_repository.delete(db, project_id)
        if not deleted:
            raise NotFoundError(f"Project not found with id: {project_id}")
        logger.info("Project deleted successfully with id: %s", project_id)


# 싱글턴 인스턴스 (Singleton instance)
project_service: ProjectService = ProjectService()
