"""프로젝트 레포지토리 — 프로젝트 및 프로젝트 세부 항목 쿼리.

Project Repository — Queries for projects and their points.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.project import Project, ProjectPoint
from app.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):

    def __init__(self) -> None:
        super().__init__(Project)

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Project]:
        """프로필의 프로젝트를 시작일 역순으로 조회합니다.

        List a profile's projects, most recent start date first.
        """
        query: Select = (
            select(Project)
            .where(Project.profile_id == profile_id)
            .order_by(Project.start_date.desc().nulls_last(), Project.id.desc())
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


class ProjectPointRepository(BaseRepository[ProjectPoint]):

    def __init__(self) -> None:
        super().__init__(ProjectPoint)

    async def get_by_project(self, db: AsyncSession, project_id: int) -> list[ProjectPoint]:
        query: Select = (
            select(ProjectPoint)
            .where(ProjectPoint.project_id == project_id)
            .order_by(ProjectPoint.created_at.asc(), ProjectPoint.id.asc())
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


project_repository: ProjectRepository = ProjectRepository()
project_point_repository: ProjectPointRepository = ProjectPointRepository()
