"""경력 레포지토리 — 경력 및 경력 세부 항목 쿼리.

Experience Repository — Queries for experiences and their points.
Technologies and points are selectin-loaded by the model mapping.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.experience import Experience, ExperiencePoint
from app.repositories.base import BaseRepository


class ExperienceRepository(BaseRepository[Experience]):

    def __init__(self) -> None:
        super().__init__(Experience)

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Experience]:
        """프로필의 경력을 시작일 역순으로 조회합니다.

        List a profile's experiences, most recent start date first.
        """
        query: Select = (
            select(Experience)
            .where(Experience.profile_id == profile_id)
            .order_by(Experience.start_date.desc().nulls_last(), Experience.id.desc())
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


class ExperiencePointRepository(BaseRepository[ExperiencePoint]):

    def __init__(self) -> None:
        super().__init__(ExperiencePoint)

    async def get_by_experience(self, db: AsyncSession, experience_id: int) -> list[ExperiencePoint]:
        query: Select = (
            select(ExperiencePoint)
            .where(ExperiencePoint.experience_id == experience_id)
            .order_by(ExperiencePoint.created_at.asc(), ExperiencePoint.id.asc())
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


experience_repository: ExperienceRepository = ExperienceRepository()
experience_point_repository: ExperiencePointRepository = ExperiencePointRepository()
