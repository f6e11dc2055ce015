"""학력 레포지토리 — education CRUD 및 프로필별 조회.

Education Repository — CRUD queries for the educations table.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Education
from app.repositories.base import BaseRepository


class EducationRepository(BaseRepository[Education]):

    def __init__(self) -> None:
        super().__init__(Education)

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Education]:
        """프로필의 학력 목록을 시작일 역순으로 조회합니다.

        List a profile's educations, most recent start date first.
        """
        query: Select = (
            select(Education)
            .where(Education.profile_id == profile_id)
            .order_by(Education.start_date.desc().nulls_last(), Education.id.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


education_repository: EducationRepository = EducationRepository()
