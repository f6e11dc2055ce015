"""수상 레포지토리 — achievement CRUD 및 프로필별 조회.

Achievement Repository — CRUD queries for the achievements table.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Achievement
from app.repositories.base import BaseRepository


class AchievementRepository(BaseRepository[Achievement]):

    def __init__(self) -> None:
        super().__init__(Achievement)

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Achievement]:
        """프로필의 수상 목록을 취득일 역순으로 조회합니다.

        List a profile's achievements, most recently achieved first.
        """
        query: Select = (
            select(Achievement)
            .where(Achievement.profile_id == profile_id)
            .order_by(Achievement.date_achieved.desc().nulls_last(), Achievement.id.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


achievement_repository: AchievementRepository = AchievementRepository()
