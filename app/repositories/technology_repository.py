"""기술 레포지토리 — 기술 CRUD 및 분류/프로필별 조회.

Technology Repository — CRUD queries for the technologies table,
including category listing, profile tag listing, and bulk lookup by IDs.
"""

from collections.abc import Iterable

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.technology import Technology, profiles_technologies
from app.repositories.base import BaseRepository


class TechnologyRepository(BaseRepository[Technology]):
    """기술 테이블 쿼리 레포지토리.

    Repository handling database queries for the technologies table.
    """

    def __init__(self) -> None:
        super().__init__(Technology)

    async def get_by_name(self, db: AsyncSession, name: str) -> Technology | None:
        """이름이 일치하는 첫 기술을 조회합니다.

        Retrieve the first technology with the given name.
        """
        query: Select = (
            select(Technology)
            .where(Technology.name == name)
            .order_by(Technology.id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalars().first()

    async def get_by_category(self, db: AsyncSession, category: str) -> list[Technology]:
        """분류에 속한 기술을 이름순으로 조회합니다.

        List technologies in a category ordered by name.
        """
        query: Select = (
            select(Technology)
            .where(Technology.category == category)
            .order_by(Technology.name.asc(), Technology.id.asc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Technology]:
        """프로필에 태그된 기술을 분류, 이름순으로 조회합니다.

        List technologies tagged onto a profile, ordered by category then name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            profile_id: 프로필 ID (Profile ID)

        Returns:
            list[Technology]: 태그된 기술 목록 (Tagged technologies)
        """
        query: Select = (
            select(Technology)
            .join(profiles_technologies, profiles_technologies.c.technology_id == Technology.id)
            .where(profiles_technologies.c.profile_id == profile_id)
            .order_by(Technology.category.asc(), Technology.name.asc(), Technology.id.asc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_ids(self, db: AsyncSession, technology_ids: Iterable[int]) -> list[Technology]:
        """ID 목록에 해당하는 기술을 조회합니다 (없는 ID는 결과에서 빠짐).

        Bulk-load technologies by ID; unknown IDs are simply absent.
        """
        ids: list[int] = list(technology_ids)
        if not ids:
            return []
        query: Select = select(Technology).where(Technology.id.in_(ids))
        result = await db.execute(query)
        return list(result.scalars().all())


technology_repository: TechnologyRepository = TechnologyRepository()
