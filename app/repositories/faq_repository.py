"""FAQ 레포지토리 — FAQ CRUD 및 프로필별 조회.

Faq Repository — CRUD queries for the faqs table.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Faq
from app.repositories.base import BaseRepository


class FaqRepository(BaseRepository[Faq]):

    def __init__(self) -> None:
        super().__init__(Faq)

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Faq]:
        """프로필의 FAQ 목록을 최신순으로 조회합니다.

        List a profile's faqs, newest first.
        """
        query: Select = (
            select(Faq)
            .where(Faq.profile_id == profile_id)
            .order_by(Faq.created_at.desc(), Faq.id.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


faq_repository: FaqRepository = FaqRepository()
