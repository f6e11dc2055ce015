"""문의 레포지토리 — inquiry CRUD 및 프로필별 조회.

Inquiry Repository — CRUD queries for the inquiries table.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Inquiry
from app.repositories.base import BaseRepository


class InquiryRepository(BaseRepository[Inquiry]):

    def __init__(self) -> None:
        super().__init__(Inquiry)

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Inquiry]:
        """프로필의 문의 목록을 최신순으로 조회합니다.

        List a profile's inquiries, newest first.
        """
        query: Select = (
            select(Inquiry)
            .where(Inquiry.profile_id == profile_id)
            .order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


inquiry_repository: InquiryRepository = InquiryRepository()
