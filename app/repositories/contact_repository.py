"""연락처 레포지토리 — contact CRUD 및 프로필별 조회.

Contact Repository — CRUD queries for the contacts table.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Contact
from app.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):

    def __init__(self) -> None:
        super().__init__(Contact)

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Contact]:
        """프로필의 연락처 목록을 최신순으로 조회합니다.

        List a profile's contacts, newest first.
        """
        query: Select = (
            select(Contact)
            .where(Contact.profile_id == profile_id)
            .order_by(Contact.created_at.desc(), Contact.id.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


contact_repository: ContactRepository = ContactRepository()
