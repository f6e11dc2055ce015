"""주소 레포지토리 — address CRUD 및 프로필별 조회.

Address Repository — CRUD queries for the addresses table.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Address
from app.repositories.base import BaseRepository


class AddressRepository(BaseRepository[Address]):

    def __init__(self) -> None:
        super().__init__(Address)

    async def get_by_profile(self, db: AsyncSession, profile_id: int) -> list[Address]:
        """프로필의 주소 목록을 최신순으로 조회합니다.

        List a profile's addresses, newest first.
        """
        query: Select = (
            select(Address)
            .where(Address.profile_id == profile_id)
            .order_by(Address.created_at.desc(), Address.id.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


address_repository: AddressRepository = AddressRepository()
