"""프로필 레포지토리 — 프로필 CRUD 및 이름 검색.

Profile Repository — CRUD queries for the profiles table,
plus lookup by first and last name.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.profile import Profile
from app.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    """프로필 테이블 쿼리 레포지토리.

    Repository handling database queries for the profiles table.
    """

    def __init__(self) -> None:
        super().__init__(Profile)

    async def get_by_name(
        self,
        db: AsyncSession,
        fname: str,
        lname: str,
    ) -> Profile | None:
        """이름과 성이 정확히 일치하는 첫 프로필을 조회합니다.

        Retrieve the first profile whose first and last name match exactly.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            fname: 이름 (First name)
            lname: 성 (Last name)

        Returns:
            Profile | None: 일치하는 프로필 또는 None (Matching profile or None)
        """
        query: Select = (
            select(Profile)
            .where(Profile.fname == fname, Profile.lname == lname)
            .order_by(Profile.id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalars().first()


profile_repository: ProfileRepository = ProfileRepository()
