"""관리자 레포지토리 — 로그인 조회.

Admin Repository — Lookup queries for the admins table.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.admin import Admin
from app.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):

    def __init__(self) -> None:
        super().__init__(Admin)

    async def get_by_username(self, db: AsyncSession, username: str) -> Admin | None:
        query: Select = select(Admin).where(Admin.username == username)
        result = await db.execute(query)
        return result.scalar_one_or_none()


admin_repository: AdminRepository = AdminRepository()
