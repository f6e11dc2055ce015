"""FAQ 서비스 — FAQ CRUD 비즈니스 로직.

Faq Service — Business logic for profile-owned faqs.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Faq
from app.repositories.faq_repository import faq_repository
from app.schemas.portfolio import FaqCreate, FaqResponse, FaqUpdate
from app.services.profile_service import profile_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class FaqService:

    def _to_response(self, faq: Faq) -> FaqResponse:
        return FaqResponse.model_validate(faq, from_attributes=True)

    async def list_faqs(self, db: AsyncSession) -> list[FaqResponse]:
        logger.info("Fetching all faqs")
        records = await faq_repository.get_all(db)
        return [self._to_response(r) for r in records]

    async def list_faqs_by_profile(self, db: AsyncSession, profile_id: int) -> list[FaqResponse]:
        logger.info("Fetching faqs for profile id: %s", profile_id)
        records = await faq_repository.get_by_profile(db, profile_id)
        return [self._to_response(r) for r in records]

    async def get_faq(self, db: AsyncSession, faq_id: int) -> FaqResponse:
        logger.info("Fetching faq with id: %s", faq_id)
        faq: Faq | None = await faq_repository.get_by_id(db, faq_id)
        if faq is None:
            raise NotFoundError(f"FAQ not found with id: {faq_id}")
        return self._to_response(faq)

    async def create_faq(self, db: AsyncSession, data: FaqCreate) -> FaqResponse:
        """FAQ 레코드를 생성합니다.

        Create a faq for an existing profile.

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        logger.info("Creating new faq for profile id: %s", data.profile_id)
        await profile_service.ensure_profile_exists(db, data.profile_id)
        faq: Faq = await faq_repository.create(db, data.model_dump())
        logger.info("FAQ created successfully with id: %s", faq.id)
        return self._to_response(faq)

    async def update_faq(self, db: AsyncSession, faq_id: int, data: FaqUpdate) -> FaqResponse:
        """FAQ 레코드를 부분 수정합니다 — null 필드는 기존 값 유지.

        Apply a null-safe partial update; a non-null profile_id re-parents.

        Raises:
            NotFoundError: 레코드 또는 프로필을 찾을 수 없을 때 (Record or profile not found)
        """
        logger.info("Updating faq with id: %s", faq_id)
        faq: Faq | None = await faq_repository.get_by_id(db, faq_id)
        if faq is None:
            raise NotFoundError(f"FAQ not found with id: {faq_id}")

        update_data: dict = data.model_dump(exclude_none=True)
        if "profile_id" in update_data:
            await profile_service.ensure_profile_exists(db, update_data["profile_id"])

        faq = await faq_repository.apply_update(db, faq, update_data)
        logger.info("FAQ updated successfully with id: %s", faq_id)
        return self._to_response(faq)

    async def delete_faq(self, db: AsyncSession, faq_id: int) -> None:
        logger.info("Deleting faq with id: %s", faq_id)
        deleted: bool = await faq_repository.delete(db, faq_id)
        if not deleted:
            raise NotFoundError(f"FAQ not found with id: {faq_id}")
        logger.info("FAQ deleted successfully with id: %s", faq_id)


# 싱글턴 인스턴스 (Singleton instance)
faq_service: FaqService = FaqService()
