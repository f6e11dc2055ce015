"""문의 서비스 — 방문자 문의 접수 및 관리.

Inquiry Service — Visitors submit inquiries through the public API;
administrators list, read, and delete them. Inquiries are never edited.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Inquiry
from app.repositories.inquiry_repository import inquiry_repository
from app.schemas.portfolio import InquiryCreate, InquiryResponse
from app.services.profile_service import profile_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class InquiryService:

    def _to_response(self, inquiry: Inquiry) -> InquiryResponse:
        return InquiryResponse(
            id=inquiry.id,
            name=inquiry.name,
            email=inquiry.email,
            message=inquiry.message,
        )

    async def list_inquiries(self, db: AsyncSession) -> list[InquiryResponse]:
        logger.info("Fetching all inquiries")
        inquiries = await inquiry_repository.get_all(db)
        return [self._to_response(i) for i in inquiries]

    async def list_inquiries_by_profile(
        self, db: AsyncSession, profile_id: int
    ) -> list[InquiryResponse]:
        logger.info("Fetching inquiries for profile id: %s", profile_id)
        inquiries = await inquiry_repository.get_by_profile(db, profile_id)
        return [self._to_response(i) for i in inquiries]

    async def get_inquiry(self, db: AsyncSession, inquiry_id: int) -> InquiryResponse:
        logger.info("Fetching inquiry with id: %s", inquiry_id)
        inquiry: Inquiry | None = await inquiry_repository.get_by_id(db, inquiry_id)
        if inquiry is None:
            raise NotFoundError(f"Inquiry not found with id: {inquiry_id}")
        return self._to_response(inquiry)

    async def create_inquiry(self, db: AsyncSession, data: InquiryCreate) -> InquiryResponse:
        """문의를 접수합니다.

        Record a visitor inquiry addressed to an existing profile.

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        logger.info("Creating new inquiry for profile id: %s", data.profile_id)
        await profile_service.ensure_profile_exists(db, data.profile_id)
        inquiry: Inquiry = await inquiry_repository.create(db, data.model_dump())
        logger.info("Inquiry created successfully with id: %s", inquiry.id)
        return self._to_response(inquiry)

    async def delete_inquiry(self, db: AsyncSession, inquiry_id: int) -> None:
        logger.info("Deleting inquiry with id: %s", inquiry_id)
        deleted: bool = await inquiry_repository.delete(db, inquiry_id)
        if not deleted:
            raise NotFoundError(f"Inquiry not found with id: {inquiry_id}")
        logger.info("Inquiry deleted successfully with id: %s", inquiry_id)


# 싱글턴 인스턴스 (Singleton instance)
inquiry_service: InquiryService = InquiryService()
