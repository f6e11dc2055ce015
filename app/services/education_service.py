"""학력 서비스 — 학력 CRUD 비즈니스 로직.

Education Service — Business logic for profile-owned education records.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Education
from app.repositories.education_repository import education_repository
from app.schemas.portfolio import EducationCreate, EducationResponse, EducationUpdate
from app.services.profile_service import profile_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class EducationService:
    """학력 관련 비즈니스 로직을 처리하는 서비스.

    Service handling education business logic.
    """

    def _to_response(self, education: Education) -> EducationResponse:
        """학력 모델을 응답 스키마로 변환합니다 (percentage는 float).

        Convert an Education model to its response; percentage becomes a float.
        """
        return EducationResponse(
            id=education.id,
            degree=education.degree,
            institution=education.institution,
            field=education.field,
            start_date=education.start_date,
            end_date=education.end_date,
            percentage=float(education.percentage) if education.percentage is not None else None,
            description=education.description,
            url=education.url,
            banner=education.banner,
            github=education.github,
        )

    async def list_educations(self, db: AsyncSession) -> list[EducationResponse]:
        logger.info("Fetching all educations")
        educations = await education_repository.get_all(db)
        return [self._to_response(e) for e in educations]

    async def list_educations_by_profile(
        self, db: AsyncSession, profile_id: int
    ) -> list[EducationResponse]:
        logger.info("Fetching educations for profile id: %s", profile_id)
        educations = await education_repository.get_by_profile(db, profile_id)
        return [self._to_response(e) for e in educations]

    async def get_education(self, db: AsyncSession, education_id: int) -> EducationResponse:
        logger.info("Fetching education with id: %s", education_id)
        education: Education | None = await education_repository.get_by_id(db, education_id)
        if education is None:
            raise NotFoundError(f"Education not found with id: {education_id}")
        return self._to_response(education)

    async def create_education(self, db: AsyncSession, data: EducationCreate) -> EducationResponse:
        """학력 레코드를 생성합니다.

        Create an education record for an existing profile.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 학력 생성 데이터 (Education creation data)

        Returns:
            EducationResponse: 생성된 학력 응답 (Created education response)

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        logger.info("Creating new education for profile id: %s", data.profile_id)
        await profile_service.ensure_profile_exists(db, data.profile_id)
        education: Education = await education_repository.create(db, data.model_dump())
        logger.info("Education created successfully with id: %s", education.id)
        return self._to_response(education)

    async def update_education(
        self,
        db: AsyncSession,
        education_id: int,
        data: EducationUpdate,
    ) -> EducationResponse:
        """학력을 부분 수정합니다 — null 필드는 기존 값 유지.

        Apply a null-safe partial update; a non-null profile_id re-parents.

        Raises:
            NotFoundError: 학력 또는 프로필을 찾을 수 없을 때 (Education or profile not found)
        """
        logger.info("Updating education with id: %s", education_id)
        education: Education | None = await education_repository.get_by_id(db, education_id)
        if education is None:
            raise NotFoundError(f"Education not found with id: {education_id}")

        update_data: dict = data.model_dump(exclude_none=True)
        if "profile_id" in update_data:
            await profile_service.ensure_profile_exists(db, update_data["profile_id"])

        education = await education_repository.apply_update(db, education, update_data)
        logger.info("Education updated successfully with id: %s", education_id)
        return self._to_response(education)

    async def delete_education(self, db: AsyncSession, education_id: int) -> None:
        logger.info("Deleting education with id: %s", education_id)
        deleted: bool = await education_repository.delete(db, education_id)
        if not deleted:
            raise NotFoundError(f"Education not found with id: {education_id}")
        logger.info("Education deleted successfully with id: %s", education_id)


# 싱글턴 인스턴스 (Singleton instance)
education_service: EducationService = EducationService()
