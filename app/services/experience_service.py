"""경력 서비스 — 경력 CRUD 비즈니스 로직.

Experience Service — Business logic for experience CRUD operations.
Experiences are created together with their bullet points and technology
tags; updates replace the tag set only when technology_ids is provided.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.experience import Experience, ExperiencePoint
from app.repositories.experience_repository import experience_repository
from app.schemas.common import PointSummary, TechnologySummary
from app.schemas.experience import ExperienceCreate, ExperienceResponse, ExperienceUpdate
from app.services.profile_service import profile_service
from app.services.technology_service import technology_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ExperienceService:
    """경력 관련 비즈니스 로직을 처리하는 서비스.

    Service handling experience business logic.
    """

    def _to_response(self, experience: Experience) -> ExperienceResponse:
        """경력 모델을 세부 항목/기술을 포함한 응답으로 변환합니다.

        Convert an Experience to its response with points and technologies.
        """
        return ExperienceResponse(
            id=experience.id,
            company=experience.company,
            position=experience.position,
            start_date=experience.start_date,
            end_date=experience.end_date,
            location=experience.location,
            url=experience.url,
            banner=experience.banner,
            github=experience.github,
            technologies=[
                TechnologySummary(id=t.id, name=t.name) for t in experience.technologies
            ],
            experience_points=[
                PointSummary(id=p.id, content=p.content) for p in experience.experience_points
            ],
        )

    async def list_experiences(self, db: AsyncSession) -> list[ExperienceResponse]:
        logger.info("Fetching all experiences")
        experiences = await experience_repository.get_all(db)
        return [self._to_response(e) for e in experiences]

    async def list_experiences_by_profile(
        self, db: AsyncSession, profile_id: int
    ) -> list[ExperienceResponse]:
        """프로필의 경력을 시작일 역순으로 조회합니다.

        List a profile's experiences, most recent start date first.
        """
        logger.info("Fetching experiences for profile id: %s", profile_id)
        experiences = await experience_repository.get_by_profile(db, profile_id)
        return [self._to_response(e) for e in experiences]

    async def get_experience(self, db: AsyncSession, experience_id: int) -> ExperienceResponse:
        """경력을 조회합니다.

        Raises:
            NotFoundError: 경력을 찾을 수 없을 때 (Experience not found)
        """
        logger.info("Fetching experience with id: %s", experience_id)
        experience: Experience | None = await experience_repository.get_by_id(db, experience_id)
        if experience is None:
            raise NotFoundError(f"Experience not found with id: {experience_id}")
        return self._to_response(experience)

    async def create_experience(
        self,
        db: AsyncSession,
        data: ExperienceCreate,
    ) -> ExperienceResponse:
        """새 경력을 세부 항목, 기술 태그와 함께 생성합니다.

        Create an experience with its points and technology tags.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 경력 생성 데이터 (Experience creation data)

        Returns:
            ExperienceResponse: 생성된 경력 응답 (Created experience response)

        Raises:
            NotFoundError: 프로필 또는 기술을 찾을 수 없을 때 (Profile or technology not found)
        """
        logger.info("Creating new experience for profile id: %s", data.profile_id)
        await profile_service.ensure_profile_exists(db, data.profile_id)
        technologies = await technology_service.resolve_technologies(db, data.technology_ids)

        obj_data: dict = data.model_dump(exclude={"experience_points", "technology_ids"})
        obj_data["technologies"] = technologies
        obj_data["experience_points"] = [
            ExperiencePoint(content=content) for content in data.experience_points
        ]
        experience: Experience = await experience_repository.create(db, obj_data)
        logger.info("Experience created successfully with id: %s", experience.id)
        return self._to_response(experience)

    async def update_experience(
        self,
        db: AsyncSession,
        experience_id: int,
        data: ExperienceUpdate,
    ) -> ExperienceResponse:
        """경력을 부분 수정합니다.

        Apply a null-safe partial update to an experience.
        A non-null profile_id re-parents the experience; a non-null
        technology_ids replaces the tag set.

        Raises:
            NotFoundError: 경력, 프로필 또는 기술을 찾을 수 없을 때
                           (Experience, profile, or technology not found)
        """
        logger.info("Updating experience with id: %s", experience_id)
        experience: Experience | None = await experience_repository.get_by_id(db, experience_id)
        if experience is None:
            raise NotFoundError(f"Experience not found with id: {experience_id}")

        update_data: dict = data.model_dump(exclude_none=True, exclude={"technology_ids"})
        if "profile_id" in update_data:
            await profile_service.ensure_profile_exists(db, update_data["profile_id"])
        if data.technology_ids is not None:
            update_data["technologies"] = await technology_service.resolve_technologies(
                db, data.technology_ids
            )

        experience = await experience_repository.apply_update(db, experience, update_data)
        logger.info("Experience updated successfully with id: %s", experience_id)
        return self._to_response(experience)

    async def delete_experience(self, db: AsyncSession, experience_id: int) -> None:
        logger.info("Deleting experience with id: %s", experience_id)
        deleted: bool = await experience_repository.delete(db, experience_id)
        if not deleted:
            raise NotFoundError(f"Experience not found with id: {experience_id}")
        logger.info("Experience deleted successfully with id: %s", experience_id)


# 싱글턴 인스턴스 (Singleton instance)
experience_service: ExperienceService = ExperienceService()
