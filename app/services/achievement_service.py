"""수상 서비스 — 수상/자격 CRUD 비즈니스 로직.

Achievement Service — Business logic for profile-owned achievements.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Achievement
from app.repositories.achievement_repository import achievement_repository
from app.schemas.portfolio import AchievementCreate, AchievementResponse, AchievementUpdate
from app.services.profile_service import profile_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class AchievementService:

    def _to_response(self, achievement: Achievement) -> AchievementResponse:
        return AchievementResponse.model_validate(achievement, from_attributes=True)

    async def list_achievements(self, db: AsyncSession) -> list[AchievementResponse]:
        logger.info("Fetching all achievements")
        records = await achievement_repository.get_all(db)
        return [self._to_response(r) for r in records]

    async def list_achievements_by_profile(self, db: AsyncSession, profile_id: int) -> list[AchievementResponse]:
        logger.info("Fetching achievements for profile id: %s", profile_id)
        records = await achievement_repository.get_by_profile(db, profile_id)
        return [self._to_response(r) for r in records]

    async def get_achievement(self, db: AsyncSession, achievement_id: int) -> AchievementResponse:
        logger.info("Fetching achievement with id: %s", achievement_id)
        achievement: Achievement | None = await achievement_repository.get_by_id(db, achievement_id)
        if achievement is None:
            raise NotFoundError(f"Achievement not found with id: {achievement_id}")
        return self._to_response(achievement)

    async def create_achievement(self, db: AsyncSession, data: AchievementCreate) -> AchievementResponse:
        """수상 레코드를 생성합니다.

        Create an achievement for an existing profile.

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        logger.info("Creating new achievement for profile id: %s", data.profile_id)
        await profile_service.ensure_profile_exists(db, data.profile_id)
        achievement: Achievement = await achievement_repository.create(db, data.model_dump())
        logger.info("Achievement created successfully with id: %s", achievement.id)
        return self._to_response(achievement)

    async def update_achievement(self, db: AsyncSession, achievement_id: int, data: AchievementUpdate) -> AchievementResponse:
        """수상 레코드를 부분 수정합니다 — null 필드는 기존 값 유지.

        Apply a null-safe partial update; a non-null profile_id re-parents.

        Raises:
            NotFoundError: 레코드 또는 프로필을 찾을 수 없을 때 (Record or profile not found)
        """
        logger.info("Updating achievement with id: %s", achievement_id)
        achievement: Achievement | None = await achievement_repository.get_by_id(db, achievement_id)
        if achievement is None:
            raise NotFoundError(f"Achievement not found with id: {achievement_id}")

        update_data: dict = data.model_dump(exclude_none=True)
        if "profile_id" in update_data:
            await profile_service.ensure_profile_exists(db, update_data["profile_id"])

        achievement = await achievement_repository.apply_update(db, achievement, update_data)
        logger.info("Achievement updated successfully with id: %s", achievement_id)
        return self._to_response(achievement)

    async def delete_achievement(self, db: AsyncSession, achievement_id: int) -> None:
        logger.info("Deleting achievement with id: %s", achievement_id)
        deleted: bool = await achievement_repository.delete(db, achievement_id)
        if not deleted:
            raise NotFoundError(f"Achievement not found with id: {achievement_id}")
        logger.info("Achievement deleted successfully with id: %s", achievement_id)


# 싱글턴 인스턴스 (Singleton instance)
achievement_service: AchievementService = AchievementService()
