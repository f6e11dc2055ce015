"""경력 세부 항목 서비스 — Experience point CRUD 비즈니스 로직.

Experience Point Service — Business logic for individual experience points.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.experience import ExperiencePoint
from app.repositories.experience_repository import (
    experience_point_repository,
    experience_repository,
)
from app.schemas.experience import (
    ExperiencePointCreate,
    ExperiencePointResponse,
    ExperiencePointUpdate,
)
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ExperiencePointService:
    """경력 세부 항목 관리 서비스 (Experience point management)."""

    def _to_response(self, point: ExperiencePoint) -> ExperiencePointResponse:
        return ExperiencePointResponse(
            id=point.id,
            experience_id=point.experience_id,
            content=point.content,
        )

    async def _ensure_experience_exists(self, db: AsyncSession, experience_id: int) -> None:
        if not await experience_repository.exists_by_id(db, experience_id):
            raise NotFoundError(f"Experience not found with id: {experience_id}")

    async def list_points_by_experience(
        self, db: AsyncSession, experience_id: int
    ) -> list[ExperiencePointResponse]:
        logger.info("Fetching points for experience id: %s", experience_id)
        points = await experience_point_repository.get_by_experience(db, experience_id)
        return [self._to_response(p) for p in points]

    async def get_point(self, db: AsyncSession, point_id: int) -> ExperiencePointResponse:
        logger.info("Fetching experience point with id: %s", point_id)
        point: ExperiencePoint | None = await experience_point_repository.get_by_id(db, point_id)
        if point is None:
            raise NotFoundError(f"Experience point not found with id: {point_id}")
        return self._to_response(point)

    async def create_point(
        self, db: AsyncSession, data: ExperiencePointCreate
    ) -> ExperiencePointResponse:
        """경력에 세부 항목을 추가합니다.

        Append a point to an existing experience.

        Raises:
            NotFoundError: 경력을 찾을 수 없을 때 (Experience not found)
        """
        logger.info("Creating new point for experience id: %s", data.experience_id)
        await self._ensure_experience_exists(db, data.experience_id)
        point: ExperiencePoint = await experience_point_repository.create(db, data.model_dump())
        logger.info("Experience point created successfully with id: %s", point.id)
        return self._to_response(point)

    async def update_point(
        self, db: AsyncSession, point_id: int, data: ExperiencePointUpdate
    ) -> ExperiencePointResponse:
        """세부 항목을 부분 수정합니다 (내용 변경 또는 다른 경력으로 이동).

        Partially update a point: new content and/or a new parent experience.

        Raises:
            NotFoundError: 항목 또는 경력을 찾을 수 없을 때 (Point or experience not found)
        """
        logger.info("Updating experience point with id: %s", point_id)
        point: ExperiencePoint | None = await experience_point_repository.get_by_id(db, point_id)
        if point is None:
            raise NotFoundError(f"Experience point not found with id: {point_id}")

        update_data: dict = data.model_dump(exclude_none=True)
        if "experience_id" in update_data:
            await self._ensure_experience_exists(db, update_data["experience_id"])

        point = await experience_point_repository.apply_update(db, point, update_data)
        logger.info("Experience point updated successfully with id: %s", point_id)
        return self._to_response(point)

    async def delete_point(self, db: AsyncSession, point_id: int) -> None:
        logger.info("Deleting experience point with id: %s", point_id)
        deleted: bool = await experience_point_repository.delete(db, point_id)
        if not deleted:
            raise NotFoundError(f"Experience point not found with id: {point_id}")
        logger.info("Experience point deleted successfully with id: %s", point_id)


# 싱글턴 인스턴스 (Singleton instance)
experience_point_service: ExperiencePointService = ExperiencePointService()
