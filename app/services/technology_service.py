"""기술 서비스 — 기술 CRUD 및 태그 동기화 비즈니스 로직.

Technology Service — Business logic for technology CRUD, plus resolution
of technology ID lists used to tag profiles, experiences, and projects.
"""

import logging
from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.technology import Technology
from app.repositories.technology_repository import technology_repository
from app.schemas.technology import TechnologyCreate, TechnologyResponse, TechnologyUpdate
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class TechnologyService:
    """기술 관련 비즈니스 로직을 처리하는 서비스.

    Service handling technology business logic.
    """

    def _to_response(self, technology: Technology) -> TechnologyResponse:
        return TechnologyResponse(
            id=technology.id,
            name=technology.name,
            category=technology.category,
            type=technology.type,
            proficiency=technology.proficiency,
            banner=technology.banner,
            github=technology.github,
        )

    async def resolve_technologies(
        self,
        db: AsyncSession,
        technology_ids: Iterable[int],
    ) -> list[Technology]:
        """ID 목록을 기술 엔티티 목록으로 변환합니다.

        Resolve technology IDs into entities, preserving first-seen order
        and collapsing duplicates. Nothing is returned unless every ID exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            technology_ids: 기술 ID 목록 (Technology IDs)

        Returns:
            list[Technology]: 기술 목록 (Resolved technologies)

        Raises:
            NotFoundError: 존재하지 않는 ID가 하나라도 있을 때 (Any unknown ID)
        """
        ids: list[int] = list(dict.fromkeys(technology_ids))
        found: dict[int, Technology] = {
            t.id: t for t in await technology_repository.get_by_ids(db, ids)
        }
        for technology_id in ids:
            if technology_id not in found:
                raise NotFoundError(f"Technology not found with id: {technology_id}")
        return [found[technology_id] for technology_id in ids]

    async def list_technologies(self, db: AsyncSession) -> list[TechnologyResponse]:
        logger.info("Fetching all technologies")
        technologies = await technology_repository.get_all(db)
        return [self._to_response(t) for t in technologies]

    async def list_technologies_by_profile(
        self, db: AsyncSession, profile_id: int
    ) -> list[TechnologyResponse]:
        logger.info("Fetching technologies for profile id: %s", profile_id)
        technologies = await technology_repository.get_by_profile(db, profile_id)
        return [self._to_response(t) for t in technologies]

    async def list_technologies_by_category(
        self, db: AsyncSession, category: str
    ) -> list[TechnologyResponse]:
        logger.info("Fetching technologies for category: %s", category)
        technologies = await technology_repository.get_by_category(db, category)
        return [self._to_response(t) for t in technologies]

    async def get_technology(self, db: AsyncSession, technology_id: int) -> TechnologyResponse:
        """기술을 조회합니다.

        Raises:
            NotFoundError: 기술을 찾을 수 없을 때 (Technology not found)
        """
        logger.info("Fetching technology with id: %s", technology_id)
        technology: Technology | None = await technology_repository.get_by_id(db, technology_id)
        if technology is None:
            raise NotFoundError(f"Technology not found with id: {technology_id}")
        return self._to_response(technology)

    async def get_technology_by_name(self, db: AsyncSession, name: str) -> TechnologyResponse:
        logger.info("Fetching technology with name: %s", name)
        technology: Technology | None = await technology_repository.get_by_name(db, name)
        if technology is None:
            raise NotFoundError(f"Technology not found with name: {name}")
        return self._to_response(technology)

    async def create_technology(
        self, db: AsyncSession, data: TechnologyCreate
    ) -> TechnologyResponse:
        logger.info("Creating new technology: %s", data.name)
        technology: Technology = await technology_repository.create(db, data.model_dump())
        logger.info("Technology created successfully with id: %s", technology.id)
        return self._to_response(technology)

    async def update_technology(
        self, db: AsyncSession, technology_id: int, data: TechnologyUpdate
    ) -> TechnologyResponse:
        """기술 정보를 수정합니다 — null 필드는 기존 값 유지.

        Update a technology; null fields keep their stored value.

        Raises:
            NotFoundError: 기술을 찾을 수 없을 때 (Technology not found)
        """
        logger.info("Updating technology with id: %s", technology_id)
        technology: Technology | None = await technology_repository.update(
            db, technology_id, data.model_dump(exclude_none=True)
        )
        if technology is None:
            raise NotFoundError(f"Technology not found with id: {technology_id}")
        logger.info("Technology updated successfully with id: %s", technology_id)
        return self._to_response(technology)

    async def delete_technology(self, db: AsyncSession, technology_id: int) -> None:
        """기술을 삭제합니다 — 태그 연결만 제거되고 태그된 레코드는 유지.

        Delete a technology. Link rows are removed; tagged records stay.

        Raises:
            NotFoundError: 기술을 찾을 수 없을 때 (Technology not found)
        """
        logger.info("Deleting technology with id: %s", technology_id)
        deleted: bool = await technology_repository.delete(db, technology_id)
        if not deleted:
            raise NotFoundError(f"Technology not found with id: {technology_id}")
        logger.info("Technology deleted successfully with id: %s", technology_id)


# 싱글턴 인스턴스 (Singleton instance)
technology_service: TechnologyService = TechnologyService()
