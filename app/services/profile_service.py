"""프로필 서비스 — 프로필 CRUD 비즈니스 로직.

Profile Service — Business logic for profile CRUD operations.
Profiles are the root aggregate; deleting one removes every record it owns.
Other services call ensure_profile_exists before attaching children.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.profile import Profile
from app.repositories.profile_repository import profile_repository
from app.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from app.services.technology_service import technology_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ProfileService:
    """프로필 관련 비즈니스 로직을 처리하는 서비스.

    Service handling profile business logic.
    """

    def _to_response(self, profile: Profile) -> ProfileResponse:
        """프로필 모델을 응답 스키마로 변환합니다.

        Convert a Profile model instance to a ProfileResponse schema.
        """
        return ProfileResponse(
            id=profile.id,
            fname=profile.fname,
            lname=profile.lname,
            sex=profile.sex,
            bio=profile.bio,
            banner=profile.banner,
            intro=profile.intro,
            contour=profile.contour,
            url=profile.url,
        )

    async def ensure_profile_exists(self, db: AsyncSession, profile_id: int) -> None:
        """프로필 존재 여부를 확인합니다.

        Verify a profile exists before a child record references it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            profile_id: 프로필 ID (Profile ID)

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        if not await profile_repository.exists_by_id(db, profile_id):
            raise NotFoundError(f"Profile not found with id: {profile_id}")

    async def list_profiles(self, db: AsyncSession) -> list[ProfileResponse]:
        """모든 프로필을 최신순으로 조회합니다.

        List all profiles, newest first.
        """
        logger.info("Fetching all profiles")
        profiles: list[Profile] = await profile_repository.get_all(db)
        return [self._to_response(p) for p in profiles]

    async def get_profile(self, db: AsyncSession, profile_id: int) -> ProfileResponse:
        """프로필을 조회합니다.

        Retrieve a profile by ID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            profile_id: 프로필 ID (Profile ID)

        Returns:
            ProfileResponse: 프로필 응답 (Profile response)

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        logger.info("Fetching profile with id: %s", profile_id)
        profile: Profile | None = await profile_repository.get_by_id(db, profile_id)
        if profile is None:
            raise NotFoundError(f"Profile not found with id: {profile_id}")
        return self._to_response(profile)

    async def get_profile_by_name(
        self,
        db: AsyncSession,
        fname: str,
        lname: str,
    ) -> ProfileResponse:
        """이름과 성으로 프로필을 조회합니다.

        Retrieve a profile by exact first and last name.

        Raises:
            NotFoundError: 일치하는 프로필이 없을 때 (No matching profile)
        """
        logger.info("Fetching profile with name: %s %s", fname, lname)
        profile: Profile | None = await profile_repository.get_by_name(db, fname, lname)
        if profile is None:
            raise NotFoundError(f"Profile not found with name: {fname} {lname}")
        return self._to_response(profile)

    async def create_profile(
        self,
        db: AsyncSession,
        data: ProfileCreate,
    ) -> ProfileResponse:
        """새 프로필을 생성합니다.

        Create a new profile and tag the listed technologies.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 프로필 생성 데이터 (Profile creation data)

        Returns:
            ProfileResponse: 생성된 프로필 응답 (Created profile response)

        Raises:
            NotFoundError: 존재하지 않는 기술 ID가 포함된 경우 (Unknown technology ID)
        """
        logger.info("Creating new profile: %s %s", data.fname, data.lname)
        # 기술을 먼저 확인하여 실패 시 아무것도 쓰지 않음
        # Resolve technologies first so a bad ID writes nothing
        technologies = await technology_service.resolve_technologies(db, data.technology_ids)

        obj_data: dict = data.model_dump(exclude={"technology_ids"})
        obj_data["technologies"] = technologies
        profile: Profile = await profile_repository.create(db, obj_data)
        logger.info("Profile created successfully with id: %s", profile.id)
        return self._to_response(profile)

    async def update_profile(
        self,
        db: AsyncSession,
        profile_id: int,
        data: ProfileUpdate,
    ) -> ProfileResponse:
        """프로필을 부분 수정합니다.

        Apply a null-safe partial update to a profile.
        A non-null technology_ids replaces the whole technology tag set.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            profile_id: 프로필 ID (Profile ID)
            data: 수정 데이터 (Update data)

        Returns:
            ProfileResponse: 수정된 프로필 응답 (Updated profile response)

        Raises:
            NotFoundError: 프로필 또는 기술을 찾을 수 없을 때 (Profile or technology not found)
        """
        logger.info("Updating profile with id: %s", profile_id)
        profile: Profile | None = await profile_repository.get_by_id(db, profile_id)
        if profile is None:
            raise NotFoundError(f"Profile not found with id: {profile_id}")

        update_data: dict = data.model_dump(exclude_none=True, exclude={"technology_ids"})
        if data.technology_ids is not None:
            update_data["technologies"] = await technology_service.resolve_technologies(
                db, data.technology_ids
            )

        profile = await profile_repository.apply_update(db, profile, update_data)
        logger.info("Profile updated successfully with id: %s", profile_id)
        return self._to_response(profile)

    async def delete_profile(self, db: AsyncSession, profile_id: int) -> None:
        """프로필과 소유한 모든 레코드를 삭제합니다.

        Delete a profile and every record it owns.

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        logger.info("Deleting profile with id: %s", profile_id)
        deleted: bool = await profile_repository.delete(db, profile_id)
        if not deleted:
            raise NotFoundError(f"Profile not found with id: {profile_id}")
        logger.info("Profile deleted successfully with id: %s", profile_id)


# 싱글턴 인스턴스 (Singleton instance)
profile_service: ProfileService = ProfileService()
