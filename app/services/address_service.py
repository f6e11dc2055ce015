"""주소 서비스 — 주소 CRUD 비즈니스 로직.

Address Service — Business logic for profile-owned addresses.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Address
from app.repositories.address_repository import address_repository
from app.schemas.portfolio import AddressCreate, AddressResponse, AddressUpdate
from app.services.profile_service import profile_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class AddressService:

    def _to_response(self, address: Address) -> AddressResponse:
        return AddressResponse.model_validate(address, from_attributes=True)

    async def list_addresses(self, db: AsyncSession) -> list[AddressResponse]:
        logger.info("Fetching all addresses")
        records = await address_repository.get_all(db)
        return [self._to_response(r) for r in records]

    async def list_addresses_by_profile(self, db: AsyncSession, profile_id: int) -> list[AddressResponse]:
        logger.info("Fetching addresses for profile id: %s", profile_id)
        records = await address_repository.get_by_profile(db, profile_id)
        return [self._to_response(r) for r in records]

    async def get_address(self, db: AsyncSession, address_id: int) -> AddressResponse:
        logger.info("Fetching address with id: %s", address_id)
        address: Address | None = await address_repository.get_by_id(db, address_id)
        if address is None:
            raise NotFoundError(f"Address not found with id: {address_id}")
        return self._to_response(address)

    async def create_address(self, db: AsyncSession, data: AddressCreate) -> AddressResponse:
        """주소 레코드를 생성합니다.

        Create an address for an existing profile.

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        logger.info("Creating new address for profile id: %s", data.profile_id)
        await profile_service.ensure_profile_exists(db, data.profile_id)
        address: Address = await address_repository.create(db, data.model_dump())
        logger.info("Address created successfully with id: %s", address.id)
        return self._to_response(address)

    async def update_address(self, db: AsyncSession, address_id: int, data: AddressUpdate) -> AddressResponse:
        """주소 레코드를 부분 수정합니다 — null 필드는 기존 값 유지.

        Apply a null-safe partial update; a non-null profile_id re-parents.

        Raises:
            NotFoundError: 레코드 또는 프로필을 찾을 수 없을 때 (Record or profile not found)
        """
        logger.info("Updating address with id: %s", address_id)
        address: Address | None = await address_repository.get_by_id(db, address_id)
        if address is None:
            raise NotFoundError(f"Address not found with id: {address_id}")

        update_data: dict = data.model_dump(exclude_none=True)
        if "profile_id" in update_data:
            await profile_service.ensure_profile_exists(db, update_data["profile_id"])

        address = await address_repository.apply_update(db, address, update_data)
        logger.info("Address updated successfully with id: %s", address_id)
        return self._to_response(address)

    async def delete_address(self, db: AsyncSession, address_id: int) -> None:
        logger.info("Deleting address with id: %s", address_id)
        deleted: bool = await address_repository.delete(db, address_id)
        if not deleted:
            raise NotFoundError(f"Address not found with id: {address_id}")
        logger.info("Address deleted successfully with id: %s", address_id)


# 싱글턴 인스턴스 (Singleton instance)
address_service: AddressService = AddressService()
