"""연락처 서비스 — 연락처 CRUD 비즈니스 로직.

Contact Service — Business logic for profile-owned contacts.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.portfolio import Contact
from app.repositories.contact_repository import contact_repository
from app.schemas.portfolio import ContactCreate, ContactResponse, ContactUpdate
from app.services.profile_service import profile_service
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ContactService:

    def _to_response(self, contact: Contact) -> ContactResponse:
        return ContactResponse.model_validate(contact, from_attributes=True)

    async def list_contacts(self, db: AsyncSession) -> list[ContactResponse]:
        logger.info("Fetching all contacts")
        records = await contact_repository.get_all(db)
        return [self._to_response(r) for r in records]

    async def list_contacts_by_profile(self, db: AsyncSession, profile_id: int) -> list[ContactResponse]:
        logger.info("Fetching contacts for profile id: %s", profile_id)
        records = await contact_repository.get_by_profile(db, profile_id)
        return [self._to_response(r) for r in records]

    async def get_contact(self, db: AsyncSession, contact_id: int) -> ContactResponse:
        logger.info("Fetching contact with id: %s", contact_id)
        contact: Contact | None = await contact_repository.get_by_id(db, contact_id)
        if contact is None:
            raise NotFoundError(f"Contact not found with id: {contact_id}")
        return self._to_response(contact)

    async def create_contact(self, db: AsyncSession, data: ContactCreate) -> ContactResponse:
        """연락처 레코드를 생성합니다.

        Create a contact for an existing profile.

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        logger.info("Creating new contact for profile id: %s", data.profile_id)
        await profile_service.ensure_profile_exists(db, data.profile_id)
        contact: Contact = await contact_repository.create(db, data.model_dump())
        logger.info("Contact created successfully with id: %s", contact.id)
        return self._to_response(contact)

    async def update_contact(self, db: AsyncSession, contact_id: int, data: ContactUpdate) -> ContactResponse:
        """연락처 레코드를 부분 수정합니다 — null 필드는 기존 값 유지.

        Apply a null-safe partial update; a non-null profile_id re-parents.

        Raises:
            NotFoundError: 레코드 또는 프로필을 찾을 수 없을 때 (Record or profile not found)
        """
        logger.info("Updating contact with id: %s", contact_id)
        contact: Contact | None = await contact_repository.get_by_id(db, contact_id)
        if contact is None:
            raise NotFoundError(f"Contact not found with id: {contact_id}")

        update_data: dict = data.model_dump(exclude_none=True)
        if "profile_id" in update_data:
            await profile_service.ensure_profile_exists(db, update_data["profile_id"])

        contact = await contact_repository.apply_update(db, contact, update_data)
        logger.info("Contact updated successfully with id: %s", contact_id)
        return self._to_response(contact)

    async def delete_contact(self, db: AsyncSession, contact_id: int) -> None:
        logger.info("Deleting contact with id: %s", contact_id)
        deleted: bool = await contact_repository.delete(db, contact_id)
        if not deleted:
            raise NotFoundError(f"Contact not found with id: {contact_id}")
        logger.info("Contact deleted successfully with id: %s", contact_id)


# 싱글턴 인스턴스 (Singleton instance)
contact_service: ContactService = ContactService()
