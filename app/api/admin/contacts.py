"""관리자 연락처 라우터 — 연락처 CRUD 및 프로필별 조회 엔드포인트.

Admin Contact Router — CRUD and profile-scoped listing endpoints for contacts.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.portfolio import ContactCreate, ContactResponse, ContactUpdate
from app.services.contact_service import contact_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ContactResponse])
async def list_contacts(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ContactResponse]:
    """연락처 전체 목록을 조회합니다 (List all contacts)."""
    return await contact_service.list_contacts(db)


@router.get("/profile/{profile_id}", response_model=list[ContactResponse])
async def list_contacts_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ContactResponse]:
    """프로필의 연락처 목록을 조회합니다 (List a profile's contacts)."""
    return await contact_service.list_contacts_by_profile(db, profile_id)


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ContactResponse:
    return await contact_service.get_contact(db, contact_id)


@router.post("", response_model=ContactResponse, status_code=201)
async def create_contact(
    data: ContactCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ContactResponse:
    result: ContactResponse = await contact_service.create_contact(db, data)
    await db.commit()
    return result


@router.put("/{contact_id}", response_model=ContactResponse)
@router.patch("/{contact_id}", response_model=ContactResponse)
async def update_contact(
    contact_id: int,
    data: ContactUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ContactResponse:
    """연락처를 부분 수정합니다 (PUT/PATCH 동일).

    Partially update; null fields are left untouched.
    """
    result: ContactResponse = await contact_service.update_contact(db, contact_id, data)
    await db.commit()
    return result


@router.delete("/{contact_id}", status_code=204)
async def delete_contact(
    contact_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await contact_service.delete_contact(db, contact_id)
    await db.commit()
