"""관리자 주소 라우터 — 주소 CRUD 및 프로필별 조회 엔드포인트.

Admin Address Router — CRUD and profile-scoped listing endpoints for addresses.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.portfolio import AddressCreate, AddressResponse, AddressUpdate
from app.services.address_service import address_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[AddressResponse])
async def list_addresses(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[AddressResponse]:
    """주소 전체 목록을 조회합니다 (List all addresses)."""
    return await address_service.list_addresses(db)


@router.get("/profile/{profile_id}", response_model=list[AddressResponse])
async def list_addresses_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[AddressResponse]:
    """프로필의 주소 목록을 조회합니다 (List a profile's addresses)."""
    return await address_service.list_addresses_by_profile(db, profile_id)


@router.get("/{address_id}", response_model=AddressResponse)
async def get_address(
    address_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> AddressResponse:
    return await address_service.get_address(db, address_id)


@router.post("", response_model=AddressResponse, status_code=201)
async def create_address(
    data: AddressCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> AddressResponse:
    result: AddressResponse = await address_service.create_address(db, data)
    await db.commit()
    return result


@router.put("/{address_id}", response_model=AddressResponse)
@router.patch("/{address_id}", response_model=AddressResponse)
async def update_address(
    address_id: int,
    data: AddressUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> AddressResponse:
    """주소를 부분 수정합니다 (PUT/PATCH 동일).

    Partially update; null fields are left untouched.
    """
    result: AddressResponse = await address_service.update_address(db, address_id, data)
    await db.commit()
    return result


@router.delete("/{address_id}", status_code=204)
async def delete_address(
    address_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await address_service.delete_address(db, address_id)
    await db.commit()
