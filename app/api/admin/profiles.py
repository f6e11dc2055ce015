"""관리자 프로필 라우터 — 프로필 CRUD 및 이름 검색 엔드포인트.

Admin Profile Router — CRUD and name-search endpoints for profiles.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from app.services.profile_service import profile_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ProfileResponse]:
    """프로필 목록을 조회합니다.

    List all profiles, newest first.
    """
    return await profile_service.list_profiles(db)


@router.get("/search", response_model=ProfileResponse)
async def search_profile(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
    fname: Annotated[str, Query(min_length=1)],
    lname: Annotated[str, Query(min_length=1)],
) -> ProfileResponse:
    """이름과 성으로 프로필을 검색합니다.

    Find a profile by exact first and last name.
    """
    return await profile_service.get_profile_by_name(db, fname, lname)


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProfileResponse:
    """프로필을 조회합니다.

    Retrieve a profile by ID.
    """
    return await profile_service.get_profile(db, profile_id)


@router.post("", response_model=ProfileResponse, status_code=201)
async def create_profile(
    data: ProfileCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProfileResponse:
    """새 프로필을 생성합니다.

    Create a new profile, optionally tagging technologies.
    """
    result: ProfileResponse = await profile_service.create_profile(db, data)
    await db.commit()
    return result


@router.put("/{profile_id}", response_model=ProfileResponse)
@router.patch("/{profile_id}", response_model=ProfileResponse)
async def update_profile(
    profile_id: int,
    data: ProfileUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProfileResponse:
    """프로필을 부분 수정합니다 (PUT/PATCH 동일).

    Partially update a profile; PUT and PATCH behave the same.
    """
    result: ProfileResponse = await profile_service.update_profile(db, profile_id, data)
    await db.commit()
    return result


@router.delete("/{profile_id}", status_code=204)
async def delete_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    """프로필과 소유한 모든 레코드를 삭제합니다.

    Delete a profile and everything it owns.
    """
    await profile_service.delete_profile(db, profile_id)
    await db.commit()
