"""관리자 학력 라우터 — 학력 CRUD 및 프로필별 조회 엔드포인트.

Admin Education Router — CRUD and profile-scoped listing endpoints for educations.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.portfolio import EducationCreate, EducationResponse, EducationUpdate
from app.services.education_service import education_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[EducationResponse])
async def list_educations(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[EducationResponse]:
    """학력 전체 목록을 조회합니다 (List all educations)."""
    return await education_service.list_educations(db)


@router.get("/profile/{profile_id}", response_model=list[EducationResponse])
async def list_educations_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[EducationResponse]:
    """프로필의 학력 목록을 조회합니다 (List a profile's educations)."""
    return await education_service.list_educations_by_profile(db, profile_id)


@router.get("/{education_id}", response_model=EducationResponse)
async def get_education(
    education_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> EducationResponse:
    return await education_service.get_education(db, education_id)


@router.post("", response_model=EducationResponse, status_code=201)
async def create_education(
    data: EducationCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> EducationResponse:
    result: EducationResponse = await education_service.create_education(db, data)
    await db.commit()
    return result


@router.put("/{education_id}", response_model=EducationResponse)
@router.patch("/{education_id}", response_model=EducationResponse)
async def update_education(
    education_id: int,
    data: EducationUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> EducationResponse:
    """학력을 부분 수정합니다 (PUT/PATCH 동일).

    Partially update; null fields are left untouched.
    """
    result: EducationResponse = await education_service.update_education(db, education_id, data)
    await db.commit()
    return result


@router.delete("/{education_id}", status_code=204)
async def delete_education(
    education_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await education_service.delete_education(db, education_id)
    await db.commit()
