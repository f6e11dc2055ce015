"""관리자 경력 라우터 — 경력 CRUD 및 프로필별 조회 엔드포인트.

Admin Experience Router — CRUD and profile-scoped listing endpoints for experiences.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.experience import ExperienceCreate, ExperienceResponse, ExperienceUpdate
from app.services.experience_service import experience_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ExperienceResponse])
async def list_experiences(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ExperienceResponse]:
    """경력 전체 목록을 조회합니다 (List all experiences)."""
    return await experience_service.list_experiences(db)


@router.get("/profile/{profile_id}", response_model=list[ExperienceResponse])
async def list_experiences_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ExperienceResponse]:
    """프로필의 경력 목록을 조회합니다 (List a profile's experiences)."""
    return await experience_service.list_experiences_by_profile(db, profile_id)


@router.get("/{experience_id}", response_model=ExperienceResponse)
async def get_experience(
    experience_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ExperienceResponse:
    return await experience_service.get_experience(db, experience_id)


@router.post("", response_model=ExperienceResponse, status_code=201)
async def create_experience(
    data: ExperienceCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ExperienceResponse:
    """경력을 세부 항목, 기술 태그와 함께 생성합니다.

    Create an experience together with its points and technology tags.
    """
    result: ExperienceResponse = await experience_service.create_experience(db, data)
    await db.commit()
    return result


@router.put("/{experience_id}", response_model=ExperienceResponse)
@router.patch("/{experience_id}", response_model=ExperienceResponse)
async def update_experience(
    experience_id: int,
    data: ExperienceUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ExperienceResponse:
    """경력을 부분 수정합니다 (PUT/PATCH 동일).

    Partially update; null fields are left untouched.
    """
    result: ExperienceResponse = await experience_service.update_experience(db, experience_id, data)
    await db.commit()
    return result


@router.delete("/{experience_id}", status_code=204)
async def delete_experience(
    experience_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await experience_service.delete_experience(db, experience_id)
    await db.commit()
