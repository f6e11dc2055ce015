"""관리자 수상 라우터 — 수상 CRUD 및 프로필별 조회 엔드포인트.

Admin Achievement Router — CRUD and profile-scoped listing endpoints for achievements.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.portfolio import AchievementCreate, AchievementResponse, AchievementUpdate
from app.services.achievement_service import achievement_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[AchievementResponse])
async def list_achievements(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[AchievementResponse]:
    """수상 전체 목록을 조회합니다 (List all achievements)."""
    return await achievement_service.list_achievements(db)


@router.get("/profile/{profile_id}", response_model=list[AchievementResponse])
async def list_achievements_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[AchievementResponse]:
    """프로필의 수상 목록을 조회합니다 (List a profile's achievements)."""
    return await achievement_service.list_achievements_by_profile(db, profile_id)


@router.get("/{achievement_id}", response_model=AchievementResponse)
async def get_achievement(
    achievement_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> AchievementResponse:
    return await achievement_service.get_achievement(db, achievement_id)


@router.post("", response_model=AchievementResponse, status_code=201)
async def create_achievement(
    data: AchievementCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> AchievementResponse:
    result: AchievementResponse = await achievement_service.create_achievement(db, data)
    await db.commit()
    return result


@router.put("/{achievement_id}", response_model=AchievementResponse)
@router.patch("/{achievement_id}", response_model=AchievementResponse)
async def update_achievement(
    achievement_id: int,
    data: AchievementUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> AchievementResponse:
    """수상 정보를 부분 수정합니다 (PUT/PATCH 동일).

    Partially update; null fields are left untouched.
    """
    result: AchievementResponse = await achievement_service.update_achievement(db, achievement_id, data)
    await db.commit()
    return result


@router.delete("/{achievement_id}", status_code=204)
async def delete_achievement(
    achievement_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await achievement_service.delete_achievement(db, achievement_id)
    await db.commit()
