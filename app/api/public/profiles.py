"""공개 프로필 라우터 — 포트폴리오 방문자용 읽기 전용 엔드포인트.

Public Profile Router — Read-only endpoints for portfolio visitors.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.profile import ProfileResponse
from app.services.profile_service import profile_service

router: APIRouter = APIRouter()


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProfileResponse:
    """프로필을 조회합니다 (Retrieve a profile)."""
    return await profile_service.get_profile(db, profile_id)
