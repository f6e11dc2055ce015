"""관리자 FAQ 라우터 — FAQ CRUD 및 프로필별 조회 엔드포인트.

Admin Faq Router — CRUD and profile-scoped listing endpoints for faqs.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.portfolio import FaqCreate, FaqResponse, FaqUpdate
from app.services.faq_service import faq_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[FaqResponse])
async def list_faqs(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[FaqResponse]:
    """FAQ 전체 목록을 조회합니다 (List all faqs)."""
    return await faq_service.list_faqs(db)


@router.get("/profile/{profile_id}", response_model=list[FaqResponse])
async def list_faqs_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[FaqResponse]:
    """프로필의 FAQ 목록을 조회합니다 (List a profile's faqs)."""
    return await faq_service.list_faqs_by_profile(db, profile_id)


@router.get("/{faq_id}", response_model=FaqResponse)
async def get_faq(
    faq_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> FaqResponse:
    return await faq_service.get_faq(db, faq_id)


@router.post("", response_model=FaqResponse, status_code=201)
async def create_faq(
    data: FaqCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> FaqResponse:
    result: FaqResponse = await faq_service.create_faq(db, data)
    await db.commit()
    return result


@router.put("/{faq_id}", response_model=FaqResponse)
@router.patch("/{faq_id}", response_model=FaqResponse)
async def update_faq(
    faq_id: int,
    data: FaqUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> FaqResponse:
    """FAQ를 부분 수정합니다 (PUT/PATCH 동일).

    Partially update; null fields are left untouched.
    """
    result: FaqResponse = await faq_service.update_faq(db, faq_id, data)
    await db.commit()
    return result


@router.delete("/{faq_id}", status_code=204)
async def delete_faq(
    faq_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await faq_service.delete_faq(db, faq_id)
    await db.commit()
