"""관리자 문의 라우터 — 방문자 문의 조회/등록/삭제.

Admin Inquiry Router — Read, create, and delete visitor inquiries.
Inquiries are immutable: there is no update endpoint.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.portfolio import InquiryCreate, InquiryResponse
from app.services.inquiry_service import inquiry_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[InquiryResponse])
async def list_inquiries(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[InquiryResponse]:
    return await inquiry_service.list_inquiries(db)


@router.get("/profile/{profile_id}", response_model=list[InquiryResponse])
async def list_inquiries_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[InquiryResponse]:
    return await inquiry_service.list_inquiries_by_profile(db, profile_id)


@router.get("/{inquiry_id}", response_model=InquiryResponse)
async def get_inquiry(
    inquiry_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> InquiryResponse:
    return await inquiry_service.get_inquiry(db, inquiry_id)


@router.post("", response_model=InquiryResponse, status_code=201)
async def create_inquiry(
    data: InquiryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> InquiryResponse:
    result: InquiryResponse = await inquiry_service.create_inquiry(db, data)
    await db.commit()
    return result


@router.delete("/{inquiry_id}", status_code=204)
async def delete_inquiry(
    inquiry_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await inquiry_service.delete_inquiry(db, inquiry_id)
    await db.commit()
