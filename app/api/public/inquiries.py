"""공개 문의 라우터 — 방문자 문의 접수.

Public Inquiry Router — Visitors submit inquiries without authentication.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.portfolio import InquiryCreate, InquiryResponse
from app.services.inquiry_service import inquiry_service

router: APIRouter = APIRouter()


@router.post("", response_model=InquiryResponse, status_code=201)
async def submit_inquiry(
    data: InquiryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> InquiryResponse:
    """방문자 문의를 접수합니다.

    Submit an inquiry addressed to a profile.
    """
    result: InquiryResponse = await inquiry_service.create_inquiry(db, data)
    await db.commit()
    return result
