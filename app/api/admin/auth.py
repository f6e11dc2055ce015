"""관리자 인증 라우터 — 로그인 및 현재 관리자 조회.

Admin Auth Router — Admin login and current-admin endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.admin import AdminResponse, LoginRequest, TokenResponse
from app.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def admin_login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """관리자 로그인 — 비활성 계정은 거부.

    Admin login endpoint. Records last_login on success.
    """
    result: TokenResponse = await auth_service.login(db, data)
    await db.commit()
    return result


@router.get("/me", response_model=AdminResponse)
async def get_me(
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> AdminResponse:
    """현재 로그인한 관리자 정보 (Current admin profile)."""
    return auth_service.to_admin_response(current_admin)
