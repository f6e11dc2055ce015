"""API 안내 라우터 — Welcome endpoint for the public API root."""

from fastapi import APIRouter

from app.config import settings
from app.schemas.common import WelcomeResponse

router: APIRouter = APIRouter()


@router.get("", response_model=WelcomeResponse)
async def welcome() -> WelcomeResponse:
    """API 안내 정보를 반환합니다.

    Return the API welcome payload.
    """
    return WelcomeResponse(
        message=f"Welcome to {settings.APP_NAME}",
        version="v1",
        status="active",
        documentation="/docs" if settings.DOCS_ENABLED else "disabled",
    )
