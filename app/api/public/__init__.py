"""공개 API 라우터 패키지 — 포트폴리오 방문자용 엔드포인트 통합.

Public API Router package — Aggregates the unauthenticated, read-only
portfolio endpoints (plus inquiry submission) under /api/v1.
Every route shares the "public" rate-limit bucket.

Included routers:
    - welcome: API 안내 (GET /api/v1)
    - profiles: 프로필 조회 (GET /profiles/{id})
    - portfolio: 프로필별 상세 목록 (GET /{entity}/profile/{profile_id})
    - inquiries: 문의 접수 (POST /inquiries, alias /inquires)
"""

from fastapi import APIRouter, Depends

from app.api.deps import public_rate_limit
from app.api.public.inquiries import router as inquiries_router
from app.api.public.portfolio import router as portfolio_router
from app.api.public.profiles import router as profiles_router
from app.api.public.welcome import router as welcome_router
from app.schemas.common import ErrorResponse

API_PREFIX: str = "/api/v1"

PUBLIC_ERROR_RESPONSES: dict = {
    code: {"model": ErrorResponse} for code in (400, 404, 429)
}

public_router: APIRouter = APIRouter(
    dependencies=[Depends(public_rate_limit)],
    responses=PUBLIC_ERROR_RESPONSES,
)

# 각 하위 라우터가 /api/v1 접두어를 직접 가짐 (GET /api/v1 경로는 빈 path라 접두어가 필요)
# Sub-routers carry the /api/v1 prefix so the welcome route can use an empty path
public_router.include_router(welcome_router, prefix=API_PREFIX, tags=["Welcome"])
public_router.include_router(profiles_router, prefix=f"{API_PREFIX}/profiles", tags=["Public Profiles"])
public_router.include_router(portfolio_router, prefix=API_PREFIX)
public_router.include_router(inquiries_router, prefix=f"{API_PREFIX}/inquiries", tags=["Public Inquiries"])

# 원래 철자 경로, 스키마에는 미노출 (Original "inquires" path, hidden from the schema)
public_router.include_router(inquiries_router, prefix=f"{API_PREFIX}/inquires", include_in_schema=False)
