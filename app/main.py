"""FastAPI 애플리케이션 엔트리포인트 — 로깅, 미들웨어, 예외 핸들러, 라우터 등록.

FastAPI application entry point — Logging, middleware, exception handler,
and router registration.
"""

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.middleware.request_logging import RequestLoggingMiddleware
from app.utils.error_handlers import register_exception_handlers

# 루트 로거 설정: 표준 출력으로 한 번만 구성 (Configure the root logger once, to stdout)
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
    openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
)

# 요청 로깅 미들웨어: 표준 로거 + Axiom (Request logging to stdout and Axiom)
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(RequestLoggingMiddleware)

# CORS 미들웨어 (Cross-Origin Resource Sharing middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 통일된 에러 응답 본문 (Uniform error body for every failure)
register_exception_handlers(app)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 (Router registration)
# ---------------------------------------------------------------------------
# admin_router: JWT와 ADMIN 역할이 필요한 관리자 CRUD (Admin CRUD behind JWT and the ADMIN role)
# public_router: 읽기 전용 포트폴리오 + 문의 접수 (Read-only portfolio and inquiry submission)
from app.api.admin import admin_router  # noqa: E402
from app.api.public import public_router  # noqa: E402

app.include_router(admin_router, prefix="/api/v1/admin")
# 공개 라우터는 하위 라우터별로 /api/v1 접두어를 가짐 (Sub-routers carry /api/v1 themselves)
app.include_router(public_router)

logger.info("%s started (docs enabled: %s)", settings.APP_NAME, settings.DOCS_ENABLED)
