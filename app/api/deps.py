"""FastAPI 의존성 주입 모듈 — 인증, 권한 검사, 요청 제한.

FastAPI dependency injection module — Authentication, authorization,
and rate limiting.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 페이로드의 "sub" 필드로 DB에서 관리자를 조회
       (Admin is fetched from DB using payload "sub" field)
    5. 관리자 활성 상태를 확인 (Admin enabled flag is verified)

Authorization Flow (require_role):
    1. get_current_admin으로 인증 (Authenticated via get_current_admin)
    2. 관리자의 role이 허용 목록에 없으면 403 Forbidden
       (Returns 403 when the admin's role is not allowed)

Rate Limiting (rate_limit):
    라우터 단위로 버킷("public", "admin")을 지정하고, 클라이언트 호스트별로
    창당 요청 수를 제한합니다. 초과 시 429와 Retry-After 헤더를 반환합니다.
    (Each router picks a bucket; hits are counted per client host and
    window. Exceeding the quota yields 429 with Retry-After.)
"""

from typing import Annotated, Awaitable, Callable

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.models.admin import Admin
from app.repositories.admin_repository import admin_repository
from app.utils.exceptions import ForbiddenError, TooManyRequestsError, UnauthorizedError
from app.utils.jwt import decode_token
from app.utils.rate_limit import rate_limiter

# HTTP Bearer 토큰 추출기 (Authorization 헤더에서 JWT 토큰 추출)
# (Extracts JWT token from Authorization: Bearer <token> header)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Admin:
    """JWT 토큰에서 현재 인증된 관리자를 추출합니다.

    Decode JWT from the Authorization header and return the authenticated admin.
    Validates token signature, expiration, type, and admin existence/enabled status.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials from header)
        db: 비동기 DB 세션 (Async database session)

    Returns:
        Admin: 인증된 관리자 ORM 인스턴스 (Authenticated admin ORM instance)

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨 (Invalid or expired token)
        UnauthorizedError: 관리자를 찾을 수 없거나 비활성 (Admin not found or disabled)
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload: dict = decode_token(credentials.credentials)
    except jwt.InvalidTokenError:
        # ExpiredSignatureError는 InvalidTokenError의 하위 클래스
        raise UnauthorizedError("Invalid or expired token")

    # 토큰 타입 검증 (Only access tokens are accepted)
    if payload.get("type") != "access":
        raise UnauthorizedError("Invalid token type")

    try:
        admin_id: int = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise UnauthorizedError("Invalid token")

    admin: Admin | None = await admin_repository.get_by_id(db, admin_id)
    if admin is None or not admin.enabled:
        raise UnauthorizedError("Admin not found or disabled")

    return admin


def require_role(*roles: str) -> Callable[..., Awaitable[Admin]]:
    """역할 기반 권한 검사 의존성 팩토리.

    Dependency factory enforcing that the authenticated admin holds one
    of the given roles.

    Args:
        roles: 허용되는 역할 이름 (Allowed role names)

    Returns:
        FastAPI 의존성 함수 — 인증된 관리자 반환 또는 403 발생
        (FastAPI dependency function that returns Admin or raises 403)
    """
    async def _check(
        current_admin: Annotated[Admin, Depends(get_current_admin)],
    ) -> Admin:
        if current_admin.role not in roles:
            raise ForbiddenError("Insufficient permissions")
        return current_admin
    return _check


# 편의 의존성: ADMIN 역할 전용 (ADMIN role only)
require_admin = require_role("ADMIN")


def rate_limit(bucket: str) -> Callable[[Request], Awaitable[None]]:
    """버킷별 요청 제한 의존성 팩토리.

    Dependency factory enforcing the request quota of a bucket.
    Quotas are read from settings on every call.

    Args:
        bucket: "public" 또는 "admin" (Quota bucket name)

    Returns:
        FastAPI 의존성 함수 — 한도 초과 시 429 발생
        (FastAPI dependency raising 429 when the quota is exhausted)
    """
    async def _enforce(request: Request) -> None:
        if not settings.RATE_LIMIT_ENABLED:
            return
        max_requests: int = (
            settings.RATE_LIMIT_ADMIN_REQUESTS
            if bucket == "admin"
            else settings.RATE_LIMIT_PUBLIC_REQUESTS
        )
        client_host: str = request.client.host if request.client else "unknown"
        allowed, retry_after = rate_limiter.allow(
            f"{bucket}:{client_host}",
            max_requests,
            settings.RATE_LIMIT_WINDOW_SECONDS,
        )
        if not allowed:
            raise TooManyRequestsError(retry_after)
    return _enforce


# 버킷 의존성 (Bucket dependencies used by the router packages)
public_rate_limit = rate_limit("public")
admin_rate_limit = rate_limit("admin")
