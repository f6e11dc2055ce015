"""인증 서비스 — 관리자 로그인 및 현재 관리자 조회.

Auth Service — Business logic for admin login and current-admin lookup.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.admin import Admin
from app.repositories.admin_repository import admin_repository
from app.schemas.admin import AdminResponse, LoginRequest, TokenResponse
from app.utils.exceptions import DuplicateError, UnauthorizedError
from app.utils.jwt import create_access_token
from app.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling admin authentication.
    """

    def _build_jwt_payload(self, admin: Admin) -> dict[str, str]:
        return {
            "sub": str(admin.id),
            "username": admin.username,
            "role": admin.role,
        }

    def to_admin_response(self, admin: Admin) -> AdminResponse:
        return AdminResponse(
            id=admin.id,
            username=admin.username,
            email=admin.email,
            name=admin.name,
            role=admin.role,
            enabled=admin.enabled,
            last_login=admin.last_login,
        )

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """관리자 로그인을 처리합니다.

        Authenticate an admin and issue an access token.
        Records the login time on success.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 (Login credentials)

        Returns:
            TokenResponse: 액세스 토큰 응답 (Access token response)

        Raises:
            UnauthorizedError: 아이디/비밀번호 불일치 또는 비활성 계정
                               (Bad credentials or disabled account)
        """
        admin: Admin | None = await admin_repository.get_by_username(db, data.username)

        # 아이디 존재 여부를 노출하지 않도록 같은 메시지 사용
        # Same message for unknown user and wrong password
        if admin is None or not verify_password(data.password, admin.password_hash):
            logger.warning("Failed login attempt for username: %s", data.username)
            raise UnauthorizedError("Invalid username or password")

        if not admin.enabled:
            logger.warning("Login rejected for disabled admin: %s", data.username)
            raise UnauthorizedError("Account is disabled")

        await admin_repository.apply_update(db, admin, {"last_login": datetime.now(timezone.utc)})
        logger.info("Admin logged in: %s", admin.username)

        return TokenResponse(
            access_token=create_access_token(self._build_jwt_payload(admin)),
            expires_in=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )

    async def create_admin(
        self,
        db: AsyncSession,
        username: str,
        password: str,
        email: str,
        name: str | None = None,
    ) -> Admin:
        """관리자 계정을 생성합니다 (시드 및 테스트용).

        Create an admin account; used by the seed command.

        Raises:
            DuplicateError: 아이디 또는 이메일 중복 (Username or email already taken)
        """
        if await admin_repository.exists(db, {"username": username}):
            raise DuplicateError("Username already exists")
        if await admin_repository.exists(db, {"email": email}):
            raise DuplicateError("Email already exists")

        admin: Admin = await admin_repository.create(
            db,
            {
                "username": username,
                "email": email,
                "password_hash": hash_password(password),
                "name": name,
            },
        )
        logger.info("Admin account created: %s", username)
        return admin


# 싱글턴 인스턴스 (Singleton instance)
auth_service: AuthService = AuthService()
