"""관리자 인증 Pydantic 요청/응답 스키마 정의.

Admin authentication request/response schemas.
Covers login, token issuance, and current admin info.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """관리자 로그인 요청 스키마.

    Admin login request schema.

    Attributes:
        username: 로그인 아이디 (Login identifier)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
    """

    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)  # 평문, 서버에서 bcrypt 해시와 비교 (Plain text, compared to bcrypt hash)


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Attributes:
        access_token: JWT 액세스 토큰 (Access token)
        token_type: 토큰 유형 (Always "bearer" for Authorization header)
        expires_in: 만료까지 남은 초 (Seconds until expiry)
    """

    access_token: str
    token_type: str = "bearer"
    expires_in: int


class AdminResponse(BaseModel):
    id: int
    username: str
    email: str
    name: str | None
    role: str
    enabled: bool
    last_login: datetime | None
