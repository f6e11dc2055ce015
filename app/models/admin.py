"""관리자 계정 SQLAlchemy ORM 모델 정의.

Administrator account model.

Tables:
    - admins: 관리 API 로그인 계정 (Accounts allowed to use the admin API)
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Admin(Base):
    """관리자 모델 — 관리 API 인증 주체.

    Admin model — Principal authenticated by the admin API.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        username: 로그인 아이디, 전역 고유 (Login username, globally unique)
        email: 이메일, 전역 고유 (Email, globally unique)
        password_hash: bcrypt 해시 (Bcrypt password hash)
        enabled: 활성 여부 (Disabled accounts cannot log in)
        name: 표시 이름 (Display name)
        role: 권한 역할 (Authorization role, "ADMIN")
        last_login: 마지막 로그인 일시 (Last successful login, UTC)
    """

    __tablename__ = "admins"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시: 평문은 절대 저장하지 않음 (Never plain text)
    password_hash: Mapped[str] = mapped_column(String(512), nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(32), default="ADMIN", nullable=False)
    last_login: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
