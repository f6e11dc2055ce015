"""프로필 SQLAlchemy ORM 모델 정의.

Profile model — the root aggregate of the portfolio.
Every address, education, contact, achievement, inquiry, experience,
and project row belongs to exactly one profile and is removed with it.

Tables:
    - profiles: 포트폴리오 소유자 (Portfolio owners)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.enums import Sex, value_enum
from app.models.technology import profiles_technologies


class Profile(Base):
    """프로필 모델 — 포트폴리오 소유자 정보.

    Profile model — Portfolio owner information.

    Attributes:
        fname: 이름 (First name, required)
        lname: 성 (Last name, required)
        sex: 성별 (Sex enum)
        bio: 자기소개 (Long biography)
        banner: 배너 이미지 URL (Banner image URL)
        intro: 한 줄 소개 (Short introduction)
        contour: 요약 문구 (Outline / summary text)
        url: 개인 사이트 URL (Personal site URL)

    Relationships:
        technologies: 태그된 기술 (Tagged technologies, eager-loaded)
        addresses, educations, contacts, achievements, inquiries,
        experiences, projects: 소유한 하위 레코드 (Owned child records)
    """

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fname: Mapped[str] = mapped_column(String(255), nullable=False)
    lname: Mapped[str] = mapped_column(String(255), nullable=False)
    sex: Mapped[Sex | None] = mapped_column(value_enum(Sex, 64), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    banner: Mapped[str | None] = mapped_column(String(512), nullable=True)
    intro: Mapped[str | None] = mapped_column(Text, nullable=True)
    contour: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 태그 컬렉션은 항상 즉시 로드 (교체 시 기존 집합이 필요함)
    # Always selectin-loaded; replacing the set needs the current members
    technologies = relationship(
        "Technology",
        secondary=profiles_technologies,
        back_populates="profiles",
        lazy="selectin",
    )

    # 하위 레코드: FK의 ON DELETE CASCADE로 함께 삭제 (Removed via ON DELETE CASCADE)
    addresses = relationship("Address", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    educations = relationship("Education", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    contacts = relationship("Contact", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    achievements = relationship("Achievement", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    faqs = relationship("Faq", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    inquiries = relationship("Inquiry", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    experiences = relationship("Experience", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    projects = relationship("Project", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
