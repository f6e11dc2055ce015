"""경력 및 경력 항목 SQLAlchemy ORM 모델 정의.

Experience and ExperiencePoint models.

Tables:
    - experiences: 경력 (Work experience entries owned by a profile)
    - experience_points: 경력 세부 항목 (Bullet points owned by an experience)
"""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.technology import experiences_technologies


class Experience(Base):
    """경력 모델 — 회사/직책/기간 정보.

    Experience model — Company, position, and period of a role.

    Relationships:
        profile: 소유 프로필 (Owning profile)
        technologies: 사용 기술 (Tagged technologies, eager-loaded)
        experience_points: 세부 항목, 삽입 순서 (Bullet points, insertion order)
    """

    __tablename__ = "experiences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    banner: Mapped[str | None] = mapped_column(String(512), nullable=True)
    github: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    profile = relationship("Profile", back_populates="experiences")
    technologies = relationship(
        "Technology",
        secondary=experiences_technologies,
        back_populates="experiences",
        lazy="selectin",
    )
    experience_points = relationship(
        "ExperiencePoint",
        back_populates="experience",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="ExperiencePoint.id",
    )


class ExperiencePoint(Base):
    """경력 세부 항목 모델 — 경력 삭제 시 함께 삭제.

    Experience bullet point; deleted together with its experience.
    """

    __tablename__ = "experience_points"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    experience_id: Mapped[int] = mapped_column(Integer, ForeignKey("experiences.id", ondelete="CASCADE"), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    experience = relationship("Experience", back_populates="experience_points")
