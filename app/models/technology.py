"""기술 스택 모델 및 다대다 연결 테이블 정의.

Technology model and the many-to-many association tables that tag
technologies onto profiles, experiences, and projects.

Tables:
    - technologies: 기술 항목 (Technology catalog entries)
    - profiles_technologies: 프로필-기술 연결 (Profile tags)
    - experiences_technologies: 경력-기술 연결 (Experience tags)
    - projects_technologies: 프로젝트-기술 연결 (Project tags)
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.enums import Proficiency, value_enum

# 연결 테이블: 양쪽 FK 모두 CASCADE (Both FKs cascade on delete)
profiles_technologies: Table = Table(
    "profiles_technologies",
    Base.metadata,
    Column("profile_id", Integer, ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("technology_id", Integer, ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True),
)

experiences_technologies: Table = Table(
    "experiences_technologies",
    Base.metadata,
    Column("experience_id", Integer, ForeignKey("experiences.id", ondelete="CASCADE"), primary_key=True),
    Column("technology_id", Integer, ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True),
)

projects_technologies: Table = Table(
    "projects_technologies",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("technology_id", Integer, ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True),
)


class Technology(Base):
    """기술 모델 — 프로필/경력/프로젝트에 태그되는 기술.

    Technology model — A skill or tool tagged onto profiles, experiences
    and projects. Not owned by any profile.

    Attributes:
        name: 기술 이름 (Technology name, required)
        category: 분류 (e.g. "Backend", "Database")
        type: 유형 (Short type label, e.g. "Language")
        proficiency: 숙련도 (Proficiency level)
    """

    __tablename__ = "technologies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    type: Mapped[str | None] = mapped_column(String(16), nullable=True)
    proficiency: Mapped[Proficiency | None] = mapped_column(value_enum(Proficiency, 16), nullable=True)
    banner: Mapped[str | None] = mapped_column(String(512), nullable=True)
    github: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 역방향 관계 (연결 행 정리는 DB의 ON DELETE CASCADE에 위임)
    # Reverse sides; link rows are removed by ON DELETE CASCADE
    profiles = relationship("Profile", secondary=profiles_technologies, back_populates="technologies", passive_deletes=True)
    experiences = relationship("Experience", secondary=experiences_technologies, back_populates="technologies", passive_deletes=True)
    projects = relationship("Project", secondary=projects_technologies, back_populates="technologies", passive_deletes=True)
