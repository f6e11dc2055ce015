"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    enums: 성별, 숙련도 열거형 (Sex and Proficiency enums)
    admin: 관리자 계정 (Administrator accounts)
    profile: 프로필 (Profile root aggregate)
    technology: 기술 및 다대다 연결 테이블 (Technology and association tables)
    experience: 경력 및 세부 항목 (Experience and points)
    project: 프로젝트 및 세부 항목 (Project and points)
    portfolio: 주소, 학력, 연락처, 수상, FAQ, 문의 (Profile-owned detail records)
"""

from app.models.enums import Proficiency, Sex
from app.models.admin import Admin
from app.models.technology import (
    Technology,
    experiences_technologies,
    profiles_technologies,
    projects_technologies,
)
from app.models.profile import Profile
from app.models.experience import Experience, ExperiencePoint
from app.models.project import Project, ProjectPoint
from app.models.portfolio import Achievement, Address, Contact, Education, Faq, Inquiry

__all__ = [
    "Sex",
    "Proficiency",
    "Admin",
    "Technology",
    "profiles_technologies",
    "experiences_technologies",
    "projects_technologies",
    "Profile",
    "Experience",
    "ExperiencePoint",
    "Project",
    "ProjectPoint",
    "Address",
    "Education",
    "Contact",
    "Achievement",
    "Faq",
    "Inquiry",
]
