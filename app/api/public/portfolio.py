"""공개 포트폴리오 라우터 — 프로필별 상세 목록 엔드포인트.

Public Portfolio Router — Profile-scoped listings of every detail record.
Unknown profiles yield empty lists rather than 404.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.experience import ExperienceResponse
from app.schemas.portfolio import (
    AchievementResponse,
    AddressResponse,
    ContactResponse,
    EducationResponse,
    FaqResponse,
)
from app.schemas.project import ProjectResponse
from app.schemas.technology import TechnologyResponse
from app.services.achievement_service import achievement_service
from app.services.address_service import address_service
from app.services.contact_service import contact_service
from app.services.education_service import education_service
from app.services.experience_service import experience_service
from app.services.faq_service import faq_service
from app.services.project_service import project_service
from app.services.technology_service import technology_service

router: APIRouter = APIRouter()


@router.get("/addresses/profile/{profile_id}", response_model=list[AddressResponse], tags=["Public Addresses"])
async def list_addresses(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[AddressResponse]:
    return await address_service.list_addresses_by_profile(db, profile_id)


@router.get("/achievements/profile/{profile_id}", response_model=list[AchievementResponse], tags=["Public Achievements"])
async def list_achievements(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[AchievementResponse]:
    """수상 목록, 취득일 역순 (Achievements, most recent first)."""
    return await achievement_service.list_achievements_by_profile(db, profile_id)


@router.get("/contacts/profile/{profile_id}", response_model=list[ContactResponse], tags=["Public Contacts"])
async def list_contacts(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ContactResponse]:
    return await contact_service.list_contacts_by_profile(db, profile_id)


@router.get("/educations/profile/{profile_id}", response_model=list[EducationResponse], tags=["Public Educations"])
async def list_educations(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[EducationResponse]:
    return await education_service.list_educations_by_profile(db, profile_id)


@router.get("/experiences/profile/{profile_id}", response_model=list[ExperienceResponse], tags=["Public Experiences"])
async def list_experiences(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ExperienceResponse]:
    """경력 목록, 세부 항목/기술 포함 (Experiences with points and technologies)."""
    return await experience_service.list_experiences_by_profile(db, profile_id)


@router.get("/faqs/profile/{profile_id}", response_model=list[FaqResponse], tags=["Public FAQs"])
async def list_faqs(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[FaqResponse]:
    return await faq_service.list_faqs_by_profile(db, profile_id)


@router.get("/projects/profile/{profile_id}", response_model=list[ProjectResponse], tags=["Public Projects"])
async def list_projects(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ProjectResponse]:
    return await project_service.list_projects_by_profile(db, profile_id)


@router.get("/technologies/profile/{profile_id}", response_model=list[TechnologyResponse], tags=["Public Technologies"])
async def list_technologies(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TechnologyResponse]:
    """프로필 기술, 분류/이름순 (Technologies by category, then name)."""
    return await technology_service.list_technologies_by_profile(db, profile_id)
