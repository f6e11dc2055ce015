"""관리자 기술 라우터 — 기술 CRUD, 이름/분류/프로필별 조회.

Admin Technology Router — CRUD plus name, category, and profile lookups.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.technology import TechnologyCreate, TechnologyResponse, TechnologyUpdate
from app.services.technology_service import technology_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[TechnologyResponse])
async def list_technologies(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[TechnologyResponse]:
    return await technology_service.list_technologies(db)


@router.get("/search", response_model=TechnologyResponse)
async def search_technology(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
    name: Annotated[str, Query(min_length=1)],
) -> TechnologyResponse:
    """이름으로 기술을 검색합니다 (Find a technology by exact name)."""
    return await technology_service.get_technology_by_name(db, name)


@router.get("/category/{category}", response_model=list[TechnologyResponse])
async def list_technologies_by_category(
    category: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[TechnologyResponse]:
    """분류별 기술 목록, 이름순 (Technologies of a category by name)."""
    return await technology_service.list_technologies_by_category(db, category)


@router.get("/profile/{profile_id}", response_model=list[TechnologyResponse])
async def list_technologies_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[TechnologyResponse]:
    return await technology_service.list_technologies_by_profile(db, profile_id)


@router.get("/{technology_id}", response_model=TechnologyResponse)
async def get_technology(
    technology_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> TechnologyResponse:
    return await technology_service.get_technology(db, technology_id)


@router.post("", response_model=TechnologyResponse, status_code=201)
async def create_technology(
    data: TechnologyCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> TechnologyResponse:
    result: TechnologyResponse = await technology_service.create_technology(db, data)
    await db.commit()
    return result


@router.put("/{technology_id}", response_model=TechnologyResponse)
@router.patch("/{technology_id}", response_model=TechnologyResponse)
async def update_technology(
    technology_id: int,
    data: TechnologyUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> TechnologyResponse:
    result: TechnologyResponse = await technology_service.update_technology(db, technology_id, data)
    await db.commit()
    return result


@router.delete("/{technology_id}", status_code=204)
async def delete_technology(
    technology_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    """기술을 삭제합니다 — 태그된 레코드는 유지.

    Delete a technology; tagged profiles, experiences and projects remain.
    """
    await technology_service.delete_technology(db, technology_id)
    await db.commit()
