"""관리자 경력 세부 항목 라우터 — ExperiencePoint CRUD 엔드포인트.

Admin Experience Point Router — CRUD endpoints for individual experience points.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.experience import ExperiencePointCreate, ExperiencePointResponse, ExperiencePointUpdate
from app.services.experience_point_service import experience_point_service

router: APIRouter = APIRouter()


@router.get("/experience/{experience_id}", response_model=list[ExperiencePointResponse])
async def list_points_by_experience(
    experience_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ExperiencePointResponse]:
    """경력의 세부 항목을 삽입 순서대로 조회합니다.

    List the points of an experience in insertion order.
    """
    return await experience_point_service.list_points_by_experience(db, experience_id)


@router.get("/{point_id}", response_model=ExperiencePointResponse)
async def get_point(
    point_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ExperiencePointResponse:
    return await experience_point_service.get_point(db, point_id)


@router.post("", response_model=ExperiencePointResponse, status_code=201)
async def create_point(
    data: ExperiencePointCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ExperiencePointResponse:
    result: ExperiencePointResponse = await experience_point_service.create_point(db, data)
    await db.commit()
    return result


@router.put("/{point_id}", response_model=ExperiencePointResponse)
@router.patch("/{point_id}", response_model=ExperiencePointResponse)
async def update_point(
    point_id: int,
    data: ExperiencePointUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ExperiencePointResponse:
    result: ExperiencePointResponse = await experience_point_service.update_point(db, point_id, data)
    await db.commit()
    return result


@router.delete("/{point_id}", status_code=204)
async def delete_point(
    point_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await experience_point_service.delete_point(db, point_id)
    await db.commit()
