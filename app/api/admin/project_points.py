"""관리자 프로젝트 세부 항목 라우터 — ProjectPoint CRUD 엔드포인트.

Admin Project Point Router — CRUD endpoints for individual project points.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.project import ProjectPointCreate, ProjectPointResponse, ProjectPointUpdate
from app.services.project_point_service import project_point_service

router: APIRouter = APIRouter()


@router.get("/project/{project_id}", response_model=list[ProjectPointResponse])
async def list_points_by_project(
    project_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ProjectPointResponse]:
    """프로젝트의 세부 항목을 삽입 순서대로 조회합니다.

    List the points of a project in insertion order.
    """
    return await project_point_service.list_points_by_project(db, project_id)


@router.get("/{point_id}", response_model=ProjectPointResponse)
async def get_point(
    point_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProjectPointResponse:
    return await project_point_service.get_point(db, point_id)


@router.post("", response_model=ProjectPointResponse, status_code=201)
async def create_point(
    data: ProjectPointCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProjectPointResponse:
    result: ProjectPointResponse = await project_point_service.create_point(db, data)
    await db.commit()
    return result


@router.put("/{point_id}", response_model=ProjectPointResponse)
@router.patch("/{point_id}", response_model=ProjectPointResponse)
async def update_point(
    point_id: int,
    data: ProjectPointUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProjectPointResponse:
    result: ProjectPointResponse = await project_point_service.update_point(db, point_id, data)
    await db.commit()
    return result


@router.delete("/{point_id}", status_code=204)
async def delete_point(
    point_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await project_point_service.delete_point(db, point_id)
    await db.commit()
