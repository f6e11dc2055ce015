"""관리자 프로젝트 라우터 — 프로젝트 CRUD 및 프로필별 조회 엔드포인트.

Admin Project Router — CRUD and profile-scoped listing endpoints for projects.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.admin import Admin
from app.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from app.services.project_service import project_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ProjectResponse]:
    """프로젝트 전체 목록을 조회합니다 (List all projects)."""
    return await project_service.list_projects(db)


@router.get("/profile/{profile_id}", response_model=list[ProjectResponse])
async def list_projects_by_profile(
    profile_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> list[ProjectResponse]:
    """프로필의 프로젝트 목록을 조회합니다 (List a profile's projects)."""
    return await project_service.list_projects_by_profile(db, profile_id)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProjectResponse:
    return await project_service.get_project(db, project_id)


@router.post("", response_model=ProjectResponse, status_code=201)
async def create_project(
    data: ProjectCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProjectResponse:
    """프로젝트를 세부 항목, 기술 태그와 함께 생성합니다.

    Create a project together with its points and technology tags.
    """
    result: ProjectResponse = await project_service.create_project(db, data)
    await db.commit()
    return result


@router.put("/{project_id}", response_model=ProjectResponse)
@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    data: ProjectUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> ProjectResponse:
    """프로젝트를 부분 수정합니다 (PUT/PATCH 동일).

    Partially update; null fields are left untouched.
    """
    result: ProjectResponse = await project_service.update_project(db, project_id, data)
    await db.commit()
    return result


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: Annotated[Admin, Depends(require_admin)],
) -> None:
    await project_service.delete_project(db, project_id)
    await db.commit()
