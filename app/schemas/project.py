"""프로젝트 및 프로젝트 세부 항목 Pydantic 스키마.

Project and ProjectPoint request/response schemas.
"""

from datetime import date

from pydantic import BaseModel, Field

from app.schemas.common import PointSummary, TechnologySummary


class ProjectCreate(BaseModel):
    """프로젝트 생성 요청 스키마.

    Project creation request.

    Attributes:
        profile_id: 소유 프로필 ID (Owning profile, must exist)
        project_points: 함께 생성할 세부 항목 내용 (Point contents created with the project)
        technology_ids: 태그할 기술 ID (Technologies to tag)
    """

    profile_id: int
    name: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    url: str | None = Field(None, max_length=512)
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)
    project_points: list[str] = []
    technology_ids: list[int] = []


class ProjectUpdate(BaseModel):
    profile_id: int | None = None
    name: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    url: str | None = Field(None, max_length=512)
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)
    technology_ids: list[int] | None = None  # null이면 태그 유지 (Tags untouched when null)


class ProjectResponse(BaseModel):
    id: int
    name: str | None
    start_date: date | None
    end_date: date | None
    url: str | None
    banner: str | None
    github: str | None
    technologies: list[TechnologySummary]
    project_points: list[PointSummary]


class ProjectPointCreate(BaseModel):
    project_id: int
    content: str = Field(..., min_length=1, pattern=r"\S")


class ProjectPointUpdate(BaseModel):
    project_id: int | None = None
    content: str | None = Field(None, min_length=1, pattern=r"\S")


class ProjectPointResponse(BaseModel):
    id: int
    project_id: int
    content: str
