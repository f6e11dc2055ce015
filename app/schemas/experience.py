"""경력 및 경력 세부 항목 Pydantic 스키마.

Experience and ExperiencePoint request/response schemas.
"""

from datetime import date

from pydantic import BaseModel, Field

from app.schemas.common import PointSummary, TechnologySummary


class ExperienceCreate(BaseModel):
    """경력 생성 요청 스키마.

    Experience creation request.

    Attributes:
        profile_id: 소유 프로필 ID (Owning profile, must exist)
        experience_points: 함께 생성할 세부 항목 내용 (Point contents created with the experience)
        technology_ids: 태그할 기술 ID (Technologies to tag)
    """

    profile_id: int
    company: str | None = Field(None, max_length=255)
    position: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    location: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=512)
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)
    experience_points: list[str] = []
    technology_ids: list[int] = []


class ExperienceUpdate(BaseModel):
    profile_id: int | None = None
    company: str | None = Field(None, max_length=255)
    position: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    location: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=512)
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)
    technology_ids: list[int] | None = None  # null이면 태그 유지 (Tags untouched when null)


class ExperienceResponse(BaseModel):
    id: int
    company: str | None
    position: str | None
    start_date: date | None
    end_date: date | None
    location: str | None
    url: str | None
    banner: str | None
    github: str | None
    technologies: list[TechnologySummary]
    experience_points: list[PointSummary]


class ExperiencePointCreate(BaseModel):
    experience_id: int
    content: str = Field(..., min_length=1, pattern=r"\S")


class ExperiencePointUpdate(BaseModel):
    experience_id: int | None = None
    content: str | None = Field(None, min_length=1, pattern=r"\S")


class ExperiencePointResponse(BaseModel):
    id: int
    experience_id: int
    content: str
