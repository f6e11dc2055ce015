"""기술 Pydantic 스키마.

Technology request/response schemas.
"""

from pydantic import BaseModel, Field

from app.models.enums import Proficiency


class TechnologyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, pattern=r"\S")
    category: str | None = Field(None, max_length=255)
    type: str | None = Field(None, max_length=16)
    proficiency: Proficiency | None = None
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)


class TechnologyUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255, pattern=r"\S")
    category: str | None = Field(None, max_length=255)
    type: str | None = Field(None, max_length=16)
    proficiency: Proficiency | None = None
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)


class TechnologyResponse(BaseModel):
    id: int
    name: str
    category: str | None
    type: str | None
    proficiency: Proficiency | None
    banner: str | None
    github: str | None
