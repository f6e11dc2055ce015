"""프로필 Pydantic 스키마.

Profile request/response schemas.
"""

from pydantic import BaseModel, Field

from app.models.enums import Sex


class ProfileCreate(BaseModel):
    """프로필 생성 요청 스키마.

    Profile creation request.
    technology_ids가 주어지면 해당 기술이 프로필에 태그됩니다
    (Listed technologies are tagged onto the new profile).
    """

    fname: str = Field(..., min_length=1, max_length=255, pattern=r"\S")
    lname: str = Field(..., min_length=1, max_length=255, pattern=r"\S")
    sex: Sex | None = None
    bio: str | None = None
    banner: str | None = Field(None, max_length=512)
    intro: str | None = None
    contour: str | None = None
    url: str | None = Field(None, max_length=512)
    technology_ids: list[int] = []


class ProfileUpdate(BaseModel):
    """프로필 수정 요청 — null 필드는 무시 (Null fields are left untouched).

    technology_ids가 null이 아니면 태그 집합을 통째로 교체합니다
    (A non-null technology_ids replaces the whole tag set; [] clears it).
    """

    fname: str | None = Field(None, min_length=1, max_length=255, pattern=r"\S")
    lname: str | None = Field(None, min_length=1, max_length=255, pattern=r"\S")
    sex: Sex | None = None
    bio: str | None = None
    banner: str | None = Field(None, max_length=512)
    intro: str | None = None
    contour: str | None = None
    url: str | None = Field(None, max_length=512)
    technology_ids: list[int] | None = None


class ProfileResponse(BaseModel):
    id: int
    fname: str
    lname: str
    sex: Sex | None
    bio: str | None
    banner: str | None
    intro: str | None
    contour: str | None
    url: str | None
