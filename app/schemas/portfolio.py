"""프로필 소유 상세 레코드 Pydantic 스키마.

Request/response schemas for profile-owned detail records:
addresses, educations, contacts, achievements, FAQs, and inquiries.
Update schemas make every field optional; null fields are ignored.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

# 간단한 이메일 형식 검사 (local@domain.tld)
_EMAIL_PATTERN: str = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


# === 주소 (Address) 스키마 ===

class AddressCreate(BaseModel):
    profile_id: int
    street: str | None = Field(None, max_length=255)
    landmark: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=64)
    state: str | None = Field(None, max_length=64)
    country: str | None = Field(None, max_length=64)
    pincode: int | None = Field(None, ge=0)
    type: str | None = Field(None, max_length=64)
    phone: str | None = Field(None, max_length=16)
    email: str | None = Field(None, max_length=255, pattern=_EMAIL_PATTERN)
    url: str | None = Field(None, max_length=255)


class AddressUpdate(BaseModel):
    profile_id: int | None = None
    street: str | None = Field(None, max_length=255)
    landmark: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=64)
    state: str | None = Field(None, max_length=64)
    country: str | None = Field(None, max_length=64)
    pincode: int | None = Field(None, ge=0)
    type: str | None = Field(None, max_length=64)
    phone: str | None = Field(None, max_length=16)
    email: str | None = Field(None, max_length=255, pattern=_EMAIL_PATTERN)
    url: str | None = Field(None, max_length=255)


class AddressResponse(BaseModel):
    id: int
    street: str | None
    landmark: str | None
    city: str | None
    state: str | None
    country: str | None
    pincode: int | None
    type: str | None
    phone: str | None
    email: str | None
    url: str | None


# === 학력 (Education) 스키마 ===

class EducationCreate(BaseModel):
    """학력 생성 요청 스키마.

    Education creation request.

    Attributes:
        percentage: 성적 백분율, 0~100 소수점 둘째 자리 (Score, 0-100 with two decimals)
    """

    profile_id: int
    degree: str | None = Field(None, max_length=255)
    institution: str | None = Field(None, max_length=255)
    field: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    percentage: Decimal | None = Field(None, ge=0, le=100, max_digits=5, decimal_places=2)
    description: str | None = None
    url: str | None = Field(None, max_length=512)
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)


class EducationUpdate(BaseModel):
    profile_id: int | None = None
    degree: str | None = Field(None, max_length=255)
    institution: str | None = Field(None, max_length=255)
    field: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    percentage: Decimal | None = Field(None, ge=0, le=100, max_digits=5, decimal_places=2)
    description: str | None = None
    url: str | None = Field(None, max_length=512)
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)


class EducationResponse(BaseModel):
    id: int
    degree: str | None
    institution: str | None
    field: str | None
    start_date: date | None
    end_date: date | None
    percentage: float | None
    description: str | None
    url: str | None
    banner: str | None
    github: str | None


# === 연락처 (Contact) 스키마 ===

class ContactCreate(BaseModel):
    profile_id: int
    platform: str = Field(..., min_length=1, max_length=255, pattern=r"\S")
    url: str | None = Field(None, max_length=512)
    description: str | None = None
    banner: str | None = Field(None, max_length=512)


class ContactUpdate(BaseModel):
    profile_id: int | None = None
    platform: str | None = Field(None, min_length=1, max_length=255, pattern=r"\S")
    url: str | None = Field(None, max_length=512)
    description: str | None = None
    banner: str | None = Field(None, max_length=512)


class ContactResponse(BaseModel):
    id: int
    platform: str
    url: str | None
    description: str | None
    banner: str | None


# === 수상 (Achievement) 스키마 ===

class AchievementCreate(BaseModel):
    profile_id: int
    name: str | None = Field(None, max_length=255)
    date_achieved: date | None = None
    issuer: str | None = Field(None, max_length=255)
    description: str | None = None
    url: str | None = Field(None, max_length=512)
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)


class AchievementUpdate(BaseModel):
    profile_id: int | None = None
    name: str | None = Field(None, max_length=255)
    date_achieved: date | None = None
    issuer: str | None = Field(None, max_length=255)
    description: str | None = None
    url: str | None = Field(None, max_length=512)
    banner: str | None = Field(None, max_length=512)
    github: str | None = Field(None, max_length=512)


class AchievementResponse(BaseModel):
    id: int
    name: str | None
    date_achieved: date | None
    issuer: str | None
    description: str | None
    url: str | None
    banner: str | None
    github: str | None


# === FAQ 스키마 ===

class FaqCreate(BaseModel):
    profile_id: int
    question: str = Field(..., min_length=1, pattern=r"\S")
    answer: str = Field(..., min_length=1, pattern=r"\S")


class FaqUpdate(BaseModel):
    profile_id: int | None = None
    question: str | None = Field(None, min_length=1, pattern=r"\S")
    answer: str | None = Field(None, min_length=1, pattern=r"\S")


class FaqResponse(BaseModel):
    id: int
    question: str
    answer: str


# === 문의 (Inquiry) 스키마 ===

class InquiryCreate(BaseModel):
    """방문자 문의 생성 요청 — 공개 API (Public inquiry submission)."""

    profile_id: int
    name: str = Field(..., min_length=1, max_length=255, pattern=r"\S")
    email: str = Field(..., max_length=255, pattern=_EMAIL_PATTERN)
    message: str = Field(..., min_length=1, pattern=r"\S")


class InquiryResponse(BaseModel):
    id: int
    name: str
    email: str
    message: str
