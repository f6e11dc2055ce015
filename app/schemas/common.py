"""공통 Pydantic 응답 스키마 정의.

Common response schemas shared across routers: the uniform error body,
the API welcome payload, and the compact technology/point summaries
embedded in experience and project responses.
"""

from datetime import datetime

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """통일된 오류 응답 본문.

    Uniform error body returned by every exception handler.

    Attributes:
        timestamp: 오류 발생 시각 UTC (When the error was produced)
        status: HTTP 상태 코드 (HTTP status code)
        error: 상태 코드의 표준 문구 (Reason phrase, e.g. "Not Found")
        message: 상세 메시지 (Human readable detail)
        path: 요청 경로 (Request path)
        errors: 필드별 검증 오류, 검증 실패 시에만 포함
                (Field → message map, validation failures only)
    """

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    errors: dict[str, str] | None = None


class WelcomeResponse(BaseModel):
    message: str
    version: str
    status: str
    documentation: str


class TechnologySummary(BaseModel):
    """경력/프로젝트 응답에 포함되는 기술 요약 (Embedded technology tag)."""

    id: int
    name: str


class PointSummary(BaseModel):
    """경력/프로젝트 응답에 포함되는 세부 항목 (Embedded bullet point)."""

    id: int
    content: str
