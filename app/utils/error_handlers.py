"""전역 예외 핸들러 — 모든 오류를 통일된 JSON 본문으로 변환.

Global exception handlers.
Every error leaving the API is rendered as:

    {"timestamp": ..., "status": 404, "error": "Not Found",
     "message": "Profile not found with id: 7", "path": "/api/v1/profiles/7"}

Validation failures add an "errors" map of field → message.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MALFORMED_JSON_MESSAGE: str = "Invalid JSON format or malformed request body"


def error_body(
    status_code: int,
    message: str,
    path: str,
    errors: dict[str, str] | None = None,
) -> dict[str, Any]:
    """통일된 오류 본문을 생성합니다.

    Build the uniform error body.

    Args:
        status_code: HTTP 상태 코드 (HTTP status code)
        message: 상세 메시지 (Detail message)
        path: 요청 경로 (Request path)
        errors: 필드별 오류 (Optional field → message map)

    Returns:
        dict[str, Any]: JSON 직렬화 가능한 본문 (JSON-serialisable body)
    """
    try:
        reason: str = HTTPStatus(status_code).phrase
    except ValueError:
        reason = "Error"

    body: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": reason,
        "message": message,
        "path": path,
    }
    if errors is not None:
        body["errors"] = errors
    return body


def _field_name(loc: tuple[Any, ...]) -> str:
    # "body", "query", "path" 접두어 제거 (Drop the request-part prefix)
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts) or "request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException(도메인 예외 포함) 처리 — Render HTTP errors, keeping their headers."""
    message: str = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code >= 500:
        logger.error("HTTP %s on %s: %s", exc.status_code, request.url.path, message)
    elif exc.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN, status.HTTP_429_TOO_MANY_REQUESTS):
        logger.warning("HTTP %s on %s: %s", exc.status_code, request.url.path, message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message, request.url.path),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패 처리 — 400 "Validation Failed" 또는 잘못된 JSON.

    Render request validation failures as 400.
    Malformed JSON bodies get a dedicated message without a field map.
    """
    raw_errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in raw_errors):
        logger.warning("Malformed JSON body on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(status.HTTP_400_BAD_REQUEST, MALFORMED_JSON_MESSAGE, request.url.path),
        )

    errors: dict[str, str] = {}
    for err in raw_errors:
        # 같은 필드의 첫 오류만 유지 (Keep the first message per field)
        errors.setdefault(_field_name(tuple(err.get("loc", ()))), err.get("msg", "Invalid value"))

    logger.info("Validation failed on %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(status.HTTP_400_BAD_REQUEST, "Validation Failed", request.url.path, errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상치 못한 예외 처리 — 500, 상세 내용은 로그에만 기록.

    Render unexpected exceptions as 500; details go to the log only.
    """
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            request.url.path,
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """애플리케이션에 전역 예외 핸들러를 등록합니다.

    Register the global exception handlers on the application.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
