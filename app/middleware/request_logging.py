"""요청 로깅 미들웨어 — 표준 로거 + Axiom 전송.

Request logging middleware.
Writes one line per request to the standard logger and, when Axiom is
configured, ships a structured event (endpoint, method, masked body and
params, status code, error reason, duration) to the Axiom dataset.
Sensitive fields (password, token, secret) are masked before shipping.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = logging.getLogger("app.request")

# 마스킹 대상 필드 패턴 (Fields to mask in request bodies and params)
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 (Paths excluded from logging)
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    if isinstance(data, str) and len(data) > 2000:
        return data[:2000] + "...(truncated)"
    return data


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청을 로깅하는 미들웨어.

    Middleware logging every API request to the standard logger, and to
    Axiom when AXIOM_API_TOKEN and AXIOM_DATASET are both set.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_body(self, request: Request) -> Any:
        # 본문이 있는 메서드만 (Only methods that carry a body)
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        body_bytes = await request.body()
        if not body_bytes:
            return None
        try:
            return mask_sensitive(json.loads(body_bytes))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 스킵 (Skip excluded paths)
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        request_body: Any = await self._read_body(request) if self._client else None

        status_code: int = 500
        error_detail: str | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            log = logger.warning if status_code >= 400 else logger.info
            log("%s %s -> %s (%.2f ms)", method, path, status_code, duration_ms)

            if self._client is not None:
                self._ship(
                    {
                        "method": method,
                        "path": path,
                        "status_code": status_code,
                        "duration_ms": duration_ms,
                        "query_params": mask_sensitive(dict(request.query_params)) or None,
                        "request_body": request_body,
                        "error": error_detail,
                        "client": request.client.host if request.client else None,
                    }
                )

    def _ship(self, event: dict[str, Any]) -> None:
        """Axiom으로 이벤트 전송 — 실패해도 요청 처리에 영향 없음.

        Send an event to Axiom; failures are logged and swallowed so the
        request itself is never affected.
        """
        payload = {k: v for k, v in event.items() if v is not None}
        try:
            self._client.ingest_events(self._dataset, [payload])
        except Exception:
            logger.exception("Failed to ship request log to Axiom")
