"""요청 로깅 미들웨어 테스트 — 마스킹과 로그 출력.

Request logging middleware tests — Field masking and log output.
"""

import logging

from httpx import AsyncClient

from app.middleware.request_logging import mask_sensitive
from tests.conftest import PUBLIC


class TestMaskSensitive:
    """민감 필드 마스킹 테스트."""

    def test_masks_nested_fields(self):
        masked = mask_sensitive({
            "username": "admin",
            "password": "admin123!",
            "nested": {"access_token": "abc", "items": [{"api_key": "k", "name": "x"}]},
        })
        assert masked["username"] == "admin"
        assert masked["password"] == "***"
        assert masked["nested"]["access_token"] == "***"
        assert masked["nested"]["items"][0] == {"api_key": "***", "name": "x"}

    def test_truncates_long_strings(self):
        masked = mask_sensitive({"message": "x" * 3000})
        assert masked["message"].endswith("...(truncated)")
        assert len(masked["message"]) < 3000


class TestRequestLog:
    """요청 로그 출력 테스트."""

    async def test_request_is_logged(self, client: AsyncClient, caplog):
        with caplog.at_level(logging.INFO, logger="app.request"):
            await client.get(PUBLIC)
        assert any(r.name == "app.request" and f"GET {PUBLIC} -> 200" in r.getMessage() for r in caplog.records)

    async def test_health_is_skipped(self, client: AsyncClient, caplog):
        with caplog.at_level(logging.INFO, logger="app.request"):
            await client.get("/health")
        assert not any(r.name == "app.request" and "/health" in r.getMessage() for r in caplog.records)
