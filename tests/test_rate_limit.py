"""요청 제한 테스트 — 버킷별 한도, 429 응답, Retry-After, 비활성화.

Rate limiting tests — Per-bucket quotas, 429 responses, Retry-After,
and the global switch.
"""

from httpx import AsyncClient

from app.config import settings
from app.utils.rate_limit import InMemoryRateLimiter
from tests.conftest import ADMIN, PUBLIC, auth_header


class TestRateLimiter:
    """InMemoryRateLimiter 단위 테스트."""

    def test_allows_up_to_quota(self):
        limiter = InMemoryRateLimiter()
        assert limiter.allow("k", 2, 60) == (True, 0)
        assert limiter.allow("k", 2, 60) == (True, 0)
        allowed, retry_after = limiter.allow("k", 2, 60)
        assert allowed is False
        assert 1 <= retry_after <= 60

    def test_keys_are_independent(self):
        limiter = InMemoryRateLimiter()
        assert limiter.allow("a", 1, 60)[0] is True
        assert limiter.allow("a", 1, 60)[0] is False
        assert limiter.allow("b", 1, 60)[0] is True

    def test_expired_keys_are_dropped(self, monkeypatch):
        """창이 지난 클라이언트 키는 제거."""
        clock = [1000.0]
        monkeypatch.setattr("app.utils.rate_limit.time.monotonic", lambda: clock[0])
        limiter = InMemoryRateLimiter()
        for host in ("10.0.0.1", "10.0.0.2", "10.0.0.3"):
            limiter.allow(f"public:{host}", 5, 60)
        assert limiter.tracked_keys() == 3

        clock[0] += 61
        assert limiter.allow("public:10.0.0.4", 5, 60) == (True, 0)
        assert limiter.tracked_keys() == 1

    def test_active_keys_survive_sweep(self, monkeypatch):
        clock = [1000.0]
        monkeypatch.setattr("app.utils.rate_limit.time.monotonic", lambda: clock[0])
        limiter = InMemoryRateLimiter()
        limiter.allow("a", 5, 60)
        clock[0] += 30
        limiter.allow("b", 5, 60)
        clock[0] += 31
        limiter.allow("c", 5, 60)
        assert limiter.tracked_keys() == 2

    def test_reset(self):
        limiter = InMemoryRateLimiter()
        limiter.allow("a", 1, 60)
        limiter.reset()
        assert limiter.allow("a", 1, 60)[0] is True


class TestRateLimitedEndpoints:
    """엔드포인트 요청 제한 테스트."""

    async def test_public_quota_exceeded(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "RATE_LIMIT_PUBLIC_REQUESTS", 2)
        for _ in range(2):
            res = await client.get(PUBLIC)
            assert res.status_code == 200

        res = await client.get(PUBLIC)
        assert res.status_code == 429
        assert int(res.headers["retry-after"]) >= 1
        assert res.json()["message"] == "Rate limit exceeded. Please try again later."

    async def test_buckets_are_separate(self, client: AsyncClient, admin_token, monkeypatch):
        """공개 버킷 소진이 관리자 버킷에 영향 없음."""
        monkeypatch.setattr(settings, "RATE_LIMIT_PUBLIC_REQUESTS", 1)
        await client.get(PUBLIC)
        assert (await client.get(PUBLIC)).status_code == 429

        res = await client.get(f"{ADMIN}/auth/me", headers=auth_header(admin_token))
        assert res.status_code == 200

    async def test_admin_quota_covers_login(self, client: AsyncClient, admin_user, monkeypatch):
        """로그인도 관리자 버킷으로 제한."""
        monkeypatch.setattr(settings, "RATE_LIMIT_ADMIN_REQUESTS", 1)
        credentials = {"username": "admin", "password": "wrong"}
        assert (await client.post(f"{ADMIN}/auth/login", json=credentials)).status_code == 401
        assert (await client.post(f"{ADMIN}/auth/login", json=credentials)).status_code == 429

    async def test_disabled(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "RATE_LIMIT_ENABLED", False)
        monkeypatch.setattr(settings, "RATE_LIMIT_PUBLIC_REQUESTS", 1)
        for _ in range(3):
            assert (await client.get(PUBLIC)).status_code == 200

    async def test_health_not_limited(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "RATE_LIMIT_PUBLIC_REQUESTS", 1)
        for _ in range(3):
            assert (await client.get("/health")).status_code == 200
