"""인메모리 요청 제한기 — 버킷/클라이언트별 슬라이딩 창.

In-memory rate limiter for lightweight endpoint protection.
Keys are "<bucket>:<client host>"; state lives in this process only.
"""

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque


class InMemoryRateLimiter:
    """키별 슬라이딩 창 요청 제한기.

    Per-key limiter counting request timestamps inside a moving window.
    Keys whose hits have all expired are dropped once per window.
    """

    def __init__(self) -> None:
        self._hits: defaultdict[str, deque[float]] = defaultdict(deque)
        self._lock = threading.Lock()
        self._last_sweep: float = time.monotonic()

    def allow(self, key: str, max_requests: int, window_seconds: int) -> tuple[bool, int]:
        """요청을 허용할지 판단합니다.

        Record a hit for key when allowed.

        Returns:
            tuple[bool, int]: (허용 여부, 재시도까지 남은 초)
                              (Allowed flag, seconds until retry when denied)
        """
        now = time.monotonic()
        retry_after = 0
        cutoff = now - window_seconds
        with self._lock:
            if now - self._last_sweep >= window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now
            q = self._hits[key]
            while q and q[0] < cutoff:
                q.popleft()
            if len(q) >= max_requests:
                retry_after = max(1, int(window_seconds - (now - q[0])))
                return False, retry_after
            q.append(now)
        return True, retry_after

    def _sweep(self, cutoff: float) -> None:
        # 만료된 키 제거 (Drop keys with no hit newer than cutoff)
        stale = [key for key, q in self._hits.items() if not q or q[-1] < cutoff]
        for key in stale:
            del self._hits[key]

    def tracked_keys(self) -> int:
        """현재 기록 중인 키 수 (Number of keys currently tracked)."""
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        """모든 키의 기록을 지웁니다 (Forget every recorded hit)."""
        with self._lock:
            self._hits.clear()
            self._last_sweep = time.monotonic()


# 프로세스 전역 제한기 (Process-wide limiter shared by all routers)
rate_limiter: InMemoryRateLimiter = InMemoryRateLimiter()
