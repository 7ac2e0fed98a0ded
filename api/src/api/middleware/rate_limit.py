"""Fixed-window request counter per client IP."""

import time
from threading import Lock
from typing import Dict, Tuple

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from api.response import failure


class FixedWindowRateLimiter:
    def __init__(self, max_requests: int, window_seconds: int, clock=time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_prune = clock()
        self._lock = Lock()

    def hit(self, key: str) -> Tuple[bool, int, int]:
        """Count one request for key.

        Returns (allowed, remaining, seconds until the window resets).
        """
        now = self.clock()
        with self._lock:
            if now - self._last_prune >= self.window_seconds:
                self._prune(now)
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0
            count += 1
            self._windows[key] = (started, count)
        reset_in = max(0, int(started + self.window_seconds - now))
        return count <= self.max_requests, max(0, self.max_requests - count), reset_in

    def _prune(self, now: float) -> None:
        """Drop keys whose window has run out. Caller holds the lock."""
        self._windows = {
            key: (started, count) for key, (started, count) in self._windows.items()
            if now - started < self.window_seconds
        }
        self._last_prune = now


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: FixedWindowRateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next):
        client = request.client.host if request.client else "unknown"
        allowed, remaining, reset_in = self.limiter.hit(client)
        if not allowed:
            logger.warning("Rate limit exceeded for {}", client)
            return failure(
                "RATE_LIMIT_EXCEEDED",
                "Too many requests, please try again later",
                429,
                headers={"Retry-After": str(reset_in)},
            )
        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self.limiter.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        return response
