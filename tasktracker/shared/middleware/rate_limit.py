# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from flask import Request, request

from tasktracker.shared.config import SecurityConfig
from tasktracker.shared.errors import RateLimitedError
from tasktracker.shared.logging import logger


@dataclass
class Bucket:
    timestamps: deque[float]

    def prune(self, now: float, window: float) -> None:
        while self.timestamps and (now - self.timestamps[0]) > window:
            self.timestamps.popleft()


class InMemoryRateLimiter:
    """Sliding-window limiter; buckets with no hit inside the window are evicted."""

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._lock = threading.Lock()
        self._buckets: dict[str, Bucket] = {}
        self._next_sweep = clock() + self._window

    @classmethod
    def from_config(cls, config: SecurityConfig) -> InMemoryRateLimiter | None:
        if not config.enable_rate_limit:
            return None
        return cls(config.rate_limit_requests, config.rate_limit_window)

    def bucket_count(self) -> int:
        return len(self._buckets)

    def _sweep(self, now: float) -> None:
        for key in list(self._buckets):
            bucket = self._buckets[key]
            bucket.prune(now, self._window)
            if not bucket.timestamps:
                del self._buckets[key]
        self._next_sweep = now + self._window

    def allow(self, key: str) -> bool:
        with self._lock:
            now = self._clock()
            if now >= self._next_sweep:
                self._sweep(now)
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = self._buckets[key] = Bucket(deque(maxlen=self._limit))
            bucket.prune(now, self._window)
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True


def _client_key(req: Request) -> str:
    # Forwarded headers are only honoured through ProxyFix (TRUSTED_PROXY_COUNT).
    return req.remote_addr or "unknown"


def rate_limited(f: Callable):
    """Throttle a controller method with the controller's ``_rate_limiter``, if any."""

    @wraps(f)
    def wrapper(self, *args, **kwargs):
        limiter: InMemoryRateLimiter | None = getattr(self, "_rate_limiter", None)
        if limiter is not None:
            key = f"{request.path}:{_client_key(request)}"
            if not limiter.allow(key):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                raise RateLimitedError()
        return f(self, *args, **kwargs)

    return wrapper


__all__ = ["InMemoryRateLimiter", "rate_limited"]
