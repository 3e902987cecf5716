# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-client sliding-window limits for the credential endpoints."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from flask import request

from marketplace.shared.config import load_config
from marketplace.shared.errors import RateLimitedError
from marketplace.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


class InMemoryRateLimiter:
    """At most ``limit`` hits per key inside any ``window_seconds`` span.

    State lives in the worker process, so each process enforces its own
    budget.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def allow(self, key: str) -> bool:
        with self._lock:
            now = self._clock()
            if now - self._last_sweep > self._window:
                self._sweep(now)
            hits = self._hits.setdefault(key, deque())
            while hits and now - hits[0] > self._window:
                hits.popleft()
            if len(hits) >= self._limit:
                return False
            hits.append(now)
            return True

    def _sweep(self, now: float) -> None:
        # Forget clients whose newest hit has left the window.
        stale = [
            key for key, hits in self._hits.items() if not hits or now - hits[-1] > self._window
        ]
        for key in stale:
            del self._hits[key]
        self._last_sweep = now

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._hits)


def _client_address() -> str:
    route = request.access_route
    return route[0] if route else (request.remote_addr or "unknown")


def rate_limit(limit: int | None = None, window_seconds: float | None = None) -> Callable[[F], F]:
    """Guard a view; a rejected call raises :class:`RateLimitedError` (HTTP 429).

    Disabled globally by ``ENABLE_RATE_LIMIT=false``, in which case the view
    is returned untouched.
    """

    security = load_config().security
    limiter = InMemoryRateLimiter(
        limit or security.rate_limit_requests,
        window_seconds or security.rate_limit_window,
    )

    def decorator(view: F) -> F:
        if not security.enable_rate_limit:
            return view

        @wraps(view)
        def guarded(*args: Any, **kwargs: Any) -> Any:
            key = f"{view.__qualname__}:{_client_address()}"
            if not limiter.allow(key):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                raise RateLimitedError()
            return view(*args, **kwargs)

        return guarded  # type: ignore[return-value]

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
