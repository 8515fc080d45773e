"""Sliding-window rate limiter decorator for MCP tools."""

from __future__ import annotations

import asyncio
import functools
import logging
import time
from collections import deque
from typing import Any, Callable

from jira_mcp_server.jira.errors import JiraRateLimitError

logger = logging.getLogger("jira_mcp_server")


class RateLimiter:
    """Allows at most ``max_calls`` acquisitions in any ``period``-second window."""

    def __init__(self, max_calls: int, period: int):
        self.max_calls = max_calls
        self.period = period
        self._timestamps: deque[float] = deque()
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            now = time.monotonic()
            while self._timestamps and now - self._timestamps[0] >= self.period:
                self._timestamps.popleft()
            if len(self._timestamps) >= self.max_calls:
                logger.warning("Rate limit hit: %d calls in %ss", self.max_calls, self.period)
                raise JiraRateLimitError(
                    f"Rate limit exceeded: {self.max_calls} calls per {self.period}s. "
                    "Try again shortly."
                )
            self._timestamps.append(now)


# Shared by every tool, created on first use from the server settings
_limiter: RateLimiter | None = None


def _get_limiter() -> RateLimiter:
    global _limiter
    if _limiter is None:
        from jira_mcp_server.lifespan import get_settings

        settings = get_settings()
        _limiter = RateLimiter(settings.rate_limit_calls, settings.rate_limit_period)
    return _limiter


def reset_limiter() -> None:
    """Drop the shared limiter so the next call rebuilds it from settings."""
    global _limiter
    _limiter = None


def rate_limit(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that enforces the shared rate limit before calling the tool."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        await _get_limiter().acquire()
        return await fn(*args, **kwargs)

    return wrapper
