"""Timing decorator for slow Jira calls such as attachment transfers."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable

logger = logging.getLogger("jira_mcp_server")


def timed(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Log how long an async call took, at debug level, whether or not it raised."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.monotonic()
        try:
            return await fn(*args, **kwargs)
        finally:
            logger.debug("%s finished in %.3fs", fn.__qualname__, time.monotonic() - start)

    return wrapper
