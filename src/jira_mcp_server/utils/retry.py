"""Retry helper with exponential backoff for transient Jira errors."""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable, Collection

from jira_mcp_server.jira.errors import JiraAPIError

logger = logging.getLogger("jira_mcp_server")

# Throttling and gateway errors; everything else is raised immediately
RETRYABLE_CODES = frozenset({429, 500, 502, 503, 504})


def retry(
    max_attempts: int = 3,
    base_delay: float = 1.0,
    retry_on: Collection[int] = RETRYABLE_CODES,
) -> Callable:
    """Decorator that retries an async call on transient Jira API errors.

    Args:
        max_attempts: Maximum number of attempts, including the first call.
        base_delay: Initial delay in seconds, doubled on each retry.
        retry_on: HTTP status codes that trigger a retry.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(1, max_attempts + 1):
                try:
                    return await fn(*args, **kwargs)
                except JiraAPIError as e:
                    if e.status_code not in retry_on or attempt == max_attempts:
                        raise
                    delay = base_delay * (2 ** (attempt - 1))
                    logger.warning(
                        "Retrying %s (attempt %d/%d) after %ss: %s",
                        fn.__name__,
                        attempt,
                        max_attempts,
                        delay,
                        e,
                    )
                    await asyncio.sleep(delay)

        return wrapper

    return decorator
