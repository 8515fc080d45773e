"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


class JiraSettings(BaseSettings):
    """Jira MCP server settings.

    All settings are loaded from environment variables prefixed with JIRA_.
    A .env file in the working directory is read as well; real environment
    variables take precedence over it.
    """

    model_config = {"env_prefix": "JIRA_", "env_file": ".env", "extra": "ignore"}

    # Required
    url: str
    email: str
    api_token: str

    # Optional
    read_only_mode: bool = False
    max_results: int = 50
    timeout: int = 30
    rate_limit_calls: int = 10
    rate_limit_period: int = 60
    log_level: str = "INFO"
    ssl_verify: bool | str = True
    attachment_dir: str | None = None

    @field_validator("ssl_verify", mode="before")
    @classmethod
    def parse_ssl_verify(cls, value: Any) -> Any:
        """Read boolean-looking strings as bools; any other string is a CA bundle path."""
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
        return value
