"""Shared pytest configuration."""

from unittest.mock import AsyncMock

import pytest

from jira_mcp_server import lifespan
from jira_mcp_server.guards.rate_limit import reset_limiter
from jira_mcp_server.jira.client import JiraClient
from jira_mcp_server.settings import JiraSettings


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if not config.getoption("-m", default=None) or "integration" not in config.getoption("-m", default=""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


@pytest.fixture
def settings(tmp_path):
    return JiraSettings(
        _env_file=None,
        url="https://test.atlassian.net",
        email="test@example.com",
        api_token="tok",
        read_only_mode=False,
        rate_limit_calls=1000,
        attachment_dir=str(tmp_path / "downloads"),
    )


@pytest.fixture
def mock_client():
    return AsyncMock(spec=JiraClient)


@pytest.fixture
def server_state(monkeypatch, settings, mock_client):
    """Install settings and a mocked client as if the server lifespan were running."""
    monkeypatch.setattr(lifespan, "_settings", settings)
    monkeypatch.setattr(lifespan, "_client", mock_client)
    reset_limiter()
    yield
    reset_limiter()


@pytest.fixture
def call_tool(server_state):
    """Call a registered MCP tool's underlying coroutine function."""

    async def _call(tool, **kwargs):
        fn = getattr(tool, "fn", tool)
        return await fn(**kwargs)

    return _call
