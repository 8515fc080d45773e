"""Integration test: spawn the MCP server subprocess, initialize it and list tools."""

from __future__ import annotations

import asyncio
import json
import os
import sys

import pytest

from jira_mcp_server.guards.permissions import ALL_TOOLS


async def _send(proc, message: dict) -> None:
    proc.stdin.write(json.dumps(message).encode() + b"\n")
    await proc.stdin.drain()


async def _receive(proc) -> dict:
    line = await asyncio.wait_for(proc.stdout.readline(), timeout=10.0)
    return json.loads(line)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_server_initializes_and_lists_tools():
    """Spawn jira-mcp-server as a subprocess and verify the MCP handshake."""
    env = {
        **os.environ,
        "JIRA_URL": "https://test.atlassian.net",
        "JIRA_EMAIL": "test@example.com",
        "JIRA_API_TOKEN": "fake-token",
    }

    proc = await asyncio.create_subprocess_exec(
        sys.executable,
        "-m",
        "jira_mcp_server",
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        env=env,
    )

    try:
        await _send(proc, {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "initialize",
            "params": {
                "protocolVersion": "2024-11-05",
                "capabilities": {},
                "clientInfo": {"name": "test-client", "version": "0.1.0"},
            },
        })
        try:
            response = await _receive(proc)
            assert response.get("jsonrpc") == "2.0"
            assert response.get("id") == 1
            assert response["result"]["serverInfo"]["name"] == "jira-mcp-server"

            await _send(proc, {"jsonrpc": "2.0", "method": "notifications/initialized"})
            await _send(proc, {"jsonrpc": "2.0", "id": 2, "method": "tools/list"})
            response = await _receive(proc)
            names = {tool["name"] for tool in response["result"]["tools"]}
            assert names == ALL_TOOLS
        except asyncio.TimeoutError:
            pytest.fail("Server did not respond within 10s")
    finally:
        proc.terminate()
        await proc.wait()
