#!/usr/bin/env python3
"""Validate Jira MCP configuration and test connectivity and credentials."""

import asyncio
import sys

import httpx
from pydantic import ValidationError

from jira_mcp_server.jira.client import JiraClient
from jira_mcp_server.jira.errors import JiraAPIError
from jira_mcp_server.settings import JiraSettings


async def main() -> int:
    print("Loading settings...")
    try:
        settings = JiraSettings()
    except ValidationError as e:
        print(f"FAIL: Could not load settings: {e}")
        print("Ensure JIRA_URL, JIRA_EMAIL, and JIRA_API_TOKEN are set.")
        return 1

    print(f"  JIRA_URL: {settings.url}")
    print(f"  JIRA_EMAIL: {settings.email}")
    print(f"  JIRA_API_TOKEN: {'*' * 8}...{settings.api_token[-4:]}")
    print(f"  JIRA_READ_ONLY_MODE: {settings.read_only_mode}")

    print("\nTesting credentials...")
    client = JiraClient(
        base_url=settings.url,
        email=settings.email,
        api_token=settings.api_token,
        timeout=settings.timeout,
        ssl_verify=settings.ssl_verify,
    )

    try:
        me = await client.get_myself()
        print(f"  OK: Authenticated as {me.get('displayName')} ({me.get('emailAddress', 'no email')})")
        return 0
    except (JiraAPIError, httpx.HTTPError) as e:
        print(f"  FAIL: {e}")
        return 1
    finally:
        await client.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
