"""Dependency wiring — builds the use case around a short-lived HTTP client."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from github_ls.domain.entities import Entry
from github_ls.infrastructure.config import Settings, get_settings
from github_ls.infrastructure.github_dav_adapter import GitHubDavAdapter
from github_ls.services.list_directory import ListDirectoryUseCase


@asynccontextmanager
async def open_use_case(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[ListDirectoryUseCase]:
    """Yield a wired use case; the HTTP client is closed on exit."""
    settings = settings or get_settings()
    async with httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.request_timeout),
        follow_redirects=True,
        transport=transport,
    ) as client:
        yield ListDirectoryUseCase(
            GitHubDavAdapter(client=client, user_agent=settings.user_agent)
        )


async def list_remote(
    query: str,
    branch: str | None = None,
    settings: Settings | None = None,
) -> list[Entry]:
    """List *query* (``owner/repo[/path]``) on *branch* or the default branch."""
    async with open_use_case(settings) as use_case:
        return await use_case.execute(query, branch=branch)
