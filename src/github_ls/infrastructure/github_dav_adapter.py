"""GitHub WebDAV adapter — implements the ListingTransport port."""

from __future__ import annotations

import logging

import httpx

from github_ls.domain.exceptions import HostReportedError, NotFoundError
from github_ls.domain.value_objects import ListingQuery

logger = logging.getLogger(__name__)


def _is_plain_text(content_type: str) -> bool:
    return content_type.strip().startswith("text/plain")


class GitHubDavAdapter:
    """Concrete ListingTransport backed by GitHub's Subversion endpoint."""

    def __init__(self, client: httpx.AsyncClient, user_agent: str) -> None:
        self._client = client
        self._headers: dict[str, str] = {
            "Accept-Encoding": "gzip",
            "Content-Type": "text/xml; charset=utf-8",
            "User-Agent": user_agent,
            "Depth": "1",
        }

    async def propfind(self, query: ListingQuery) -> str:
        """``PROPFIND <query.url>`` with depth 1 → raw multi-status XML."""
        resp = await self._client.request(
            "PROPFIND", query.url, content=query.body, headers=self._headers
        )
        logger.debug("Response: PROPFIND %s (status=%d)", query.url, resp.status_code)

        if resp.is_success:
            return resp.text

        if _is_plain_text(resp.headers.get("content-type", "")):
            raise HostReportedError(resp.text)

        if resp.status_code == 404:
            raise NotFoundError(query.location.subpath)

        raise httpx.HTTPStatusError(
            f"GitHub returned HTTP {resp.status_code} for {resp.request.url}",
            request=resp.request,
            response=resp,
        )
