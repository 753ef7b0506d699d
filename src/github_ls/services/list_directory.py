"""List-directory use case — the request/parse/normalize pipeline.

Depends only on the :class:`ListingTransport` port and the pure service
modules; the interface layer injects the concrete httpx adapter.
"""

from __future__ import annotations

import logging

from github_ls.domain.entities import Entry
from github_ls.domain.ports.listing_transport import ListingTransport
from github_ls.domain.value_objects import Location
from github_ls.services.query_builder import build_query
from github_ls.services.response_normalizer import normalize

logger = logging.getLogger(__name__)


class ListDirectoryUseCase:
    """Lists one remote directory with a single round trip to the host."""

    def __init__(self, transport: ListingTransport) -> None:
        self._transport = transport

    async def execute(self, query: str, branch: str | None = None) -> list[Entry]:
        """Resolve *query*, fetch its listing and return the normalized entries."""
        location = Location.from_string(query)
        listing = build_query(location, branch)
        logger.debug("url: %s", listing.url)

        body = await self._transport.propfind(listing)
        entries = normalize(body, location.subpath, branch)
        logger.info(
            "Listed %s:%s (%d entries)", location.full_name, location.subpath or ".", len(entries)
        )
        return entries
