"""Port: listing transport — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from github_ls.domain.value_objects import ListingQuery


class ListingTransport(Protocol):
    """Abstract contract for sending a listing query to the host."""

    async def propfind(self, query: ListingQuery) -> str:
        """Send *query* and return the raw multi-status XML body.

        Raises :class:`~github_ls.domain.exceptions.HostReportedError` or
        :class:`~github_ls.domain.exceptions.NotFoundError` for failures the
        user can act on; every other failure propagates unchanged.
        """
        ...
