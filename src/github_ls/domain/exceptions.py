"""Domain exception hierarchy.

Only :class:`ListingError` subclasses are reported to the user as a one-line
message.  Transport failures stay ``httpx`` exceptions and anything else is
left to propagate with its traceback.
"""

from __future__ import annotations


class GitHubLsError(Exception):
    """Base exception for the entire application."""


class ListingError(GitHubLsError):
    """A listing failed for a reason the user can act on."""


class HostReportedError(ListingError):
    """GitHub answered with a plain-text error message (rate limit, private repo...)."""


class NotFoundError(ListingError):
    """The queried path does not exist on the selected branch (404)."""

    def __init__(self, subpath: str) -> None:
        super().__init__(f"No such file or directory: {subpath}")
        self.subpath = subpath
