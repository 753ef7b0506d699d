"""Value objects — immutable domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

PATH_SEPARATOR = "/"

_GITHUB_PREFIX_RE = re.compile(r"^(?:https?://)?github\.com/?")


@dataclass(frozen=True, slots=True)
class Location:
    """A path inside a GitHub repository.

    Built from strings like ``acme/widgets/src`` or
    ``https://github.com/acme/widgets/src``.  Parsing never fails: malformed
    input produces a best-effort split and the host reports the problem later.
    """

    owner: str
    repo: str
    subpath: str = ""

    @classmethod
    def from_string(cls, value: str) -> Location:
        """Split *value* into owner, repository and subpath."""
        remainder = _GITHUB_PREFIX_RE.sub("", value, count=1)
        owner, _, rest = remainder.partition(PATH_SEPARATOR)
        repo, _, subpath = rest.partition(PATH_SEPARATOR)
        return cls(owner=owner, repo=repo, subpath=subpath)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class ListingQuery:
    """A fully built ``PROPFIND`` request for one location."""

    location: Location
    url: str
    body: str
