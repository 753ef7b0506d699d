"""Build the WebDAV ``PROPFIND`` request for a repository location."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from github_ls.domain.value_objects import PATH_SEPARATOR, ListingQuery, Location

DEFAULT_BRANCH_SELECTOR = "trunk"
BRANCHES_SEGMENT = "branches"
DAV_NAMESPACE = "DAV:"


@dataclass(frozen=True, slots=True)
class DavProperty:
    """A requested WebDAV property and the entry field it populates."""

    name: str
    alias: str
    namespace: str = DAV_NAMESPACE


LISTING_PROPERTIES: tuple[DavProperty, ...] = (
    DavProperty("creator-displayname", "author"),
    DavProperty("creationdate", "createdAt"),
    DavProperty("getcontentlength", "size"),
    DavProperty("resourcetype", "type"),
)

_BODY_TEMPLATE = """\
<?xml version="1.0" encoding="utf-8"?>
<propfind xmlns="DAV:">
  <prop>{props}</prop>
</propfind>"""


def branch_selector(branch: str | None = None) -> str:
    """``branches/<branch>`` for a named branch, ``trunk`` for the default one."""
    return PATH_SEPARATOR.join(selector_segments(branch))


def selector_segments(branch: str | None = None) -> list[str]:
    """Path segments of the branch selector; ``feature/x`` spans two."""
    if branch:
        return [BRANCHES_SEGMENT, *(s for s in branch.split(PATH_SEPARATOR) if s)]
    return [DEFAULT_BRANCH_SELECTOR]


def render_body(properties: tuple[DavProperty, ...] = LISTING_PROPERTIES) -> str:
    props = "\n".join(f'<{p.name} xmlns="{p.namespace}"/>' for p in properties)
    return _BODY_TEMPLATE.format(props=props)


def _quote_path(path: str) -> str:
    return PATH_SEPARATOR.join(quote(s, safe="") for s in path.split(PATH_SEPARATOR))


def build_query(location: Location, branch: str | None = None) -> ListingQuery:
    """Return the request URL (relative to the host) and body for *location*.

    Every segment is percent-encoded so ``#``, ``?`` and spaces stay part of the path.
    """
    url = PATH_SEPARATOR.join(
        (
            _quote_path(location.owner),
            _quote_path(f"{location.repo}.git"),
            _quote_path(branch_selector(branch)),
            _quote_path(location.subpath),
        )
    )
    return ListingQuery(location=location, url=url, body=render_body())
