"""Shared fixtures: multi-status XML bodies shaped like GitHub's responses."""

from __future__ import annotations

import pytest


def dav_response(
    href: str,
    *,
    author: str = "octocat",
    created: str = "2018-10-14T21:48:29.000000Z",
    size: int | None = None,
    collection: bool = False,
) -> str:
    """One ``<D:response>`` record."""
    resourcetype = "<lp1:resourcetype><D:collection/></lp1:resourcetype>" if collection else "<lp1:resourcetype/>"
    length = f"<lp1:getcontentlength>{size}</lp1:getcontentlength>" if size is not None else ""
    return f"""
<D:response xmlns:lp1="DAV:" xmlns:lp2="http://subversion.tigris.org/xmlns/dav/">
<D:href>{href}</D:href>
<D:propstat>
<D:prop>
<lp1:creator-displayname>{author}</lp1:creator-displayname>
<lp1:creationdate>{created}</lp1:creationdate>
{length}
{resourcetype}
</D:prop>
<D:status>HTTP/1.1 200 OK</D:status>
</D:propstat>
</D:response>"""


def multistatus(*responses: str) -> str:
    body = "".join(responses)
    return f"""<?xml version="1.0" encoding="utf-8"?>
<D:multistatus xmlns:D="DAV:" xmlns:ns0="DAV:">{body}
</D:multistatus>
"""


@pytest.fixture
def src_listing() -> str:
    """``acme/widgets/src`` on trunk: the directory, a file and a sub-directory."""
    return multistatus(
        dav_response("/acme/widgets.git/trunk/src/", collection=True),
        dav_response("/acme/widgets.git/trunk/src/main.py", size=4096),
        dav_response("/acme/widgets.git/trunk/src/utils/", author="hubot", collection=True),
    )
