"""Turn a WebDAV multi-status response into a list of :class:`Entry`.

Extraction walks every ``<D:response>`` record and renames the requested
properties through :data:`LISTING_PROPERTIES`.  Normalization then makes the
reported hrefs relative to the branch root, drops malformed and repeated
records, and flags the record describing the queried directory itself.
"""

from __future__ import annotations

import logging
import posixpath
import xml.etree.ElementTree as ET
from collections.abc import Callable
from datetime import datetime
from typing import Any
from urllib.parse import unquote

from github_ls.domain.entities import Entry, EntryType
from github_ls.domain.value_objects import PATH_SEPARATOR
from github_ls.services.query_builder import (
    BRANCHES_SEGMENT,
    DAV_NAMESPACE,
    DEFAULT_BRANCH_SELECTOR,
    LISTING_PROPERTIES,
    selector_segments,
)

logger = logging.getLogger(__name__)

RawRecord = dict[str, Any]

_DAV = "{%s}" % DAV_NAMESPACE
_ROOT_PATH = "."


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


# ── Property parsers ────────────────────────────────────────────────────────


def _parse_text(el: ET.Element) -> str:
    return (el.text or "").strip()


def _parse_date(el: ET.Element) -> datetime | None:
    text = _parse_text(el)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Ignoring unparsable date %r", text)
        return None


def _parse_size(el: ET.Element) -> int | None:
    text = _parse_text(el)
    try:
        return int(text, 10)
    except ValueError:
        logger.debug("Ignoring unparsable content length %r", text)
        return None


def _parse_type(el: ET.Element) -> EntryType:
    child = next(iter(el), None)
    if child is not None and _local_name(child.tag) == EntryType.COLLECTION.value:
        return EntryType.COLLECTION
    return EntryType.FILE


_ALIASES: dict[str, str] = {p.name: p.alias for p in LISTING_PROPERTIES}
_PARSERS: dict[str, Callable[[ET.Element], Any]] = {
    "creationdate": _parse_date,
    "getcontentlength": _parse_size,
    "resourcetype": _parse_type,
}


# ── Stage A: extraction ─────────────────────────────────────────────────────


def _select_prop(response: ET.Element) -> ET.Element | None:
    """Return the ``<D:prop>`` of the successful propstat, else the first one."""
    propstats = response.findall(f"{_DAV}propstat")
    for propstat in propstats:
        if " 200 " in (propstat.findtext(f"{_DAV}status") or ""):
            return propstat.find(f"{_DAV}prop")
    return propstats[0].find(f"{_DAV}prop") if propstats else None


def extract_records(raw_body: str | bytes) -> list[RawRecord]:
    """Parse every response record into ``{"path": href, <alias>: value, ...}``."""
    root = ET.fromstring(raw_body)
    records: list[RawRecord] = []
    for response in root.iter(f"{_DAV}response"):
        record: RawRecord = {}
        prop = _select_prop(response)
        for el in prop if prop is not None else ():
            name = _local_name(el.tag)
            value = _PARSERS.get(name, _parse_text)(el)
            if value:
                record[_ALIASES.get(name, name)] = value
        record["path"] = response.findtext(f"{_DAV}href") or ""
        records.append(record)
    return records


# ── Stage B: path normalization ─────────────────────────────────────────────


def normalize_path(href: str, branch: str | None = None) -> str:
    """Strip everything up to the branch selector from a reported href.

    ``/acme/widgets.git/branches/dev/src/a.py`` becomes ``src/a.py``; the
    branch root itself becomes ``"."``.  An href with no branch selector
    yields ``""``.  When *branch* is known its whole selector is stripped,
    so ``feature/x`` removes two segments after ``branches``.
    """
    segments = [s for s in unquote(href).split(PATH_SEPARATOR) if s]
    # the selector follows "<repo>.git"; owner and repo names may be "trunk"
    start = next((i + 1 for i, s in enumerate(segments) if s.endswith(".git")), 0)
    if branch:
        selector = selector_segments(branch)
        width = len(selector)
        for index in range(start, len(segments) - width + 1):
            if segments[index : index + width] == selector:
                remainder = segments[index + width :]
                break
        else:
            return ""
        return PATH_SEPARATOR.join(remainder) or _ROOT_PATH
    for index, segment in enumerate(segments[start:], start):
        if segment == BRANCHES_SEGMENT and index + 1 < len(segments):
            remainder = segments[index + 2 :]
            break
        if segment == DEFAULT_BRANCH_SELECTOR:
            remainder = segments[index + 1 :]
            break
    else:
        return ""
    return PATH_SEPARATOR.join(remainder) or _ROOT_PATH


def is_same_path(path: str, other: str) -> bool:
    """Compare two repository paths, ignoring leading/trailing separators."""
    def resolve(p: str) -> str:
        return posixpath.normpath(posixpath.join(PATH_SEPARATOR, p))

    return resolve(path) == resolve(other)


def _to_entry(record: RawRecord, path: str, subpath: str) -> Entry:
    entry_type = record.get("type", EntryType.FILE)
    return Entry(
        name=posixpath.basename(path),
        path=path,
        type=entry_type,
        author=record.get("author", ""),
        created_at=record.get("createdAt"),
        size=record.get("size") if entry_type is EntryType.FILE else None,
        root=is_same_path(path, subpath),
    )


def normalize(
    raw_body: str | bytes, queried_subpath: str, branch: str | None = None
) -> list[Entry]:
    """Build the deduplicated entry list, in the order the host reported it."""
    seen: set[str] = set()
    entries: list[Entry] = []
    for record in extract_records(raw_body):
        path = normalize_path(record["path"], branch)
        if not path:
            logger.debug("Skipping record without branch selector: %r", record["path"])
            continue
        if path in seen:
            continue
        seen.add(path)
        entries.append(_to_entry(record, path, queried_subpath))
    return entries
