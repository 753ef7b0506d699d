"""Render entries as an ``ls -l`` style table or as JSON."""

from __future__ import annotations

import json
import math
import os
import re
import sys
from collections.abc import Mapping

import click

from github_ls.domain.entities import Entry
from github_ls.domain.value_objects import PATH_SEPARATOR
from github_ls.interface.schemas import EntryResponse

DATE_FORMAT = "%b %d %H:%M"
DEFAULT_DIRECTORY_COLOR = "01;34"

_BYTE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_ERROR_PREFIX_RE = re.compile(r"^\w*Error:\s+")

# (padding right, right aligned) per column; the label column is never padded
_COLUMNS = ((2, False), (3, False), (1, True), (1, False))


# ── Cell formatting ─────────────────────────────────────────────────────────


def format_type(entry: Entry) -> str:
    return "d" if entry.is_directory else " "


def format_size(entry: Entry) -> str:
    """Human readable size with a single-letter unit, e.g. ``4.1K``."""
    if not entry.size:
        return " "
    size = entry.size
    exponent = min(int(math.log10(size) // 3), len(_BYTE_UNITS) - 1)
    number = size / 1000**exponent
    number = round(number, max(0, 2 - int(math.floor(math.log10(number)))))
    return f"{number:g}{_BYTE_UNITS[exponent][0].upper()}"


def format_date(entry: Entry) -> str:
    if entry.created_at is None:
        return ""
    return entry.created_at.astimezone().strftime(DATE_FORMAT)


def format_label(entry: Entry, colors: bool = True) -> str:
    if not entry.is_directory:
        return entry.name
    if entry.root:
        return colorize_directory(".") if colors else "."
    return colorize_directory(entry.name) if colors else entry.name + PATH_SEPARATOR


# ── Colors ──────────────────────────────────────────────────────────────────


def parse_ls_colors(value: str) -> dict[str, str]:
    """``"di=01;34:ln=01;36"`` → ``{"di": "01;34", "ln": "01;36"}``."""
    colors: dict[str, str] = {}
    for item in value.split(":"):
        key, sep, codes = item.partition("=")
        if sep and key:
            colors[key] = codes
    return colors


def colorize_directory(name: str, environ: Mapping[str, str] | None = None) -> str:
    environ = os.environ if environ is None else environ
    codes = parse_ls_colors(environ.get("LS_COLORS", "")).get("di", DEFAULT_DIRECTORY_COLOR)
    if not codes:
        return name
    return f"\x1b[{codes}m{name}\x1b[0m"


# ── Output ──────────────────────────────────────────────────────────────────


def render_table(entries: list[Entry], colors: bool = True) -> str:
    """Borderless five-column table, one row per entry."""
    rows = [
        [format_type(e), e.author, format_size(e), format_date(e), format_label(e, colors)]
        for e in entries
    ]
    widths = [max((len(row[i]) for row in rows), default=0) for i in range(len(_COLUMNS))]
    lines = []
    for row in rows:
        cells = []
        for (padding, right), width, cell in zip(_COLUMNS, widths, row):
            aligned = cell.rjust(width) if right else cell.ljust(width)
            cells.append(aligned + " " * padding)
        cells.append(row[-1])
        lines.append("".join(cells).rstrip())
    return "\n".join(lines).rstrip()


def render_json(entries: list[Entry]) -> str:
    return json.dumps(
        [EntryResponse.from_entry(e).to_json_dict() for e in entries],
        indent=2,
        ensure_ascii=False,
    )


def supports_emoji() -> bool:
    return sys.platform != "win32" or os.environ.get("TERM") == "xterm-256color"


def format_error(message: str) -> str:
    """Prefix with a siren and highlight the leading ``Error:`` in bold red."""
    emoji = "\N{POLICE CARS REVOLVING LIGHT}  " if supports_emoji() else ""
    highlighted = _ERROR_PREFIX_RE.sub(
        lambda m: click.style(m.group(0), fg="red", bold=True), message, count=1
    )
    return f"{emoji}{highlighted}"
