"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EntryType(str, Enum):
    """Kind of a listed resource."""

    FILE = "file"
    COLLECTION = "collection"


@dataclass(frozen=True, slots=True)
class Entry:
    """A single file or directory reported by the host."""

    name: str
    path: str
    type: EntryType = EntryType.FILE
    author: str = ""
    created_at: datetime | None = None
    size: int | None = None  # only set for files
    root: bool = False

    @property
    def is_directory(self) -> bool:
        return self.type is EntryType.COLLECTION
