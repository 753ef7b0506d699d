"""Pydantic DTOs for the JSON output boundary."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from github_ls.domain.entities import Entry, EntryType


class EntryResponse(BaseModel):
    """One entry as printed by ``--json``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    path: str
    type: EntryType
    author: str = ""
    created_at: datetime | None = Field(default=None, alias="createdAt")
    size: int | None = None
    root: bool = False

    @classmethod
    def from_entry(cls, entry: Entry) -> EntryResponse:
        return cls(
            name=entry.name,
            path=entry.path,
            type=entry.type,
            author=entry.author,
            created_at=entry.created_at,
            size=entry.size,
            root=entry.root,
        )

    def to_json_dict(self) -> dict[str, object]:
        """Serialisable dict; empty ``author``, ``size``, ``createdAt`` and a false ``root`` are dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_defaults=True)
