"""Typed views of the rows the record store hands back."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .store import RecordStoreError

SENTENCE_BREAK = re.compile(r"(?<=\.)\s+")


def split_sentences(text: str) -> list[str]:
    """Split text into trimmed pseudo-sentences at each "." followed by whitespace.

    "B. C." becomes ["B.", "C."]. Text is never added, so "example.com" and a
    trailing fragment without a period stay as written.
    """
    return [part.strip() for part in SENTENCE_BREAK.split(text or "") if part.strip()]


@dataclass(frozen=True)
class AdRecord:
    id: str
    title: str
    description: str
    url: str
    image_url: Optional[str] = None
    is_featured: bool = False
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AdRecord":
        try:
            return cls(
                id=str(row["id"]),
                title=str(row["title"]),
                description=str(row["description"]),
                url=str(row["url"]),
                image_url=row.get("image_url"),
                is_featured=bool(row.get("is_featured", False)),
                created_at=row.get("created_at"),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise RecordStoreError(f"Malformed ads row: {e!r}") from e

    def editable_values(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "image_url": self.image_url or "",
            "is_featured": self.is_featured,
        }


@dataclass(frozen=True)
class WebResultRecord:
    id: str
    title: str
    description: str
    url: str
    display_order: int = 0
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "WebResultRecord":
        try:
            return cls(
                id=str(row["id"]),
                title=str(row["title"]),
                description=str(row["description"]),
                url=str(row["url"]),
                display_order=int(row.get("display_order") or 0),
                created_at=row.get("created_at"),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RecordStoreError(f"Malformed web_results row: {e!r}") from e

    def editable_values(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "display_order": self.display_order,
        }
