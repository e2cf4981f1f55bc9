"""Data models for skills and search results using msgspec."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import msgspec


class Skill(msgspec.Struct, frozen=True, kw_only=True):
    """A skill loaded from a SKILL.md file.

    Any object exposing ``name``, ``description``, ``location`` and ``body``
    can be searched; this is the concrete record the loader produces.
    """

    # Required fields
    name: str
    location: str

    # Optional fields with defaults
    path: str = ""
    description: str | None = None
    content: str = ""  # full file, frontmatter included
    body: str = ""  # markdown without frontmatter
    references: list[str] = msgspec.field(default_factory=list)
    scripts: list[str] = msgspec.field(default_factory=list)
    metadata: dict[str, Any] = msgspec.field(default_factory=dict)

    @property
    def tags(self) -> list[str]:
        """Tags declared in the frontmatter, if any."""
        tags = self.metadata.get("tags")
        if isinstance(tags, list):
            return [str(tag) for tag in tags]
        return []


class HighlightSpan(msgspec.Struct, frozen=True):
    """One fragment of display text, flagged when it matched a query term."""

    text: str
    is_match: bool = False


@dataclass
class SearchHit:
    """A skill that matched a query, with highlighted display fields."""

    skill: Skill
    highlights: dict[str, list[HighlightSpan]] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.skill.name

    def spans_for(self, field_name: str) -> list[HighlightSpan]:
        """Get spans for a field, falling back to a single plain span."""
        if field_name in self.highlights:
            return self.highlights[field_name]
        value = getattr(self.skill, field_name, None) or ""
        return [HighlightSpan(text=value)]
