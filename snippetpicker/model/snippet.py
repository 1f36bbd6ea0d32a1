"""Snippet record type."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Snippet:
    """One titled text snippet. Immutable once validated."""

    title: str
    content: str

    @classmethod
    def from_record(cls, record: object) -> Snippet:
        """Build a snippet from a mapping or an object with matching attributes.

        Existing snippets are returned as-is. Callers validate ``record``
        first; fields are not re-checked here.
        """
        if isinstance(record, Snippet):
            return record
        if isinstance(record, Mapping):
            return cls(title=record["title"], content=record["content"])
        return cls(title=getattr(record, "title"), content=getattr(record, "content"))

    def matches(self, folded_term: str) -> bool:
        """Return whether title or content contains an already casefolded term."""
        return folded_term in self.title.casefold() or folded_term in self.content.casefold()


SnippetCollection = tuple[Snippet, ...]
