"""Multi-snippet combination set with duplicate and size enforcement.

Snippets are accumulated in insertion order for one concatenated output.
Rejected additions raise a ``SnippetPickerError`` subclass and leave the set
untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .config import PickerLimits
from .errors import DuplicateError, EmptyCombinationError, SizeLimitError, ValidationError
from .model import Snippet, structure_problem

logger = logging.getLogger(__name__)

COMBINATION_SEPARATOR = "\n"


@dataclass(frozen=True)
class CommitPayload:
    """Resolved text handed to the external injection collaborator."""

    text: str
    titles: tuple[str, ...]


class CombinationSet:
    """Ordered, title-unique snippet selection with a running size total."""

    def __init__(self, limits: PickerLimits | None = None, log: logging.Logger | None = None) -> None:
        self.limits = limits or PickerLimits()
        self.log = log or logger
        self._entries: list[Snippet] = []
        self._total_content_length = 0
        self.active = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[Snippet, ...]:
        return tuple(self._entries)

    @property
    def titles(self) -> tuple[str, ...]:
        return tuple(entry.title for entry in self._entries)

    @property
    def total_content_length(self) -> int:
        return self._total_content_length

    @property
    def remaining_capacity(self) -> int:
        return self.limits.max_combined_size - self._total_content_length

    def contains_title(self, title: str) -> bool:
        return any(entry.title == title for entry in self._entries)

    def add_snippet(self, snippet: Snippet | Mapping[str, object]) -> Snippet:
        """Append ``snippet`` and enter combining mode.

        Raises ``ValidationError``, ``DuplicateError`` or ``SizeLimitError``
        without mutating the set. Returns the stored snippet.
        """
        problem = structure_problem(snippet)
        if problem is not None:
            self.log.warning("Rejected combination add: %s", problem)
            raise ValidationError(f"Invalid snippet: {problem}")

        candidate = Snippet.from_record(snippet)
        if self.contains_title(candidate.title):
            self.log.info("Rejected combination add: '%s' already selected", candidate.title)
            raise DuplicateError(f"'{candidate.title}' is already in the combination")

        new_total = self._total_content_length + len(candidate.content)
        if new_total > self.limits.max_combined_size:
            self.log.info(
                "Rejected combination add: '%s' would grow total to %d > %d",
                candidate.title,
                new_total,
                self.limits.max_combined_size,
            )
            raise SizeLimitError(
                f"Combined size would be {new_total} characters (limit {self.limits.max_combined_size})"
            )

        self._entries.append(candidate)
        self._total_content_length = new_total
        if not self.active:
            self.active = True
            self.log.debug("Entered combining mode")
        self.log.debug(
            "Added '%s' to combination (%d entries, %d characters)",
            candidate.title,
            len(self._entries),
            self._total_content_length,
        )
        return candidate

    def remove_at(self, index: int) -> bool:
        """Remove the entry at ``index``, returning whether anything was removed."""
        if not (0 <= index < len(self._entries)):
            self.log.warning(
                "Ignored combination removal: index %d out of range for %d entries",
                index,
                len(self._entries),
            )
            return False
        removed = self._entries.pop(index)
        self._total_content_length = sum(len(entry.content) for entry in self._entries)
        self.log.debug("Removed '%s' from combination", removed.title)
        if not self._entries:
            self.active = False
            self.log.debug("Left combining mode: combination is empty")
        return True

    def execute_combination(self) -> CommitPayload:
        """Join member contents with newlines in insertion order.

        Raises ``EmptyCombinationError`` for an empty set and
        ``ValidationError`` (reason ``validation_failure``) naming the first
        structurally invalid member.
        """
        if not self._entries:
            raise EmptyCombinationError("No snippets selected for combination")
        for index, entry in enumerate(self._entries):
            problem = structure_problem(entry)
            if problem is not None:
                self.log.error("Combination member %d is invalid: %s", index, problem)
                raise ValidationError(
                    f"Combination member {index} is invalid: {problem}",
                    reason="validation_failure",
                    index=index,
                )
        payload = CommitPayload(
            text=COMBINATION_SEPARATOR.join(entry.content for entry in self._entries),
            titles=self.titles,
        )
        self.log.info("Combined %d snippets (%d characters)", len(payload.titles), len(payload.text))
        return payload

    def clear(self) -> None:
        """Empty the set without leaving combining mode."""
        self._entries.clear()
        self._total_content_length = 0

    def exit_combining_mode(self) -> None:
        """Empty the set and leave combining mode."""
        self.clear()
        if self.active:
            self.active = False
            self.log.debug("Left combining mode")
