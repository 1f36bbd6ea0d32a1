"""Picker session wiring search, navigation and combination together.

The session owns the collection snapshot and the search query, recomputes the
filtered view after each mutating command, and resolves commit payloads. It
performs no rendering or injection; callers watch ``dirty`` (or pass
``on_change``) and hand ``CommitPayload`` values to their own collaborators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .combination import CombinationSet, CommitPayload
from .config import PickerLimits
from .errors import BoundsError, SnippetPickerError
from .model import Snippet, SnippetCollection
from .navigation import ViewportNavigator
from .search import SearchFilter

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "no matches"


class PickerSession:
    """Event-driven orchestrator for one picker overlay."""

    def __init__(
        self,
        collection: SnippetCollection = (),
        limits: PickerLimits | None = None,
        log: logging.Logger | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.limits = limits or PickerLimits()
        self.log = log or logger
        self.on_change = on_change
        self.collection: SnippetCollection = collection
        self.query = ""
        self.search = SearchFilter()
        self.navigator = ViewportNavigator(self.limits, self.log)
        self.combination = CombinationSet(self.limits, self.log)
        self.message = ""
        self.last_rejection: str | None = None
        self.cancelled = False
        self.dirty = True
        self.refresh_view()

    @property
    def view(self) -> Sequence[Snippet]:
        return self.navigator.items

    @property
    def visible_window(self) -> Sequence[Snippet]:
        return self.navigator.visible_window

    @property
    def highlighted(self) -> Snippet | None:
        return self.navigator.highlighted

    @property
    def combining(self) -> bool:
        return self.combination.active

    @property
    def no_matches(self) -> bool:
        return not self.navigator.items

    @property
    def status_message(self) -> str:
        """Latest feedback message, or the no-matches notice for an empty view."""
        if self.message:
            return self.message
        return NO_MATCHES_MESSAGE if self.no_matches else ""

    def mark_dirty(self) -> None:
        self.dirty = True
        if self.on_change is not None:
            self.on_change()

    def _report(self, error: SnippetPickerError) -> None:
        """Record a rejected command for UI feedback."""
        self.last_rejection = error.reason
        self.message = str(error)
        self.log.info("Rejected (%s): %s", error.reason, error)
        self.mark_dirty()

    def _accept(self, message: str = "") -> None:
        self.last_rejection = None
        self.message = message
        self.mark_dirty()

    def refresh_view(self) -> bool:
        """Recompute the filtered view; reset navigation when it changed."""
        view = self.search.view(self.collection, self.query)
        changed = self.navigator.sync(view)
        if changed:
            self.mark_dirty()
        return changed

    def reload(self, collection: SnippetCollection) -> None:
        """Replace the collection snapshot wholesale."""
        self.collection = collection
        self.search.invalidate()
        self.log.debug("Reloaded collection with %d snippets", len(collection))
        self.refresh_view()

    def set_query(self, query: str) -> bool:
        if query == self.query:
            return False
        self.query = query
        self.message = ""
        if not self.refresh_view():
            self.mark_dirty()
        return True

    def append_query_char(self, char: str) -> bool:
        return self.set_query(self.query + char)

    def backspace_query(self) -> bool:
        if not self.query:
            return False
        return self.set_query(self.query[:-1])

    def clear_query(self) -> bool:
        return self.set_query("")

    def move_up(self) -> bool:
        moved = self.navigator.move_up()
        if moved:
            self.mark_dirty()
        return moved

    def move_down(self) -> bool:
        moved = self.navigator.move_down()
        if moved:
            self.mark_dirty()
        return moved

    def hover_row(self, row: int) -> bool:
        """Highlight window-local ``row`` in response to pointer movement."""
        moved = self.navigator.select_visible_row(row)
        if moved:
            self.mark_dirty()
        return moved

    def add_highlighted(self) -> bool:
        """Add the highlighted snippet to the combination."""
        snippet = self.navigator.highlighted
        if snippet is None:
            self.message = NO_MATCHES_MESSAGE
            self.mark_dirty()
            return False
        try:
            self.combination.add_snippet(snippet)
        except SnippetPickerError as exc:
            self._report(exc)
            return False
        self._accept(f"added '{snippet.title}' ({len(self.combination)} selected)")
        return True

    def remove_from_combination(self, index: int) -> bool:
        if not self.combination.remove_at(index):
            self._report(BoundsError(f"No combination entry at position {index}"))
            return False
        self._accept()
        return True

    def remove_last_from_combination(self) -> bool:
        return self.remove_from_combination(len(self.combination) - 1)

    def clear_combination(self) -> None:
        self.combination.clear()
        self._accept()

    def exit_combining_mode(self) -> None:
        self.combination.exit_combining_mode()
        self._accept()

    def commit(self) -> CommitPayload | None:
        """Resolve the payload for injection, or ``None`` when nothing resolves.

        In combining mode the combination is executed; otherwise the
        highlighted snippet's content is used.
        """
        if self.combination.active:
            try:
                payload = self.combination.execute_combination()
            except SnippetPickerError as exc:
                self._report(exc)
                return None
            self.combination.exit_combining_mode()
        else:
            snippet = self.navigator.highlighted
            if snippet is None:
                self.message = NO_MATCHES_MESSAGE
                self.mark_dirty()
                return None
            payload = CommitPayload(text=snippet.content, titles=(snippet.title,))
        self.log.info("Committed %s (%d characters)", ", ".join(payload.titles), len(payload.text))
        self._accept()
        return payload

    def cancel(self) -> None:
        self.cancelled = True
        self.log.info("User cancelled selection")
        self.mark_dirty()
