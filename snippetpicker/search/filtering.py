"""Search-term filtering over a snippet collection snapshot.

``filter_snippets`` is pure. ``SearchFilter`` memoizes the last result so an
unchanged term over the same collection object returns the same view object;
the navigator relies on view identity to decide when to reset.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..model import Snippet


def is_blank_term(term: str) -> bool:
    """Return whether ``term`` selects the whole collection."""
    return not term or term.isspace()


def filter_snippets(collection: Sequence[Snippet], term: str) -> Sequence[Snippet]:
    """Return snippets whose title or content contains ``term``, ignoring case.

    A blank term returns ``collection`` itself. Otherwise a new tuple is built
    in source order.
    """
    if is_blank_term(term):
        return collection
    folded = term.casefold()
    return tuple(snippet for snippet in collection if snippet.matches(folded))


def find_snippet_by_title(collection: Sequence[Snippet], title: str) -> Snippet | None:
    """Return the first snippet whose title equals ``title`` exactly."""
    for snippet in collection:
        if snippet.title == title:
            return snippet
    return None


class SearchFilter:
    """Derive-on-read filtered view with manual invalidation."""

    def __init__(self) -> None:
        self._collection: Sequence[Snippet] | None = None
        self._term: str | None = None
        self._view: Sequence[Snippet] = ()

    def view(self, collection: Sequence[Snippet], term: str) -> Sequence[Snippet]:
        """Return the filtered view, recomputing only when inputs changed."""
        if collection is self._collection and term == self._term:
            return self._view
        self._collection = collection
        self._term = term
        self._view = filter_snippets(collection, term)
        return self._view

    def invalidate(self) -> None:
        """Drop the cached view so the next ``view`` call recomputes."""
        self._collection = None
        self._term = None
        self._view = ()
