"""Error taxonomy for snippet selection and combination.

Every error carries a short ``reason`` code so callers (the session and the
UI layer behind it) can present feedback without parsing messages.
"""

from __future__ import annotations


class SnippetPickerError(Exception):
    """Base class for recoverable snippet-picker failures."""

    reason = "error"

    def __init__(self, message: str, reason: str | None = None) -> None:
        super().__init__(message)
        if reason is not None:
            self.reason = reason


class ValidationError(SnippetPickerError):
    """Malformed or oversized snippet record.

    ``index`` is set when the record was found at a known position, e.g. a
    combination member that failed re-validation on execute.
    """

    reason = "invalid_data"

    def __init__(self, message: str, reason: str | None = None, index: int | None = None) -> None:
        super().__init__(message, reason)
        self.index = index


class DuplicateError(SnippetPickerError):
    """A snippet with the same title is already in the combination."""

    reason = "duplicate"


class SizeLimitError(SnippetPickerError):
    """Adding the snippet would exceed the combined content limit."""

    reason = "size_limit"


class EmptyCombinationError(SnippetPickerError):
    """Commit requested with nothing selected for combination."""

    reason = "empty_combination"


class BoundsError(SnippetPickerError):
    """Out-of-range index for a combination entry."""

    reason = "out_of_bounds"


class CollectionLoadError(SnippetPickerError):
    """Snippet collection file is missing, unreadable, or not a JSON list."""

    reason = "load_failure"
