"""Search package exports."""

from __future__ import annotations

from .filtering import SearchFilter, filter_snippets, find_snippet_by_title, is_blank_term

__all__ = [
    "SearchFilter",
    "filter_snippets",
    "find_snippet_by_title",
    "is_blank_term",
]
