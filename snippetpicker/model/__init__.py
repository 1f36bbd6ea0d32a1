"""Snippet record type and record validation."""

from .snippet import Snippet, SnippetCollection
from .validation import (
    is_valid_for_use,
    is_valid_structure,
    structure_problem,
    validation_problem,
)

__all__ = [
    "Snippet",
    "SnippetCollection",
    "is_valid_for_use",
    "is_valid_structure",
    "structure_problem",
    "validation_problem",
]
