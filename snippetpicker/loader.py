"""Snippet collection loading from a JSON file.

The file holds a top-level JSON list of ``{"title": ..., "content": ...}``
objects. Bad entries are dropped with a logged reason; the rest of the
collection stays usable. Whole-file problems raise ``CollectionLoadError``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .config import PickerLimits
from .errors import CollectionLoadError
from .model import Snippet, SnippetCollection, is_valid_for_use

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Decodes UTF-8 with or without a leading BOM; undecodable files fall back
    to UTF-8 replacement semantics.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        return path.read_bytes().decode("utf-8-sig", errors="replace")


def parse_snippet_collection(
    data: object,
    limits: PickerLimits | None = None,
    log: logging.Logger | None = None,
) -> SnippetCollection:
    """Validate decoded JSON and return the usable snippets in source order."""
    limits = limits or PickerLimits()
    log = log or logger
    if not isinstance(data, list):
        raise CollectionLoadError(f"Snippet data must be a JSON list, got {type(data).__name__}")

    snippets = tuple(
        Snippet.from_record(record)
        for index, record in enumerate(data)
        if is_valid_for_use(record, index, limits, log)
    )
    dropped = len(data) - len(snippets)
    if dropped:
        log.warning("Dropped %d of %d snippets that failed validation", dropped, len(data))
    log.debug("Loaded %d snippets", len(snippets))
    return snippets


def load_snippet_collection(
    path: Path,
    limits: PickerLimits | None = None,
    log: logging.Logger | None = None,
) -> SnippetCollection:
    """Load and validate the snippet collection stored at ``path``."""
    log = log or logger
    if not path.is_file():
        raise CollectionLoadError(f"Snippets file not found: {path}")
    try:
        raw = read_text(path)
    except OSError as exc:
        raise CollectionLoadError(f"Cannot read snippets file {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CollectionLoadError(f"Snippets file {path} is not valid JSON: {exc}") from exc
    log.debug("Read snippets file %s", path)
    return parse_snippet_collection(data, limits, log)
