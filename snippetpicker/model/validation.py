"""Structural and size checks for individual snippet records.

Records may be raw JSON mappings (during collection loading) or ``Snippet``
instances (combination members). Nothing here raises; failures are reported
as ``False`` plus a logged reason.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..config import PickerLimits

logger = logging.getLogger(__name__)

_MISSING = object()
REQUIRED_FIELDS = ("title", "content")


def _field(record: object, name: str) -> object:
    """Read ``name`` from a mapping key or an attribute."""
    if isinstance(record, Mapping):
        return record.get(name, _MISSING)
    return getattr(record, name, _MISSING)


def structure_problem(record: object) -> str | None:
    """Describe the first structural violation of ``record``, if any."""
    if record is None:
        return "record is null"
    for name in REQUIRED_FIELDS:
        value = _field(record, name)
        if value is _MISSING:
            return f"missing field '{name}'"
        if not isinstance(value, str):
            return f"field '{name}' must be a string, got {type(value).__name__}"
    return None


def validation_problem(record: object, limits: PickerLimits) -> str | None:
    """Describe the first structural or length violation of ``record``, if any."""
    problem = structure_problem(record)
    if problem is not None:
        return problem

    title = _field(record, "title")
    content = _field(record, "content")
    if not title:
        return "title is empty"
    if len(title) > limits.max_title_length:
        return f"title too long ({len(title)} > {limits.max_title_length} characters)"
    if not content:
        return "content is empty"
    if len(content) > limits.max_content_length:
        return f"content too long ({len(content)} > {limits.max_content_length} characters)"
    return None


def is_valid_structure(record: object) -> bool:
    """Return whether ``record`` has string ``title`` and ``content`` fields."""
    return structure_problem(record) is None


def is_valid_for_use(
    record: object,
    index: int,
    limits: PickerLimits,
    log: logging.Logger | None = None,
) -> bool:
    """Return whether ``record`` is usable, logging the violated rule otherwise."""
    problem = validation_problem(record, limits)
    if problem is None:
        return True
    (log or logger).warning("Invalid snippet at index %d: %s", index, problem)
    return False
