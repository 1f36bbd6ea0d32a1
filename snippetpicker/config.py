"""Picker limits and persistent JSON config helpers.

Limits are an immutable ``PickerLimits`` value handed to every component at
construction. The optional config file can override them; all access is
defensive so malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "snippet-picker"
CONFIG_FILENAME = "config.json"
SNIPPETS_FILENAME = "snippets.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_SNIPPETS_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / SNIPPETS_FILENAME
DEFAULT_STYLE = "monokai"

DEFAULT_MAX_WINDOW_SIZE = 8
DEFAULT_MAX_TITLE_LENGTH = 200
DEFAULT_MAX_CONTENT_LENGTH = 10_000
DEFAULT_MAX_COMBINED_SIZE = 10_000


@dataclass(frozen=True)
class PickerLimits:
    """Size limits shared by validator, navigator and combination set."""

    max_window_size: int = DEFAULT_MAX_WINDOW_SIZE
    max_title_length: int = DEFAULT_MAX_TITLE_LENGTH
    max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH
    max_combined_size: int = DEFAULT_MAX_COMBINED_SIZE

    def __post_init__(self) -> None:
        for name in ("max_window_size", "max_title_length", "max_content_length", "max_combined_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_positive_int(value: object, default: int) -> int:
    """Normalize JSON scalars for limits.

    Booleans, non-integers and values below 1 fall back to ``default``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value if value > 0 else default


def load_picker_limits(config: dict[str, object] | None = None) -> PickerLimits:
    """Build ``PickerLimits`` from config, keeping defaults for invalid keys."""
    data = load_config() if config is None else config
    return PickerLimits(
        max_window_size=_coerce_positive_int(data.get("max_window_size"), DEFAULT_MAX_WINDOW_SIZE),
        max_title_length=_coerce_positive_int(data.get("max_title_length"), DEFAULT_MAX_TITLE_LENGTH),
        max_content_length=_coerce_positive_int(data.get("max_content_length"), DEFAULT_MAX_CONTENT_LENGTH),
        max_combined_size=_coerce_positive_int(data.get("max_combined_size"), DEFAULT_MAX_COMBINED_SIZE),
    )


def load_snippets_path(config: dict[str, object] | None = None) -> Path:
    """Return configured snippets file, or the per-user data default."""
    data = load_config() if config is None else config
    value = data.get("snippets_file")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_SNIPPETS_PATH
    return Path(value.strip()).expanduser()


def load_style_name(config: dict[str, object] | None = None) -> str:
    """Load persisted Pygments style name, falling back to ``monokai``."""
    data = load_config() if config is None else config
    value = data.get("style")
    if not isinstance(value, str):
        return DEFAULT_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_STYLE
