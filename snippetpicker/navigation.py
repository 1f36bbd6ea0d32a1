"""Cursor and sliding-window navigation over a filtered snippet view.

This module intentionally has no UI concerns. The navigator keeps a window
of at most ``max_window_size`` consecutive items plus a cursor local to that
window, and wraps around at both ends of the full view. Every operation is
total: an empty view turns all movement into a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .config import PickerLimits
from .model import Snippet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationState:
    """Window offset and window-local cursor row."""

    window_start: int = 0
    cursor_index: int = 0

    @property
    def global_index(self) -> int:
        return self.window_start + self.cursor_index


class ViewportNavigator:
    """Window/cursor state machine bound to one view at a time.

    The view is adopted with :meth:`sync`; a view with a different identity
    resets the position to the top.
    """

    def __init__(self, limits: PickerLimits | None = None, log: logging.Logger | None = None) -> None:
        self.limits = limits or PickerLimits()
        self.max_window = self.limits.max_window_size
        self.log = log or logger
        self.items: Sequence[Snippet] = ()
        self.window_start = 0
        self.cursor_index = 0

    def sync(self, items: Sequence[Snippet]) -> bool:
        """Adopt ``items`` as the current view, resetting when it is a new object."""
        if items is self.items:
            return False
        self.items = items
        self.reset()
        self.log.debug("Navigator synced to view of %d snippets", len(items))
        return True

    def reset(self) -> None:
        """Move window and cursor back to the first item."""
        self.window_start = 0
        self.cursor_index = 0

    @property
    def state(self) -> NavigationState:
        return NavigationState(self.window_start, self.cursor_index)

    @property
    def global_index(self) -> int:
        """Absolute cursor position in the view. Meaningless when empty."""
        return self.window_start + self.cursor_index

    @property
    def visible_window(self) -> Sequence[Snippet]:
        end = min(self.window_start + self.max_window, len(self.items))
        return self.items[self.window_start:end]

    @property
    def highlighted(self) -> Snippet | None:
        """Snippet under the cursor, or ``None`` for an empty view."""
        if not self.items:
            return None
        return self.items[self.global_index]

    def move_down(self) -> bool:
        """Step the cursor down, sliding the window or wrapping to the top.

        Returns whether the position changed.
        """
        total = len(self.items)
        if total == 0:
            return False
        before = (self.window_start, self.cursor_index)

        if self.global_index == total - 1:
            self.window_start = 0
            self.cursor_index = 0
        elif self.cursor_index == self.max_window - 1 and self.window_start + self.max_window < total:
            self.window_start += 1
        else:
            self.cursor_index += 1

        return (self.window_start, self.cursor_index) != before

    def move_up(self) -> bool:
        """Step the cursor up, sliding the window or wrapping to the bottom.

        Returns whether the position changed.
        """
        total = len(self.items)
        if total == 0:
            return False
        before = (self.window_start, self.cursor_index)

        if self.window_start == 0 and self.cursor_index == 0:
            self.window_start = max(0, total - self.max_window)
            self.cursor_index = min(self.max_window - 1, total - 1 - self.window_start)
        elif self.cursor_index == 0:
            self.window_start = max(0, self.window_start - 1)
        else:
            self.cursor_index -= 1

        return (self.window_start, self.cursor_index) != before

    def select_visible_row(self, row: int) -> bool:
        """Put the cursor on window-local ``row`` (pointer hover or click).

        Rows outside the visible window are ignored. Returns whether the
        position changed.
        """
        if not (0 <= row < len(self.visible_window)):
            return False
        if row == self.cursor_index:
            return False
        self.cursor_index = row
        return True
