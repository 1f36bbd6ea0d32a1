"""Picker-mode keyboard and pointer handling."""

from __future__ import annotations

from ..combination import CommitPayload
from ..session import PickerSession

# Row 1 of the picker is the query line; snippet rows start at row 2.
FIRST_LIST_ROW = 2


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    """Parse ``MOUSE_*:col:row`` key tokens into integer coordinates."""
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


def _list_row_for_mouse_key(key: str) -> int | None:
    """Map a mouse token to a window-local list row, or ``None`` off-list."""
    _col, row = parse_mouse_col_row(key)
    if row is None or row < FIRST_LIST_ROW:
        return None
    return row - FIRST_LIST_ROW


def _commit(session: PickerSession, sink: list[CommitPayload]) -> tuple[bool, bool]:
    payload = session.commit()
    if payload is None:
        return True, False
    sink.append(payload)
    return True, True


def handle_picker_key(
    key: str,
    session: PickerSession,
    committed: list[CommitPayload] | None = None,
) -> tuple[bool, bool]:
    """Handle one key for the picker overlay.

    Returns ``(handled, should_quit)`` so the caller can stop event
    propagation and close the overlay. Resolved commit payloads are appended
    to ``committed`` when given.
    """
    sink = committed if committed is not None else []

    if key == "ESC" or key == "\x03":
        if session.combining:
            session.exit_combining_mode()
            return True, False
        session.cancel()
        return True, True

    if key == "UP" or key == "CTRL_K":
        session.move_up()
        return True, False
    if key == "DOWN" or key == "CTRL_J":
        session.move_down()
        return True, False
    if key == "ENTER":
        return _commit(session, sink)
    if key == "TAB":
        session.add_highlighted()
        return True, False
    if key == "SHIFT_TAB":
        session.remove_last_from_combination()
        return True, False
    if key == "BACKSPACE":
        session.backspace_query()
        return True, False
    if key == "CTRL_U":
        session.clear_query()
        return True, False

    if key.startswith("MOUSE_MOVE:"):
        row = _list_row_for_mouse_key(key)
        if row is not None:
            session.hover_row(row)
        return True, False
    if key.startswith("MOUSE_LEFT_DOWN:"):
        row = _list_row_for_mouse_key(key)
        if row is None or row >= len(session.visible_window):
            return True, False
        session.hover_row(row)
        return _commit(session, sink)

    if len(key) == 1 and key.isprintable():
        session.append_query_char(key)
        return True, False
    return False, False
