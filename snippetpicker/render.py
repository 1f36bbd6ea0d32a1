"""Text rendering for the picker list and snippet previews.

Rendering helpers here are presentation-only and side-effect free. Picker
rows are plain strings with optional ANSI styling; previews are highlighted
with Pygments.
"""

from __future__ import annotations

import re

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, guess_lexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE
from .session import PickerSession

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

RESET = "\033[0m"
QUERY_SGR = "\033[1;38;5;81m"
CURSOR_SGR = "\033[7m"
MEMBER_SGR = "\033[38;5;229m"
STATUS_SGR = "\033[38;5;245m"

CURSOR_MARKER = ">"
MEMBER_MARKER = "+"


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def clip_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns, marking truncation with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return text[:1]
    return text[: width - 1] + "…"


def _first_line(text: str) -> str:
    return text.splitlines()[0] if text else ""


def _styled(text: str, sgr: str, no_color: bool) -> str:
    return text if no_color else f"{sgr}{text}{RESET}"


def render_picker_lines(session: PickerSession, width: int = 80, no_color: bool = False) -> list[str]:
    """Render query row, visible snippet rows and status rows for ``session``."""
    width = max(1, width)
    lines = [_styled(clip_line(f"search: {session.query}", width), QUERY_SGR, no_color)]

    cursor_row = session.navigator.cursor_index
    for row, snippet in enumerate(session.visible_window):
        marker = CURSOR_MARKER if row == cursor_row else " "
        member = MEMBER_MARKER if session.combination.contains_title(snippet.title) else " "
        title = sanitize_terminal_text(_first_line(snippet.title))
        text = clip_line(f"{marker}{member} {title}", width)
        if row == cursor_row:
            text = _styled(text, CURSOR_SGR, no_color)
        elif member != " ":
            text = _styled(text, MEMBER_SGR, no_color)
        lines.append(text)

    total = len(session.view)
    if total:
        position = f"{session.navigator.global_index + 1}/{total}"
        lines.append(_styled(clip_line(position, width), STATUS_SGR, no_color))

    if session.combining:
        combination = session.combination
        summary = (
            f"combining {len(combination)} snippets, "
            f"{combination.total_content_length}/{session.limits.max_combined_size} chars"
        )
        lines.append(_styled(clip_line(summary, width), MEMBER_SGR, no_color))

    status = session.status_message
    if status:
        lines.append(_styled(clip_line(status, width), STATUS_SGR, no_color))
    return lines


def _normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def render_preview(content: str, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ``content`` sanitized and, unless ``no_color``, syntax highlighted."""
    source = sanitize_terminal_text(content)
    if no_color:
        return source if source.endswith("\n") else source + "\n"
    try:
        lexer = guess_lexer(source)
    except ClassNotFound:
        lexer = TextLexer()
    formatter = TerminalFormatter(style=_normalize_style(style))
    return highlight(source, lexer, formatter)
