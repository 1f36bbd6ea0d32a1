"""Key dispatch for the picker overlay."""

from .keys import handle_picker_key, parse_mouse_col_row

__all__ = ["handle_picker_key", "parse_mouse_col_row"]
