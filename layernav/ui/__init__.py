"""View contracts and focus handling."""

from layernav.ui.focus_guard import FocusGuard, FocusTrap
from layernav.ui.view import ElementHandle, FocusHost, ViewPort

__all__ = ["ElementHandle", "FocusGuard", "FocusHost", "FocusTrap", "ViewPort"]
