"""Navigation core: state, content and breadcrumb composition."""

from layernav.core.breadcrumb import extract_title_fragment, modal_breadcrumb, room_breadcrumb
from layernav.core.registry import ContentError, ContentRegistry, ModalEntry, RoomEntry
from layernav.core.state import Layer, NavigationSnapshot, NavigationState, Room

__all__ = [
    "ContentError",
    "ContentRegistry",
    "Layer",
    "ModalEntry",
    "NavigationSnapshot",
    "NavigationState",
    "Room",
    "RoomEntry",
    "extract_title_fragment",
    "modal_breadcrumb",
    "room_breadcrumb",
]
