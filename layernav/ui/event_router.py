"""Raw input routing onto layer controller operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from layernav.core.controller import LayerController
from layernav.ui.view import (
    ElementHandle,
    ModalCloseControl,
    ModalTrigger,
    PageDimmer,
    RoomCloseControl,
    RoomTrigger,
    TargetDescriptor,
    ViewPort,
)

logger = logging.getLogger(__name__)

ROOM_ID_SUFFIX = "-room"
PRIMARY_BUTTON = 1


@dataclass(frozen=True, slots=True)
class KeyDown:
    """Key press with optional focused target."""

    key: str
    shift: bool = False
    target: ElementHandle | None = None


@dataclass(frozen=True, slots=True)
class PointerClick:
    """Pointer click on a target element."""

    target: ElementHandle
    button: int = PRIMARY_BUTTON


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Routing outcome: invoked action and whether to suppress host default."""

    action: str | None = None
    prevent_default: bool = False


def map_key_name(key_name: str) -> str | None:
    """Normalize host key names to router key identifiers."""
    if key_name == " ":
        return "space"
    normalized = key_name.strip().lower()
    key_map = {
        "escape": "escape",
        "esc": "escape",
        "enter": "enter",
        "return": "enter",
        "space": "space",
        "spacebar": "space",
        "tab": "tab",
    }
    return key_map.get(normalized)


def normalize_room_id(room_id: str) -> str:
    """Ensure trigger room ids carry the room suffix."""
    return room_id if room_id.endswith(ROOM_ID_SUFFIX) else room_id + ROOM_ID_SUFFIX


class EventRouter:
    """Binds page-scope key and click events to controller calls."""

    def __init__(self, controller: LayerController, view: ViewPort) -> None:
        self._controller = controller
        self._view = view

    def on_key_down(self, event: KeyDown) -> RouteResult:
        mapped = map_key_name(event.key)
        if mapped == "escape":
            action = self._controller.dismiss()
            return RouteResult(action=action, prevent_default=action is not None)
        if mapped == "tab":
            wrapped = self._controller.focus_guard.handle_tab(event.shift)
            return RouteResult(action="wrap_focus" if wrapped else None, prevent_default=wrapped)
        if mapped in {"enter", "space"} and event.target is not None:
            descriptor = self._view.describe_target(event.target)
            if descriptor is None:
                return RouteResult()
            action = self._activate(descriptor)
            return RouteResult(action=action, prevent_default=action is not None)
        return RouteResult()

    def on_click(self, event: PointerClick) -> RouteResult:
        if event.button != PRIMARY_BUTTON:
            return RouteResult()
        descriptor = self._view.describe_target(event.target)
        if descriptor is None:
            return RouteResult()
        return RouteResult(action=self._activate(descriptor))

    def _activate(self, descriptor: TargetDescriptor) -> str | None:
        if isinstance(descriptor, RoomTrigger):
            return self._open_room(descriptor)
        if isinstance(descriptor, ModalTrigger):
            if self._controller.open_modal(descriptor.modal_id):
                return "open_modal"
            return None
        if isinstance(descriptor, RoomCloseControl):
            self._controller.close_all_rooms()
            return "close_all_rooms"
        if isinstance(descriptor, ModalCloseControl):
            if self._controller.close_modal():
                return "close_modal"
            return None
        if isinstance(descriptor, PageDimmer):
            return self._controller.dismiss()
        return None

    def _open_room(self, trigger: RoomTrigger) -> str | None:
        room_id = normalize_room_id(trigger.room_id)
        component_label = trigger.component_label
        if component_label is None:
            entry = self._controller.registry.lookup_room(room_id)
            component_label = entry.component_label if entry is not None else ""
        if not self._controller.open_room(room_id, trigger.section_label, component_label):
            logger.debug("room_trigger_ignored room_id=%s", room_id)
            return None
        return "open_room"
