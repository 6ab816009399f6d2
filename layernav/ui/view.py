"""View binding contracts consumed by the navigation core."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from layernav.core.registry import ModalEntry

ElementHandle: TypeAlias = Hashable


@dataclass(frozen=True, slots=True)
class RoomTrigger:
    """Element that opens a room; labels are used verbatim in breadcrumbs."""

    room_id: str
    section_label: str
    component_label: str | None = None


@dataclass(frozen=True, slots=True)
class ModalTrigger:
    """Element that opens a modal entry."""

    modal_id: str


@dataclass(frozen=True, slots=True)
class RoomCloseControl:
    """Close control inside a room overlay."""

    room_id: str


@dataclass(frozen=True, slots=True)
class ModalCloseControl:
    """Close control of the modal overlay."""


@dataclass(frozen=True, slots=True)
class PageDimmer:
    """Backdrop shown behind the modal overlay."""


TargetDescriptor: TypeAlias = RoomTrigger | ModalTrigger | RoomCloseControl | ModalCloseControl | PageDimmer


class FocusHost(Protocol):
    """Focus surface required by FocusGuard."""

    def focused_element(self) -> ElementHandle | None: ...

    def focus(self, element: ElementHandle) -> None: ...

    def is_attached(self, element: ElementHandle) -> bool: ...

    def focusable_descendants(self, container: ElementHandle) -> Sequence[ElementHandle]: ...


class ViewPort(FocusHost, Protocol):
    """Page surface driven by the layer controller."""

    def room_container(self, room_id: str) -> ElementHandle | None: ...

    def room_close_control(self, room_id: str) -> ElementHandle | None: ...

    def set_room_active(self, room_id: str, active: bool) -> None: ...

    def deactivate_all_rooms(self) -> None:
        """Deactivate every room overlay and every deep indicator."""

    def set_deep_indicator(self, section_id: str, active: bool) -> None: ...

    def dim_sections(self, except_section: str | None) -> None: ...

    def clear_dimming(self) -> None: ...

    def show_breadcrumb(self, text: str) -> None: ...

    def hide_breadcrumb(self) -> None: ...

    def show_modal(self, entry: ModalEntry) -> None:
        """Fill modal content and activate modal and page-dimmer overlays."""

    def hide_modal(self) -> None: ...

    def modal_container(self) -> ElementHandle: ...

    def modal_close_control(self) -> ElementHandle | None: ...

    def scroll_into_view(self, element: ElementHandle) -> None: ...

    def describe_target(self, element: ElementHandle) -> TargetDescriptor | None: ...
