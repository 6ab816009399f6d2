"""In-memory page model implementing the view port."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from layernav.core.registry import ContentRegistry, ModalEntry
from layernav.ui.view import (
    ElementHandle,
    ModalCloseControl,
    ModalTrigger,
    PageDimmer,
    RoomCloseControl,
    RoomTrigger,
    TargetDescriptor,
)

HERO_SECTION_ID = "hero"


@dataclass(eq=False)
class HeadlessElement:
    """Page element node; compared by identity."""

    element_id: str
    focusable: bool = True
    children: list[HeadlessElement] = field(default_factory=list, repr=False)
    parent: HeadlessElement | None = field(default=None, repr=False)

    def add(self, child: HeadlessElement) -> HeadlessElement:
        child.parent = self
        self.children.append(child)
        return child

    def descendants(self) -> list[HeadlessElement]:
        """Return descendants in document order."""
        found: list[HeadlessElement] = []
        for child in self.children:
            found.append(child)
            found.extend(child.descendants())
        return found

    def __str__(self) -> str:
        return self.element_id


class HeadlessView:
    """Page with sections, room overlays and one modal overlay, built from a registry."""

    def __init__(self, registry: ContentRegistry) -> None:
        self.document = HeadlessElement("document", focusable=False)
        self._by_id: dict[str, HeadlessElement] = {}
        self._targets: dict[HeadlessElement, TargetDescriptor] = {}
        self._rooms: dict[str, HeadlessElement] = {}
        self._room_close: dict[str, HeadlessElement] = {}
        self.section_ids: tuple[str, ...] = (HERO_SECTION_ID, *registry.section_ids())

        self.active_rooms: set[str] = set()
        self.deep_indicators: set[str] = set()
        self.dimmed_sections: set[str] = set()
        self.breadcrumb_text = ""
        self.breadcrumb_visible = False
        self.modal_visible = False
        self.dimmer_visible = False
        self.modal_title = ""
        self.modal_body = ""
        self.focused: HeadlessElement | None = None
        self.scroll_requests: list[str] = []

        sections = {section_id: self._node(self.document, section_id, focusable=False) for section_id in self.section_ids}
        for room in registry.rooms():
            section = sections[room.section_id]
            trigger = self._node(section, f"{room.room_id}-trigger")
            self._targets[trigger] = RoomTrigger(room.room_id, room.section_label, room.component_label)
            container = self._node(section, room.room_id, focusable=False)
            close = self._node(container, f"{room.room_id}-close")
            self._targets[close] = RoomCloseControl(room.room_id)
            for modal_id in room.modal_ids:
                link = self._node(container, f"{room.room_id}-link-{modal_id}")
                self._targets[link] = ModalTrigger(modal_id)
            self._rooms[room.room_id] = container
            self._room_close[room.room_id] = close

        self._dimmer = self._node(self.document, "page-dimmer", focusable=False)
        self._targets[self._dimmer] = PageDimmer()
        self._modal = self._node(self.document, "modal-overlay", focusable=False)
        self._modal_close = self._node(self._modal, "modal-close")
        self._targets[self._modal_close] = ModalCloseControl()

    def _node(self, parent: HeadlessElement, element_id: str, *, focusable: bool = True) -> HeadlessElement:
        node = parent.add(HeadlessElement(element_id, focusable=focusable))
        self._by_id[element_id] = node
        return node

    def element(self, element_id: str) -> HeadlessElement:
        """Return the element with `element_id`; raises KeyError if unknown."""
        return self._by_id[element_id]

    def add_element(self, parent_id: str, element_id: str, *, focusable: bool = True) -> HeadlessElement:
        """Attach a new element under `parent_id`."""
        return self._node(self._by_id[parent_id], element_id, focusable=focusable)

    def detach(self, element_id: str) -> None:
        """Remove an element subtree from the page."""
        node = self._by_id[element_id]
        if node.parent is not None:
            node.parent.children.remove(node)
            node.parent = None

    # Focus host

    def focused_element(self) -> ElementHandle | None:
        return self.focused

    def focus(self, element: ElementHandle) -> None:
        if not isinstance(element, HeadlessElement):
            raise TypeError(f"not a page element: {element!r}")
        self.focused = element

    def is_attached(self, element: ElementHandle) -> bool:
        node = element if isinstance(element, HeadlessElement) else None
        while node is not None:
            if node is self.document:
                return True
            node = node.parent
        return False

    def focusable_descendants(self, container: ElementHandle) -> Sequence[ElementHandle]:
        if not isinstance(container, HeadlessElement):
            return ()
        return tuple(node for node in container.descendants() if node.focusable)

    # View port

    def room_container(self, room_id: str) -> ElementHandle | None:
        container = self._rooms.get(room_id)
        if container is None or not self.is_attached(container):
            return None
        return container

    def room_close_control(self, room_id: str) -> ElementHandle | None:
        return self._room_close.get(room_id)

    def set_room_active(self, room_id: str, active: bool) -> None:
        if active:
            self.active_rooms.add(room_id)
        else:
            self.active_rooms.discard(room_id)

    def deactivate_all_rooms(self) -> None:
        self.active_rooms.clear()
        self.deep_indicators.clear()

    def set_deep_indicator(self, section_id: str, active: bool) -> None:
        if active:
            self.deep_indicators.add(section_id)
        else:
            self.deep_indicators.discard(section_id)

    def dim_sections(self, except_section: str | None) -> None:
        self.dimmed_sections = {section_id for section_id in self.section_ids if section_id != except_section}

    def clear_dimming(self) -> None:
        self.dimmed_sections.clear()

    def show_breadcrumb(self, text: str) -> None:
        self.breadcrumb_text = text
        self.breadcrumb_visible = True

    def hide_breadcrumb(self) -> None:
        self.breadcrumb_visible = False

    def show_modal(self, entry: ModalEntry) -> None:
        self.modal_title = entry.title
        self.modal_body = entry.body
        self.modal_visible = True
        self.dimmer_visible = True

    def hide_modal(self) -> None:
        self.modal_visible = False
        self.dimmer_visible = False

    def modal_container(self) -> ElementHandle:
        return self._modal

    def modal_close_control(self) -> ElementHandle | None:
        return self._modal_close

    def scroll_into_view(self, element: ElementHandle) -> None:
        self.scroll_requests.append(str(element))

    def describe_target(self, element: ElementHandle) -> TargetDescriptor | None:
        if not isinstance(element, HeadlessElement):
            return None
        return self._targets.get(element)
