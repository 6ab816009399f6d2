"""PyQt6 widget page implementing the view port."""

from __future__ import annotations

from collections.abc import Callable, Sequence

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

try:
    from PyQt6.QtCore import Qt
    from PyQt6.QtWidgets import (
        QApplication,
        QFrame,
        QGraphicsOpacityEffect,
        QLabel,
        QPushButton,
        QScrollArea,
        QVBoxLayout,
        QWidget,
    )
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt view. Install extra 'layernav[qt]'.") from exc

DIM_OPACITY = 0.3
HERO_SECTION_ID = "hero"


class _Dimmer(QWidget):
    """Full-page backdrop reporting clicks to the router."""

    def __init__(self, parent: QWidget, on_click: Callable[[QWidget], None]) -> None:
        super().__init__(parent)
        self._on_click = on_click
        self.setStyleSheet("background: rgba(0, 0, 0, 160);")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.hide()

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        self._on_click(self)


class QtPageView(QWidget):
    """Scrollable page with section frames, room panels and a modal overlay."""

    def __init__(self, registry: ContentRegistry, on_click: Callable[[QWidget], None]) -> None:
        super().__init__()
        self._on_click = on_click
        self._targets: dict[QWidget, TargetDescriptor] = {}
        self._rooms: dict[str, QFrame] = {}
        self._room_close: dict[str, QPushButton] = {}
        self._sections: dict[str, QFrame] = {}
        self._indicators: dict[str, QLabel] = {}

        root_layout = QVBoxLayout(self)
        self._breadcrumb = QLabel("")
        self._breadcrumb.hide()
        root_layout.addWidget(self._breadcrumb)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        page = QWidget()
        page_layout = QVBoxLayout(page)
        self._scroll.setWidget(page)
        root_layout.addWidget(self._scroll)

        hero = self._section(page_layout, HERO_SECTION_ID, "DRo1D")
        hero.setMinimumHeight(120)
        for room in registry.rooms():
            section = self._sections.get(room.section_id)
            if section is None:
                section = self._section(page_layout, room.section_id, room.section_label)
            layout = section.layout()
            trigger = self._button(room.component_label, RoomTrigger(room.room_id, room.section_label, room.component_label))
            layout.addWidget(trigger)

            panel = QFrame()
            panel.setFrameShape(QFrame.Shape.StyledPanel)
            panel_layout = QVBoxLayout(panel)
            panel_layout.addWidget(QLabel(f"{room.section_label} ⟡ {room.component_label}"))
            close = self._button("CLOSE", RoomCloseControl(room.room_id))
            panel_layout.addWidget(close)
            for modal_id in room.modal_ids:
                entry = registry.lookup_modal(modal_id)
                label = entry.title if entry is not None else modal_id
                panel_layout.addWidget(self._button(label, ModalTrigger(modal_id)))
            panel.hide()
            layout.addWidget(panel)
            self._rooms[room.room_id] = panel
            self._room_close[room.room_id] = close

        self._dimmer = _Dimmer(self, on_click)
        self._targets[self._dimmer] = PageDimmer()
        self._modal = QFrame(self)
        self._modal.setFrameShape(QFrame.Shape.Box)
        self._modal.setAutoFillBackground(True)
        modal_layout = QVBoxLayout(self._modal)
        self._modal_title = QLabel("")
        self._modal_body = QLabel("")
        self._modal_body.setWordWrap(True)
        self._modal_close = self._button("CLOSE", ModalCloseControl())
        modal_layout.addWidget(self._modal_title)
        modal_layout.addWidget(self._modal_body)
        modal_layout.addWidget(self._modal_close)
        self._modal.hide()

    def _section(self, page_layout: QVBoxLayout, section_id: str, title: str) -> QFrame:
        section = QFrame()
        layout = QVBoxLayout(section)
        header = QLabel(title)
        indicator = QLabel("◆ DEEP VIEW")
        indicator.hide()
        layout.addWidget(header)
        layout.addWidget(indicator)
        page_layout.addWidget(section)
        self._sections[section_id] = section
        self._indicators[section_id] = indicator
        return section

    def _button(self, text: str, descriptor: TargetDescriptor) -> QPushButton:
        button = QPushButton(text)
        button.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        button.clicked.connect(lambda _checked=False, widget=button: self._on_click(widget))
        self._targets[button] = descriptor
        return button

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._dimmer.setGeometry(self.rect())
        width = min(640, self.width() - 40)
        self._modal.setGeometry((self.width() - width) // 2, 80, width, max(200, self.height() // 2))

    # Focus host

    def focused_element(self) -> ElementHandle | None:
        return QApplication.focusWidget()

    def focus(self, element: ElementHandle) -> None:
        if not isinstance(element, QWidget):
            raise TypeError(f"not a widget: {element!r}")
        element.setFocus(Qt.FocusReason.OtherFocusReason)

    def is_attached(self, element: ElementHandle) -> bool:
        if not isinstance(element, QWidget):
            return False
        try:
            return element is self or self.isAncestorOf(element)
        except RuntimeError:
            # Underlying C++ widget already deleted.
            return False

    def focusable_descendants(self, container: ElementHandle) -> Sequence[ElementHandle]:
        if not isinstance(container, QWidget):
            return ()
        return tuple(
            widget
            for widget in container.findChildren(QWidget)
            if widget.focusPolicy().value & Qt.FocusPolicy.TabFocus.value
        )

    # View port

    def room_container(self, room_id: str) -> ElementHandle | None:
        return self._rooms.get(room_id)

    def room_close_control(self, room_id: str) -> ElementHandle | None:
        return self._room_close.get(room_id)

    def set_room_active(self, room_id: str, active: bool) -> None:
        panel = self._rooms.get(room_id)
        if panel is not None:
            panel.setVisible(active)

    def deactivate_all_rooms(self) -> None:
        for panel in self._rooms.values():
            panel.hide()
        for indicator in self._indicators.values():
            indicator.hide()

    def set_deep_indicator(self, section_id: str, active: bool) -> None:
        indicator = self._indicators.get(section_id)
        if indicator is not None:
            indicator.setVisible(active)

    def dim_sections(self, except_section: str | None) -> None:
        for section_id, section in self._sections.items():
            if section_id == except_section:
                section.setGraphicsEffect(None)
                continue
            effect = QGraphicsOpacityEffect(section)
            effect.setOpacity(DIM_OPACITY)
            section.setGraphicsEffect(effect)

    def clear_dimming(self) -> None:
        for section in self._sections.values():
            section.setGraphicsEffect(None)

    def show_breadcrumb(self, text: str) -> None:
        self._breadcrumb.setText(text)
        self._breadcrumb.show()

    def hide_breadcrumb(self) -> None:
        self._breadcrumb.hide()

    def show_modal(self, entry: ModalEntry) -> None:
        self._modal_title.setText(entry.title)
        self._modal_body.setText(entry.body)
        self._dimmer.show()
        self._dimmer.raise_()
        self._modal.show()
        self._modal.raise_()

    def hide_modal(self) -> None:
        self._modal.hide()
        self._dimmer.hide()

    def modal_container(self) -> ElementHandle:
        return self._modal

    def modal_close_control(self) -> ElementHandle | None:
        return self._modal_close

    def scroll_into_view(self, element: ElementHandle) -> None:
        if isinstance(element, QWidget):
            self._scroll.ensureWidgetVisible(element)

    def describe_target(self, element: ElementHandle) -> TargetDescriptor | None:
        if not isinstance(element, QWidget):
            return None
        return self._targets.get(element)
