"""Qt window wiring: key filter, deferral and application bootstrap."""

from __future__ import annotations

import logging
from collections.abc import Callable

from layernav.config import NavigationConfig
from layernav.core.controller import LayerController
from layernav.core.registry import ContentRegistry
from layernav.qt.view import QtPageView
from layernav.runtime.event_bus import EventBus
from layernav.ui.event_router import EventRouter, KeyDown, PointerClick

try:
    from PyQt6.QtCore import QEvent, QObject, Qt, QTimer
    from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt view. Install extra 'layernav[qt]'.") from exc

logger = logging.getLogger(__name__)

_ROUTED_KEYS: dict[int, str] = {
    Qt.Key.Key_Escape.value: "Escape",
    Qt.Key.Key_Tab.value: "Tab",
    Qt.Key.Key_Backtab.value: "Tab",
    Qt.Key.Key_Return.value: "Enter",
    Qt.Key.Key_Enter.value: "Enter",
    Qt.Key.Key_Space.value: " ",
}


class QtDeferrer:
    """Deferral backed by single-shot Qt timers."""

    def __init__(self) -> None:
        self._next_task_id = 1
        self._timers: dict[int, QTimer] = {}

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> int:
        task_id = self._next_task_id
        self._next_task_id += 1
        timer = QTimer()
        timer.setSingleShot(True)

        def fire() -> None:
            self._timers.pop(task_id, None)
            callback()

        timer.timeout.connect(fire)
        self._timers[task_id] = timer
        timer.start(max(0, int(delay_seconds * 1000)))
        return task_id

    def cancel(self, task_id: int) -> None:
        timer = self._timers.pop(task_id, None)
        if timer is not None:
            timer.stop()


class _KeyFilter(QObject):
    """Application-wide key filter forwarding navigation keys to the router."""

    def __init__(self, router: EventRouter) -> None:
        super().__init__()
        self._router = router

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if event.type() != QEvent.Type.KeyPress or not isinstance(watched, QWidget):
            return False
        key_name = _ROUTED_KEYS.get(event.key())
        if key_name is None:
            return False
        # An unhandled key press propagates to every parent widget; route it once.
        focused = QApplication.focusWidget()
        receiver = focused if focused is not None else watched.window()
        if watched is not receiver:
            return False
        shift = event.key() == Qt.Key.Key_Backtab.value or bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
        result = self._router.on_key_down(KeyDown(key=key_name, shift=shift, target=focused))
        return result.prevent_default


class NavigationWindow(QMainWindow):
    """Main window hosting the navigable page."""

    def __init__(self, registry: ContentRegistry, config: NavigationConfig, events: EventBus) -> None:
        super().__init__()
        self.page = QtPageView(registry, self._click)
        self.controller = LayerController(
            self.page,
            registry,
            events=events,
            deferrer=QtDeferrer(),
            config=config,
        )
        self.router = EventRouter(self.controller, self.page)
        self.key_filter = _KeyFilter(self.router)
        self.setCentralWidget(self.page)
        self.setWindowTitle("layernav")
        self.resize(960, 720)

    def _click(self, widget: QWidget) -> None:
        result = self.router.on_click(PointerClick(target=widget))
        logger.debug("qt_click widget=%s action=%s", type(widget).__name__, result.action)


def run_qt_app(registry: ContentRegistry, config: NavigationConfig, events: EventBus) -> int:
    """Open the navigation window and run the Qt event loop."""
    app = QApplication.instance() or QApplication([])
    window = NavigationWindow(registry, config, events)
    app.installEventFilter(window.key_filter)
    window.show()
    return app.exec()
