from __future__ import annotations

from collections.abc import Sequence

import pytest

from layernav.config import NavigationConfig
from layernav.core.catalog import default_registry
from layernav.core.controller import LayerController
from layernav.core.events import AudioCue, LayerChanged
from layernav.core.registry import ContentRegistry
from layernav.runtime.event_bus import EventBus
from layernav.runtime.scheduler import Scheduler
from layernav.ui.event_router import EventRouter
from layernav.ui.headless import HeadlessView

SETTLE = NavigationConfig().settle_delay_seconds


class FakeFocusHost:
    """Flat focus host: elements are strings, containers map to child lists."""

    def __init__(self, containers: dict[str, Sequence[str]] | None = None) -> None:
        self.focused: str | None = None
        self.detached: set[str] = set()
        self.containers: dict[str, list[str]] = {key: list(value) for key, value in (containers or {}).items()}
        self.focus_calls: list[str] = []

    def focused_element(self) -> str | None:
        return self.focused

    def focus(self, element: str) -> None:
        self.focus_calls.append(element)
        self.focused = element

    def is_attached(self, element: str) -> bool:
        return element not in self.detached

    def focusable_descendants(self, container: str) -> Sequence[str]:
        return tuple(self.containers.get(container, ()))


class Recorder:
    def __init__(self, bus: EventBus) -> None:
        self.cues: list[str] = []
        self.changes: list[LayerChanged] = []
        bus.subscribe(AudioCue, lambda event: self.cues.append(event.name))
        bus.subscribe(LayerChanged, self.changes.append)


@pytest.fixture
def registry() -> ContentRegistry:
    return default_registry()


@pytest.fixture
def view(registry: ContentRegistry) -> HeadlessView:
    return HeadlessView(registry)


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorder(bus: EventBus) -> Recorder:
    return Recorder(bus)


@pytest.fixture
def controller(view: HeadlessView, registry: ContentRegistry, bus: EventBus, scheduler: Scheduler) -> LayerController:
    return LayerController(view, registry, events=bus, deferrer=scheduler)


@pytest.fixture
def router(controller: LayerController, view: HeadlessView) -> EventRouter:
    return EventRouter(controller, view)
