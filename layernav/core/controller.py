"""Layer controller: the only writer of navigation state."""

from __future__ import annotations

import logging
from collections.abc import Callable

from layernav.config import NavigationConfig
from layernav.core.breadcrumb import modal_breadcrumb, room_breadcrumb
from layernav.core.events import CUE_CLOSE, CUE_MODAL, CUE_OPEN, AudioCue, CueName, LayerChanged
from layernav.core.registry import ContentRegistry
from layernav.core.state import Layer, NavigationSnapshot, NavigationState, Room
from layernav.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable
from layernav.runtime.event_bus import EventBus
from layernav.runtime.scheduler import Deferrer, Scheduler
from layernav.ui.focus_guard import FocusGuard
from layernav.ui.view import ViewPort

logger = logging.getLogger(__name__)


class LayerController:
    """Performs the four navigation transitions over an explicitly owned state.

    Every transition runs synchronously. The only deferred work is the settle
    step (scroll and focus shift) after an open. A newer transition cancels the
    pending settle, and the callback also checks the state generation it was
    scheduled under before touching the view.
    """

    def __init__(
        self,
        view: ViewPort,
        registry: ContentRegistry,
        *,
        state: NavigationState | None = None,
        focus_guard: FocusGuard | None = None,
        events: EventBus | None = None,
        deferrer: Deferrer | None = None,
        config: NavigationConfig | None = None,
    ) -> None:
        self._view = view
        self._registry = registry
        self._state = state if state is not None else NavigationState()
        self._focus = focus_guard if focus_guard is not None else FocusGuard(view)
        self._events = events if events is not None else EventBus()
        self._deferrer = deferrer if deferrer is not None else Scheduler()
        self._config = config if config is not None else NavigationConfig()
        self._settle_task: int | None = None

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_layer(self) -> Layer:
        return self._state.current_layer

    @property
    def focus_guard(self) -> FocusGuard:
        return self._focus

    @property
    def events(self) -> EventBus:
        return self._events

    @property
    def registry(self) -> ContentRegistry:
        return self._registry

    def snapshot(self) -> NavigationSnapshot:
        """Return an immutable copy of the navigation state."""
        return NavigationSnapshot(
            current_layer=self._state.current_layer,
            active_room_id=self._state.active_room_id,
            active_modal_id=self._state.active_modal_id,
            breadcrumb_path=self._state.breadcrumb_path,
            restore_focus_target=self._focus.pending_target,
            generation=self._state.generation,
        )

    def open_room(self, room_id: str, section_label: str, component_label: str) -> bool:
        """Activate a room overlay, replacing any open room or modal."""
        container = self._view.room_container(room_id)
        if container is None:
            logger.debug("open_room_skipped room_id=%s reason=missing_container", room_id)
            return False

        previous = self._state.current_layer
        self._focus.capture_outer()
        self._deactivate_overlays()

        room = Room(id=room_id, section_label=section_label, component_label=component_label)
        breadcrumb = room_breadcrumb(section_label, component_label)
        self._view.set_room_active(room_id, True)
        self._view.set_deep_indicator(room.section_id, True)
        self._view.dim_sections(except_section=room.section_id)
        self._view.show_breadcrumb(breadcrumb)

        self._state.current_layer = Layer.ROOM
        self._state.active_room = room
        self._state.active_modal_id = None
        self._state.breadcrumb_path = breadcrumb
        self._state.advance_generation()
        logger.info("room_opened room_id=%s breadcrumb=%s", room_id, breadcrumb, extra=self._log_fields(previous))

        def settle() -> None:
            self._view.scroll_into_view(container)
            close_control = self._view.room_close_control(room_id)
            if close_control is not None:
                self._focus.move_to(close_control)

        self._defer_settle("room", settle)
        self._emit_cue(CUE_OPEN)
        self._publish_change(previous)
        return True

    def close_all_rooms(self) -> None:
        """Return to the base layer, restoring focus captured for the outermost overlay."""
        previous = self._state.current_layer
        self._cancel_settle()
        self._deactivate_overlays()
        self._view.hide_breadcrumb()

        self._state.current_layer = Layer.BASE
        self._state.active_room = None
        self._state.active_modal_id = None
        self._state.breadcrumb_path = ""
        if previous is not Layer.BASE:
            self._state.advance_generation()
        self._focus.restore_outer()

        if previous is Layer.BASE:
            return
        logger.info("rooms_closed previous=%s", previous.name, extra=self._log_fields(previous))
        self._emit_cue(CUE_CLOSE)
        self._publish_change(previous)

    def open_modal(self, modal_id: str) -> bool:
        """Show a modal detail overlay on top of the current layer."""
        entry = self._registry.lookup_modal(modal_id)
        if entry is None:
            logger.debug("open_modal_skipped modal_id=%s reason=unknown_entry", modal_id)
            return False

        previous = self._state.current_layer
        self._focus.capture_nested()
        self._view.show_modal(entry)
        breadcrumb = modal_breadcrumb(self._state.breadcrumb_path, entry.title)
        self._view.show_breadcrumb(breadcrumb)

        self._state.current_layer = Layer.MODAL
        self._state.active_modal_id = modal_id
        self._state.breadcrumb_path = breadcrumb
        self._state.advance_generation()
        if self._config.focus_trap_enabled:
            self._focus.trap(self._view.modal_container())
        logger.info("modal_opened modal_id=%s breadcrumb=%s", modal_id, breadcrumb, extra=self._log_fields(previous))

        def settle() -> None:
            close_control = self._view.modal_close_control()
            if close_control is not None:
                self._focus.move_to(close_control)

        self._defer_settle("modal", settle)
        self._emit_cue(CUE_MODAL)
        self._publish_change(previous)
        return True

    def close_modal(self) -> bool:
        """Hide the modal overlay and drop back to the room layer."""
        if self._state.current_layer is not Layer.MODAL:
            logger.debug("close_modal_skipped layer=%s", self._state.current_layer.name)
            return False

        self._cancel_settle()
        self._view.hide_modal()
        self._focus.release_trap()
        room = self._state.active_room
        if room is not None:
            breadcrumb = room_breadcrumb(room.section_label, room.component_label)
            self._view.show_breadcrumb(breadcrumb)
            self._state.breadcrumb_path = breadcrumb
            self._state.current_layer = Layer.ROOM
        elif self._config.close_modal_to_base:
            self._view.hide_breadcrumb()
            self._state.breadcrumb_path = ""
            self._state.current_layer = Layer.BASE
        else:
            logger.warning(
                "modal_closed_without_room layer=ROOM breadcrumb=%s",
                self._state.breadcrumb_path,
            )
            self._state.current_layer = Layer.ROOM
        closed_modal_id = self._state.active_modal_id
        self._state.active_modal_id = None
        self._state.advance_generation()
        self._focus.restore()

        logger.info(
            "modal_closed layer=%s",
            self._state.current_layer.name,
            extra=self._log_fields(Layer.MODAL, modal_id=closed_modal_id),
        )
        self._emit_cue(CUE_CLOSE)
        self._publish_change(Layer.MODAL)
        return True

    def dismiss(self) -> str | None:
        """Close the topmost layer (Escape key and page-dimmer clicks)."""
        layer = self._state.current_layer
        if layer is Layer.MODAL:
            self.close_modal()
            return "close_modal"
        if layer is Layer.ROOM:
            self.close_all_rooms()
            return "close_all_rooms"
        return None

    def _deactivate_overlays(self) -> None:
        self._view.deactivate_all_rooms()
        self._view.clear_dimming()
        if self._state.current_layer is Layer.MODAL:
            self._view.hide_modal()
        self._focus.release_trap()

    def _defer_settle(self, kind: str, action: Callable[[], None]) -> None:
        self._cancel_settle()
        generation = self._state.generation

        def run() -> None:
            self._settle_task = None
            if self._state.generation != generation:
                logger.debug(
                    "settle_discarded kind=%s scheduled=%d current=%d",
                    kind,
                    generation,
                    self._state.generation,
                )
                return
            try:
                action()
            except RECOVERABLE_RUNTIME_ERRORS:
                log_recoverable(logger, f"settle_failed kind={kind}", level=logging.WARNING)

        self._settle_task = self._deferrer.call_later(self._config.settle_delay_seconds, run)

    def _cancel_settle(self) -> None:
        if self._settle_task is None:
            return
        self._deferrer.cancel(self._settle_task)
        logger.debug("settle_cancelled task_id=%d", self._settle_task)
        self._settle_task = None

    def _log_fields(self, previous: Layer, *, modal_id: str | None = None) -> dict[str, object]:
        return {
            "previous_layer": previous.name,
            "layer": self._state.current_layer.name,
            "room_id": self._state.active_room_id,
            "modal_id": modal_id if modal_id is not None else self._state.active_modal_id,
            "generation": self._state.generation,
        }

    def _emit_cue(self, name: CueName) -> None:
        if not self._config.audio_cues_enabled:
            return
        self._publish(AudioCue(name=name))

    def _publish_change(self, previous: Layer) -> None:
        self._publish(
            LayerChanged(
                previous=previous,
                current=self._state.current_layer,
                room_id=self._state.active_room_id,
                modal_id=self._state.active_modal_id,
                breadcrumb=self._state.breadcrumb_path,
                generation=self._state.generation,
            )
        )

    def _publish(self, event: object) -> None:
        try:
            self._events.publish(event)
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(logger, f"event_handler_failed event={type(event).__name__}", level=logging.WARNING)
