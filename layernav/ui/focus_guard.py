"""Focus capture/restore and cyclic tab trapping for overlays."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from layernav.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable
from layernav.ui.view import ElementHandle, FocusHost

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FocusTrap:
    """Installed trap: focusable order is fixed at install time."""

    trap_id: int
    container: ElementHandle
    elements: tuple[ElementHandle, ...]

    @property
    def first(self) -> ElementHandle | None:
        return self.elements[0] if self.elements else None

    @property
    def last(self) -> ElementHandle | None:
        return self.elements[-1] if self.elements else None


class FocusGuard:
    """Owns the restore-target slot and the single active trap.

    `capture` and `restore` work on one slot, last capture wins. A modal opened
    over a room uses `capture_nested`, which sets the room's target aside so
    each close consumes the target captured for its own overlay.
    """

    def __init__(self, host: FocusHost) -> None:
        self._host = host
        self._restore_target: ElementHandle | None = None
        self._held_target: ElementHandle | None = None
        self._trap: FocusTrap | None = None
        self._next_trap_id = 1

    @property
    def pending_target(self) -> ElementHandle | None:
        return self._restore_target

    @property
    def held_target(self) -> ElementHandle | None:
        """Outer overlay target waiting behind a nested capture."""
        return self._held_target

    @property
    def active_trap(self) -> FocusTrap | None:
        return self._trap

    def capture(self) -> ElementHandle | None:
        """Record the focused element as restore target; last capture wins."""
        self._restore_target = self._host.focused_element()
        logger.debug("focus_captured target=%s", self._restore_target)
        return self._restore_target

    def capture_outer(self) -> ElementHandle | None:
        """Capture for an outermost overlay unless a target is already pending.

        A nested target is dropped first, so the element that opened the first
        overlay survives switching between rooms.
        """
        if self._held_target is not None:
            self._restore_target, self._held_target = self._held_target, None
        if self._restore_target is None:
            return self.capture()
        return self._restore_target

    def capture_nested(self) -> ElementHandle | None:
        """Capture for an overlay stacked on another, holding the outer target."""
        if self._held_target is None and self._restore_target is not None:
            self._held_target = self._restore_target
        return self.capture()

    def restore(self) -> bool:
        """Focus and clear the recorded target; no-op without one.

        A held outer target becomes pending again afterwards.
        """
        target = self._restore_target
        self._restore_target, self._held_target = self._held_target, None
        if target is None:
            return False
        return self.move_to(target)

    def restore_outer(self) -> bool:
        """Unwind every pending target and focus the outermost one."""
        target = self._held_target if self._held_target is not None else self._restore_target
        self._restore_target = None
        self._held_target = None
        if target is None:
            return False
        return self.move_to(target)

    def move_to(self, element: ElementHandle) -> bool:
        """Focus `element` unless it has left the page."""
        try:
            if not self._host.is_attached(element):
                logger.debug("focus_target_detached target=%s", element)
                return False
            self._host.focus(element)
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(logger, "focus_move_failed")
            return False
        return True

    def trap(self, container: ElementHandle) -> FocusTrap:
        """Install a cyclic tab trap over `container`, replacing any previous one."""
        elements = tuple(self._host.focusable_descendants(container))
        if self._trap is not None:
            logger.debug("focus_trap_replaced trap_id=%d", self._trap.trap_id)
        self._trap = FocusTrap(trap_id=self._next_trap_id, container=container, elements=elements)
        self._next_trap_id += 1
        logger.debug("focus_trap_installed trap_id=%d elements=%d", self._trap.trap_id, len(elements))
        return self._trap

    def release_trap(self) -> None:
        """Uninstall the active trap if any."""
        if self._trap is not None:
            logger.debug("focus_trap_released trap_id=%d", self._trap.trap_id)
        self._trap = None

    def handle_tab(self, shift: bool) -> bool:
        """Wrap Tab at the trap edges; return True when default traversal is prevented."""
        trap = self._trap
        if trap is None or not trap.elements:
            return False
        current = self._host.focused_element()
        if shift and current == trap.first:
            self.move_to(trap.last)
            return True
        if not shift and current == trap.last:
            self.move_to(trap.first)
            return True
        return False
