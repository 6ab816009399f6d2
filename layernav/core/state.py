"""Navigation state model."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import IntEnum


class Layer(IntEnum):
    """Navigation depth, shallowest first."""

    BASE = 1
    ROOM = 2
    MODAL = 3


def section_id_for(section_label: str) -> str:
    """Derive a section id from its display label (`"AI CORE"` -> `ai-core`)."""
    return "-".join(section_label.strip().lower().split())


@dataclass(frozen=True, slots=True)
class Room:
    """Room resolved at open time."""

    id: str
    section_label: str
    component_label: str

    @property
    def section_id(self) -> str:
        return section_id_for(self.section_label)


@dataclass(frozen=True, slots=True)
class NavigationSnapshot:
    """Immutable view of navigation state for comparison and reporting."""

    current_layer: Layer
    active_room_id: str | None
    active_modal_id: str | None
    breadcrumb_path: str
    restore_focus_target: Hashable | None
    generation: int

    def to_payload(self) -> dict[str, object]:
        """Convert snapshot into a JSON-serializable payload."""
        target = self.restore_focus_target
        return {
            "layer": self.current_layer.name,
            "room": self.active_room_id,
            "modal": self.active_modal_id,
            "breadcrumb": self.breadcrumb_path,
            "restore_focus": None if target is None else str(target),
            "generation": self.generation,
        }


@dataclass(slots=True)
class NavigationState:
    """Single source of truth owned by one LayerController per page session.

    `generation` increases on every state-changing transition and tags deferred
    settle callbacks so stale ones can be discarded.
    """

    current_layer: Layer = Layer.BASE
    active_room: Room | None = None
    active_modal_id: str | None = None
    breadcrumb_path: str = ""
    generation: int = 0

    @property
    def active_room_id(self) -> str | None:
        return None if self.active_room is None else self.active_room.id

    def advance_generation(self) -> int:
        self.generation += 1
        return self.generation

    def is_consistent(self) -> bool:
        """Check the layer/identifier invariants."""
        if self.active_modal_id is not None and self.current_layer is not Layer.MODAL:
            return False
        if self.active_room is not None and self.current_layer is Layer.BASE:
            return False
        if self.current_layer is Layer.BASE:
            return self.active_room is None and self.active_modal_id is None
        return True
