"""Notification events published by the layer controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from layernav.core.state import Layer
from layernav.runtime.event_bus import EventBus, Subscription

CueName = Literal["open", "close", "modal"]

CUE_OPEN: CueName = "open"
CUE_CLOSE: CueName = "close"
CUE_MODAL: CueName = "modal"


@dataclass(frozen=True, slots=True)
class NavigationEvent:
    """Base type for navigation notifications."""


@dataclass(frozen=True, slots=True)
class AudioCue(NavigationEvent):
    """Request to play a named sound cue."""

    name: CueName


@dataclass(frozen=True, slots=True)
class LayerChanged(NavigationEvent):
    """Emitted after every state-changing transition."""

    previous: Layer
    current: Layer
    room_id: str | None
    modal_id: str | None
    breadcrumb: str
    generation: int


class AudioCueSink(Protocol):
    """Anything able to play a named cue."""

    def play(self, cue: str) -> None: ...


def attach_audio_sink(bus: EventBus, sink: AudioCueSink) -> Subscription:
    """Forward AudioCue events on `bus` to `sink.play`."""
    return bus.subscribe(AudioCue, lambda event: sink.play(event.name))
