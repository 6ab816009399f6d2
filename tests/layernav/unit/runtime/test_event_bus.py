from __future__ import annotations

from layernav.core.events import AudioCue, LayerChanged, NavigationEvent, attach_audio_sink
from layernav.core.state import Layer
from layernav.runtime.event_bus import EventBus


def test_publish_invokes_matching_subscribers() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe(AudioCue, lambda event: seen.append(event.name))

    assert bus.publish(AudioCue(name="open")) == 1
    assert seen == ["open"]


def test_base_type_subscription_receives_subclasses() -> None:
    bus = EventBus()
    seen: list[object] = []
    bus.subscribe(NavigationEvent, seen.append)

    bus.publish(AudioCue(name="modal"))
    bus.publish(LayerChanged(Layer.BASE, Layer.ROOM, "ai-core-room", None, "AI CORE ⟡ INTERNAL LOGIC", 1))

    assert len(seen) == 2


def test_unsubscribe_stops_dispatch() -> None:
    bus = EventBus()
    seen: list[str] = []
    subscription = bus.subscribe(AudioCue, lambda event: seen.append(event.name))
    bus.unsubscribe(subscription)

    assert bus.publish(AudioCue(name="close")) == 0
    assert seen == []


def test_attach_audio_sink_forwards_cue_names() -> None:
    class Sink:
        def __init__(self) -> None:
            self.played: list[str] = []

        def play(self, cue: str) -> None:
            self.played.append(cue)

    bus = EventBus()
    sink = Sink()
    attach_audio_sink(bus, sink)
    bus.publish(AudioCue(name="open"))
    bus.publish(LayerChanged(Layer.ROOM, Layer.BASE, None, None, "", 2))

    assert sink.played == ["open"]
