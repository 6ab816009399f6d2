"""Layered page navigation with accessible focus handling."""

from layernav.config import NavigationConfig, load_navigation_config
from layernav.core.catalog import default_registry
from layernav.core.controller import LayerController
from layernav.core.events import AudioCue, LayerChanged, attach_audio_sink
from layernav.core.registry import ContentRegistry, ModalEntry, RoomEntry
from layernav.core.state import Layer, NavigationState
from layernav.ui.event_router import EventRouter, KeyDown, PointerClick, RouteResult
from layernav.ui.focus_guard import FocusGuard
from layernav.ui.headless import HeadlessView

__all__ = [
    "AudioCue",
    "ContentRegistry",
    "EventRouter",
    "FocusGuard",
    "HeadlessView",
    "KeyDown",
    "Layer",
    "LayerChanged",
    "LayerController",
    "ModalEntry",
    "NavigationConfig",
    "NavigationState",
    "PointerClick",
    "RoomEntry",
    "RouteResult",
    "attach_audio_sink",
    "default_registry",
    "load_navigation_config",
]
