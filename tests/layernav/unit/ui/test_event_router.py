from __future__ import annotations

from layernav.core.state import Layer
from layernav.ui.event_router import EventRouter, KeyDown, PointerClick, map_key_name, normalize_room_id
from layernav.ui.headless import HeadlessView
from layernav.ui.view import RoomTrigger
from tests.layernav.conftest import SETTLE


def test_map_key_name_normalizes_navigation_keys() -> None:
    assert map_key_name("Escape") == "escape"
    assert map_key_name("Esc") == "escape"
    assert map_key_name("Return") == "enter"
    assert map_key_name(" ") == "space"
    assert map_key_name("Spacebar") == "space"
    assert map_key_name("Tab") == "tab"
    assert map_key_name("Shift") is None


def test_normalize_room_id_appends_suffix_once() -> None:
    assert normalize_room_id("ai-core") == "ai-core-room"
    assert normalize_room_id("ai-core-room") == "ai-core-room"


def test_escape_in_modal_invokes_close_modal_once(controller, router, monkeypatch) -> None:
    controller.open_room("ai-core-room", "AI CORE", "INTERNAL LOGIC")
    controller.open_modal("decision-tree")
    calls: list[str] = []
    monkeypatch.setattr(controller, "close_modal", lambda: calls.append("close_modal"))
    monkeypatch.setattr(controller, "close_all_rooms", lambda: calls.append("close_all_rooms"))

    result = router.on_key_down(KeyDown("Escape"))

    assert result.action == "close_modal"
    assert result.prevent_default
    assert calls == ["close_modal"]


def test_escape_in_room_invokes_close_all_rooms_once(controller, router, monkeypatch) -> None:
    controller.open_room("ai-core-room", "AI CORE", "INTERNAL LOGIC")
    calls: list[str] = []
    monkeypatch.setattr(controller, "close_modal", lambda: calls.append("close_modal"))
    monkeypatch.setattr(controller, "close_all_rooms", lambda: calls.append("close_all_rooms"))

    result = router.on_key_down(KeyDown("Escape"))

    assert result.action == "close_all_rooms"
    assert calls == ["close_all_rooms"]


def test_escape_at_base_does_nothing(controller, router, recorder) -> None:
    result = router.on_key_down(KeyDown("Escape"))
    assert result.action is None
    assert not result.prevent_default
    assert controller.current_layer is Layer.BASE
    assert recorder.cues == []


def test_click_room_trigger_opens_room(controller, router, view) -> None:
    result = router.on_click(PointerClick(view.element("processor-room-trigger")))
    assert result.action == "open_room"
    assert controller.state.breadcrumb_path == "HARDWARE ⟡ PROCESSOR"


def test_enter_and_space_activate_triggers(controller, router, view) -> None:
    result = router.on_key_down(KeyDown("Enter", target=view.element("ai-core-room-trigger")))
    assert result.action == "open_room"
    assert result.prevent_default

    result = router.on_key_down(KeyDown(" ", target=view.element("ai-core-room-link-feedback-system")))
    assert result.action == "open_modal"
    assert result.prevent_default
    assert controller.state.breadcrumb_path == "AI CORE ⟡ INTERNAL LOGIC ⟡ FEEDBACK SYSTEM"


def test_enter_on_plain_element_is_not_handled(router, view) -> None:
    result = router.on_key_down(KeyDown("Enter", target=view.element("system")))
    assert result.action is None
    assert not result.prevent_default


def test_secondary_click_is_ignored(controller, router, view) -> None:
    result = router.on_click(PointerClick(view.element("ai-core-room-trigger"), button=3))
    assert result.action is None
    assert controller.current_layer is Layer.BASE


def test_close_controls_route_to_matching_operations(controller, router, view) -> None:
    router.on_click(PointerClick(view.element("ai-core-room-trigger")))
    router.on_click(PointerClick(view.element("ai-core-room-link-decision-tree")))

    assert router.on_click(PointerClick(view.element("modal-close"))).action == "close_modal"
    assert controller.current_layer is Layer.ROOM
    assert router.on_click(PointerClick(view.element("ai-core-room-close"))).action == "close_all_rooms"
    assert controller.current_layer is Layer.BASE


def test_modal_close_outside_modal_reports_no_action(router, view) -> None:
    assert router.on_click(PointerClick(view.element("modal-close"))).action is None


def test_dimmer_click_follows_layer(controller, router, view) -> None:
    dimmer = view.element("page-dimmer")
    assert router.on_click(PointerClick(dimmer)).action is None

    controller.open_room("ai-core-room", "AI CORE", "INTERNAL LOGIC")
    controller.open_modal("decision-tree")
    assert router.on_click(PointerClick(dimmer)).action == "close_modal"
    assert router.on_click(PointerClick(dimmer)).action == "close_all_rooms"
    assert controller.current_layer is Layer.BASE


def test_tab_wraps_inside_modal_trap(controller, router, view, scheduler) -> None:
    controller.open_modal("decision-tree")
    scheduler.advance(SETTLE)
    assert view.focused is view.element("modal-close")

    result = router.on_key_down(KeyDown("Tab"))
    assert result.prevent_default
    assert view.focused is view.element("modal-close")


def test_tab_without_trap_uses_default(router) -> None:
    result = router.on_key_down(KeyDown("Tab", shift=True))
    assert result.action is None
    assert not result.prevent_default


def test_short_room_id_and_missing_label_resolve_through_registry(controller, registry) -> None:
    class ShortIdView(HeadlessView):
        def describe_target(self, element):
            if element == "card":
                return RoomTrigger("ai-core", "AI CORE")
            return super().describe_target(element)

    view = ShortIdView(registry)
    router = EventRouter(controller, view)

    result = router.on_click(PointerClick("card"))

    assert result.action == "open_room"
    assert controller.state.active_room_id == "ai-core-room"
    assert controller.state.breadcrumb_path == "AI CORE ⟡ INTERNAL LOGIC"


def test_trigger_for_missing_room_reports_no_action(registry, controller) -> None:
    class GhostView(HeadlessView):
        def describe_target(self, element):
            return RoomTrigger("ghost", "NOWHERE", "NOTHING")

    router = EventRouter(controller, GhostView(registry))
    assert router.on_click(PointerClick("anything")).action is None
    assert controller.current_layer is Layer.BASE
