from __future__ import annotations

from layernav.core.state import Layer, NavigationSnapshot, NavigationState, Room, section_id_for


def test_layer_values_are_depths() -> None:
    assert [layer.value for layer in Layer] == [1, 2, 3]


def test_section_id_for_label() -> None:
    assert section_id_for("AI CORE") == "ai-core"
    assert section_id_for(" System ") == "system"


def test_room_exposes_section_id() -> None:
    assert Room("ai-core-room", "AI CORE", "INTERNAL LOGIC").section_id == "ai-core"


def test_initial_state_is_base_and_consistent() -> None:
    state = NavigationState()
    assert state.current_layer is Layer.BASE
    assert state.active_room_id is None
    assert state.is_consistent()


def test_consistency_rejects_identifiers_at_wrong_layer() -> None:
    room = Room("ai-core-room", "AI CORE", "INTERNAL LOGIC")
    assert not NavigationState(current_layer=Layer.BASE, active_room=room).is_consistent()
    assert not NavigationState(current_layer=Layer.ROOM, active_modal_id="decision-tree").is_consistent()
    assert NavigationState(current_layer=Layer.MODAL, active_room=room, active_modal_id="decision-tree").is_consistent()


def test_advance_generation_is_monotonic() -> None:
    state = NavigationState()
    assert state.advance_generation() == 1
    assert state.advance_generation() == 2


def test_snapshot_payload() -> None:
    snapshot = NavigationSnapshot(
        current_layer=Layer.ROOM,
        active_room_id="ai-core-room",
        active_modal_id=None,
        breadcrumb_path="AI CORE ⟡ INTERNAL LOGIC",
        restore_focus_target="trigger",
        generation=3,
    )
    assert snapshot.to_payload() == {
        "layer": "ROOM",
        "room": "ai-core-room",
        "modal": None,
        "breadcrumb": "AI CORE ⟡ INTERNAL LOGIC",
        "restore_focus": "trigger",
        "generation": 3,
    }
