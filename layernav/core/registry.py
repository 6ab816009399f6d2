"""Read-only content registry for rooms and modal entries."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from layernav.core.state import section_id_for


class ContentError(ValueError):
    """Raised when a content payload cannot be turned into a registry."""


@dataclass(frozen=True, slots=True)
class RoomEntry:
    """Room metadata: where it lives and which modals it links to."""

    room_id: str
    section_label: str
    component_label: str
    modal_ids: tuple[str, ...] = ()

    @property
    def section_id(self) -> str:
        return section_id_for(self.section_label)


@dataclass(frozen=True, slots=True)
class ModalEntry:
    """Modal detail content."""

    modal_id: str
    title: str
    body: str


class ContentRegistry:
    """Keyed lookup of rooms and modals; never mutated after construction."""

    def __init__(self, rooms: Iterable[RoomEntry] = (), modals: Iterable[ModalEntry] = ()) -> None:
        self._rooms: Mapping[str, RoomEntry] = MappingProxyType({room.room_id: room for room in rooms})
        self._modals: Mapping[str, ModalEntry] = MappingProxyType({modal.modal_id: modal for modal in modals})

    def lookup_room(self, room_id: str) -> RoomEntry | None:
        return self._rooms.get(room_id)

    def lookup_modal(self, modal_id: str) -> ModalEntry | None:
        return self._modals.get(modal_id)

    def rooms(self) -> tuple[RoomEntry, ...]:
        return tuple(self._rooms.values())

    def modals(self) -> tuple[ModalEntry, ...]:
        return tuple(self._modals.values())

    def section_ids(self) -> tuple[str, ...]:
        """Return distinct room section ids in first-seen order."""
        seen: dict[str, None] = {}
        for room in self._rooms.values():
            seen.setdefault(room.section_id, None)
        return tuple(seen)

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> ContentRegistry:
        """Build a registry from a `{"rooms": [...], "modals": [...]}` payload."""
        raw_rooms = payload.get("rooms", [])
        raw_modals = payload.get("modals", [])
        if not isinstance(raw_rooms, list) or not isinstance(raw_modals, list):
            raise ContentError("Content rooms and modals must be lists.")

        rooms: dict[str, RoomEntry] = {}
        for item in raw_rooms:
            if not isinstance(item, dict):
                raise ContentError("Each room must be an object.")
            room_id = _text_field(item, "id", "Room").strip()
            if not room_id:
                raise ContentError("Room id is required.")
            if room_id in rooms:
                raise ContentError(f"Duplicate room id '{room_id}'.")
            raw_links = item.get("modals", [])
            if not isinstance(raw_links, list) or not all(isinstance(value, str) for value in raw_links):
                raise ContentError(f"Room '{room_id}' modals must be a list of ids.")
            rooms[room_id] = RoomEntry(
                room_id,
                _text_field(item, "section", "Room"),
                _text_field(item, "component", "Room"),
                tuple(raw_links),
            )

        modals: dict[str, ModalEntry] = {}
        for item in raw_modals:
            if not isinstance(item, dict):
                raise ContentError("Each modal must be an object.")
            modal_id = _text_field(item, "id", "Modal").strip()
            if not modal_id:
                raise ContentError("Modal id is required.")
            if modal_id in modals:
                raise ContentError(f"Duplicate modal id '{modal_id}'.")
            body = item.get("body", "")
            if not isinstance(body, str):
                raise ContentError(f"Modal '{modal_id}' body must be a string.")
            modals[modal_id] = ModalEntry(modal_id, _text_field(item, "title", "Modal"), body)

        for room in rooms.values():
            missing = [modal_id for modal_id in room.modal_ids if modal_id not in modals]
            if missing:
                raise ContentError(f"Room '{room.room_id}' links unknown modals: {', '.join(missing)}.")
        return cls(rooms.values(), modals.values())

    @classmethod
    def from_json_file(cls, path: Path) -> ContentRegistry:
        """Load a registry from a JSON content file."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ContentError(f"Content file '{path}' is not valid JSON.") from exc
        if not isinstance(payload, dict):
            raise ContentError("Content payload must be an object.")
        return cls.from_payload(payload)


def _text_field(item: Mapping[str, object], key: str, kind: str) -> str:
    value = item.get(key)
    if not isinstance(value, str):
        raise ContentError(f"{kind} field '{key}' must be a string.")
    return value
