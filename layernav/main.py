"""Command-line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from layernav.config import NavigationConfig, load_default_env_files, load_navigation_config
from layernav.core.catalog import default_registry
from layernav.core.controller import LayerController
from layernav.core.events import AudioCue
from layernav.core.registry import ContentError, ContentRegistry
from layernav.runtime.event_bus import EventBus
from layernav.runtime.logging import configure_logging, shutdown_logging
from layernav.runtime.scheduler import Scheduler
from layernav.ui.event_router import EventRouter, KeyDown, PointerClick
from layernav.ui.headless import HeadlessView

logger = logging.getLogger(__name__)


class ReplayError(ValueError):
    """Raised for a replay step that cannot be interpreted."""


class ReplaySession:
    """Headless page driven step by step from a replay script."""

    def __init__(self, registry: ContentRegistry, config: NavigationConfig) -> None:
        self.view = HeadlessView(registry)
        self.scheduler = Scheduler()
        self.events = EventBus()
        self.cues: list[str] = []
        self.events.subscribe(AudioCue, lambda event: self.cues.append(event.name))
        self.controller = LayerController(
            self.view,
            registry,
            events=self.events,
            deferrer=self.scheduler,
            config=config,
        )
        self.router = EventRouter(self.controller, self.view)

    def run_step(self, step: dict[str, object]) -> dict[str, object]:
        """Apply one step and return a report payload."""
        self.cues.clear()
        action = self._apply(step)
        focused = self.view.focused_element()
        return {
            "action": action,
            **self.controller.snapshot().to_payload(),
            "focused": None if focused is None else str(focused),
            "cues": list(self.cues),
        }

    def _apply(self, step: dict[str, object]) -> str | None:
        if "op" in step:
            return self._apply_operation(step)
        if "key" in step:
            target_id = step.get("target")
            target = self._element(target_id) if target_id is not None else self.view.focused_element()
            result = self.router.on_key_down(
                KeyDown(key=str(step["key"]), shift=bool(step.get("shift", False)), target=target)
            )
            return result.action
        if "click" in step:
            return self.router.on_click(PointerClick(target=self._element(step["click"]))).action
        if "focus" in step:
            self.view.focus(self._element(step["focus"]))
            return "focus"
        if "advance" in step:
            try:
                seconds = float(step["advance"])  # type: ignore[arg-type]
            except (TypeError, ValueError) as exc:
                raise ReplayError("advance must be a number of seconds.") from exc
            self.scheduler.advance(seconds)
            return "advance"
        raise ReplayError(f"Unsupported replay step: {step!r}")

    def _apply_operation(self, step: dict[str, object]) -> str | None:
        op = step["op"]
        if op == "open_room":
            opened = self.controller.open_room(
                str(step.get("room", "")),
                str(step.get("section", "")),
                str(step.get("component", "")),
            )
            return "open_room" if opened else None
        if op == "close_all_rooms":
            self.controller.close_all_rooms()
            return "close_all_rooms"
        if op == "open_modal":
            return "open_modal" if self.controller.open_modal(str(step.get("modal", ""))) else None
        if op == "close_modal":
            return "close_modal" if self.controller.close_modal() else None
        raise ReplayError(f"Unsupported operation: {op!r}")

    def _element(self, element_id: object) -> object:
        try:
            return self.view.element(str(element_id))
        except KeyError as exc:
            raise ReplayError(f"Unknown element: {element_id!r}") from exc


def run_replay(
    steps: Sequence[object],
    registry: ContentRegistry,
    config: NavigationConfig,
    out: TextIO,
) -> int:
    """Run replay steps, writing one JSON line per step; return processed count."""
    session = ReplaySession(registry, config)
    for index, step in enumerate(steps):
        if not isinstance(step, dict):
            raise ReplayError(f"Step {index} must be an object.")
        report = session.run_step(step)
        out.write(json.dumps({"step": index, **report}, ensure_ascii=False) + "\n")
    return len(steps)


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--content", type=Path, default=None, help="JSON content registry file.")
    common.add_argument("--log-format", choices=("text", "json"), default=None)

    parser = argparse.ArgumentParser(prog="layernav", description="Layered page navigation runtime.")
    sub = parser.add_subparsers(dest="command", required=True)
    replay = sub.add_parser("replay", parents=[common], help="Drive a headless page from a JSON step script.")
    replay.add_argument("script", type=Path)
    sub.add_parser("qt", parents=[common], help="Open the PyQt6 demo page.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the layernav command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    load_default_env_files(override_existing=False)
    config = load_navigation_config()
    if args.log_format is not None:
        config = replace(config, log_format=args.log_format)
    configure_logging(config.logging_config())

    try:
        registry = ContentRegistry.from_json_file(args.content) if args.content else default_registry()
    except (OSError, ContentError) as exc:
        parser.error(str(exc))
    logger.info("content_loaded rooms=%d modals=%d", len(registry.rooms()), len(registry.modals()))

    try:
        if args.command == "qt":
            from layernav.qt.window import run_qt_app

            return run_qt_app(registry, config, EventBus())
        try:
            steps = json.loads(args.script.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            parser.error(f"cannot read replay script: {exc}")
        if not isinstance(steps, list):
            parser.error("replay script must be a JSON list of steps")
        try:
            run_replay(steps, registry, config, sys.stdout)
        except ReplayError as exc:
            logger.error("replay_failed error=%s", exc)
            return 1
        return 0
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
