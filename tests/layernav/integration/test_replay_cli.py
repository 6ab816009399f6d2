from __future__ import annotations

import json
import logging

import pytest

from layernav.main import main


@pytest.fixture
def isolated_logging(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield tmp_path
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)


def _write_script(path, steps) -> str:
    path.write_text(json.dumps(steps), encoding="utf-8")
    return str(path)


def test_replay_prints_one_snapshot_per_step(isolated_logging, capsys) -> None:
    script = _write_script(
        isolated_logging / "steps.json",
        [
            {"focus": "ai-core-room-trigger"},
            {"click": "ai-core-room-trigger"},
            {"advance": 0.1},
            {"op": "open_modal", "modal": "decision-tree"},
            {"key": "Escape"},
            {"key": "Escape"},
        ],
    )

    assert main(["replay", script]) == 0

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [line["step"] for line in lines] == [0, 1, 2, 3, 4, 5]
    assert lines[1]["layer"] == "ROOM"
    assert lines[1]["cues"] == ["open"]
    assert lines[2]["focused"] == "ai-core-room-close"
    assert lines[3]["breadcrumb"] == "AI CORE ⟡ INTERNAL LOGIC ⟡ DECISION TREE"
    assert lines[4]["action"] == "close_modal"
    assert lines[5]["layer"] == "BASE"
    assert lines[5]["focused"] == "ai-core-room-trigger"
    assert lines[5]["restore_focus"] is None


def test_replay_with_custom_content(isolated_logging, capsys) -> None:
    content = isolated_logging / "content.json"
    content.write_text(
        json.dumps(
            {
                "rooms": [{"id": "dock-room", "section": "HARBOR", "component": "DOCK", "modals": ["crane"]}],
                "modals": [{"id": "crane", "title": "HARBOR ⟡ CRANE", "body": "lifts"}],
            }
        ),
        encoding="utf-8",
    )
    script = _write_script(
        isolated_logging / "steps.json",
        [{"click": "dock-room-trigger"}, {"click": "dock-room-link-crane"}],
    )

    assert main(["replay", script, "--content", str(content), "--log-format", "json"]) == 0

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert lines[-1]["breadcrumb"] == "HARBOR ⟡ DOCK ⟡ CRANE"


def test_replay_unknown_element_fails(isolated_logging) -> None:
    script = _write_script(isolated_logging / "steps.json", [{"click": "nope"}])
    assert main(["replay", script]) == 1


def test_replay_rejects_non_list_script(isolated_logging) -> None:
    script = _write_script(isolated_logging / "steps.json", {"click": "nope"})
    with pytest.raises(SystemExit):
        main(["replay", script])
