"""Navigation configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from layernav.runtime.logging import LoggingConfig

DEFAULT_SETTLE_DELAY_MS = 100


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    Missing files are ignored.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load `.env` then `.env.local`; later files win."""
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Immutable navigation behaviour configuration."""

    settle_delay_seconds: float = DEFAULT_SETTLE_DELAY_MS / 1000.0
    focus_trap_enabled: bool = True
    audio_cues_enabled: bool = True
    # Off keeps the observed transition: closing a modal lands on ROOM even with no room.
    close_modal_to_base: bool = False
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: str | None = None

    def logging_config(self) -> LoggingConfig:
        """Return the logging pipeline settings for this configuration."""
        return LoggingConfig(
            level_name=self.log_level,
            console_format=self.log_format,
            file_path=self.log_file,
        )


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("LAYERNAV_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_navigation_config() -> NavigationConfig:
    """Load immutable navigation configuration from env vars."""
    settle_ms = max(0, _int("LAYERNAV_SETTLE_DELAY_MS", DEFAULT_SETTLE_DELAY_MS))
    log_format = os.getenv("LAYERNAV_LOG_FORMAT", "text").strip().lower()
    log_file = os.getenv("LAYERNAV_LOG_FILE", "").strip() or None
    return NavigationConfig(
        settle_delay_seconds=settle_ms / 1000.0,
        focus_trap_enabled=_flag("LAYERNAV_FOCUS_TRAP", True),
        audio_cues_enabled=_flag("LAYERNAV_AUDIO_CUES", True),
        close_modal_to_base=_flag("LAYERNAV_CLOSE_MODAL_TO_BASE", False),
        log_level=resolve_log_level_name(),
        log_format=log_format if log_format in {"text", "json"} else "text",
        log_file=log_file,
    )
