"""Config loader for twinpane."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .actions import Action

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TWINPANE_CONFIG"


@dataclass(frozen=True)
class AppConfig:
    """User-facing configuration."""

    editor: str = ""
    start_path: str = ""
    show_hidden: bool = True
    keys: dict[Action, tuple[str, ...]] = field(default_factory=dict)


def default_config_path() -> Path:
    """Return default config path (~/.config/twinpane/config.toml)."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "twinpane" / "config.toml"


def _coerce_bool(value, default=False):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in ("1", "true", "yes", "on"):
            return True
        if lower in ("0", "false", "no", "off"):
            return False
    return default


def _normalize_keys(raw) -> dict[Action, tuple[str, ...]]:
    if not isinstance(raw, dict):
        return {}
    keys = {}
    for name, value in raw.items():
        try:
            action = Action(str(name).strip().lower())
        except ValueError:
            LOGGER.warning("ignoring key binding for unknown action %r", name)
            continue
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            LOGGER.warning("ignoring malformed key binding for %s: %r", name, value)
            continue
        specs = tuple(str(item) for item in value if str(item))
        if specs:
            keys[action] = specs
    return keys


def _normalize_config(raw: dict) -> AppConfig:
    browser = raw.get("browser", raw)
    if not isinstance(browser, dict):
        browser = {}

    editor = str(browser.get("editor", "") or "").strip()
    start_path = str(browser.get("start_path", "") or "").strip()
    show_hidden = _coerce_bool(browser.get("show_hidden"), default=True)
    return AppConfig(
        editor=editor,
        start_path=start_path,
        show_hidden=show_hidden,
        keys=_normalize_keys(raw.get("keys")),
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        return AppConfig()
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        LOGGER.warning("invalid config %s: %s", cfg_path, exc)
        return AppConfig()
    return _normalize_config(raw)


def resolve_start_path(config: AppConfig, override: str | None = None) -> str:
    """Pick the starting directory: CLI argument, then config, then home."""
    candidate = override or config.start_path or "~"
    return os.path.realpath(os.path.expanduser(candidate))
