"""Viewer options and persistent JSON preferences.

Options resolve as command line, then environment, then the persisted
preference file, then defaults. All preference-file access is defensive:
malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import normalize_scheme_name

APP_NAME = "json-view"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

ENV_ASCII = "JSON_VIEW_ASCII"
ENV_NO_MOUSE = "JSON_VIEW_NO_MOUSE"
ENV_COLOR_SCHEME = "JSON_VIEW_COLOR_SCHEME"


@dataclass(frozen=True)
class ViewerConfig:
    paths: tuple[str, ...] = field(default_factory=tuple)
    mouse_enabled: bool = True
    ascii_glyphs: bool = False
    color_scheme: str = "default"
    parse_only: bool = False
    validate: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write failures are ignored."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_color_scheme() -> str | None:
    value = load_config().get("color_scheme")
    if not isinstance(value, str) or not value.strip():
        return None
    return normalize_scheme_name(value)


def save_color_scheme(name: str) -> None:
    config = load_config()
    config["color_scheme"] = normalize_scheme_name(name)
    save_config(config)


def _env_flag(env: Mapping[str, str], name: str) -> bool:
    return bool(env.get(name))


def resolve_config(
    paths: list[str] | tuple[str, ...],
    *,
    parse_only: bool = False,
    validate: bool = False,
    no_mouse: bool = False,
    ascii_glyphs: bool = False,
    color_scheme: str | None = None,
    env: Mapping[str, str] | None = None,
) -> ViewerConfig:
    """Combine command-line values with environment and stored preferences."""
    environ = os.environ if env is None else env
    scheme = color_scheme or environ.get(ENV_COLOR_SCHEME) or load_color_scheme()
    return ViewerConfig(
        paths=tuple(paths),
        mouse_enabled=not (no_mouse or _env_flag(environ, ENV_NO_MOUSE)),
        ascii_glyphs=ascii_glyphs or _env_flag(environ, ENV_ASCII),
        color_scheme=normalize_scheme_name(scheme),
        parse_only=parse_only,
        validate=validate,
    )
