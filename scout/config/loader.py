#!/usr/bin/env python3
# scout/config/loader.py
from __future__ import annotations

"""
Configuration loader (tomllib, Python 3.11+).

Precedence (low → high):
  1) Built-in defaults (engines, keybinds, settings)
  2) config.toml in the per-user config dir (or $SCOUT_CONFIG)
  3) SCOUT_* environment variables (settings only)

File layout:
  timeout = 5                  # seconds per suggestion request, >= 1
  max_suggestions = 15         # rows shown / selectable, >= 1
  log_level = "WARNING"
  log_file_path = ""           # empty disables the log file

  [engines._default]           # '_default' is the engine used without a prefix
  name = "Google"
  search_url = "https://www.google.com/search?q=%s"
  suggestion_url = "https://www.google.com/complete/search?client=chrome&q=%s"
  space_becomes = "+"
  suggestion_adapter = "opensearch"   # or { json_path = "a.b" }

  [engines._default.prompt]
  icon = " g "
  icon_fg = "White"
  icon_bg = "Blue"             # name, 0-255, [r, g, b] or "#RRGGBB"

  [keybinds]
  "<C-c>" = "Exit"

Anything wrong raises ConfigError; `get_config` turns that into a one-time
warning and the built-in defaults.
"""

import logging
import os
import tomllib  # stdlib in 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from scout.engines import (
    DEFAULT_ENGINES,
    EngineDef,
    EngineRegistry,
    PromptStyle,
    is_valid_prefix,
)
from scout.errors import ConfigError
from scout.interface.keys import DEFAULT_KEYBINDS, KeyBindings
from scout.suggest import adapter_from_config, adapter_to_config
from scout.ui import color_sgr, colorize, print_line

APP_NAME = "scout"
CONFIG_FILE_NAME = "config.toml"
DEFAULT_ENGINE_KEY = "_default"
ENV_PREFIX = "SCOUT_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "TIMEOUT": 5,
    "MAX_SUGGESTIONS": 15,
    "LOG_LEVEL": "WARNING",
    "LOG_FILE_PATH": None,
}

_LOG = logging.getLogger("scout.config")


def config_dir() -> Path:
    """Per-user config directory for scout."""
    if os.name == "nt":
        base = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / APP_NAME
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_NAME


def default_config_path() -> Path:
    override = os.environ.get(f"{ENV_PREFIX}CONFIG")
    if override:
        return Path(os.path.expandvars(os.path.expanduser(override)))
    return config_dir() / CONFIG_FILE_NAME


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    engines: EngineRegistry
    keybinds: KeyBindings

    timeout: int
    max_suggestions: int
    log_level: str
    log_file_path: Path | None

    config_path: Path | None = None
    # Unrecognized top-level keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- normalization & coercion ----------

def _as_int(val: Any, key: str, *, minimum: int) -> int:
    if isinstance(val, bool):
        raise ConfigError(f"{key} must be an integer, got {val!r}")
    try:
        number = val if isinstance(val, int) else int(str(val).strip())
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {val!r}") from exc
    if number < minimum:
        raise ConfigError(f"{key} must be >= {minimum}")
    return number


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str:
    lv = _as_opt_str(val) or DEFAULTS["LOG_LEVEL"]
    up = lv.upper()
    allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if up not in allowed:
        raise ConfigError(f"log_level must be one of {sorted(allowed)}, got {lv!r}")
    return up


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    return None if v is None else Path(os.path.expandvars(os.path.expanduser(v))).resolve()


def _require_str(table: Mapping[str, Any], key: str, where: str, default: str | None = None) -> str:
    value = table.get(key, default)
    if value is None:
        raise ConfigError(f"{where}: missing required field '{key}'")
    if not isinstance(value, str):
        raise ConfigError(f"{where}: '{key}' must be a string")
    return value


# ---------- engines ----------

def _prompt_from_table(raw: Any, name: str, where: str) -> PromptStyle:
    """Build a PromptStyle; a missing `text` becomes ' <name> '."""
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{where}.prompt must be a table")
    base = PromptStyle()
    values: dict[str, Any] = {
        "icon": _require_str(raw, "icon", f"{where}.prompt", base.icon),
        "text": _require_str(raw, "text", f"{where}.prompt", f" {name} "),
    }
    for key in ("icon_fg", "icon_bg", "text_fg", "text_bg"):
        color = raw.get(key, getattr(base, key))
        if isinstance(color, list):
            color = tuple(color)
        try:
            color_sgr(color)
        except ValueError as exc:
            raise ConfigError(f"{where}.prompt.{key}: {exc}") from exc
        values[key] = color
    return PromptStyle(**values)


def _engine_from_table(engine_id: str, raw: Any) -> EngineDef:
    where = f"engines.{engine_id or DEFAULT_ENGINE_KEY}"
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{where} must be a table")
    name = _require_str(raw, "name", where)
    return EngineDef(
        id=engine_id,
        display_name=name,
        search_url_template=_require_str(raw, "search_url", where),
        suggestion_url_template=_require_str(raw, "suggestion_url", where, ""),
        space_becomes=_require_str(raw, "space_becomes", where, "+"),
        prompt=_prompt_from_table(raw.get("prompt"), name, where),
        suggestion_adapter=adapter_from_config(raw.get("suggestion_adapter")),
    )


def _registry_from_tables(raw: Any) -> EngineRegistry:
    """
    Build the registry from the [engines] table.

    '_default' becomes the '' engine; ids containing whitespace are skipped
    with a warning.
    """
    if not isinstance(raw, Mapping) or not raw:
        raise ConfigError("No [engines] table found.")
    if DEFAULT_ENGINE_KEY not in raw:
        raise ConfigError(f"No '{DEFAULT_ENGINE_KEY}' search engine found.")

    engines: list[EngineDef] = []
    for key, table in raw.items():
        engine_id = "" if key == DEFAULT_ENGINE_KEY else str(key)
        if engine_id == "" and key != DEFAULT_ENGINE_KEY:
            raise ConfigError(f"Use '{DEFAULT_ENGINE_KEY}' for the default engine, not an empty prefix.")
        if not is_valid_prefix(engine_id):
            name = table.get("name", "?") if isinstance(table, Mapping) else "?"
            print_line(colorize(
                f"[ WARN ] Prefixes have to be a single word, so engine '{name}' "
                f"with prefix '{engine_id}' will be ignored.", "yellow"))
            continue
        engines.append(_engine_from_table(engine_id, table))
    return EngineRegistry(engines)


# ---------- TOML writer ----------

def _toml_key(key: str) -> str:
    if key and all(ch.isascii() and (ch.isalnum() or ch in "_-") for ch in key):
        return key
    return _toml_scalar(key)


def _toml_scalar(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    if v is None:
        return '""'
    if isinstance(v, (int, float)):
        return str(v)
    if isinstance(v, (list, tuple)):
        return "[" + ", ".join(_toml_scalar(i) for i in v) + "]"
    if isinstance(v, Mapping):
        return "{ " + ", ".join(f"{_toml_key(k)} = {_toml_scalar(x)}" for k, x in v.items()) + " }"
    s = str(v).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{s}"'


def _engine_to_table(engine: EngineDef) -> dict[str, Any]:
    prompt = engine.prompt
    return {
        "name": engine.display_name,
        "search_url": engine.search_url_template,
        "suggestion_url": engine.suggestion_url_template,
        "space_becomes": engine.space_becomes,
        "suggestion_adapter": adapter_to_config(engine.suggestion_adapter),
        "prompt": {
            "icon": prompt.icon,
            "icon_fg": prompt.icon_fg,
            "icon_bg": prompt.icon_bg,
            "text": prompt.text,
            "text_fg": prompt.text_fg,
            "text_bg": prompt.text_bg,
        },
    }


def render_default_toml() -> str:
    """Serialize the built-in defaults as a config.toml document."""
    lines = [
        "# scout configuration",
        f"timeout = {DEFAULTS['TIMEOUT']}",
        f"max_suggestions = {DEFAULTS['MAX_SUGGESTIONS']}",
        f"log_level = {_toml_scalar(DEFAULTS['LOG_LEVEL'])}",
        f"log_file_path = {_toml_scalar(DEFAULTS['LOG_FILE_PATH'])}",
    ]
    for engine in DEFAULT_ENGINES:
        table = _engine_to_table(engine)
        prompt = table.pop("prompt")
        section = f"engines.{_toml_key(engine.id or DEFAULT_ENGINE_KEY)}"
        lines.append("")
        lines.append(f"[{section}]")
        lines.extend(f"{_toml_key(k)} = {_toml_scalar(v)}" for k, v in table.items())
        lines.append(f"[{section}.prompt]")
        lines.extend(f"{_toml_key(k)} = {_toml_scalar(v)}" for k, v in prompt.items())
    lines.append("")
    lines.append("[keybinds]")
    lines.extend(f"{_toml_key(k)} = {_toml_scalar(v)}" for k, v in DEFAULT_KEYBINDS.items())
    return "\n".join(lines) + "\n"


def write_default_config(path: Path | None = None) -> Path:
    """Write the default config.toml; returns the path written."""
    out = path or default_config_path()
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(render_default_toml(), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not write default config to {out}: {exc}") from exc
    return out


# ---------- merge & load ----------

def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f"Could not read path {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f" ↳ Could not parse TOML file {path}:\n    ↳ {exc}") from exc


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    """SCOUT_TIMEOUT=3 -> {'TIMEOUT': '3'} for the recognized settings only."""
    return {
        key[len(ENV_PREFIX):]: value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX) and key[len(ENV_PREFIX):] in DEFAULTS
    }


def _validate_and_build(
    document: Mapping[str, Any],
    *,
    environ: Mapping[str, str],
    path: Path | None,
) -> AppConfig:
    settings: dict[str, Any] = dict(DEFAULTS)
    extra: dict[str, Any] = {}
    for key, value in document.items():
        if key in ("engines", "keybinds"):
            continue
        if key.upper() in DEFAULTS:
            settings[key.upper()] = value
        else:
            extra[key] = value
    settings.update(_env_overrides(environ))

    keybinds_raw = document.get("keybinds", DEFAULT_KEYBINDS)
    if not isinstance(keybinds_raw, Mapping):
        raise ConfigError("[keybinds] must be a table")

    return AppConfig(
        engines=_registry_from_tables(document.get("engines")),
        keybinds=KeyBindings.from_config(keybinds_raw),
        timeout=_as_int(settings["TIMEOUT"], "timeout", minimum=1),
        max_suggestions=_as_int(settings["MAX_SUGGESTIONS"], "max_suggestions", minimum=1),
        log_level=_as_log_level(settings["LOG_LEVEL"]),
        log_file_path=_as_opt_path(settings["LOG_FILE_PATH"]),
        config_path=path,
        extra=extra,
    )


# ---------- public API ----------

def default_config(*, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Built-in defaults (env overrides still apply to scalar settings)."""
    env = os.environ if environ is None else environ
    return AppConfig(
        engines=EngineRegistry(DEFAULT_ENGINES),
        keybinds=KeyBindings.from_config(DEFAULT_KEYBINDS),
        timeout=_as_int(env.get(f"{ENV_PREFIX}TIMEOUT", DEFAULTS["TIMEOUT"]), "timeout", minimum=1),
        max_suggestions=_as_int(
            env.get(f"{ENV_PREFIX}MAX_SUGGESTIONS", DEFAULTS["MAX_SUGGESTIONS"]),
            "max_suggestions", minimum=1),
        log_level=_as_log_level(env.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULTS["LOG_LEVEL"])),
        log_file_path=_as_opt_path(env.get(f"{ENV_PREFIX}LOG_FILE_PATH", DEFAULTS["LOG_FILE_PATH"])),
    )


def load_config(
    path: Path | None = None,
    *,
    create: bool = True,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load and validate the config file, writing the defaults there first if
    it does not exist yet (when `create`). Raises ConfigError.
    """
    config_path = path or default_config_path()
    if not config_path.exists():
        if not create:
            raise ConfigError(f"Config file {config_path} does not exist.")
        write_default_config(config_path)
        print_line(f"Wrote default config to {config_path}. Edit it and enjoy!")
    document = _read_toml(config_path)
    return _validate_and_build(
        document,
        environ=os.environ if environ is None else environ,
        path=config_path,
    )


def get_config(path: Path | None = None, *, environ: Mapping[str, str] | None = None) -> AppConfig:
    """load_config, falling back to the built-in defaults with a visible warning."""
    try:
        return load_config(path, environ=environ)
    except ConfigError as exc:
        print_line(
            f"{colorize('Error!', 'bold', 'red')} Could not load config:\n{exc}\nUsing default config.")
        _LOG.debug("Config load failed", exc_info=exc)
        try:
            return default_config(environ=environ)
        except ConfigError:
            return default_config(environ={})
