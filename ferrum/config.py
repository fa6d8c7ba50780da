"""Project configuration for Ferrum.

Settings are resolved in this order, later sources winning:

1. Defaults (this file)
2. ``ferrum.toml`` in the project root, if present
3. ``FERRUM_*`` environment variables
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ferrum.codegen import DEFAULT_TITLE
from ferrum.errors import ConfigError
from ferrum.formatting import FormattingOptions

CONFIG_FILENAME = "ferrum.toml"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class FerrumConfig:
    """Resolved project configuration."""

    format: FormattingOptions = field(default_factory=FormattingOptions)
    html_title: str = DEFAULT_TITLE
    source: Optional[Path] = None


def locate_config_file(root: Path) -> Optional[Path]:
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def _read_toml_config(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML: {exc}", path=str(path)) from exc


def _parse_bool(value: Any, name: str, path: Optional[str]) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}", path=path)


def _parse_int(value: Any, name: str, path: Optional[str]) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}", path=path)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}", path=path) from exc


def _format_overrides(section: Mapping[str, Any], path: Optional[str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if "indent_width" in section:
        overrides["indent_width"] = _parse_int(section["indent_width"], "indent_width", path)
    if "indent_char" in section:
        char = str(section["indent_char"])
        overrides["indent_char"] = "\t" if char in ("tab", "\\t") else char
    if "normalize_expressions" in section:
        overrides["normalize_expressions"] = _parse_bool(
            section["normalize_expressions"], "normalize_expressions", path
        )
    return overrides


def _apply(config: FerrumConfig, format_overrides: Dict[str, Any], title: Optional[str], path: Optional[str]) -> FerrumConfig:
    if format_overrides:
        try:
            config.format = replace(config.format, **format_overrides)
        except ValueError as exc:
            raise ConfigError(str(exc), path=path) from exc
    if title is not None:
        config.html_title = title
    return config


def _apply_toml(config: FerrumConfig, data: Mapping[str, Any], path: Path) -> FerrumConfig:
    location = str(path)
    format_section = data.get("format") or {}
    html_section = data.get("html") or {}
    if not isinstance(format_section, dict) or not isinstance(html_section, dict):
        raise ConfigError("[format] and [html] must be tables", path=location)
    title = html_section.get("title")
    return _apply(
        config,
        _format_overrides(format_section, location),
        str(title) if title is not None else None,
        location,
    )


def _apply_env(config: FerrumConfig, environ: Mapping[str, str]) -> FerrumConfig:
    section: Dict[str, Any] = {}
    env_map = {
        "FERRUM_INDENT_WIDTH": "indent_width",
        "FERRUM_INDENT_CHAR": "indent_char",
        "FERRUM_NORMALIZE_EXPRESSIONS": "normalize_expressions",
    }
    for env_key, option in env_map.items():
        if env_key in environ:
            section[option] = environ[env_key]
    return _apply(config, _format_overrides(section, "environment"), environ.get("FERRUM_HTML_TITLE"), "environment")


def load_config(root: Optional[Path] = None, *, environ: Optional[Mapping[str, str]] = None) -> FerrumConfig:
    """Resolve configuration for the project rooted at ``root``.

    Raises:
        ConfigError: when ``ferrum.toml`` or an environment override is
            malformed.
    """
    root = Path(root) if root is not None else Path.cwd()
    environ = os.environ if environ is None else environ

    config = FerrumConfig()
    path = locate_config_file(root)
    if path is not None:
        config = _apply_toml(config, _read_toml_config(path), path)
        config.source = path
    return _apply_env(config, environ)


__all__ = ["FerrumConfig", "CONFIG_FILENAME", "load_config", "locate_config_file"]
