"""
config.py

Responsibility: Load and parse the optional YAML config file into a deterministic, typed model.

This implementation intentionally stays conservative:
- Every key is optional; defaults describe the Vuetify component library.
- Relative paths are resolved against the directory holding the config file.

The assembler and CLI should treat the parsed result as the single source of truth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    pass


DEFAULT_DIRECTIVES: tuple[str, ...] = (
    "v-mutate",
    "v-intersect",
    "v-ripple",
    "v-resize",
    "v-scroll",
    "v-touch",
    "v-click-outside",
)

DEFAULT_EXCLUDES: tuple[str, ...] = ("VMessages", "VLabel")


@dataclass(frozen=True)
class Settings:
    """Parsed settings used to locate inputs and classify entity names."""

    global_name: str = "$vuetify"
    directives: tuple[str, ...] = DEFAULT_DIRECTIVES
    excludes: tuple[str, ...] = DEFAULT_EXCLUDES
    component_pattern: str = r"^(?:V[A-Z]|v-[a-z])"
    generic_source: str = "generic"
    locales: tuple[str, ...] = ("en",)
    registry: Path = field(default_factory=lambda: Path("registry.yaml"))
    locale_dir: Path = field(default_factory=lambda: Path("locale"))
    maps_dir: Path = field(default_factory=lambda: Path("maps"))
    styles_dir: Path = field(default_factory=lambda: Path("styles"))

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


_PATH_KEYS = ("registry", "locale_dir", "maps_dir", "styles_dir")
_LIST_KEYS = ("directives", "excludes", "locales")
_STR_KEYS = ("global_name", "component_pattern", "generic_source")


def _string_list(key: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ConfigError(f"`{key}` must be a list of strings when provided.")
    return tuple(str(v).strip() for v in value if str(v).strip())


def parse_settings(data: dict[str, Any], *, base_dir: Path) -> Settings:
    """
    Build `Settings` from an already loaded mapping.

    Unknown keys are rejected so typos do not silently fall back to defaults.
    """
    known = {*_PATH_KEYS, *_LIST_KEYS, *_STR_KEYS}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key in _STR_KEYS:
        if data.get(key) is not None:
            values[key] = str(data[key]).strip()
    for key in _LIST_KEYS:
        if data.get(key) is not None:
            values[key] = _string_list(key, data[key])
    for key in _PATH_KEYS:
        if data.get(key) is not None:
            values[key] = base_dir / str(data[key])

    if "component_pattern" in values:
        try:
            re.compile(values["component_pattern"])
        except re.error as e:
            raise ConfigError(f"`component_pattern` is not a valid regular expression: {e}") from e

    settings = Settings(**values)
    # Defaults are relative to the config file too.
    return replace(
        settings,
        **{key: base_dir / getattr(settings, key) for key in _PATH_KEYS if key not in values},
    )


def load_settings(config_path: str | Path | None = None) -> Settings:
    """
    Load `Settings` from a YAML file, or return defaults rooted at the
    current directory when no path is given.
    """
    if config_path is None:
        return parse_settings({}, base_dir=Path.cwd())

    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping/object at the top level.")

    return parse_settings(data, base_dir=path.resolve().parent)
