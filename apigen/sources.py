"""
sources.py

Responsibility: Best-effort loading of side-car data files.

- Locale files: `<locale_dir>/<locale>/<name>.{json,yaml,yml}` -> {category: {item: description}}
- Map files: `<maps_dir>/<name>.{json,yaml,yml}` -> {name: {slots, events, functions, argument, modifiers}}

A missing, unreadable or malformed file is never an error: callers get an empty
mapping (or their fallback) and the problem is logged.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

SUFFIXES = (".json", ".yaml", ".yml")


class SourceLoader:
    def __init__(self, locale_dir: str | Path, maps_dir: str | Path) -> None:
        self._locale_dir = Path(locale_dir)
        self._maps_dir = Path(maps_dir)

    def _find(self, directory: Path, name: str) -> Path | None:
        for suffix in SUFFIXES:
            candidate = directory / f"{name}{suffix}"
            if candidate.is_file():
                return candidate
        return None

    def _read(self, path: Path) -> dict[str, Any] | None:
        try:
            text = path.read_text(encoding="utf-8")
            if path.suffix == ".json":
                data = json.loads(text) if text.strip() else None
            else:
                data = yaml.safe_load(text)
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable source %s: %s", path, e)
            return None
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring source %s: top level is not a mapping", path)
            return None
        return data

    def load_locale(self, name: str, locale: str) -> dict[str, Any]:
        """
        Return the description source for (name, locale), or {} when there is none.
        """
        path = self._find(self._locale_dir / locale, name)
        if path is None:
            logger.debug("No %s locale file for %s", locale, name)
            return {}
        return self._read(path) or {}

    def load_map(self, name: str, fallback: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Return `fallback` overlaid with the `name` entry of the map file for `name`.

        The result never shares objects with the fallback or the parsed file.
        """
        result = copy.deepcopy(fallback) if fallback else {}
        path = self._find(self._maps_dir, name)
        if path is None:
            logger.debug("No map file for %s", name)
            return result

        data = self._read(path)
        if not data:
            return result
        entry = data.get(name)
        if entry is None:
            logger.debug("Map file %s has no entry for %s", path, name)
            return result
        if not isinstance(entry, dict):
            logger.warning("Ignoring map entry %s in %s: not a mapping", name, path)
            return result

        result.update(copy.deepcopy(entry))
        return result
