"""
parsing.py

Responsibility: Structural API data that does not come from description files.

- `parse_component`: props and mixins of a registry entry
- `SassVariables`: `$name: value !default;` declarations from SCSS variable files
"""

from __future__ import annotations

import copy
import logging
import re
from pathlib import Path
from typing import Any

from apigen.registry import ComponentEntry
from apigen.text import hyphenate, pascalize

logger = logging.getLogger(__name__)

_LINE_COMMENT_RE = re.compile(r"//[^\n]*")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.S)
_DECLARATION_RE = re.compile(r"(\$[\w-]+)\s*:\s*([^;]*?)\s*!default\s*;")
_WHITESPACE_RE = re.compile(r"\s+")


def parse_component(component: ComponentEntry) -> dict[str, Any]:
    """
    Return `{"props": [...], "mixins": [...]}` for a registry entry.

    Props are sorted by name; a prop without a `source` is attributed to the component itself.
    """
    own_source = hyphenate(component.name)
    props = []
    for name in sorted(component.props):
        prop = {"name": name, "source": own_source}
        prop.update(copy.deepcopy(dict(component.props[name])))
        props.append(prop)
    return {"props": props, "mixins": list(component.mixins)}


def parse_sass_text(text: str) -> list[dict[str, str]]:
    text = _BLOCK_COMMENT_RE.sub("", text)
    text = _LINE_COMMENT_RE.sub("", text)
    return [
        {"name": name, "default": _WHITESPACE_RE.sub(" ", value).strip()}
        for name, value in _DECLARATION_RE.findall(text)
    ]


class SassVariables:
    """
    Sass variable lookup rooted at a styles directory:

        styles/
          components/VBtn/_variables.scss
          settings/_colors.scss
    """

    def __init__(self, styles_dir: str | Path) -> None:
        self._styles_dir = Path(styles_dir)

    def _parse_file(self, path: Path) -> list[dict[str, str]]:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable sass file %s: %s", path, e)
            return []
        return parse_sass_text(text)

    def for_component(self, component_name: str) -> list[dict[str, str]]:
        """Variables declared by `components/<PascalName>/_variables.scss`."""
        path = self._styles_dir / "components" / pascalize(component_name) / "_variables.scss"
        return self._parse_file(path)

    def global_groups(self) -> list[dict[str, Any]]:
        """One `{"name", "sass"}` group per file in `settings/`, sorted by file name."""
        settings_dir = self._styles_dir / "settings"
        if not settings_dir.is_dir():
            return []
        groups = []
        for path in sorted(settings_dir.glob("*.scss")):
            sass = self._parse_file(path)
            if sass:
                groups.append({"name": path.stem.lstrip("_"), "sass": sass})
        return groups
