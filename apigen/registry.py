"""
registry.py

Responsibility: Read-only registry of the components and directives a library installs.

The assembler only ever asks three questions:
- which component names are registered (in registration order)
- which entry is registered under a PascalCase component name
- whether a PascalCase directive name is registered

`Registry` can be built directly (tests) or from a YAML manifest via `load_registry`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from apigen.text import pascalize


class RegistryError(ValueError):
    pass


@dataclass(frozen=True)
class ComponentEntry:
    """A registered component: its declared props, mixins and optional wrapped component."""

    name: str
    props: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    mixins: tuple[str, ...] = ()
    wrapper_for: str | None = None


class Registry:
    def __init__(self, components: Iterable[ComponentEntry] = (), directives: Iterable[str] = ()) -> None:
        components = list(components)
        # Insertion order is registration order.
        self._names = tuple(c.name for c in components)
        self._components = MappingProxyType({pascalize(c.name): c for c in components})
        self._directives = frozenset(pascalize(d) for d in directives)

    def component_names(self) -> list[str]:
        return list(self._names)

    def component(self, name: str) -> ComponentEntry | None:
        """Look up a component by its PascalCase name (`v-btn` is registered as `VBtn`)."""
        return self._components.get(pascalize(name))

    def has_directive(self, name: str) -> bool:
        return name in self._directives


def _parse_component(name: str, raw: Any) -> ComponentEntry:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise RegistryError(f"Component `{name}` must be a mapping/object.")

    props_raw = raw.get("props") or {}
    if not isinstance(props_raw, dict):
        raise RegistryError(f"`props` of component `{name}` must be a mapping/object.")
    props: dict[str, dict[str, Any]] = {}
    for prop_name, meta in props_raw.items():
        if meta is None:
            meta = {}
        if not isinstance(meta, dict):
            # Shorthand: `size: string`
            meta = {"type": meta}
        props[str(prop_name)] = dict(meta)

    mixins_raw = raw.get("mixins") or []
    if not isinstance(mixins_raw, list):
        raise RegistryError(f"`mixins` of component `{name}` must be a list.")

    wrapper_for = raw.get("wrapper_for")
    if wrapper_for is not None:
        wrapper_for = str(wrapper_for).strip() or None

    return ComponentEntry(
        name=name,
        props=props,
        mixins=tuple(str(m) for m in mixins_raw),
        wrapper_for=wrapper_for,
    )


def load_registry(manifest_path: str | Path) -> Registry:
    """
    Parse a registry manifest.

    Expected YAML keys:
    - components: mapping of component name -> {props, mixins, wrapper_for}
    - directives: list of directive names without the `v-` prefix (`Ripple` or `click-outside`)
    """
    path = Path(manifest_path)
    if not path.exists():
        raise RegistryError(f"Registry manifest does not exist: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise RegistryError(f"Registry manifest is not valid YAML: {path}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RegistryError("Registry manifest must be a mapping/object at the top level.")

    components_raw = data.get("components")
    if components_raw is None:
        components_raw = {}
    if not isinstance(components_raw, dict):
        raise RegistryError("`components` must be a mapping/object when provided.")
    directives_raw = data.get("directives")
    if directives_raw is None:
        directives_raw = []
    if not isinstance(directives_raw, list):
        raise RegistryError("`directives` must be a list when provided.")

    components = [_parse_component(str(name), raw) for name, raw in components_raw.items()]
    directives = [str(d) for d in directives_raw]
    return Registry(components=components, directives=directives)
