"""
api.py

Responsibility: Build API records for single entities and for the whole library.

An entity name is classified as:
- the global framework object (`Settings.global_name`, e.g. `$vuetify`)
- a directive (member of `Settings.directives`, e.g. `v-ripple`)
- otherwise a component (e.g. `v-btn`)

Every call builds fresh records from the injected collaborators; nothing is cached.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any, Protocol

from apigen.config import Settings
from apigen.descriptions import (
    COMPONENT_CATEGORIES,
    LocaleLoader,
    add_component_descriptions,
    add_directive_descriptions,
    add_generic_descriptions,
)
from apigen.merge import deepmerge
from apigen.parsing import SassVariables, parse_component
from apigen.registry import Registry, load_registry
from apigen.sources import SourceLoader
from apigen.text import hyphenate, pascalize

logger = logging.getLogger(__name__)

ApiRecord = dict[str, Any]

DIRECTIVE_PREFIX_LENGTH = len("v-")


class NotFoundError(LookupError):
    def __init__(self, name: str, kind: str) -> None:
        super().__init__(f"Could not find {kind}: {name}")
        self.name = name
        self.kind = kind


class MapLoader(LocaleLoader, Protocol):
    def load_map(self, name: str, fallback: dict[str, Any] | None = None) -> dict[str, Any]: ...


def sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive ordering with a stable tie-break, close to `localeCompare`."""
    return (name.casefold(), name)


# List-valued keys that hold plain names rather than described items.
_NON_ITEM_KEYS = frozenset({"mixins"})


def _item_categories(api: ApiRecord, base: Iterable[str]) -> list[str]:
    """`base` plus any other list-valued category a map contributed, in sorted order."""
    base = list(base)
    extra = sorted(
        key for key, value in api.items() if isinstance(value, list) and key not in _NON_ITEM_KEYS and key not in base
    )
    return [*base, *extra]


def _normalize_items(name: str, api: ApiRecord, categories: Iterable[str]) -> ApiRecord:
    # Maps may list plain names; every item needs to be a named mapping to carry descriptions.
    for category in categories:
        if category not in api:
            continue
        items = []
        for item in api[category] or []:
            if isinstance(item, str):
                item = {"name": item}
            if not isinstance(item, dict) or not isinstance(item.get("name"), str) or not item["name"]:
                logger.warning("Ignoring %s item of %s without a name: %r", category, name, item)
                continue
            items.append(item)
        api[category] = items
    return api


class ApiAssembler:
    def __init__(
        self,
        registry: Registry,
        loader: MapLoader,
        sass: SassVariables,
        settings: Settings | None = None,
    ) -> None:
        self._registry = registry
        self._loader = loader
        self._sass = sass
        self._settings = settings or Settings()
        self._component_re = re.compile(self._settings.component_pattern)

    @classmethod
    def from_settings(cls, settings: Settings) -> ApiAssembler:
        return cls(
            registry=load_registry(settings.registry),
            loader=SourceLoader(settings.locale_dir, settings.maps_dir),
            sass=SassVariables(settings.styles_dir),
            settings=settings,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_api(self, name: str, locales: Iterable[str]) -> ApiRecord:
        if name == self._settings.global_name:
            return self.get_framework_api(locales)
        if name in self._settings.directives:
            return self.get_directive_api(name, locales)
        return self.get_component_api(name, locales)

    def get_component_api(self, name: str, locales: Iterable[str]) -> ApiRecord:
        component = self._registry.component(pascalize(name))
        if component is None:
            raise NotFoundError(name, "component")

        if component.wrapper_for:
            wrapped = self._registry.component(pascalize(component.wrapper_for))
            if wrapped is None:
                raise NotFoundError(component.wrapper_for, "component")
            logger.debug("%s wraps %s", name, wrapped.name)
            component = wrapped

        api = deepmerge(
            parse_component(component),
            self._loader.load_map(name, {"slots": [], "events": [], "functions": []}),
            {"name": name, "sass": self._sass.for_component(name), "component": True},
        )
        categories = _item_categories(api, COMPONENT_CATEGORIES)
        _normalize_items(name, api, categories)

        return add_component_descriptions(
            name,
            api,
            locales,
            self._loader,
            generic_source=self._settings.generic_source,
            categories=categories,
        )

    def get_directive_api(self, name: str, locales: Iterable[str]) -> ApiRecord:
        if not self._registry.has_directive(pascalize(name[DIRECTIVE_PREFIX_LENGTH:])):
            raise NotFoundError(name, "directive")

        locales = list(locales)
        api = deepmerge(self._loader.load_map(name), {"name": name, "directive": True})
        extra = _item_categories(api, ["modifiers"])[1:]
        _normalize_items(name, api, ["modifiers", *extra])

        add_directive_descriptions(name, api, locales, self._loader)
        if extra:
            add_generic_descriptions(name, api, locales, extra, self._loader)
        return api

    def get_framework_api(self, locales: Iterable[str]) -> ApiRecord:
        name = self._settings.global_name
        api = deepmerge(self._loader.load_map(name, {"functions": []}), {"name": name})
        categories = _item_categories(api, ["functions"])
        _normalize_items(name, api, categories)

        return add_generic_descriptions(name, api, locales, categories, self._loader)

    def get_components_api(self, locales: Iterable[str]) -> list[ApiRecord]:
        locales = list(locales)
        excludes = {pascalize(name) for name in self._settings.excludes}
        seen: set[str] = set()
        components = []

        for component_name in self._registry.component_names():
            if not self._component_re.match(component_name):
                continue
            if pascalize(component_name) in excludes:
                continue

            kebab_name = hyphenate(component_name)
            if kebab_name in seen:
                continue
            seen.add(kebab_name)

            components.append(self.get_component_api(kebab_name, locales))

        return components

    def get_directives_api(self, locales: Iterable[str]) -> list[ApiRecord]:
        locales = list(locales)
        return [self.get_directive_api(name, locales) for name in self._settings.directives]

    def get_global_sass(self, locales: Iterable[str]) -> list[dict[str, Any]]:
        locales = list(locales)
        return [
            add_generic_descriptions(group["name"], group, locales, ["sass"], self._loader)
            for group in self._sass.global_groups()
        ]

    def get_complete_api(self, locales: Iterable[str]) -> dict[str, list[Any]]:
        locales = list(locales)
        items = [
            self.get_framework_api(locales),
            *self.get_components_api(locales),
            *self.get_directives_api(locales),
        ]
        items.sort(key=lambda api: sort_key(api["name"]))
        global_sass = self.get_global_sass(locales)

        logger.info(
            "Assembled %d API records and %d global sass groups for locale(s) %s",
            len(items),
            len(global_sass),
            ", ".join(locales),
        )
        return {"items": items, "globalSass": global_sass}
