"""
descriptions.py

Responsibility: Attach per-locale descriptions to the items of an API record.

A description source is a mapping `{category: {item_name: description}}` loaded for
one (entity, locale) pair. For each item the sources are consulted in priority
order and the first non-empty description wins; sources are never merged.

Components consult `[own, *mixins, generic]`. Sass variables, directives, the
global object and global sass groups consult only their own source.

Descriptions for all requested locales are computed first and written to the
record in a single pass at the end, each item receiving a new `description` dict.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol

COMPONENT_CATEGORIES = ("props", "events", "slots", "functions", "sass")

# (category, item index); index is None for the single `argument` object
_Slot = tuple[str, int | None]


class LocaleLoader(Protocol):
    def load_locale(self, name: str, locale: str) -> dict[str, Any]: ...


def _lookup(source: Mapping[str, Any], category: str, name: str) -> str:
    entries = source.get(category)
    if not isinstance(entries, Mapping):
        return ""
    value = entries.get(name)
    return str(value) if value else ""


def resolve_description(sources: Sequence[Mapping[str, Any]], category: str, name: str) -> str:
    """
    Return the first non-empty description of `name` in `category`, or "".

    Sass variables are documented by the entity itself only, so for `sass` the
    chain is cut to its first source.
    """
    if category == "sass":
        sources = sources[:1]
    for source in sources:
        description = _lookup(source, category, name)
        if description:
            return description
    return ""


def _items(api: Mapping[str, Any], category: str) -> list[Any]:
    return list(api.get(category) or [])


def _apply(api: dict[str, Any], pending: Mapping[_Slot, Mapping[str, str]]) -> dict[str, Any]:
    for (category, index), descriptions in pending.items():
        item = api[category] if index is None else api[category][index]
        item["description"] = {**(item.get("description") or {}), **descriptions}
    return api


def _resolve_categories(
    api: Mapping[str, Any],
    locale: str,
    sources: Sequence[Mapping[str, Any]],
    categories: Iterable[str],
    pending: dict[_Slot, dict[str, str]],
) -> None:
    for category in categories:
        for index, item in enumerate(_items(api, category)):
            pending.setdefault((category, index), {})[locale] = resolve_description(
                sources, category, item["name"]
            )


def add_component_descriptions(
    name: str,
    api: dict[str, Any],
    locales: Iterable[str],
    loader: LocaleLoader,
    *,
    generic_source: str = "generic",
    categories: Sequence[str] = COMPONENT_CATEGORIES,
) -> dict[str, Any]:
    pending: dict[_Slot, dict[str, str]] = {}
    for locale in locales:
        sources = [
            loader.load_locale(name, locale),
            *(loader.load_locale(mixin, locale) for mixin in api.get("mixins") or []),
            loader.load_locale(generic_source, locale),
        ]
        _resolve_categories(api, locale, sources, categories, pending)
    return _apply(api, pending)


def add_generic_descriptions(
    name: str,
    api: dict[str, Any],
    locales: Iterable[str],
    categories: Sequence[str],
    loader: LocaleLoader,
) -> dict[str, Any]:
    pending: dict[_Slot, dict[str, str]] = {}
    for locale in locales:
        _resolve_categories(api, locale, [loader.load_locale(name, locale)], categories, pending)
    return _apply(api, pending)


def add_directive_descriptions(
    name: str,
    api: dict[str, Any],
    locales: Iterable[str],
    loader: LocaleLoader,
) -> dict[str, Any]:
    locales = list(locales)
    pending: dict[_Slot, dict[str, str]] = {}

    if isinstance(api.get("argument"), Mapping):
        for locale in locales:
            argument = loader.load_locale(name, locale).get("argument")
            pending.setdefault(("argument", None), {})[locale] = str(argument) if argument else ""
    _apply(api, pending)

    if api.get("modifiers"):
        add_generic_descriptions(name, api, locales, ["modifiers"], loader)
    return api
