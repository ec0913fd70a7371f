"""
report.py

Responsibility: List API items that have no description yet.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from apigen.descriptions import COMPONENT_CATEGORIES

REPORTED_CATEGORIES = (*COMPONENT_CATEGORIES, "modifiers")


def _undocumented(record: Mapping[str, Any], locale: str) -> list[str]:
    missing: list[str] = []
    argument = record.get("argument")
    if isinstance(argument, Mapping) and not (argument.get("description") or {}).get(locale):
        missing.append("argument")
    for category in REPORTED_CATEGORIES:
        for item in record.get(category) or []:
            if not (item.get("description") or {}).get(locale):
                missing.append(f"{category}.{item['name']}")
    return missing


def find_missing(items: Iterable[Mapping[str, Any]], locales: Iterable[str]) -> dict[str, dict[str, list[str]]]:
    """
    Return `{entity: {locale: ["props.icon", ...]}}` for every undocumented item.

    Entities and locales without gaps are left out.
    """
    locales = list(locales)
    report: dict[str, dict[str, list[str]]] = {}
    for record in items:
        per_locale: dict[str, list[str]] = {}
        for locale in locales:
            names = _undocumented(record, locale)
            if names:
                per_locale[locale] = names
        if per_locale:
            report[record["name"]] = per_locale
    return report
