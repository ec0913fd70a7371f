"""
text.py

Name casing helpers shared by the registry and the assembler.

    >>> pascalize("v-btn")
    'VBtn'
    >>> hyphenate("VBtn")
    'v-btn'
"""

from __future__ import annotations

import re

_CAMELIZE_RE = re.compile(r"-(\w)")
_HYPHENATE_RE = re.compile(r"\B([A-Z])")


def camelize(name: str) -> str:
    return _CAMELIZE_RE.sub(lambda m: m.group(1).upper(), name)


def pascalize(name: str) -> str:
    camel = camelize(name)
    return camel[:1].upper() + camel[1:]


def hyphenate(name: str) -> str:
    return _HYPHENATE_RE.sub(r"-\1", name).lower()
