from __future__ import annotations

import json
from pathlib import Path

import pytest

from apigen.api import ApiAssembler
from apigen.config import Settings, load_settings

REGISTRY = """\
components:
  VBtn:
    mixins: [sizeable, routable]
    props:
      icon: {type: [boolean, string], default: false}
      size: {type: string, source: sizeable}
      to: {type: [string, object], source: routable}
  VTextField:
    mixins: [validatable]
    props:
      label: {type: string}
      value: {type: any}
  VTextarea:
    wrapper_for: VTextField
  VMessages:
    props:
      value: {type: array}
  VLabel: {}
  RouterLink: {}
  v-spacer: {}
directives: [Mutate, Intersect, Ripple, Resize, Scroll, Touch, click-outside]
"""

LOCALES = {
    "en/v-btn": {"props": {"icon": "Icon button"}, "sass": {"$btn-height": "Button height"}},
    "en/sizeable": {"props": {"icon": "wrong", "size": "Sets the size"}, "sass": {"$btn-font": "from mixin"}},
    "en/routable": {"props": {"to": "Route target", "size": "also wrong"}},
    "en/generic": {
        "props": {"to": "generic to", "value": "The input value"},
        "events": {"click": "Emitted when clicked"},
        "modifiers": {"once": "generic once"},
    },
    "en/v-text-field": {"props": {"label": "Field label"}},
    "en/v-textarea": {"props": {"label": "Textarea label"}},
    "en/v-ripple": {"argument": "Ripple options", "modifiers": {"center": "Center the ripple"}},
    "en/$vuetify": {"functions": {"goTo": "Scrolls to a target"}},
    "en/colors": {"sass": {"$shades": "Black, white and transparent"}},
    "ru/v-btn": {"props": {"icon": "Кнопка-иконка"}},
}

MAPS = {
    "v-btn": {"events": [{"name": "click", "value": "Event"}], "slots": ["default"]},
    "v-ripple": {
        "argument": {"type": "boolean | object"},
        "modifiers": [{"name": "center"}, {"name": "once"}],
    },
    "v-click-outside": {"argument": {"type": "function | object"}},
    "$vuetify": {"functions": [{"name": "goTo"}, {"name": "breakpoint"}]},
}

STYLES = {
    "components/VBtn/_variables.scss": (
        "// Button\n"
        "$btn-height: 36px !default;\n"
        "$btn-font: (\n  'size': 14px,\n  'weight': 500\n) !default;\n"
    ),
    "settings/_colors.scss": "$shades: (\n  'black': #000,\n  'white': #fff\n) !default;\n",
    "settings/_variables.scss": "$spacer: 4px !default;\n",
}


def write_json(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture()
def library(tmp_path: Path) -> Path:
    """A small on-disk component library: registry, locale files, maps and styles."""
    (tmp_path / "registry.yaml").write_text(REGISTRY, encoding="utf-8")
    for key, data in LOCALES.items():
        write_json(tmp_path / "locale" / f"{key}.json", data)
    for name, data in MAPS.items():
        write_json(tmp_path / "maps" / f"{name}.json", {name: data})
    for rel, text in STYLES.items():
        path = tmp_path / "styles" / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    (tmp_path / "apigen.yaml").write_text("locales: [en, ru]\n", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def settings(library: Path) -> Settings:
    return load_settings(library / "apigen.yaml")


@pytest.fixture()
def assembler(settings: Settings) -> ApiAssembler:
    return ApiAssembler.from_settings(settings)
