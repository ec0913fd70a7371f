from __future__ import annotations

from pathlib import Path

from apigen.parsing import SassVariables, parse_component, parse_sass_text
from apigen.registry import ComponentEntry


def test_parse_component_sorts_props_and_sets_source() -> None:
    entry = ComponentEntry(
        name="VBtn",
        props={"to": {"type": "string", "source": "routable"}, "icon": {"default": False}},
        mixins=("routable",),
    )

    parsed = parse_component(entry)

    assert parsed == {
        "props": [
            {"name": "icon", "source": "v-btn", "default": False},
            {"name": "to", "source": "routable", "type": "string"},
        ],
        "mixins": ["routable"],
    }


def test_parse_component_does_not_share_prop_metadata() -> None:
    entry = ComponentEntry(name="VBtn", props={"icon": {"type": ["boolean", "string"]}})

    parse_component(entry)["props"][0]["type"].append("number")

    assert entry.props["icon"]["type"] == ["boolean", "string"]


def test_parse_sass_text() -> None:
    text = (
        "/* block\n$ignored: 1 !default; */\n"
        "$btn-height: 36px !default; // trailing\n"
        "$btn-sizes: (\n  'small': 28,\n  'large': 44\n) !default;\n"
        "$not-default: 1px;\n"
        "$btn-radius: $border-radius-root   !default ;\n"
    )

    assert parse_sass_text(text) == [
        {"name": "$btn-height", "default": "36px"},
        {"name": "$btn-sizes", "default": "( 'small': 28, 'large': 44 )"},
        {"name": "$btn-radius", "default": "$border-radius-root"},
    ]


def test_component_sass_variables(library: Path) -> None:
    sass = SassVariables(library / "styles")

    assert [v["name"] for v in sass.for_component("v-btn")] == ["$btn-height", "$btn-font"]
    assert sass.for_component("v-chip") == []


def test_global_groups(library: Path) -> None:
    groups = SassVariables(library / "styles").global_groups()

    assert groups == [
        {"name": "colors", "sass": [{"name": "$shades", "default": "( 'black': #000, 'white': #fff )"}]},
        {"name": "variables", "sass": [{"name": "$spacer", "default": "4px"}]},
    ]


def test_global_groups_without_settings_dir(tmp_path: Path) -> None:
    assert SassVariables(tmp_path).global_groups() == []
