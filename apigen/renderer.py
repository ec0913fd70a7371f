"""
renderer.py

Responsibility: Deterministically write an assembled API corpus into a destination directory.

Rules:
- JSON is written with sorted keys, 2-space indent and a trailing newline.
- One `items/<name>.json` per record, written in sorted order.
- `api.md` is rendered from the packaged Jinja2 template `templates/api.md.j2`.

This module intentionally does NOT know about the registry, locale files, or CLI parsing.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

MARKDOWN_TEMPLATE = "api.md.j2"


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class RenderResult:
    json_files: int
    markdown_files: int


def _dump_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8", newline="\n")


def _item_filename(name: str) -> str:
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise RenderError(f"API record name cannot be used as a file name: {name!r}")
    return f"{name}.json"


def _cell(value: Any) -> str:
    # Non-string defaults are shown as JSON (`false`, `{"size": 14}`), matching api.json.
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False, sort_keys=True)
    return text.replace("|", "\\|").replace("\n", " ")


def _environment() -> Environment:
    env = Environment(
        loader=PackageLoader("apigen", "templates"),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["cell"] = _cell
    return env


def render_markdown(api: dict[str, Any], locales: list[str]) -> str:
    try:
        template = _environment().get_template(MARKDOWN_TEMPLATE)
        return template.render(items=api["items"], global_sass=api["globalSass"], locales=locales)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering template: {MARKDOWN_TEMPLATE}") from e


def write_api(
    api: dict[str, Any],
    destination_dir: str | Path,
    *,
    locales: list[str],
    markdown: bool = True,
) -> RenderResult:
    """
    Write `api.json`, `items/*.json` and (optionally) `api.md` into destination_dir.

    - Creates destination directories as needed.
    - Overwrites files from a previous run.
    """
    dst_dir = Path(destination_dir).resolve()
    if dst_dir.exists() and not dst_dir.is_dir():
        raise RenderError(f"Destination is not a directory: {dst_dir}")

    json_files = 0
    markdown_files = 0

    _write(dst_dir / "api.json", _dump_json(api))
    json_files += 1

    for record in sorted(api["items"], key=lambda r: r["name"]):
        _write(dst_dir / "items" / _item_filename(record["name"]), _dump_json(record))
        json_files += 1

    if markdown:
        _write(dst_dir / "api.md", render_markdown(api, locales))
        markdown_files += 1

    return RenderResult(json_files=json_files, markdown_files=markdown_files)
