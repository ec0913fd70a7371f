from __future__ import annotations

import json
from pathlib import Path

import pytest

from apigen.cli import main


def test_build(library: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"

    assert main(["build", "--config", str(library / "apigen.yaml"), "--out", str(out)]) == 0

    api = json.loads((out / "api.json").read_text(encoding="utf-8"))
    assert api["items"][0]["name"] == "$vuetify"
    assert set(api["items"][0]["functions"][0]["description"]) == {"en", "ru"}
    assert (out / "api.md").is_file()


def test_build_locale_override_and_no_markdown(library: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    argv = ["build", "--config", str(library / "apigen.yaml"), "--locale", "en", "--out", str(out), "--no-markdown"]

    assert main(argv) == 0

    btn = json.loads((out / "items" / "v-btn.json").read_text(encoding="utf-8"))
    assert btn["props"][0]["description"] == {"en": "Icon button"}
    assert not (out / "api.md").exists()


def test_show(library: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "v-ripple", "--config", str(library / "apigen.yaml"), "--locale", "en"]) == 0

    record = json.loads(capsys.readouterr().out)
    assert record["name"] == "v-ripple"
    assert record["argument"]["description"] == {"en": "Ripple options"}


def test_show_unknown_name(library: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "not-a-real-component", "--config", str(library / "apigen.yaml")]) == 1

    assert "Could not find component: not-a-real-component" in capsys.readouterr().err


def test_missing_reports_gaps(library: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["missing", "--config", str(library / "apigen.yaml"), "--locale", "en"]) == 1

    report = json.loads(capsys.readouterr().out)
    assert report["v-btn"] == {"en": ["slots.default", "sass.$btn-font"]}


def test_bad_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "v-btn", "--config", str(tmp_path / "missing.yaml")]) == 1

    assert "Config file does not exist" in capsys.readouterr().err


def test_missing_registry(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "apigen.yaml"
    config.write_text("registry: nowhere.yaml\n", encoding="utf-8")

    assert main(["build", "--config", str(config), "--out", str(tmp_path / "out")]) == 1

    assert "Registry manifest does not exist" in capsys.readouterr().err


def test_empty_locales_is_an_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "apigen.yaml"
    config.write_text("locales: []\n", encoding="utf-8")

    assert main(["show", "$vuetify", "--config", str(config)]) == 1

    assert "At least one locale is required" in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
