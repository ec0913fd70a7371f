"""
cli.py

Responsibility: CLI entrypoint for apigen.

Commands:
1) `build`: config -> assemble complete API -> write JSON / Markdown into --out
2) `show NAME`: print the API record of one component, directive or the global object
3) `missing`: print undocumented items per entity and locale (exit status 1 if any)

This module should orchestrate behavior but keep concerns isolated:
- Settings: `config.py`
- Assembly: `api.py`
- Output: `renderer.py`
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from apigen import __version__
from apigen.api import ApiAssembler, NotFoundError
from apigen.config import ConfigError, Settings, load_settings
from apigen.registry import RegistryError
from apigen.renderer import RenderError, write_api
from apigen.report import find_missing

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


def _settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)
    locales = tuple(args.locale) if args.locale else None
    settings = settings.with_overrides(locales=locales)
    if not settings.locales:
        raise CLIError("At least one locale is required (use --locale or `locales` in the config file)")
    return settings


def _print_json(data: object) -> None:
    sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")


def build_cmd(args: argparse.Namespace) -> int:
    settings = _settings(args)
    assembler = ApiAssembler.from_settings(settings)
    locales = list(settings.locales)

    api = assembler.get_complete_api(locales)
    out_dir = Path(args.out)
    result = write_api(api, out_dir, locales=locales, markdown=not args.no_markdown)

    logger.info("Wrote %d JSON and %d Markdown file(s) to %s", result.json_files, result.markdown_files, out_dir)
    return 0


def show_cmd(args: argparse.Namespace) -> int:
    settings = _settings(args)
    assembler = ApiAssembler.from_settings(settings)
    _print_json(assembler.get_api(args.name, list(settings.locales)))
    return 0


def missing_cmd(args: argparse.Namespace) -> int:
    settings = _settings(args)
    assembler = ApiAssembler.from_settings(settings)
    locales = list(settings.locales)

    report = find_missing(assembler.get_complete_api(locales)["items"], locales)
    _print_json(report)
    return 1 if report else 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="Path to the YAML config file (default: built-in defaults)")
    p.add_argument(
        "--locale",
        action="append",
        default=None,
        help="Locale to describe; repeat for several (overrides config `locales`)",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="apigen", description="apigen - component library API document generator")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("build", help="Assemble the complete API and write it to a directory")
    _add_common(b)
    b.add_argument("--out", default="dist", help="Output directory (default: dist)")
    b.add_argument("--no-markdown", action="store_true", help="Only write JSON files")
    b.set_defaults(func=build_cmd)

    s = sub.add_parser("show", help="Print the API record of a single entity")
    s.add_argument("name", help="Component (v-btn), directive (v-ripple) or global object ($vuetify)")
    _add_common(s)
    s.set_defaults(func=show_cmd)

    m = sub.add_parser("missing", help="Report items without descriptions")
    _add_common(m)
    m.set_defaults(func=missing_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return int(args.func(args))
    except (NotFoundError, ConfigError, RegistryError, RenderError, CLIError) as e:
        sys.stderr.write(f"apigen: error: {e}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
