"""
apigen package

This package builds the API document of a component library.

Key responsibilities are split across modules:
- `config.py`: parse the optional YAML config file into `Settings`
- `registry.py`: read-only registry of components/directives, loaded from a YAML manifest
- `sources.py`: best-effort locale and static map loading
- `parsing.py`: structural data (props, mixins, sass variables)
- `descriptions.py`: per-locale description resolution
- `api.py`: entity classification and corpus aggregation
- `report.py`: missing description report
- `renderer.py`: deterministic JSON / Markdown output
- `cli.py`: CLI entrypoint and orchestration (config -> assemble -> write)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
