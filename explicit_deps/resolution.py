"""Load a resolved dependency graph produced by coursier.

Two inputs are understood:

* the JSON report written by ``cs fetch --json-output-file report.json``::

    {"dependencies": [{"coord": "org.typelevel:cats-core_3:2.9.0", ...}, ...]}

  ``coord`` is ``org:name:version`` or ``org:name:type:classifier:version``.

* the plain listing printed by ``cs resolve``, one ``org:name:version[:config]``
  per line; blank lines and ``#`` comments are ignored.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from explicit_deps.exceptions import ResolutionFormatError, ResolutionUnavailableError
from explicit_deps.models import ResolvedDependency, ResolvedGraph

log = structlog.get_logger("explicit_deps.resolution")


def parse_json_report(content: str, source: str = "<json>") -> ResolvedGraph:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ResolutionFormatError(source, f"invalid JSON: {e}") from e

    entries = data.get("dependencies") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ResolutionFormatError(source, "missing 'dependencies' list")

    deps: list[ResolvedDependency] = []
    for entry in entries:
        coord = entry.get("coord") if isinstance(entry, dict) else None
        if not isinstance(coord, str):
            raise ResolutionFormatError(source, f"dependency entry without 'coord': {entry!r}")
        parts = coord.split(":")
        if len(parts) not in (3, 5) or not all(parts):
            raise ResolutionFormatError(source, f"unrecognized coordinates {coord!r}")
        deps.append(ResolvedDependency(organization=parts[0], name=parts[1], version=parts[-1]))
    return ResolvedGraph.of(deps)


def parse_text_listing(content: str, source: str = "<text>") -> ResolvedGraph:
    deps: list[ResolvedDependency] = []
    for lineno, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split(":")
        if len(parts) < 3 or not all(parts[:3]):
            raise ResolutionFormatError(source, f"line {lineno}: unrecognized coordinates {line!r}")
        deps.append(ResolvedDependency(organization=parts[0], name=parts[1], version=parts[2]))
    return ResolvedGraph.of(deps)


def load_resolution(path: Path) -> ResolvedGraph:
    """Read a resolution report, picking the format from its content."""
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ResolutionUnavailableError(
            f"No dependency resolution available at {path}. "
            "Please resolve the project dependencies first."
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResolutionFormatError(str(path), str(e)) from e

    if content.lstrip().startswith("{"):
        graph = parse_json_report(content, str(path))
    else:
        graph = parse_text_listing(content, str(path))
    log.debug("resolution.loaded", file=str(path), dependencies=len(graph))
    return graph
