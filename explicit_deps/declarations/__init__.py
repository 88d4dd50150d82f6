"""Discover the dependencies a project explicitly declares."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import structlog

# Ensure parsers are registered before any discovery runs.
import explicit_deps.declarations.parsers  # noqa: F401
from explicit_deps.declarations.registry import discover_build_files
from explicit_deps.models import DeclaredDependency, Position

log = structlog.get_logger("explicit_deps.declarations")


def discover_declarations(
    project_root: Path, include_tests: bool = False
) -> list[DeclaredDependency]:
    """Parse every build file under *project_root* for declared dependencies.

    Test-scope declarations, and files that are test sources, are skipped unless
    *include_tests* is set.

    Positions are made relative to *project_root*. A dependency declared more
    than once (same organization and name) is kept at its first declaration.
    """
    results: list[DeclaredDependency] = []
    seen: dict[tuple[str, str], DeclaredDependency] = {}
    for parser, file_path in discover_build_files(project_root, include_tests):
        try:
            content = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            log.debug("declarations.unreadable", file=str(file_path), error=str(exc))
            continue
        rel = str(file_path.relative_to(project_root))
        for dep in parser.parse(file_path, content):
            if dep.scope == "test" and not include_tests:
                continue
            pos = dep.position or Position(source_file=rel)
            dep = replace(
                dep, position=Position(source_file=rel, line=pos.line, column=pos.column)
            )
            prev = seen.get(dep.identity)
            if prev is not None:
                log.debug(
                    "declarations.duplicate",
                    dependency=f"{dep.organization}:{dep.name}",
                    kept=str(prev.position),
                    dropped=str(dep.position),
                )
                continue
            seen[dep.identity] = dep
            results.append(dep)
    return results


__all__ = ["discover_declarations"]
