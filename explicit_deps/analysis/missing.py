"""Detect transitive dependencies that are imported directly but never declared.

Such dependencies compile today only because something else pulls them in;
declaring them keeps the build stable when upstream dependencies change.
"""

from __future__ import annotations

from typing import AbstractSet, Sequence

import structlog

from explicit_deps.analysis.heuristics import matching_imports, package_guesses
from explicit_deps.analysis.imports import files_importing
from explicit_deps.models import (
    DeclaredDependency,
    MissingDependency,
    ResolvedGraph,
    SourceText,
)

_default_log = structlog.get_logger("explicit_deps.analysis")

MISSING_REASON = (
    "Directly imported but not explicitly declared (transitive through other dependencies)"
)


def detect_missing_explicit_dependencies(
    declared: Sequence[DeclaredDependency],
    imports: AbstractSet[str],
    resolution: ResolvedGraph,
    sources: Sequence[SourceText],
    log=None,
) -> tuple[MissingDependency, ...]:
    """Return undeclared resolved dependencies that some import plausibly comes from.

    Identity is ``(organization, name)``; versions are ignored. Findings are
    sorted by ``organization:name``.
    """
    log = log or _default_log
    declared_ids = {dep.identity for dep in declared}
    transitive = [dep for dep in resolution if dep.identity not in declared_ids]
    log.debug("analysis.transitive_candidates", count=len(transitive))

    missing: list[MissingDependency] = []
    for dep in transitive:
        matched = matching_imports(imports, package_guesses(dep.organization, dep.name))
        if not matched:
            continue
        used_in = files_importing(sources, matched, log)
        log.debug(
            "analysis.undeclared_import",
            dependency=dep.coordinates,
            imports=sorted(matched),
            files=len(used_in),
        )
        missing.append(
            MissingDependency(
                organization_module=f"{dep.organization}:{dep.name}",
                version=dep.version,
                used_in_files=used_in,
                reason=MISSING_REASON,
            )
        )

    missing.sort(key=lambda m: m.organization_module)
    log.debug("analysis.missing_detected", count=len(missing))
    return tuple(missing)
