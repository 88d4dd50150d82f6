"""Dependency analysis entry point: unused and missing explicit dependencies.

Works like sbt-explicit-dependencies / mill-explicit-deps, but from import
statements alone. Results are heuristic: dependencies loaded through
reflection or service loading look unused, and packages whose names diverge
from their artifact coordinates are not recognised.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import structlog

from explicit_deps.analysis.imports import extract_imports
from explicit_deps.analysis.missing import detect_missing_explicit_dependencies
from explicit_deps.analysis.unused import detect_unused_dependencies
from explicit_deps.exceptions import ResolutionUnavailableError
from explicit_deps.models import (
    DeclaredDependency,
    DependencyAnalysisResult,
    ResolvedGraph,
    SourceText,
)

_default_log = structlog.get_logger("explicit_deps.analysis")


def analyze_dependencies(
    sources: Iterable[SourceText],
    declared: Sequence[DeclaredDependency],
    resolution: ResolvedGraph | None,
    log=None,
) -> DependencyAnalysisResult:
    """Analyze *sources* against the *declared* dependencies and the *resolution*.

    Raises :class:`ResolutionUnavailableError` if *resolution* is None. Any
    other irregularity (unreadable sources, unmatched imports) degrades to
    "no finding".
    """
    log = log or _default_log
    if resolution is None:
        raise ResolutionUnavailableError()

    sources = tuple(sources)
    declared = tuple(declared)
    log.debug(
        "analysis.started",
        sources=len(sources),
        declared=len(declared),
        resolved=len(resolution),
    )

    imports = extract_imports(sources, log)
    log.debug("analysis.imports_extracted", count=len(imports))

    unused = detect_unused_dependencies(declared, imports, log)
    missing = detect_missing_explicit_dependencies(
        declared, imports, resolution, sources, log
    )
    return DependencyAnalysisResult(unused=unused, missing=missing)
