"""Detect declared dependencies that no import appears to use."""

from __future__ import annotations

from typing import AbstractSet, Sequence

import structlog

from explicit_deps.analysis.heuristics import is_provided_by, package_guesses
from explicit_deps.models import DeclaredDependency, UnusedDependency

_default_log = structlog.get_logger("explicit_deps.analysis")

UNUSED_REASON = "No imports found that could be provided by this dependency"


def detect_unused_dependencies(
    declared: Sequence[DeclaredDependency],
    imports: AbstractSet[str],
    log=None,
) -> tuple[UnusedDependency, ...]:
    """Return the declared dependencies none of whose package guesses prefix an import.

    Findings keep the declaration order.
    """
    log = log or _default_log
    unused: list[UnusedDependency] = []
    for dep in declared:
        guesses = package_guesses(dep.organization, dep.name)
        if any(is_provided_by(imp, guesses) for imp in imports):
            continue
        unused.append(UnusedDependency(dependency=dep, reason=UNUSED_REASON))

    log.debug("analysis.unused_detected", count=len(unused), declared=len(declared))
    return tuple(unused)
