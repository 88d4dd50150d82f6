"""Human-readable and JSON rendering of analysis results."""

from __future__ import annotations

from pathlib import PurePath
from typing import Any, Sequence

from explicit_deps.models import (
    DependencyAnalysisResult,
    MissingDependency,
    UnusedDependency,
)

UNUSED_CAVEAT = (
    "Note: This analysis is based on import statements and may produce false positives.",
    "Dependencies might be used via reflection, service loading, or other mechanisms.",
)

MISSING_CAVEAT = (
    "Note: These dependencies are currently available transitively but should be declared explicitly.",
    "This ensures your build remains stable if upstream dependencies change.",
)


def render_unused(findings: Sequence[UnusedDependency]) -> list[str]:
    if not findings:
        return ["✓ No unused dependencies found."]

    lines = ["", f"⚠ Found {len(findings)} potentially unused dependencies:", ""]
    for finding in findings:
        dep = finding.dependency
        coords = f"{dep.organization}:{dep.name}"
        if dep.version:
            coords += f":{dep.version}"
        lines.append(f"  • {coords}")
        lines.append(f"    {finding.reason}")
        lines.append(f"    Consider removing: //> using dep {dep.render()}")
        lines.append("")
    lines.extend(UNUSED_CAVEAT)
    lines.append("")
    return lines


def render_missing(findings: Sequence[MissingDependency]) -> list[str]:
    if not findings:
        return ["✓ All directly used dependencies are explicitly declared."]

    lines = ["", f"⚠ Found {len(findings)} transitive dependencies that are directly used:", ""]
    for finding in findings:
        coords = f"{finding.organization_module}:{finding.version}"
        lines.append(f"  • {coords}")
        lines.append(f"    {finding.reason}")
        if finding.used_in_files:
            names = ", ".join(PurePath(f).name for f in finding.used_in_files)
            lines.append(f"    Used in: {names}")
        lines.append(f"    Consider adding: //> using dep {coords}")
        lines.append("")
    lines.extend(MISSING_CAVEAT)
    lines.append("")
    return lines


def result_to_dict(result: DependencyAnalysisResult) -> dict[str, Any]:
    return {
        "unused": [
            {
                "organization": f.dependency.organization,
                "name": f.dependency.name,
                "version": f.dependency.version,
                "declared_at": str(f.dependency.position) if f.dependency.position else None,
                "reason": f.reason,
            }
            for f in result.unused
        ],
        "missing": [
            {
                "organization_module": f.organization_module,
                "version": f.version,
                "used_in_files": list(f.used_in_files),
                "reason": f.reason,
            }
            for f in result.missing
        ],
    }
