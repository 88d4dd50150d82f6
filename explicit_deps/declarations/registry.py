"""Parser registry: discover build files and match them to declaration parsers."""

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Protocol, runtime_checkable

from explicit_deps.models import DeclaredDependency

# Build output, IDE and VCS directories never hold declarations of their own.
SKIP_DIRS = (
    ".git", ".bsp", ".bloop", ".metals", ".scala-build", ".idea", ".gradle",
    "target", "build", "out", "node_modules",
)


@runtime_checkable
class DeclarationParser(Protocol):
    """Interface that every declaration parser must satisfy."""

    detection_method: str
    file_patterns: list[str]

    def parse(self, file_path: Path, content: str) -> list[DeclaredDependency]: ...


PARSER_REGISTRY: dict[str, DeclarationParser] = {}


def register_parser(parser: DeclarationParser) -> None:
    """Register a parser instance by its detection_method."""
    PARSER_REGISTRY[parser.detection_method] = parser


def is_skipped(path: Path, root: Path, skip_dirs=SKIP_DIRS) -> bool:
    """True if any directory between *root* and *path* matches *skip_dirs*."""
    parts = path.relative_to(root).parts[:-1]
    return any(fnmatch.fnmatch(part, pattern) for part in parts for pattern in skip_dirs)


def is_test_scope(path: Path, root: Path) -> bool:
    """True for test sources: ``*.test.<ext>`` files and anything under a ``test`` directory."""
    if path.stem.endswith(".test"):
        return True
    return "test" in path.relative_to(root).parts[:-1]


def discover_build_files(
    project_root: Path, include_tests: bool = False
) -> list[tuple[DeclarationParser, Path]]:
    """Walk the project and match build files to registered parsers.

    Test-scope files are left out unless *include_tests* is set.
    Returns a list of (parser, matched_file) pairs.
    """
    matches: list[tuple[DeclarationParser, Path]] = []
    for parser in PARSER_REGISTRY.values():
        for pattern in parser.file_patterns:
            for hit in sorted(project_root.glob(pattern)):
                if not hit.is_file() or is_skipped(hit, project_root):
                    continue
                if not include_tests and is_test_scope(hit, project_root):
                    continue
                matches.append((parser, hit))
    return matches
