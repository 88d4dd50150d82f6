"""Collect the source files of a project for import analysis."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from explicit_deps.declarations.registry import SKIP_DIRS, is_skipped, is_test_scope
from explicit_deps.models import PathSource

SOURCE_EXTENSIONS = (".scala", ".sc", ".java", ".kt")


def collect_sources(
    root: Path,
    extensions: Iterable[str] = SOURCE_EXTENSIONS,
    skip_dirs: Iterable[str] = SKIP_DIRS,
    include_tests: bool = False,
) -> list[PathSource]:
    """Recursively collect source files under *root*, sorted by path.

    Test sources (``*.test.scala`` and the like, anything under a ``test``
    directory) are left out unless *include_tests* is set. A single file is
    accepted as *root* too and is always kept.
    """
    extensions = tuple(extensions)
    if root.is_file():
        return [PathSource(root)] if root.suffix in extensions else []

    skip_dirs = tuple(skip_dirs)
    sources: list[PathSource] = []
    for path in sorted(root.rglob("*")):
        if not path.is_file() or path.suffix not in extensions:
            continue
        if is_skipped(path, root, skip_dirs):
            continue
        if not include_tests and is_test_scope(path, root):
            continue
        sources.append(PathSource(path))
    return sources
