"""Line-anchored lexical scan of source texts for import statements."""

from __future__ import annotations

import re
from typing import Iterable

import structlog

from explicit_deps.models import SourceText

_default_log = structlog.get_logger("explicit_deps.analysis")

# The path stops at whitespace, "{" or "("
_IMPORT_RE = re.compile(r"^\s*import\s+([^\s{(]+)")

# Left behind by selector groups (``a.b.{C, D}``)
_TRAILING_JUNK = "."


def _read(source: SourceText, log) -> str | None:
    """Read *source*, returning None (and logging at debug) on failure."""
    try:
        return source.read()
    except (OSError, UnicodeDecodeError) as exc:
        log.debug(
            "analysis.source_unreadable",
            source=source.identity,
            error=str(exc),
        )
        return None


def import_paths_in(text: str) -> set[str]:
    """Return the distinct import paths declared in *text*."""
    found: set[str] = set()
    for line in text.splitlines():
        m = _IMPORT_RE.match(line)
        if not m:
            continue
        # A statement ends at ";" (Java, or several imports on one line)
        path = m.group(1).split(";", 1)[0].strip().rstrip(_TRAILING_JUNK)
        if path:
            found.add(path)
    return found


def extract_imports(sources: Iterable[SourceText], log=None) -> frozenset[str]:
    """Union of import paths over all *sources*.

    Unreadable sources contribute nothing; extraction never fails as a whole.
    """
    log = log or _default_log
    imports: set[str] = set()
    for source in sources:
        content = _read(source, log)
        if content is None:
            continue
        imports |= import_paths_in(content)
    return frozenset(imports)


def files_importing(
    sources: Iterable[SourceText],
    import_paths: Iterable[str],
    log=None,
) -> tuple[str, ...]:
    """Identities of the sources that literally contain ``import <path>``.

    Ordered by first appearance in *sources*, without duplicates.
    """
    log = log or _default_log
    needles = [f"import {path}" for path in sorted(import_paths)]
    matching: dict[str, None] = {}
    for source in sources:
        content = _read(source, log)
        if content is None:
            continue
        if any(needle in content for needle in needles):
            matching.setdefault(source.identity, None)
    return tuple(matching)
