"""Data models shared by the analysis engine and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable


@dataclass(frozen=True)
class Position:
    """Where a dependency was declared (file, 1-based line and column)."""

    source_file: str
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.source_file
        if self.column is None:
            return f"{self.source_file}:{self.line}"
        return f"{self.source_file}:{self.line}:{self.column}"


@dataclass(frozen=True)
class DeclaredDependency:
    """A dependency explicitly listed in the project configuration."""

    organization: str
    name: str
    version: str | None
    position: Position | None = field(default=None, compare=False)
    detection_method: str = field(default="", compare=False)
    scope: str = field(default="main", compare=False)
    separator: str = ":"

    @property
    def identity(self) -> tuple[str, str]:
        return (self.organization, self.name)

    @property
    def cross_version(self) -> bool:
        return self.separator != ":"

    def render(self) -> str:
        """Render in using-directive form, e.g. ``com.lihaoyi::os-lib:0.9.1``."""
        coords = f"{self.organization}{self.separator}{self.name}"
        if self.version:
            coords += f":{self.version}"
        return coords


@dataclass(frozen=True)
class ResolvedDependency:
    """A node of the resolved (transitive) dependency graph."""

    organization: str
    name: str
    version: str

    @property
    def identity(self) -> tuple[str, str]:
        return (self.organization, self.name)

    @property
    def coordinates(self) -> str:
        return f"{self.organization}:{self.name}:{self.version}"


@dataclass(frozen=True)
class ResolvedGraph:
    """All dependencies of a resolution, direct and transitive.

    Nodes are unique by ``(organization, name)``; the first occurrence wins.
    """

    dependencies: tuple[ResolvedDependency, ...] = ()

    @classmethod
    def of(cls, dependencies: Iterable[ResolvedDependency]) -> ResolvedGraph:
        seen: set[tuple[str, str]] = set()
        unique: list[ResolvedDependency] = []
        for dep in dependencies:
            if dep.identity in seen:
                continue
            seen.add(dep.identity)
            unique.append(dep)
        return cls(dependencies=tuple(unique))

    def __iter__(self):
        return iter(self.dependencies)

    def __len__(self) -> int:
        return len(self.dependencies)


# ── Source texts ─────────────────────────────────────────────────────────


@runtime_checkable
class SourceText(Protocol):
    """A unit of source content with a stable identity for attribution.

    ``read()`` may raise ``OSError`` or ``UnicodeDecodeError``.
    """

    @property
    def identity(self) -> str: ...

    def read(self) -> str: ...


@dataclass(frozen=True)
class PathSource:
    """A source file on disk, read lazily."""

    path: Path

    @property
    def identity(self) -> str:
        return str(self.path)

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")


@dataclass(frozen=True)
class InMemorySource:
    """A source buffer that does not live on disk (e.g. generated or piped code)."""

    identity: str
    content: bytes

    @classmethod
    def from_text(cls, identity: str, text: str) -> InMemorySource:
        return cls(identity=identity, content=text.encode("utf-8"))

    def read(self) -> str:
        return self.content.decode("utf-8")


# ── Findings ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class UnusedDependency:
    """A declared dependency that no import appears to come from."""

    dependency: DeclaredDependency
    reason: str


@dataclass(frozen=True)
class MissingDependency:
    """A transitive dependency imported directly but not declared."""

    organization_module: str
    version: str
    used_in_files: tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class DependencyAnalysisResult:
    unused: tuple[UnusedDependency, ...] = ()
    missing: tuple[MissingDependency, ...] = ()
