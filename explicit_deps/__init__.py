"""explicit-deps: detect unused and undeclared-but-imported dependencies."""

__version__ = "0.1.0"

from explicit_deps.analysis import analyze_dependencies, extract_imports, package_guesses
from explicit_deps.exceptions import (
    AnalyzerError,
    ResolutionFormatError,
    ResolutionUnavailableError,
)
from explicit_deps.models import (
    DeclaredDependency,
    DependencyAnalysisResult,
    InMemorySource,
    MissingDependency,
    PathSource,
    Position,
    ResolvedDependency,
    ResolvedGraph,
    SourceText,
    UnusedDependency,
)

__all__ = [
    "AnalyzerError",
    "DeclaredDependency",
    "DependencyAnalysisResult",
    "InMemorySource",
    "MissingDependency",
    "PathSource",
    "Position",
    "ResolutionFormatError",
    "ResolutionUnavailableError",
    "ResolvedDependency",
    "ResolvedGraph",
    "SourceText",
    "UnusedDependency",
    "analyze_dependencies",
    "extract_imports",
    "package_guesses",
]
