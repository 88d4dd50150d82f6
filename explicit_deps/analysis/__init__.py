"""Analysis engine: import extraction, package heuristics and the two detectors."""

from explicit_deps.analysis.analyzer import analyze_dependencies
from explicit_deps.analysis.heuristics import package_guesses
from explicit_deps.analysis.imports import extract_imports

__all__ = ["analyze_dependencies", "extract_imports", "package_guesses"]
