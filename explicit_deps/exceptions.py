"""Custom exceptions for explicit-deps."""


class AnalyzerError(Exception):
    """Base exception for all analyzer errors."""


class ResolutionUnavailableError(AnalyzerError):
    """Raised when no resolved dependency graph is available for the project."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message or "No dependency resolution available. Please compile the project first."
        )


class ResolutionFormatError(AnalyzerError):
    """Raised when a resolution report cannot be parsed."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"Cannot read dependency resolution from {source}: {detail}")
