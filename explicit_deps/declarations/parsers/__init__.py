"""Declaration parsers, auto-registered on import."""

from explicit_deps.declarations.parsers import (
    gradle_build,  # noqa: F401
    maven_pom,  # noqa: F401
    using_directive,  # noqa: F401
)
