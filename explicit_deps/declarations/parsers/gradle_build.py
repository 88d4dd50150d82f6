"""Parser for Gradle build files (build.gradle / build.gradle.kts).

Extracts dependencies declared with standard Gradle configurations like
implementation, api, compileOnly, runtimeOnly, etc.

Handles both Groovy DSL and Kotlin DSL syntax:
  - implementation "group:artifact:version"
  - implementation("group:artifact:version")
  - api(project(":submodule"))          → skipped (internal)
"""

from __future__ import annotations

import re
from pathlib import Path

from explicit_deps.declarations.registry import register_parser
from explicit_deps.models import DeclaredDependency, Position

# Gradle configuration names (not exhaustive, but covers the common ones)
_CONFIGS = (
    r"(?:implementation|api|compileOnly|compileOnlyApi|runtimeOnly|"
    r"annotationProcessor|kapt|ksp|"
    r"testImplementation|testCompileOnly|testRuntimeOnly|"
    r"optional|provided|compile|runtime|testCompile|testRuntime|"
    r"\w+Implementation|\w+Api|\w+CompileOnly|\w+RuntimeOnly)"
)

_TEST_PREFIXES = ("test", "androidTest")

_DEP_RE = re.compile(
    rf"\b(?P<config>{_CONFIGS})"
    r"\s*\(?\s*"
    r"""["']"""                          # opening quote
    r"([A-Za-z0-9._-]+)"                # group
    r":"
    r"([A-Za-z0-9._-]+)"                # artifact
    r"(?::([A-Za-z0-9._+\-]+))?"        # optional version
    r"""["']"""                          # closing quote
)


class GradleBuildParser:
    detection_method = "gradle"
    file_patterns = ["**/build.gradle", "**/build.gradle.kts"]

    def parse(self, file_path: Path, content: str) -> list[DeclaredDependency]:
        seen: dict[tuple[str, str], int] = {}
        deps: list[DeclaredDependency] = []

        for m in _DEP_RE.finditer(content):
            group, artifact, version = m.group(2), m.group(3), m.group(4)
            config = m.group("config")

            scope = "test" if config.startswith(_TEST_PREFIXES) else "main"
            prev = seen.get((group, artifact))
            # A main-scope declaration outranks an earlier test-scope one
            if prev is not None and (scope == "test" or deps[prev].scope == "main"):
                continue

            line_start = content.rfind("\n", 0, m.start()) + 1
            dep = DeclaredDependency(
                organization=group,
                name=artifact,
                version=version,
                position=Position(
                    source_file=file_path.name,
                    line=content.count("\n", 0, m.start()) + 1,
                    column=m.start() - line_start + 1,
                ),
                detection_method=self.detection_method,
                scope=scope,
            )
            if prev is not None:
                deps[prev] = dep
            else:
                seen[(group, artifact)] = len(deps)
                deps.append(dep)

        return deps


register_parser(GradleBuildParser())
