"""Parser for ``//> using dep`` directives in Scala and Java sources.

Handles:
  - //> using dep "com.lihaoyi::os-lib:0.9.1"
  - //> using dep com.lihaoyi::os-lib:0.9.1
  - //> using deps "org.typelevel::cats-core:2.9.0" "com.lihaoyi::upickle:3.1.0"
  - //> using dep org.postgresql:postgresql:42.6.0   (Java-style, single colon)
  - //> using test.dep org.scalameta::munit:1.0.0     (test scope)
"""

from __future__ import annotations

import re
from pathlib import Path

from explicit_deps.declarations.registry import register_parser
from explicit_deps.models import DeclaredDependency, Position

_DIRECTIVE_RE = re.compile(
    r"^\s*//>\s*using\s+(?P<test>test\.)?(?:dep|deps|dependency|dependencies)\s+(?P<values>.+?)\s*$"
)

# A quoted or bare value
_VALUE_RE = re.compile(r""""([^"]*)"|'([^']*)'|(\S+)""")

# org(:|::|:::)name(:version)?
_COORD_RE = re.compile(
    r"^(?P<org>[^:\s]+)"
    r"(?P<sep>:::|::|:)"
    r"(?P<name>[^:\s]+)"
    r"(?::(?P<version>[^:\s,]+))?"
)


def parse_coordinates(value: str) -> tuple[str, str, str | None, str] | None:
    """Split ``org::name:version`` into (org, name, version, separator)."""
    m = _COORD_RE.match(value.strip())
    if not m:
        return None
    return m.group("org"), m.group("name"), m.group("version"), m.group("sep")


class UsingDirectiveParser:
    detection_method = "using-directive"
    file_patterns = ["**/*.scala", "**/*.sc", "**/*.java"]

    def parse(self, file_path: Path, content: str) -> list[DeclaredDependency]:
        deps: list[DeclaredDependency] = []
        for lineno, line in enumerate(content.splitlines(), start=1):
            directive = _DIRECTIVE_RE.match(line)
            if not directive:
                continue
            offset = directive.start("values")
            scope = "test" if directive.group("test") else "main"
            for value in _VALUE_RE.finditer(directive.group("values")):
                raw = next(g for g in value.groups() if g is not None)
                coords = parse_coordinates(raw)
                if coords is None:
                    continue
                org, name, version, sep = coords
                deps.append(
                    DeclaredDependency(
                        organization=org,
                        name=name,
                        version=version,
                        position=Position(
                            source_file=file_path.name,
                            line=lineno,
                            column=offset + value.start() + 1,
                        ),
                        detection_method=self.detection_method,
                        separator=sep,
                        scope=scope,
                    )
                )
        return deps


register_parser(UsingDirectiveParser())
