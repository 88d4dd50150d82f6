"""Parser for Maven pom.xml files."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from explicit_deps.declarations.registry import register_parser
from explicit_deps.models import DeclaredDependency, Position

_NS = "{http://maven.apache.org/POM/4.0.0}"

_PROP_RE = re.compile(r"\$\{([^}]+)\}")

# BOM imports pull in no code
_IGNORED_SCOPES = {"import"}


def _resolve_props(value: str, props: dict[str, str]) -> str:
    """Replace ${property} placeholders with values from <properties>."""

    def _replace(m: re.Match) -> str:
        return props.get(m.group(1), m.group(0))  # keep original if not found

    return _PROP_RE.sub(_replace, value)


def _text(element: ET.Element | None) -> str | None:
    if element is None:
        return None
    return element.text.strip() if element.text else None


class MavenPomParser:
    detection_method = "maven-pom"
    file_patterns = ["**/pom.xml"]

    def parse(self, file_path: Path, content: str) -> list[DeclaredDependency]:
        try:
            root = ET.fromstring(content)
        except ET.ParseError:
            return []

        props = self._extract_properties(root)
        deps: list[DeclaredDependency] = []

        for ns in (_NS, ""):
            # Project-level and profile <dependencies> only
            dep_els = root.findall(f"{ns}dependencies/{ns}dependency") + root.findall(
                f"{ns}profiles/{ns}profile/{ns}dependencies/{ns}dependency"
            )
            for dep_el in dep_els:
                group_id = _text(dep_el.find(f"{ns}groupId"))
                artifact_id = _text(dep_el.find(f"{ns}artifactId"))
                version = _text(dep_el.find(f"{ns}version"))
                scope = _text(dep_el.find(f"{ns}scope"))

                if not group_id or not artifact_id or scope in _IGNORED_SCOPES:
                    continue

                deps.append(
                    DeclaredDependency(
                        organization=_resolve_props(group_id, props),
                        name=_resolve_props(artifact_id, props),
                        version=_resolve_props(version, props) if version else None,
                        position=Position(source_file=file_path.name),
                        detection_method=self.detection_method,
                        scope="test" if scope == "test" else "main",
                    )
                )

        return deps

    @staticmethod
    def _extract_properties(root: ET.Element) -> dict[str, str]:
        """Extract <properties> key-value pairs from the POM root."""
        props: dict[str, str] = {}
        for ns in (_NS, ""):
            props_el = root.find(f"{ns}properties")
            if props_el is not None:
                for child in props_el:
                    tag = child.tag.split("}")[-1]
                    if child.text:
                        props[tag] = child.text.strip()
        return props


register_parser(MavenPomParser())
