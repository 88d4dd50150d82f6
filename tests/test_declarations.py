"""Tests for declared-dependency discovery and its parsers."""

from __future__ import annotations

import pytest

from explicit_deps.declarations import discover_declarations
from explicit_deps.declarations.parsers.gradle_build import GradleBuildParser
from explicit_deps.declarations.parsers.maven_pom import MavenPomParser
from explicit_deps.declarations.parsers.using_directive import (
    UsingDirectiveParser,
    parse_coordinates,
)
from explicit_deps.declarations.registry import PARSER_REGISTRY, discover_build_files


# ── Parser registry ──────────────────────────────────────────────────────


class TestRegistry:
    def test_all_parsers_registered(self):
        assert {"using-directive", "gradle", "maven-pom"}.issubset(PARSER_REGISTRY)

    def test_discover_build_files(self, tmp_path):
        (tmp_path / "pom.xml").write_text("<project></project>\n")
        (tmp_path / "build.gradle").write_text("")
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "Main.scala").write_text("object Main\n")
        methods = sorted(p.detection_method for p, _ in discover_build_files(tmp_path))
        assert methods == ["gradle", "maven-pom", "using-directive"]

    def test_skips_build_output(self, tmp_path):
        gen = tmp_path / ".scala-build" / "project_abc"
        gen.mkdir(parents=True)
        (gen / "Main.scala").write_text('//> using dep "a::b:1"\n')
        (tmp_path / "target").mkdir()
        (tmp_path / "target" / "pom.xml").write_text("<project></project>\n")
        assert discover_build_files(tmp_path) == []

    def test_empty_project(self, tmp_path):
        assert discover_build_files(tmp_path) == []


# ── Using directives ─────────────────────────────────────────────────────


class TestParseCoordinates:
    def test_cross_version(self):
        assert parse_coordinates("com.lihaoyi::os-lib:0.9.1") == ("com.lihaoyi", "os-lib", "0.9.1", "::")

    def test_platform_cross_version(self):
        assert parse_coordinates("org.scala-js:::scalajs-dom:2.4.0") == (
            "org.scala-js",
            "scalajs-dom",
            "2.4.0",
            ":::",
        )

    def test_java_style(self):
        assert parse_coordinates("org.postgresql:postgresql:42.6.0") == (
            "org.postgresql",
            "postgresql",
            "42.6.0",
            ":",
        )

    def test_no_version(self):
        assert parse_coordinates("com.lihaoyi::pprint") == ("com.lihaoyi", "pprint", None, "::")

    def test_garbage(self):
        assert parse_coordinates("not-a-dependency") is None


class TestUsingDirectiveParser:
    @pytest.fixture
    def parser(self):
        return UsingDirectiveParser()

    def test_quoted_dependency(self, parser, tmp_path):
        f = tmp_path / "Main.scala"
        f.write_text('package example\n\n//> using dep "com.lihaoyi::os-lib:0.9.1"\n')
        deps = parser.parse(f, f.read_text())
        assert len(deps) == 1
        d = deps[0]
        assert (d.organization, d.name, d.version) == ("com.lihaoyi", "os-lib", "0.9.1")
        assert d.cross_version is True
        assert d.position.line == 3
        assert d.position.column == 15
        assert d.detection_method == "using-directive"

    def test_bare_dependency(self, parser, tmp_path):
        f = tmp_path / "Main.scala"
        f.write_text("//> using dep com.lihaoyi::upickle:3.1.0\n")
        deps = parser.parse(f, f.read_text())
        assert [(d.organization, d.name) for d in deps] == [("com.lihaoyi", "upickle")]

    def test_several_values_per_line(self, parser, tmp_path):
        f = tmp_path / "project.scala"
        f.write_text('//> using deps "org.typelevel::cats-core:2.9.0" "co.fs2::fs2-core:3.9.0"\n')
        deps = parser.parse(f, f.read_text())
        assert [d.name for d in deps] == ["cats-core", "fs2-core"]

    def test_java_source(self, parser, tmp_path):
        f = tmp_path / "Main.java"
        f.write_text("//> using dep org.postgresql:postgresql:42.6.0\npublic class Main {}\n")
        deps = parser.parse(f, f.read_text())
        assert deps[0].cross_version is False
        assert deps[0].render() == "org.postgresql:postgresql:42.6.0"

    def test_other_directives_ignored(self, parser, tmp_path):
        f = tmp_path / "Main.scala"
        f.write_text('//> using scala 3.3.1\n//> using option -deprecation\n// using dep "a::b:1"\n')
        assert parser.parse(f, f.read_text()) == []

    def test_render_round_trips_directive(self, parser, tmp_path):
        f = tmp_path / "Main.scala"
        f.write_text('//> using dep "com.lihaoyi::os-lib:0.9.1"\n')
        assert parser.parse(f, f.read_text())[0].render() == "com.lihaoyi::os-lib:0.9.1"

    def test_platform_separator_kept_in_render(self, parser, tmp_path):
        f = tmp_path / "Main.scala"
        f.write_text('//> using dep "org.scala-js:::scalajs-dom:2.4.0"\n')
        dep = parser.parse(f, f.read_text())[0]
        assert dep.separator == ":::"
        assert dep.cross_version is True
        assert dep.render() == "org.scala-js:::scalajs-dom:2.4.0"

    def test_test_dep_directive_scoped(self, parser, tmp_path):
        f = tmp_path / "project.scala"
        f.write_text(
            '//> using dep "com.lihaoyi::upickle:3.1.0"\n'
            '//> using test.dep "org.scalameta::munit:1.0.0"\n'
        )
        deps = parser.parse(f, f.read_text())
        assert [(d.name, d.scope) for d in deps] == [("upickle", "main"), ("munit", "test")]


# ── Gradle ───────────────────────────────────────────────────────────────


class TestGradleBuildParser:
    @pytest.fixture
    def parser(self):
        return GradleBuildParser()

    def test_groovy_and_kotlin_dsl(self, parser, tmp_path):
        f = tmp_path / "build.gradle.kts"
        f.write_text(
            "dependencies {\n"
            '    implementation("com.google.guava:guava:32.1.2-jre")\n'
            "    api 'org.slf4j:slf4j-api:2.0.9'\n"
            "}\n"
        )
        deps = parser.parse(f, f.read_text())
        assert [(d.organization, d.name, d.version) for d in deps] == [
            ("com.google.guava", "guava", "32.1.2-jre"),
            ("org.slf4j", "slf4j-api", "2.0.9"),
        ]
        assert deps[0].position.line == 2
        assert deps[0].position.column == 5

    def test_no_version(self, parser, tmp_path):
        f = tmp_path / "build.gradle"
        f.write_text('implementation "org.springframework.boot:spring-boot-starter-web"\n')
        deps = parser.parse(f, f.read_text())
        assert deps[0].version is None

    def test_project_dependency_skipped(self, parser, tmp_path):
        f = tmp_path / "build.gradle"
        f.write_text('api(project(":core"))\n')
        assert parser.parse(f, f.read_text()) == []

    def test_dedup(self, parser, tmp_path):
        f = tmp_path / "build.gradle"
        f.write_text('implementation "a:b:1"\ntestImplementation "a:b:1"\n')
        assert len(parser.parse(f, f.read_text())) == 1

    def test_test_configurations_scoped(self, parser, tmp_path):
        f = tmp_path / "build.gradle"
        f.write_text(
            'implementation "a:b:1"\n'
            'testImplementation "junit:junit:4.13.2"\n'
            'androidTestImplementation "c:d:1"\n'
        )
        deps = parser.parse(f, f.read_text())
        assert [(d.name, d.scope) for d in deps] == [("b", "main"), ("junit", "test"), ("d", "test")]

    def test_main_declaration_outranks_earlier_test_one(self, parser, tmp_path):
        f = tmp_path / "build.gradle"
        f.write_text('testImplementation "a:b:1"\nimplementation "a:b:1"\n')
        deps = parser.parse(f, f.read_text())
        assert [(d.name, d.scope) for d in deps] == [("b", "main")]
        assert deps[0].position.line == 2


# ── Maven ────────────────────────────────────────────────────────────────


class TestMavenPomParser:
    @pytest.fixture
    def parser(self):
        return MavenPomParser()

    def test_namespaced_pom_with_properties(self, parser, tmp_path):
        f = tmp_path / "pom.xml"
        f.write_text(
            '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
            "  <properties><guava.version>32.1.2-jre</guava.version></properties>\n"
            "  <dependencies>\n"
            "    <dependency>\n"
            "      <groupId>com.google.guava</groupId>\n"
            "      <artifactId>guava</artifactId>\n"
            "      <version>${guava.version}</version>\n"
            "    </dependency>\n"
            "  </dependencies>\n"
            "</project>\n"
        )
        deps = parser.parse(f, f.read_text())
        assert [(d.organization, d.name, d.version) for d in deps] == [
            ("com.google.guava", "guava", "32.1.2-jre")
        ]

    def test_test_scope_marked_and_management_skipped(self, parser, tmp_path):
        f = tmp_path / "pom.xml"
        f.write_text(
            "<project>\n"
            "  <dependencyManagement><dependencies>\n"
            "    <dependency><groupId>x</groupId><artifactId>bom</artifactId></dependency>\n"
            "  </dependencies></dependencyManagement>\n"
            "  <dependencies>\n"
            "    <dependency><groupId>junit</groupId><artifactId>junit</artifactId>"
            "<scope>test</scope></dependency>\n"
            "    <dependency><groupId>org.slf4j</groupId><artifactId>slf4j-api</artifactId></dependency>\n"
            "  </dependencies>\n"
            "</project>\n"
        )
        deps = parser.parse(f, f.read_text())
        assert [(d.name, d.scope) for d in deps] == [("junit", "test"), ("slf4j-api", "main")]

    def test_plugin_dependencies_skipped(self, parser, tmp_path):
        f = tmp_path / "pom.xml"
        f.write_text(
            '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
            "  <dependencies>\n"
            "    <dependency><groupId>a</groupId><artifactId>b</artifactId></dependency>\n"
            "  </dependencies>\n"
            "  <build><plugins><plugin>\n"
            "    <artifactId>maven-surefire-plugin</artifactId>\n"
            "    <dependencies>\n"
            "      <dependency><groupId>org.junit.platform</groupId>"
            "<artifactId>junit-platform-launcher</artifactId></dependency>\n"
            "    </dependencies>\n"
            "  </plugin></plugins></build>\n"
            "</project>\n"
        )
        deps = parser.parse(f, f.read_text())
        assert [(d.organization, d.name) for d in deps] == [("a", "b")]

    def test_profile_dependencies_included(self, parser, tmp_path):
        f = tmp_path / "pom.xml"
        f.write_text(
            "<project>\n"
            "  <dependencies>\n"
            "    <dependency><groupId>a</groupId><artifactId>b</artifactId></dependency>\n"
            "  </dependencies>\n"
            "  <profiles><profile><id>extra</id><dependencies>\n"
            "    <dependency><groupId>c</groupId><artifactId>d</artifactId></dependency>\n"
            "  </dependencies></profile></profiles>\n"
            "</project>\n"
        )
        deps = parser.parse(f, f.read_text())
        assert [d.name for d in deps] == ["b", "d"]

    def test_invalid_xml(self, parser, tmp_path):
        f = tmp_path / "pom.xml"
        f.write_text("<project><dependencies>")
        assert parser.parse(f, f.read_text()) == []


# ── discover_declarations ────────────────────────────────────────────────


class TestDiscoverDeclarations:
    def test_positions_relative_to_project(self, tmp_path):
        src = tmp_path / "src"
        src.mkdir()
        (src / "Main.scala").write_text('//> using dep "com.lihaoyi::os-lib:0.9.1"\n')
        deps = discover_declarations(tmp_path)
        assert len(deps) == 1
        assert str(deps[0].position) == "src/Main.scala:1:15"

    def test_first_declaration_wins(self, tmp_path):
        (tmp_path / "a.scala").write_text('//> using dep "com.lihaoyi::upickle:3.1.0"\n')
        (tmp_path / "b.scala").write_text('//> using dep "com.lihaoyi::upickle:3.2.0"\n')
        deps = discover_declarations(tmp_path)
        assert [(d.name, d.version) for d in deps] == [("upickle", "3.1.0")]

    def test_nothing_declared(self, tmp_path):
        (tmp_path / "Main.scala").write_text("object Main\n")
        assert discover_declarations(tmp_path) == []

    def test_test_scope_skipped_by_default(self, tmp_path):
        (tmp_path / "project.scala").write_text(
            '//> using dep "com.lihaoyi::upickle:3.1.0"\n'
            '//> using test.dep "org.scalameta::munit:1.0.0"\n'
        )
        test_dir = tmp_path / "src" / "test" / "scala"
        test_dir.mkdir(parents=True)
        (test_dir / "X.scala").write_text('//> using dep "org.scalacheck::scalacheck:1.17.0"\n')
        (tmp_path / "Main.test.scala").write_text('//> using dep "com.lihaoyi::utest:0.8.1"\n')

        assert [d.name for d in discover_declarations(tmp_path)] == ["upickle"]
        included = discover_declarations(tmp_path, include_tests=True)
        assert sorted(d.name for d in included) == ["munit", "scalacheck", "upickle", "utest"]
