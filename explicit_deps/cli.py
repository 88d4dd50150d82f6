"""CLI entry point: explicit-deps.

Subcommands:
    explicit-deps analyze . --resolution report.json     # unused + missing explicit deps
    explicit-deps analyze . -r deps.txt --no-unused      # only missing explicit deps
    explicit-deps analyze . -r report.json --json        # machine-readable output
    explicit-deps analyze . -r report.json --test        # include test sources and test deps
    explicit-deps declared .                             # list declared dependencies
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
import structlog

from explicit_deps.analysis import analyze_dependencies
from explicit_deps.core.logging import setup_logging
from explicit_deps.declarations import discover_declarations
from explicit_deps.exceptions import AnalyzerError
from explicit_deps.report import render_missing, render_unused, result_to_dict
from explicit_deps.resolution import load_resolution
from explicit_deps.sources import collect_sources


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """explicit-deps: find unused and undeclared dependencies from imports."""
    setup_logging(verbose)


@main.command("analyze")
@click.argument("project_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "-r",
    "--resolution",
    "resolution_file",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Coursier JSON report or `cs resolve` listing of the resolved graph",
)
@click.option("--unused/--no-unused", default=True, help="Report unused declared dependencies")
@click.option(
    "--explicit/--no-explicit",
    default=True,
    help="Report transitive dependencies that are imported directly",
)
@click.option(
    "--test",
    "include_tests",
    is_flag=True,
    help="Include test sources and test-scope dependencies",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def analyze(
    project_dir: Path,
    resolution_file: Path,
    unused: bool,
    explicit: bool,
    include_tests: bool,
    as_json: bool,
) -> None:
    """Analyze PROJECT_DIR's imports against its declared dependencies."""
    project_dir = project_dir.resolve()
    if not as_json:
        click.echo("Analyzing project dependencies...")

    try:
        resolution = load_resolution(resolution_file)
        result = analyze_dependencies(
            collect_sources(project_dir, include_tests=include_tests),
            discover_declarations(project_dir, include_tests),
            resolution,
            structlog.get_logger("explicit_deps.analysis"),
        )
    except AnalyzerError as e:
        click.echo(f"Dependency analysis failed: {e}", err=True)
        sys.exit(1)

    if as_json:
        doc = result_to_dict(result)
        if not unused:
            doc.pop("unused")
        if not explicit:
            doc.pop("missing")
        click.echo(json.dumps(doc, indent=2))
        return

    if unused:
        for line in render_unused(result.unused):
            click.echo(line)
    if explicit:
        for line in render_missing(result.missing):
            click.echo(line)


@main.command("declared")
@click.argument("project_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--test", "include_tests", is_flag=True, help="Include test-scope dependencies")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def declared(project_dir: Path, include_tests: bool, as_json: bool) -> None:
    """List the dependencies PROJECT_DIR declares."""
    deps = discover_declarations(project_dir.resolve(), include_tests)
    if not deps:
        click.echo("No dependencies found.")
        return

    if as_json:
        rows = [
            {
                "organization": d.organization,
                "name": d.name,
                "version": d.version,
                "declared_at": str(d.position) if d.position else None,
                "detection_method": d.detection_method,
                "scope": d.scope,
            }
            for d in deps
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    # Group by declaring file
    by_file: dict[str, list] = {}
    for d in deps:
        source_file = d.position.source_file if d.position else "?"
        by_file.setdefault(source_file, []).append(d)

    click.echo(f"Found {len(deps)} dependencies in {len(by_file)} file(s)\n")
    for source_file, file_deps in sorted(by_file.items()):
        click.echo(f"  {source_file}  ({file_deps[0].detection_method})")
        for d in file_deps:
            at = f"  (line {d.position.line})" if d.position and d.position.line else ""
            click.echo(f"    {d.render()}{at}")
        click.echo()


if __name__ == "__main__":
    main()
