"""Shared pytest fixtures for explicit-deps tests."""

from __future__ import annotations

import pytest
import structlog

from explicit_deps.models import (
    DeclaredDependency,
    InMemorySource,
    ResolvedDependency,
    ResolvedGraph,
)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def declared():
    def _make(org: str, name: str, version: str | None = "1.0.0") -> DeclaredDependency:
        return DeclaredDependency(organization=org, name=name, version=version)

    return _make


@pytest.fixture
def graph():
    def _make(*coords: str) -> ResolvedGraph:
        deps = []
        for c in coords:
            org, name, version = c.split(":")
            deps.append(ResolvedDependency(organization=org, name=name, version=version))
        return ResolvedGraph.of(deps)

    return _make


@pytest.fixture
def source():
    def _make(identity: str, text: str) -> InMemorySource:
        return InMemorySource.from_text(identity, text)

    return _make
