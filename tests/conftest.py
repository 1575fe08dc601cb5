"""
ScopeGraph Repository
Introductory remarks: This module is part of the ScopeGraph codebase.

Shared fixtures for the test suite.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from scopegraph.models import DependencyGraph, Edge, Node


@dataclass(frozen=True)
class SampleGraph:
    """Root R with R->A compile, R->B runtime, A->C test."""

    root: Node
    a: Node
    b: Node
    c: Node
    r_a: Edge
    r_b: Edge
    a_c: Edge
    graph: DependencyGraph


def make_node(artifact_id: str, type_: str = "jar") -> Node:
    return Node(
        group_id="org.example",
        artifact_id=artifact_id,
        version="1.0",
        type=type_,
    )


@pytest.fixture(autouse=True)
def _default_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    _default_runtime_env: Function description.
    :param monkeypatch:
    :returns:
    """

    monkeypatch.delenv("SCOPEGRAPH_VERIFY_ARTIFACTS", raising=False)
    monkeypatch.delenv("SCOPEGRAPH_TRANSITIVE_SCOPE", raising=False)


@pytest.fixture
def sample() -> SampleGraph:
    root = make_node("app", "pom")
    a = make_node("alpha")
    b = make_node("beta")
    c = make_node("gamma")
    r_a = Edge(root, a, "compile")
    r_b = Edge(root, b, "runtime")
    a_c = Edge(a, c, "test")
    graph = DependencyGraph(root, [a, b, c], [r_a, r_b, a_c])
    return SampleGraph(root, a, b, c, r_a, r_b, a_c, graph)
