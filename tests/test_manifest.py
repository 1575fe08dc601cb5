"""
ScopeGraph Repository
Introductory remarks: This module is part of the ScopeGraph codebase.

Tests for manifest loading and the manifest-backed resolver.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from scopegraph.errors import ArtifactNotFound, ManifestError
from scopegraph.filters import ScopeFilter
from scopegraph.models import Edge, Node
from scopegraph.resolution import (ManifestResolver, ResolutionContext,
                                   load_manifest, parse_manifest)

PROJECT = {"group_id": "org.example", "artifact_id": "app",
           "version": "1.0", "type": "pom"}
LIB = {"group_id": "org.example", "artifact_id": "lib",
       "version": "2.0", "type": "jar"}
UTIL = {"group_id": "org.example", "artifact_id": "util",
        "version": "3.0", "type": "jar"}
JUNIT = {"group_id": "junit", "artifact_id": "junit",
         "version": "4.13", "type": "jar"}


def _document() -> Dict[str, Any]:
    """
    _document: Function description.
    :param:
    :returns:
    """

    return {
        "project": PROJECT,
        "artifacts": [
            {**LIB, "scope": "compile", "trail": [PROJECT, LIB],
             "file": "/repo/lib-2.0.jar"},
            {**UTIL, "scope": "runtime", "trail": [PROJECT, LIB, UTIL]},
            {**JUNIT, "scope": "test", "trail": [PROJECT, JUNIT],
             "file": "/repo/junit-4.13.jar"},
        ],
    }


def test_parse_manifest_builds_nodes_and_trails() -> None:
    manifest = parse_manifest(_document())

    assert manifest.root == Node.from_mapping(PROJECT)
    assert [artifact.scope for artifact in manifest.artifacts] == [
        "compile", "runtime", "test"
    ]
    util = manifest.artifacts[1]
    assert util.parent == Node.from_mapping(LIB)
    assert util.file is None
    assert manifest.artifacts[0].file == Path("/repo/lib-2.0.jar")


def test_manifest_dependency_graph_round_trips_scopes() -> None:
    """
    test_manifest_dependency_graph_round_trips_scopes: Function description.
    :param:
    :returns:
    """

    graph = parse_manifest(_document()).dependency_graph()
    runtime = ScopeFilter("compile,runtime", graph=graph).process()

    assert len(graph.edges) == 3
    assert Node.from_mapping(JUNIT) not in runtime
    assert Edge(Node.from_mapping(LIB), Node.from_mapping(UTIL), "runtime") in (
        runtime.edges
    )


@pytest.mark.parametrize(
    "mutate",
    [
        lambda doc: doc.pop("project"),
        lambda doc: doc["artifacts"][0].pop("scope"),
        lambda doc: doc["artifacts"][1].update(artifact_id=""),
        lambda doc: doc["artifacts"][2].update(trail="not-a-list"),
    ],
)
def test_schema_violations_raise_manifest_error(mutate) -> None:
    document = _document()
    mutate(document)

    with pytest.raises(ManifestError, match="Invalid artifact manifest"):
        parse_manifest(document)


def test_load_manifest_reads_file(tmp_path: Path) -> None:
    """
    test_load_manifest_reads_file: Function description.
    :param tmp_path:
    :returns:
    """

    path = tmp_path / "manifest.json"
    path.write_text(json.dumps(_document()), encoding="utf-8")

    manifest = load_manifest(path)

    assert len(manifest.artifacts) == 3


def test_load_manifest_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "manifest.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestError, match="not valid JSON"):
        load_manifest(path)


def test_manifest_resolver_resolves_recorded_files() -> None:
    resolver = ManifestResolver(parse_manifest(_document()))

    assert resolver.resolve(Node.from_mapping(LIB)) == Path("/repo/lib-2.0.jar")
    with pytest.raises(ArtifactNotFound):
        resolver.resolve(Node.from_mapping(UTIL))
    with pytest.raises(ArtifactNotFound):
        resolver.resolve(Node(artifact_id="ghost"))


def test_manifest_resolver_transitive_scope_visibility() -> None:
    """
    test_manifest_resolver_transitive_scope_visibility: Function description.
    :param:
    :returns:
    """

    manifest = parse_manifest(_document())
    resolver = ManifestResolver(manifest)

    runtime = resolver.resolve_transitively(manifest.root, "runtime")
    everything = resolver.resolve_transitively(manifest.root, "test")
    below_lib = resolver.resolve_transitively(Node.from_mapping(LIB), "runtime")

    assert [a.node.artifact_id for a in runtime] == ["lib", "util"]
    assert [a.node.artifact_id for a in everything] == ["lib", "util", "junit"]
    assert [a.node.artifact_id for a in below_lib] == ["util"]
    assert below_lib[0].dependency_trail == (
        Node.from_mapping(LIB), Node.from_mapping(UTIL)
    )
    with pytest.raises(ArtifactNotFound):
        resolver.resolve_transitively(Node(artifact_id="ghost"), "runtime")


def test_context_over_manifest_resolver() -> None:
    manifest = parse_manifest(_document())
    context = ResolutionContext(
        ManifestResolver(manifest), manifest.root, manifest.artifacts
    )

    graph = context.resolve_transitively(None, "lib", None)

    assert graph.root == Node.from_mapping(LIB)
    assert graph.children(graph.root) == (Node.from_mapping(UTIL),)
    assert context.artifact_path("org.example", "lib", "2.0") == Path(
        "/repo/lib-2.0.jar"
    )
