"""Build a DependencyGraph from the resolver's resolved artifact set."""

from __future__ import annotations

import logging
from typing import Iterable, List

from scopegraph.models import DependencyGraph, Edge, Node

from .base import ResolvedArtifact

_LOGGER = logging.getLogger(__name__)


def build_dependency_graph(
    root: Node, artifacts: Iterable[ResolvedArtifact]
) -> DependencyGraph:
    """Turn resolved artifacts into a graph rooted at ``root``.

    Each artifact contributes one edge from the previous element of its
    dependency trail (the root when the trail is shorter than two) to the
    artifact, labelled with the artifact's scope. A trail element that was
    not itself resolved is reported by the graph as a malformed edge.
    """
    nodes: List[Node] = []
    edges: List[Edge] = []
    for artifact in artifacts:
        if artifact.node == root:
            continue
        nodes.append(artifact.node)
        parent = artifact.parent or root
        edges.append(Edge(source=parent, target=artifact.node, scope=artifact.scope))

    graph = DependencyGraph(root, nodes, edges)
    _LOGGER.info(
        "Built dependency graph for %s with %d nodes and %d edges",
        root,
        len(graph.nodes),
        len(graph.edges),
    )
    return graph
