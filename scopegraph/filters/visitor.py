"""Visitor contract used to decide subgraph membership."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from scopegraph.models import Edge, Node


@runtime_checkable
class GraphVisitor(Protocol):
    """Two independent predicates consulted by ``create_sub_graph``.

    Accepting an edge and accepting a node are separate questions: most
    visitors vary only one of them and accept everything on the other.
    """

    def visit_edge(self, edge: Edge) -> bool:
        """Return True to keep ``edge`` in the subgraph."""

    def visit_node(self, node: Node) -> bool:
        """Return True to allow ``node`` into the subgraph."""
