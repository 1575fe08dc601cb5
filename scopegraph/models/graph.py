"""
ScopeGraph Repository
Introductory remarks: This module is part of the ScopeGraph codebase.

Dependency graph domain model and subgraph construction.

A ``DependencyGraph`` is built once (normally by the resolution layer) and is
read-only afterwards. Filters derive new graphs from it through
:meth:`DependencyGraph.create_sub_graph`; the source graph is never mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import (TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional,
                    Tuple)

import networkx as nx

from scopegraph.errors import GraphCycleError, MalformedEdgeError
from scopegraph.models.coordinates import Node

if TYPE_CHECKING:  # pragma: no cover
    from scopegraph.filters.visitor import GraphVisitor

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """Directed depends-on relationship from ``source`` to ``target``."""

    source: Node
    target: Node
    scope: str

    def __post_init__(self) -> None:
        if not self.scope:
            raise ValueError("Dependency scope label cannot be empty")

    def __str__(self) -> str:
        return f"{self.source} -[{self.scope}]-> {self.target}"


class DependencyGraph:
    """Nodes and scoped edges rooted at the project artifact.

    Construction validates every invariant: edge endpoints must be members
    of the node set and the edges must not form a cycle. Equal nodes and
    equal edges collapse to their first occurrence, and iteration follows
    insertion order with the root always first.
    """

    def __init__(
        self,
        root: Node,
        nodes: Iterable[Node] = (),
        edges: Iterable[Edge] = (),
    ) -> None:
        self._root = root
        self._nodes: Dict[Node, None] = {root: None}
        for node in nodes:
            self._nodes.setdefault(node, None)

        self._edges: Dict[Edge, None] = {}
        for edge in edges:
            self._check_endpoints(edge)
            self._edges.setdefault(edge, None)

        self._index()
        self._check_acyclic()

    @classmethod
    def _from_validated(
        cls,
        root: Node,
        nodes: Dict[Node, None],
        edges: Dict[Edge, None],
    ) -> "DependencyGraph":
        # Subgraphs only copy edges of an already valid graph.
        graph = cls.__new__(cls)
        graph._root = root
        graph._nodes = nodes
        graph._edges = edges
        graph._index()
        return graph

    def _index(self) -> None:
        self._outgoing: Dict[Node, List[Edge]] = {}
        self._incoming: Dict[Node, List[Edge]] = {}
        for edge in self._edges:
            self._outgoing.setdefault(edge.source, []).append(edge)
            self._incoming.setdefault(edge.target, []).append(edge)
        self._digraph: Optional[nx.DiGraph] = None

    def _check_endpoints(self, edge: Edge) -> None:
        for label, node in (("source", edge.source), ("target", edge.target)):
            if node not in self._nodes:
                _LOGGER.error(
                    "Edge %s references unknown %s node %s", edge, label, node
                )
                raise MalformedEdgeError(
                    f"Edge {edge} references {label} node '{node}' "
                    "which is not part of the graph"
                )

    def _check_acyclic(self) -> None:
        try:
            cycle_edges = nx.find_cycle(self._as_digraph())
        except nx.NetworkXNoCycle:
            return
        cycle = [source for source, _target in cycle_edges]
        rendered = " -> ".join(str(node) for node in [*cycle, cycle[0]])
        _LOGGER.error("Dependency cycle detected: %s", rendered)
        raise GraphCycleError(f"Dependency cycle detected: {rendered}", cycle)

    def _as_digraph(self) -> nx.DiGraph:
        if self._digraph is None:
            digraph = nx.DiGraph()
            digraph.add_nodes_from(self._nodes)
            digraph.add_edges_from(
                (edge.source, edge.target) for edge in self._edges
            )
            self._digraph = digraph
        return self._digraph

    # -- read-only views ---------------------------------------------------

    @property
    def root(self) -> Node:
        return self._root

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def __contains__(self, item: object) -> bool:
        return item in self._nodes or item in self._edges

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyGraph):
            return NotImplemented
        return (
            self._root == other._root
            and self._nodes.keys() == other._nodes.keys()
            and self._edges.keys() == other._edges.keys()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"DependencyGraph(root={self._root!s}, "
            f"nodes={len(self._nodes)}, edges={len(self._edges)})"
        )

    def outgoing(self, node: Node) -> Tuple[Edge, ...]:
        """Edges from ``node`` to the artifacts it depends on."""
        return tuple(self._outgoing.get(node, ()))

    def incoming(self, node: Node) -> Tuple[Edge, ...]:
        """Edges from the artifacts that depend on ``node``."""
        return tuple(self._incoming.get(node, ()))

    def children(self, node: Node) -> Tuple[Node, ...]:
        return tuple(edge.target for edge in self.outgoing(node))

    def parents(self, node: Node) -> Tuple[Node, ...]:
        return tuple(edge.source for edge in self.incoming(node))

    def find(
        self, artifact_id: str, group_id: Optional[str] = None
    ) -> Optional[Node]:
        """Return the first node with the given artifact (and group) id."""
        for node in self._nodes:
            if node.artifact_id != artifact_id:
                continue
            if group_id is not None and node.group_id != group_id:
                continue
            return node
        return None

    def topological_order(self) -> List[Node]:
        """Nodes ordered so that every dependent precedes its dependencies."""
        position = {node: index for index, node in enumerate(self._nodes)}
        return list(
            nx.lexicographical_topological_sort(
                self._as_digraph(), key=position.__getitem__
            )
        )

    def ancestors(self, node: Node) -> List[Node]:
        """Every node that transitively depends on ``node``."""
        self._require_member(node)
        found = nx.ancestors(self._as_digraph(), node)
        return [candidate for candidate in self._nodes if candidate in found]

    def descendants(self, node: Node) -> List[Node]:
        """Every node ``node`` transitively depends on."""
        self._require_member(node)
        found = nx.descendants(self._as_digraph(), node)
        return [candidate for candidate in self._nodes if candidate in found]

    def _require_member(self, node: Node) -> None:
        if node not in self._nodes:
            raise KeyError(f"Node '{node}' is not part of the graph")

    # -- subgraph construction ---------------------------------------------

    def create_sub_graph(self, visitor: "GraphVisitor") -> "DependencyGraph":
        """Return the subgraph of edges and nodes accepted by ``visitor``.

        An edge survives when the visitor accepts it and both endpoints are
        accepted. A node brought in by an earlier surviving edge counts as
        accepted; every other endpoint, the root included, is put to
        ``visit_node``. The root is always part of the result, even when the
        visitor rejects it or every one of its edges, but a rejected root
        keeps none of its edges.
        """
        nodes: Dict[Node, None] = {self._root: None}
        edges: Dict[Edge, None] = {}
        accepted: Dict[Node, None] = {}

        for edge in self._edges:
            if not visitor.visit_edge(edge):
                continue
            if not (
                _accepts(visitor, accepted, edge.source)
                and _accepts(visitor, accepted, edge.target)
            ):
                continue
            for node in (edge.source, edge.target):
                accepted.setdefault(node, None)
                nodes.setdefault(node, None)
            edges[edge] = None

        _LOGGER.debug(
            "Subgraph of %s kept %d/%d nodes and %d/%d edges",
            self._root,
            len(nodes),
            len(self._nodes),
            len(edges),
            len(self._edges),
        )
        return DependencyGraph._from_validated(self._root, nodes, edges)


def _accepts(
    visitor: "GraphVisitor", accepted: Dict[Node, None], node: Node
) -> bool:
    return node in accepted or visitor.visit_node(node)
