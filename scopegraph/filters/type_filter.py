"""Filter restricting a graph to artifacts of selected packaging types."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Union

from scopegraph.models import DependencyGraph, Edge, Node

from .base import GraphFilter, VisitingFilter
from .scope import token_set
from .visitor import GraphVisitor


class _RootAnchoredVisitor:
    """Delegate to ``inner`` but always accept ``root``."""

    def __init__(self, inner: GraphVisitor, root: Node) -> None:
        self._inner = inner
        self._root = root

    def visit_edge(self, edge: Edge) -> bool:
        return self._inner.visit_edge(edge)

    def visit_node(self, node: Node) -> bool:
        return node == self._root or self._inner.visit_node(node)


class TypeFilter(VisitingFilter):
    """Keep nodes whose ``type`` is one of the configured types.

    Edges are accepted unconditionally, so an edge survives exactly when
    both of its endpoints do. The root anchors the result whatever its own
    type, so its edges to kept artifacts survive too.
    """

    def __init__(
        self,
        types: Union[str, Iterable[str]] = (),
        upstream: Optional[GraphFilter] = None,
        *,
        graph: Optional[DependencyGraph] = None,
    ) -> None:
        self._types = frozenset(token_set(types))
        super().__init__(upstream, graph=graph)

    @property
    def types(self) -> FrozenSet[str]:
        return self._types

    def visitor_for(self, graph: DependencyGraph) -> GraphVisitor:
        return _RootAnchoredVisitor(self, graph.root)

    def visit_node(self, node: Node) -> bool:
        return node.type in self._types

    def __repr__(self) -> str:
        return f"TypeFilter(types={sorted(self._types)!r})"
