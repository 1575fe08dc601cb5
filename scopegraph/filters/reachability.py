"""Filters that prune a graph to the nodes reachable from/to one artifact."""

from __future__ import annotations

from abc import abstractmethod
from typing import AbstractSet, List, Optional

from scopegraph.errors import FilterConfigurationError
from scopegraph.models import DependencyGraph, Edge, Node

from .base import GraphFilter, VisitingFilter
from .visitor import GraphVisitor


class _MembershipVisitor:
    """Accept every edge and only the nodes in ``members``."""

    def __init__(self, members: AbstractSet[Node]) -> None:
        self._members = members

    def visit_edge(self, edge: Edge) -> bool:
        return True

    def visit_node(self, node: Node) -> bool:
        return node in self._members


class _ReachabilityFilter(VisitingFilter):
    def __init__(
        self,
        node: Node,
        upstream: Optional[GraphFilter] = None,
        *,
        graph: Optional[DependencyGraph] = None,
    ) -> None:
        self._node = node
        super().__init__(upstream, graph=graph)

    @property
    def node(self) -> Node:
        return self._node

    def visitor_for(self, graph: DependencyGraph) -> GraphVisitor:
        if self._node not in graph:
            raise FilterConfigurationError(
                f"{self!r} targets '{self._node}' which is not in {graph!r}"
            )
        return _MembershipVisitor({self._node, *self._reachable(graph)})

    @abstractmethod
    def _reachable(self, graph: DependencyGraph) -> List[Node]:
        """Nodes reachable from or to the target in ``graph``."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(node='{self._node}')"


class AncestorFilter(_ReachabilityFilter):
    """Keep ``node`` and every artifact that transitively depends on it."""

    def _reachable(self, graph: DependencyGraph) -> List[Node]:
        return graph.ancestors(self._node)


class DescendantFilter(_ReachabilityFilter):
    """Keep ``node`` and every artifact it transitively depends on."""

    def _reachable(self, graph: DependencyGraph) -> List[Node]:
        return graph.descendants(self._node)
