"""Composable graph filter stages.

Each stage consumes the graph produced by its upstream stage, or a graph
supplied directly, and returns a fresh graph. Stages hold configuration only,
so a chain can be evaluated any number of times.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from scopegraph.errors import FilterConfigurationError
from scopegraph.filters.visitor import GraphVisitor
from scopegraph.models import DependencyGraph, Edge, Node

_LOGGER = logging.getLogger(__name__)


class GraphFilter(ABC):
    """Abstract stage in a filter chain."""

    def __init__(
        self,
        upstream: Optional["GraphFilter"] = None,
        *,
        graph: Optional[DependencyGraph] = None,
    ) -> None:
        self._upstream: Optional[GraphFilter] = None
        self._graph: Optional[DependencyGraph] = None
        if upstream is not None:
            self.set_upstream(upstream)
        if graph is not None:
            self.set_graph(graph)

    @property
    def upstream(self) -> Optional["GraphFilter"]:
        return self._upstream

    @property
    def graph(self) -> Optional[DependencyGraph]:
        return self._graph

    def set_upstream(self, upstream: "GraphFilter") -> None:
        """Consume the output of ``upstream`` instead of a supplied graph."""
        if self._graph is not None:
            raise FilterConfigurationError(
                f"{self!r} already consumes a supplied graph"
            )
        stage: Optional[GraphFilter] = upstream
        while stage is not None:
            if stage is self:
                raise FilterConfigurationError(
                    f"{self!r} cannot be its own upstream stage"
                )
            stage = stage.upstream
        self._upstream = upstream

    def set_graph(self, graph: DependencyGraph) -> None:
        """Consume ``graph`` directly; only valid for the head of a chain."""
        if self._upstream is not None:
            raise FilterConfigurationError(
                f"{self!r} already consumes an upstream filter"
            )
        self._graph = graph

    def evaluate_upstream(self) -> DependencyGraph:
        """Return this stage's input graph, evaluating upstream stages."""
        if self._upstream is not None:
            return self._upstream.process()
        if self._graph is not None:
            return self._graph
        raise FilterConfigurationError(
            f"{self!r} has neither an upstream filter nor a graph to process"
        )

    @abstractmethod
    def process(self) -> DependencyGraph:
        """Evaluate the chain ending at this stage."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class VisitingFilter(GraphFilter):
    """Stage that acts as its own visitor over the upstream graph.

    Subclasses override :meth:`visit_edge` and/or :meth:`visit_node`; both
    accept everything by default. Stages whose predicates depend on the
    input graph override :meth:`visitor_for` instead.
    """

    def process(self) -> DependencyGraph:
        source = self.evaluate_upstream()
        _LOGGER.debug("Applying %r to %r", self, source)
        return source.create_sub_graph(self.visitor_for(source))

    def visitor_for(self, graph: DependencyGraph) -> GraphVisitor:
        """Return the visitor used for one evaluation over ``graph``."""
        return self

    def visit_edge(self, edge: Edge) -> bool:
        return True

    def visit_node(self, node: Node) -> bool:
        return True


class GraphSource(GraphFilter):
    """Head stage that hands out a supplied graph unchanged."""

    def __init__(self, graph: DependencyGraph) -> None:
        super().__init__(graph=graph)

    def process(self) -> DependencyGraph:
        return self.evaluate_upstream()


def chain(
    head: Union[DependencyGraph, GraphFilter], *stages: GraphFilter
) -> GraphFilter:
    """Wire ``stages`` one after another behind ``head``.

    ``head`` is either a graph (fed to the first stage) or an existing stage.
    Returns the terminal stage; call ``process()`` on it to evaluate.
    """
    current: GraphFilter
    if isinstance(head, DependencyGraph):
        current = GraphSource(head)
    else:
        current = head
    for stage in stages:
        stage.set_upstream(current)
        current = stage
    return current
