"""Filter that keeps only edges carrying one of the configured scopes."""

from __future__ import annotations

import re
from typing import FrozenSet, Iterable, List, Optional, Set, Union

from scopegraph.config import SCOPE_DELIMITERS
from scopegraph.models import DependencyGraph, Edge, Node

from .base import GraphFilter, VisitingFilter

_TOKEN_SPLIT = re.compile(f"[{re.escape(SCOPE_DELIMITERS)}]+")


def parse_scopes(level: str) -> List[str]:
    """Split a comma and/or whitespace separated string into tokens."""
    return [token.strip() for token in _TOKEN_SPLIT.split(level) if token.strip()]


def token_set(values: Union[str, Iterable[str]]) -> Set[str]:
    """Return the configured tokens from a string or a collection."""
    if isinstance(values, str):
        return set(parse_scopes(values))
    return set(values)


class ScopeFilter(VisitingFilter):
    """Keep the edges whose scope is in the configured set.

    Matching is exact and case-sensitive. Nodes are never rejected directly;
    an artifact disappears only when none of the edges reaching it survive.
    An empty scope set keeps nothing but the root.
    """

    def __init__(
        self,
        scopes: Union[str, Iterable[str]] = (),
        upstream: Optional[GraphFilter] = None,
        *,
        graph: Optional[DependencyGraph] = None,
    ) -> None:
        self._scopes: Set[str] = token_set(scopes)
        super().__init__(upstream, graph=graph)

    @classmethod
    def from_level(cls, level: str, **kwargs) -> "ScopeFilter":
        """Build a filter from a delimiter-separated scope string."""
        return cls(parse_scopes(level), **kwargs)

    @property
    def scopes(self) -> FrozenSet[str]:
        return frozenset(self._scopes)

    def add_level(self, level: str) -> None:
        """Add every scope named in ``level`` to the configured set."""
        self._scopes.update(parse_scopes(level))

    def visit_edge(self, edge: Edge) -> bool:
        return edge.scope in self._scopes

    def visit_node(self, node: Node) -> bool:
        return True

    def __repr__(self) -> str:
        return f"ScopeFilter(scopes={sorted(self._scopes)!r})"
