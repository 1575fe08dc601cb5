"""Graph visitor contract and composable filter stages."""

from .base import GraphFilter, GraphSource, VisitingFilter, chain
from .reachability import AncestorFilter, DescendantFilter
from .scope import ScopeFilter, parse_scopes
from .type_filter import TypeFilter
from .visitor import GraphVisitor

__all__ = [
    "AncestorFilter",
    "DescendantFilter",
    "GraphFilter",
    "GraphSource",
    "GraphVisitor",
    "ScopeFilter",
    "TypeFilter",
    "VisitingFilter",
    "chain",
    "parse_scopes",
]
