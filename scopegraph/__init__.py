"""Scope-aware dependency graph model and composable graph filters."""

from .errors import (ArtifactNotFound, ArtifactResolutionError,
                     FilterConfigurationError, GraphCycleError,
                     GraphInvariantError, MalformedEdgeError, ManifestError,
                     ResolutionError, ScopeGraphError)
from .filters import (AncestorFilter, DescendantFilter, GraphFilter,
                      GraphSource, GraphVisitor, ScopeFilter, TypeFilter,
                      VisitingFilter, chain, parse_scopes)
from .models import DependencyGraph, Edge, Node

__all__ = [
    "AncestorFilter",
    "ArtifactNotFound",
    "ArtifactResolutionError",
    "DependencyGraph",
    "DescendantFilter",
    "Edge",
    "FilterConfigurationError",
    "GraphCycleError",
    "GraphFilter",
    "GraphInvariantError",
    "GraphSource",
    "GraphVisitor",
    "MalformedEdgeError",
    "ManifestError",
    "Node",
    "ResolutionError",
    "ScopeFilter",
    "ScopeGraphError",
    "TypeFilter",
    "VisitingFilter",
    "chain",
    "parse_scopes",
]
