"""Common errors raised by the graph model, filters and resolution layer."""

from __future__ import annotations

from typing import Sequence


class ScopeGraphError(RuntimeError):
    """Base class for all scopegraph failures."""


class GraphInvariantError(ScopeGraphError):
    """Raised when a dependency graph violates a structural invariant."""


class MalformedEdgeError(GraphInvariantError):
    """Raised when an edge references a node outside the graph."""


class GraphCycleError(GraphInvariantError):
    """Raised when the depends-on relation contains a cycle."""

    def __init__(self, message: str, cycle: Sequence[object] = ()) -> None:
        super().__init__(message)
        self.cycle = list(cycle)


class FilterConfigurationError(ScopeGraphError):
    """Raised when a filter stage cannot be evaluated as configured."""


class ResolutionError(ScopeGraphError):
    """Base class for failures reported by the artifact resolver."""


class ArtifactNotFound(ResolutionError):
    """Raised when an artifact cannot be located."""


class ArtifactResolutionError(ResolutionError):
    """Raised when the resolution mechanism itself fails."""


class ManifestError(ResolutionError):
    """Raised when a resolved-artifact manifest fails validation."""
