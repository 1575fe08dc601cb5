"""Boundary towards artifact resolution and graph construction."""

from .base import ArtifactResolver, ResolvedArtifact
from .builder import build_dependency_graph
from .context import ResolutionContext
from .manifest import (MANIFEST_SCHEMA, Manifest, ManifestResolver,
                       load_manifest, parse_manifest)

__all__ = [
    "ArtifactResolver",
    "MANIFEST_SCHEMA",
    "Manifest",
    "ManifestResolver",
    "ResolutionContext",
    "ResolvedArtifact",
    "build_dependency_graph",
    "load_manifest",
    "parse_manifest",
]
