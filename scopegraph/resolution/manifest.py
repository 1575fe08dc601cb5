"""Load resolved-artifact manifests and serve them as an ArtifactResolver.

A manifest is the JSON record a build host writes after resolving a
project::

    {
      "project": {"group_id": "org.example", "artifact_id": "app",
                  "version": "1.0", "type": "pom"},
      "artifacts": [
        {"group_id": "org.example", "artifact_id": "lib", "version": "2.1",
         "type": "jar", "scope": "compile",
         "trail": [{...project...}, {...lib...}],
         "file": "/repo/org/example/lib/2.1/lib-2.1.jar"}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

import jsonschema

from scopegraph.config import SCOPE_INCLUDES
from scopegraph.errors import ArtifactNotFound, ManifestError
from scopegraph.models import DependencyGraph, Node

from .base import ResolvedArtifact
from .builder import build_dependency_graph

_LOGGER = logging.getLogger(__name__)

_OPTIONAL_STRING = {"type": ["string", "null"]}

_COORDINATES_PROPERTIES: Dict[str, Any] = {
    "group_id": _OPTIONAL_STRING,
    "artifact_id": {"type": "string", "minLength": 1},
    "version": _OPTIONAL_STRING,
    "type": _OPTIONAL_STRING,
    "classifier": _OPTIONAL_STRING,
}

_COORDINATES_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": _COORDINATES_PROPERTIES,
    "required": ["artifact_id"],
}

MANIFEST_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "project": _COORDINATES_SCHEMA,
        "artifacts": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    **_COORDINATES_PROPERTIES,
                    "scope": {"type": "string", "minLength": 1},
                    "trail": {"type": "array", "items": _COORDINATES_SCHEMA},
                    "file": _OPTIONAL_STRING,
                },
                "required": ["artifact_id", "scope"],
            },
        },
    },
    "required": ["project", "artifacts"],
}


@dataclass(frozen=True)
class Manifest:
    """Project root plus the artifacts resolved for it."""

    root: Node
    artifacts: Tuple[ResolvedArtifact, ...]

    def dependency_graph(self) -> DependencyGraph:
        return build_dependency_graph(self.root, self.artifacts)


def parse_manifest(document: Mapping[str, Any]) -> Manifest:
    """Validate ``document`` against the manifest schema and convert it."""
    try:
        jsonschema.validate(instance=document, schema=MANIFEST_SCHEMA)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise ManifestError(
            f"Invalid artifact manifest at {location}: {exc.message}"
        ) from exc

    root = Node.from_mapping(document["project"])
    artifacts: List[ResolvedArtifact] = []
    for entry in document["artifacts"]:
        file_value = entry.get("file")
        artifacts.append(
            ResolvedArtifact(
                node=Node.from_mapping(entry),
                scope=entry["scope"],
                dependency_trail=tuple(
                    Node.from_mapping(step) for step in entry.get("trail", ())
                ),
                file=Path(file_value) if file_value else None,
            )
        )
    return Manifest(root=root, artifacts=tuple(artifacts))


def load_manifest(path: Union[str, Path]) -> Manifest:
    """Read and validate a manifest file."""
    manifest_path = Path(path)
    try:
        document = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(
            f"Artifact manifest {manifest_path} is not valid JSON: {exc}"
        ) from exc
    manifest = parse_manifest(document)
    _LOGGER.info(
        "Loaded %d resolved artifacts for %s from %s",
        len(manifest.artifacts),
        manifest.root,
        manifest_path,
    )
    return manifest


class ManifestResolver:
    """In-memory ArtifactResolver answering from a loaded manifest."""

    def __init__(self, manifest: Manifest) -> None:
        self._manifest = manifest
        self._by_node: Dict[Node, ResolvedArtifact] = {
            artifact.node: artifact for artifact in manifest.artifacts
        }

    @property
    def manifest(self) -> Manifest:
        return self._manifest

    def resolve(self, node: Node) -> Path:
        artifact = self._by_node.get(node)
        if artifact is None or artifact.file is None:
            raise ArtifactNotFound(f"No file recorded for artifact '{node}'")
        return artifact.file

    def resolve_transitively(
        self, node: Node, scope: str
    ) -> Sequence[ResolvedArtifact]:
        """Artifacts below ``node`` whose scope is visible at ``scope``.

        Trails are cut so they start at ``node``.
        """
        if node != self._manifest.root and node not in self._by_node:
            raise ArtifactNotFound(f"Artifact '{node}' is not in the manifest")

        visible = SCOPE_INCLUDES.get(scope, frozenset({scope}))
        resolved: List[ResolvedArtifact] = []
        for artifact in self._manifest.artifacts:
            if artifact.node == node or artifact.scope not in visible:
                continue
            trail = _trail_from(artifact, node, self._manifest.root)
            if trail is None:
                continue
            resolved.append(
                ResolvedArtifact(
                    node=artifact.node,
                    scope=artifact.scope,
                    dependency_trail=trail,
                    file=artifact.file,
                )
            )
        return resolved


def _trail_from(
    artifact: ResolvedArtifact, start: Node, project_root: Node
) -> Tuple[Node, ...] | None:
    trail = artifact.dependency_trail or (project_root, artifact.node)
    if start not in trail:
        return None
    return trail[trail.index(start):]
