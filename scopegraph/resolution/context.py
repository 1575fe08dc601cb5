"""
ScopeGraph Repository
Introductory remarks: This module is part of the ScopeGraph codebase.

Explicit resolution context handed to whatever builds a dependency graph.

The context bundles the resolver and the project's already-resolved
artifacts. Callers construct it and pass it along; nothing is looked up from
thread-local or module-level state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from scopegraph.config import DEFAULT_ARTIFACT_TYPE
from scopegraph.errors import ArtifactNotFound, ArtifactResolutionError
from scopegraph.models import DependencyGraph, Node
from scopegraph.utils.env import transitive_scope, verify_artifacts_enabled

from .base import ArtifactResolver, ResolvedArtifact
from .builder import build_dependency_graph

_LOGGER = logging.getLogger(__name__)


class ResolutionContext:
    """Resolver plus the project whose artifacts requests are matched to."""

    def __init__(
        self,
        resolver: ArtifactResolver,
        project_root: Node,
        project_artifacts: Sequence[ResolvedArtifact] = (),
        *,
        verify_artifact: Optional[bool] = None,
    ) -> None:
        self.resolver = resolver
        self.project_root = project_root
        self.project_artifacts = tuple(project_artifacts)
        if verify_artifact is None:
            verify_artifact = verify_artifacts_enabled()
        self.verify_artifact = verify_artifact

    def artifact_path(
        self, group_id: str, artifact_id: str, version: str
    ) -> Path:
        """Return the local file of a ``jar`` artifact."""
        node = Node(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            type=DEFAULT_ARTIFACT_TYPE,
        )
        label = f"{group_id}:{artifact_id}:{version}"
        try:
            return self.resolver.resolve(node)
        except ArtifactNotFound as exc:
            raise ArtifactNotFound(f"Unable to find artifact: {label}") from exc
        except ArtifactResolutionError as exc:
            raise ArtifactResolutionError(
                f"Unable to resolve artifact: {label}"
            ) from exc

    def create_artifact_with_classifier(
        self,
        group_id: Optional[str] = None,
        artifact_id: Optional[str] = None,
        version: Optional[str] = None,
        type: Optional[str] = None,
        classifier: Optional[str] = None,
    ) -> Node:
        """Turn a possibly under-specified request into a concrete node.

        Requests missing the group, version or classifier are completed from
        the project's resolved artifacts. Fully specified requests are also
        checked against them while ``verify_artifact`` is on.
        """
        if artifact_id is None:
            raise ValueError("Cannot resolve artifact: artifact_id is missing")

        description = (
            f"group_id: {group_id} artifact_id: {artifact_id} "
            f"version: {version} type: {type} classifier: {classifier}"
        )
        if group_id is None or version is None or classifier is None:
            match = self.match_project_artifact(
                artifact_id, group_id, version, type, classifier
            )
            if match is None:
                raise ArtifactNotFound(f"Cannot resolve artifact. {description}")
            return match

        requested = Node(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            type=type,
            classifier=classifier,
        )
        if not self.verify_artifact:
            return requested

        match = self.match_project_artifact(
            artifact_id, group_id, version, type, classifier
        )
        if match is None:
            raise ArtifactNotFound(
                f"Artifact not found in project artifacts. {description}"
            )
        return match

    def match_project_artifact(
        self,
        artifact_id: str,
        group_id: Optional[str] = None,
        version: Optional[str] = None,
        type: Optional[str] = None,
        classifier: Optional[str] = None,
    ) -> Optional[Node]:
        """Find the project artifact that best fits the request.

        Every artifact whose id matches (case-insensitively) becomes the
        candidate in turn; a match on group, version, type and classifier
        ends the scan. Otherwise the last candidate wins, which is ambiguous
        when one artifact id exists under several groups.
        """
        match: Optional[Node] = None
        candidates = 0
        for artifact in self.project_artifacts:
            node = artifact.node
            if not _same(node.artifact_id, artifact_id):
                continue
            match = node
            candidates += 1
            if (
                _same(node.group_id, group_id)
                and _same(node.version, version)
                and _same(node.type, type)
                and _same(node.classifier, classifier)
            ):
                return match

        if candidates > 1:
            _LOGGER.warning(
                "Artifact id '%s' matched %d project artifacts without an "
                "exact match; using %s",
                artifact_id,
                candidates,
                match,
            )
        return match

    def resolve_transitively(
        self,
        group_id: Optional[str],
        artifact_id: Optional[str],
        version: Optional[str],
        type: Optional[str] = None,
        classifier: Optional[str] = None,
        *,
        scope: Optional[str] = None,
    ) -> DependencyGraph:
        """Resolve an artifact's dependencies into a graph rooted at it."""
        node = self.create_artifact_with_classifier(
            group_id, artifact_id, version, type, classifier
        )
        scope = scope or transitive_scope()
        _LOGGER.debug("Resolving %s transitively at scope %s", node, scope)
        artifacts = self.resolver.resolve_transitively(node, scope)
        return build_dependency_graph(node, artifacts)

    def dependency_graph(self) -> DependencyGraph:
        """Graph of the project's own resolved artifacts."""
        return build_dependency_graph(self.project_root, self.project_artifacts)


def _same(actual: Optional[str], expected: Optional[str]) -> bool:
    if actual is None or expected is None:
        return False
    return actual.lower() == expected.lower()
