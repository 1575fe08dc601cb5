"""Interface boundary towards the external artifact resolution service."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence, Tuple

from scopegraph.models import Node


@dataclass(frozen=True)
class ResolvedArtifact:
    """An artifact the resolver found, with how it was reached.

    ``dependency_trail`` lists the coordinates from the project root down to
    this artifact, both ends included.
    """

    node: Node
    scope: str
    dependency_trail: Tuple[Node, ...] = ()
    file: Optional[Path] = None

    @property
    def parent(self) -> Optional[Node]:
        if len(self.dependency_trail) < 2:
            return None
        return self.dependency_trail[-2]


class ArtifactResolver(Protocol):
    """Black-box resolution service queried by :class:`ResolutionContext`."""

    def resolve(self, node: Node) -> Path:
        """Return the local file for ``node``.

        Raise ArtifactNotFound when it cannot be located and
        ArtifactResolutionError when resolution itself fails.
        """

    def resolve_transitively(
        self, node: Node, scope: str
    ) -> Sequence[ResolvedArtifact]:
        """Return ``node``'s transitive dependencies visible at ``scope``."""
