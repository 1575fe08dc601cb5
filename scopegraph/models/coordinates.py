"""Artifact coordinates used as dependency graph nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class Node:
    """One artifact in a dependency graph.

    Identity is the full coordinate tuple: two nodes built from the same
    group, artifact id, version, type and classifier compare and hash equal,
    so they are the same node wherever they appear.
    """

    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    type: Optional[str] = None
    classifier: Optional[str] = None

    @property
    def coordinates(self) -> Tuple[Optional[str], ...]:
        return (
            self.group_id,
            self.artifact_id,
            self.version,
            self.type,
            self.classifier,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Optional[str]]) -> "Node":
        """Build a node from a mapping using snake_case or camelCase keys."""
        return cls(
            group_id=_first(data, "group_id", "groupId"),
            artifact_id=_first(data, "artifact_id", "artifactId"),
            version=data.get("version"),
            type=data.get("type"),
            classifier=data.get("classifier"),
        )

    def __str__(self) -> str:
        # group:artifact:type[:classifier]:version, blanks for unknown parts
        parts = [self.group_id or "", self.artifact_id or "", self.type or ""]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version or "")
        return ":".join(parts)


def _first(data: Mapping[str, Optional[str]], *keys: str) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None
