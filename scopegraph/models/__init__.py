"""Domain model package exports."""

from .coordinates import Node
from .graph import DependencyGraph, Edge

__all__ = [
    "DependencyGraph",
    "Edge",
    "Node",
]
