"""
ScopeGraph Repository
Introductory remarks: This module is part of the ScopeGraph codebase.

Central configuration constants for dependency graph filtering.
"""

from __future__ import annotations

# Resolution defaults --------------------------------------------------------

DEFAULT_TRANSITIVE_SCOPE = "runtime"
"""Scope used when resolving an artifact's transitive closure."""

DEFAULT_ARTIFACT_TYPE = "jar"
"""Packaging type assumed when a request does not name one."""

# Filter configuration -------------------------------------------------------

SCOPE_DELIMITERS = ", \t\r\n"
"""Characters separating tokens in a scope/type configuration string."""

# Environment variables ------------------------------------------------------

VERIFY_ARTIFACTS_ENV = "SCOPEGRAPH_VERIFY_ARTIFACTS"
TRANSITIVE_SCOPE_ENV = "SCOPEGRAPH_TRANSITIVE_SCOPE"

SCOPE_INCLUDES = {
    "compile": frozenset({"compile", "provided", "system"}),
    "runtime": frozenset({"compile", "runtime"}),
    "compile+runtime": frozenset({"compile", "runtime", "provided", "system"}),
    "test": frozenset({"compile", "runtime", "provided", "system", "test"}),
    "provided": frozenset({"provided"}),
    "system": frozenset({"system"}),
}
"""Dependency scopes visible when resolving at a given scope."""
