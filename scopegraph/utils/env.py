from __future__ import annotations

"""Helpers for loading environment configuration."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from scopegraph.config import (DEFAULT_TRANSITIVE_SCOPE, TRANSITIVE_SCOPE_ENV,
                               VERIFY_ARTIFACTS_ENV)

_ENV_LOADED = False
_VERIFY_ARTIFACTS_DEFAULT = True

_LOGGER = logging.getLogger(__name__)


def load_dotenv(dotenv_path: Union[str, Path] = ".env") -> None:
    """Load environment variables from a simple ``.env`` file if present."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return

    path = Path(dotenv_path)
    if path.exists():
        for line in path.read_text().splitlines():
            parsed = _parse_line(line)
            if parsed:
                key, value = parsed
                os.environ.setdefault(key, value)
        _LOGGER.debug("Loaded environment overrides from %s", path)

    _ENV_LOADED = True


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    if "=" not in stripped:
        return None

    key, value = stripped.split("=", 1)
    return (key.strip(), value.strip())


def _truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    lowered = value.strip().lower()
    return lowered in {"1", "true", "yes", "on"}


def verify_artifacts_enabled() -> bool:
    """Return True when fully-specified artifact requests must be verified.

    Controlled by ``SCOPEGRAPH_VERIFY_ARTIFACTS``. Verification is on unless
    the variable is set to something other than "1/true/yes/on".
    """

    load_dotenv()
    value = os.environ.get(VERIFY_ARTIFACTS_ENV)
    if value is not None:
        return _truthy(value)
    return _VERIFY_ARTIFACTS_DEFAULT


def transitive_scope() -> str:
    """Return the scope used for transitive resolution."""

    load_dotenv()
    value = os.environ.get(TRANSITIVE_SCOPE_ENV, "").strip()
    return value or DEFAULT_TRANSITIVE_SCOPE
