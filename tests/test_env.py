from __future__ import annotations

import os
from pathlib import Path

import pytest

from scopegraph.utils import env


@pytest.fixture(autouse=True)
def _reset_env_module(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(env, "_ENV_LOADED", False)


def test_load_dotenv_populates_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("SCOPEGRAPH_TRANSITIVE_SCOPE=test\n# comment\nEMPTY=\n")

    monkeypatch.chdir(tmp_path)

    env.load_dotenv()

    assert os.environ["SCOPEGRAPH_TRANSITIVE_SCOPE"] == "test"
    assert env.transitive_scope() == "test"


def test_load_dotenv_is_idempotent(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("SCOPEGRAPH_TRANSITIVE_SCOPE=first\n")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SCOPEGRAPH_TRANSITIVE_SCOPE", "existing")

    env.load_dotenv()
    env.load_dotenv()  # Second call should be a no-op.

    assert os.environ["SCOPEGRAPH_TRANSITIVE_SCOPE"] == "existing"


def test_parse_line_helpers() -> None:
    assert env._parse_line("KEY=value") == ("KEY", "value")
    assert env._parse_line("   # comment") is None
    assert env._parse_line("   ") is None
    assert env._parse_line("INVALID") is None


def test_transitive_scope_defaults_to_runtime(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SCOPEGRAPH_TRANSITIVE_SCOPE", "  ")

    assert env.transitive_scope() == "runtime"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, True), ("1", True), ("yes", True), ("0", False), ("off", False)],
)
def test_verify_artifacts_flag(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    raw,
    expected: bool,
) -> None:
    monkeypatch.chdir(tmp_path)
    if raw is None:
        monkeypatch.delenv("SCOPEGRAPH_VERIFY_ARTIFACTS", raising=False)
    else:
        monkeypatch.setenv("SCOPEGRAPH_VERIFY_ARTIFACTS", raw)

    assert env.verify_artifacts_enabled() is expected
