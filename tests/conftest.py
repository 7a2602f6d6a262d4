"""Shared test fixtures."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

_STUB_AGENT = f"{shlex.quote(sys.executable)} -m autogoals.session.backend.stub_agent"


@pytest.fixture()
def write_goals(tmp_path: Path) -> Callable[..., Path]:
    """Write goals.yaml into a fresh project directory and return the project path."""

    def _write(content: str, *, project: str = "project") -> Path:
        project_path = tmp_path / project
        project_path.mkdir(parents=True, exist_ok=True)
        (project_path / "goals.yaml").write_text(content, "utf-8")
        return project_path

    return _write


@pytest.fixture()
def stub_agent(monkeypatch) -> Callable[[str], None]:
    """Point AUTOGOALS_AGENT_COMMAND at the stub agent with captured output."""

    def _configure(extra_args: str = "") -> None:
        monkeypatch.setenv("AUTOGOALS_AGENT_COMMAND", f"{_STUB_AGENT} {extra_args}".strip())
        monkeypatch.setenv("AUTOGOALS_CAPTURE_OUTPUT", "1")

    return _configure
