from __future__ import annotations

from pathlib import Path

import allure
import pytest

from autogoals.config import Settings
from autogoals.errors import ConfigError

pytestmark = [
    allure.epic("Session Runner"),
    allure.feature("Configuration"),
]


def test_from_env_defaults(monkeypatch) -> None:
    for name in (
        "AUTOGOALS_AGENT_COMMAND",
        "AUTOGOALS_GOALS_FILENAME",
        "AUTOGOALS_CAPTURE_OUTPUT",
        "AUTOGOALS_LOGS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.agent_argv() == ("claude",)
    assert settings.goals_path(Path("proj")) == Path("proj/goals.yaml")


def test_from_env_reads_overrides(monkeypatch) -> None:
    monkeypatch.setenv("AUTOGOALS_AGENT_COMMAND", "my-agent --flag 'two words'")
    monkeypatch.setenv("AUTOGOALS_GOALS_FILENAME", "status.yaml")
    monkeypatch.setenv("AUTOGOALS_CAPTURE_OUTPUT", "yes")
    monkeypatch.setenv("AUTOGOALS_LOGS_DIR", "logs")

    settings = Settings.from_env()
    settings.validate()

    assert settings.agent_argv() == ("my-agent", "--flag", "two words")
    assert settings.goals_path(Path("proj")) == Path("proj/status.yaml")
    assert settings.capture_output is True
    assert settings.session_log_paths(Path("proj"), 7) == (
        Path("proj/logs/session-007.stdout.log"),
        Path("proj/logs/session-007.stderr.log"),
    )


def test_from_env_rejects_invalid_boolean(monkeypatch) -> None:
    monkeypatch.setenv("AUTOGOALS_CAPTURE_OUTPUT", "maybe")

    with pytest.raises(ConfigError, match="AUTOGOALS_CAPTURE_OUTPUT"):
        Settings.from_env()


@pytest.mark.parametrize("command", ["", "   ", "agent 'unterminated"])
def test_validate_rejects_unusable_agent_command(command: str) -> None:
    with pytest.raises(ConfigError, match="AUTOGOALS_AGENT_COMMAND"):
        Settings(agent_command=command).validate()


@pytest.mark.parametrize("filename", ["", "/etc/goals.yaml", "../goals.yaml"])
def test_validate_rejects_goals_filename_outside_project(filename: str) -> None:
    with pytest.raises(ConfigError, match="AUTOGOALS_GOALS_FILENAME"):
        Settings(goals_filename=filename).validate()


def test_absolute_logs_dir_is_used_as_is(tmp_path: Path) -> None:
    settings = Settings(logs_dir=tmp_path / "logs")

    assert settings.logs_root(Path("proj")) == tmp_path / "logs"
