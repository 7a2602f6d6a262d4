"""Session backend implementations."""

from autogoals.session.backend.base import SessionBackend, SessionRunRequest, SessionRunResult
from autogoals.session.backend.cli_backend import CliAgentBackend

__all__ = [
    "CliAgentBackend",
    "SessionBackend",
    "SessionRunRequest",
    "SessionRunResult",
]
