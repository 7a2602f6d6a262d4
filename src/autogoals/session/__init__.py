"""Agent session loop and process backends."""

from autogoals.session.driver import RunSummary, SessionDriver

__all__ = ["RunSummary", "SessionDriver"]
