"""Run an interactive coding agent until every goal in goals.yaml is completed."""

__version__ = "0.3.0"
