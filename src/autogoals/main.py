"""CLI entrypoint for autogoals."""

import logging
from pathlib import Path

import rich_click as click

from autogoals import __version__
from autogoals.controllers import (
    AutogoalsCliController,
    InitCommand,
    StartCommand,
    StatusCommand,
)
from autogoals.errors import AutogoalsError

click.rich_click.USE_MARKDOWN = True
CONTROLLER = AutogoalsCliController()

_PROJECT_PATH = click.argument(
    "path",
    type=click.Path(path_type=Path),
    default=Path("."),
)


@click.group()
@click.version_option(version=__version__, prog_name="autogoals")
@click.option("--verbose", is_flag=True, default=False, help="Log diagnostics to stderr.")
def autogoals(verbose: bool) -> None:
    """Run an interactive coding agent until every goal in `goals.yaml` is completed."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@autogoals.command("start")
@_PROJECT_PATH
def start(path: Path) -> None:
    """Start autonomous execution of goals.

    Launches the agent in PATH (default: current directory), waits for it to
    exit, re-reads `goals.yaml`, and repeats while work is pending.
    """

    try:
        CONTROLLER.start(StartCommand(project_path=path), report=click.echo)
    except AutogoalsError as error:
        raise click.ClickException(str(error)) from error


@autogoals.command("init")
@_PROJECT_PATH
def init(path: Path) -> None:
    """Create a `goals.yaml` template and the `.autogoals/` directory."""

    try:
        _emit_lines(CONTROLLER.init(InitCommand(project_path=path)))
    except AutogoalsError as error:
        raise click.ClickException(str(error)) from error


@autogoals.command("status")
@_PROJECT_PATH
@click.option(
    "--show-plans/--no-show-plans",
    default=False,
    show_default=True,
    help="Print each goal's plan under its status line.",
)
def status(path: Path, show_plans: bool) -> None:
    """Show goal counts and per-goal status without launching a session."""

    try:
        _emit_lines(CONTROLLER.status(StatusCommand(project_path=path, show_plans=show_plans)))
    except AutogoalsError as error:
        raise click.ClickException(str(error)) from error


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    autogoals()
