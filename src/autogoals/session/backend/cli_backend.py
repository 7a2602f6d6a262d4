"""Subprocess-based backend that hands the terminal to the agent CLI."""

from __future__ import annotations

import logging
import subprocess
import time
from contextlib import ExitStack
from pathlib import Path
from typing import IO

from autogoals.errors import SessionLaunchError
from autogoals.session.backend.base import SessionRunRequest, SessionRunResult

logger = logging.getLogger(__name__)


class CliAgentBackend:
    """Spawn the agent command in the project directory and wait for it to exit."""

    def run(self, request: SessionRunRequest) -> SessionRunResult:
        if not request.command:
            raise SessionLaunchError("Agent command is empty.")
        command_head = request.command[0]

        with ExitStack() as stack:
            stdin, stdout, stderr = _open_streams(request, stack)
            logger.info(
                "Launching session #%d: %s (cwd=%s, attach_streams=%s)",
                request.session_number,
                " ".join(request.command),
                request.project_path,
                request.attach_streams,
            )
            try:
                process = subprocess.Popen(  # noqa: S603
                    list(request.command),
                    cwd=request.project_path,
                    stdin=stdin,
                    stdout=stdout,
                    stderr=stderr,
                )
            except FileNotFoundError as error:
                raise SessionLaunchError(
                    f"Failed to spawn {command_head!r} command. Is it installed and on PATH?",
                ) from error
            except OSError as error:
                raise SessionLaunchError(
                    f"Failed to start {command_head!r}: {error}",
                ) from error

            start_monotonic = time.monotonic()
            returncode = _wait(process)
            elapsed = time.monotonic() - start_monotonic

        logger.info(
            "Session #%d finished: returncode=%s elapsed=%.1fs",
            request.session_number,
            returncode,
            elapsed,
        )
        if returncode < 0:
            return SessionRunResult(
                exit_code=-1,
                signal_number=-returncode,
                elapsed_seconds=elapsed,
                stdout_path=request.stdout_path,
                stderr_path=request.stderr_path,
            )
        return SessionRunResult(
            exit_code=returncode,
            elapsed_seconds=elapsed,
            stdout_path=request.stdout_path,
            stderr_path=request.stderr_path,
        )


def _open_streams(
    request: SessionRunRequest,
    stack: ExitStack,
) -> tuple[int | None, IO[bytes] | None, IO[bytes] | None]:
    if request.attach_streams:
        return None, None, None
    return (
        subprocess.DEVNULL,
        _open_log(request.stdout_path, stack),
        _open_log(request.stderr_path, stack),
    )


def _open_log(path: Path | None, stack: ExitStack) -> IO[bytes] | None:
    if path is None:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return stack.enter_context(path.open("wb"))


def _wait(process: subprocess.Popen[bytes]) -> int:
    try:
        return process.wait()
    except KeyboardInterrupt:
        _terminate_process(process)
        raise


def _terminate_process(process: subprocess.Popen[bytes]) -> None:
    try:
        process.terminate()
    except OSError:
        return
    try:
        process.wait(timeout=2)
    except subprocess.TimeoutExpired:
        try:
            process.kill()
        except OSError:
            return
        process.wait(timeout=2)
