"""Subprocess execution for package managers, git and generators.

Every external tool this CLI drives goes through run_command(). The command
is a single shell string; quoting its arguments is the caller's job.
"""

import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from nuxt_hasura_cli.utils.errors import ExecutionError, SpawnError
from nuxt_hasura_cli.utils.logging import log_command, log_message

# POSIX shell statuses for "found but not executable" and "not found"
_SHELL_NOT_EXECUTABLE = 126
_SHELL_NOT_FOUND = 127


class OutputMode(Enum):
    """How the child process's standard streams are handled."""

    INHERIT = "inherit"
    IGNORE = "ignore"
    CAPTURE = "capture"


@dataclass(frozen=True)
class ExecuteOptions:
    """Options for a single run_command() call.

    Attributes:
        cwd: Working directory for the child (None = current directory)
        output: Stream handling; INHERIT keeps interactive tools usable
    """

    cwd: Path | str | None = None
    output: OutputMode = OutputMode.INHERIT


def _stream_arguments(output: OutputMode) -> dict[str, object]:
    if output is OutputMode.CAPTURE:
        return {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.PIPE,
            "stderr": subprocess.PIPE,
        }
    if output is OutputMode.IGNORE:
        return {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
        }
    return {}


def run_command(command: str, options: ExecuteOptions | None = None) -> None:
    """Run a shell command and wait for it to finish.

    The command is attempted exactly once. In CAPTURE mode standard error
    is buffered so it can be included in the raised error.

    Args:
        command: Shell command line, e.g. "pnpm add -D dotenv-cli"
        options: Working directory and output handling

    Raises:
        SpawnError: If the process could not be started or the shell
            reports the command as missing / not executable
        ExecutionError: If the command exits with a non-zero status
    """
    options = options or ExecuteOptions()
    cwd = Path(options.cwd) if options.cwd is not None else None

    if cwd is not None and not cwd.is_dir():
        log_command(command, -1, cwd)
        raise SpawnError(
            f"Cannot run '{command}': working directory {cwd} does not exist",
            command=command,
        )

    log_message(f"Running: {command} (cwd={cwd or Path.cwd()}, output={options.output.value})")

    try:
        result = subprocess.run(
            command,
            shell=True,
            cwd=cwd,
            text=True,
            **_stream_arguments(options.output),
        )
    except OSError as e:
        log_command(command, -1, cwd)
        raise SpawnError(f"Failed to start '{command}': {e}", command=command) from e

    log_command(command, result.returncode, cwd)
    stderr = result.stderr or ""

    if result.returncode in (_SHELL_NOT_FOUND, _SHELL_NOT_EXECUTABLE):
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        raise SpawnError(
            f"Could not start '{command}' (exit code {result.returncode}){detail}",
            command=command,
        )

    if result.returncode != 0:
        raise ExecutionError(command, result.returncode, stderr)


__all__ = [
    "OutputMode",
    "ExecuteOptions",
    "run_command",
]
