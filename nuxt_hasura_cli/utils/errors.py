"""Custom exceptions and exit codes for create-nuxt-hasura-cli.

This module defines the exit codes and exception hierarchy used throughout
the application. Every setup step raises one of these; the CLI layer turns
them into a process exit code.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USER_CANCELLED = 4


class NuxtHasuraError(Exception):
    """Base exception for create-nuxt-hasura-cli errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class SpawnError(NuxtHasuraError):
    """An external command could not be started.

    Raised when:
    - The executable is not found (shell status 127)
    - The executable is not runnable (shell status 126)
    - The OS refuses to create the process (e.g. missing working directory)
    """

    def __init__(self, message: str, command: str = "") -> None:
        super().__init__(message)
        self.command = command


class ExecutionError(NuxtHasuraError):
    """An external command ran and exited with a non-zero status.

    Attributes:
        command: The shell command that was executed
        returncode: The process exit status
        stderr: Captured standard error text (empty unless output was captured)
    """

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command '{command}' failed with exit code {returncode}"
        if stderr.strip():
            message = f"{message}:\n{stderr.strip()}"
        super().__init__(message)


class FileWriteError(NuxtHasuraError):
    """Writing a generated file failed (permissions, disk full, missing directory)."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class ProjectNotInitializedError(NuxtHasuraError):
    """The working directory does not contain a Nuxt project.

    Raised when:
    - Neither a .nuxt directory nor a nuxt.config file exists
    - package.json is missing when scripts need to be added
    """


class PackageJsonError(NuxtHasuraError):
    """package.json exists but cannot be read as a JSON object."""


class ConfigParseError(NuxtHasuraError):
    """nuxt.config is present but not in the expected module shape.

    Non-fatal: callers report it and tell the user to edit the file by hand.
    """


class ValidationError(NuxtHasuraError):
    """User input cannot be safely placed into a generated file."""


class UserCancelledError(NuxtHasuraError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C
    - User aborts a prompt
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


__all__ = [
    "ExitCode",
    "NuxtHasuraError",
    "SpawnError",
    "ExecutionError",
    "FileWriteError",
    "ProjectNotInitializedError",
    "PackageJsonError",
    "ConfigParseError",
    "ValidationError",
    "UserCancelledError",
]
