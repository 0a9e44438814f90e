"""Utility modules for create-nuxt-hasura-cli.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from nuxt_hasura_cli.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
    show_banner,
)
from nuxt_hasura_cli.utils.errors import (
    ConfigParseError,
    ExecutionError,
    ExitCode,
    FileWriteError,
    NuxtHasuraError,
    PackageJsonError,
    ProjectNotInitializedError,
    SpawnError,
    UserCancelledError,
    ValidationError,
)
from nuxt_hasura_cli.utils.logging import log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "show_banner",
    # Errors
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
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
]
