"""Opt-in debug log for create-nuxt-hasura-cli.

Nothing is recorded unless NUXT_HASURA_CLI_LOG=true. The log then goes to
NUXT_HASURA_CLI_LOG_FILE, or ~/.create-nuxt-hasura-cli.log when unset. It
holds every prompt, status line, and child process with its exit status,
which is usually enough to replay a failed scaffold by hand.
"""

import logging
import os
from pathlib import Path

LOGGER_NAME = "nuxt_hasura_cli"
LOG_ENABLED = os.environ.get("NUXT_HASURA_CLI_LOG", "false").lower() == "true"
LOG_FILE = Path(
    os.environ.get("NUXT_HASURA_CLI_LOG_FILE") or Path.home() / ".create-nuxt-hasura-cli.log"
)

_logger: logging.Logger | None = None


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-7s %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    return handler


def setup_logging() -> logging.Logger:
    """Return the tool's logger, attaching its handler on first use."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.handlers.clear()
        logger.propagate = False
        if LOG_ENABLED:
            logger.addHandler(_file_handler(LOG_FILE))
            logger.setLevel(logging.DEBUG)
        else:
            logger.addHandler(logging.NullHandler())
        _logger = logger
    return _logger


def log_message(message: str) -> None:
    setup_logging().info(message)


def log_command(command: str, exit_code: int = 0, cwd: Path | str | None = None) -> None:
    """Record a child process and how it ended.

    Non-zero statuses are logged as warnings. A status of -1 means the
    process never started.
    """
    where = f" in {cwd}" if cwd else ""
    level = logging.INFO if exit_code == 0 else logging.WARNING
    setup_logging().log(level, "$ %s%s -> exit %d", command, where, exit_code)


__all__ = [
    "LOGGER_NAME",
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "log_message",
    "log_command",
]
