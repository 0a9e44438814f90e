"""Package manager command mapping and detection.

Maps the four supported JavaScript package managers to the literal command
prefixes the setup commands run, and detects which one a project uses from
its lockfile.
"""

from enum import Enum
from pathlib import Path

from nuxt_hasura_cli.utils.logging import log_message


class PackageManager(Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


DEFAULT_PACKAGE_MANAGER = PackageManager.PNPM

# Checked in order; pnpm wins when a repository carries several lockfiles.
LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
    ("package-lock.json", PackageManager.NPM),
)

_ADD_COMMANDS: dict[PackageManager, str] = {
    PackageManager.NPM: "npm install",
    PackageManager.YARN: "yarn add",
    PackageManager.PNPM: "pnpm add",
    PackageManager.BUN: "bun add",
}

# Download-and-run a package that is not a project dependency
_PACKAGE_EXECUTORS: dict[PackageManager, str] = {
    PackageManager.NPM: "npx",
    PackageManager.YARN: "yarn dlx",
    PackageManager.PNPM: "pnpm dlx",
    PackageManager.BUN: "bunx",
}

# Run a binary installed in the project's node_modules
_LOCAL_EXECUTORS: dict[PackageManager, str] = {
    PackageManager.NPM: "npx",
    PackageManager.YARN: "yarn",
    PackageManager.PNPM: "pnpm exec",
    PackageManager.BUN: "bunx",
}


def detect_package_manager(cwd: Path | str | None = None) -> PackageManager:
    """Detect the package manager from the lockfile in a directory.

    Args:
        cwd: Directory to inspect (defaults to the current directory)

    Returns:
        The manager owning the first lockfile found, or pnpm if none is present
    """
    directory = Path(cwd) if cwd is not None else Path.cwd()
    for filename, manager in LOCKFILES:
        if (directory / filename).is_file():
            log_message(f"Detected package manager {manager.value} from {filename}")
            return manager
    log_message(f"No lockfile found, defaulting to {DEFAULT_PACKAGE_MANAGER.value}")
    return DEFAULT_PACKAGE_MANAGER


def get_add_command(pm: PackageManager, dev: bool = False) -> str:
    """Return the command prefix that adds a dependency, e.g. "pnpm add -D"."""
    command = _ADD_COMMANDS[pm]
    return f"{command} -D" if dev else command


def get_package_executor(pm: PackageManager) -> str:
    """Return the one-off package runner, e.g. "pnpm dlx"."""
    return _PACKAGE_EXECUTORS[pm]


def get_local_executor(pm: PackageManager) -> str:
    """Return the runner for binaries installed in the project, e.g. "pnpm exec"."""
    return _LOCAL_EXECUTORS[pm]


def get_install_command(pm: PackageManager) -> str:
    return f"{pm.value} install"


def get_run_script_command(pm: PackageManager, script: str) -> str:
    """Return the command that runs a package.json script.

    npm needs the explicit "run" verb; the other managers accept the
    script name directly.
    """
    if pm is PackageManager.NPM:
        return f"npm run {script}"
    return f"{pm.value} {script}"


__all__ = [
    "PackageManager",
    "DEFAULT_PACKAGE_MANAGER",
    "LOCKFILES",
    "detect_package_manager",
    "get_add_command",
    "get_package_executor",
    "get_local_executor",
    "get_install_command",
    "get_run_script_command",
]
