"""Helpers shared by the setup commands."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from nuxt_hasura_cli.config.manager import ConfigManager
from nuxt_hasura_cli.config.settings import Settings
from nuxt_hasura_cli.integrations.package_manager import (
    PackageManager,
    detect_package_manager,
    get_add_command,
)
from nuxt_hasura_cli.integrations.process import ExecuteOptions, OutputMode, run_command
from nuxt_hasura_cli.ui.progress import step_status
from nuxt_hasura_cli.utils.console import print_error, print_warning
from nuxt_hasura_cli.utils.errors import NuxtHasuraError, UserCancelledError


def resolve_project_dir(project_dir: Path | str | None) -> Path:
    return Path(project_dir) if project_dir is not None else Path.cwd()


def load_settings(settings: Settings | None = None) -> Settings:
    """Return ``settings`` or the saved defaults for the current directory."""
    if settings is not None:
        return settings
    return ConfigManager().load()


def resolve_package_manager(
    package_manager: PackageManager | None,
    project_dir: Path,
    settings: Settings,
) -> PackageManager:
    """Pick the package manager for a command.

    An explicit choice wins, then the saved default, then lockfile detection.
    """
    if package_manager is not None:
        return package_manager

    if settings.default_package_manager:
        try:
            return PackageManager(settings.default_package_manager)
        except ValueError:
            print_warning(
                f"Ignoring unknown default package manager '{settings.default_package_manager}'"
            )

    return detect_package_manager(project_dir)


def install_packages(
    packages: list[str],
    package_manager: PackageManager,
    project_dir: Path,
    *,
    dev: bool = False,
    label: str | None = None,
) -> None:
    """Add packages to the project behind a spinner.

    Raises:
        SpawnError: If the package manager is not installed
        ExecutionError: If the install fails
    """
    command = f"{get_add_command(package_manager, dev=dev)} {' '.join(packages)}"
    with step_status(f"Installing {label or ', '.join(packages)}"):
        run_command(command, ExecuteOptions(cwd=project_dir, output=OutputMode.CAPTURE))


@contextmanager
def report_failure(feature: str) -> Iterator[None]:
    """Print "Failed to set up <feature>" for errors leaving the block, then re-raise.

    Cancellation propagates silently.
    """
    try:
        yield
    except UserCancelledError:
        raise
    except NuxtHasuraError as e:
        print_error(f"Failed to set up {feature}: {e}")
        raise


__all__ = [
    "resolve_project_dir",
    "load_settings",
    "resolve_package_manager",
    "install_packages",
    "report_failure",
]
