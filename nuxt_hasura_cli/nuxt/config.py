"""Read-modify-write edits of nuxt.config.

Missing or unparsable config files are not fatal: the edit is skipped with a
warning so the user can apply it by hand, and the calling setup command
carries on.
"""

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from nuxt_hasura_cli.integrations.files import write_file
from nuxt_hasura_cli.nuxt.js_object import ConfigSource
from nuxt_hasura_cli.nuxt.project import NUXT_CONFIG_FILENAMES, find_nuxt_config
from nuxt_hasura_cli.utils.console import print_warning
from nuxt_hasura_cli.utils.errors import ConfigParseError
from nuxt_hasura_cli.utils.logging import log_message


class ConfigUpdateStatus(Enum):
    """Outcome of update_nuxt_config()."""

    UPDATED = "updated"
    NOT_FOUND = "not_found"
    FAILED = "failed"


def update_nuxt_config(
    edit: Callable[[ConfigSource], None],
    project_dir: Path | str | None = None,
) -> ConfigUpdateStatus:
    """Apply a structural edit to the project's nuxt.config.

    The object passed to ``defineNuxtConfig(...)`` (or exported directly) is
    handed to ``edit``; the file is rewritten only if the edit succeeds.

    Args:
        edit: Callback receiving the editable config
        project_dir: Project root (defaults to the current directory)

    Returns:
        UPDATED, NOT_FOUND (no config file), or FAILED (unexpected shape)

    Raises:
        FileWriteError: If the edited file cannot be written back
    """
    config_path = find_nuxt_config(project_dir)
    if config_path is None:
        print_warning(
            f"Could not find {' or '.join(NUXT_CONFIG_FILENAMES)}. "
            "Skipping automatic configuration."
        )
        return ConfigUpdateStatus.NOT_FOUND

    try:
        source = ConfigSource(config_path.read_text(encoding="utf-8"))
        edit(source)
    except ConfigParseError as e:
        print_warning(f"Failed to update {config_path.name}: {e}")
        return ConfigUpdateStatus.FAILED

    write_file(config_path, source.text)
    log_message(f"Updated {config_path}")
    return ConfigUpdateStatus.UPDATED


def add_nuxt_module(module_name: str, project_dir: Path | str | None = None) -> ConfigUpdateStatus:
    """Add a module to ``modules``; running it twice adds it once."""
    return update_nuxt_config(lambda config: config.add_to_list(("modules",), module_name), project_dir)


def add_apollo_config(client_path: str, project_dir: Path | str | None = None) -> ConfigUpdateStatus:
    """Point ``apollo.clients.default`` at the generated client config file."""
    return update_nuxt_config(
        lambda config: config.set_value(("apollo", "clients", "default"), client_path),
        project_dir,
    )


def add_runtime_config(
    key: str,
    value: str,
    *,
    public: bool = False,
    raw: bool = False,
    project_dir: Path | str | None = None,
) -> ConfigUpdateStatus:
    """Set a ``runtimeConfig`` entry.

    Args:
        key: Runtime config key
        value: String value, or JavaScript source when ``raw`` is True
        public: Put the key under ``runtimeConfig.public``
        raw: Insert ``value`` verbatim, e.g. "process.env.API_URL"
        project_dir: Project root
    """
    path = ("runtimeConfig", "public", key) if public else ("runtimeConfig", key)
    return update_nuxt_config(lambda config: config.set_value(path, value, raw=raw), project_dir)


__all__ = [
    "ConfigUpdateStatus",
    "update_nuxt_config",
    "add_nuxt_module",
    "add_apollo_config",
    "add_runtime_config",
]
